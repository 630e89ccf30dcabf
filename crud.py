import logging
from typing import Callable, List, Optional

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from database import execute_query, get_connection
from mapper import to_post, to_summary
from models import Post, Summary

logger = logging.getLogger(__name__)

POST_QUERY_BASE = "select id, content, title, footer, timeadd from posts"
POST_QUERY_COLUMNS = ["id", "content", "title", "footer", "timeadd"]

SUMMARY_QUERY_BASE = "select id, title, timeadd from posts"
SUMMARY_QUERY_COLUMNS = ["id", "title", "timeadd"]

SIDEBAR_SIZE = 6

ErrorPolicy = Callable[[Exception], list]


def empty_on_error(exc: Exception) -> list:
    logger.exception("Storage error while reading posts; serving an empty result: %s", exc)
    return []


def raise_on_error(exc: Exception) -> list:
    raise exc


POLICIES = {"empty": empty_on_error, "raise": raise_on_error}


def policy_for(name: str) -> ErrorPolicy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"unknown storage error policy {name!r}, expected one of {sorted(POLICIES)}") from None


def _reset(db: Connection) -> None:
    try:
        if db.in_transaction():
            db.rollback()
    except SQLAlchemyError:
        logger.warning("Could not roll back the failed read", exc_info=True)


def _run(query, columns, params, mapper, db: Optional[Connection], on_error: ErrorPolicy):
    # the connection is resolved inside the guard so a failed connect goes through the policy
    try:
        if db is None:
            db = get_connection()
        rows = execute_query(db, query, columns, params)
    except (SQLAlchemyError, OverflowError) as exc:
        # OverflowError is raised by the driver when a bound integer does not fit the column type
        if db is not None:
            _reset(db)
        return on_error(exc)
    return [mapper(row) for row in rows]


def get_posts_latest(limit: int, db: Optional[Connection] = None, on_error: ErrorPolicy = empty_on_error) -> List[Post]:
    query = POST_QUERY_BASE + " order by id desc limit :limit"
    return _run(query, POST_QUERY_COLUMNS, {"limit": limit}, to_post, db, on_error)


def get_summary_latest(limit: int, db: Optional[Connection] = None, on_error: ErrorPolicy = empty_on_error) -> List[Summary]:
    query = SUMMARY_QUERY_BASE + " order by id desc limit :limit"
    return _run(query, SUMMARY_QUERY_COLUMNS, {"limit": limit}, to_summary, db, on_error)


def get_post_by_id(post_id: int, db: Optional[Connection] = None, on_error: ErrorPolicy = empty_on_error) -> List[Post]:
    query = POST_QUERY_BASE + " where id=:id"
    return _run(query, POST_QUERY_COLUMNS, {"id": post_id}, to_post, db, on_error)


def get_sidebar_summary(db: Optional[Connection] = None, on_error: ErrorPolicy = empty_on_error) -> List[Summary]:
    return get_summary_latest(SIDEBAR_SIZE, db=db, on_error=on_error)
