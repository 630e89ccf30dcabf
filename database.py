# database.py
import os
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from dotenv import load_dotenv
from flask import current_app, g
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

load_dotenv()

logger = logging.getLogger(__name__)

DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "blog")


def default_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if DB_HOST:
        return f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    return "sqlite:///blog.db"


DATABASE_URL = default_database_url()


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        return create_engine(url, future=True)
    # tuned pooling for production - adjust pool_size/max_overflow for your workload & instance size
    return create_engine(
        url,
        pool_size=int(os.getenv("DB_POOL_SIZE", 20)),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", 10)),
        pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", 30)),
        pool_recycle=int(os.getenv("DB_POOL_RECYCLE", 1800)),
        future=True,
    )


engine = make_engine(DATABASE_URL)


def get_connection() -> Connection:
    """Return the connection bound to the current request, opening it on first use."""
    if "db_conn" not in g:
        g.db_conn = current_app.extensions["blog_engine"].connect()
    return g.db_conn


def close_connection(exc: Optional[BaseException] = None) -> None:
    db = g.pop("db_conn", None)
    if db is not None:
        db.close()


def execute_query(
    db: Connection,
    query: str,
    columns: Sequence[str],
    params: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """Run a parameterized query and key every row by ``columns``.

    Values are matched to column names by position, so ``columns`` must list
    the names in the order the query selects them. Storage errors propagate.
    """
    logger.debug("Executing query %r with %r", " ".join(query.split()), params)
    result = db.execute(text(query), dict(params or {}))
    return [dict(zip(columns, row)) for row in result]


def create_tables(bind: Optional[Engine] = None) -> None:
    from models import Base  # avoid a circular import at module load

    Base.metadata.create_all(bind=bind or engine)
