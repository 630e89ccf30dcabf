# mapper.py
"""Turn raw ``posts`` rows into Post and Summary entities.

Every field is looked up explicitly with a fallback, so a row with a missing
or mistyped column still produces an entity carrying a visible error marker.
The one exception is the date: a timestamp shorter than ``YYYY-MM-DD`` cannot
be truncated and raises MalformedTimestampError.
"""
from typing import Any

from models import GenericRecord, Post, Summary

MISSING_ID = -1
MISSING_TITLE = "Error: Title not found."
MISSING_CONTENT = "Error: Content not found."
MISSING_FOOTER = "Error: Footer not found."
MISSING_DATE = "Error: Date not found."

DATE_LENGTH = 10


class MalformedTimestampError(ValueError):
    """The stored timestamp is too short to carry a ``YYYY-MM-DD`` date."""

    def __init__(self, timestamp: str, post_id: int = MISSING_ID):
        super().__init__(f"timestamp {timestamp!r} of post {post_id} is shorter than {DATE_LENGTH} characters")
        self.timestamp = timestamp
        self.post_id = post_id


def extract(record: GenericRecord, key: str, kind: type, default: Any) -> Any:
    value = record.get(key)
    # bool is an int subclass but never a valid id
    if isinstance(value, kind) and not isinstance(value, bool):
        return value
    return default


def to_date(timestamp: str, post_id: int = MISSING_ID) -> str:
    if len(timestamp) < DATE_LENGTH:
        raise MalformedTimestampError(timestamp, post_id)
    return timestamp[:DATE_LENGTH]


def to_post(record: GenericRecord) -> Post:
    post_id = extract(record, "id", int, MISSING_ID)
    return Post(
        id=post_id,
        title=extract(record, "title", str, MISSING_TITLE),
        content=extract(record, "content", str, MISSING_CONTENT),
        footer=extract(record, "footer", str, MISSING_FOOTER),
        date=to_date(extract(record, "timeadd", str, MISSING_DATE), post_id),
    )


def to_summary(record: GenericRecord) -> Summary:
    post_id = extract(record, "id", int, MISSING_ID)
    return Summary(
        id=post_id,
        title=extract(record, "title", str, MISSING_TITLE),
        date=to_date(extract(record, "timeadd", str, MISSING_DATE), post_id),
    )
