# models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# A single result row keyed by column name, before it is mapped to an entity.
GenericRecord = Dict[str, Any]


class PostRecord(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(Text)
    content = Column(Text)
    footer = Column(Text)
    timeadd = Column(Text)

    def __repr__(self):
        return f"<PostRecord(id={self.id}, title='{self.title}')>"


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    content: str
    footer: str
    date: str


@dataclass(frozen=True)
class Summary:
    id: int
    title: str
    date: str


@dataclass(frozen=True)
class GroupContent:
    items: List[Union[Post, Summary]] = field(default_factory=list)


@dataclass(frozen=True)
class PageContext:
    content: Any
    summaries: List[Summary]
    parent: str
