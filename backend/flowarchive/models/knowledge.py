from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, Text

from ..db.base import Base


class Knowledge(Base):
    """A Markdown knowledge article.

    Timestamps are naive local date-times and are stamped by the repository,
    not by column defaults.
    """

    __tablename__ = "knowledge"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"Knowledge(id={self.id!r}, title={self.title!r})"
