"""SQLAlchemy model for journal entries."""
from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from dayscore.core.db import Base


class Entry(Base):
    __tablename__ = "entries"
    __table_args__ = (
        CheckConstraint("score BETWEEN 1 AND 100", name="ck_entries_score_range"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(128), nullable=True, index=True)
    date = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD, local calendar day
    score = Column(Integer, nullable=False)
    text = Column(Text, nullable=False, default="")
    iv = Column(String(32), nullable=True)
    badge = Column(String(50), nullable=True)
    color = Column(Text, nullable=True)
