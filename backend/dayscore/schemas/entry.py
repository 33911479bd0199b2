"""Pydantic schemas for journal entries, filters and statistics."""
from __future__ import annotations

import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dayscore.core.errors import ValidationError

# ASCII digits only; `\d` also matches other Unicode digits.
ISO_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
MIN_SCORE = 1
MAX_SCORE = 100
MAX_TEXT_LEN = 1000
MAX_IV_LEN = 32
MAX_BADGE_LEN = 50

DEFAULT_LIMIT = 365
MAX_LIMIT = 1000

# Ids outside a signed 64-bit INTEGER can never name a stored row.
MAX_ENTRY_ID = 2**63 - 1

# Columns a patch may touch; anything else never reaches SQL.
PATCHABLE_FIELDS = ("score", "text", "date", "iv", "badge", "color")


def _reject_bool(v: Any) -> Any:
    if isinstance(v, bool):
        raise ValueError("score must be an integer")
    return v


class EntryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    text: str = Field("", max_length=MAX_TEXT_LEN)
    date: Optional[str] = Field(None, pattern=ISO_DATE_PATTERN, description="YYYY-MM-DD; today when omitted")
    iv: Optional[str] = Field(None, max_length=MAX_IV_LEN)
    badge: Optional[str] = Field(None, max_length=MAX_BADGE_LEN)
    color: Optional[str] = Field(None, description="derived from score when omitted")

    @field_validator("score", mode="before")
    @classmethod
    def score_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    @field_validator("text", mode="before")
    @classmethod
    def text_null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class EntryPatch(BaseModel):
    """Partial update; only keys present in the request body are applied."""

    model_config = ConfigDict(extra="ignore")

    score: Optional[int] = Field(None, ge=MIN_SCORE, le=MAX_SCORE)
    text: Optional[str] = Field(None, max_length=MAX_TEXT_LEN)
    date: Optional[str] = Field(None, pattern=ISO_DATE_PATTERN)
    iv: Optional[str] = Field(None, max_length=MAX_IV_LEN)
    badge: Optional[str] = Field(None, max_length=MAX_BADGE_LEN)
    color: Optional[str] = None

    @field_validator("score", "text", "date", mode="before")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("score", mode="before")
    @classmethod
    def score_not_bool(cls, v: Any) -> Any:
        return _reject_bool(v)

    def changes(self) -> Dict[str, Any]:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if k in PATCHABLE_FIELDS}


class EntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[str] = None
    date: str
    score: int
    text: str
    iv: Optional[str] = None
    badge: Optional[str] = None
    color: Optional[str] = None


class EntryStats(BaseModel):
    count: int
    avg: Optional[float] = None
    min: Optional[int] = None
    max: Optional[int] = None


class DeleteResult(BaseModel):
    success: bool = True


def resolve_limit(raw: Optional[str]) -> int:
    """Parse a ``limit`` query value: default on junk or non-positive, capped at MAX_LIMIT."""
    try:
        value = int(raw) if raw is not None else 0
    except (TypeError, ValueError):
        value = 0
    if value <= 0:
        value = DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


def parse_date_bound(name: str, raw: Optional[str]) -> Optional[str]:
    """Validate a ``from``/``to`` filter value; empty means no bound."""
    if not raw:
        return None
    if not re.fullmatch(ISO_DATE_PATTERN, raw):
        raise ValidationError(f"{name}: must be a YYYY-MM-DD date")
    return raw

