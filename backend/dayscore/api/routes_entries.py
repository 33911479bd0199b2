"""Journal entry and statistics routes."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from dayscore.core.db import get_db
from dayscore.core.errors import ValidationError
from dayscore.core.security import get_current_user_id
from dayscore.schemas.entry import (
    DeleteResult,
    EntryCreate,
    EntryOut,
    EntryPatch,
    EntryStats,
)
from dayscore.services.entry_service import EntryService

router = APIRouter(tags=["entries"])


def get_entry_service(request: Request) -> EntryService:
    return request.app.state.entry_service


def parse_entry_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("Invalid id") from None


@router.post("/entries", response_model=EntryOut)
def create_entry(
    payload: EntryCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
    entry_service: EntryService = Depends(get_entry_service),
) -> EntryOut:
    return entry_service.create_entry(db, user_id, payload)


@router.get("/entries", response_model=List[EntryOut])
def list_entries(
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
    entry_service: EntryService = Depends(get_entry_service),
) -> List[EntryOut]:
    return entry_service.list_entries(db, user_id, date_from, date_to, limit)


@router.get("/stats", response_model=EntryStats)
def stats(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
    entry_service: EntryService = Depends(get_entry_service),
) -> EntryStats:
    return entry_service.get_stats(db, user_id)


@router.put("/entries/{entry_id}", response_model=EntryOut)
def update_entry(
    entry_id: str,
    payload: EntryPatch,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
    entry_service: EntryService = Depends(get_entry_service),
) -> EntryOut:
    return entry_service.update_entry(db, user_id, parse_entry_id(entry_id), payload)


@router.delete("/entries/{entry_id}", response_model=DeleteResult)
def delete_entry(
    entry_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id),
    entry_service: EntryService = Depends(get_entry_service),
) -> DeleteResult:
    entry_service.delete_entry(db, user_id, parse_entry_id(entry_id))
    return DeleteResult(success=True)
