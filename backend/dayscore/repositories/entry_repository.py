"""Repository for journal entry persistence."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from dayscore.core.errors import EntryNotFoundError, StoreError, ValidationError
from dayscore.models.entry import Entry
from dayscore.schemas.entry import MAX_ENTRY_ID, PATCHABLE_FIELDS

LOGGER = logging.getLogger(__name__)


class EntryRepository:
    @staticmethod
    def _storable_id(entry_id: int) -> bool:
        return -MAX_ENTRY_ID - 1 <= entry_id <= MAX_ENTRY_ID

    def _scoped(self, db: Session, user_id: Optional[str]) -> Query:
        query = db.query(Entry)
        if user_id is not None:
            query = query.filter(Entry.user_id == user_id)
        return query

    def create(self, db: Session, fields: Dict[str, Any], user_id: Optional[str]) -> Entry:
        try:
            record = Entry(user_id=user_id, **fields)
            db.add(record)
            db.commit()
            db.refresh(record)
            return record
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB insert failed for user=%s date=%s: %s", user_id, fields.get("date"), exc)
            raise StoreError(f"Could not store entry: {exc.__class__.__name__}") from exc

    def list_entries(
        self,
        db: Session,
        user_id: Optional[str],
        date_from: Optional[str],
        date_to: Optional[str],
        limit: int,
    ) -> list[Entry]:
        query = self._scoped(db, user_id)
        if date_from:
            query = query.filter(Entry.date >= date_from)
        if date_to:
            query = query.filter(Entry.date <= date_to)
        try:
            return query.order_by(Entry.date.desc(), Entry.id.desc()).limit(limit).all()
        except SQLAlchemyError as exc:
            LOGGER.error("DB list failed for user=%s: %s", user_id, exc)
            raise StoreError(f"Could not list entries: {exc.__class__.__name__}") from exc

    def stats(self, db: Session, user_id: Optional[str]) -> Dict[str, Any]:
        query = db.query(
            func.count(Entry.id),
            func.round(func.avg(Entry.score), 1),
            func.min(Entry.score),
            func.max(Entry.score),
        )
        if user_id is not None:
            query = query.filter(Entry.user_id == user_id)
        try:
            count, avg, low, high = query.one()
        except SQLAlchemyError as exc:
            LOGGER.error("DB stats failed for user=%s: %s", user_id, exc)
            raise StoreError(f"Could not compute stats: {exc.__class__.__name__}") from exc
        return {
            "count": count or 0,
            "avg": float(avg) if avg is not None else None,
            "min": low,
            "max": high,
        }

    def update(self, db: Session, entry_id: int, changes: Dict[str, Any], user_id: Optional[str]) -> Entry:
        if not changes:
            raise ValidationError("No fields to update")
        unknown = set(changes) - set(PATCHABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
        if not self._storable_id(entry_id):
            raise EntryNotFoundError(entry_id)

        values = {getattr(Entry, name): value for name, value in changes.items()}
        try:
            matched = (
                self._scoped(db, user_id)
                .filter(Entry.id == entry_id)
                .update(values, synchronize_session=False)
            )
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB update failed for id=%s user=%s: %s", entry_id, user_id, exc)
            raise StoreError(f"Could not update entry: {exc.__class__.__name__}") from exc

        try:
            record = self.get(db, entry_id, user_id) if matched else None
        except SQLAlchemyError as exc:
            LOGGER.error("DB read-back failed for id=%s user=%s: %s", entry_id, user_id, exc)
            raise StoreError(f"Could not read entry: {exc.__class__.__name__}") from exc
        if record is None:
            raise EntryNotFoundError(entry_id)
        return record

    def get(self, db: Session, entry_id: int, user_id: Optional[str]) -> Entry | None:
        return self._scoped(db, user_id).filter(Entry.id == entry_id).one_or_none()

    def delete(self, db: Session, entry_id: int, user_id: Optional[str]) -> int:
        if not self._storable_id(entry_id):
            return 0
        try:
            deleted = (
                self._scoped(db, user_id)
                .filter(Entry.id == entry_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return deleted
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB delete failed for id=%s user=%s: %s", entry_id, user_id, exc)
            raise StoreError(f"Could not delete entry: {exc.__class__.__name__}") from exc
