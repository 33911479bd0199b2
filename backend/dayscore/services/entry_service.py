"""Domain service for creating, listing, patching and deleting journal entries."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from dayscore.repositories.entry_repository import EntryRepository
from dayscore.schemas.entry import (
    EntryCreate,
    EntryOut,
    EntryPatch,
    EntryStats,
    parse_date_bound,
    resolve_limit,
)
from dayscore.services.color import score_to_color

LOGGER = logging.getLogger(__name__)


class EntryService:
    def __init__(self, repo: EntryRepository, clock: Callable[[], str]) -> None:
        self.repo = repo
        self.clock = clock

    def create_entry(self, db: Session, user_id: Optional[str], payload: EntryCreate) -> EntryOut:
        fields = payload.model_dump()
        if not fields["date"]:
            fields["date"] = self.clock()
        if fields["color"] is None:
            fields["color"] = score_to_color(fields["score"])
        record = self.repo.create(db, fields, user_id)
        LOGGER.info("✅ Created entry id=%s user=%s date=%s", record.id, user_id, record.date)
        return EntryOut.model_validate(record)

    def list_entries(
        self,
        db: Session,
        user_id: Optional[str],
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> list[EntryOut]:
        records = self.repo.list_entries(
            db,
            user_id,
            parse_date_bound("from", date_from),
            parse_date_bound("to", date_to),
            resolve_limit(limit),
        )
        return [EntryOut.model_validate(r) for r in records]

    def get_stats(self, db: Session, user_id: Optional[str]) -> EntryStats:
        return EntryStats(**self.repo.stats(db, user_id))

    def update_entry(self, db: Session, user_id: Optional[str], entry_id: int, patch: EntryPatch) -> EntryOut:
        changes = patch.changes()
        if "score" in changes and "color" not in changes:
            changes["color"] = score_to_color(changes["score"])
        record = self.repo.update(db, entry_id, changes, user_id)
        LOGGER.info("✏️ Updated entry id=%s user=%s fields=%s", entry_id, user_id, sorted(changes))
        return EntryOut.model_validate(record)

    def delete_entry(self, db: Session, user_id: Optional[str], entry_id: int) -> None:
        deleted = self.repo.delete(db, entry_id, user_id)
        LOGGER.info("🗑️ Delete entry id=%s user=%s removed=%s", entry_id, user_id, deleted)
