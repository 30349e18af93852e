"""File-backed store for scheduled reminder notifications.

Each line of the store file is one ``ScheduledNotification`` serialized as
JSON. Reads skip malformed lines; writes rewrite the whole file.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from kai_reminders.config import settings
from kai_reminders.schemas import (
    NotificationFrequency,
    NotificationStatus,
    ScheduledNotification,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "scheduled_for", "frequency"})


class ReminderStoreError(Exception):
    """Raised when the reminder store cannot be read or written."""


class ReminderStore:
    """JSON-lines persistence for scheduled notifications."""

    def __init__(self, store_path: Path | None = None):
        self.store_path = store_path or settings.store_path

    def _ensure_store_dir(self) -> None:
        self.store_path.parent.mkdir(parents=True, exist_ok=True)

    def read_all(self) -> list[ScheduledNotification]:
        """Read every stored record, in insertion order."""
        if not self.store_path.exists():
            return []

        records = []
        try:
            # Bytes go straight to pydantic so undecodable lines fail validation
            with open(self.store_path, "rb") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        records.append(ScheduledNotification.model_validate_json(line))
                    except (ValidationError, UnicodeDecodeError) as e:
                        logger.warning(f"Skipping malformed reminder entry: {e}")
        except OSError as e:
            raise ReminderStoreError(f"Could not read reminder store: {e}") from e

        return records

    def write_all(self, records: list[ScheduledNotification]) -> None:
        try:
            self._ensure_store_dir()
            with open(self.store_path, "w", encoding="utf-8") as f:
                for record in records:
                    f.write(record.model_dump_json() + "\n")
        except OSError as e:
            raise ReminderStoreError(f"Could not write reminder store: {e}") from e

    def create(self, record: ScheduledNotification) -> ScheduledNotification:
        try:
            self._ensure_store_dir()
            with open(self.store_path, "a", encoding="utf-8") as f:
                f.write(record.model_dump_json() + "\n")
        except OSError as e:
            raise ReminderStoreError(f"Could not write reminder store: {e}") from e

        logger.info(f"Stored reminder {record.id} for user {record.user_id}")
        return record

    def get(self, reminder_id: str) -> ScheduledNotification | None:
        for record in self.read_all():
            if record.id == reminder_id:
                return record
        return None

    def list_for_user(
        self,
        user_id: str,
        status: NotificationStatus | None = None,
        source: str | None = None,
    ) -> list[ScheduledNotification]:
        """List a user's reminders, most recently created first."""
        records = [
            r
            for r in self.read_all()
            if r.user_id == user_id
            and (status is None or r.status == status)
            and (source is None or r.source == source)
        ]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def count(
        self,
        user_id: str,
        status: NotificationStatus | None = None,
        source: str | None = None,
    ) -> int:
        return len(self.list_for_user(user_id, status=status, source=source))

    def cancel(self, user_id: str, reminder_id: str) -> bool:
        """Delete a reminder owned by ``user_id``.

        Returns:
            True if the reminder existed for that user and was removed
        """
        records = self.read_all()
        remaining = [r for r in records if not (r.id == reminder_id and r.user_id == user_id)]
        if len(remaining) == len(records):
            return False

        self.write_all(remaining)
        logger.info(f"Cancelled reminder {reminder_id} for user {user_id}")
        return True

    def update(self, user_id: str, reminder_id: str, updates: dict[str, Any]) -> bool:
        """Apply a partial update to a reminder owned by ``user_id``.

        Only ``title``, ``scheduled_for`` and ``frequency`` may change.

        Raises:
            ValueError: If an unsupported field or invalid value is given
        """
        unknown = set(updates) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update reminder fields: {', '.join(sorted(unknown))}")

        records = self.read_all()
        for index, record in enumerate(records):
            if record.id != reminder_id or record.user_id != user_id:
                continue

            changes: dict[str, Any] = {"updated_at": datetime.now(UTC)}
            if "title" in updates:
                changes["title"] = updates["title"]
            if "scheduled_for" in updates:
                changes["scheduled_for"] = updates["scheduled_for"]
            if "frequency" in updates:
                frequency = NotificationFrequency(updates["frequency"])
                changes["data"] = {**record.data, "frequency": frequency.value}

            # Round-trip through validation so a bad title or date is rejected
            records[index] = ScheduledNotification.model_validate(
                {**record.model_dump(), **changes}
            )
            self.write_all(records)
            logger.info(f"Updated reminder {reminder_id} for user {user_id}: {sorted(updates)}")
            return True

        return False


_store: ReminderStore | None = None


def get_reminder_store(store_path: Path | None = None) -> ReminderStore:
    """Get the singleton reminder store instance."""
    global _store
    if _store is None or store_path is not None:
        _store = ReminderStore(store_path)
    return _store
