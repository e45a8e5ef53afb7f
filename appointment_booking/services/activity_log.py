from sqlalchemy.orm import Session
from typing import List, Optional, Union
import logging

from ..core.database import commit_or_raise
from ..models.activity import ActivityAction, ActivityLogEntry, utc_timestamp

logger = logging.getLogger(__name__)

class ActivityLog:
    """
    Append-only record of notable user actions.

    Entries are never updated or deleted. Chronological order is the
    insertion order, carried by the autoincrement primary key.

    Callers recording a state change pass ``commit=False`` so the entry is
    committed in the same transaction as the change itself; a standalone
    event (a failed login, a logout) commits immediately.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def append(
        self,
        username: Optional[str],
        action: Union[ActivityAction, str],
        details: str,
        *,
        commit: bool = True,
    ) -> ActivityLogEntry:
        """Add an entry stamped with the current UTC time."""
        entry = ActivityLogEntry(
            timestamp=utc_timestamp(),
            username=username,
            action=ActivityAction(action).value,
            details=details,
        )
        self._db.add(entry)

        if commit:
            commit_or_raise(self._db)
            self._db.refresh(entry)
            logger.info(f"Activity recorded: {entry.action} (user={username!r})")
        else:
            logger.debug(f"Activity queued for commit: {entry.action} (user={username!r})")
        return entry

    def list_all(self) -> List[ActivityLogEntry]:
        """Full log, oldest entry first."""
        return self._db.query(ActivityLogEntry).order_by(ActivityLogEntry.id.asc()).all()

    def list_for(self, username: str) -> List[ActivityLogEntry]:
        """Entries recorded for ``username``, oldest first."""
        return (
            self._db.query(ActivityLogEntry)
            .filter(ActivityLogEntry.username == username)
            .order_by(ActivityLogEntry.id.asc())
            .all()
        )
