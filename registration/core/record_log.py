"""
Append-only log of accepted submissions for the current session.
"""

from collections.abc import Sequence
from typing import List, Optional

from registration.core.models import SubmissionRecord
from util.logging import logger


class RecordsView(Sequence):
    """Read-only, restartable view over the log in insertion order."""

    def __init__(self, records: List[SubmissionRecord]):
        self._records = records

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordsView({len(self._records)} records)"


class RecordLog:
    """
    Chronological sequence of SubmissionRecord.

    Records are only ever appended; nothing reorders, edits or prunes them.
    No validation or deduplication happens here.
    """

    def __init__(self):
        self._records: List[SubmissionRecord] = []

    def append(self, record: SubmissionRecord) -> int:
        """Append record and return its zero-based position."""
        self._records.append(record)
        position = len(self._records) - 1
        logger.log_record_appended(position)
        return position

    def all(self) -> RecordsView:
        return RecordsView(self._records)

    def latest(self) -> Optional[SubmissionRecord]:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self.all())
