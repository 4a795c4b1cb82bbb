"""Data access layer for donation records"""

import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from noel_solidarite.domain.exceptions import DonationNotFoundError
from noel_solidarite.domain.models import DonationRecord, DonationStats
from noel_solidarite.domain.stats import compute_stats


class DonationRepository(ABC):
    """
    Port: donation store

    The intake handlers only talk to this interface, so the in-memory
    collection can be replaced by a database-backed one without touching them.
    """

    @abstractmethod
    def append(self, record: DonationRecord) -> DonationRecord:
        """Store a new record. Records are never updated or deleted."""
        ...

    @abstractmethod
    def find_by_id(self, donation_id: str) -> Optional[DonationRecord]:
        """Return the record with this id, or None"""
        ...

    @abstractmethod
    def aggregate(self) -> DonationStats:
        """Recompute statistics over every stored record"""
        ...

    def get(self, donation_id: str) -> DonationRecord:
        """
        Fetch a record that must exist.

        Raises:
            DonationNotFoundError: When no record has this id
        """
        record = self.find_by_id(donation_id)
        if record is None:
            raise DonationNotFoundError(donation_id)
        return record


class InMemoryDonationRepository(DonationRepository):
    """Process-local store; contents are lost on restart and not shared across workers"""

    def __init__(self, records: Optional[List[DonationRecord]] = None):
        self._records: List[DonationRecord] = list(records or [])
        self._lock = threading.Lock()

    def append(self, record: DonationRecord) -> DonationRecord:
        with self._lock:
            self._records.append(record)
        return record

    def find_by_id(self, donation_id: str) -> Optional[DonationRecord]:
        for record in self._snapshot():
            if record.id == donation_id:
                return record
        return None

    def aggregate(self) -> DonationStats:
        return compute_stats(self._snapshot())

    def __len__(self) -> int:
        return len(self._records)

    def _snapshot(self) -> List[DonationRecord]:
        with self._lock:
            return list(self._records)
