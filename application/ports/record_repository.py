"""
Record Repository Interface (Port).

This Protocol defines the contract for record persistence operations.
Infrastructure implementations (Supabase, in-memory) must satisfy it.
Both operations are asynchronous.
"""

from typing import AsyncIterator, Protocol, runtime_checkable

from domain.models import Record


@runtime_checkable
class RecordRepository(Protocol):
    """
    Abstract interface for record persistence.

    Implementations raise ``application.exceptions.RecordStorageError``
    when the underlying storage fails.
    """

    async def save(self, record: Record) -> Record:
        """
        Persist a record.

        Args:
            record: Record to store. If ``record.id`` is None the
                repository assigns a new identifier.

        Returns:
            The persisted Record, with its identifier set
        """
        ...

    def find_all(self) -> AsyncIterator[Record]:
        """
        Iterate over every stored record.

        The iteration order is defined by the implementation. Empty
        storage yields nothing.

        Returns:
            Async iterator of Records
        """
        ...
