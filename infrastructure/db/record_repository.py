"""
Record Repository Implementations.

This module implements the RecordRepository protocol twice:
- SupabaseRecordRepository: rows in a Supabase (PostgREST) table, accessed
  through the asynchronous Supabase client
- InMemoryRecordRepository: a process-local dict, for development

Both assign a UUID4 string when a record is saved without an identifier.
"""
import logging
import uuid
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient

from application.exceptions import RecordStorageError
from domain.models import Record

logger = logging.getLogger(__name__)

DEFAULT_RECORDS_TABLE = "records"


def _new_record_id() -> str:
    """Generate an identifier for a record saved without one."""
    return str(uuid.uuid4())


def _row_to_record(row: Dict[str, Any]) -> Record:
    """Convert a database row to a Record, rejecting malformed rows."""
    try:
        return Record(id=str(row["id"]), information=row["information"])
    except (KeyError, ValidationError) as e:
        logger.error(f"Malformed record row {row!r}: {e}")
        raise RecordStorageError(f"Malformed record row: {e}") from e


class SupabaseRecordRepository:
    """
    Supabase implementation of RecordRepository protocol.

    All Supabase query logic for records is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: AsyncClient, table: str = DEFAULT_RECORDS_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
            table: Name of the table holding records
        """
        self._client = client
        self._table = table

    async def save(self, record: Record) -> Record:
        """Insert a record row and return it as stored."""
        row = {
            "id": record.id or _new_record_id(),
            "information": record.information,
        }
        try:
            result = await self._client.table(self._table).insert(row).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to save record to '{self._table}': {e}")
            raise RecordStorageError(f"Failed to save record: {e}") from e

        if not result.data:
            logger.error(f"Insert into '{self._table}' returned no rows")
            raise RecordStorageError("Failed to save record: no row returned")

        return _row_to_record(result.data[0])

    async def find_all(self) -> AsyncIterator[Record]:
        """Yield every record row in the table's natural order."""
        try:
            result = await self._client.table(self._table).select("id, information").execute()
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Failed to list records from '{self._table}': {e}")
            raise RecordStorageError(f"Failed to list records: {e}") from e

        for row in result.data or []:
            yield _row_to_record(row)


class InMemoryRecordRepository:
    """
    In-memory implementation of RecordRepository.

    Records are kept in a dict keyed by ID, so iteration follows
    insertion order. Saving a record with an existing ID replaces it.
    Nothing is shared between instances.
    """

    def __init__(self, records: Optional[List[Record]] = None):
        """
        Initialize storage, optionally pre-populated.

        Args:
            records: Records to load; any without an ID get one assigned
        """
        self._records: Dict[str, Record] = {}
        for record in records or []:
            self._store(record)

    def _store(self, record: Record) -> Record:
        stored = record if record.id else record.with_id(_new_record_id())
        self._records[stored.id] = stored
        return stored

    def __len__(self) -> int:
        return len(self._records)

    async def save(self, record: Record) -> Record:
        """Store a record, assigning an ID if it has none."""
        return self._store(record)

    async def find_all(self) -> AsyncIterator[Record]:
        """Yield a snapshot of the stored records."""
        for record in list(self._records.values()):
            yield record
