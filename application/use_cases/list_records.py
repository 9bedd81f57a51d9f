"""
ListRecords Use Case.

Streams every stored record as a transport object.
"""

import logging
from typing import AsyncIterator

from application.ports import RecordRepository
from domain.converters import to_dto
from domain.models import RecordDTO

logger = logging.getLogger(__name__)


class ListRecordsUseCase:
    """
    Use case for listing records.

    Records are yielded in the order the repository produces them; no
    additional ordering is applied. The returned iterator is single-pass.
    """

    def __init__(self, record_repo: RecordRepository) -> None:
        """
        Initialize with required dependencies.

        Args:
            record_repo: Repository for record persistence
        """
        self._record_repo = record_repo

    async def execute(self) -> AsyncIterator[RecordDTO]:
        """
        Yield every stored record as a RecordDTO.

        Yields:
            RecordDTO for each Record in storage

        Raises:
            RecordStorageError: If the repository fails to read
        """
        convert = to_dto()
        count = 0
        async for record in self._record_repo.find_all():
            count += 1
            yield convert(record)
        logger.debug("Listed %d records", count)
