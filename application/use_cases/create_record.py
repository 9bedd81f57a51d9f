"""
CreateRecord Use Case.

Persists a new record built from a transport object and returns the
identifier storage assigned to it.
"""

import logging

from application.ports import RecordRepository
from domain.converters import to_record
from domain.models import RecordDTO

logger = logging.getLogger(__name__)


class CreateRecordUseCase:
    """
    Use case for creating records.

    Orchestrates the following workflow:
    1. Convert the DTO to a Record with no identifier
    2. Persist via repository (which assigns the identifier)
    3. Return the assigned identifier

    Errors raised by the repository are not caught here.

    Usage:
        >>> use_case = CreateRecordUseCase(record_repo=record_repo)
        >>> record_id = await use_case.execute(RecordDTO(information="hello"))
    """

    def __init__(self, record_repo: RecordRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            record_repo: Repository for persisting records
        """
        self._record_repo = record_repo

    async def execute(self, dto: RecordDTO) -> str:
        """
        Execute the create record workflow.

        Args:
            dto: Transport object with the information payload. Its ``id``
                is ignored; create always requests a fresh identity.

        Returns:
            Identifier assigned by storage

        Raises:
            RecordStorageError: If the repository fails to save
        """
        record = to_record(None)(dto)
        saved = await self._record_repo.save(record)
        logger.info("Record created: %s", saved.id)
        return saved.id
