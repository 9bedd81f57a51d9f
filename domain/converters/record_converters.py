"""
Converters between the Record entity and its RecordDTO transport object.

The factories ``to_record`` and ``to_dto`` return single-argument callables
so they can be passed straight to ``map()`` or applied inside async
iteration. ``record_from_dto`` and ``record_to_dto`` are the plain functions
behind them.
"""

from typing import Callable, Optional

from domain.models import Record, RecordDTO


def record_from_dto(dto: RecordDTO, record_id: Optional[str] = None) -> Record:
    """
    Build a Record from a transport object.

    The DTO's own ``id`` is never read; the caller decides the identity.
    Pass ``record_id=None`` to let storage assign one.

    Args:
        dto: Transport object carrying the information payload
        record_id: Identifier to set on the Record, or None

    Returns:
        Record with ``information`` copied verbatim
    """
    return Record(id=record_id, information=dto.information)


def record_to_dto(record: Record) -> RecordDTO:
    """Copy a Record field-for-field into a RecordDTO."""
    return RecordDTO(id=record.id, information=record.information)


def to_record(record_id: Optional[str]) -> Callable[[RecordDTO], Record]:
    """
    Return a converter that builds Records carrying ``record_id``.

    Args:
        record_id: Identifier for every Record the converter builds
            (None requests a storage-assigned identifier)

    Returns:
        Callable mapping RecordDTO -> Record
    """

    def convert(dto: RecordDTO) -> Record:
        return record_from_dto(dto, record_id)

    return convert


def to_dto() -> Callable[[Record], RecordDTO]:
    """Return a converter mapping Record -> RecordDTO."""
    return record_to_dto
