"""
Domain converters between Record and RecordDTO.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import to_record, to_dto
    >>> from domain.models import RecordDTO

    >>> record = to_record(None)(RecordDTO(information="hello"))
    >>> dto = to_dto()(record.with_id("rec-1"))
"""

from domain.converters.record_converters import (
    record_from_dto,
    record_to_dto,
    to_dto,
    to_record,
)

__all__ = [
    "to_record",
    "to_dto",
    "record_from_dto",
    "record_to_dto",
]
