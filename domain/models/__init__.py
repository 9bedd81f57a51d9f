"""
Domain models for the Records API.

These models represent the two shapes a record takes:
- Record: The persisted entity (identifier + opaque information payload)
- RecordDTO: The transport object exchanged at the API boundary

Usage:
    >>> from domain.models import Record, RecordDTO

    >>> dto = RecordDTO(information="hello")
    >>> record = Record(information=dto.information)
    >>> record.with_id("rec-1").id
    'rec-1'
"""

from domain.models.record import Record, RecordDTO

__all__ = [
    "Record",
    "RecordDTO",
]
