"""
Record entity and its transport object.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    The persisted entity.

    A Record is created with ``id`` unset; storage assigns the identifier
    on save. Once assigned the identifier never changes, so the model is
    frozen and ``with_id`` returns a copy.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(
        default=None,
        description="Storage-assigned identifier (None until persisted)",
    )
    information: str = Field(
        ...,
        description="Opaque information payload",
    )

    def with_id(self, record_id: str) -> "Record":
        """
        Return a new Record with the given ID set.

        Args:
            record_id: The ID to assign.

        Returns:
            New Record instance with the ID set.
        """
        return self.model_copy(update={"id": record_id})


class RecordDTO(BaseModel):
    """Wire representation of a Record used by the HTTP API."""

    id: Optional[str] = Field(
        default=None,
        description="Record identifier (ignored on create)",
    )
    information: str = Field(
        ...,
        description="Opaque information payload",
    )
