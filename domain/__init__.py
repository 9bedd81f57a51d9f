"""
Domain layer for the Records API.

This package contains pure domain models and converters that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import Record, RecordDTO

__all__ = [
    "Record",
    "RecordDTO",
]
