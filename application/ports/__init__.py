"""
Repository Interfaces (Ports) for the Records API.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import RecordRepository

    class CreateRecordUseCase:
        def __init__(self, record_repo: RecordRepository):
            self._record_repo = record_repo
"""

from application.ports.record_repository import RecordRepository

__all__ = [
    "RecordRepository",
]
