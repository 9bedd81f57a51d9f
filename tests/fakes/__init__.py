"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports failure injection for storage error paths

Usage:
    from tests.fakes import FakeRecordRepository, create_record_repo

    # Direct instantiation
    repo = FakeRecordRepository()
    repo.seed([Record(id="r1", information="hello")])

    # Factory function with pre-populated data
    repo = create_record_repo(num_records=5)
"""

from domain.models import Record
from tests.fakes.record_repository import FakeRecordRepository


def create_record_repo(*, num_records: int = 0) -> FakeRecordRepository:
    """
    Create a FakeRecordRepository with optional pre-populated records.

    Args:
        num_records: Number of records to generate

    Returns:
        FakeRecordRepository with records "rec-0".."rec-N" in order
    """
    repo = FakeRecordRepository()
    repo.seed(
        [Record(id=f"rec-{i}", information=f"information {i}") for i in range(num_records)]
    )
    return repo


__all__ = [
    "FakeRecordRepository",
    "create_record_repo",
]
