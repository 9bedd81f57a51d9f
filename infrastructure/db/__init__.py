"""
Infrastructure Database Layer.

This package provides implementations of the RecordRepository port defined
in application.ports. They are injected into use cases by api.deps.

Usage:
    from supabase import acreate_client
    from infrastructure.db import SupabaseRecordRepository, InMemoryRecordRepository

    # Supabase-backed storage
    client = await acreate_client(SUPABASE_URL, SUPABASE_KEY)
    record_repo = SupabaseRecordRepository(client, table="records")

    # Process-local storage for development
    record_repo = InMemoryRecordRepository()
"""

from infrastructure.db.record_repository import (
    InMemoryRecordRepository,
    SupabaseRecordRepository,
)

__all__ = [
    "SupabaseRecordRepository",
    "InMemoryRecordRepository",
]
