"""
Infrastructure Layer for the Records API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase and in-memory record repositories
"""

from infrastructure.db import (
    InMemoryRecordRepository,
    SupabaseRecordRepository,
)

__all__ = [
    "SupabaseRecordRepository",
    "InMemoryRecordRepository",
]
