"""
API package for the Records API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_record_repo,
    get_create_record_use_case,
    get_list_records_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_record_repo",
    # Use cases
    "get_create_record_use_case",
    "get_list_records_use_case",
]
