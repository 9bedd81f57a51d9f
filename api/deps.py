"""
FastAPI Dependency Providers for the Records API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings come from the app the request was routed to (app.state.settings)
- The async Supabase client is created once per app and reused
- The in-memory repository lives on app.state so records outlive a request
- Supabase repositories and use cases are created per-request

Usage in routers:
    from api.deps import get_create_record_use_case
    from application.use_cases import CreateRecordUseCase

    @router.post("/records")
    async def create_record(
        dto: RecordDTO,
        use_case: CreateRecordUseCase = Depends(get_create_record_use_case),
    ):
        return {"id": await use_case.execute(dto)}

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_record_repo] = lambda: FakeRecordRepository()
"""

import asyncio
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from supabase import AsyncClient, acreate_client

from application.ports import RecordRepository
from application.use_cases import CreateRecordUseCase, ListRecordsUseCase
from infrastructure import SupabaseRecordRepository
from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings the app was created with, falling back to the
    cached instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


def _client_cache(state) -> tuple[dict, asyncio.Lock]:
    # Synchronous, so the dict and lock are created together on first use.
    if getattr(state, "supabase_clients", None) is None:
        state.supabase_clients = {}
        state.supabase_client_lock = asyncio.Lock()
    return state.supabase_clients, state.supabase_client_lock


async def get_supabase_client(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Optional[AsyncClient]:
    """
    Get async Supabase client instance (cached per app and credentials).

    Returns None if credentials are not configured. Concurrent first
    requests share one acreate_client call.

    Returns:
        AsyncClient: Supabase client instance, or None if not configured
    """
    if not settings.supabase_url or not settings.supabase_key:
        return None

    key = (settings.supabase_url, settings.supabase_key)
    clients, lock = _client_cache(request.app.state)
    async with lock:
        client = clients.get(key)
        if client is None:
            client = await acreate_client(settings.supabase_url, settings.supabase_key)
            clients[key] = client
            logger.info("Supabase client created for %s", settings.supabase_url)
    return client


async def get_supabase_client_required(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AsyncClient:
    """
    Get Supabase client instance, raising if not configured.

    Raises HTTPException 503 if database is not available.

    Returns:
        AsyncClient: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = await get_supabase_client(request, settings)
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


async def get_record_repo(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> RecordRepository:
    """
    Get RecordRepository implementation.

    Returns the app's InMemoryRecordRepository when RECORD_STORE=memory,
    otherwise a SupabaseRecordRepository with the shared client.
    The return type is the Protocol to enable easy faking.

    Returns:
        RecordRepository: Repository for record persistence

    Raises:
        HTTPException: 503 if Supabase is selected but not configured
    """
    if settings.uses_memory_store:
        return request.app.state.memory_record_repo

    client = await get_supabase_client_required(request, settings)
    return SupabaseRecordRepository(client, table=settings.records_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_create_record_use_case(
    record_repo: RecordRepository = Depends(get_record_repo),
) -> CreateRecordUseCase:
    """
    Get CreateRecordUseCase with injected repository.

    Args:
        record_repo: Record repository (injected)

    Returns:
        CreateRecordUseCase: Use case for creating records
    """
    return CreateRecordUseCase(record_repo=record_repo)


def get_list_records_use_case(
    record_repo: RecordRepository = Depends(get_record_repo),
) -> ListRecordsUseCase:
    """
    Get ListRecordsUseCase with injected repository.

    Args:
        record_repo: Record repository (injected)

    Returns:
        ListRecordsUseCase: Use case for listing records
    """
    return ListRecordsUseCase(record_repo=record_repo)
