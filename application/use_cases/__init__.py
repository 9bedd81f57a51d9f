"""
Application Use Cases for the Records API.

This package contains application-level use cases that orchestrate the
record converters and the repository port. Use cases are the entry points
for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain converters and repository ports
- Dependencies are injected via constructors for testability
- Storage errors propagate to the caller untouched

Usage:
    from application.use_cases import CreateRecordUseCase, ListRecordsUseCase

    create_use_case = CreateRecordUseCase(record_repo=record_repo)
    record_id = await create_use_case.execute(RecordDTO(information="hello"))

    list_use_case = ListRecordsUseCase(record_repo=record_repo)
    async for dto in list_use_case.execute():
        print(dto.id, dto.information)
"""

from application.use_cases.create_record import CreateRecordUseCase
from application.use_cases.list_records import ListRecordsUseCase

__all__ = [
    "CreateRecordUseCase",
    "ListRecordsUseCase",
]
