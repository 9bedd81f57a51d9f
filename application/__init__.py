"""
Application Layer for the Records API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Orchestration of mappers and repositories per API operation
- exceptions: Errors shared by the application and infrastructure layers
"""
