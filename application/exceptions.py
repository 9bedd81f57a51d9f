"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class RecordStorageError(Exception):
    """Error raised by a record repository when storage fails.

    Repository adapters translate driver errors (PostgREST responses,
    network failures) into this exception. Use cases let it propagate
    unchanged; the HTTP layer decides how to report it.
    """

    pass
