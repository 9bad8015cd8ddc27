"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Validation failures and missing records are *not* exceptions: the use cases
return them as result objects. Only unexpected failures are raised.
"""


class ExerciseTrackerError(Exception):
    """Base class for errors raised by the E-Tracker application."""

    pass


class StorageError(ExerciseTrackerError):
    """Persistence is unavailable or rejected an operation.

    Raised by repository implementations when the underlying database call
    fails for reasons outside the record schema (connectivity, permissions,
    malformed rows). The original exception is chained as ``__cause__``.
    Callers may retry; the API reports it without internal detail.
    """

    def __init__(self, operation: str, message: str = "Storage operation failed"):
        super().__init__(f"{message} ({operation})")
        self.operation = operation
