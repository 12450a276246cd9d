"""Domain-specific exceptions

Engine functions never raise for degenerate numbers; these are only raised
where plain payloads are turned into domain values.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidSnapshotError(DomainException):
    """Snapshot payload is malformed or invalid"""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []
