"""Exception hierarchy for Confluence storage document building."""


class ConfluenceStorageError(Exception):
    """Base exception for all document building errors."""


class StructuralPreconditionViolation(ConfluenceStorageError):
    """Raised when a macro receives a body of the wrong element kind.

    This is a caller programming error: the body must come from
    ``build_body()``. It is never retried or recovered internally.
    """


class StorageFormatError(ConfluenceStorageError):
    """Raised when existing storage format markup cannot be parsed."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        super().__init__(message)
        self.line = line
        self.column = column
