"""Exception hierarchy for fs-access."""

from enum import Enum


class FsAccessError(Exception):
    """Base exception for all fs-access errors."""

    pass


class ValidationError(FsAccessError):
    """Raised when validation fails."""

    pass


class ErrorKind(str, Enum):
    """The two error kinds an access check can report."""

    NOT_FOUND = "NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"


class AccessError(FsAccessError):
    """Raised when an access check fails.

    Attributes:
        kind: Normalized error kind
        code: POSIX errno name matching the kind
        path: The path that was checked
        mode: Name of the requested mode, empty when unrecognized
    """

    code = ""

    def __init__(self, kind: ErrorKind, message: str, path: str, mode: str = ""):
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.mode = mode


class PathNotFoundError(AccessError):
    """Raised when the checked path does not exist."""

    code = "ENOENT"

    def __init__(self, path: str, mode: str = ""):
        super().__init__(
            ErrorKind.NOT_FOUND,
            f"ENOENT: no such file or directory, access '{path}'",
            path,
            mode,
        )


class AccessDeniedError(AccessError):
    """Raised when the path exists but the requested access is not possible."""

    code = "EACCES"

    def __init__(self, path: str, mode: str = ""):
        super().__init__(
            ErrorKind.PERMISSION_DENIED,
            f"EACCES: permission denied, {mode} '{path}'",
            path,
            mode,
        )
