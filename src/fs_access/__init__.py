"""Portable POSIX-style access checks.

This package answers "can this process access this path in this mode?"
for existence, read, write and execute, in both blocking and asyncio form.
Where the platform has no notion of an execute bit, execute checks fall
back to matching the file extension.

Key Features:
    - Blocking and non-blocking entry points with identical behavior
    - Two normalized failure kinds: not found and permission denied
    - Injectable filesystem/process host for testing
    - CLI interface

Recommended Usage:

    >>> from fs_access import AccessMode, access_check, is_executable
    >>> access_check("/etc/hosts", AccessMode.R_OK)
    >>> is_executable("/bin/sh")
    True

Advanced Usage:
    Build an executor around a custom host:

    >>> from fs_access.executor import ProbeExecutor
    >>> from fs_access.executable import select_executable_check
    >>> executor = ProbeExecutor(my_host, select_executable_check())
    >>> access_check("data.csv", AccessMode.W_OK, executor=executor)
"""

__version__ = "0.1.0"

from .access import (
    access_check,
    access_check_async,
    is_executable,
    is_executable_async,
)
from .core.exceptions import (
    AccessDeniedError,
    AccessError,
    ErrorKind,
    FsAccessError,
    PathNotFoundError,
    ValidationError,
)
from .models import PathKind, PathTarget
from .modes import AccessMode, mode_name

__all__ = [
    # Entry points
    "access_check",
    "access_check_async",
    "is_executable",
    "is_executable_async",
    # Modes
    "AccessMode",
    "mode_name",
    # Path metadata
    "PathKind",
    "PathTarget",
    # Errors
    "AccessDeniedError",
    "AccessError",
    "ErrorKind",
    "FsAccessError",
    "PathNotFoundError",
    "ValidationError",
]
