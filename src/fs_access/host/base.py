"""Filesystem and process primitives consumed by the probe executor."""

from typing import Optional, Protocol, Sequence

from fs_access.models import PathTarget


class FilesystemHost(Protocol):
    """Blocking filesystem/process primitives.

    Methods raise ``OSError`` subclasses the way the ``os`` module does;
    ``FileNotFoundError`` in particular signals a missing path.
    """

    def stat(self, path: str) -> PathTarget:
        """Stat the path, following symlinks."""
        ...

    def open_close(self, path: str, *, write: bool = False) -> None:
        """Open an existing file for reading or writing and close it."""
        ...

    def first_entry(self, path: str) -> Optional[str]:
        """Return the name of one directory entry, or None if empty."""
        ...

    def create_empty(self, path: str) -> None:
        """Create an empty file, failing if it already exists."""
        ...

    def remove(self, path: str) -> None:
        """Remove a file."""
        ...

    def can_spawn(self, program: str, path: str) -> bool:
        """Whether this process may run ``program`` against ``path``."""
        ...

    def spawn_and_wait(self, args: Sequence[str]) -> int:
        """Run a command to completion and return its exit status."""
        ...


class AsyncFilesystemHost(Protocol):
    """Non-blocking counterpart of :class:`FilesystemHost`."""

    async def stat(self, path: str) -> PathTarget: ...

    async def open_close(self, path: str, *, write: bool = False) -> None: ...

    async def first_entry(self, path: str) -> Optional[str]: ...

    async def create_empty(self, path: str) -> None: ...

    async def remove(self, path: str) -> None: ...

    async def can_spawn(self, program: str, path: str) -> bool: ...

    async def spawn_and_wait(self, args: Sequence[str]) -> int: ...
