"""Filesystem and process primitives used by the probe executor."""

from .base import AsyncFilesystemHost, FilesystemHost
from .local import AsyncLocalHost, LocalHost

__all__ = [
    "AsyncFilesystemHost",
    "FilesystemHost",
    "AsyncLocalHost",
    "LocalHost",
]
