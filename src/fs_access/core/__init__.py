"""Core utilities and shared components for fs-access."""

from .config import settings
from .exceptions import (
    AccessDeniedError,
    AccessError,
    ErrorKind,
    FsAccessError,
    PathNotFoundError,
    ValidationError,
)
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "AccessDeniedError",
    "AccessError",
    "ErrorKind",
    "FsAccessError",
    "PathNotFoundError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
