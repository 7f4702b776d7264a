"""POSIX-style access checks in blocking and non-blocking form.

    >>> from fs_access import AccessMode, access_check
    >>> access_check("README.md", AccessMode.R_OK)

A failed check raises :class:`~fs_access.core.exceptions.PathNotFoundError`
or :class:`~fs_access.core.exceptions.AccessDeniedError`, with the
underlying ``OSError`` chained as ``__cause__``.
"""

import os
from functools import lru_cache
from typing import Optional, Union

from fs_access.core import get_logger, get_tracer
from fs_access.core.exceptions import (
    AccessDeniedError,
    AccessError,
    PathNotFoundError,
)
from fs_access.executable import select_executable_check
from fs_access.executor import AsyncProbeExecutor, ProbeExecutor
from fs_access.host import AsyncLocalHost, LocalHost
from fs_access.modes import AccessMode, mode_name
from fs_access.resolver import resolve_probe

logger = get_logger(__name__)
tracer = get_tracer(__name__)

PathArg = Union[str, "os.PathLike[str]"]
ModeArg = Union[AccessMode, int, None]


@lru_cache(maxsize=None)
def default_executor() -> ProbeExecutor:
    """Blocking executor for the local host, built once per process."""
    return ProbeExecutor(LocalHost(), select_executable_check())


@lru_cache(maxsize=None)
def default_async_executor() -> AsyncProbeExecutor:
    """Non-blocking executor for the local host, built once per process."""
    return AsyncProbeExecutor(AsyncLocalHost(), select_executable_check())


def _normalize(
    error: Exception, path: str, mode: Optional[AccessMode]
) -> AccessError:
    if isinstance(error, FileNotFoundError):
        return PathNotFoundError(path, mode_name(mode))
    logger.info(
        "Access denied", path=path, mode=mode_name(mode), error=repr(error)
    )
    return AccessDeniedError(path, mode_name(mode))


def access_check(
    path: PathArg,
    mode: ModeArg = None,
    *,
    executor: Optional[ProbeExecutor] = None,
) -> None:
    """Check whether this process can access ``path`` in the given mode.

    Args:
        path: File or directory to check
        mode: One of the ``AccessMode`` values; omitted means existence.
            Integers outside the defined codes behave like an omitted mode.
        executor: Executor to use instead of the local host default

    Raises:
        PathNotFoundError: If the path does not exist
        AccessDeniedError: If the path exists but the access is not possible,
            or a probe failed for any other reason

    An omitted mode is an existence check and is named ``Exists`` in
    denial messages, e.g. when the stat itself is refused. Only an
    unrecognized integer mode produces an empty mode name.
    """
    path = os.fspath(path)
    access_mode = AccessMode.coerce(mode)
    executor = executor or default_executor()

    with tracer.start_as_current_span("fs_access.access_check") as span:
        span.set_attribute("fs_access.path", path)
        span.set_attribute("fs_access.mode", mode_name(access_mode))
        try:
            target = executor.stat(path)
            executor.run(resolve_probe(target, access_mode), target)
        except Exception as e:
            raise _normalize(e, path, access_mode) from e

    logger.debug("Access granted", path=path, mode=mode_name(access_mode))


async def access_check_async(
    path: PathArg,
    mode: ModeArg = None,
    *,
    executor: Optional[AsyncProbeExecutor] = None,
) -> None:
    """Non-blocking form of :func:`access_check`."""
    path = os.fspath(path)
    access_mode = AccessMode.coerce(mode)
    executor = executor or default_async_executor()

    with tracer.start_as_current_span("fs_access.access_check") as span:
        span.set_attribute("fs_access.path", path)
        span.set_attribute("fs_access.mode", mode_name(access_mode))
        try:
            target = await executor.stat(path)
            await executor.run(resolve_probe(target, access_mode), target)
        except Exception as e:
            raise _normalize(e, path, access_mode) from e

    logger.debug("Access granted", path=path, mode=mode_name(access_mode))


def is_executable(path: PathArg, *, executor: Optional[ProbeExecutor] = None) -> bool:
    """Whether ``path`` is a regular file this process can execute.

    Never raises: missing paths, directories and files that cannot be
    verified all return False.
    """
    return (executor or default_executor()).is_executable(os.fspath(path))


async def is_executable_async(
    path: PathArg, *, executor: Optional[AsyncProbeExecutor] = None
) -> bool:
    """Non-blocking form of :func:`is_executable`."""
    return await (executor or default_async_executor()).is_executable(
        os.fspath(path)
    )
