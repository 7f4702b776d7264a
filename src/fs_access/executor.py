"""Probe executor: runs the probes chosen by the resolver.

Both executors follow the same sequence for a call: stat, then at most one
probe, then cleanup. Failures surface as the ``OSError`` raised by the
host; normalization happens in :mod:`fs_access.access`.
"""

import errno
import os
import uuid

from fs_access.core import get_logger, settings
from fs_access.executable import ExecutableCheck
from fs_access.host import AsyncFilesystemHost, FilesystemHost
from fs_access.models import PathTarget
from fs_access.resolver import Probe

logger = get_logger(__name__)


def _scratch_path(directory: str) -> str:
    return os.path.join(directory, f"{settings.scratch_prefix}{uuid.uuid4().hex}")


def _not_executable(path: str) -> PermissionError:
    return PermissionError(errno.EACCES, "permission denied, execute", path)


class ProbeExecutor:
    """Blocking probe executor.

    Args:
        host: Filesystem/process primitives
        executable_check: Strategy used for execute probes on files
    """

    def __init__(self, host: FilesystemHost, executable_check: ExecutableCheck):
        self.host = host
        self.executable_check = executable_check

    def stat(self, path: str) -> PathTarget:
        return self.host.stat(path)

    def run(self, probe: Probe, target: PathTarget) -> None:
        """Run a probe against an existing target, raising on failure."""
        logger.debug("Running probe", probe=probe.value, path=target.path)

        if probe is Probe.open_read:
            self.host.open_close(target.path)
        elif probe is Probe.open_write:
            self.host.open_close(target.path, write=True)
        elif probe is Probe.list_directory:
            self.host.first_entry(target.path)
        elif probe is Probe.scratch_write:
            self._scratch_write(target.path)
        elif probe is Probe.execute:
            if not self.executable_check.check(self.host, target.path):
                raise _not_executable(target.path)

    def is_executable(self, path: str) -> bool:
        """Whether ``path`` is an executable regular file. Never raises."""
        try:
            target = self.host.stat(path)
        except (OSError, ValueError) as e:
            logger.debug("Executable check stat failed", path=path, error=str(e))
            return False
        if not target.is_file:
            return False
        return self.executable_check.check(self.host, path)

    def _scratch_write(self, directory: str) -> None:
        scratch = _scratch_path(directory)
        self.host.create_empty(scratch)
        self.host.remove(scratch)


class AsyncProbeExecutor:
    """Non-blocking probe executor, mirroring :class:`ProbeExecutor`."""

    def __init__(
        self, host: AsyncFilesystemHost, executable_check: ExecutableCheck
    ):
        self.host = host
        self.executable_check = executable_check

    async def stat(self, path: str) -> PathTarget:
        return await self.host.stat(path)

    async def run(self, probe: Probe, target: PathTarget) -> None:
        """Run a probe against an existing target, raising on failure."""
        logger.debug("Running probe", probe=probe.value, path=target.path)

        if probe is Probe.open_read:
            await self.host.open_close(target.path)
        elif probe is Probe.open_write:
            await self.host.open_close(target.path, write=True)
        elif probe is Probe.list_directory:
            await self.host.first_entry(target.path)
        elif probe is Probe.scratch_write:
            await self._scratch_write(target.path)
        elif probe is Probe.execute:
            if not await self.executable_check.check_async(self.host, target.path):
                raise _not_executable(target.path)

    async def is_executable(self, path: str) -> bool:
        """Whether ``path`` is an executable regular file. Never raises."""
        try:
            target = await self.host.stat(path)
        except (OSError, ValueError) as e:
            logger.debug("Executable check stat failed", path=path, error=str(e))
            return False
        if not target.is_file:
            return False
        return await self.executable_check.check_async(self.host, path)

    async def _scratch_write(self, directory: str) -> None:
        scratch = _scratch_path(directory)
        await self.host.create_empty(scratch)
        await self.host.remove(scratch)
