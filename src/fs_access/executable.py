"""Execute-permission checks for regular files.

Platforms without a POSIX execute bit get a lexical check on the file
extension. Elsewhere the bit is verified with ``test -x`` in a subprocess,
provided the process is allowed to spawn it.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional

from fs_access.core import get_logger, settings
from fs_access.host import AsyncFilesystemHost, FilesystemHost

logger = get_logger(__name__)

EXECUTABLE_EXTENSIONS = (".exe", ".cmd", ".bat", ".com")


class ExecutableCheck(ABC):
    """Answers whether a regular file is executable by this process.

    Implementations never raise; a file that cannot be verified is
    reported as not executable.
    """

    name: str = ""

    @abstractmethod
    def check(self, host: FilesystemHost, path: str) -> bool:
        """Check a path already confirmed to be a regular file."""
        pass

    @abstractmethod
    async def check_async(self, host: AsyncFilesystemHost, path: str) -> bool:
        """Non-blocking form of :meth:`check`."""
        pass


class ExtensionExecutableCheck(ExecutableCheck):
    """Matches the file extension against a fixed allow-list."""

    name = "extension"

    def check(self, host: FilesystemHost, path: str) -> bool:
        return self._matches(path)

    async def check_async(self, host: AsyncFilesystemHost, path: str) -> bool:
        return self._matches(path)

    @staticmethod
    def _matches(path: str) -> bool:
        return path.lower().endswith(EXECUTABLE_EXTENSIONS)


class PosixExecutableCheck(ExecutableCheck):
    """Runs ``test -x`` against the path and reads its exit status."""

    name = "posix"
    program = "test"

    def check(self, host: FilesystemHost, path: str) -> bool:
        if not host.can_spawn(self.program, path):
            logger.debug("Not permitted to spawn execute test", path=path)
            return False
        try:
            code = host.spawn_and_wait([self.program, "-x", path])
        except (OSError, ValueError) as e:
            logger.warning("Execute test could not run", path=path, error=str(e))
            return False
        return code == 0

    async def check_async(self, host: AsyncFilesystemHost, path: str) -> bool:
        if not await host.can_spawn(self.program, path):
            logger.debug("Not permitted to spawn execute test", path=path)
            return False
        try:
            code = await host.spawn_and_wait([self.program, "-x", path])
        except (OSError, ValueError) as e:
            logger.warning("Execute test could not run", path=path, error=str(e))
            return False
        return code == 0


def select_executable_check(platform: Optional[str] = None) -> ExecutableCheck:
    """Choose the execute-permission strategy for this platform.

    Args:
        platform: ``os.name`` style identifier; defaults to the host's.
            Ignored when the ``executable_strategy`` setting is not "auto".

    Returns:
        The strategy instance to use for every check
    """
    strategy = settings.executable_strategy
    if strategy == "auto":
        strategy = "extension" if (platform or os.name) == "nt" else "posix"

    if strategy == "extension":
        check: ExecutableCheck = ExtensionExecutableCheck()
    else:
        check = PosixExecutableCheck()

    logger.debug("Selected executable check", strategy=check.name)
    return check
