"""Host primitives backed by the local operating system."""

import asyncio
import os
import shutil
import stat
import subprocess
from typing import Optional, Sequence

import aiofiles
import aiofiles.os

from fs_access.core import get_logger, settings
from fs_access.models import PathKind, PathTarget

logger = get_logger(__name__)


def _kind_from_mode(st_mode: int) -> PathKind:
    if stat.S_ISREG(st_mode):
        return PathKind.file
    if stat.S_ISDIR(st_mode):
        return PathKind.directory
    return PathKind.other


def _open_existing(path: str, flags: int) -> int:
    """Opener that refuses to create the file it is asked to open."""
    return os.open(path, flags & ~os.O_CREAT)


def _probe_mode(write: bool) -> str:
    # Append never truncates; _open_existing drops O_CREAT
    return "ab" if write else "rb"


def _spawn_permitted(program: str) -> bool:
    if not settings.allow_spawn:
        logger.debug("Subprocess spawning disabled by settings", program=program)
        return False
    return shutil.which(program) is not None


class LocalHost:
    """Blocking primitives using ``os``, ``open`` and ``subprocess``."""

    def stat(self, path: str) -> PathTarget:
        return PathTarget(path=path, kind=_kind_from_mode(os.stat(path).st_mode))

    def open_close(self, path: str, *, write: bool = False) -> None:
        with open(path, _probe_mode(write), opener=_open_existing):
            pass

    def first_entry(self, path: str) -> Optional[str]:
        with os.scandir(path) as entries:
            entry = next(entries, None)
        return entry.name if entry is not None else None

    def create_empty(self, path: str) -> None:
        with open(path, "xb"):
            pass

    def remove(self, path: str) -> None:
        os.remove(path)

    def can_spawn(self, program: str, path: str) -> bool:
        return _spawn_permitted(program)

    def spawn_and_wait(self, args: Sequence[str]) -> int:
        result = subprocess.run(list(args), capture_output=True, text=True)
        return result.returncode


class AsyncLocalHost:
    """Non-blocking primitives using ``aiofiles`` and asyncio subprocesses."""

    async def stat(self, path: str) -> PathTarget:
        result = await aiofiles.os.stat(path)
        return PathTarget(path=path, kind=_kind_from_mode(result.st_mode))

    async def open_close(self, path: str, *, write: bool = False) -> None:
        async with aiofiles.open(path, _probe_mode(write), opener=_open_existing):
            pass

    async def first_entry(self, path: str) -> Optional[str]:
        with await aiofiles.os.scandir(path) as entries:
            entry = await asyncio.to_thread(next, entries, None)
        return entry.name if entry is not None else None

    async def create_empty(self, path: str) -> None:
        async with aiofiles.open(path, "xb"):
            pass

    async def remove(self, path: str) -> None:
        await aiofiles.os.remove(path)

    async def can_spawn(self, program: str, path: str) -> bool:
        return _spawn_permitted(program)

    async def spawn_and_wait(self, args: Sequence[str]) -> int:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        try:
            return await process.wait()
        finally:
            if process.returncode is None:
                process.kill()
                await process.wait()
