"""Test configuration and fixtures for fs-access."""

import asyncio
import posixpath
from dataclasses import dataclass, field
from typing import Optional, Sequence

import pytest

from fs_access import access_check, access_check_async
from fs_access.executable import PosixExecutableCheck
from fs_access.executor import AsyncProbeExecutor, ProbeExecutor
from fs_access.models import PathKind, PathTarget


@dataclass
class Node:
    kind: PathKind
    readable: bool = True
    writable: bool = True
    executable: bool = False


@dataclass
class MemoryHost:
    """In-memory filesystem/process host.

    Paths are POSIX-style strings; a directory's entries are the nodes whose
    parent is that directory.
    """

    nodes: dict = field(default_factory=dict)
    spawn_allowed: bool = True
    spawned: list = field(default_factory=list)
    created: list = field(default_factory=list)

    def add_file(self, path: str, **flags) -> None:
        self.nodes[path] = Node(PathKind.file, **flags)

    def add_dir(self, path: str, **flags) -> None:
        self.nodes[path] = Node(PathKind.directory, **flags)

    def add_other(self, path: str, **flags) -> None:
        self.nodes[path] = Node(PathKind.other, **flags)

    def _node(self, path: str) -> Node:
        if path not in self.nodes:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.nodes[path]

    def entries(self, path: str) -> list:
        return sorted(p for p in self.nodes if posixpath.dirname(p) == path)

    def stat(self, path: str) -> PathTarget:
        return PathTarget(path=path, kind=self._node(path).kind)

    def open_close(self, path: str, *, write: bool = False) -> None:
        node = self._node(path)
        if not (node.writable if write else node.readable):
            raise PermissionError(13, "Permission denied", path)

    def first_entry(self, path: str) -> Optional[str]:
        if not self._node(path).readable:
            raise PermissionError(13, "Permission denied", path)
        entries = self.entries(path)
        return posixpath.basename(entries[0]) if entries else None

    def create_empty(self, path: str) -> None:
        if path in self.nodes:
            raise FileExistsError(17, "File exists", path)
        if not self._node(posixpath.dirname(path)).writable:
            raise PermissionError(13, "Permission denied", path)
        self.created.append(path)
        self.add_file(path)

    def remove(self, path: str) -> None:
        self._node(path)
        del self.nodes[path]

    def can_spawn(self, program: str, path: str) -> bool:
        return self.spawn_allowed

    def spawn_and_wait(self, args: Sequence[str]) -> int:
        self.spawned.append(list(args))
        return 0 if self._node(args[-1]).executable else 1


class AsyncMemoryHost:
    """Coroutine facade over a :class:`MemoryHost`."""

    def __init__(self, host: MemoryHost):
        self.host = host

    async def stat(self, path):
        return self.host.stat(path)

    async def open_close(self, path, *, write=False):
        self.host.open_close(path, write=write)

    async def first_entry(self, path):
        return self.host.first_entry(path)

    async def create_empty(self, path):
        self.host.create_empty(path)

    async def remove(self, path):
        self.host.remove(path)

    async def can_spawn(self, program, path):
        return self.host.can_spawn(program, path)

    async def spawn_and_wait(self, args):
        return self.host.spawn_and_wait(args)


@pytest.fixture
def memory_host():
    """A small in-memory tree with files and directories of mixed access."""
    host = MemoryHost()
    host.add_dir("/data")
    host.add_file("/data/readme.md")
    host.add_file("/data/locked.txt", readable=False, writable=False)
    host.add_file("/data/run.sh", executable=True)
    host.add_file("/data/tool.CMD")
    host.add_dir("/data/empty")
    host.add_dir("/data/locked.dir", readable=False, writable=False)
    host.add_other("/data/fifo")
    return host


@pytest.fixture(params=["sync", "async"])
def convention(request):
    """Name of the calling convention under test."""
    return request.param


@pytest.fixture
def memory_access(memory_host, convention):
    """``check(path, mode=None)`` against the memory host, POSIX strategy."""
    if convention == "sync":
        executor = ProbeExecutor(memory_host, PosixExecutableCheck())

        def check(path, mode=None):
            access_check(path, mode, executor=executor)

    else:
        executor = AsyncProbeExecutor(
            AsyncMemoryHost(memory_host), PosixExecutableCheck()
        )

        def check(path, mode=None):
            asyncio.run(access_check_async(path, mode, executor=executor))

    return check


@pytest.fixture
def local_access(convention):
    """``check(path, mode=None)`` against the real filesystem."""
    if convention == "sync":
        return access_check

    def check(path, mode=None):
        asyncio.run(access_check_async(path, mode))

    return check


@pytest.fixture
def sample_file_structure(tmp_path):
    """Create a sample file structure for testing access checks."""
    (tmp_path / "readme.md").write_text("# readme\n")
    (tmp_path / "notes.txt").write_text("content" * 10)

    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\nexit 0\n")
    script.chmod(0o755)

    (tmp_path / "subdir").mkdir()
    (tmp_path / "subdir" / "inner.txt").write_text("inner")
    (tmp_path / "empty").mkdir()

    return tmp_path


@pytest.fixture
def async_memory_host(memory_host):
    """Coroutine view of the ``memory_host`` tree."""
    return AsyncMemoryHost(memory_host)
