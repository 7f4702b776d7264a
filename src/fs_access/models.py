"""Path metadata passed between the executor and the resolver."""

from dataclasses import dataclass
from enum import Enum


class PathKind(str, Enum):
    """What a stat call found at a path."""

    file = "file"
    directory = "directory"
    other = "other"


@dataclass(frozen=True)
class PathTarget:
    """Resolved metadata for the path under test.

    Attributes:
        path: Path as given by the caller, rendered with ``os.fspath``
        kind: Whether the path is a regular file, a directory or neither
    """

    path: str
    kind: PathKind

    @property
    def is_file(self) -> bool:
        return self.kind is PathKind.file

    @property
    def is_directory(self) -> bool:
        return self.kind is PathKind.directory
