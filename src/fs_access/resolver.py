"""Selection of the probe that answers an access question.

The resolver is pure: it looks only at the path kind and the requested
mode and names the probe the executor has to run.

    ======  ==============  ======================
    Mode    File            Directory
    ======  ==============  ======================
    F_OK    none            none
    R_OK    open for read   read one entry
    W_OK    open for write  create and remove file
    X_OK    execute test    read one entry
    ======  ==============  ======================
"""

from enum import Enum
from typing import Optional

from fs_access.models import PathTarget
from fs_access.modes import AccessMode


class Probe(str, Enum):
    """Concrete, low-impact operation used to test access."""

    none = "none"
    open_read = "open_read"
    open_write = "open_write"
    list_directory = "list_directory"
    scratch_write = "scratch_write"
    execute = "execute"


_FILE_PROBES = {
    AccessMode.R_OK: Probe.open_read,
    AccessMode.W_OK: Probe.open_write,
    AccessMode.X_OK: Probe.execute,
}

# Directory traversal is approximated by enumerability
_DIRECTORY_PROBES = {
    AccessMode.R_OK: Probe.list_directory,
    AccessMode.W_OK: Probe.scratch_write,
    AccessMode.X_OK: Probe.list_directory,
}


def resolve_probe(target: PathTarget, mode: Optional[AccessMode]) -> Probe:
    """Pick the probe for an existing target and a requested mode.

    Args:
        target: Metadata of a path already confirmed to exist
        mode: Requested mode; ``None`` stands for an unrecognized value

    Returns:
        The probe to run. ``Probe.none`` for F_OK, unrecognized modes and
        targets that are neither files nor directories.
    """
    if mode is None or mode is AccessMode.F_OK:
        return Probe.none
    if target.is_file:
        return _FILE_PROBES[mode]
    if target.is_directory:
        return _DIRECTORY_PROBES[mode]
    return Probe.none
