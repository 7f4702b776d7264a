"""Access modes mirroring the POSIX ``access(2)`` constants."""

from enum import IntEnum
from typing import Optional, Union

from fs_access.core.exceptions import ValidationError


class AccessMode(IntEnum):
    """Kind of access being checked.

    The numeric codes match ``os.F_OK``, ``os.X_OK``, ``os.W_OK`` and
    ``os.R_OK``. Each check tests exactly one mode; the values are never
    OR-ed together.
    """

    F_OK = 0
    X_OK = 1
    W_OK = 2
    R_OK = 4

    @classmethod
    def coerce(cls, value: Union["AccessMode", int, None]) -> Optional["AccessMode"]:
        """Map a caller-supplied mode onto a member.

        ``None`` means an existence check. Integers outside the four codes
        return ``None`` and are treated as an existence check by callers.
        """
        if value is None:
            return cls.F_OK
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, text: str) -> "AccessMode":
        """Parse a mode from user input.

        Accepts ``R_OK``, ``r``, ``readable`` or ``4`` style spellings.

        Raises:
            ValidationError: If the text names no known mode
        """
        token = text.strip()
        if token.isdigit():
            mode = cls.coerce(int(token))
            if mode is not None:
                return mode
        else:
            lowered = token.lower()
            for member in cls:
                if lowered in (
                    member.name.lower(),
                    member.name[0].lower(),
                    _MODE_NAMES[member].lower(),
                ):
                    return member

        available = ", ".join(member.name for member in cls)
        raise ValidationError(
            f"Unknown access mode: {text!r}. Available modes: {available}"
        )


_MODE_NAMES = {
    AccessMode.F_OK: "Exists",
    AccessMode.R_OK: "Readable",
    AccessMode.W_OK: "Writable",
    AccessMode.X_OK: "Executable",
}


def mode_name(mode: Optional[AccessMode]) -> str:
    """Human-readable name used in error messages, empty if unrecognized."""
    if mode is None:
        return ""
    return _MODE_NAMES.get(mode, "")
