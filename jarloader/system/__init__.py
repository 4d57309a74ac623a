from typing import Optional

from ..detect import PlatformKind, detect
from ..errors import UnsupportedPlatform
from .base import LaunchMode, LaunchOutcome, PlatformSystem, home_variable_name


def get_system(kind: Optional[PlatformKind] = None) -> PlatformSystem:
    kind = kind or detect()
    if kind == PlatformKind.WINDOWS:
        try:
            from .windows import WindowsSystem
        except ImportError as exc:
            raise UnsupportedPlatform(f"Windows support needs pywin32: {exc}") from exc

        return WindowsSystem(kind)
    from .posix import PosixSystem

    return PosixSystem(kind)


__all__ = [
    "LaunchMode",
    "LaunchOutcome",
    "PlatformSystem",
    "get_system",
    "home_variable_name",
]
