import sys
from enum import Enum
from typing import Optional, Tuple


class PlatformKind(str, Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    FREEBSD = "freebsd"
    UNKNOWN = "unknown"


PLATFORM_MAP = {
    "win32": PlatformKind.WINDOWS,
    "linux": PlatformKind.LINUX,
    "darwin": PlatformKind.MACOS,
    "freebsd": PlatformKind.FREEBSD,
}

# sys.platform carries the major version on some systems, e.g. "freebsd14".
PLATFORM_PREFIXES: Tuple[Tuple[str, PlatformKind], ...] = (
    ("win", PlatformKind.WINDOWS),
    ("freebsd", PlatformKind.FREEBSD),
    ("linux", PlatformKind.LINUX),
)

DISPLAY_NAMES = {
    PlatformKind.WINDOWS: "Windows NT",
    PlatformKind.LINUX: "Linux",
    PlatformKind.MACOS: "MacOSX",
    PlatformKind.FREEBSD: "FreeBSD",
    PlatformKind.UNKNOWN: "Unknown operating system",
}


def detect(platform_id: Optional[str] = None) -> PlatformKind:
    """Return the platform family the interpreter was built for.

    Uses ``sys.platform``, which is fixed when Python is compiled, so the
    answer never depends on the machine state at runtime.
    """
    name = (platform_id if platform_id is not None else sys.platform).lower()
    kind = PLATFORM_MAP.get(name)
    if kind is not None:
        return kind
    for prefix, prefixed_kind in PLATFORM_PREFIXES:
        if name.startswith(prefix):
            return prefixed_kind
    return PlatformKind.UNKNOWN


def describe(kind: Optional[PlatformKind] = None) -> str:
    return DISPLAY_NAMES[kind or detect()]
