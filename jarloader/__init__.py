from .detect import PlatformKind, describe, detect
from .encoding import from_native, to_native
from .errors import (
    EncodingConversionFailure,
    ErrorKind,
    LauncherError,
    MissingEnvironmentVariable,
    ProcessCreationFailure,
    UnresolvedPath,
    UnsupportedPlatform,
)
from .system import LaunchMode, LaunchOutcome, PlatformSystem, get_system

__version__ = "0.1.0"

__all__ = [
    "EncodingConversionFailure",
    "ErrorKind",
    "LaunchMode",
    "LaunchOutcome",
    "LauncherError",
    "MissingEnvironmentVariable",
    "PlatformKind",
    "PlatformSystem",
    "ProcessCreationFailure",
    "UnresolvedPath",
    "UnsupportedPlatform",
    "describe",
    "detect",
    "from_native",
    "get_system",
    "to_native",
]
