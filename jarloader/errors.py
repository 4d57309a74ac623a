from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNRESOLVED_PATH = "unresolved_path"
    MISSING_ENVIRONMENT_VARIABLE = "missing_environment_variable"
    ENCODING_CONVERSION_FAILURE = "encoding_conversion_failure"
    PROCESS_CREATION_FAILURE = "process_creation_failure"
    UNSUPPORTED_PLATFORM = "unsupported_platform"


class LauncherError(Exception):
    """Base error for everything the launcher reports to its caller."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        program: Optional[str] = None,
        name: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.program = program
        self.name = name
        self.encoding = encoding


class UnresolvedPath(LauncherError):
    """Self path or home directory could not be produced."""

    kind = ErrorKind.UNRESOLVED_PATH


class MissingEnvironmentVariable(LauncherError):
    """A required environment variable is not set."""

    kind = ErrorKind.MISSING_ENVIRONMENT_VARIABLE


class EncodingConversionFailure(LauncherError):
    """Text could not be converted with the requested codec."""

    kind = ErrorKind.ENCODING_CONVERSION_FAILURE


class ProcessCreationFailure(LauncherError):
    """The platform refused to create or replace a process."""

    kind = ErrorKind.PROCESS_CREATION_FAILURE


class UnsupportedPlatform(LauncherError):
    """No implementation exists for the current platform."""

    kind = ErrorKind.UNSUPPORTED_PLATFORM
