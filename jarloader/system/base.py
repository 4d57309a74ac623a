import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .. import config
from ..detect import PlatformKind
from ..errors import MissingEnvironmentVariable, UnresolvedPath, UnsupportedPlatform

Argument = Union[str, bytes]
PathLike = Union[str, Path]


class LaunchMode(str, Enum):
    REPLACE = "replace"
    SPAWN_AND_WAIT = "spawn_and_wait"


@dataclass(frozen=True)
class LaunchOutcome:
    program: str
    argv: Tuple[Argument, ...]
    mode: LaunchMode
    exit_code: Optional[int] = None


HOME_VARIABLES: Dict[PlatformKind, str] = {
    PlatformKind.WINDOWS: "USERPROFILE",
    PlatformKind.LINUX: "HOME",
    PlatformKind.MACOS: "HOME",
    PlatformKind.FREEBSD: "HOME",
    PlatformKind.UNKNOWN: "HOME",
}

# "start" is a cmd builtin; the empty argument is the window title.
OPENER_COMMANDS: Dict[PlatformKind, Tuple[str, ...]] = {
    PlatformKind.WINDOWS: ("cmd", "/C", "start", ""),
    PlatformKind.LINUX: ("xdg-open",),
    PlatformKind.FREEBSD: ("xdg-open",),
    PlatformKind.MACOS: ("open",),
}


def home_variable_name(kind: PlatformKind) -> str:
    return HOME_VARIABLES[kind]


class PlatformSystem(ABC):
    """Operating system operations the launcher depends on.

    One subclass exists per platform family; callers obtain an instance from
    :func:`jarloader.system.get_system` and never branch on the platform
    themselves.
    """

    def __init__(self, kind: PlatformKind) -> None:
        self.kind = kind

    def detect(self) -> PlatformKind:
        return self.kind

    @abstractmethod
    def self_executable_path(self) -> Path:
        """Absolute path of the running binary; raises ``UnresolvedPath``."""

    @abstractmethod
    def environment_variable(self, name: str) -> Optional[str]:
        """Value of ``name``, or ``None`` when the variable is not set."""

    @abstractmethod
    def ensure_directory(self, path: PathLike, mode: int = config.DEFAULT_DIRECTORY_MODE) -> bool:
        """Create a single directory level; ``False`` if it already existed."""

    @abstractmethod
    def launch(
        self,
        program: str,
        args: Sequence[Argument],
        mode: LaunchMode = LaunchMode.REPLACE,
        console: bool = True,
    ) -> LaunchOutcome:
        """Run ``program`` with ``[program] + args``."""

    def require_environment_variable(self, name: str) -> str:
        value = self.environment_variable(name)
        if value is None:
            raise MissingEnvironmentVariable(f"Environment variable {name} is not set", name=name)
        return value

    def home_directory(self) -> Optional[Path]:
        value = self.environment_variable(home_variable_name(self.kind))
        if value is None:
            return None
        return Path(value)

    def require_home_directory(self) -> Path:
        name = home_variable_name(self.kind)
        home = self.home_directory()
        if home is None:
            raise UnresolvedPath(f"Home directory unknown: {name} is not set", name=name)
        return home

    def opener_command(self, path: PathLike) -> List[str]:
        opener = OPENER_COMMANDS.get(self.kind)
        if opener is None:
            raise UnsupportedPlatform(
                f"No default-handler opener for {self.kind.value} platform",
                path=str(path),
            )
        return [*opener, str(path)]

    def open_with_default_handler(self, path: PathLike) -> LaunchOutcome:
        program, *args = self.opener_command(path)
        logging.info("Opening %s with %s", path, program)
        return self.launch(program, args, LaunchMode.SPAWN_AND_WAIT)
