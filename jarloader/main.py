import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import config
from .errors import LauncherError
from .system import LaunchMode, PlatformSystem, get_system
from .system.base import Argument


def resolve_log_level(name: str) -> Optional[int]:
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return None


def setup_logging() -> None:
    level = resolve_log_level(config.LOG_LEVEL)
    logging.basicConfig(level=level if level is not None else logging.WARNING, format=config.LOG_FORMAT)
    if level is None:
        logging.warning("Unknown log level %r, using WARNING", config.LOG_LEVEL)


def build_runtime_args(self_path: Path, caller_args: Sequence[Argument]) -> List[Argument]:
    return [config.RUNTIME_FLAG, str(self_path), *caller_args]


def main(argv: Optional[Sequence[Argument]] = None, system: Optional[PlatformSystem] = None) -> int:
    setup_logging()
    caller_args = list(sys.argv[1:] if argv is None else argv)
    try:
        system = system or get_system()
        self_path = system.self_executable_path()
        if not getattr(sys, "frozen", False):
            logging.warning("Not a frozen build, passing interpreter %s as the jar", self_path)
        runtime_args = build_runtime_args(self_path, caller_args)
        logging.debug("Launching %s %s", config.RUNTIME_PROGRAM, runtime_args)
        system.launch(config.RUNTIME_PROGRAM, runtime_args, LaunchMode.REPLACE)
    except LauncherError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
