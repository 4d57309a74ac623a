import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import psutil

from .. import config
from ..detect import PlatformKind
from ..errors import EncodingConversionFailure, ProcessCreationFailure, UnresolvedPath
from .base import Argument, LaunchMode, LaunchOutcome, PathLike, PlatformSystem

PROC_SELF_EXE = "/proc/self/exe"


def _read_proc_self_exe() -> Optional[str]:
    try:
        return os.readlink(PROC_SELF_EXE)
    except OSError:
        return None


def _native_argv(program: str, args: Sequence[Argument]) -> List[bytes]:
    try:
        return [os.fsencode(program), *(os.fsencode(arg) for arg in args)]
    except UnicodeError as exc:
        raise EncodingConversionFailure(
            f"Argument for {program} is not representable in the filesystem encoding",
            program=program,
            encoding=sys.getfilesystemencoding(),
        ) from exc


def _flush_std_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            continue


class PosixSystem(PlatformSystem):
    """Linux, macOS, FreeBSD and unrecognised Unix-likes."""

    def self_executable_path(self) -> Path:
        candidate = _read_proc_self_exe() if self.kind == PlatformKind.LINUX else None
        if not candidate:
            try:
                candidate = psutil.Process().exe()
            except (psutil.Error, OSError) as exc:
                raise UnresolvedPath(f"Cannot resolve executable path: {exc}") from exc
        if not candidate:
            raise UnresolvedPath("Cannot resolve executable path: empty result")
        path = Path(candidate)
        # A replaced binary still resolves via /proc but reads "... (deleted)".
        if not path.is_absolute() or not path.is_file():
            raise UnresolvedPath(f"Executable path does not exist: {path}", path=str(path))
        return path

    def environment_variable(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def ensure_directory(self, path: PathLike, mode: int = config.DEFAULT_DIRECTORY_MODE) -> bool:
        target = Path(path)
        try:
            os.mkdir(target, mode)
        except FileExistsError:
            if target.is_dir():
                logging.debug("Directory %s already exists", target)
                return False
            raise
        logging.info("Created directory %s", target)
        return True

    def launch(
        self,
        program: str,
        args: Sequence[Argument],
        mode: LaunchMode = LaunchMode.REPLACE,
        console: bool = True,
    ) -> LaunchOutcome:
        argv = _native_argv(program, args)
        if mode == LaunchMode.REPLACE:
            self._replace(program, argv)
        exit_code = self._spawn_and_wait(program, argv, console)
        return LaunchOutcome(
            program=program,
            argv=(program, *args),
            mode=mode,
            exit_code=exit_code,
        )

    def _replace(self, program: str, argv: List[bytes]) -> None:
        logging.debug("Replacing process image with %s", program)
        _flush_std_streams()
        try:
            os.execvp(argv[0], argv)
        except OSError as exc:
            raise ProcessCreationFailure(
                f"Cannot execute {program}: {exc.strerror or exc}",
                program=program,
            ) from exc

    def _spawn_and_wait(self, program: str, argv: List[bytes], console: bool) -> int:
        kwargs: Dict[str, Any] = {}
        if not console:
            kwargs.update(
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        logging.debug("Spawning %s", program)
        try:
            with subprocess.Popen(argv, **kwargs) as proc:
                exit_code = proc.wait()
        except OSError as exc:
            raise ProcessCreationFailure(
                f"Cannot start {program}: {exc.strerror or exc}",
                program=program,
            ) from exc
        logging.info("%s exited with status %s", program, exit_code)
        return exit_code
