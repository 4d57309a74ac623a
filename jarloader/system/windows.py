import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pywintypes
import win32api
import win32event
import win32file
import win32process
import winerror

from .. import config
from ..encoding import to_native
from ..errors import ProcessCreationFailure, UnresolvedPath
from .base import Argument, LaunchMode, LaunchOutcome, PathLike, PlatformSystem


def _wide_argv(program: str, args: Sequence[Argument]) -> List[str]:
    return [to_native(item, config.NARROW_ENCODING) for item in (program, *args)]


class WindowsSystem(PlatformSystem):
    """Windows NT family backed by the Win32 API through pywin32."""

    def self_executable_path(self) -> Path:
        try:
            module = win32api.GetModuleHandle(None)
            candidate = win32api.GetModuleFileName(module)
        except pywintypes.error as exc:
            raise UnresolvedPath(f"Cannot resolve executable path: {exc.strerror}") from exc
        path = Path(candidate)
        if not candidate or not path.is_file():
            raise UnresolvedPath(f"Executable path does not exist: {path}", path=str(path))
        return path

    def environment_variable(self, name: str) -> Optional[str]:
        # pywin32 queries the required size first, so long values are never cut.
        return win32api.GetEnvironmentVariable(to_native(name, config.NARROW_ENCODING))

    def ensure_directory(self, path: PathLike, mode: int = config.DEFAULT_DIRECTORY_MODE) -> bool:
        target = Path(path)
        try:
            win32file.CreateDirectory(str(target), None)
        except pywintypes.error as exc:
            if exc.winerror == winerror.ERROR_ALREADY_EXISTS and target.is_dir():
                logging.debug("Directory %s already exists", target)
                return False
            raise OSError(None, exc.strerror, str(target), exc.winerror) from exc
        logging.info("Created directory %s", target)
        return True

    def launch(
        self,
        program: str,
        args: Sequence[Argument],
        mode: LaunchMode = LaunchMode.REPLACE,
        console: bool = True,
    ) -> LaunchOutcome:
        argv = _wide_argv(program, args)
        exit_code = self._spawn_and_wait(argv, console)
        if mode == LaunchMode.REPLACE:
            # No exec on Windows: the launcher ends with the child's status.
            sys.exit(exit_code)
        return LaunchOutcome(
            program=program,
            argv=(program, *args),
            mode=mode,
            exit_code=exit_code,
        )

    def _spawn_and_wait(self, argv: List[str], console: bool) -> int:
        program = argv[0]
        command_line = subprocess.list2cmdline(argv)
        startup = win32process.STARTUPINFO()
        startup.lpTitle = program
        flags = 0 if console else win32process.CREATE_NO_WINDOW
        logging.debug("Creating process: %s", command_line)
        try:
            process, thread, pid, _ = win32process.CreateProcess(
                None,
                command_line,
                None,
                None,
                console,
                flags,
                None,
                None,
                startup,
            )
        except pywintypes.error as exc:
            raise ProcessCreationFailure(
                f"Cannot start {program}: {exc.strerror}",
                program=program,
            ) from exc
        try:
            win32event.WaitForSingleObject(process, win32event.INFINITE)
            exit_code = win32process.GetExitCodeProcess(process)
        finally:
            thread.Close()
            process.Close()
        logging.info("%s (pid %s) exited with status %s", program, pid, exit_code)
        return exit_code
