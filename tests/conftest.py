import sys
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from jarloader.detect import PlatformKind  # noqa: E402
from jarloader.system.base import LaunchMode, LaunchOutcome, PlatformSystem  # noqa: E402


class RecordingSystem(PlatformSystem):
    """In-memory platform that records lookups and launches instead of doing them."""

    def __init__(self, kind: PlatformKind, environ: Optional[Dict[str, str]] = None) -> None:
        super().__init__(kind)
        self.environ = dict(environ or {})
        self.lookups: List[str] = []
        self.launches: List[tuple] = []
        self.self_path = PurePosixPath("/opt/app/app.bin")

    def self_executable_path(self):
        return self.self_path

    def environment_variable(self, name):
        self.lookups.append(name)
        return self.environ.get(name)

    def ensure_directory(self, path, mode=0o777):
        return False

    def launch(self, program, args, mode=LaunchMode.REPLACE, console=True):
        self.launches.append((program, list(args), mode))
        return LaunchOutcome(program=program, argv=(program, *args), mode=mode, exit_code=0)


@pytest.fixture
def recording_system():
    def factory(kind: PlatformKind = PlatformKind.LINUX, environ: Optional[Dict[str, str]] = None) -> RecordingSystem:
        return RecordingSystem(kind, environ)

    return factory
