import sys

import pytest

from jarloader.detect import PlatformKind, describe, detect


@pytest.mark.parametrize(
    "platform_id, expected",
    [
        ("win32", PlatformKind.WINDOWS),
        ("linux", PlatformKind.LINUX),
        ("linux2", PlatformKind.LINUX),
        ("darwin", PlatformKind.MACOS),
        ("freebsd", PlatformKind.FREEBSD),
        ("freebsd14", PlatformKind.FREEBSD),
        ("sunos5", PlatformKind.UNKNOWN),
        ("emscripten", PlatformKind.UNKNOWN),
        ("", PlatformKind.UNKNOWN),
    ],
)
def test_detect_maps_build_platform(platform_id: str, expected: PlatformKind) -> None:
    assert detect(platform_id) is expected


def test_detect_defaults_to_interpreter_platform() -> None:
    assert detect() is detect(sys.platform)
    assert detect() is detect()


def test_describe_names_every_kind() -> None:
    assert describe(PlatformKind.WINDOWS) == "Windows NT"
    assert describe(PlatformKind.MACOS) == "MacOSX"
    assert describe(PlatformKind.UNKNOWN) == "Unknown operating system"
    assert describe() == describe(detect())
