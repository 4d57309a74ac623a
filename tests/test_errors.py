import pytest

from jarloader import errors
from jarloader.errors import ErrorKind, LauncherError

ERROR_CLASSES = [
    errors.UnresolvedPath,
    errors.MissingEnvironmentVariable,
    errors.EncodingConversionFailure,
    errors.ProcessCreationFailure,
    errors.UnsupportedPlatform,
]


def test_one_error_class_per_kind() -> None:
    assert {cls.kind for cls in ERROR_CLASSES} == set(ErrorKind)


@pytest.mark.parametrize("cls", ERROR_CLASSES)
def test_error_classes_are_documented_launcher_errors(cls) -> None:
    assert issubclass(cls, LauncherError)
    assert cls.__doc__ and cls.__doc__.strip()


def test_error_keeps_context() -> None:
    exc = errors.ProcessCreationFailure("Cannot start java", program="java")
    assert str(exc) == "Cannot start java"
    assert exc.program == "java"
    assert exc.path is None
