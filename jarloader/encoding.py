"""Conversion between narrow byte strings and native (wide) text.

Windows system calls take wide-character strings while byte strings reach
the launcher in a code page. Both directions are strict: malformed input is
an ``EncodingConversionFailure``, never a silently shortened or empty value.
"""

import codecs
from typing import Union

from . import config
from .errors import EncodingConversionFailure


def _check_codec(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise EncodingConversionFailure(f"Unknown encoding: {encoding}", encoding=encoding) from exc


def to_native(text: Union[bytes, str], source_encoding: str = config.WIDE_ENCODING) -> str:
    if isinstance(text, str):
        return text
    if not text:
        return ""
    _check_codec(source_encoding)
    try:
        return bytes(text).decode(source_encoding, errors="strict")
    except UnicodeDecodeError as exc:
        raise EncodingConversionFailure(
            f"Invalid {source_encoding} byte sequence at offset {exc.start}",
            encoding=source_encoding,
        ) from exc


def from_native(text: str, target_encoding: str = config.NARROW_ENCODING) -> bytes:
    if not text:
        return b""
    _check_codec(target_encoding)
    try:
        return text.encode(target_encoding, errors="strict")
    except UnicodeEncodeError as exc:
        raise EncodingConversionFailure(
            f"Character {text[exc.start]!r} cannot be encoded as {target_encoding}",
            encoding=target_encoding,
        ) from exc
