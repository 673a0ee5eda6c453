"""
JSON with Comments (JSONC) parsing library.

Parses standard JSON extended with ``//`` line comments and ``/* */`` block
comments into native Python values, reporting syntax errors with 1-indexed
row and column positions. The module-level helpers mirror the standard
library json module; JsoncParser exposes the underlying parse-once
lifecycle and its ParseResult.
"""

from typing import IO
from typing import Any

from ._errors import CursorBoundsError
from ._errors import ErrorKind
from ._errors import JsoncDecodeError
from ._errors import ParseErrorInfo
from ._errors import ParseResult
from ._parser import JsoncParser
from ._parser import JsonValue
from ._parser import ParseConfig
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats

__version__ = "0.1.0"


def parse(s: str | bytes | bytearray, **kwargs: Any) -> ParseResult:
    """
    Parses a JSONC document and returns the outcome without raising.

    Keyword arguments are forwarded to ParseConfig.
    """
    config = ParseConfig(**kwargs)
    return JsoncParser(s, config).parse()


def loads(s: str | bytes | bytearray, **kwargs: Any) -> Any:
    """
    Parses a JSONC document into Python objects.

    Raises JsoncDecodeError on malformed input. The returned tree is not
    tied to any parser lifetime.
    """
    if not isinstance(s, str | bytes | bytearray):
        raise TypeError(
            f"the JSONC object must be str or bytes, not {type(s).__name__}"
        )

    return parse(s, **kwargs).unwrap()


def load(fp: IO[str] | IO[bytes], **kwargs: Any) -> Any:
    """
    Parses a JSONC document read in full from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "CursorBoundsError",
    "ErrorKind",
    "HotPathStats",
    "JsonValue",
    "JsoncDecodeError",
    "JsoncParser",
    "ParseConfig",
    "ParseErrorInfo",
    "ParseResult",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
]
