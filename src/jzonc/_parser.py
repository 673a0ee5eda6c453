"""
Single-pass recursive-descent parser for JSON with Comments.

Scanning and tree construction are fused: there is no token stream. Each
builder consumes exactly the characters of its value and leaves the cursor
on the last one, so containers can uniformly step forward to reach the next
separator.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ._arena import Arena
from ._cursor import Cursor
from ._cursor import Mark
from ._errors import CursorBoundsError
from ._errors import ErrorKind
from ._errors import JsoncDecodeError
from ._errors import ParseErrorInfo
from ._errors import ParseResult
from ._profile import ProfileContext

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None

_WHITESPACE = frozenset(" \t\r\n")
_NEWLINES = frozenset("\n\r")
_DIGITS = frozenset("0123456789")
_EXPONENT = frozenset("eE")
_NUMBER_START = _DIGITS | frozenset("-e.")

_LITERALS: dict[str, tuple[str, bool | None]] = {
    "n": ("null", None),
    "t": ("true", True),
    "f": ("false", False),
}

# Only these escapes are decoded; anything else is copied through verbatim
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSONC parsing behavior with immutable settings.

    Comments are accepted inside arrays and objects by default. A comment
    ahead of the first top-level value is rejected unless
    allow_leading_comments is set.
    """

    allow_comments: bool = True
    allow_leading_comments: bool = False
    parse_float: ParseFloatHook = None
    parse_int: ParseIntHook = None
    object_hook: ObjectHook = None
    object_pairs_hook: ObjectPairsHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.allow_comments, bool):
            raise TypeError("allow_comments must be a boolean")
        if not isinstance(self.allow_leading_comments, bool):
            raise TypeError("allow_leading_comments must be a boolean")


class JsoncParser:
    """
    Parses one JSONC document into a tree of native Python values.

    A parser is bound to a single input. Containers it builds are owned by
    its arena and are emptied when the parser is closed, so use the parser
    as a context manager only when the tree is consumed inside the block,
    or deep-copy the result first.

    Only containers the parser builds itself are owned. The pair lists
    passed to object_pairs_hook, and anything a hook returns, belong to the
    caller and survive close().
    """

    def __init__(
        self, text: str | bytes | bytearray, config: ParseConfig | None = None
    ) -> None:
        if not isinstance(text, str | bytes | bytearray):
            raise TypeError(
                "the JSONC document must be str or bytes, "
                f"not {type(text).__name__}"
            )
        self._source = text
        self.config = config if config is not None else ParseConfig()
        self.arena = Arena()
        self.cursor = Cursor("")
        self._result: ParseResult | None = None
        self._closed = False

    def __enter__(self) -> "JsoncParser":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Releases the arena, emptying every container this parser built."""
        self.arena.release()
        self._result = None
        self._closed = True

    def parse(self) -> ParseResult:
        """
        Parses the whole document and returns the outcome.

        Syntax errors and allocation failure are reported through the
        returned ParseResult, never raised. The first call's result is
        cached. Nesting deeper than the interpreter's recursion limit raises
        RecursionError; callers handling untrusted input should bound depth
        before parsing.
        """
        if self._closed:
            raise ValueError("parse called on a closed parser")
        if self._result is None:
            self._result = self._parse_document()
        return self._result

    def _parse_document(self) -> ParseResult:
        try:
            text = self._decode()
            self.cursor = Cursor(text)
            with ProfileContext("parse_document", chars=len(text)):
                value = self._parse_root()
        except JsoncDecodeError as e:
            logger.debug("JSONC parse failed: %s", e)
            return ParseResult.failure(e.info)
        except MemoryError:
            mark = self.cursor.mark()
            logger.debug("JSONC parse ran out of memory at offset %d", mark.idx)
            return ParseResult.failure(
                ParseErrorInfo(
                    kind=ErrorKind.OUT_OF_MEMORY,
                    row=mark.row + 1,
                    col=mark.col + 1,
                    message="Out of memory",
                    pos=mark.idx,
                )
            )
        return ParseResult.success(value)

    def _decode(self) -> str:
        if isinstance(self._source, str):
            return self._source
        data = bytes(self._source)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            prefix = data[: e.start].decode("utf-8")
            raise JsoncDecodeError(
                "Invalid UTF-8 data",
                prefix,
                len(prefix),
                kind=ErrorKind.UNEXPECTED_CHARACTER,
            ) from e

    def _parse_root(self) -> JsonValue:
        if not self.cursor.length:
            raise self._error(ErrorKind.EMPTY_JSON_STRING, "Empty JSON string")
        if self.config.allow_leading_comments:
            self._skip_leading()
        return self._parse_value()

    def _skip_leading(self) -> None:
        """Consumes whitespace and comments ahead of the top-level value."""
        cursor = self.cursor
        start = cursor.mark()
        char = cursor.text[0]
        if char not in _WHITESPACE and char != "/":
            return
        if char == "/":
            self._skip_comment()
        self._skip_insignificant()
        self._step(
            ErrorKind.EMPTY_JSON_STRING, "No valid JSON value found", start
        )

    def _error(
        self, kind: ErrorKind, message: str, at: Mark | None = None
    ) -> JsoncDecodeError:
        """Builds the error for kind, anchored at ``at`` or the cursor."""
        mark = at if at is not None else self.cursor.mark()
        return JsoncDecodeError(
            message,
            self.cursor.text,
            mark.idx,
            kind=kind,
            lineno=mark.row + 1,
            colno=mark.col + 1,
        )

    def _step(self, kind: ErrorKind, message: str, at: Mark) -> None:
        """Advances one character, reporting running off the end as kind."""
        try:
            self.cursor.advance()
        except CursorBoundsError as e:
            raise self._error(kind, message, at) from e

    def _parse_value(self) -> JsonValue:
        """Routes to the builder for the value under the cursor."""
        cursor = self.cursor
        start = cursor.mark()

        # Bare whitespace only: comments are the containers' business
        while cursor.current in _WHITESPACE:
            self._step(
                ErrorKind.EMPTY_JSON_STRING, "No valid JSON value found", start
            )

        char = cursor.current
        if char in _LITERALS:
            expected, value = _LITERALS[char]
            return self._parse_literal(expected, value)
        elif char == '"':
            return self._parse_string()
        elif char == "[":
            return self._parse_array()
        elif char == "{":
            return self._parse_object()
        elif char in _NUMBER_START:
            return self._parse_number()
        else:
            raise self._error(
                ErrorKind.UNEXPECTED_CHARACTER, "Unexpected character"
            )

    def _parse_literal(self, expected: str, value: bool | None) -> bool | None:
        """Matches null, true or false exactly; no partial matches."""
        with ProfileContext("parse_literal", self.cursor):
            cursor = self.cursor
            if not cursor.text.startswith(expected, cursor.idx):
                raise self._error(ErrorKind.INVALID_TOKEN, "Invalid token")
            cursor.advance(len(expected) - 1)
            return value

    def _parse_string(self) -> str:
        """
        Copies characters up to the closing quote, decoding simple escapes.

        The six recognised escapes are decoded; any other backslash sequence
        is kept as written, backslash included. The cursor is left on the
        closing quote.
        """
        with ProfileContext("parse_string", self.cursor):
            cursor = self.cursor
            start = cursor.mark()
            chars: list[str] = []

            while True:
                self._step(
                    ErrorKind.UNTERMINATED_STRING, "Unterminated string", start
                )
                char = cursor.text[cursor.idx]

                if char == '"':
                    return "".join(chars)
                elif char in _NEWLINES:
                    # Report the last character that belonged to the string
                    raise self._error(
                        ErrorKind.UNTERMINATED_STRING,
                        "Unterminated string",
                        Mark(cursor.idx - 1, cursor.row, cursor.col - 1),
                    )
                elif char == "\\":
                    self._step(
                        ErrorKind.UNTERMINATED_STRING,
                        "Unterminated string",
                        start,
                    )
                    escaped = cursor.text[cursor.idx]
                    chars.append(_ESCAPES.get(escaped, "\\" + escaped))
                else:
                    chars.append(char)

    def _parse_number(self) -> Any:
        """
        Scans the longest run that extends the number grammar.

        The scan steps onto the first character past the run and then
        retreats, unless the run reaches the end of the input.
        """
        with ProfileContext("parse_number", self.cursor):
            cursor = self.cursor
            start = cursor.mark()
            run: list[str] = []
            has_digit = has_dot = has_exp = False

            while True:
                char = cursor.text[cursor.idx]
                after_exp = bool(run) and run[-1] in _EXPONENT

                if char in _DIGITS:
                    has_digit = True
                elif char == "-":
                    if run and not after_exp:
                        break
                elif char == ".":
                    if has_dot or has_exp:
                        break
                    has_dot = True
                elif char in _EXPONENT:
                    if has_exp or not has_digit:
                        break
                    has_exp = True
                elif char == "+":
                    if not after_exp:
                        break
                else:
                    break

                run.append(char)
                try:
                    cursor.advance()
                except CursorBoundsError:
                    return self._convert_number(
                        "".join(run), has_dot or has_exp, start
                    )

            if not run:
                raise self._error(ErrorKind.INVALID_NUMBER, "Invalid number")
            cursor.retreat()
            return self._convert_number("".join(run), has_dot or has_exp, start)

    def _convert_number(self, text: str, is_float: bool, start: Mark) -> Any:
        config = self.config
        try:
            if is_float:
                if config.parse_float:
                    return config.parse_float(text)
                return float(text)
            if config.parse_int:
                return config.parse_int(text)
            value = int(text)
        except (ValueError, ArithmeticError) as e:
            raise self._error(
                ErrorKind.INVALID_NUMBER, "Invalid number", start
            ) from e

        if not _INT64_MIN <= value <= _INT64_MAX:
            raise self._error(
                ErrorKind.INVALID_NUMBER,
                "Integer does not fit in 64 bits",
                start,
            )
        return value

    def _parse_array(self) -> list[Any]:
        """
        Parses elements up to the matching bracket.

        A trailing comma before ``]`` is tolerated; a comma with no element
        before it is not.
        """
        with ProfileContext("parse_array", self.cursor):
            cursor = self.cursor
            start = cursor.mark()
            array = self.arena.new_array()
            awaiting_element = True

            while True:
                self._skip_insignificant()
                self._step(
                    ErrorKind.UNTERMINATED_ARRAY, "Array is not closed", start
                )
                char = cursor.text[cursor.idx]

                if char == "]":
                    return array
                elif char == "}":
                    raise self._error(
                        ErrorKind.UNTERMINATED_ARRAY,
                        "Array is not closed",
                        start,
                    )
                elif char == ",":
                    if awaiting_element:
                        raise self._error(
                            ErrorKind.EMPTY_ELEMENT,
                            "Empty content of array is not allowed",
                        )
                    awaiting_element = True
                elif not awaiting_element:
                    raise self._error(
                        ErrorKind.MISSING_COMMA,
                        'Missing "," between array elements',
                    )
                else:
                    array.append(self._parse_value())
                    awaiting_element = False

    def _parse_object(self) -> Any:
        """Parses members up to the matching brace, then applies hooks."""
        with ProfileContext("parse_object", self.cursor):
            cursor = self.cursor
            start = cursor.mark()
            pairs: list[tuple[str, Any]] = []

            self._skip_insignificant()
            self._step_in_object(start)
            if cursor.text[cursor.idx] != "}":
                while True:
                    pairs.append(self._parse_member(start))

                    self._skip_insignificant()
                    self._step_in_object(start)
                    char = cursor.text[cursor.idx]
                    if char == "}":
                        break
                    if char != ",":
                        raise self._error(
                            ErrorKind.MISSING_COMMA,
                            'Missing "," after value',
                        )

                    self._skip_insignificant()
                    self._step_in_object(start)

            return self._build_object(pairs)

    def _step_in_object(self, start: Mark) -> None:
        self._step(ErrorKind.UNTERMINATED_OBJECT, "Object is not closed", start)

    def _parse_member(self, start: Mark) -> tuple[str, Any]:
        """Parses one ``"key": value`` pair starting at the key's quote."""
        cursor = self.cursor
        char = cursor.text[cursor.idx]
        if char == ",":
            raise self._error(
                ErrorKind.EMPTY_ELEMENT,
                "Empty content of object is not allowed",
            )
        if char != '"':
            raise self._error(
                ErrorKind.INCOMPLETE_KEY_VALUE_PAIR, "Invalid key string"
            )
        key = self.arena.intern(self._parse_string())

        self._skip_insignificant()
        self._step_in_object(start)
        if cursor.text[cursor.idx] != ":":
            raise self._error(
                ErrorKind.INCOMPLETE_KEY_VALUE_PAIR,
                '":" is missing after key of object',
            )

        self._skip_insignificant()
        self._step_in_object(start)
        return key, self._parse_value()

    def _build_object(self, pairs: list[tuple[str, Any]]) -> Any:
        """Applies object hooks to parsed pairs."""
        config = self.config
        if config.object_pairs_hook is not None:
            return config.object_pairs_hook(pairs)

        # Repeated keys keep their first position and take the last value
        obj = self.arena.new_object()
        obj.update(pairs)
        if config.object_hook is not None:
            return config.object_hook(obj)
        return obj

    def _skip_insignificant(self) -> None:
        """
        Consumes whitespace and comments following the cursor.

        Stops with the cursor on the last consumed character, so the next
        step lands on the following significant character.
        """
        cursor = self.cursor
        while (char := cursor.peek()) is not None:
            if char in _WHITESPACE:
                cursor.advance()
            elif char == "/":
                cursor.advance()
                self._skip_comment()
            else:
                return

    def _skip_comment(self) -> None:
        """Consumes the comment whose opening slash is under the cursor."""
        cursor = self.cursor
        start = cursor.mark()
        if not self.config.allow_comments:
            raise self._error(
                ErrorKind.UNEXPECTED_TOKEN, "Comments are not allowed", start
            )

        opener = cursor.peek()
        if opener == "/":
            cursor.advance()
            while (char := cursor.peek()) is not None and char != "\n":
                cursor.advance()
        elif opener == "*":
            cursor.advance()
            while True:
                self._step(
                    ErrorKind.UNCLOSED_COMMENT,
                    "Comments should be closed with '*/'",
                    start,
                )
                if cursor.text[cursor.idx] == "*" and cursor.peek() == "/":
                    cursor.advance()
                    return
        else:
            raise self._error(
                ErrorKind.INVALID_TOKEN, "Invalid token for comment open", start
            )
