"""
Error taxonomy and result types for JSONC parsing.

Every failure the parser can report is described by an ErrorKind plus a
1-indexed row/column. Builders raise JsoncDecodeError; the top-level parse
entry point folds it into a ParseResult so callers never see an exception
for malformed input unless they ask for one via ParseResult.unwrap().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """Kinds of parse failure, one per distinct syntax violation."""

    INVALID_TOKEN = "invalid_token"
    INVALID_NUMBER = "invalid_number"
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNTERMINATED_STRING = "unterminated_string"
    UNTERMINATED_ARRAY = "unterminated_array"
    UNTERMINATED_OBJECT = "unterminated_object"
    UNCLOSED_COMMENT = "unclosed_comment"
    INCOMPLETE_KEY_VALUE_PAIR = "incomplete_key_value_pair"
    MISSING_COMMA = "missing_comma"
    EMPTY_JSON_STRING = "empty_json_string"
    EMPTY_ELEMENT = "empty_element"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    OUT_OF_MEMORY = "out_of_memory"


@dataclass(frozen=True)
class ParseErrorInfo:
    """
    Describes where and why a parse failed.

    Row and column are 1-indexed and point at the offending character, not
    at the start of the enclosing value.
    """

    kind: ErrorKind
    row: int
    col: int
    message: str
    pos: Position = 0


class JsoncDecodeError(ValueError):
    """
    Handles JSONC parsing failures with precise position information.

    When lineno/colno are not supplied they are derived from doc and pos,
    which keeps the exception usable outside the parser as well.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        *,
        kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind

        if lineno is None:
            lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        if colno is None:
            colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1
        self.lineno = lineno
        self.colno = colno

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def info(self) -> ParseErrorInfo:
        """Returns the immutable error record for this failure."""
        return ParseErrorInfo(
            kind=self.kind,
            row=self.lineno,
            col=self.colno,
            message=self.msg,
            pos=self.pos,
        )

    @classmethod
    def from_info(
        cls, info: ParseErrorInfo, doc: str = ""
    ) -> "JsoncDecodeError":
        return cls(
            info.message,
            doc,
            info.pos,
            kind=info.kind,
            lineno=info.row,
            colno=info.col,
        )


class CursorBoundsError(JsoncDecodeError):
    """Raised when the cursor would step outside the input text."""

    def __init__(
        self, doc: str, pos: Position, lineno: int, colno: int
    ) -> None:
        super().__init__(
            "An unexpected boundary crossing occurred during parsing",
            doc,
            pos,
            kind=ErrorKind.INDEX_OUT_OF_BOUNDS,
            lineno=lineno,
            colno=colno,
        )


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a single parse: exactly one of value or error is meaningful.

    A successful parse of ``null`` has value None and error None, so callers
    must test ``ok`` rather than the truthiness of value.
    """

    value: Any = None
    error: ParseErrorInfo | None = None

    @classmethod
    def success(cls, value: Any) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ParseErrorInfo) -> "ParseResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Returns the parsed value or raises the recorded error."""
        if self.error is not None:
            raise JsoncDecodeError.from_info(self.error)
        return self.value
