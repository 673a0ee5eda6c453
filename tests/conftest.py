"""
Pytest configuration and shared fixtures for jzonc tests.

Provides immutable test data fixtures so test modules share one source of
truth for inputs, expected values and expected error locations.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from jzonc import ErrorKind


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSONC test case data.

    Holds test input and expected behavior for consistent test execution.
    Failing cases carry the expected error kind and 1-indexed location.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    kind: ErrorKind | None = None
    row: int = 0
    col: int = 0


def _fail(
    description: str, input_data: str, kind: ErrorKind, row: int, col: int
) -> JsonTestCase:
    return JsonTestCase(description, input_data, True, None, kind, row, col)


FAIL_CASES = [
    _fail("empty input", "", ErrorKind.EMPTY_JSON_STRING, 1, 1),
    _fail("whitespace only", "  \n ", ErrorKind.EMPTY_JSON_STRING, 1, 1),
    _fail("misspelled null", "nul invalid", ErrorKind.INVALID_TOKEN, 1, 1),
    _fail("misspelled true", "[truth]", ErrorKind.INVALID_TOKEN, 1, 2),
    _fail(
        "missing closing quote",
        '"Hello world',
        ErrorKind.UNTERMINATED_STRING,
        1,
        1,
    ),
    _fail(
        "backslash at end of input",
        '"abc\\',
        ErrorKind.UNTERMINATED_STRING,
        1,
        1,
    ),
    _fail(
        "raw newline in string",
        '["a\nb"]',
        ErrorKind.UNTERMINATED_STRING,
        1,
        3,
    ),
    _fail("empty array element", "[1, , 3]", ErrorKind.EMPTY_ELEMENT, 1, 5),
    _fail("leading comma", "[, 1]", ErrorKind.EMPTY_ELEMENT, 1, 2),
    _fail(
        "empty element on later line",
        "[\n  1,\n  ,\n]",
        ErrorKind.EMPTY_ELEMENT,
        3,
        3,
    ),
    _fail("array missing comma", "[1 2]", ErrorKind.MISSING_COMMA, 1, 4),
    _fail("two dots in number", "[1.2.3]", ErrorKind.MISSING_COMMA, 1, 5),
    _fail("unclosed array", "[1, 2", ErrorKind.UNTERMINATED_ARRAY, 1, 1),
    _fail("lone bracket", "[", ErrorKind.UNTERMINATED_ARRAY, 1, 1),
    _fail("mismatched close", "[1}", ErrorKind.UNTERMINATED_ARRAY, 1, 1),
    _fail(
        "nested mismatched close",
        '{"a": [1, 2}',
        ErrorKind.UNTERMINATED_ARRAY,
        1,
        7,
    ),
    _fail(
        "line comment swallows bracket",
        "[1 // trailing comment]",
        ErrorKind.UNTERMINATED_ARRAY,
        1,
        1,
    ),
    _fail("unclosed object", '{"a": 1', ErrorKind.UNTERMINATED_OBJECT, 1, 1),
    _fail("lone brace", "{", ErrorKind.UNTERMINATED_OBJECT, 1, 1),
    _fail(
        "missing colon",
        '{"a" 1}',
        ErrorKind.INCOMPLETE_KEY_VALUE_PAIR,
        1,
        6,
    ),
    _fail(
        "unquoted key",
        "{a: 1}",
        ErrorKind.INCOMPLETE_KEY_VALUE_PAIR,
        1,
        2,
    ),
    _fail(
        "trailing comma in object",
        '{"a": 1,}',
        ErrorKind.INCOMPLETE_KEY_VALUE_PAIR,
        1,
        9,
    ),
    _fail(
        "double comma in object",
        '{"a": 1,, "b": 2}',
        ErrorKind.EMPTY_ELEMENT,
        1,
        9,
    ),
    _fail(
        "object missing comma",
        '{"a": 1 "b": 2}',
        ErrorKind.MISSING_COMMA,
        1,
        9,
    ),
    _fail(
        "missing member value",
        '{"a": }',
        ErrorKind.UNEXPECTED_CHARACTER,
        1,
        7,
    ),
    _fail("single quotes", "['x']", ErrorKind.UNEXPECTED_CHARACTER, 1, 2),
    _fail("bare word", "x", ErrorKind.UNEXPECTED_CHARACTER, 1, 1),
    _fail(
        "indented bad character",
        "  @",
        ErrorKind.UNEXPECTED_CHARACTER,
        1,
        3,
    ),
    _fail("lone minus", "[-]", ErrorKind.INVALID_NUMBER, 1, 2),
    _fail("exponent without digits", "e5", ErrorKind.INVALID_NUMBER, 1, 1),
    _fail(
        "integer overflow",
        "[9223372036854775808]",
        ErrorKind.INVALID_NUMBER,
        1,
        2,
    ),
    _fail(
        "unclosed block comment",
        "[1, /* open",
        ErrorKind.UNCLOSED_COMMENT,
        1,
        5,
    ),
    _fail("lone slash", "[1, / 2]", ErrorKind.INVALID_TOKEN, 1, 5),
    _fail(
        "comment before top-level value",
        "// lead\n[1]",
        ErrorKind.UNEXPECTED_CHARACTER,
        1,
        1,
    ),
    _fail(
        "unterminated string value in object",
        '{\n  "lang": "zig,\n  "version" : 0.14\n}',
        ErrorKind.UNTERMINATED_STRING,
        2,
        15,
    ),
    _fail(
        "unopened string value in object",
        '{\n  "lang": zig",\n  "version" : 0.14\n}',
        ErrorKind.UNEXPECTED_CHARACTER,
        2,
        11,
    ),
    _fail(
        "missing comma between value and next key",
        '{\n  "lang": "zig"\n  "version" : 0.14\n}',
        ErrorKind.MISSING_COMMA,
        3,
        3,
    ),
    _fail(
        "unterminated array in object",
        '{\n  "lang": "English",\n'
        '  "greeting": [  "Good morning" , "Hello", "Good evening"\n}',
        ErrorKind.UNTERMINATED_ARRAY,
        3,
        15,
    ),
]


@pytest.fixture
def jsonc_fail_cases() -> list[JsonTestCase]:
    """
    Provides malformed documents with their expected error locations.

    Each location points at the offending character, except for
    unterminated containers and strings, which point at their opener.
    """
    return FAIL_CASES


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides comment-free documents that a reference JSON reader accepts.

    The documents avoid \\b, \\f and \\u escapes, which jzonc deliberately
    leaves undecoded.
    """
    return [
        JsonTestCase(
            description="pass1 - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
2e+00,
2e-00,
"rosebud"]""",
        ),
        JsonTestCase(
            description="pass2 - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3 - simple object",
            input_data=(
                '{"JSON Test Pattern pass3": {"The outermost value": '
                '"must be an object or array.", "In this test": '
                '"It is an object."}}'
            ),
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("negative integer", "-17", False, -17),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]
