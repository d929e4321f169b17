from jnext.context import ParseContext
from jnext.error import InvalidOffsetError, JSONParseError, TrailingDataError
from jnext.options import ParserOptions
from jnext.parser import iter_values, loads, parse_value
from jnext.result import ParseFailure, ParseResult, ParseSuccess
from jnext.types import ErrorCode, JsonValue, State

__all__ = [
    "ErrorCode",
    "InvalidOffsetError",
    "JSONParseError",
    "JsonValue",
    "ParseContext",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "ParserOptions",
    "State",
    "TrailingDataError",
    "iter_values",
    "loads",
    "parse_value",
]
