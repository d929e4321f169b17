from enum import Enum
from typing import Any, Dict, List, TypeAlias

JsonValue: TypeAlias = Dict[str, Any] | List[Any] | str | float | bool | None


class State(Enum):
    START = "start"
    VALUE = "value"
    # object
    BEGIN_OBJECT = "begin-object"
    MEMBER = "member"
    MEMBER_NAME = "member-name"
    MEMBER_VALUE = "member-value"
    END_OBJECT = "end-object"
    # array
    BEGIN_ARRAY = "begin-array"
    ARRAY_ELEMENT = "array-element"
    END_ARRAY = "end-array"
    # string
    BEGIN_STRING = "begin-string"
    STRING_CHAR = "string-char"
    STRING_ESCAPED_CHAR = "string-escaped-char"
    STRING_UNICODE_CHAR = "string-unicode-char"
    STRING_LOW_SURROGATE = "string-low-surrogate"
    END_STRING = "end-string"
    # number
    BEGIN_NUMBER = "begin-number"
    NUMBER = "number"
    NUMBER_STARTING_ZERO = "number-starting-zero"
    NUMBER_INTEGER = "number-integer"
    BEGIN_NUMBER_FRACTION = "begin-number-fraction"
    NUMBER_FRACTION = "number-fraction"
    BEGIN_NUMBER_EXPONENT = "begin-number-exponent"
    BEGIN_NUMBER_EXPONENT_DIGITS = "begin-number-exponent-digits"
    NUMBER_EXPONENT_DIGITS = "number-exponent-digits"
    END_NUMBER = "end-number"
    # literal
    END_LITERAL = "end-literal"


class ErrorCode(Enum):
    MISSING_VALUE = "MISSING_VALUE"
    MISSING_MEMBER_NAME = "MISSING_MEMBER_NAME"
    INVALID_MEMBER_NAME = "INVALID_MEMBER_NAME"
    MISSING_COLON = "MISSING_COLON"
    INVALID_OBJECT = "INVALID_OBJECT"
    INVALID_ARRAY = "INVALID_ARRAY"
    INVALID_STRING = "INVALID_STRING"
    INVALID_ESCAPE_CHAR = "INVALID_ESCAPE_CHAR"
    INVALID_UNICODE_HEX_STRING = "INVALID_UNICODE_HEX_STRING"
    MISSING_HIGH_SURROGATE = "MISSING_HIGH_SURROGATE"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_NUMBER_FRACTION = "INVALID_NUMBER_FRACTION"
    INVALID_NUMBER_EXPONENT = "INVALID_NUMBER_EXPONENT"
    MAXIMUM_DEPTH_EXCEEDED = "MAXIMUM_DEPTH_EXCEEDED"
    TRAILING_DATA = "TRAILING_DATA"


FINAL_STATES = {
    State.END_OBJECT,
    State.END_ARRAY,
    State.END_STRING,
    State.END_NUMBER,
    State.END_LITERAL,
}
