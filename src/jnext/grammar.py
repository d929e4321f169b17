"""
The JSON grammar as a table of states.

Each state lists its transition rules in priority order. A rule looks at the
next character (without it being consumed for it), advances the cursor itself
when it matches and returns the next state, or returns None to let the next
rule try. The first match wins and no rule is ever retried, so every state's
rule order has to put the correct alternative first.

States with a `nested` action parse a complete inner value (member name,
member value, array element) on entry, through a recursive call into the
automaton, and store it with the given callback.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeAlias

from jnext.context import ParseContext
from jnext.helpers import (
    is_digit,
    is_high_surrogate,
    is_low_surrogate,
    is_nonzero_digit,
)
from jnext.types import ErrorCode, State
from jnext.values import (
    ObjectBuilder,
    append_char,
    assign_member,
    finalize_number,
    finalize_object,
    finalize_string,
    join_surrogate,
    push_element,
    register_key,
    set_value,
)

Rule: TypeAlias = Callable[[str, ParseContext], Optional[State]]
Predicate: TypeAlias = Callable[[str], bool]
EntryAction: TypeAlias = Callable[[ParseContext], None]
StoreAction: TypeAlias = Callable[[ParseContext, Any], None]

ESCAPES: Dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}


@dataclass(frozen=True)
class Nested:
    store: StoreAction
    # Replaces the inner failure code when set.
    error_code: Optional[ErrorCode] = None


@dataclass(frozen=True)
class StateSpec:
    rules: List[Rule] = field(default_factory=list)
    error_code: Optional[ErrorCode] = None
    skip_whitespace: bool = False
    on_enter: Optional[EntryAction] = None
    nested: Optional[Nested] = None
    is_final: bool = False


def one_of(chars: str) -> Predicate:
    accepted = frozenset(chars)
    return lambda ch: ch in accepted


def _as_predicate(match: str | Predicate) -> Predicate:
    return one_of(match) if isinstance(match, str) else match


def expect(match: str | Predicate, next_state: State) -> Rule:
    """Consume a matching character without storing it."""
    predicate = _as_predicate(match)

    def rule(ch: str, context: ParseContext) -> Optional[State]:
        if predicate(ch):
            context.advance()
            return next_state
        return None

    return rule


def accumulate(match: str | Predicate, next_state: State) -> Rule:
    """Consume a matching character and append it to the value in progress."""
    predicate = _as_predicate(match)

    def rule(ch: str, context: ParseContext) -> Optional[State]:
        if predicate(ch):
            context.advance()
            append_char(context, ch)
            return next_state
        return None

    return rule


def lookahead(match: str | Predicate, next_state: State) -> Rule:
    """Move on when the character matches, leaving it for the next state."""
    predicate = _as_predicate(match)

    def rule(ch: str, context: ParseContext) -> Optional[State]:
        return next_state if predicate(ch) else None

    return rule


def otherwise(next_state: State) -> Rule:
    def rule(ch: str, context: ParseContext) -> Optional[State]:
        return next_state

    return rule


def escape(ch: str, replacement: str) -> Rule:
    def rule(next_ch: str, context: ParseContext) -> Optional[State]:
        if next_ch == ch:
            context.advance()
            append_char(context, replacement)
            return State.STRING_CHAR
        return None

    return rule


def literal(text: str, value: Any) -> Rule:
    def rule(ch: str, context: ParseContext) -> Optional[State]:
        if ch == text[0] and context.skip_literal(text):
            set_value(context, value)
            return State.END_LITERAL
        return None

    return rule


def is_unescaped(ch: str) -> bool:
    return ch != "" and ord(ch) > 0x1F


def is_number_start(ch: str) -> bool:
    return ch == "-" or is_digit(ch)


def unicode_escape(ch: str, context: ParseContext) -> Optional[State]:
    hex_string = context.skip_hex()
    if hex_string is None:
        return None
    code = int(hex_string, 16)
    append_char(context, chr(code))
    if is_high_surrogate(code):
        return State.STRING_LOW_SURROGATE
    return State.STRING_CHAR


def low_surrogate_escape(ch: str, context: ParseContext) -> Optional[State]:
    start = context.cursor
    hex_string = context.skip_unicode_escape()
    if hex_string is None:
        return None
    code = int(hex_string, 16)
    if not is_low_surrogate(code):
        context.cursor = start
        return None
    join_surrogate(context, code)
    return State.STRING_CHAR


def _begin_object(context: ParseContext) -> None:
    set_value(context, ObjectBuilder())


def _begin_sequence(context: ParseContext) -> None:
    set_value(context, [])


def _leading_zero(context: ParseContext) -> None:
    context.advance()
    append_char(context, "0")


STATES: Dict[State, StateSpec] = {
    State.START: StateSpec(
        rules=[otherwise(State.VALUE)],
    ),
    State.VALUE: StateSpec(
        skip_whitespace=True,
        rules=[
            expect("{", State.BEGIN_OBJECT),
            expect("[", State.BEGIN_ARRAY),
            expect('"', State.BEGIN_STRING),
            lookahead(is_number_start, State.BEGIN_NUMBER),
            literal("true", True),
            literal("false", False),
            literal("null", None),
        ],
        error_code=ErrorCode.MISSING_VALUE,
    ),
    # object
    State.BEGIN_OBJECT: StateSpec(
        skip_whitespace=True,
        on_enter=_begin_object,
        rules=[
            expect("}", State.END_OBJECT),
            otherwise(State.MEMBER),
        ],
    ),
    State.MEMBER: StateSpec(
        skip_whitespace=True,
        rules=[lookahead('"', State.MEMBER_NAME)],
        error_code=ErrorCode.MISSING_MEMBER_NAME,
    ),
    State.MEMBER_NAME: StateSpec(
        nested=Nested(register_key, ErrorCode.INVALID_MEMBER_NAME),
        rules=[expect(":", State.MEMBER_VALUE)],
        error_code=ErrorCode.MISSING_COLON,
    ),
    State.MEMBER_VALUE: StateSpec(
        nested=Nested(assign_member),
        rules=[
            expect("}", State.END_OBJECT),
            expect(",", State.MEMBER),
        ],
        error_code=ErrorCode.INVALID_OBJECT,
    ),
    State.END_OBJECT: StateSpec(
        skip_whitespace=True,
        on_enter=finalize_object,
        is_final=True,
    ),
    # array
    State.BEGIN_ARRAY: StateSpec(
        skip_whitespace=True,
        on_enter=_begin_sequence,
        rules=[
            expect("]", State.END_ARRAY),
            otherwise(State.ARRAY_ELEMENT),
        ],
    ),
    State.ARRAY_ELEMENT: StateSpec(
        nested=Nested(push_element),
        rules=[
            expect("]", State.END_ARRAY),
            expect(",", State.ARRAY_ELEMENT),
        ],
        error_code=ErrorCode.INVALID_ARRAY,
    ),
    State.END_ARRAY: StateSpec(
        skip_whitespace=True,
        is_final=True,
    ),
    # string
    State.BEGIN_STRING: StateSpec(
        on_enter=_begin_sequence,
        rules=[otherwise(State.STRING_CHAR)],
    ),
    State.STRING_CHAR: StateSpec(
        rules=[
            expect('"', State.END_STRING),
            expect("\\", State.STRING_ESCAPED_CHAR),
            accumulate(is_unescaped, State.STRING_CHAR),
        ],
        error_code=ErrorCode.INVALID_STRING,
    ),
    State.STRING_ESCAPED_CHAR: StateSpec(
        rules=[
            *(escape(ch, replacement) for ch, replacement in ESCAPES.items()),
            expect("u", State.STRING_UNICODE_CHAR),
        ],
        error_code=ErrorCode.INVALID_ESCAPE_CHAR,
    ),
    State.STRING_UNICODE_CHAR: StateSpec(
        rules=[unicode_escape],
        error_code=ErrorCode.INVALID_UNICODE_HEX_STRING,
    ),
    State.STRING_LOW_SURROGATE: StateSpec(
        rules=[low_surrogate_escape],
        error_code=ErrorCode.MISSING_HIGH_SURROGATE,
    ),
    State.END_STRING: StateSpec(
        skip_whitespace=True,
        on_enter=finalize_string,
        is_final=True,
    ),
    # number
    State.BEGIN_NUMBER: StateSpec(
        on_enter=_begin_sequence,
        rules=[
            accumulate("-", State.NUMBER),
            otherwise(State.NUMBER),
        ],
    ),
    State.NUMBER: StateSpec(
        rules=[
            lookahead("0", State.NUMBER_STARTING_ZERO),
            lookahead(is_nonzero_digit, State.NUMBER_INTEGER),
        ],
        error_code=ErrorCode.INVALID_NUMBER,
    ),
    State.NUMBER_STARTING_ZERO: StateSpec(
        on_enter=_leading_zero,
        rules=[
            accumulate(".", State.BEGIN_NUMBER_FRACTION),
            accumulate("eE", State.BEGIN_NUMBER_EXPONENT),
            lookahead(lambda ch: not is_digit(ch), State.END_NUMBER),
        ],
        error_code=ErrorCode.INVALID_NUMBER,
    ),
    State.NUMBER_INTEGER: StateSpec(
        rules=[
            accumulate(is_digit, State.NUMBER_INTEGER),
            accumulate(".", State.BEGIN_NUMBER_FRACTION),
            accumulate("eE", State.BEGIN_NUMBER_EXPONENT),
            otherwise(State.END_NUMBER),
        ],
    ),
    State.BEGIN_NUMBER_FRACTION: StateSpec(
        rules=[accumulate(is_digit, State.NUMBER_FRACTION)],
        error_code=ErrorCode.INVALID_NUMBER_FRACTION,
    ),
    State.NUMBER_FRACTION: StateSpec(
        rules=[
            accumulate(is_digit, State.NUMBER_FRACTION),
            accumulate("eE", State.BEGIN_NUMBER_EXPONENT),
            otherwise(State.END_NUMBER),
        ],
    ),
    State.BEGIN_NUMBER_EXPONENT: StateSpec(
        rules=[
            accumulate("+-", State.BEGIN_NUMBER_EXPONENT_DIGITS),
            lookahead(is_digit, State.NUMBER_EXPONENT_DIGITS),
        ],
        error_code=ErrorCode.INVALID_NUMBER_EXPONENT,
    ),
    State.BEGIN_NUMBER_EXPONENT_DIGITS: StateSpec(
        rules=[accumulate(is_digit, State.NUMBER_EXPONENT_DIGITS)],
        error_code=ErrorCode.INVALID_NUMBER_EXPONENT,
    ),
    State.NUMBER_EXPONENT_DIGITS: StateSpec(
        rules=[
            accumulate(is_digit, State.NUMBER_EXPONENT_DIGITS),
            otherwise(State.END_NUMBER),
        ],
    ),
    State.END_NUMBER: StateSpec(
        skip_whitespace=True,
        on_enter=finalize_number,
        is_final=True,
    ),
    # literal
    State.END_LITERAL: StateSpec(
        skip_whitespace=True,
        is_final=True,
    ),
}
