import pytest

from jnext.context import ParseContext
from jnext.grammar import (
    ESCAPES,
    STATES,
    accumulate,
    escape,
    expect,
    literal,
    lookahead,
    one_of,
    otherwise,
)
from jnext.types import FINAL_STATES, ErrorCode, State


def test_every_state_has_a_spec():
    assert set(STATES) == set(State)


def test_final_states():
    assert {state for state, spec in STATES.items() if spec.is_final} == FINAL_STATES
    for state in FINAL_STATES:
        assert STATES[state].rules == []
        assert STATES[state].skip_whitespace


def test_non_final_states_can_always_fail_or_move_on():
    for state, spec in STATES.items():
        if spec.is_final:
            continue
        assert spec.rules, state
        # without an error code the last rule must match unconditionally
        if spec.error_code is None:
            context = ParseContext("")
            with context.slot():
                assert spec.rules[-1]("", context) is not None, state


@pytest.mark.parametrize(
    "state,error_code",
    [
        (State.VALUE, ErrorCode.MISSING_VALUE),
        (State.MEMBER, ErrorCode.MISSING_MEMBER_NAME),
        (State.MEMBER_NAME, ErrorCode.MISSING_COLON),
        (State.MEMBER_VALUE, ErrorCode.INVALID_OBJECT),
        (State.ARRAY_ELEMENT, ErrorCode.INVALID_ARRAY),
        (State.STRING_CHAR, ErrorCode.INVALID_STRING),
        (State.STRING_ESCAPED_CHAR, ErrorCode.INVALID_ESCAPE_CHAR),
        (State.STRING_UNICODE_CHAR, ErrorCode.INVALID_UNICODE_HEX_STRING),
        (State.STRING_LOW_SURROGATE, ErrorCode.MISSING_HIGH_SURROGATE),
        (State.NUMBER, ErrorCode.INVALID_NUMBER),
        (State.NUMBER_STARTING_ZERO, ErrorCode.INVALID_NUMBER),
        (State.BEGIN_NUMBER_FRACTION, ErrorCode.INVALID_NUMBER_FRACTION),
        (State.BEGIN_NUMBER_EXPONENT, ErrorCode.INVALID_NUMBER_EXPONENT),
        (State.BEGIN_NUMBER_EXPONENT_DIGITS, ErrorCode.INVALID_NUMBER_EXPONENT),
    ],
)
def test_state_error_codes(state: State, error_code: ErrorCode):
    assert STATES[state].error_code is error_code


def test_nested_states():
    nested = {state for state, spec in STATES.items() if spec.nested is not None}
    assert nested == {State.MEMBER_NAME, State.MEMBER_VALUE, State.ARRAY_ELEMENT}
    assert STATES[State.MEMBER_NAME].nested.error_code is ErrorCode.INVALID_MEMBER_NAME
    assert STATES[State.MEMBER_VALUE].nested.error_code is None
    assert STATES[State.ARRAY_ELEMENT].nested.error_code is None


def test_whitespace_is_skipped_only_around_structure():
    skipping = {state for state, spec in STATES.items() if spec.skip_whitespace}
    assert skipping == {
        State.VALUE,
        State.BEGIN_OBJECT,
        State.MEMBER,
        State.BEGIN_ARRAY,
    } | FINAL_STATES


def test_one_of():
    predicate = one_of("eE")
    assert predicate("e")
    assert predicate("E")
    assert not predicate("x")
    assert not predicate("")


def test_expect_consumes_on_match():
    context = ParseContext(":1")
    rule = expect(":", State.MEMBER_VALUE)
    assert rule("x", context) is None
    assert context.cursor == 0
    assert rule(":", context) is State.MEMBER_VALUE
    assert context.cursor == 1


def test_accumulate_appends_matched_char():
    context = ParseContext("12")
    with context.slot():
        context.top = []
        rule = accumulate("0123456789".__contains__, State.NUMBER_INTEGER)
        assert rule("1", context) is State.NUMBER_INTEGER
        assert context.top == ["1"]
        assert context.cursor == 1


def test_lookahead_does_not_consume():
    context = ParseContext('"a"')
    rule = lookahead('"', State.MEMBER_NAME)
    assert rule('"', context) is State.MEMBER_NAME
    assert context.cursor == 0


def test_otherwise_always_matches():
    context = ParseContext("")
    assert otherwise(State.VALUE)("", context) is State.VALUE
    assert context.cursor == 0


@pytest.mark.parametrize("ch,replacement", list(ESCAPES.items()))
def test_escape_rules(ch: str, replacement: str):
    context = ParseContext(ch)
    with context.slot():
        context.top = []
        assert escape(ch, replacement)(ch, context) is State.STRING_CHAR
        assert context.top == [replacement]
        assert context.cursor == 1


@pytest.mark.parametrize(
    "buffer,value",
    [
        ("true", True),
        ("false", False),
        ("null", None),
    ],
)
def test_literal_rule(buffer: str, value):
    context = ParseContext(buffer)
    with context.slot():
        rule = literal(buffer, value)
        assert rule(buffer[0], context) is State.END_LITERAL
        assert context.top is value
        assert context.cursor == len(buffer)


def test_literal_rule__partial_match_consumes_nothing():
    context = ParseContext("nul")
    with context.slot():
        assert literal("null", None)("n", context) is None
        assert context.cursor == 0
