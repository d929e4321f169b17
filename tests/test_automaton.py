import pytest

from jnext.automaton import run
from jnext.context import ParseContext
from jnext.options import ParserOptions
from jnext.result import ParseFailure, ParseSuccess
from jnext.types import ErrorCode, State


@pytest.mark.parametrize(
    "buffer",
    [
        '{"a": [1, {"b": null}]}',
        "[1, 2",
        '"abc',
        "",
    ],
)
def test_run_leaves_value_stack_empty(buffer: str):
    context = ParseContext(buffer)
    run(context)
    assert context.stack == []


def test_run_moves_cursor_past_value_and_whitespace():
    context = ParseContext("[true] \n false")
    result = run(context)
    assert isinstance(result, ParseSuccess)
    assert result.value == [True]
    assert context.cursor == result.offset == 9


def test_run_reuses_context_for_next_value():
    context = ParseContext("1 2")
    first = run(context)
    second = run(context)
    assert isinstance(first, ParseSuccess)
    assert isinstance(second, ParseSuccess)
    assert (first.value, first.offset) == (1.0, 2)
    assert (second.value, second.offset) == (2.0, 3)


def test_run_from_value_state():
    context = ParseContext("  null")
    result = run(context, State.VALUE)
    assert isinstance(result, ParseSuccess)
    assert result.value is None
    assert result.offset == 6


def test_run_stops_at_first_failure():
    context = ParseContext('[1, {"a": tru}, 3]')
    result = run(context)
    assert isinstance(result, ParseFailure)
    assert result.code is ErrorCode.MISSING_VALUE
    assert result.offset == 10


@pytest.mark.parametrize(
    "buffer,max_depth,offset",
    [
        ("[[1]]", 2, 2),
        ('{"a":1}', 1, 1),
        ('{"a":[1]}', 2, 6),
        ('{ "a": {  "b": 1}}', 2, 10),
        ("1", 1, None),
        ("[[1]]", 3, None),
    ],
)
def test_run_depth_limit(buffer: str, max_depth: int, offset):
    context = ParseContext(buffer, options=ParserOptions(max_depth=max_depth))
    result = run(context)
    if offset is None:
        assert isinstance(result, ParseSuccess)
    else:
        assert isinstance(result, ParseFailure)
        assert result.code is ErrorCode.MAXIMUM_DEPTH_EXCEEDED
        assert result.offset == offset


def test_run_default_depth_limit_guards_recursion():
    buffer = "[" * 5000 + "]" * 5000
    result = run(ParseContext(buffer))
    assert isinstance(result, ParseFailure)
    assert result.code is ErrorCode.MAXIMUM_DEPTH_EXCEEDED
    assert result.offset == 200


def test_run_accepts_nesting_up_to_default_limit():
    buffer = "[" * 199 + "]" * 199
    result = run(ParseContext(buffer))
    assert isinstance(result, ParseSuccess)
    assert result.offset == len(buffer)


def test_run_recursion_limit_below_max_depth():
    buffer = "[" * 5000 + "]" * 5000
    context = ParseContext(buffer, options=ParserOptions(max_depth=100_000))
    result = run(context)
    assert isinstance(result, ParseFailure)
    assert result.code is ErrorCode.MAXIMUM_DEPTH_EXCEEDED
    assert 0 < result.offset < 5000
    assert context.stack == []
