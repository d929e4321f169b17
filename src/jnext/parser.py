from typing import Any, Iterator, Optional

from jnext.automaton import run
from jnext.context import ParseContext
from jnext.error import JSONParseError, TrailingDataError
from jnext.options import ParserOptions
from jnext.result import ParseFailure, ParseResult, ParseSuccess


def parse_value(
    buffer: str,
    offset: int = 0,
    options: Optional[ParserOptions] = None,
) -> ParseResult:
    """
    Parse the JSON value starting at `offset` in `buffer`.

    Whitespace around the value is consumed. Anything after it is left alone,
    so the returned offset can be passed back in to read the next value.
    """
    context = ParseContext(buffer, offset, options)
    return run(context)


def iter_values(
    buffer: str,
    offset: int = 0,
    options: Optional[ParserOptions] = None,
) -> Iterator[ParseSuccess]:
    while True:
        context = ParseContext(buffer, offset, options)
        context.skip_whitespace()
        if context.at_end():
            return
        result = run(context)
        if isinstance(result, ParseFailure):
            raise JSONParseError(result.code, result.offset, buffer)
        yield result
        offset = result.offset


def loads(buffer: str, options: Optional[ParserOptions] = None) -> Any:
    result = parse_value(buffer, 0, options)
    value = result.raise_for_error(buffer)
    if result.offset != len(buffer):
        raise TrailingDataError(result.offset, buffer)
    return value
