import logging
from typing import Optional

from jnext.context import ParseContext
from jnext.grammar import STATES, StateSpec
from jnext.result import ParseFailure, ParseResult, ParseSuccess
from jnext.types import ErrorCode, State

logger = logging.getLogger(__name__)


class GrammarError(Exception):
    def __init__(self, state: State, message: str) -> None:
        super().__init__(f"Grammar table is broken at state '{state.value}': {message}")
        self.state = state


def run(context: ParseContext, start: State = State.START) -> ParseResult:
    """
    Parse one value at the context's cursor on a fresh value-stack slot.

    Running out of interpreter stack before `max_depth` is reached ends the
    parse with the same failure as the depth limit.
    """
    try:
        return _run(context, start)
    except RecursionError:
        logger.debug("Recursion limit reached at offset %d", context.cursor)
        return ParseFailure(code=ErrorCode.MAXIMUM_DEPTH_EXCEEDED, offset=context.cursor)


def _run(context: ParseContext, start: State) -> ParseResult:
    # Nested productions call back into this function, so the slot lives
    # exactly as long as the production it holds.
    if context.depth >= context.options.max_depth:
        logger.debug(
            "Depth %d reached at offset %d", context.options.max_depth, context.cursor
        )
        return ParseFailure(code=ErrorCode.MAXIMUM_DEPTH_EXCEEDED, offset=context.cursor)

    with context.slot():
        state = start
        while True:
            spec = STATES[state]
            failure = _enter(spec, context)
            if failure is not None:
                return failure
            if spec.is_final:
                return ParseSuccess(value=context.top, offset=context.cursor)

            next_state = _match(spec, context)
            if next_state is None:
                if spec.error_code is None:
                    raise GrammarError(state, "no rule matched and no error code set")
                logger.debug(
                    "No transition from '%s' on %r at offset %d",
                    state.value,
                    context.peek(),
                    context.cursor,
                )
                return ParseFailure(code=spec.error_code, offset=context.cursor)
            state = next_state


def _match(spec: StateSpec, context: ParseContext) -> Optional[State]:
    ch = context.peek()
    for rule in spec.rules:
        next_state = rule(ch, context)
        if next_state is not None:
            return next_state
    return None


def _enter(spec: StateSpec, context: ParseContext) -> Optional[ParseFailure]:
    if spec.skip_whitespace:
        context.skip_whitespace()

    if spec.nested is not None:
        result = _run(context, State.START)
        if isinstance(result, ParseFailure):
            if (
                spec.nested.error_code is None
                or result.code is ErrorCode.MAXIMUM_DEPTH_EXCEEDED
            ):
                return result
            return ParseFailure(code=spec.nested.error_code, offset=result.offset)
        spec.nested.store(context, result.value)

    if spec.on_enter is not None:
        spec.on_enter(context)

    return None
