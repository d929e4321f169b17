from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from jnext.error import InvalidOffsetError
from jnext.helpers import is_hex_digit, is_json_whitespace
from jnext.options import DEFAULT_OPTIONS, ParserOptions

HEX_STRING_LENGTH = 4


class _EmptySlot:
    def __repr__(self) -> str:
        return "<empty slot>"


EMPTY_SLOT: Any = _EmptySlot()


class ParseContext:
    """
    Cursor and value stack shared by one top-level parse and every nested
    parse it triggers. Reading past the end of the buffer yields "".
    """

    def __init__(
        self,
        buffer: str,
        offset: int = 0,
        options: Optional[ParserOptions] = None,
    ) -> None:
        if not isinstance(buffer, str):
            raise TypeError(
                f"Buffer must be a str, not {type(buffer).__name__}."
            )
        if not 0 <= offset <= len(buffer):
            raise InvalidOffsetError(offset, len(buffer))
        self._buffer: str = buffer
        self._length: int = len(buffer)
        self._stack: List[Any] = []
        self.cursor: int = offset
        self.options: ParserOptions = options or DEFAULT_OPTIONS

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def length(self) -> int:
        return self._length

    @property
    def stack(self) -> List[Any]:
        return self._stack

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def top(self) -> Any:
        if not self._stack:
            raise IndexError("Value stack is empty.")
        return self._stack[-1]

    @top.setter
    def top(self, value: Any) -> None:
        if not self._stack:
            raise IndexError("Value stack is empty.")
        self._stack[-1] = value

    @contextmanager
    def slot(self) -> Iterator[None]:
        self._stack.append(EMPTY_SLOT)
        try:
            yield
        finally:
            self._stack.pop()

    def at_end(self) -> bool:
        return self.cursor >= self._length

    def peek(self) -> str:
        if self.cursor >= self._length:
            return ""
        return self._buffer[self.cursor]

    def advance(self, count: int = 1) -> None:
        self.cursor = min(self.cursor + count, self._length)

    def skip_whitespace(self) -> None:
        while self.cursor < self._length and is_json_whitespace(
            self._buffer[self.cursor]
        ):
            self.cursor += 1

    def skip_literal(self, literal: str) -> bool:
        if self._buffer.startswith(literal, self.cursor):
            self.cursor += len(literal)
            return True
        return False

    def skip_hex(self) -> Optional[str]:
        # Consumes the valid prefix so a failure points at the offending char.
        start = self.cursor
        for _ in range(HEX_STRING_LENGTH):
            if not is_hex_digit(self.peek()):
                return None
            self.cursor += 1
        return self._buffer[start : self.cursor]

    def skip_unicode_escape(self) -> Optional[str]:
        if self.peek() != "\\":
            return None
        self.cursor += 1
        if self.peek() != "u":
            return None
        self.cursor += 1
        return self.skip_hex()
