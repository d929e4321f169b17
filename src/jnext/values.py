"""
Value construction on the top slot of a context's value stack.

Objects are built through an `ObjectBuilder`, which keeps the member whose
name has been read but whose value has not, so assigning never has to search
the mapping. Builders are unwrapped into plain dicts when their object closes.
Strings and numbers accumulate as lists of characters and are joined (and,
for numbers, converted to float) when their production ends.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from jnext.context import ParseContext
from jnext.helpers import combine_surrogates, is_high_surrogate


class PendingKeyError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class ObjectBuilder:
    def __init__(self) -> None:
        self._members: Dict[str, Any] = {}
        self._pending_key: Optional[str] = None

    @property
    def members(self) -> Dict[str, Any]:
        return self._members

    @property
    def pending_key(self) -> Optional[str]:
        return self._pending_key

    def register_key(self, key: str) -> None:
        if self._pending_key is not None:
            raise PendingKeyError(
                f"Key '{key}' registered while '{self._pending_key}' still awaits a value."
            )
        # A repeated key keeps its first position and takes the latest value.
        self._members.setdefault(key, None)
        self._pending_key = key

    def assign(self, value: Any) -> None:
        if self._pending_key is None:
            raise PendingKeyError("No member name awaits a value.")
        self._members[self._pending_key] = value
        self._pending_key = None

    def build(self) -> Dict[str, Any]:
        if self._pending_key is not None:
            raise PendingKeyError(
                f"Object closed while '{self._pending_key}' still awaits a value."
            )
        return self._members


def set_value(context: ParseContext, value: Any) -> None:
    context.top = value


def append_char(context: ParseContext, ch: str) -> None:
    chars: List[str] = context.top
    chars.append(ch)


def join_surrogate(context: ParseContext, low: int) -> None:
    """Replace the trailing high surrogate of the top string with the full pair."""
    chars: List[str] = context.top
    high = ord(chars[-1]) if chars else -1
    if not is_high_surrogate(high):
        raise ValueError("Top string does not end in a high surrogate.")
    chars[-1] = chr(combine_surrogates(high, low))


def finalize_string(context: ParseContext) -> None:
    context.top = "".join(context.top)


def finalize_number(context: ParseContext) -> None:
    context.top = float("".join(context.top))


def push_element(context: ParseContext, value: Any) -> None:
    elements: List[Any] = context.top
    elements.append(value)


def register_key(context: ParseContext, key: str) -> None:
    builder: ObjectBuilder = context.top
    builder.register_key(key)


def assign_member(context: ParseContext, value: Any) -> None:
    builder: ObjectBuilder = context.top
    builder.assign(value)


def finalize_object(context: ParseContext) -> None:
    builder: ObjectBuilder = context.top
    context.top = builder.build()
