from jnext.types import ErrorCode


class InvalidOffsetError(ValueError):
    def __init__(self, offset: int, length: int) -> None:
        super().__init__(
            f"Offset {offset} is outside of the buffer (length {length})."
        )
        self.offset = offset
        self.length = length


class JSONParseError(ValueError):
    def __init__(
        self,
        code: ErrorCode,
        offset: int,
        buffer: str = "",
        message: str | None = None,
    ) -> None:
        self.code = code
        self.offset = offset
        self.buffer = buffer
        self.lineno = buffer.count("\n", 0, offset) + 1
        self.colno = offset - buffer.rfind("\n", 0, offset)
        super().__init__(
            f"{code.value} at line {self.lineno} column {self.colno} (char {offset})"
            + (f": {message}" if message else "")
        )


class TrailingDataError(JSONParseError):
    def __init__(self, offset: int, buffer: str = "") -> None:
        super().__init__(
            ErrorCode.TRAILING_DATA,
            offset,
            buffer,
            "Unexpected data after the JSON value.",
        )
