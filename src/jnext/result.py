from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict

from jnext.error import JSONParseError
from jnext.types import ErrorCode


class ParseSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Any
    offset: int

    @property
    def ok(self) -> bool:
        return True

    def raise_for_error(self, buffer: str = "") -> Any:
        return self.value


class ParseFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    offset: int

    @property
    def ok(self) -> bool:
        return False

    def raise_for_error(self, buffer: str = "") -> Any:
        raise JSONParseError(self.code, self.offset, buffer)


ParseResult: TypeAlias = ParseSuccess | ParseFailure
