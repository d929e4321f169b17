from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_DEPTH = 200


class ParserOptions(BaseModel):
    """
    Settings for a single parse.

    `max_depth` bounds the value stack. Every nested production (member name,
    member value, array element) takes one slot, so the bound also keeps the
    recursive descent clear of the interpreter's recursion limit.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)


DEFAULT_OPTIONS = ParserOptions()
