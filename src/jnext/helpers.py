from typing import Set

DIGITS: Set[str] = set("0123456789")
NONZERO_DIGITS: Set[str] = set("123456789")
HEX_DIGITS: Set[str] = set("0123456789abcdefABCDEF")
JSON_WHITESPACE: Set[str] = {" ", "\t", "\n", "\r"}

HIGH_SURROGATE_RANGE = range(0xD800, 0xDC00)
LOW_SURROGATE_RANGE = range(0xDC00, 0xE000)


# An empty string stands for "past the end of the buffer" and is rejected by
# every predicate.
def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_nonzero_digit(ch: str) -> bool:
    return ch in NONZERO_DIGITS


def is_hex_digit(ch: str) -> bool:
    return ch in HEX_DIGITS


def is_json_whitespace(ch: str) -> bool:
    return ch in JSON_WHITESPACE


def is_high_surrogate(code: int) -> bool:
    """First half of a UTF-16 surrogate pair (0xD800-0xDBFF)."""
    return code in HIGH_SURROGATE_RANGE


def is_low_surrogate(code: int) -> bool:
    """Second half of a UTF-16 surrogate pair (0xDC00-0xDFFF)."""
    return code in LOW_SURROGATE_RANGE


def combine_surrogates(high: int, low: int) -> int:
    if not is_high_surrogate(high) or not is_low_surrogate(low):
        raise ValueError(
            f"Cannot combine {high:#06x} and {low:#06x} into a surrogate pair."
        )
    return 0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)
