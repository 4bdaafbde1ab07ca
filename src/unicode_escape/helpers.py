from unicode_escape.types import MAX_SCALAR_VALUE, SURROGATE_MAX, SURROGATE_MIN

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex_digit(ch: str) -> bool:
    # `str.isdigit` and friends accept non-ASCII digits
    return ch in HEX_DIGITS


def is_surrogate(code_point: int) -> bool:
    return SURROGATE_MIN <= code_point <= SURROGATE_MAX


def is_scalar_value(code_point: int) -> bool:
    return 0 <= code_point <= MAX_SCALAR_VALUE and not is_surrogate(code_point)


def describe_char(ch: str | None) -> str:
    if ch is None:
        return "end of input"
    if ch.isprintable():
        return f"'{ch}'"
    return f"U+{ord(ch):04X}"
