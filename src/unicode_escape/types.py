from enum import Enum
from typing import Set

from pydantic import BaseModel, ConfigDict

MAX_HEX_DIGITS = 2
MAX_UNICODE_DIGITS = 6
MAX_SCALAR_VALUE = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


class State(Enum):
    NORMAL = "normal"
    ERROR = "error"
    # escape
    AFTER_BACKSLASH = "after_backslash"
    HEX_ESCAPE = "hex_escape"
    UNICODE_ESCAPE = "unicode_escape"


ESCAPE_STATES: Set[State] = {
    State.AFTER_BACKSLASH,
    State.HEX_ESCAPE,
    State.UNICODE_ESCAPE,
}


class DecodeErrorKind(Enum):
    INVALID_ESCAPE = "invalid_escape"
    INVALID_HEX_CHAR = "invalid_hex_char"
    INVALID_UNICODE = "invalid_unicode"


class DecodeErrorDetail(BaseModel):
    """Serialisable description of a failed decode."""

    model_config = ConfigDict(frozen=True)

    kind: DecodeErrorKind
    position: int
    escape_start: int
    sequence: str
    message: str
