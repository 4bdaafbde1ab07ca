from unicode_escape.decoder import EscapeDecoder, IDecoder, decode
from unicode_escape.error import (
    DecodeError,
    DecoderFailedError,
    InvalidEscapeError,
    InvalidHexCharError,
    InvalidUnicodeError,
)
from unicode_escape.types import DecodeErrorDetail, DecodeErrorKind, State

__all__ = [
    "DecodeError",
    "DecodeErrorDetail",
    "DecodeErrorKind",
    "DecoderFailedError",
    "EscapeDecoder",
    "IDecoder",
    "InvalidEscapeError",
    "InvalidHexCharError",
    "InvalidUnicodeError",
    "State",
    "decode",
]
