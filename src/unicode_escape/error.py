from unicode_escape.helpers import describe_char
from unicode_escape.types import DecodeErrorDetail, DecodeErrorKind


class DecodeError(ValueError):
    kind: DecodeErrorKind

    def __init__(
        self,
        message: str,
        position: int,
        escape_start: int,
        sequence: str,
    ) -> None:
        super().__init__(f"{message} (position {position}, sequence {sequence!r})")
        self.message = message
        self.position = position
        self.escape_start = escape_start
        self.sequence = sequence

    @property
    def detail(self) -> DecodeErrorDetail:
        return DecodeErrorDetail(
            kind=self.kind,
            position=self.position,
            escape_start=self.escape_start,
            sequence=self.sequence,
            message=self.message,
        )


class InvalidEscapeError(DecodeError):
    kind = DecodeErrorKind.INVALID_ESCAPE

    def __init__(
        self,
        character: str | None,
        position: int,
        escape_start: int,
        sequence: str,
    ) -> None:
        if character is None:
            message = "Unterminated escape sequence at end of input"
        else:
            message = f"Unknown escape selector {describe_char(character)}"
        super().__init__(message, position, escape_start, sequence)
        self.character = character


class InvalidHexCharError(DecodeError):
    kind = DecodeErrorKind.INVALID_HEX_CHAR

    def __init__(
        self,
        character: str | None,
        position: int,
        escape_start: int,
        sequence: str,
    ) -> None:
        super().__init__(
            f"Expected hex digit in '\\x' escape, got {describe_char(character)}",
            position,
            escape_start,
            sequence,
        )
        self.character = character


class InvalidUnicodeError(DecodeError):
    kind = DecodeErrorKind.INVALID_UNICODE

    def __init__(
        self,
        reason: str,
        position: int,
        escape_start: int,
        sequence: str,
    ) -> None:
        super().__init__(
            f"Invalid '\\u{{...}}' escape: {reason}", position, escape_start, sequence
        )
        self.reason = reason


class DecoderFailedError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Decoder failed on an earlier character, call reset() first"
            + (f": {message}" if message else "")
        )
