import logging
from typing import Dict, List, NoReturn, Protocol, Tuple

from unicode_escape.automaton import Automaton
from unicode_escape.error import (
    DecodeError,
    DecoderFailedError,
    InvalidEscapeError,
    InvalidHexCharError,
    InvalidUnicodeError,
)
from unicode_escape.helpers import describe_char, is_hex_digit, is_scalar_value
from unicode_escape.types import (
    ESCAPE_STATES,
    MAX_HEX_DIGITS,
    MAX_SCALAR_VALUE,
    MAX_UNICODE_DIGITS,
    State,
)

log = logging.getLogger(__name__)


class IDecoder(Protocol):
    def push(self, ch: str) -> str | None: ...

    def finish(self) -> str: ...

    def reset(self) -> None: ...

    @property
    def buffer(self) -> str: ...


class EscapeDecoder:
    r"""
    Push decoder for text containing backslash escape sequences.
    Handles simple escapes like \n, \t, \r, \\, \', \", \0, byte escapes \xHH
    and code point escapes \u{H..HHHHHH}.

    Characters are fed one at a time with `push`; `finish` marks the end of
    input. The first malformed escape raises a `DecodeError` and leaves the
    decoder in the error state until `reset` is called.
    """

    escape_map: Dict[str, str] = {
        "n": "\n",
        "t": "\t",
        "r": "\r",
        "\\": "\\",
        "'": "'",
        '"': '"',
        "0": "\0",
        "a": "\a",
        "b": "\b",
        "f": "\f",
        "v": "\v",
    }

    def __init__(self) -> None:
        self._buffer: List[str] = []
        self._position = 0
        self._automaton = Automaton[State](State.NORMAL)
        self._digits = ""
        self._brace_open = False
        self._failure_message: str | None = None

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    @property
    def position(self) -> int:
        return self._position

    @property
    def state(self) -> State:
        return self._automaton.state

    @property
    def is_pending(self) -> bool:
        return self._automaton.state in ESCAPE_STATES

    def push(self, ch: str) -> str | None:
        if len(ch) != 1:
            raise ValueError(f"push() expects a single character, got {ch!r}")
        if self._automaton.state == State.ERROR:
            raise DecoderFailedError(self._failure_message)

        position = self._position
        self._position += 1
        try:
            decoded = self._step(ch, position)
        except DecodeError as e:
            self._automaton.set_state(State.ERROR)
            self._failure_message = e.message
            log.debug(f"decode failed at position {position}: {e.message}")
            raise

        if decoded is not None:
            self._buffer.append(decoded)
        return decoded

    def feed(self, text: str) -> str:
        decoded = [self.push(ch) for ch in text]
        return "".join(d for d in decoded if d is not None)

    def finish(self) -> str:
        state = self._automaton.state
        if state == State.ERROR:
            raise DecoderFailedError(self._failure_message)
        if state in ESCAPE_STATES:
            self._automaton.set_state(State.ERROR)
            error = self._end_of_input_error(state)
            self._failure_message = error.message
            log.debug(f"decode failed at end of input: {error.message}")
            raise error
        return self.buffer

    def reset(self) -> None:
        self._buffer = []
        self._position = 0
        self._automaton.reset()
        self._digits = ""
        self._brace_open = False
        self._failure_message = None

    def _step(self, ch: str, position: int) -> str | None:
        state = self._automaton.state

        if state == State.NORMAL:
            if ch == "\\":
                self._automaton.open_escape(position, ch, State.AFTER_BACKSLASH)
                return None
            return ch

        if state == State.AFTER_BACKSLASH:
            if ch in self.escape_map:
                self._automaton.close_escape()
                return self.escape_map[ch]
            self._automaton.collect(ch)
            if ch == "x":
                self._digits = ""
                self._automaton.set_state(State.HEX_ESCAPE)
                return None
            if ch == "u":
                self._digits = ""
                self._brace_open = False
                self._automaton.set_state(State.UNICODE_ESCAPE)
                return None
            escape_start, sequence = self._escape_context()
            raise InvalidEscapeError(ch, position, escape_start, sequence)

        if state == State.HEX_ESCAPE:
            return self._step_hex(ch, position)

        if state == State.UNICODE_ESCAPE:
            return self._step_unicode(ch, position)

        raise RuntimeError(f"Unhandled decoder state '{state.value}'")

    def _step_hex(self, ch: str, position: int) -> str | None:
        self._automaton.collect(ch)
        if not is_hex_digit(ch):
            escape_start, sequence = self._escape_context()
            raise InvalidHexCharError(ch, position, escape_start, sequence)

        self._digits += ch
        if len(self._digits) < MAX_HEX_DIGITS:
            return None

        # byte values map onto the Latin-1 block
        byte_value = int(self._digits, 16)
        self._digits = ""
        self._automaton.close_escape()
        return chr(byte_value)

    def _step_unicode(self, ch: str, position: int) -> str | None:
        self._automaton.collect(ch)

        if not self._brace_open:
            if ch != "{":
                self._fail_unicode(
                    f"expected '{{' after '\\u', got {describe_char(ch)}", position
                )
            self._brace_open = True
            return None

        if ch == "}":
            if not self._digits:
                self._fail_unicode("empty code point", position)
            code_point = int(self._digits, 16)
            if not is_scalar_value(code_point):
                self._fail_unicode(
                    f"code point U+{code_point:04X} is not a scalar value", position
                )
            self._digits = ""
            self._brace_open = False
            self._automaton.close_escape()
            return chr(code_point)

        if not is_hex_digit(ch):
            self._fail_unicode(
                f"expected hex digit or '}}', got {describe_char(ch)}", position
            )
        if len(self._digits) == MAX_UNICODE_DIGITS:
            self._fail_unicode(
                f"more than {MAX_UNICODE_DIGITS} hex digits", position
            )

        self._digits += ch
        # appending digits never makes the value smaller
        code_point = int(self._digits, 16)
        if code_point > MAX_SCALAR_VALUE:
            self._fail_unicode(
                f"code point {self._digits.upper()} exceeds U+{MAX_SCALAR_VALUE:X}",
                position,
            )
        return None

    def _fail_unicode(self, reason: str, position: int) -> NoReturn:
        escape_start, sequence = self._escape_context()
        raise InvalidUnicodeError(reason, position, escape_start, sequence)

    def _end_of_input_error(self, state: State) -> DecodeError:
        escape_start, sequence = self._escape_context()
        if state == State.HEX_ESCAPE:
            return InvalidHexCharError(None, self._position, escape_start, sequence)
        if state == State.UNICODE_ESCAPE:
            missing = "'}'" if self._brace_open else "'{'"
            return InvalidUnicodeError(
                f"expected {missing}, got end of input",
                self._position,
                escape_start,
                sequence,
            )
        return InvalidEscapeError(None, self._position, escape_start, sequence)

    def _escape_context(self) -> Tuple[int, str]:
        escape_start = self._automaton.escape_start
        if escape_start is None:
            raise RuntimeError("No escape sequence is open.")
        return escape_start, self._automaton.pending


def decode(text: str) -> str:
    """
    Decode every escape sequence in `text`.

    Raises a `DecodeError` subclass on the first malformed escape; no partial
    result is returned in that case.
    """
    if not isinstance(text, str):
        raise TypeError(f"decode() expects str, got {type(text).__name__}")
    decoder = EscapeDecoder()
    decoder.feed(text)
    return decoder.finish()
