from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

State = TypeVar("State")


class Automaton(Generic[State]):
    """
    Current state of the escape decoder together with the escape sequence
    being collected. `pending` holds every character since the backslash,
    `escape_start` the input index of that backslash.
    """

    def __init__(self, start_state: State) -> None:
        self._start_state: State = start_state
        self._state: State = start_state
        self._pending: List[str] = []
        self._escape_start: Optional[int] = None

    @property
    def state(self) -> State:
        return self._state

    @property
    def pending(self) -> str:
        return "".join(self._pending)

    @property
    def escape_start(self) -> Optional[int]:
        return self._escape_start

    def set_state(self, new_state: State) -> None:
        self._state = new_state

    def open_escape(self, position: int, introducer: str, new_state: State) -> None:
        if self._escape_start is not None:
            raise RuntimeError("An escape sequence is already open.")
        self._escape_start = position
        self._pending = [introducer]
        self._state = new_state

    def collect(self, ch: str) -> None:
        if self._escape_start is None:
            raise RuntimeError("No escape sequence is open.")
        self._pending.append(ch)

    def close_escape(self) -> str:
        if self._escape_start is None:
            raise RuntimeError("No escape sequence is open.")
        sequence = self.pending
        self._pending = []
        self._escape_start = None
        self._state = self._start_state
        return sequence

    def reset(self) -> None:
        self._state = self._start_state
        self._pending = []
        self._escape_start = None
