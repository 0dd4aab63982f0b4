"""Keyboard input sources.

The game loop polls an :class:`InputSource` once per tick without blocking:
if ``key_pending()`` is false the tick proceeds with no player action.
"""

import curses
from collections import deque
from typing import Any, Deque, Iterable, Optional, Protocol

from grid_shooter.actions import Action, action_for_key


class InputSource(Protocol):
    def key_pending(self) -> bool: ...

    def read_key(self) -> str: ...


def poll_action(source: InputSource) -> Action:
    """Consume at most one pending key and translate it to an ``Action``."""
    key: Optional[str] = source.read_key() if source.key_pending() else None
    return action_for_key(key)


class CursesInput:
    """Non-blocking reader over a curses window.

    ``getch`` is called with ``nodelay`` enabled; a key read by
    :meth:`key_pending` is buffered until :meth:`read_key` consumes it.
    """

    def __init__(self, window: Any) -> None:
        self._window = window
        self._window.nodelay(True)
        self._buffered: Optional[str] = None

    def key_pending(self) -> bool:
        if self._buffered is not None:
            return True
        code = self._window.getch()
        if code == curses.ERR or not 0 <= code < 256:
            return False
        self._buffered = chr(code)
        return True

    def read_key(self) -> str:
        if not self.key_pending():
            raise LookupError("No key pending")
        key, self._buffered = self._buffered, None
        assert key is not None
        return key


class ScriptedInput:
    """Input source replaying a fixed key sequence, one key per tick.

    ``None`` entries stand for ticks without a key press.
    """

    def __init__(self, keys: Iterable[Optional[str]] = ()) -> None:
        self._keys: Deque[Optional[str]] = deque(keys)

    def push(self, key: Optional[str]) -> None:
        self._keys.append(key)

    def key_pending(self) -> bool:
        if self._keys and self._keys[0] is None:
            self._keys.popleft()
            return False
        return bool(self._keys)

    def read_key(self) -> str:
        if not self._keys or self._keys[0] is None:
            raise LookupError("No key pending")
        key = self._keys.popleft()
        assert key is not None
        return key

    @property
    def exhausted(self) -> bool:
        return not self._keys
