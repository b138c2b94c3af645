# input_source.py - Keyboard Polling
"""
Non-blocking key polling, translated to game actions.
"""

from __future__ import annotations

import curses
from enum import Enum
from typing import Iterable


class Action(Enum):
    NONE = "none"
    JUMP = "jump"
    RETRY = "retry"
    QUIT = "quit"


KEY_ESCAPE = 27
KEY_CTRL_C = 3  # Delivered as a byte when the terminal is in raw mode

KEY_BINDINGS = {
    ord(" "): Action.JUMP,
    ord("w"): Action.JUMP,
    curses.KEY_UP: Action.JUMP,
    ord("r"): Action.RETRY,
    ord("R"): Action.RETRY,
    ord("q"): Action.QUIT,
    ord("Q"): Action.QUIT,
    KEY_ESCAPE: Action.QUIT,
    KEY_CTRL_C: Action.QUIT,
}


def action_for_key(key: int) -> Action:
    """Map a curses key code to an action; unbound keys map to NONE."""
    return KEY_BINDINGS.get(key, Action.NONE)


class CursesInput:
    """Reads keys from a curses window without blocking."""

    def __init__(self, window) -> None:
        self.window = window
        self.window.nodelay(True)  # getch() returns -1 when nothing is pending
        self.window.keypad(True)
        curses.set_escdelay(25)  # Deliver Escape without the default 1 s wait

    def poll(self) -> Action:
        """Return the action of the next bound key, or NONE if none is pending."""
        while True:
            key = self.window.getch()
            if key == -1:
                return Action.NONE
            action = action_for_key(key)
            if action is not Action.NONE:
                return action


class ScriptedInput:
    """
    Replays a fixed script, one batch of actions per tick boundary.

    A batch is used up when poll() reports NONE, so the game's per-tick drain
    moves the script forward by exactly one batch.
    """

    def __init__(self, script: Iterable[Iterable[Action]]) -> None:
        self._batches = [list(batch) for batch in script]

    def poll(self) -> Action:
        if not self._batches:
            return Action.NONE
        batch = self._batches[0]
        if batch:
            return batch.pop(0)
        self._batches.pop(0)
        return Action.NONE
