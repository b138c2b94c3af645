# renderer.py - Terminal Rendering
"""
Draws a read-only Snapshot of the game into a curses window.
Nothing here feeds back into game logic.
"""

import curses

from models import GameState, Snapshot

PIPE_GLYPH = "█"  # Full block
BIRD_GLYPH = "@"

# Colour pair ids
PAIR_PIPE = 1
PAIR_BIRD = 2
PAIR_SCORE = 3
PAIR_RECORD = 4
PAIR_OVER = 5


class CursesRenderer:
    """Renders the menu, the playfield and the end-of-round panels."""

    def __init__(self, window) -> None:
        self.window = window
        self._init_colors()

    def _init_colors(self) -> None:
        """Set up colour pairs when the terminal has colours."""
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_PIPE, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_BIRD, curses.COLOR_YELLOW, -1)
        curses.init_pair(PAIR_SCORE, curses.COLOR_CYAN, -1)
        curses.init_pair(PAIR_RECORD, curses.COLOR_YELLOW, -1)
        curses.init_pair(PAIR_OVER, curses.COLOR_RED, -1)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else 0

    def _put(self, snap: Snapshot, y: int, x: int, text: str, attr: int = 0) -> None:
        """Write text clipped to the screen."""
        if y < 0 or y >= snap.height or x >= snap.width:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[:snap.width - x]
        if not text:
            return
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            pass  # curses raises after writing the bottom-right cell

    # ------------------------------------------------------------------ #
    # FRAME
    # ------------------------------------------------------------------ #
    def draw(self, snap: Snapshot, state: GameState) -> None:
        """Draw one frame for the given game state."""
        self.window.erase()
        if state is GameState.MENU:
            self._draw_menu(snap)
        else:
            self._draw_pipes(snap)
            self._draw_bird(snap)
            self._draw_status(snap)
            if state is GameState.GAME_OVER:
                if snap.is_new_record:
                    self._draw_record_panel(snap)
                else:
                    self._draw_game_over_panel(snap)
        self.window.refresh()

    def _draw_pipes(self, snap: Snapshot) -> None:
        attr = self._attr(PAIR_PIPE)
        for pipe in snap.obstacles:
            x = int(pipe.x)
            if x + pipe.width <= 0 or x >= snap.width:
                continue
            block = PIPE_GLYPH * pipe.width
            for y in range(0, pipe.gap_start):
                self._put(snap, y, x, block, attr)
            for y in range(pipe.gap_end, snap.height):
                self._put(snap, y, x, block, attr)

    def _draw_bird(self, snap: Snapshot) -> None:
        # Row holding most of the bird
        self._put(snap, int(snap.bird_y + 0.5), snap.bird_x, BIRD_GLYPH,
                  self._attr(PAIR_BIRD) | curses.A_BOLD)

    def _draw_status(self, snap: Snapshot) -> None:
        text = f"Score: {snap.score}  High Score: {snap.high_score}"
        self._put(snap, snap.height - 1, 2, text, self._attr(PAIR_SCORE))

    def _draw_menu(self, snap: Snapshot) -> None:
        lines = [
            "T E R M I N A L   F L A P",
            "",
            f"Best: {snap.high_score}",
            "",
            "SPACE: start / flap",
            "Q: quit",
        ]
        top = snap.height // 2 - len(lines) // 2
        for i, line in enumerate(lines):
            self._put(snap, top + i, (snap.width - len(line)) // 2, line,
                      self._attr(PAIR_SCORE))

    def _draw_box(self, snap: Snapshot, rows: list, attr: int) -> None:
        inner = 26
        left = snap.width // 2 - (inner + 2) // 2
        top = snap.height // 2 - 1
        self._put(snap, top, left, "╔" + "═" * inner + "╗", attr)
        for i, row in enumerate(rows, start=1):
            self._put(snap, top + i, left, "║" + row.ljust(inner)[:inner] + "║", attr)
        self._put(snap, top + len(rows) + 1, left,
                  "╚" + "═" * inner + "╝", attr)

    def _draw_record_panel(self, snap: Snapshot) -> None:
        rows = [
            "   *** NEW RECORD! ***",
            f"   Score: {snap.score:5}",
            "",
            "   R: Retry",
            "   Q: Quit",
        ]
        self._draw_box(snap, rows, self._attr(PAIR_RECORD) | curses.A_BOLD)

    def _draw_game_over_panel(self, snap: Snapshot) -> None:
        rows = [
            "   GAME OVER!",
            f"   Score: {snap.score:5}",
            f"   Best:  {snap.high_score:5}",
            "",
            "   R: Retry",
            "   Q: Quit",
        ]
        self._draw_box(snap, rows, self._attr(PAIR_OVER))


class NullRenderer:
    """Draws nothing; counts frames so the loop can be tested headless."""

    def __init__(self) -> None:
        self.frames = 0
        self.last = None  # (snapshot, state) of the latest frame

    def draw(self, snap: Snapshot, state: GameState) -> None:
        self.frames += 1
        self.last = (snap, state)
