# main.py - Application Entry Point
"""
Main entry point for Terminal Flap.
Sets up logging and the terminal, then starts the game.
"""

import curses  # Terminal control
import sys

from config import LOG_FILE, LOG_LEVEL, MIN_SCREEN_HEIGHT, MIN_SCREEN_WIDTH
from game import FlappyGame  # Main game class
from highscore import load_high_score, save_high_score
from input_source import CursesInput
from logger import get_logger, setup_logging
from renderer import CursesRenderer
from scoring import HighScoreTracker

log = get_logger("main")


class TerminalError(Exception):
    """The terminal cannot host the game."""


def play(stdscr, tracker: HighScoreTracker) -> int:
    """Run the game inside an initialized curses screen."""
    try:
        curses.curs_set(0)  # Hide cursor
    except curses.error:
        pass  # Some terminals cannot hide it

    height, width = stdscr.getmaxyx()
    if height < MIN_SCREEN_HEIGHT or width < MIN_SCREEN_WIDTH:
        raise TerminalError(
            f"terminal is {width}x{height}, need at least "
            f"{MIN_SCREEN_WIDTH}x{MIN_SCREEN_HEIGHT}")

    game = FlappyGame(width, height, CursesInput(stdscr), CursesRenderer(stdscr),
                      high_score=tracker)
    return game.run()


def main() -> int:
    """Configure logging, enter the terminal and play; return the exit code."""
    setup_logging(LOG_LEVEL, LOG_FILE)
    tracker = HighScoreTracker(load_high_score(), save_high_score)

    try:
        best = curses.wrapper(play, tracker)
    except TerminalError as exc:
        log.error("%s", exc)
        print(f"tflap: {exc}", file=sys.stderr)
        return 1
    except curses.error as exc:
        log.error("terminal setup failed: %s", exc)
        print(f"tflap: cannot use this terminal: {exc}", file=sys.stderr)
        return 1

    print(f"Best score: {best}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()  # Run application
