# game.py - Core Game Loop
"""
Main game class: owns the round, runs the fixed-tick loop and drives the
Menu -> Playing -> GameOver -> (Retry | Quit) state machine.
Input and rendering are collaborators, so the loop itself does no terminal I/O.
"""

from __future__ import annotations

import random
import signal

import collision
import physics
import scoring
from collision import CollisionResult
from config import MAX_FRAME_SKIP, TICK_RATE
from highscore import load_high_score, save_high_score
from input_source import Action
from logger import get_logger
from models import Bird, GameSession, GameState, Snapshot
from scoring import HighScoreTracker
from ticker import Ticker
from world import WorldGenerator

log = get_logger("game")


class FlappyGame:
    """One player, one screen, any number of rounds."""

    MAX_KEYS_PER_TICK = 32  # Bound on the per-tick input drain

    def __init__(self, width: int, height: int, input_source, renderer, *,
                 ticker: Ticker | None = None, rng: random.Random | None = None,
                 high_score: HighScoreTracker | None = None) -> None:
        """Initialize the game in the menu with a fresh session."""
        self.width = width
        self.height = height
        self.input = input_source
        self.renderer = renderer
        self.ticker = ticker or Ticker(TICK_RATE)
        self.world = WorldGenerator(width, height, rng)

        # Best score is loaded once, here, unless the caller brings its own
        self.high_score = high_score or HighScoreTracker(load_high_score(),
                                                         save_high_score)

        self.state = GameState.MENU
        self.is_new_record = False
        self.session = self._new_session()

        self._dropped_frames = 0
        self._interrupted = False

    # ------------------------------------------------------------------ #
    # SESSION
    # ------------------------------------------------------------------ #
    def _new_session(self) -> GameSession:
        """Bird in the middle of the screen, opening pipes queued."""
        session = GameSession(bird=Bird(y=float(self.height // 2)))
        self.world.populate(session.obstacles)
        return session

    def reset_game(self) -> None:
        """Throw away the finished round and start a new one."""
        self.session = self._new_session()
        self.is_new_record = False
        self.state = GameState.PLAYING
        log.info("round started")

    # ------------------------------------------------------------------ #
    # INPUT
    # ------------------------------------------------------------------ #
    def _drain_input(self) -> tuple[bool, bool, bool]:
        """
        Read every pending action at this tick boundary.

        Returns:
            (quit, jumped, retry): several jumps in one tick count as one.
        """
        quit_requested = self._interrupted
        jumped = retry = False
        for _ in range(self.MAX_KEYS_PER_TICK):
            action = self.input.poll()
            if action is Action.NONE:
                break
            if action is Action.QUIT:
                quit_requested = True
            elif action is Action.JUMP:
                jumped = True
            elif action is Action.RETRY:
                retry = True
        return quit_requested, jumped, retry

    def _on_interrupt(self, signum, frame) -> None:
        """SIGINT handler: ask for a quit at the next tick boundary."""
        self._interrupted = True

    # ------------------------------------------------------------------ #
    # STATES / TICK
    # ------------------------------------------------------------------ #
    def step(self) -> GameState:
        """Run exactly one tick and return the resulting state."""
        if self.state is GameState.QUIT:
            return self.state

        quit_requested, jumped, retry = self._drain_input()
        if quit_requested:
            self._quit()
            return self.state

        if self.state is GameState.MENU:
            if jumped:
                self.reset_game()
        elif self.state is GameState.PLAYING and self.session.running:
            self._play_tick(jumped)
        elif self.state is GameState.GAME_OVER:
            if retry:
                self.reset_game()

        self._render()
        return self.state

    def _play_tick(self, jumped: bool) -> None:
        """Physics, world, collision, then scoring."""
        s = self.session
        physics.advance(s.bird, jumped, self.ticker.dt, screen_height=self.height)
        self.world.tick(s.obstacles, s.elapsed_ticks)
        s.elapsed_ticks += 1

        result = collision.check(s.bird, s.obstacles, self.height)
        if result is not CollisionResult.NONE:
            self._on_game_over(result)
            return

        s.score = scoring.update(s.obstacles, s.bird.x, s.score)

    def _on_game_over(self, result: CollisionResult) -> None:
        """End the round and settle the high score."""
        self.session.running = False
        self.is_new_record = self.high_score.finalize(self.session.score)
        self.state = GameState.GAME_OVER
        log.info("round over after %d ticks: %s, score %d",
                 self.session.elapsed_ticks, result.value, self.session.score)

    def _quit(self) -> None:
        """Leave the loop; only an already-settled record is written."""
        self.session.running = False
        self.high_score.flush()
        self.state = GameState.QUIT
        log.info("quit, best score %d", self.high_score.best)

    # ------------------------------------------------------------------ #
    # RENDERING
    # ------------------------------------------------------------------ #
    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.session, self.width, self.height,
                                self.high_score.best, self.is_new_record)

    def _render(self) -> None:
        """Draw the frame unless the loop is behind schedule (bounded drop)."""
        if self.ticker.lagging and self._dropped_frames < MAX_FRAME_SKIP:
            self._dropped_frames += 1
            log.debug("dropped frame (%d in a row)", self._dropped_frames)
            return
        self._dropped_frames = 0
        self.renderer.draw(self.snapshot(), self.state)

    # ------------------------------------------------------------------ #
    # MAIN LOOP
    # ------------------------------------------------------------------ #
    def run(self) -> int:
        """
        Tick until the player quits.

        Returns:
            int: The best score when the loop ends.
        """
        previous = signal.signal(signal.SIGINT, self._on_interrupt)
        try:
            self._render()
            while self.state is not GameState.QUIT:
                self.ticker.wait()  # Sole suspension point
                self.step()
        finally:
            signal.signal(signal.SIGINT, previous)
        return self.high_score.best
