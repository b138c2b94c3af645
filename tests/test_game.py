import signal

import pytest

from config import JUMP_VELOCITY
from game import FlappyGame
from input_source import Action, ScriptedInput
from models import GameState, Obstacle
from renderer import NullRenderer
from scoring import HighScoreTracker

from tests.helpers import FakeTicker, RecordingSave

WIDTH, HEIGHT = 80, 24


def make_game(script, ticker, rng, best=0, save=None):
    renderer = NullRenderer()
    tracker = HighScoreTracker(best, save if save is not None else RecordingSave())
    game = FlappyGame(WIDTH, HEIGHT, ScriptedInput(script), renderer,
                      ticker=ticker, rng=rng, high_score=tracker)
    return game, renderer


def play_until_over(game, limit=50):
    for _ in range(limit):
        if game.step() is GameState.GAME_OVER:
            return
    raise AssertionError("round never ended")


def test_starts_in_menu(ticker, rng):
    game, renderer = make_game([], ticker, rng)
    assert game.step() is GameState.MENU
    assert renderer.frames == 1
    assert renderer.last[1] is GameState.MENU


def test_jump_in_menu_starts_round(ticker, rng):
    game, _ = make_game([[Action.JUMP]], ticker, rng)
    assert game.step() is GameState.PLAYING
    assert game.session.elapsed_ticks == 0
    assert len(game.session.obstacles) == 4


def test_bird_falls_to_the_ground(ticker, rng, saves):
    game, renderer = make_game([[Action.JUMP]], ticker, rng, save=saves)
    game.step()
    play_until_over(game)
    assert game.session.elapsed_ticks == 9
    assert game.session.running is False
    assert game.is_new_record is False
    assert saves.values == []
    assert renderer.last[1] is GameState.GAME_OVER


def test_jumps_in_one_tick_collapse(ticker, rng):
    game, _ = make_game([[Action.JUMP], [Action.JUMP, Action.JUMP, Action.JUMP]],
                        ticker, rng)
    game.step()
    game.step()
    assert game.session.bird.velocity == JUMP_VELOCITY
    assert game.session.bird.y == pytest.approx(12.0 + JUMP_VELOCITY * 0.05)


def test_clearing_a_pipe_scores(ticker, rng):
    game, _ = make_game([[Action.JUMP]] * 11, ticker, rng)
    game.step()
    game.session.obstacles[:] = [Obstacle(x=11.0, gap_start=0, gap_end=HEIGHT)]
    for _ in range(10):
        assert game.step() is GameState.PLAYING
    assert game.session.score == 1


def test_new_record_celebrates_and_writes_once(ticker, rng, saves):
    game, renderer = make_game([[Action.JUMP]], ticker, rng, best=2, save=saves)
    game.step()
    game.session.score = 3
    play_until_over(game)
    assert game.is_new_record is True
    assert game.high_score.best == 3
    assert saves.values == [3]
    snap, state = renderer.last
    assert state is GameState.GAME_OVER
    assert snap.is_new_record and snap.high_score == 3


def test_score_not_above_best_writes_nothing(ticker, rng, saves):
    game, _ = make_game([[Action.JUMP]], ticker, rng, best=5, save=saves)
    game.step()
    game.session.score = 5
    play_until_over(game)
    assert game.is_new_record is False
    assert saves.values == []


def test_game_over_waits_for_retry(ticker, rng):
    game, _ = make_game([[Action.JUMP]], ticker, rng)
    game.step()
    play_until_over(game)
    game.input = ScriptedInput([[Action.JUMP], [], [Action.RETRY]])
    assert game.step() is GameState.GAME_OVER
    assert game.step() is GameState.GAME_OVER
    assert game.step() is GameState.PLAYING
    assert game.session.score == 0
    assert game.session.bird.y == HEIGHT // 2
    assert game.session.elapsed_ticks == 0


def test_quit_from_menu(ticker, rng, saves):
    game, _ = make_game([[Action.QUIT]], ticker, rng, save=saves)
    assert game.step() is GameState.QUIT
    assert game.step() is GameState.QUIT
    assert saves.values == []


def test_quit_mid_round_writes_nothing(ticker, rng, saves):
    game, _ = make_game([[Action.JUMP], [Action.QUIT]], ticker, rng, best=1,
                        save=saves)
    game.step()
    game.session.score = 4
    assert game.step() is GameState.QUIT
    assert saves.values == []
    assert game.high_score.best == 1
    assert game.session.running is False


def test_failed_write_is_retried_on_quit(ticker, rng):
    save = RecordingSave(results=[False, True])
    game, _ = make_game([[Action.JUMP]], ticker, rng, save=save)
    game.step()
    game.session.score = 2
    play_until_over(game)
    assert game.high_score.pending
    game.input = ScriptedInput([[Action.QUIT]])
    game.step()
    assert save.values == [2, 2]
    assert not game.high_score.pending


def test_interrupt_quits_at_next_tick(ticker, rng):
    game, _ = make_game([[Action.JUMP]], ticker, rng)
    game.step()
    game._on_interrupt(signal.SIGINT, None)
    assert game.step() is GameState.QUIT


def test_lagging_drops_frames_but_not_ticks(rng):
    ticker = FakeTicker(lagging=True)
    game, renderer = make_game([[Action.JUMP]], ticker, rng)
    game.step()
    for _ in range(5):
        game.step()
    assert game.session.elapsed_ticks == 5
    assert renderer.frames == 1


def test_frame_drop_is_bounded(rng):
    ticker = FakeTicker(lagging=True)
    game, renderer = make_game([], ticker, rng)
    for _ in range(12):
        game.step()
    assert renderer.frames == 2


def test_run_loops_until_quit(ticker, rng):
    game, renderer = make_game([[], [], [Action.QUIT]], ticker, rng, best=7)
    before = signal.getsignal(signal.SIGINT)
    assert game.run() == 7
    assert game.state is GameState.QUIT
    assert ticker.waits == 3
    assert renderer.frames == 3
    assert signal.getsignal(signal.SIGINT) == before


def test_finished_session_never_ticks(ticker, rng):
    game, _ = make_game([[Action.JUMP]], ticker, rng)
    game.step()
    play_until_over(game)
    ticks, bird_y = game.session.elapsed_ticks, game.session.bird.y
    game.state = GameState.PLAYING
    game.step()
    assert game.session.elapsed_ticks == ticks
    assert game.session.bird.y == bird_y
