from typing import List, Tuple

import pytest
from PIL import Image

from grid_snake.actions import Action
from grid_snake.components import DOWN, UP, Position
from grid_snake.config import BoardSizeError, GameConfig
from grid_snake.difficulty import tick_interval_ms
from grid_snake.game import Game, GameContext
from grid_snake.renderer.texture import TextureRenderer
from grid_snake.scheduler import PollingScheduler
from grid_snake.types import GamePhase
from tests.test_utils import FakeClock, make_game, make_state


def test_not_started_game_ignores_input() -> None:
    game, _, scheduler, _ = make_game()
    game.handle_action(Action.LEFT)
    game.handle_action(Action.RESTART)
    assert game.phase == GamePhase.NOT_STARTED
    assert game.state is None
    assert game.score is None
    assert scheduler.pending == []


def test_start_spawns_and_arms_first_tick() -> None:
    game, _, scheduler, ui = make_game()
    game.start()

    assert game.phase == GamePhase.RUNNING
    assert game.state is not None and game.snake is not None
    assert game.state.food is not None
    assert game.state.food.position not in game.snake.positions
    assert game.score == 1
    assert ui.score == 1
    assert not ui.lost_visible
    assert len(scheduler.pending) == 1
    assert scheduler.next_due_ms() == 290


def test_tick_fires_at_difficulty_interval() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    assert game.state is not None

    clock.advance(289)
    assert scheduler.run_due() == 0
    assert game.state.turn == 0

    clock.advance(1)
    assert scheduler.run_due() == 1
    assert game.state.turn == 1
    assert game.phase == GamePhase.RUNNING
    assert game.score is not None
    assert scheduler.next_due_ms() == 290 + tick_interval_ms(game.score)


def test_eating_updates_score_and_speeds_up() -> None:
    game, clock, scheduler, ui = make_game()
    game.start()
    game.state = make_state([(6, 6)], UP, food=(5, 6))

    clock.advance(290)
    scheduler.run_due()

    assert game.score == 2
    assert ui.score == 2
    assert game.snake is not None
    assert len(game.snake.positions) == 2
    assert scheduler.next_due_ms() == pytest.approx(290 + tick_interval_ms(2))


def test_direction_change_is_read_by_next_tick() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    game.state = make_state([(6, 6)], UP, food=(0, 0))

    game.handle_action(Action.LEFT)
    game.handle_key("ArrowDown")  # LEFT -> DOWN is a legal turn
    clock.advance(290)
    scheduler.run_due()

    assert game.snake is not None
    assert game.snake.head == Position(7, 6)


def test_reverse_direction_is_rejected() -> None:
    game, _, _, _ = make_game()
    game.start()
    game.state = make_state([(6, 6), (7, 6)], UP, food=(0, 0))
    game.handle_action(Action.DOWN)
    assert game.snake is not None
    assert game.snake.direction == UP


def test_hitting_wall_loses_and_stops_ticking() -> None:
    game, clock, scheduler, ui = make_game()
    game.start()
    game.state = make_state([(0, 3)], UP, food=(5, 5))

    clock.advance(290)
    scheduler.run_due()

    assert game.phase == GamePhase.LOST
    assert game.has_lost
    assert ui.lost_visible
    assert game.pending_tick is None
    assert scheduler.pending == []
    clock.advance(10_000)
    assert scheduler.run_due() == 0


def test_input_after_loss_only_accepts_restart() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    game.state = make_state([(0, 3)], UP, food=(5, 5))
    clock.advance(290)
    scheduler.run_due()
    lost_state = game.state

    game.handle_action(Action.LEFT)
    assert game.state is lost_state

    game.handle_key("r")
    assert game.phase == GamePhase.RUNNING


def test_restart_after_loss_resets_session() -> None:
    game, clock, scheduler, ui = make_game()
    game.start()
    game.state = make_state([(0, 3), (1, 3), (2, 3)], UP, food=(5, 5), score=9)
    clock.advance(290)
    scheduler.run_due()
    assert game.has_lost

    game.handle_action(Action.RESTART)

    assert game.phase == GamePhase.RUNNING
    assert game.state is not None and game.snake is not None
    assert game.state.food is not None
    assert game.score == 1
    assert not game.state.lose
    assert game.state.turn == 0
    assert len(game.snake.positions) == 1
    assert game.state.food.position not in game.snake.positions
    assert ui.score == 1
    assert not ui.lost_visible
    assert len(scheduler.pending) == 1


def test_restart_while_running_is_ignored() -> None:
    game, _, scheduler, _ = make_game()
    game.start()
    state = game.state
    assert not game.retry()
    game.handle_action(Action.RESTART)
    assert game.state is state
    assert len(scheduler.pending) == 1


def test_start_cancels_previous_sessions_tick() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    first = game.pending_tick
    assert first is not None

    clock.advance(100)
    game.start()

    assert first.cancelled
    assert len(scheduler.pending) == 1
    clock.advance(190)
    assert scheduler.run_due() == 0
    clock.advance(100)
    assert scheduler.run_due() == 1
    assert game.state is not None and game.state.turn == 1


def test_filling_board_wins() -> None:
    game, clock, scheduler, ui = make_game()
    game.start()
    game.state = make_state(
        [(0, 0), (0, 1), (1, 1)], DOWN, food=(1, 0), rows=2, cols=2
    )

    clock.advance(290)
    scheduler.run_due()

    assert game.phase == GamePhase.WON
    assert game.is_over and not game.has_lost
    assert ui.won_visible
    assert scheduler.pending == []
    assert game.retry()
    assert game.phase == GamePhase.RUNNING


def test_stop_drops_pending_tick() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    game.stop()
    clock.advance(1000)
    assert scheduler.run_due() == 0
    assert game.phase == GamePhase.RUNNING


def test_prompted_size_is_asked_on_every_start() -> None:
    sizes: List[Tuple[int, int]] = [(8, 10), (9, 12)]
    asked: List[Tuple[int, int]] = []

    def ask() -> Tuple[int, int]:
        asked.append(sizes[len(asked)])
        return asked[-1]

    game, clock, scheduler, _ = make_game(GameConfig.sized(12, 12, seed=1), ask)
    game.start()
    assert game.state is not None
    assert (game.state.rows, game.state.cols) == (8, 10)
    assert (game.context.board.rows, game.context.board.cols) == (8, 10)

    game.state = make_state([(0, 3)], UP, food=(5, 5), rows=8, cols=10)
    clock.advance(290)
    scheduler.run_due()
    game.retry()

    assert (game.state.rows, game.state.cols) == (9, 12)
    assert len(asked) == 2


def test_prompted_size_out_of_range_raises() -> None:
    game, _, _, _ = make_game(GameConfig.sized(12, 12), lambda: (7, 10))
    with pytest.raises(BoardSizeError):
        game.start()


def test_fixed_variant_never_asks() -> None:
    def ask() -> Tuple[int, int]:
        raise AssertionError("fixed board must not prompt")

    game, _, _, _ = make_game(GameConfig.fixed(), ask)
    game.start()
    assert game.state is not None
    assert (game.state.rows, game.state.cols) == (12, 12)


def test_same_seed_same_session() -> None:
    first, _, _, _ = make_game(GameConfig.fixed(seed=42))
    second, _, _, _ = make_game(GameConfig.fixed(seed=42))
    first.start()
    second.start()
    assert first.state == second.state


def test_renderer_receives_each_frame() -> None:
    clock = FakeClock()
    context = GameContext.create(
        GameConfig.fixed(seed=3),
        scheduler=PollingScheduler(clock=clock),
        renderer=TextureRenderer(resolution=120),
    )
    game = Game(context)
    game.start()

    frame = context.board.frame
    assert isinstance(frame, Image.Image)
    assert frame.size == (120, 120)

    clock.advance(290)
    context.scheduler.run_due()
    assert context.board.frame is not frame


def test_description_is_json_friendly() -> None:
    game, _, _, _ = make_game()
    game.start()
    game.state = make_state([(6, 6), (7, 6)], UP, food=(1, 2))
    description = game.state.description
    assert description["snake"]["positions"] == [[6, 6], [7, 6]]
    assert description["snake"]["direction"] == [-1, 0]
    assert description["food"] == [1, 2]
    assert description["score"] == 1
    assert "lose" not in description


def test_rejected_prompted_size_keeps_running_session_ticking() -> None:
    sizes = iter([(8, 8), (7, 8)])
    game, clock, scheduler, _ = make_game(
        GameConfig.sized(12, 12, seed=4), lambda: next(sizes)
    )
    game.start()
    state = game.state
    pending = game.pending_tick

    with pytest.raises(BoardSizeError):
        game.start()

    assert game.state is state
    assert game.pending_tick is pending
    assert pending is not None and pending.active
    assert (game.context.board.rows, game.context.board.cols) == (8, 8)
    clock.advance(290)
    assert scheduler.run_due() == 1


def test_typed_keys_steer_and_restart() -> None:
    game, clock, scheduler, _ = make_game()
    game.start()
    game.state = make_state([(0, 6)], UP, food=(9, 9))

    game.handle_key("a")
    clock.advance(290)
    scheduler.run_due()
    assert game.snake is not None
    assert game.snake.head == Position(0, 5)

    game.handle_key("w")
    clock.advance(tick_interval_ms(1))
    scheduler.run_due()
    assert game.has_lost

    game.handle_key("r")
    assert game.phase == GamePhase.RUNNING
