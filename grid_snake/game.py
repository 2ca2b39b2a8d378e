"""Game session orchestration.

:class:`Game` owns the current immutable :class:`grid_snake.state.State` and
drives it with one self re-arming timer:

* :meth:`Game.start` cancels any pending tick, respawns snake and food,
    draws the first frame and arms the first tick.
* Each tick runs :func:`grid_snake.step.step`, pushes score changes to the
    UI, then either redraws and re-arms at the interval for the *new* score,
    or surfaces the end of the game and stops.
* Input handlers (:meth:`Game.handle_action`) run to completion between ticks;
    a direction change is read by the next tick.

Collaborators are bundled in a :class:`GameContext` built once per app run.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from grid_snake.actions import MOVE_ACTIONS, Action, key_to_action
from grid_snake.board import Board
from grid_snake.components import Snake
from grid_snake.config import GameConfig, check_board_dimension
from grid_snake.difficulty import tick_interval_ms
from grid_snake.scheduler import PollingScheduler, Scheduler, TimerHandle
from grid_snake.state import State
from grid_snake.step import new_state, steer, step
from grid_snake.types import GamePhase, RenderFn
from grid_snake.ui import GameUI, UIState

logger = logging.getLogger(__name__)

BoardSizeFn = Callable[[], Tuple[int, int]]


@dataclass
class GameContext:
    """Everything a session talks to.

    Attributes:
        config: Static session settings.
        board: Dimensions and draw target.
        scheduler: Timer source; one pending handle per running session.
        ui: Score and end-of-game display.
        rng: Randomness for spawns.
        ask_board_size: Called on every start when ``config.prompt_size`` is set.
    """

    config: GameConfig
    board: Board
    scheduler: Scheduler
    ui: GameUI
    rng: random.Random = field(default_factory=random.Random)
    ask_board_size: Optional[BoardSizeFn] = None

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        ui: Optional[GameUI] = None,
        scheduler: Optional[Scheduler] = None,
        renderer: Optional[RenderFn] = None,
        ask_board_size: Optional[BoardSizeFn] = None,
    ) -> "GameContext":
        config = config or GameConfig.fixed()
        return cls(
            config=config,
            board=Board(config.rows, config.cols, renderer),
            scheduler=scheduler or PollingScheduler(),
            ui=ui or UIState(),
            rng=random.Random(config.seed),
            ask_board_size=ask_board_size,
        )


class Game:
    context: GameContext
    state: Optional[State]
    phase: GamePhase

    def __init__(self, context: GameContext):
        self.context = context
        self.state = None
        self.phase = GamePhase.NOT_STARTED
        self._pending: Optional[TimerHandle] = None

    @property
    def has_lost(self) -> bool:
        return self.phase == GamePhase.LOST

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.LOST, GamePhase.WON)

    @property
    def score(self) -> Optional[int]:
        return self.state.score if self.state is not None else None

    @property
    def snake(self) -> Optional[Snake]:
        return self.state.snake if self.state is not None else None

    @property
    def pending_tick(self) -> Optional[TimerHandle]:
        return self._pending

    def start(self) -> None:
        """(Re)start a session; any tick armed by a previous session is dropped."""
        ctx = self.context

        if ctx.config.prompt_size and ctx.ask_board_size is not None:
            rows, cols = ctx.ask_board_size()
            check_board_dimension(rows, label="rows")
            check_board_dimension(cols, label="cols")
            ctx.board.resize(rows, cols)

        self._cancel_pending()

        self.state = new_state(
            ctx.board.rows, ctx.board.cols, ctx.rng, seed=ctx.config.seed
        )
        self.phase = GamePhase.RUNNING
        logger.info(
            "Game started on a %dx%d board", ctx.board.rows, ctx.board.cols
        )

        self._draw()
        ctx.ui.display_score(self.state.score)
        ctx.ui.hide_lost()
        self._arm()

    def retry(self) -> bool:
        """Restart if the last session is over; returns whether it did."""
        if not self.is_over:
            return False
        self.start()
        return True

    def stop(self) -> None:
        """Drop the pending tick without changing the phase (app teardown)."""
        self._cancel_pending()

    def handle_action(self, action: Action) -> None:
        if action == Action.RESTART:
            self.retry()
        elif action in MOVE_ACTIONS:
            self.change_direction(action)

    def handle_key(self, key: str) -> None:
        action = key_to_action(key)
        if action is not None:
            self.handle_action(action)

    def change_direction(self, action: Action) -> None:
        if self.phase != GamePhase.RUNNING or self.state is None:
            return
        self.state = steer(self.state, action)

    def _tick(self) -> None:
        """Scheduler callback: advance one tick and re-arm if still running."""
        self._pending = None
        if self.phase != GamePhase.RUNNING or self.state is None:
            return
        ctx = self.context

        previous_score = self.state.score
        self.state = step(self.state, ctx.rng)
        if self.state.score != previous_score:
            logger.debug("Food eaten, score is now %d", self.state.score)
            ctx.ui.display_score(self.state.score)

        if self.state.lose:
            self.phase = GamePhase.LOST
            logger.info(
                "Game lost with score %d after %d ticks",
                self.state.score,
                self.state.turn,
            )
            ctx.ui.show_lost()
            return

        self._draw()
        if self.state.win:
            self.phase = GamePhase.WON
            logger.info("Board filled, game won with score %d", self.state.score)
            ctx.ui.show_won()
            return

        self._arm()

    def _arm(self) -> None:
        assert self.state is not None
        delay = tick_interval_ms(self.state.score, self.context.config.difficulty)
        self._pending = self.context.scheduler.schedule(delay, self._tick)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            logger.debug("Cancelling pending tick")
            self.context.scheduler.cancel(self._pending)
            self._pending = None

    def _draw(self) -> None:
        assert self.state is not None and self.state.snake is not None
        food = self.state.food.position if self.state.food is not None else None
        self.context.board.draw(self.state.snake.positions, food)
