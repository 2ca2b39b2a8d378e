"""Session configuration and board-size validation.

Two board variants exist: a fixed 12x12 board and a board whose dimensions are
asked from the player, each side constrained to ``[MIN_BOARD_SIZE,
MAX_BOARD_SIZE]``. Validation is a pure function (:func:`parse_board_dimension`)
so any front end can loop on it with its own prompt medium.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)

MIN_BOARD_SIZE = 8
MAX_BOARD_SIZE = 12
DEFAULT_BOARD_SIZE = 12


class BoardSizeError(ValueError):
    """Raised when a board dimension is not an integer inside the allowed range."""


@dataclass(frozen=True)
class DifficultyConfig:
    """Tick interval tuning.

    The interval is ``base_interval_ms`` minus a reduction interpolated
    linearly between ``(start_score, start_reduction_ms)`` and
    ``(end_score, end_reduction_ms)``, never dropping below
    ``min_interval_ms``.
    """

    base_interval_ms: float = 300
    start_score: int = 1
    start_reduction_ms: float = 10
    end_score: int = 20
    end_reduction_ms: float = 250
    min_interval_ms: float = 50


@dataclass(frozen=True)
class GameConfig:
    rows: int = DEFAULT_BOARD_SIZE
    cols: int = DEFAULT_BOARD_SIZE
    prompt_size: bool = False
    seed: Optional[int] = None
    difficulty: DifficultyConfig = field(default_factory=DifficultyConfig)

    def __post_init__(self) -> None:
        for label, value in (("rows", self.rows), ("cols", self.cols)):
            check_board_dimension(value, label=label)

    @classmethod
    def fixed(cls, seed: Optional[int] = None) -> "GameConfig":
        """The classic 12x12 board."""
        return cls(seed=seed)

    @classmethod
    def sized(cls, rows: int, cols: int, seed: Optional[int] = None) -> "GameConfig":
        """A player-sized board; dimensions are re-asked on every start."""
        return cls(rows=rows, cols=cols, prompt_size=True, seed=seed)


def check_board_dimension(
    value: int,
    low: int = MIN_BOARD_SIZE,
    high: int = MAX_BOARD_SIZE,
    label: str = "size",
) -> int:
    if not low <= value <= high:
        raise BoardSizeError(f"{label} must be between {low} and {high}, got {value}")
    return value


def parse_board_dimension(
    raw: object, low: int = MIN_BOARD_SIZE, high: int = MAX_BOARD_SIZE
) -> int:
    """Parse a user supplied board dimension.

    Args:
        raw: Text (or number) entered by the player.
        low: Smallest accepted value (inclusive).
        high: Largest accepted value (inclusive).

    Returns:
        int: The validated dimension.

    Raises:
        BoardSizeError: If ``raw`` is not an integer or falls outside ``[low, high]``.
    """
    if isinstance(raw, bool):
        raise BoardSizeError(f"Expected a whole number, got {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise BoardSizeError(f"Expected a whole number, got {raw!r}") from None
    return check_board_dimension(value, low, high)


def prompt_board_dimension(
    ask: Callable[[str], object],
    label: str,
    low: int = MIN_BOARD_SIZE,
    high: int = MAX_BOARD_SIZE,
    report: Optional[Callable[[str], None]] = None,
) -> int:
    """Ask for a dimension until :func:`parse_board_dimension` accepts it.

    ``ask`` receives the prompt text and returns the raw answer (``input`` works
    as-is). Rejections are passed to ``report`` when given, and logged.
    """
    prompt = f"Enter number of {label} ({low}-{high}):"
    while True:
        try:
            return parse_board_dimension(ask(prompt), low, high)
        except BoardSizeError as e:
            logger.info("Rejected %s: %s", label, e)
            if report is not None:
                report(str(e))


def prompt_board_size(
    ask: Callable[[str], object],
    report: Optional[Callable[[str], None]] = None,
) -> tuple[int, int]:
    """Ask for rows then columns."""
    rows = prompt_board_dimension(ask, "rows", report=report)
    cols = prompt_board_dimension(ask, "columns", report=report)
    return rows, cols
