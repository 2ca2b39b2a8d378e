"""Score based game speed.

The tick interval shrinks linearly with the score: with the default
:class:`grid_snake.config.DifficultyConfig` a fresh game (score 1) ticks every
290 ms and reaches 50 ms at score 20. The line keeps falling past the end
score, so the result is clamped to ``min_interval_ms``.
"""

from grid_snake.config import DifficultyConfig
from grid_snake.utils.math import lerp

DEFAULT_DIFFICULTY = DifficultyConfig()


def tick_interval_ms(
    score: int, difficulty: DifficultyConfig = DEFAULT_DIFFICULTY
) -> float:
    """Milliseconds to wait before the next tick at ``score``."""
    reduction = lerp(
        difficulty.start_score,
        difficulty.start_reduction_ms,
        difficulty.end_score,
        difficulty.end_reduction_ms,
        score,
    )
    return max(difficulty.min_interval_ms, difficulty.base_interval_ms - reduction)
