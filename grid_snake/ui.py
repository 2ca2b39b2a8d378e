"""Score and loss display boundary.

The game pushes score changes and end-of-game cues through :class:`GameUI`.
:class:`UIState` is a plain recorder; front ends read it back when they draw
(the Streamlit app keeps one in ``st.session_state``).
"""

from dataclasses import dataclass
from typing import Protocol


class GameUI(Protocol):
    def display_score(self, score: int) -> None: ...

    def show_lost(self) -> None: ...

    def hide_lost(self) -> None: ...

    def show_won(self) -> None: ...


@dataclass
class UIState:
    score: int = 0
    lost_visible: bool = False
    won_visible: bool = False

    def display_score(self, score: int) -> None:
        self.score = score

    def show_lost(self) -> None:
        self.lost_visible = True

    def hide_lost(self) -> None:
        self.lost_visible = False
        self.won_visible = False

    def show_won(self) -> None:
        self.won_visible = True
