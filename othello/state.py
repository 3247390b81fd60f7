import copy
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

import numpy as np

SIZE = 8
EMPTY, BLACK, WHITE = 0, 1, -1
PLAYER_NAMES = {BLACK: "Black", WHITE: "White"}
GAME_CONTINUE, GAME_BLACK_WIN, GAME_WHITE_WIN, GAME_DRAW = -1, 0, 1, 2


class Move(NamedTuple):
    row: int
    col: int


def opponent(player: int) -> int:
    return -player


def initial_board() -> np.ndarray:
    board = np.zeros((SIZE, SIZE), dtype=np.int8)
    board[3, 3], board[3, 4] = WHITE, BLACK
    board[4, 3], board[4, 4] = BLACK, WHITE
    return board


@dataclass(eq=False)
class GameState:
    board: np.ndarray = field(default_factory=initial_board)
    player: int = BLACK
    last_flipped: List[Move] = field(default_factory=list)  # placed cell first

    def __post_init__(self):
        # always own the grid, never alias the caller's
        self.board = np.array(self.board, dtype=np.int8)
        if self.board.shape != (SIZE, SIZE):
            raise ValueError(f"board must be {SIZE}x{SIZE}, got shape {self.board.shape}")
        if self.player not in PLAYER_NAMES:
            raise ValueError(f"player must be BLACK ({BLACK}) or WHITE ({WHITE}), got {self.player!r}")


def clone_state(state: GameState, player: Optional[int] = None) -> GameState:
    # the source state was validated on construction, so skip __post_init__
    clone = copy.copy(state)
    clone.board = state.board.copy()
    clone.last_flipped = list(state.last_flipped)
    if player is not None:
        clone.player = player
    return clone
