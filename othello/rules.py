from typing import List, Optional, Tuple

import numpy as np

from .state import *

DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def _bracket(rows: List[List[int]], r: int, c: int, dr: int, dc: int, player: int) -> List[Move]:
    """Opponent run starting next to (r, c) in one direction, if the mover's disc closes it.

    ``rows`` is the board as nested lists; plain list indexing keeps the scan
    off numpy scalar access.
    """
    run = []
    i, j = r + dr, c + dc
    while in_bounds(i, j) and rows[i][j] == -player:
        run.append(Move(i, j))
        i += dr; j += dc
    if run and in_bounds(i, j) and rows[i][j] == player:
        return run
    return []


def _legal_on(rows: List[List[int]], r: int, c: int, player: int) -> bool:
    return rows[r][c] == EMPTY and any(_bracket(rows, r, c, dr, dc, player) for dr, dc in DIRECTIONS)


def flips_for(state: GameState, r: int, c: int, player: Optional[int] = None) -> List[Move]:
    if player is None: player = state.player
    if not in_bounds(r, c): return []
    rows = state.board.tolist()
    if rows[r][c] != EMPTY: return []
    flips = []
    for dr, dc in DIRECTIONS:
        flips += _bracket(rows, r, c, dr, dc, player)
    return flips


def is_legal(state: GameState, r: int, c: int, player: Optional[int] = None) -> bool:
    if player is None: player = state.player
    if not in_bounds(r, c): return False
    return _legal_on(state.board.tolist(), r, c, player)


def legal_moves(state: GameState, player: Optional[int] = None) -> List[Move]:
    if player is None: player = state.player
    rows = state.board.tolist()
    # row-major scan, which is the tie-break order for search
    return [Move(r, c) for r in range(SIZE) for c in range(SIZE) if _legal_on(rows, r, c, player)]


def has_legal_move(state: GameState, player: Optional[int] = None) -> bool:
    if player is None: player = state.player
    rows = state.board.tolist()
    return any(_legal_on(rows, r, c, player) for r in range(SIZE) for c in range(SIZE))


def advance_turn(state: GameState):
    # opponent without a move passes; with no moves on either side the game is over
    if has_legal_move(state, -state.player):
        state.player = -state.player


def place(state: GameState, r: int, c: int) -> bool:
    flips = flips_for(state, r, c)
    if not flips: return False

    state.board[r, c] = state.player
    for i, j in flips:
        state.board[i, j] = state.player
    state.last_flipped = [Move(r, c)] + flips

    advance_turn(state)
    return True


def is_over(state: GameState) -> bool:
    return not has_legal_move(state, state.player) and not has_legal_move(state, -state.player)


def counts(state: GameState) -> Tuple[int, int]:
    return int(np.count_nonzero(state.board == BLACK)), int(np.count_nonzero(state.board == WHITE))


def empty_count(state: GameState) -> int:
    return int(np.count_nonzero(state.board == EMPTY))


def disc_diff(state: GameState, player: int) -> int:
    return player * int(state.board.sum(dtype=np.int32))


def winner(state: GameState) -> Optional[int]:
    black, white = counts(state)
    if black > white: return BLACK
    if white > black: return WHITE
    return None


def check_winner(state: GameState) -> int:
    if not is_over(state): return GAME_CONTINUE
    w = winner(state)
    if w == BLACK: return GAME_BLACK_WIN
    if w == WHITE: return GAME_WHITE_WIN
    return GAME_DRAW
