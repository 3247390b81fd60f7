from typing import Dict

import numpy as np

from .state import *
from .rules import DIRECTIONS, disc_diff, legal_moves
from .config import Weights

POSITION_WEIGHTS = np.array([
    [100, -20, 10,  5,  5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [ 10,  -2,  0,  0,  0,  0,  -2,  10],
    [  5,  -2,  0,  0,  0,  0,  -2,   5],
    [  5,  -2,  0,  0,  0,  0,  -2,   5],
    [ 10,  -2,  0,  0,  0,  0,  -2,  10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10,  5,  5, 10, -20, 100],
], dtype=np.int32)

# corner cell and the unit steps along its row edge and column edge
CORNERS = (((0, 0), (0, 1), (1, 0)),
           ((0, SIZE - 1), (0, -1), (1, 0)),
           ((SIZE - 1, 0), (0, 1), (-1, 0)),
           ((SIZE - 1, SIZE - 1), (0, -1), (-1, 0)))


def mobility(state: GameState, player: int) -> int:
    return len(legal_moves(state, player)) - len(legal_moves(state, -player))


def corner_diff(board: np.ndarray, player: int) -> int:
    owners = [board[r, c] for (r, c), _, _ in CORNERS]
    return owners.count(player) - owners.count(-player)


def positional(board: np.ndarray, player: int) -> int:
    return player * int((POSITION_WEIGHTS * board).sum())


def frontier_count(board: np.ndarray, player: int) -> int:
    """Discs of ``player`` with at least one empty neighbour."""
    empty = np.pad(board == EMPTY, 1, constant_values=False)
    near_empty = np.zeros(board.shape, dtype=bool)
    for dr, dc in DIRECTIONS:
        near_empty |= empty[1 + dr:1 + dr + SIZE, 1 + dc:1 + dc + SIZE]
    return int(np.count_nonzero((board == player) & near_empty))


def _edge_run(board: np.ndarray, r: int, c: int, dr: int, dc: int, color: int) -> int:
    n = 0
    r += dr; c += dc
    while 0 <= r < SIZE and 0 <= c < SIZE and board[r, c] == color:
        n += 1
        r += dr; c += dc
    return n


def corner_stability(board: np.ndarray, player: int) -> float:
    """Approximate stable discs: runs of the corner owner's colour along both edges."""
    total = 0
    for (r, c), row_step, col_step in CORNERS:
        color = board[r, c]
        if color == EMPTY: continue
        run = 1 + _edge_run(board, r, c, *row_step, color) + _edge_run(board, r, c, *col_step, color)
        total += run if color == player else -run
    return total / 4


def evaluate_features(state: GameState, player: int) -> Dict[str, float]:
    board = state.board
    return {
        "mobility": mobility(state, player),
        "discs": disc_diff(state, player),
        "corners": corner_diff(board, player),
        "positional": positional(board, player) / 10,
        "frontier": frontier_count(board, -player) - frontier_count(board, player),
        "stability": corner_stability(board, player),
    }


def evaluate(state: GameState, player: int, weights: Weights) -> float:
    f = evaluate_features(state, player)
    return (weights.mobility * f["mobility"] + weights.discs * f["discs"]
            + weights.corners * f["corners"] + weights.positional * f["positional"]
            + weights.frontier * f["frontier"] + weights.stability * f["stability"])
