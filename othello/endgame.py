"""Exact endgame search.

The solver works on the board flattened to a list of 64 cells (index
``row * 8 + col``) with the rays leaving every square precomputed, so move
generation near the end of the game is plain list indexing. Every branch
still gets its own copy of the cell list.
"""

import logging
import math
import time
from itertools import count
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .state import *
from .rules import DIRECTIONS
from .eval import evaluate
from .config import Weights
from .search import SearchResult

logger = logging.getLogger(__name__)


def _rays(sq: int) -> Tuple[Tuple[int, ...], ...]:
    r, c = divmod(sq, SIZE)
    rays = []
    for dr, dc in DIRECTIONS:
        ray = []
        i, j = r + dr, c + dc
        while 0 <= i < SIZE and 0 <= j < SIZE:
            ray.append(i * SIZE + j)
            i += dr; j += dc
        if len(ray) >= 2:  # a bracket needs an opponent disc and a closing disc
            rays.append(tuple(ray))
    return tuple(rays)


RAYS = tuple(_rays(sq) for sq in range(SIZE * SIZE))
ORDERING_MIN_EMPTIES = 5  # children are sorted by reply count only with this many empties


def _flips(cells: List[int], sq: int, player: int) -> List[int]:
    flips = []
    for ray in RAYS[sq]:
        run = []
        for t in ray:
            v = cells[t]
            if v == -player:
                run.append(t)
                continue
            if v == player and run:
                flips += run
            break
    return flips


def _moves(cells: List[int], empties: List[int], player: int) -> List[Tuple[int, List[int]]]:
    moves = []
    for sq in empties:
        f = _flips(cells, sq, player)
        if f: moves.append((sq, f))
    return moves


def _mobility(cells: List[int], empties: List[int], player: int) -> int:
    return sum(1 for sq in empties if _flips(cells, sq, player))


def _heuristic(cells: List[int], player: int, weights: Weights) -> float:
    board = np.array(cells, dtype=np.int8).reshape(SIZE, SIZE)
    return evaluate(GameState(board, player), player, weights)


def _negamax(cells: List[int], empties: List[int], player: int, alpha: float, beta: float,
             weights: Weights, deadline: float, nodes: Iterator[int]) -> float:
    next(nodes)
    if time.perf_counter() > deadline: return _heuristic(cells, player, weights)

    if len(empties) == 1:
        # last empty square: play it out directly
        sq, diff = empties[0], player * sum(cells)
        f = _flips(cells, sq, player)
        if f: return diff + 1 + 2 * len(f)
        f = _flips(cells, sq, -player)
        if f: return diff - 1 - 2 * len(f)
        return diff

    moves = _moves(cells, empties, player)
    if not moves:
        if not _moves(cells, empties, -player):
            return player * sum(cells)
        return -_negamax(cells, empties, -player, -beta, -alpha, weights, deadline, nodes)

    children = []
    for sq, flips in moves:
        child = cells[:]
        child[sq] = player
        for t in flips: child[t] = player
        children.append((child, [e for e in empties if e != sq]))
    if len(children) > 1 and len(empties) >= ORDERING_MIN_EMPTIES:
        # fewest opponent replies first
        children.sort(key=lambda cr: _mobility(cr[0], cr[1], -player))

    best = -math.inf
    for child, rest in children:
        val = -_negamax(child, rest, -player, -beta, -alpha, weights, deadline, nodes)
        if val > best: best = val
        if best > alpha: alpha = best
        if alpha >= beta: break
    return best


def _flatten(state: GameState) -> Tuple[List[int], List[int]]:
    cells = state.board.ravel().tolist()
    return cells, [sq for sq, v in enumerate(cells) if v == EMPTY]


def negamax(state: GameState, alpha: float, beta: float, weights: Weights, deadline: float,
            nodes: Optional[Iterator[int]] = None) -> float:
    """Exact value of ``state`` for the side to move, as a final disc differential.

    Past ``deadline`` the heuristic evaluation is returned instead, so values
    from a truncated search are no longer exact.
    """
    cells, empties = _flatten(state)
    return _negamax(cells, empties, state.player, alpha, beta, weights, deadline,
                    count() if nodes is None else nodes)


def solve_endgame(state: GameState, weights: Weights, deadline: float) -> SearchResult:
    player = state.player
    cells, empties = _flatten(state)
    best_move, best_val = None, -math.inf
    nodes = count()
    moves = _moves(cells, empties, player)
    # row-major root order, every root move with a full window so values are comparable
    for sq, flips in moves:
        child = cells[:]
        child[sq] = player
        for t in flips: child[t] = player
        rest = [e for e in empties if e != sq]
        val = -_negamax(child, rest, -player, -math.inf, math.inf, weights, deadline, nodes)
        if val > best_val: best_move, best_val = Move(*divmod(sq, SIZE)), val

    if time.perf_counter() > deadline:
        logger.debug("endgame solver ran past its deadline, values are heuristic")
    searched = next(nodes)
    logger.debug("endgame solver: %d nodes over %d root moves, best %s (%+.1f)",
                 searched, len(moves), best_move, best_val)
    return SearchResult(best_move, best_val, searched)
