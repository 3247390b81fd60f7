"""Best-first exploration of hypothetical futures.

Nodes are ordered by cost, the negated evaluation of their position from the
root player's point of view, so the most promising line is always expanded
next. There is no accumulated path cost: this is a greedy, depth- and
budget-bounded search, not an admissible A*. The root move whose subtree
produced the best evaluation among all popped nodes is chosen.
"""

import heapq
import logging
import math
import random
import time
from itertools import count
from typing import NamedTuple, Optional

from .state import *
from .rules import legal_moves, place, is_over
from .eval import evaluate
from .config import TierConfig

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    move: Optional[Move]
    score: float
    nodes: int


class Node:
    __slots__ = ("state", "depth", "root_move", "score")
    def __init__(self, state: GameState, depth: int, root_move: Move, score: float):
        self.state = state; self.depth = depth; self.root_move = root_move; self.score = score


def frontier_search(state: GameState, config: TierConfig, deadline: float,
                    rng: Optional[random.Random] = None) -> SearchResult:
    root_player = state.player
    root_moves = legal_moves(state)
    if not root_moves: return SearchResult(None, -math.inf, 0)
    if config.jitter and rng is None: rng = random.Random()

    frontier, seq = [], count()

    def push(child: GameState, depth: int, root_move: Move):
        score = evaluate(child, root_player, config.weights)
        cost = -score
        if config.jitter:
            cost += rng.uniform(-config.jitter, config.jitter)
        heapq.heappush(frontier, (cost, next(seq), Node(child, depth, root_move, score)))

    for m in root_moves:
        child = clone_state(state); place(child, *m)
        push(child, 1, m)

    best_move, best_score = root_moves[0], -math.inf
    expanded = 0
    while frontier:
        if expanded >= config.max_nodes or time.perf_counter() > deadline: break
        _, _, node = heapq.heappop(frontier)
        expanded += 1

        if node.score > best_score:
            best_score, best_move = node.score, node.root_move

        if node.depth >= config.depth or is_over(node.state): continue
        moves = legal_moves(node.state)
        if not moves:
            passed = clone_state(node.state, player=-node.state.player)
            passed.last_flipped = []
            push(passed, node.depth + 1, node.root_move)
            continue
        for m in moves:
            child = clone_state(node.state); place(child, *m)
            push(child, node.depth + 1, node.root_move)

    logger.debug("frontier search: %d popped, %d queued, best %s (%.2f)",
                 expanded, len(frontier), best_move, best_score)
    return SearchResult(best_move, best_score, expanded)
