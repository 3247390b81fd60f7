import logging
import math
import random
import time
from typing import Optional, Union

from .state import *
from .rules import legal_moves, place, empty_count
from .config import MEDIUM, TierConfig, get_config
from .search import frontier_search
from .endgame import solve_endgame

logger = logging.getLogger(__name__)


def choose_move(state: GameState, difficulty: Union[str, TierConfig] = MEDIUM,
                rng: Optional[random.Random] = None) -> Optional[Move]:
    """Pick a move for the side to move in ``state`` without mutating it.

    Returns ``None`` when the side to move has no legal move; passing or
    ending the game is then up to the caller.
    """
    config = get_config(difficulty)
    moves = legal_moves(state)
    if not moves: return None
    if len(moves) == 1: return moves[0]

    start = time.perf_counter()
    deadline = start + config.time_budget_s if config.time_budget_s is not None else math.inf
    empties = empty_count(state)
    if empties <= config.endgame_threshold:
        res = solve_endgame(state, config.weights, deadline)
        kind = "endgame"
    else:
        res = frontier_search(state, config, deadline, rng)
        kind = "frontier"
    logger.debug("%s search: %d empties, %d nodes in %.1f ms -> %s (%.2f)",
                 kind, empties, res.nodes, (time.perf_counter() - start) * 1000, res.move, res.score)
    return res.move


def ai_turn(state: GameState, difficulty: Union[str, TierConfig] = MEDIUM,
            rng: Optional[random.Random] = None) -> bool:
    side = PLAYER_NAMES[state.player]
    mv = choose_move(state, difficulty, rng)
    if mv is None:
        logger.info("%s AI has no legal move", side)
        return False
    logger.info("%s AI plays (%d, %d)", side, mv.row, mv.col)
    return place(state, *mv)
