import math
import time

import numpy as np

from othello import (BLACK, WHITE, HARD, MEDIUM, TIERS, GameState, clone_state, legal_moves,
                     place, is_over, disc_diff, evaluate, negamax, solve_endgame)

WEIGHTS = TIERS[HARD].weights


def exact_value(state: GameState, player: int) -> int:
    """Plain minimax over the whole remaining game, final disc differential for ``player``."""
    if is_over(state):
        return disc_diff(state, player)
    moves = legal_moves(state)
    if not moves:
        return exact_value(clone_state(state, player=-state.player), player)
    vals = []
    for m in moves:
        child = clone_state(state); place(child, *m)
        vals.append(exact_value(child, player))
    return max(vals) if state.player == player else min(vals)


def exact_best(state):
    values = {}
    for m in legal_moves(state):
        child = clone_state(state); place(child, *m)
        values[m] = exact_value(child, state.player)
    best = max(values.values())
    return next(m for m, v in values.items() if v == best)


def test_terminal_value_is_disc_differential(empty_grid):
    empty_grid[:5] = BLACK
    empty_grid[5:] = WHITE
    s = GameState(empty_grid, WHITE)
    assert negamax(s, -math.inf, math.inf, WEIGHTS, math.inf) == -16
    s.player = BLACK
    assert negamax(s, -math.inf, math.inf, WEIGHTS, math.inf) == 16


def test_stuck_side_passes(stuck_white_state):
    # Black answers (7,2) and wipes White out: 3-0 for Black
    assert negamax(stuck_white_state, -math.inf, math.inf, WEIGHTS, math.inf) == -3


def test_expired_deadline_returns_heuristic(random_game):
    s = random_game(3, stop_at_empty=10)
    val = negamax(s, -math.inf, math.inf, WEIGHTS, time.perf_counter() - 1.0)
    assert val == evaluate(s, s.player, WEIGHTS)


def test_solver_matches_exhaustive_search(endgame_positions):
    for s in endgame_positions(4, 6):
        before = s.board.copy()
        res = solve_endgame(s, WEIGHTS, math.inf)
        values = {}
        for m in legal_moves(s):
            child = clone_state(s); place(child, *m)
            values[m] = exact_value(child, s.player)
        best = max(values.values())
        assert res.score == best
        assert values[res.move] == best
        # first move reaching the best value wins ties
        assert res.move == next(m for m, v in values.items() if v == best)
        assert np.array_equal(s.board, before)


def test_negamax_agrees_with_minimax(endgame_positions):
    for s in endgame_positions(3, 5):
        assert negamax(s, -math.inf, math.inf, WEIGHTS, math.inf) == exact_value(s, s.player)


def test_timed_out_solver_still_returns_legal_move(endgame_positions):
    s = endgame_positions(1, 14)[0]
    res = solve_endgame(s, TIERS[MEDIUM].weights, time.perf_counter() + 0.01)
    assert res.move in legal_moves(s)


def test_hard_tier_solves_ten_empties_within_budget(endgame_positions):
    budget = TIERS[HARD].time_budget_s
    for s in endgame_positions(2, 10):
        start = time.perf_counter()
        res = solve_endgame(s, WEIGHTS, start + budget)
        assert time.perf_counter() - start < budget
        assert res.move in legal_moves(s)


def test_solver_with_pass_inside_the_tree(empty_grid):
    # either Black move leaves White without a reply, so Black moves twice in a row
    empty_grid[0, 0], empty_grid[0, 1] = BLACK, WHITE
    empty_grid[7, 0], empty_grid[7, 1] = BLACK, WHITE
    s = GameState(empty_grid, BLACK)
    res = solve_endgame(s, WEIGHTS, math.inf)
    assert res.move == exact_best(s)