"""
Shared pytest fixtures for the othello tests.

Game state fixtures are function-scoped so every test owns its board.
"""

import random
from typing import Callable, List

import numpy as np
import pytest

from othello import (BLACK, WHITE, GameState, legal_moves, place, is_over, empty_count)


@pytest.fixture
def start_state() -> GameState:
    return GameState()


@pytest.fixture
def empty_grid() -> np.ndarray:
    return np.zeros((8, 8), dtype=np.int8)


@pytest.fixture
def single_move_state() -> GameState:
    """Black (3,1), White (3,2) and (3,3): Black's only move is (3,4)."""
    grid = np.zeros((8, 8), dtype=np.int8)
    grid[3, 1] = BLACK
    grid[3, 2] = grid[3, 3] = WHITE
    return GameState(grid, BLACK)


@pytest.fixture
def stuck_white_state() -> GameState:
    """White to move with no legal move; Black can still play (7,2)."""
    grid = np.zeros((8, 8), dtype=np.int8)
    grid[7, 0] = BLACK
    grid[7, 1] = WHITE
    return GameState(grid, WHITE)


def play_random(seed: int, stop_at_empty: int = 0) -> GameState:
    rng = random.Random(seed)
    state = GameState()
    while not is_over(state) and empty_count(state) > stop_at_empty:
        moves = legal_moves(state)
        assert moves, "side to move must have a move in a live game"
        place(state, *rng.choice(moves))
    return state


@pytest.fixture
def random_game() -> Callable[..., GameState]:
    return play_random


@pytest.fixture
def endgame_positions() -> Callable[[int, int], List[GameState]]:
    """Factory for live positions with few empties and at least two legal moves."""
    def make(count: int, max_empty: int) -> List[GameState]:
        found = []
        seed = 0
        while len(found) < count:
            state = play_random(seed, stop_at_empty=max_empty)
            seed += 1
            if not is_over(state) and len(legal_moves(state)) >= 2:
                found.append(state)
        return found
    return make
