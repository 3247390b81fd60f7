from .state import *
from .rules import *
from .config import EASY, MEDIUM, HARD, TIERS, TierConfig, Weights, get_config
from .eval import evaluate, evaluate_features
from .search import frontier_search, SearchResult
from .endgame import negamax, solve_endgame
from .ai import choose_move, ai_turn
