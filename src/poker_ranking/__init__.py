"""Poker hand ranking package."""

from poker_ranking.config.variants import VariantConfigError
from poker_ranking.core.card import Card, Rank, Suit
from poker_ranking.core.hand import Board, Hand, OmahaHand, TexasHand
from poker_ranking.evaluation.evaluator import HandResult, best_hand, compare_hands, evaluate
from poker_ranking.evaluation.exceptions import (
    EvaluationError,
    InsufficientCards,
    InvalidHandShape,
    NoValidCombination,
)
from poker_ranking.evaluation.value import Category, Value, compare_values

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Board",
    "Hand",
    "TexasHand",
    "OmahaHand",
    "HandResult",
    "best_hand",
    "compare_hands",
    "evaluate",
    "EvaluationError",
    "InsufficientCards",
    "InvalidHandShape",
    "NoValidCombination",
    "VariantConfigError",
    "Category",
    "Value",
    "compare_values",
]
