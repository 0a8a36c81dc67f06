"""Main poker hand evaluation interface."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple

from poker_ranking.config.variants import get_variant_config
from poker_ranking.core.card import Card
from poker_ranking.core.hand import Board, Hand
from poker_ranking.evaluation.classifier import classify_five
from poker_ranking.evaluation.combinations import Combination, combinations, variant_of
from poker_ranking.evaluation.exceptions import InsufficientCards, InvalidHandShape, NoValidCombination
from poker_ranking.evaluation.hand_description import describe_hand, describe_hand_detailed
from poker_ranking.evaluation.value import Value, compare_values, max_value, value_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandResult:
    """
    Result of hand evaluation.

    Attributes:
        value: Strength of the best five-card hand
        cards_used: The five cards making up that hand
        used_hole_cards: Hole cards among cards_used
    """
    value: Value
    cards_used: Tuple[Card, ...]
    used_hole_cards: Tuple[Card, ...] = field(default_factory=tuple)

    @property
    def hand_name(self) -> str:
        return describe_hand(self.value)

    @property
    def hand_description(self) -> str:
        return describe_hand_detailed(self.value)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards_used)
        return f"{self.hand_description} ({cards_str})"

    def to_json(self) -> Dict[str, Any]:
        """Convert to JSON-compatible dictionary."""
        return {
            "category": self.value.category.name.lower(),
            "major": self.value.major,
            "ranks": [str(rank) for rank in self.value.descending_ranks],
            "hand_name": self.hand_name,
            "hand_description": self.hand_description,
            "cards": [str(card) for card in self.cards_used],
            "used_hole_cards": [str(card) for card in self.used_hole_cards],
        }


def validate_shape(board: Board, hand: Hand) -> None:
    """
    Check that a board and hand fit the hand's variant.

    Raises:
        InvalidHandShape: Wrong hole card count, too many board cards,
            duplicate cards or an unknown hand type
        InsufficientCards: Too few board cards to form a hand
    """
    config = get_variant_config(variant_of(hand))

    if len(hand.cards) != config.hole_cards:
        message = f"{config.name} requires exactly {config.hole_cards} hole cards, got {len(hand.cards)}"
        logger.warning(message)
        raise InvalidHandShape(message)

    if board.size > config.board_max:
        message = f"{config.name} allows at most {config.board_max} board cards, got {board.size}"
        logger.warning(message)
        raise InvalidHandShape(message)

    if board.size < config.board_min:
        message = f"{config.name} needs at least {config.board_min} board cards, got {board.size}"
        logger.warning(message)
        raise InsufficientCards(message)

    all_cards = list(board.cards) + list(hand.cards)
    if len(set(all_cards)) != len(all_cards):
        duplicates = sorted({str(card) for card in all_cards if all_cards.count(card) > 1})
        message = f"Duplicate cards in board and hand: {', '.join(duplicates)}"
        logger.warning(message)
        raise InvalidHandShape(message)


def _classified(board: Board, hand: Hand) -> Iterator[Tuple[Value, Combination]]:
    for combo in combinations(board, hand):
        yield classify_five(combo), combo


def evaluate(board: Board, hand: Hand) -> Value:
    """
    Find the value of the best five-card hand for a board and hand.

    Every legal combination is classified; the strongest is returned.

    Raises:
        InvalidHandShape: If the board or hand is malformed
        InsufficientCards: If too few board cards are dealt
        NoValidCombination: If no five-card combination can be formed
    """
    validate_shape(board, hand)
    best = max_value(value for value, _ in _classified(board, hand))
    logger.debug(f"Best value for {hand} on {board}: {best}")
    return best


def best_hand(board: Board, hand: Hand) -> HandResult:
    """
    Find the best five-card hand along with the cards that make it.

    When several combinations tie, the first one enumerated is returned.

    Raises:
        InvalidHandShape: If the board or hand is malformed
        InsufficientCards: If too few board cards are dealt
        NoValidCombination: If no five-card combination can be formed
    """
    validate_shape(board, hand)
    best = max(_classified(board, hand), key=lambda scored: value_key(scored[0]), default=None)
    if best is None:
        message = f"No five-card combination for {hand} on {board}"
        logger.warning(message)
        raise NoValidCombination(message)

    value, combo = best
    used_hole_cards = tuple(card for card in combo if card in hand.cards)
    logger.debug(f"Best hand for {hand} on {board}: {value} using {[str(c) for c in combo]}")
    return HandResult(value=value, cards_used=combo, used_hole_cards=used_hole_cards)


def compare_hands(board: Board, first: Hand, second: Hand) -> int:
    """
    Compare two hands on the same board.

    Returns:
        1 if first wins, -1 if second wins, 0 if tie
    """
    return compare_values(evaluate(board, first), evaluate(board, second))
