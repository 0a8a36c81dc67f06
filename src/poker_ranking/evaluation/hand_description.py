"""Human-readable descriptions of hand values."""
from typing import Dict

from poker_ranking.core.card import Rank
from poker_ranking.evaluation.value import (
    Category, Flush, FourOfAKind, FullHouse, HighCard, Pair, Straight,
    StraightFlush, ThreeOfAKind, TwoPair, Value
)

BASIC_DESCRIPTIONS: Dict[Category, str] = {
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.FLUSH: "Flush",
    Category.STRAIGHT: "Straight",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.TWO_PAIR: "Two Pair",
    Category.PAIR: "One Pair",
    Category.HIGH_CARD: "High Card",
}


def describe_hand(value: Value) -> str:
    """Get a basic description of the hand, e.g. 'Full House'."""
    if isinstance(value, StraightFlush) and value.top == Rank.ACE:
        return "Royal Flush"
    return BASIC_DESCRIPTIONS[value.category]


def describe_hand_detailed(value: Value) -> str:
    """
    Get a detailed description of the hand.

    Examples: 'Four Aces', 'Full House, Kings over Sevens', 'Five-high Straight'.

    Raises:
        TypeError: If value is not a hand value
    """
    if isinstance(value, StraightFlush):
        if value.top == Rank.ACE:
            return "Royal Flush"
        return f"{value.top.full_name}-high Straight Flush"
    elif isinstance(value, FourOfAKind):
        return f"Four {value.quad.plural_name}"
    elif isinstance(value, FullHouse):
        return f"Full House, {value.triple.plural_name} over {value.pair.plural_name}"
    elif isinstance(value, Flush):
        return f"{value.descending_ranks[0].full_name}-high Flush"
    elif isinstance(value, Straight):
        return f"{value.top.full_name}-high Straight"
    elif isinstance(value, ThreeOfAKind):
        return f"Three {value.triple.plural_name}"
    elif isinstance(value, TwoPair):
        return f"Two Pair, {value.higher.plural_name} and {value.lower.plural_name}"
    elif isinstance(value, Pair):
        return f"Pair of {value.pair.plural_name}"
    elif isinstance(value, HighCard):
        return f"{value.descending_ranks[0].full_name} High"
    raise TypeError(f"Not a hand value: {value!r}")
