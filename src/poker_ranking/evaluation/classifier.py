"""Five-card hand classification."""
from typing import Callable, List, Optional, Sequence, Tuple

from poker_ranking.core.card import Card, Rank
from poker_ranking.evaluation.exceptions import InvalidHandShape
from poker_ranking.evaluation.value import (
    Flush, FourOfAKind, FullHouse, HighCard, Pair, Straight, StraightFlush,
    ThreeOfAKind, TwoPair, Value
)

# (count, rank) pairs, most frequent first
RankGroups = List[Tuple[int, Rank]]

WHEEL = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)


def _straight_top(descending_cards: Sequence[Card]) -> Optional[Rank]:
    """
    Find the top rank of a straight, if the cards form one.

    The wheel (A-5-4-3-2) plays the ace low, so its top rank is Five.
    """
    distinct: List[Rank] = []
    for card in descending_cards:
        if card.rank not in distinct:
            distinct.append(card.rank)

    if len(distinct) != 5:
        return None
    if distinct[0].strength - distinct[-1].strength == 4:
        return distinct[0]
    if tuple(distinct) == WHEEL:
        return Rank.FIVE
    return None


def _is_flush(cards: Sequence[Card]) -> bool:
    """Check if all five cards share the same suit."""
    return len({card.suit for card in cards}) == 1


def _rank_groups(descending_cards: Sequence[Card]) -> RankGroups:
    """
    Group cards by rank as (count, rank) pairs.

    Sorted by count descending. The sort is stable, so groups of equal count
    keep the rank-descending order of the input.
    """
    groups: RankGroups = []
    for card in descending_cards:
        if groups and groups[-1][1] == card.rank:
            count, rank = groups[-1]
            groups[-1] = (count + 1, rank)
        else:
            groups.append((1, card.rank))
    return sorted(groups, key=lambda group: group[0], reverse=True)


def _counts(groups: RankGroups) -> List[int]:
    return [count for count, _ in groups]


def _straight_flush(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if top is not None and flush:
        return StraightFlush(top)
    return None


def _four_of_a_kind(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if _counts(groups) == [4, 1]:
        return FourOfAKind(groups[0][1], groups[1][1])
    return None


def _full_house(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if _counts(groups) == [3, 2]:
        return FullHouse(groups[0][1], groups[1][1])
    return None


def _flush(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if flush:
        return Flush(frozenset(rank for _, rank in groups))
    return None


def _straight(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if top is not None:
        return Straight(top)
    return None


def _three_of_a_kind(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if _counts(groups) == [3, 1, 1]:
        return ThreeOfAKind(groups[0][1], frozenset([groups[1][1], groups[2][1]]))
    return None


def _two_pair(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    # higher/lower follow the group order, not a fresh rank comparison
    if _counts(groups) == [2, 2, 1]:
        return TwoPair(groups[0][1], groups[1][1], groups[2][1])
    return None


def _pair(top: Optional[Rank], flush: bool, groups: RankGroups) -> Optional[Value]:
    if groups[0][0] == 2:
        return Pair(groups[0][1], frozenset(rank for _, rank in groups[1:]))
    return None


Recognizer = Callable[[Optional[Rank], bool, RankGroups], Optional[Value]]

# Strongest category first; the first match wins
RECOGNIZERS: Tuple[Recognizer, ...] = (
    _straight_flush,
    _four_of_a_kind,
    _full_house,
    _flush,
    _straight,
    _three_of_a_kind,
    _two_pair,
    _pair,
)


def classify_five(cards: Sequence[Card]) -> Value:
    """
    Classify exactly five cards into a hand value.

    Args:
        cards: The five cards to classify

    Returns:
        The hand value; high card if no other category matches

    Raises:
        InvalidHandShape: If not given exactly five cards
    """
    if len(cards) != 5:
        raise InvalidHandShape(f"Expected 5 cards, got {len(cards)}")

    descending_cards = sorted(cards, key=lambda card: card.rank.strength, reverse=True)
    top = _straight_top(descending_cards)
    flush = _is_flush(descending_cards)
    groups = _rank_groups(descending_cards)

    for recognizer in RECOGNIZERS:
        value = recognizer(top, flush, groups)
        if value is not None:
            return value

    return HighCard(frozenset(card.rank for card in cards))
