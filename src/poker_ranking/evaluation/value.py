"""Hand values and their total ordering.

Each of the nine hand categories has its own payload type. ``Value`` is the
closed union of those types. Ordering is the three-way :func:`compare_values`.
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key
from typing import ClassVar, FrozenSet, Iterable, Tuple, Union

from poker_ranking.core.card import Rank
from poker_ranking.evaluation.exceptions import NoValidCombination

logger = logging.getLogger(__name__)


class Category(IntEnum):
    """Hand categories ordered from weakest to strongest."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


def _descending(ranks: Iterable[Rank]) -> Tuple[Rank, ...]:
    return tuple(sorted(ranks, key=lambda r: r.strength, reverse=True))


@dataclass(frozen=True)
class HighCard:
    ranks: FrozenSet[Rank]
    category: ClassVar[Category] = Category.HIGH_CARD

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return _descending(self.ranks)


@dataclass(frozen=True)
class Pair:
    pair: Rank
    kickers: FrozenSet[Rank]
    category: ClassVar[Category] = Category.PAIR

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.pair,) + _descending(self.kickers)


@dataclass(frozen=True)
class TwoPair:
    higher: Rank
    lower: Rank
    kicker: Rank
    category: ClassVar[Category] = Category.TWO_PAIR

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.higher, self.lower, self.kicker)


@dataclass(frozen=True)
class ThreeOfAKind:
    triple: Rank
    kickers: FrozenSet[Rank]
    category: ClassVar[Category] = Category.THREE_OF_A_KIND

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.triple,) + _descending(self.kickers)


@dataclass(frozen=True)
class Straight:
    top: Rank
    category: ClassVar[Category] = Category.STRAIGHT

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.top,)


@dataclass(frozen=True)
class Flush:
    ranks: FrozenSet[Rank]
    category: ClassVar[Category] = Category.FLUSH

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return _descending(self.ranks)


@dataclass(frozen=True)
class FullHouse:
    triple: Rank
    pair: Rank
    category: ClassVar[Category] = Category.FULL_HOUSE

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.triple, self.pair)


@dataclass(frozen=True)
class FourOfAKind:
    quad: Rank
    kicker: Rank
    category: ClassVar[Category] = Category.FOUR_OF_A_KIND

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.quad, self.kicker)


@dataclass(frozen=True)
class StraightFlush:
    top: Rank
    category: ClassVar[Category] = Category.STRAIGHT_FLUSH

    @property
    def major(self) -> int:
        return int(self.category)

    @property
    def descending_ranks(self) -> Tuple[Rank, ...]:
        return (self.top,)


Value = Union[
    HighCard,
    Pair,
    TwoPair,
    ThreeOfAKind,
    Straight,
    Flush,
    FullHouse,
    FourOfAKind,
    StraightFlush,
]


def compare_values(x: Value, y: Value) -> int:
    """
    Compare two hand values.

    Returns:
        1 if x is stronger, -1 if y is stronger, 0 if tie
    """
    if x.major != y.major:
        return 1 if x.major > y.major else -1

    for xr, yr in zip(x.descending_ranks, y.descending_ranks):
        if xr.strength != yr.strength:
            return 1 if xr.strength > yr.strength else -1

    return 0  # Tie


value_key = cmp_to_key(compare_values)


def max_value(values: Iterable[Value]) -> Value:
    """
    Return the strongest of a sequence of values.

    Raises:
        NoValidCombination: If the sequence is empty
    """
    best = max(values, key=value_key, default=None)
    if best is None:
        message = "No hand values to choose from"
        logger.warning(message)
        raise NoValidCombination(message)
    return best
