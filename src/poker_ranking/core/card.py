"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def strength(self) -> int:
        """Numeric strength, 2 for Two up to 14 for Ace."""
        return _STRENGTH[self]

    @property
    def full_name(self) -> str:
        """Name used in hand descriptions, e.g. 'Queen'."""
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        """Plural name used in hand descriptions, e.g. 'Sixes'."""
        if self == Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"


_STRENGTH = {rank: strength for strength, rank in enumerate(Rank, start=2)}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"
