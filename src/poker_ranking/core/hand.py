"""Board and player hand containers."""
from dataclasses import dataclass
from typing import ClassVar, Iterable, Tuple, Union

from .card import Card


def _as_tuple(cards: Iterable[Card]) -> Tuple[Card, ...]:
    return tuple(cards)


@dataclass(frozen=True)
class Board:
    """
    Community cards shared by every hand.

    Attributes:
        cards: Ordered community cards (3 on the flop, 4 on the turn, 5 on the river)
    """
    cards: Tuple[Card, ...]

    def __post_init__(self):
        object.__setattr__(self, 'cards', _as_tuple(self.cards))

    @property
    def size(self) -> int:
        """Number of community cards."""
        return len(self.cards)

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards)


@dataclass(frozen=True)
class TexasHand:
    """Texas Hold'em hole cards (exactly 2)."""
    variant: ClassVar[str] = 'texas'

    cards: Tuple[Card, ...]

    def __post_init__(self):
        object.__setattr__(self, 'cards', _as_tuple(self.cards))

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards)


@dataclass(frozen=True)
class OmahaHand:
    """Omaha hole cards (exactly 4, of which exactly 2 play)."""
    variant: ClassVar[str] = 'omaha'

    cards: Tuple[Card, ...]

    def __post_init__(self):
        object.__setattr__(self, 'cards', _as_tuple(self.cards))

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards)


Hand = Union[TexasHand, OmahaHand]
