"""Enumeration of the five-card hands a player may make."""
import itertools
import logging
from typing import Iterator, Tuple

from poker_ranking.config.variants import ShowdownRule, get_variant_config
from poker_ranking.core.card import Card
from poker_ranking.core.hand import Board, Hand, OmahaHand, TexasHand
from poker_ranking.evaluation.exceptions import InvalidHandShape

logger = logging.getLogger(__name__)

Combination = Tuple[Card, ...]


def variant_of(hand: Hand) -> str:
    """
    Get the variant id for a hand.

    Raises:
        InvalidHandShape: If the hand is not a known variant
    """
    if isinstance(hand, TexasHand):
        return TexasHand.variant
    elif isinstance(hand, OmahaHand):
        return OmahaHand.variant
    message = f"Unknown hand type: {type(hand).__name__}"
    logger.warning(message)
    raise InvalidHandShape(message)


def _any_cards(board: Board, hand: Hand, rule: ShowdownRule) -> Iterator[Combination]:
    """Every subset of board and hole cards of the rule's size."""
    return itertools.combinations(board.cards + hand.cards, rule.any_cards)


def _hole_and_community(board: Board, hand: Hand, rule: ShowdownRule) -> Iterator[Combination]:
    """Exactly the rule's number of community cards plus hole cards."""
    for comm_combo in itertools.combinations(board.cards, rule.community_cards):
        for hole_combo in itertools.combinations(hand.cards, rule.hole_cards):
            yield comm_combo + hole_combo


def combinations(board: Board, hand: Hand) -> Iterator[Combination]:
    """
    Generate every legal five-card combination for a board and hand.

    Texas Hold'em uses any five of the board and hole cards. Omaha uses
    exactly three board cards and exactly two hole cards. Yields nothing if
    too few cards are available.
    """
    rule = get_variant_config(variant_of(hand)).showdown
    if rule.any_cards is not None:
        return _any_cards(board, hand, rule)
    return _hole_and_community(board, hand, rule)
