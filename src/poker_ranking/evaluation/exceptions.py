"""Errors raised while evaluating poker hands."""


class EvaluationError(ValueError):
    """Base class for hand evaluation errors."""

    pass


class InvalidHandShape(EvaluationError):
    """Raised when a board or hand does not match its variant's shape."""

    pass


class InsufficientCards(EvaluationError):
    """Raised when too few community cards are dealt to form a hand."""

    pass


class NoValidCombination(EvaluationError):
    """Raised when no legal five-card combination exists."""

    pass
