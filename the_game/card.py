"""Cards, piles and the errors raised when a card cannot be played."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_CARD = 2
MAX_CARD = 99
HAND_SIZE = 8


class GameError(Exception):
    """Base class for errors raised by the game."""


class InvalidCardPlay(GameError):
    """Raised when a card is played on a pile that does not accept it."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid card play {detail}")
        self.detail = detail


@dataclass(frozen=True, order=True)
class Card:
    """A numbered card."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


class PileDirection(Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"

    def __str__(self) -> str:
        return self.value


@dataclass
class Pile:
    """A pile that accepts cards in one direction, or exactly ten back."""

    direction: PileDirection
    top: Card

    @classmethod
    def ascending(cls) -> Pile:
        return cls(PileDirection.ASCENDING, Card(MIN_CARD - 1))

    @classmethod
    def descending(cls) -> Pile:
        return cls(PileDirection.DESCENDING, Card(MAX_CARD + 1))

    def can_play(self, card: Card) -> bool:
        """Whether the card may be placed on this pile."""
        top = self.top.value
        if self.direction is PileDirection.ASCENDING:
            return top < card.value or top - 10 == card.value
        return top > card.value or top + 10 == card.value

    def play(self, card: Card) -> None:
        """Place the card on the pile, raising InvalidCardPlay if not allowed."""
        if not self.can_play(card):
            raise InvalidCardPlay(
                f"Cannot play card {card.value} on {self.direction} pile "
                f"with top {self.top.value}"
            )
        self.top = card