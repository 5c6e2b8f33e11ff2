"""The player and the cards in their hand."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from the_game.card import Card


@dataclass
class Player:
    name: str
    cards: list[Card] = field(default_factory=list)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def play_card(self, card: Card) -> None:
        """Remove every card of the same value from the hand."""
        self.cards = [c for c in self.cards if c.value != card.value]