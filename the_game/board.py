"""The board: four piles and the draw deck."""

from __future__ import annotations

import copy
import random
from typing import Iterable

from the_game.card import MAX_CARD, MIN_CARD, Card, Pile


class Board:
    """Two ascending and two descending piles, plus a shuffled deck."""

    def __init__(self, rng: random.Random | None = None) -> None:
        deck = [Card(n) for n in range(MIN_CARD, MAX_CARD + 1)]
        (rng or random.Random()).shuffle(deck)
        self._deck = deck
        self._piles = [
            Pile.ascending(),
            Pile.ascending(),
            Pile.descending(),
            Pile.descending(),
        ]

    def deal_hand(self, number_of_cards: int) -> list[Card]:
        """Take up to the given number of cards off the end of the deck."""
        count = min(number_of_cards, len(self._deck))
        if count <= 0:
            return []
        hand = self._deck[-count:]
        del self._deck[-count:]
        return hand

    def play_card(self, card: Card, pile_position: int) -> None:
        if not 0 <= pile_position < len(self._piles):
            raise IndexError(f"no pile at position {pile_position}")
        self._piles[pile_position].play(card)

    def any_move_available(self, cards: Iterable[Card]) -> bool:
        hand = list(cards)
        return any(pile.can_play(card) for pile in self._piles for card in hand)

    def missing_cards(self) -> list[Card]:
        """The cards still in the deck, in deck order."""
        return list(self._deck)

    def piles(self) -> list[Pile]:
        """Copies of the four piles."""
        return [copy.copy(pile) for pile in self._piles]

    def sorted_deck(self) -> list[Card]:
        """The cards still in the deck, sorted by value."""
        return sorted(self._deck, key=lambda card: card.value)