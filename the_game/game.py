"""Game rules: turns, movement counting and win/lose detection."""

from __future__ import annotations

import random
from enum import Enum

from the_game.board import Board
from the_game.card import HAND_SIZE, Card, Pile
from the_game.player import Player


class GameResult(Enum):
    """Outcome of a game as seen at any moment."""

    PLAYER_WIN = "player_win"
    GAME_WIN = "game_win"
    IN_PROGRESS = "in_progress"


class Game:
    """A single-player game: one player, one board."""

    def __init__(self, player_name: str, rng: random.Random | None = None) -> None:
        self._board = Board(rng)
        self._player = Player(player_name)
        self._player.add_cards(self._board.deal_hand(HAND_SIZE))
        self._movements_count = 0

    def play_card(self, card: int, pile: int) -> None:
        """Play the card with the given value on the pile at the given index.

        Raises InvalidCardPlay if the pile does not accept the card.
        """
        played = Card(card)
        self._board.play_card(played, pile)
        self._player.play_card(played)
        self._movements_count += 1

    def can_finish_turn(self) -> bool:
        """Two plays are needed per turn, or one once the deck is empty."""
        min_movements = 1 if not self._board.missing_cards() else 2
        return self._movements_count >= min_movements

    def finish_turn(self) -> GameResult:
        """End the turn, refill the hand and report the game status."""
        self._movements_count = 0
        cards_needed = HAND_SIZE - len(self._player.cards)
        self._player.add_cards(self._board.deal_hand(cards_needed))
        return self.current_status()

    def _lose_condition(self) -> bool:
        return not self.can_finish_turn() and not self._board.any_move_available(
            self._player.cards
        )

    def current_status(self) -> GameResult:
        if not self._player.cards and not self._board.missing_cards():
            return GameResult.PLAYER_WIN
        if self._lose_condition():
            return GameResult.GAME_WIN
        return GameResult.IN_PROGRESS

    def piles(self) -> list[Pile]:
        return self._board.piles()

    def player_cards(self) -> list[Card]:
        return list(self._player.cards)

    def player_name(self) -> str:
        return self._player.name

    def remaining_cards(self) -> list[Card]:
        """Cards still in the deck, sorted by value."""
        return self._board.sorted_deck()