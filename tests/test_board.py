import random

import pytest

from the_game.board import Board
from the_game.card import Card, InvalidCardPlay, PileDirection


def _blocked_board():
    board = Board(random.Random(1))
    board.play_card(Card(90), 0)
    board.play_card(Card(80), 1)
    board.play_card(Card(10), 2)
    board.play_card(Card(11), 3)
    return board


def test_new():
    board = Board()
    assert len(board.piles()) == 4
    assert len(board.missing_cards()) == 98


def test_new_piles_directions():
    directions = [p.direction for p in Board().piles()]
    assert directions == [
        PileDirection.ASCENDING,
        PileDirection.ASCENDING,
        PileDirection.DESCENDING,
        PileDirection.DESCENDING,
    ]


def test_deal_hand():
    board = Board()
    hand = board.deal_hand(5)
    assert len(hand) == 5
    assert len(board.missing_cards()) == 93


def test_deal_hand_limited_by_deck():
    board = Board()
    board.deal_hand(95)
    hand = board.deal_hand(8)
    assert len(hand) == 3
    assert board.missing_cards() == []
    assert board.deal_hand(8) == []


def test_deal_takes_from_end_of_deck():
    board = Board(random.Random(7))
    deck = board.missing_cards()
    assert board.deal_hand(4) == deck[-4:]
    assert board.missing_cards() == deck[:-4]


def test_deck_holds_all_cards():
    board = Board(random.Random(3))
    assert board.sorted_deck() == [Card(n) for n in range(2, 100)]


def test_seeded_boards_match():
    first = Board(random.Random(5))
    second = Board(random.Random(5))
    first_deck = first.missing_cards()
    assert len(first_deck) == 98
    assert second.missing_cards() == first_deck
    assert first.deal_hand(8) == second.deal_hand(8) == first_deck[-8:]
    assert first.sorted_deck() == [Card(n) for n in range(2, 100) if Card(n) in first_deck[:-8]]


def test_not_more_available_moves():
    board = _blocked_board()
    cards = [Card(20), Card(30), Card(40), Card(50)]
    assert not board.any_move_available(cards)


def test_some_available_moves():
    board = _blocked_board()
    cards = [Card(2), Card(30), Card(40), Card(50)]
    assert board.any_move_available(cards)


def test_play_invalid_card():
    board = _blocked_board()
    with pytest.raises(InvalidCardPlay):
        board.play_card(Card(50), 0)
    assert board.piles()[0].top == Card(90)


def test_play_on_missing_pile():
    board = Board()
    with pytest.raises(IndexError):
        board.play_card(Card(50), 4)


def test_piles_are_copies():
    board = Board()
    board.piles()[0].play(Card(50))
    assert board.piles()[0].top == Card(1)