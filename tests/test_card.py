import pytest

from the_game.card import (
    MAX_CARD,
    MIN_CARD,
    Card,
    GameError,
    InvalidCardPlay,
    Pile,
    PileDirection,
)


def test_asc_start():
    pile = Pile.ascending()
    assert pile.top.value == MIN_CARD - 1
    assert pile.direction is PileDirection.ASCENDING


def test_desc_start():
    pile = Pile.descending()
    assert pile.top.value == MAX_CARD + 1
    assert pile.direction is PileDirection.DESCENDING


def test_can_play_card_desc():
    assert Pile.descending().can_play(Card(10))


def test_can_play_card_asc():
    assert Pile.ascending().can_play(Card(10))


def test_play_card_desc():
    pile = Pile.descending()
    pile.play(Card(10))
    assert pile.top == Card(10)


def test_play_card_asc():
    pile = Pile.ascending()
    pile.play(Card(10))
    assert pile.top == Card(10)


def test_play_card_fail_asc():
    pile = Pile.ascending()
    pile.play(Card(10))
    with pytest.raises(InvalidCardPlay):
        pile.play(Card(9))
    assert pile.top == Card(10)


def test_play_card_fail_desc():
    pile = Pile.descending()
    pile.play(Card(9))
    with pytest.raises(InvalidCardPlay):
        pile.play(Card(10))
    assert pile.top == Card(9)


def test_backwards_by_ten_asc():
    pile = Pile.ascending()
    pile.play(Card(50))
    assert pile.can_play(Card(40))
    assert not pile.can_play(Card(41))
    pile.play(Card(40))
    assert pile.top == Card(40)


def test_backwards_by_ten_desc():
    pile = Pile.descending()
    pile.play(Card(50))
    assert pile.can_play(Card(60))
    assert not pile.can_play(Card(59))


def test_error_message():
    pile = Pile.ascending()
    pile.play(Card(10))
    with pytest.raises(GameError) as info:
        pile.play(Card(9))
    assert str(info.value) == (
        "Invalid card play Cannot play card 9 on Ascending pile with top 10"
    )


def test_card_equality_and_order():
    assert Card(5) == Card(5)
    assert sorted([Card(7), Card(3)]) == [Card(3), Card(7)]