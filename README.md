# the_game

A single-player version of *The Game* that you play in the terminal.

## Rules

- The deck holds the cards 2 to 99 and is shuffled at the start.
- There are four piles. Piles 1 and 2 go **up** and start at 1. Piles 3 and 4 go **down** and start at 100.
- On an ascending pile you may play any card higher than the top card. You may also play a card exactly 10 lower than the top card, which moves the pile back down.
- On a descending pile you may play any card lower than the top card. You may also play a card exactly 10 higher than the top card.
- You hold 8 cards. Each turn you must play at least 2 cards. Once the deck is empty, 1 card per turn is enough. When you end your turn, your hand is filled back up to 8 cards from the deck.
- You win when the deck is empty and your hand is empty. The game wins when you cannot end your turn and none of your cards can be played.

## Installation

```
pip install .
```

## Playing

```
the-game
```

The game asks for your name. It then shows the four piles, the cards still in the deck (sorted by value) and your hand. Every choice is shown as a numbered list: type the number of the option you want. An answer that is not one of the numbers is refused and the question is asked again.

Pick a card, then pick a pile. When you have played enough cards for this turn, you are asked whether to play another card or end the turn. If a move breaks the rules, the game prints the error and you choose again.

At the end the game shows the final state and tells you whether you won. If input ends (Ctrl-D) or you press Ctrl-C, the game stops with exit status 1. The command takes no options besides `--help`.

## Using the library

The rules are also available from Python:

```python
from the_game.game import Game, GameResult

game = Game("Alice")
hand = game.player_cards()
print([card.value for card in hand])

game.play_card(hand[0].value, 0)   # first ascending pile, starts at 1
game.play_card(hand[1].value, 2)   # first descending pile, starts at 100
if game.can_finish_turn():
    result = game.finish_turn()
    print(result is GameResult.IN_PROGRESS)
```

`Game` accepts a `random.Random` as its second argument for a repeatable shuffle. `game.piles()` returns copies of the four `Pile` objects, each with a `direction` (`PileDirection.ASCENDING` or `PileDirection.DESCENDING`) and a `top` card. `game.remaining_cards()` lists the deck sorted by value, and `game.current_status()` returns a `GameResult`: `PLAYER_WIN`, `GAME_WIN` or `IN_PROGRESS`.

An illegal move raises `the_game.card.InvalidCardPlay`, which is a subclass of `the_game.card.GameError`.

The lower-level pieces live in `the_game.card` (`Card`, `Pile`), `the_game.board` (`Board`) and `the_game.player` (`Player`).

## Running the tests

```
pip install .[test]
pytest
```