"""Interactive terminal front end for the game."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from termcolor import colored

from the_game.card import GameError, PileDirection
from the_game.game import Game, GameResult

PLAY_CARD = "Play Card"
END_TURN = "End Turn"

InputFunc = Callable[[str], str]


def render_game_state(game: Game) -> str:
    """Describe the piles, the remaining deck and the player's hand."""
    lines = ["", colored("=== Current Game State ===", "cyan", attrs=["bold"]), ""]
    lines.append(colored("Piles:", "green", attrs=["bold"]))
    for number, pile in enumerate(game.piles(), start=1):
        if pile.direction is PileDirection.ASCENDING:
            direction = colored("↑ Ascending", "light_green")
        else:
            direction = colored("↓ Descending", "light_red")
        lines.append(f"Pile {number}: {direction} - Top Card: {pile.top.value}")
    lines.append("")
    lines.append(colored("Remaining Cards:", "green", attrs=["bold"]))
    lines.append("".join(f"-{card.value}" for card in game.remaining_cards()))
    lines.append(colored("Your Cards:", "green", attrs=["bold"]))
    lines.append("".join(f" ({card.value})" for card in game.player_cards()))
    return "\n".join(lines)


def choose(
    prompt: str,
    options: Sequence[str],
    input_func: InputFunc = input,
    output: TextIO | None = None,
) -> str:
    """Show numbered options and return the one picked; re-ask on bad input."""
    out = output if output is not None else sys.stdout
    options = list(options)
    if not options:
        raise ValueError(f"no options to choose from for {prompt!r}")
    while True:
        print(prompt, file=out)
        for number, option in enumerate(options, start=1):
            print(f"  {number}) {option}", file=out)
        answer = input_func(f"{prompt} ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        print("Invalid choice, try again.", file=out)


def _pile_label(number: int, direction: PileDirection, top: int) -> str:
    arrow = "↑" if direction is PileDirection.ASCENDING else "↓"
    return f"Pile {number} {arrow} (Top: {top})"


def play_turn(
    game: Game,
    input_func: InputFunc = input,
    output: TextIO | None = None,
) -> None:
    """Prompt for moves until the game is no longer in progress."""
    out = output if output is not None else sys.stdout
    while game.current_status() == GameResult.IN_PROGRESS:
        print(render_game_state(game), file=out)

        if game.can_finish_turn():
            action = choose(
                "What would you like to do?", [PLAY_CARD, END_TURN], input_func, out
            )
        else:
            action = PLAY_CARD

        if action == END_TURN:
            game.finish_turn()
            continue

        card_options = [str(card.value) for card in game.player_cards()]
        selected_card = choose("Choose a card to play:", card_options, input_func, out)

        pile_options = [
            _pile_label(number, pile.direction, pile.top.value)
            for number, pile in enumerate(game.piles(), start=1)
        ]
        selected_pile = choose("Choose a pile:", pile_options, input_func, out)
        pile_index = int(selected_pile.split()[1]) - 1

        try:
            game.play_card(int(selected_card), pile_index)
        except GameError as error:
            print(colored(str(error), "light_red"), file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run an interactive game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="the_game",
        description="Play all cards from 2 to 99 onto four piles.",
    )
    parser.parse_args(argv)

    try:
        name = input("What is your name? ")
    except (EOFError, KeyboardInterrupt):
        print("Failed to get name", file=sys.stderr)
        return 1

    game = Game(name)
    try:
        while game.current_status() == GameResult.IN_PROGRESS:
            play_turn(game)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted", file=sys.stderr)
        return 1

    print(render_game_state(game))
    status = game.current_status()
    if status == GameResult.PLAYER_WIN:
        print(f"{game.player_name()} {colored(' You win!', 'light_green')}")
    elif status == GameResult.GAME_WIN:
        print(colored("The game win!", "light_red"))
    else:
        print("you should be playing")
    return 0


if __name__ == "__main__":
    sys.exit(main())