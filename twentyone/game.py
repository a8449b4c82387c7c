"""Interactive play of twenty-one against a dealer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from twentyone.cards import (
    ACE_VALUES,
    BLACKJACK,
    Deck,
    add_last_card,
    find_winners,
    hand_ascii,
    winner_message,
)

MAX_PLAYERS = 4
DEALER_STANDS_AT = 17

Reader = Callable[[], str]
Writer = Callable[[str], object]


def ask_hit_or_stay(read: Reader, write: Writer) -> str:
    """Ask until the answer is exactly HIT or STAY, and return it."""
    write("HIT or STAY: ")
    answer = read().strip()
    while answer not in ("HIT", "STAY"):
        write("Invalid input. Please type HIT or STAY: ")
        answer = read().strip()
    return answer


def ask_ace_value(read: Reader, write: Writer) -> int:
    """Ask until the answer is 1 or 11, and return it."""
    write("Pick Ace value (1 or 11): ")
    while True:
        try:
            value = int(read().strip())
        except ValueError:
            value = None
        if value in ACE_VALUES:
            return value
        write("Invalid choice. Pick Ace value (1 or 11): ")


def play(players_in_game: int, deck: Deck, read: Reader, write: Writer) -> list[int]:
    """Play one round and return the final scores, the dealer's first."""
    if not 0 <= players_in_game <= MAX_PLAYERS:
        raise ValueError(f"between 0 and {MAX_PLAYERS} players may play, not {players_in_game}")

    def choose_ace() -> int:
        return ask_ace_value(read, write)

    hands: list[list[str]] = [[] for _ in range(players_in_game + 1)]
    scores = [0] * (players_in_game + 1)

    def deal(seat: int) -> None:
        hands[seat].append(deck.draw())
        scores[seat] = add_last_card(hands[seat], scores[seat], choose_ace)

    for seat in range(players_in_game + 1):
        deal(seat)
        deal(seat)

    for seat in range(1, players_in_game + 1):
        while scores[seat] < BLACKJACK:
            write(hand_ascii(hands[seat], seat))
            write(f"Current score: {scores[seat]}\n")
            if ask_hit_or_stay(read, write) == "HIT":
                deal(seat)
            else:
                write(hand_ascii(hands[seat], seat))
                break
        if scores[seat] > BLACKJACK:
            write(hand_ascii(hands[seat], seat))
            write(f"player's score: {scores[seat]}\n")
            write(f"Player {seat} Goes bust\n")

    while scores[0] < DEALER_STANDS_AT:
        deal(0)
    write(hand_ascii(hands[0], 0))
    write(f"Dealer's final score: {scores[0]}\n")
    if scores[0] > BLACKJACK:
        write("Dealer goes bust\n")

    write(winner_message(find_winners(scores)) + "\n")
    return scores


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv=None) -> int:
    """Run one round on the terminal."""
    parser = argparse.ArgumentParser(prog="twentyone", description="Play twenty-one against a dealer.")
    parser.parse_args(argv)
    try:
        _write(f"Number of players (1-{MAX_PLAYERS}): ")
        answer = input().strip()
        try:
            players_in_game = int(answer)
        except ValueError:
            print(f"Invalid number of players: {answer}", file=sys.stderr)
            return 1
        if not 0 <= players_in_game <= MAX_PLAYERS:
            print(f"Invalid number of players: {answer}", file=sys.stderr)
            return 1
        play(players_in_game, Deck(), input, _write)
    except EOFError:
        print(file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())