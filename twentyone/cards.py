"""Cards, deck, scoring and result reporting for a game of twenty-one."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "K", "J", "Q")
DECK = tuple(rank for rank in RANKS for _ in range(4))

_VALUES = {
    "A": -1,
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "10": 10,
    "J": 10,
    "Q": 10,
    "K": 10,
}

ACE_VALUES = (1, 11)
BLACKJACK = 21
DEALER = 0


class Deck:
    """A 52-card deck; each draw picks a random position until an unused card is found."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[str | None] = list(DECK)
        self._remaining = len(self._cards)

    def draw(self) -> str:
        """Remove and return a random card from the deck."""
        if not self._remaining:
            raise IndexError("draw from an empty deck")
        while True:
            position = self._rng.randrange(len(self._cards))
            card = self._cards[position]
            if card is not None:
                self._cards[position] = None
                self._remaining -= 1
                return card

    def __len__(self) -> int:
        return self._remaining


def card_value(card: str) -> int:
    """Return the fixed value of a card; an ace is marked as -1."""
    try:
        return _VALUES[card]
    except KeyError:
        raise ValueError(f"unknown card: {card!r}") from None


def card_ascii(card: str) -> str:
    """Draw a single card as five lines of text."""
    pad = " " * (5 - len(card))
    return "\n".join(
        [
            "+-----+",
            f"|{card}{pad}|",
            "|     |",
            f"|{pad}{card}|",
            "+-----+",
        ]
    )


def hand_ascii(hand: Sequence[str], player_number: int) -> str:
    """Render a hand with its heading; player 0 is the dealer."""
    if player_number == DEALER:
        heading = "Dealer's cards reveal: "
    else:
        heading = f"Player {player_number}'s card(s): "
    parts = [heading]
    parts.extend(card_ascii(card) for card in hand)
    return "\n".join(parts) + "\n\n"


def add_last_card(hand: Sequence[str], score: int, choose_ace: Callable[[], int]) -> int:
    """Return the score after adding the value of the hand's last card.

    An ace in the first two cards counts 11; a later ace is valued by
    ``choose_ace``, which must give 1 or 11.
    """
    if not hand:
        raise ValueError("hand is empty")
    last = hand[-1]
    if last == "A":
        if len(hand) <= 2:
            ace = 11
        else:
            ace = choose_ace()
            if ace not in ACE_VALUES:
                raise ValueError(f"an ace is worth 1 or 11, not {ace}")
        return score + ace
    return score + card_value(last)


def find_winners(scores: Sequence[int]) -> list[int]:
    """Return the seats holding the best score not over 21.

    ``scores[0]`` is the dealer. Players come first in seat order, the
    dealer last.
    """
    dealer, players = scores[0], scores[1:]
    standing = [score for score in scores if score <= BLACKJACK]
    if not standing:
        return []
    best = max(standing)
    winners = [seat for seat, score in enumerate(players, start=1) if score == best]
    if dealer == best:
        winners.append(DEALER)
    return winners


def _seat_name(seat: int) -> str:
    return "Dealer" if seat == DEALER else f"Player {seat}"


def winner_message(winners: Sequence[int]) -> str:
    """Describe the outcome for the given winning seats."""
    if not winners:
        return "Everyone went bust"
    if len(winners) == 1:
        seat = winners[0]
        return "Dealer wins!" if seat == DEALER else f"Player {seat} Wins"
    return "Tie between " + " and ".join(_seat_name(seat) for seat in winners)