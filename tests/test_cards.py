import random
from collections import Counter

import pytest

from twentyone.cards import (
    DECK,
    Deck,
    add_last_card,
    card_ascii,
    card_value,
    find_winners,
    hand_ascii,
    winner_message,
)


class ScriptedRng:
    def __init__(self, positions):
        self._positions = iter(positions)

    def randrange(self, stop):
        return next(self._positions)


def _never():
    raise AssertionError("ace value should not be asked")


def test_deck_draws_every_card_once():
    deck = Deck(random.Random(7))
    drawn = [deck.draw() for _ in range(52)]
    assert Counter(drawn) == Counter(DECK)
    assert len(deck) == 0


def test_deck_length_shrinks():
    deck = Deck(random.Random(1))
    deck.draw()
    deck.draw()
    assert len(deck) == len(DECK) - 2


def test_empty_deck_raises():
    deck = Deck(random.Random(3))
    for _ in range(52):
        deck.draw()
    with pytest.raises(IndexError):
        deck.draw()


def test_deck_skips_used_positions():
    deck = Deck(ScriptedRng([0, 0, 5]))
    assert deck.draw() == DECK[0]
    assert deck.draw() == DECK[5]


def test_card_value_faces():
    assert card_value("K") == card_value("10")
    assert card_value("7") == 7
    assert card_value("A") == -1


def test_card_value_unknown():
    with pytest.raises(ValueError):
        card_value("Z")


def test_card_ascii_ten():
    assert card_ascii("10") == "+-----+\n|10   |\n|     |\n|   10|\n+-----+"


def test_card_ascii_single_character():
    lines = card_ascii("K").split("\n")
    assert lines[1] == "|K    |"
    assert lines[3] == "|    K|"
    assert all(len(line) == 7 for line in lines)


def test_hand_ascii_dealer_heading():
    text = hand_ascii(["10"], 0)
    assert text.startswith("Dealer's cards reveal: \n")
    assert card_ascii("10") in text
    assert text.endswith("\n\n")


def test_hand_ascii_player_heading():
    text = hand_ascii(["K", "Q"], 3)
    assert text.startswith("Player 3's card(s): \n")
    assert text.count("+-----+") == 4


def test_add_last_card_number():
    assert add_last_card(["K"], 0, _never) == card_value("K")


def test_add_last_card_early_ace_is_eleven():
    assert add_last_card(["2", "A"], 5, _never) == 16


def test_add_last_card_late_ace_is_chosen():
    assert add_last_card(["2", "3", "A"], 5, lambda: 1) == 6


def test_add_last_card_rejects_bad_ace():
    with pytest.raises(ValueError):
        add_last_card(["2", "3", "A"], 5, lambda: 5)


def test_add_last_card_empty_hand():
    with pytest.raises(ValueError):
        add_last_card([], 0, _never)


def test_find_winners_tie_lists_dealer_last():
    assert find_winners([20, 20, 18]) == [1, 0]


def test_find_winners_all_bust():
    assert find_winners([22, 25]) == []


def test_find_winners_players_tie():
    assert find_winners([18, 21, 21]) == [1, 2]


def test_find_winners_dealer_alone():
    assert find_winners([19, 30, 12]) == [0]


def test_winner_messages():
    assert winner_message([]) == "Everyone went bust"
    assert winner_message([0]) == "Dealer wins!"
    assert winner_message([2]) == "Player 2 Wins"
    assert winner_message([1, 0]) == "Tie between Player 1 and Dealer"