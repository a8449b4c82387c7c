# twentyone

A game of twenty-one (blackjack) that you play in the terminal. Up to four
players take turns against a dealer.

## Installing

```
pip install .
```

## Playing

```
twentyone
```

The game first asks how many players are taking part (1-4). An answer that
is not a whole number from 0 to 4 ends the program with exit status 1.
After that:

- Every player and the dealer get two cards. Each card is drawn as a small
  ASCII picture.
- Each player in turn types `HIT` to take another card or `STAY` to stop.
  Any other answer is asked again. A turn also ends once the player's score
  reaches 21 or goes higher.
- An ace counts 11 when it is one of a hand's first two cards. An ace drawn
  later lets the player choose 1 or 11.
- Number cards count their face value. Jacks, queens and kings count 10.
- The dealer keeps drawing until the score is at least 17. After that the
  dealer's cards and final score are shown.
- The highest score of 21 or less wins. Equal best scores are reported as a
  tie. If every score is over 21, everyone has gone bust.

## Using it as a library

The card rules are in `twentyone.cards`:

```python
import random
from twentyone.cards import Deck, card_ascii, find_winners, winner_message

deck = Deck(random.Random(7))
card = deck.draw()
print(card_ascii(card))

# index 0 is the dealer, 1.. are the players
winners = find_winners([18, 20, 20])
print(winner_message(winners))   # Tie between Player 1 and Player 2
```

`Deck` holds 52 cards; `len(deck)` gives how many are left and drawing from
an empty deck raises `IndexError`. `card_value`, `hand_ascii` and
`add_last_card` give a card's value, a drawn hand and a running score.

`twentyone.game.play(players_in_game, deck, read, write)` plays one round
and returns the final scores, the dealer's first. It reads the players'
answers through the `read` callable and sends all output through `write`,
so a game can be scripted or tested. `ask_hit_or_stay` and `ask_ace_value`
are the prompts it uses.

## What it does not do

A run plays a single round. There is no betting, no chips and no record of
results kept between games.

## Running the tests

```
pip install ".[test]"
pytest
```