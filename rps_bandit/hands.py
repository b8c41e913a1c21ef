"""Hands and hand pairs for two-shot Rock-Paper-Scissors."""

from enum import Enum
import random
from typing import NamedTuple


class Hand(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


HANDS = [Hand.ROCK, Hand.PAPER, Hand.SCISSORS]


class HandPair(NamedTuple):
    """The two simultaneous hands a player shows in one round."""
    first: Hand
    second: Hand

    @property
    def label(self) -> str:
        return f"{self.first.value}+{self.second.value}"

    @property
    def is_pure(self) -> bool:
        return self.first == self.second


ALL_PAIRS = [HandPair(a, b) for a in HANDS for b in HANDS]


def random_pair(rng: random.Random) -> HandPair:
    """Draw both hands independently and uniformly."""
    return HandPair(rng.choice(HANDS), rng.choice(HANDS))


def pair_from_names(text: str) -> HandPair:
    """Parse a label like ``"rock+paper"`` (case-insensitive).

    A space also separates the hands, since ``+`` in a query string
    arrives decoded as one.
    """
    parts = [p for p in text.lower().replace(" ", "+").split("+") if p]
    if len(parts) != 2:
        raise ValueError(f"Expected two hands joined by '+', got: '{text}'")
    try:
        return HandPair(Hand(parts[0]), Hand(parts[1]))
    except ValueError:
        names = ", ".join(h.value for h in HANDS)
        raise ValueError(f"Unknown hand in '{text}'. Available: {names}") from None
