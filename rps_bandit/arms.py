"""Arm space: the 9 ordered hand pairs collapsed onto 6 bandit arms.

Pairs that differ only in hand order are the same strategy, so
``rock+paper`` and ``paper+rock`` share an arm.  Going back from an arm
to a concrete pair picks the order at random for the mixed arms, so an
opponent watching our first hand cannot read the arm we committed to.
"""

import random

from .hands import Hand, HandPair

ARM_COUNT = 6
ARMS = range(ARM_COUNT)

PURE_ARMS = (0, 1, 2)
MIXED_ARMS = (3, 4, 5)

# Arm → the canonical pair; mixed arms also play the reversed order
_ARM_PAIRS = (
    HandPair(Hand.ROCK, Hand.ROCK),
    HandPair(Hand.SCISSORS, Hand.SCISSORS),
    HandPair(Hand.PAPER, Hand.PAPER),
    HandPair(Hand.PAPER, Hand.SCISSORS),
    HandPair(Hand.SCISSORS, Hand.ROCK),
    HandPair(Hand.ROCK, Hand.PAPER),
)

_PAIR_TO_ARM = {}
for _arm, _pair in enumerate(_ARM_PAIRS):
    _PAIR_TO_ARM[_pair] = _arm
    _PAIR_TO_ARM[HandPair(_pair.second, _pair.first)] = _arm


def to_arm(pair: HandPair) -> int:
    """Map any of the 9 ordered pairs to its arm index."""
    try:
        return _PAIR_TO_ARM[pair]
    except (KeyError, TypeError):
        raise ValueError(f"Not a pair of hands: {pair!r}") from None


def from_arm(arm: int, rng: random.Random) -> HandPair:
    """Build a concrete pair for ``arm``.

    Pure arms are deterministic.  Mixed arms return either order with
    probability 1/2, drawn from ``rng``.
    """
    # bool is an int subclass; True must not pass for arm 1
    if isinstance(arm, bool) or not isinstance(arm, int) or not 0 <= arm < ARM_COUNT:
        raise ValueError(f"Arm out of range: {arm!r}")
    pair = _ARM_PAIRS[arm]
    if arm in MIXED_ARMS and rng.randrange(2) == 1:
        return HandPair(pair.second, pair.first)
    return pair


def arm_pairs(arm: int) -> list[HandPair]:
    """Every ordered pair that maps to ``arm``."""
    pair = _ARM_PAIRS[arm]
    if pair.is_pure:
        return [pair]
    return [pair, HandPair(pair.second, pair.first)]


def arm_label(arm: int) -> str:
    pair = _ARM_PAIRS[arm]
    if pair.is_pure:
        return pair.label
    return f"{pair.first.value}/{pair.second.value}"
