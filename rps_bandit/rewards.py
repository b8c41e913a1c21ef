"""Round rewards: the win signal and the graduated margin table."""

from .hands import Hand, HandPair

# Index order the margin table was built with
TABLE_CODE = {Hand.ROCK: 0, Hand.SCISSORS: 1, Hand.PAPER: 2}

# Margin of own pair (row) against enemy pair (column), shifted so the
# worst possible margin is 0.  Row/column = code(first) + code(second) * 3.
#   rock+rock vs rock+rock          → 2
#   rock+rock vs rock+scissors      → 3
#   rock+rock vs scissors+scissors  → 4
MARGIN_TABLE = (
    (2, 3, 1, 3, 4, 2, 1, 2, 0),
    (1, 2, 2, 2, 3, 2, 2, 2, 2),
    (3, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 2, 2, 3, 2, 2, 2, 2),
    (0, 1, 2, 1, 2, 3, 2, 3, 4),
    (2, 2, 2, 2, 1, 2, 2, 2, 3),
    (3, 2, 2, 2, 2, 2, 2, 2, 1),
    (2, 2, 2, 2, 1, 2, 2, 2, 3),
    (4, 2, 3, 2, 0, 1, 3, 1, 2),
)

DRAW_MARGIN = 2
MAX_MARGIN = 4


def table_index(pair: HandPair) -> int:
    return TABLE_CODE[pair.first] + TABLE_CODE[pair.second] * 3


def margin_reward(own: HandPair, enemy: HandPair) -> int:
    """Look up the margin reward of ``own`` against ``enemy``."""
    return MARGIN_TABLE[table_index(own)][table_index(enemy)]


def win_signal(own: HandPair, enemy: HandPair) -> int:
    """1 if ``own`` takes the round, else 0.

    The table is antisymmetric around DRAW_MARGIN, so both sides of a
    round agree on who won.
    """
    return 1 if margin_reward(own, enemy) > DRAW_MARGIN else 0
