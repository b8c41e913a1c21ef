"""Match runner for two-shot Rock-Paper-Scissors."""

from dataclasses import dataclass, field
from collections import Counter
import random
from typing import Optional

from .arms import ARM_COUNT, to_arm
from .hands import HandPair
from .rewards import DRAW_MARGIN, margin_reward, win_signal


@dataclass
class SideResult:
    """What one player did and earned over a match."""
    name: str
    wins: int = 0
    net_margin: int = 0
    arm_plays: list = field(default_factory=lambda: [0] * ARM_COUNT)
    pairs: Counter = field(default_factory=Counter)
    # Per-arm learning state at the end of the match; policies only
    arm_stats: Optional[list] = None

    def add(self, pair: HandPair, won: int, margin: int):
        self.wins += won
        self.net_margin += margin - DRAW_MARGIN
        self.arm_plays[to_arm(pair)] += 1
        self.pairs[pair.label] += 1

    @property
    def favourite_arm(self) -> int:
        return self.arm_plays.index(max(self.arm_plays))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "wins": self.wins,
            "net_margin": self.net_margin,
            "arm_plays": list(self.arm_plays),
            "pairs": dict(self.pairs),
            "arm_stats": self.arm_stats,
        }


@dataclass
class MatchResult:
    rounds: int
    a: SideResult
    b: SideResult

    @property
    def draws(self) -> int:
        return self.rounds - self.a.wins - self.b.wins

    @property
    def winner(self) -> str:
        """Name of the side with the larger net margin, or ``"DRAW"``."""
        if self.a.net_margin == self.b.net_margin:
            return "DRAW"
        return self.a.name if self.a.net_margin > self.b.net_margin else self.b.name

    def to_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "draws": self.draws,
            "winner": self.winner,
            "a": self.a.to_dict(),
            "b": self.b.to_dict(),
        }


def _arm_stats(player) -> Optional[list]:
    history = getattr(player, "history", None)
    return history.snapshot() if history is not None else None


def run_match(player_a, player_b, rounds: int = 1000, seed: Optional[int] = None) -> MatchResult:
    """Play ``rounds`` rounds between two player instances.

    Both players are reseeded from ``seed`` and reset first, so a policy
    always starts from an empty history.  Each round both sides select,
    the margin table resolves the round, and both sides get exactly one
    ``on_result`` call.
    """
    master = random.Random(seed)
    for player in (player_a, player_b):
        player.rng = random.Random(master.randint(0, 2**31))
        player.reset()

    a, b = SideResult(player_a.name), SideResult(player_b.name)
    for _ in range(rounds):
        pair_a = player_a.select_arm()
        pair_b = player_b.select_arm()
        won_a, won_b = win_signal(pair_a, pair_b), win_signal(pair_b, pair_a)

        player_a.on_result(won_a, pair_a, pair_b)
        player_b.on_result(won_b, pair_b, pair_a)
        a.add(pair_a, won_a, margin_reward(pair_a, pair_b))
        b.add(pair_b, won_b, margin_reward(pair_b, pair_a))

    a.arm_stats = _arm_stats(player_a)
    b.arm_stats = _arm_stats(player_b)
    return MatchResult(rounds=rounds, a=a, b=b)
