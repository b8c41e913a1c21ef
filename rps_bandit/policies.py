"""Multi-armed bandit policies for two-shot Rock-Paper-Scissors."""

from abc import ABC, abstractmethod
import random
from typing import Optional

import numpy as np

from .arms import from_arm, to_arm
from .hands import HandPair, random_pair
from .history import ArmHistory, Channel
from .rewards import margin_reward

GREEDY_WARMUP = 100
EPSILON = 0.4
DECAY_EPSILON = 0.7
DECAY_RATE = 50000.0
UCB_COEFFICIENT = 2.0
UCB_MARGIN_COEFFICIENT = 4.0


class RoundSequenceError(RuntimeError):
    """select_arm / on_result were not called in strict alternation."""


class Player(ABC):
    """Base class for anything that can sit on one side of a match."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.reset()

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def select_arm(self) -> HandPair:
        """Return the two hands to show this round."""
        ...

    def on_result(self, win_signal: int, own: HandPair, enemy: HandPair):
        """Receive the outcome of the round just played."""
        pass

    def reset(self):
        """Reset any internal state between matches."""
        pass

    def __repr__(self):
        return f"<{self.name}>"


class Policy(Player):
    """Shared select / record cycle of every bandit policy.

    Subclasses only decide how to pick an arm once every arm has
    ``warmup`` observations on ``gate_channel``.  Until then the
    least-explored arm is played, lowest index first.
    """
    gate_channel = Channel.WIN
    warmup = 1

    def reset(self):
        self.history = ArmHistory()
        self._pending: Optional[HandPair] = None

    @abstractmethod
    def estimate(self) -> int:
        """Steady-state arm choice; only called after cold start."""
        ...

    def cold_start_arm(self) -> Optional[int]:
        arm = self.history.least_explored(self.gate_channel)
        if self.history.count(arm, self.gate_channel) < self.warmup:
            return arm
        return None

    def play(self) -> HandPair:
        return from_arm(self.estimate(), self.rng)

    def select_arm(self) -> HandPair:
        if self._pending is not None:
            raise RoundSequenceError(
                f"{self.name}: select_arm called again before on_result for {self._pending.label}"
            )
        arm = self.cold_start_arm()
        pair = from_arm(arm, self.rng) if arm is not None else self.play()
        self._pending = pair
        return pair

    def on_result(self, win_signal: int, own: HandPair, enemy: HandPair):
        if self._pending is None:
            raise RoundSequenceError(f"{self.name}: on_result called without a selected pair")
        if own != self._pending:
            raise RoundSequenceError(
                f"{self.name}: result is for {own!r} but {self._pending.label} was selected"
            )
        arm = to_arm(own)
        to_arm(enemy)
        self.history.record(arm, int(win_signal), margin_reward(own, enemy))
        self._pending = None

    @staticmethod
    def best_arm(scores) -> int:
        # np.argmax returns the first maximum, so ties go to the lowest arm
        return int(np.argmax(np.asarray(scores, dtype=float)))


# ---------------------------------------------------------------------------
# 1: Greedy
# ---------------------------------------------------------------------------

class Greedy(Policy):
    """Plays every arm a fixed number of times, then sticks with the best.

    After the warm-up it always takes the arm with the highest mean win
    signal.  No randomness once the warm-up is over, apart from the hand
    order of mixed arms.

    **Type**: Bandit / Baseline
    """
    name = "Greedy"

    def __init__(self, warmup: int = GREEDY_WARMUP, rng: Optional[random.Random] = None):
        self.warmup = warmup
        super().__init__(rng)

    def estimate(self) -> int:
        return self.best_arm(self.history.means(Channel.WIN))


# ---------------------------------------------------------------------------
# 2: Epsilon-Greedy
# ---------------------------------------------------------------------------

class EpsilonGreedy(Policy):
    """Exploits the best arm, exploring a random pair with probability ε.

    Exploration draws both hands independently rather than picking a
    random arm, so the explored pairs are not limited to one arm's orders.

    **Type**: Bandit
    **Parameter**: ε = 0.4
    """
    name = "Epsilon Greedy"

    def __init__(self, epsilon: float = EPSILON, rng: Optional[random.Random] = None):
        self.initial_epsilon = epsilon
        super().__init__(rng)

    def reset(self):
        super().reset()
        self.epsilon = self.initial_epsilon

    def estimate(self) -> int:
        return self.best_arm(self.history.means(Channel.WIN))

    def play(self) -> HandPair:
        if self.epsilon > 0 and self.rng.random() <= self.epsilon:
            return random_pair(self.rng)
        return from_arm(self.estimate(), self.rng)


# ---------------------------------------------------------------------------
# 3: Epsilon-Greedy with decay
# ---------------------------------------------------------------------------

class EpsilonGreedyDecay(EpsilonGreedy):
    """Epsilon-greedy whose ε shrinks a little on every exploitation.

    Each call to ``estimate`` applies ``ε ← ε − ε/decay``, so ε decays
    geometrically towards 0 without ever going negative.  Cold-start and
    random-explore rounds leave ε untouched.

    **Type**: Bandit
    **Parameters**: ε₀ = 0.7, decay = 50000
    """
    name = "Epsilon Greedy Decay"

    def __init__(
        self,
        epsilon: float = DECAY_EPSILON,
        decay: float = DECAY_RATE,
        rng: Optional[random.Random] = None,
    ):
        self.decay = decay
        super().__init__(epsilon=epsilon, rng=rng)

    def estimate(self) -> int:
        arm = super().estimate()
        if self.epsilon > 0:
            self.epsilon -= self.epsilon / self.decay
        return arm


# ---------------------------------------------------------------------------
# 4-5: Upper Confidence Bound
# ---------------------------------------------------------------------------

class UCB(Policy):
    """Upper Confidence Bound on the win signal.

    Score per arm: ``mean + c * sqrt(2 * ln(2 * N / n))`` where N is the
    number of rounds played and n the arm's play count.  Rarely played
    arms carry a larger bonus, so they get revisited until their mean is
    pinned down.

    **Type**: Bandit
    **Formula**: UCB, c = 2
    """
    name = "UCB"
    channel = Channel.WIN

    def __init__(self, coefficient: float = UCB_COEFFICIENT, rng: Optional[random.Random] = None):
        self.coefficient = coefficient
        super().__init__(rng)

    def scores(self) -> np.ndarray:
        counts = np.array(self.history.counts(self.channel), dtype=float)
        means = np.array(self.history.means(self.channel), dtype=float)
        total = self.history.total_plays()
        return means + self.coefficient * np.sqrt(2.0 * np.log(2.0 * total / counts))

    def estimate(self) -> int:
        return self.best_arm(self.scores())


class UCBMargin(UCB):
    """UCB driven by the margin reward instead of the win signal.

    Margins span 0..4 rather than 0..1, hence the larger exploration
    coefficient.  Cold start is gated on the margin channel, the one this
    policy actually reads.

    **Type**: Bandit
    **Formula**: UCB on margin, c = 4
    """
    name = "UCB Margin"
    channel = Channel.MARGIN
    gate_channel = Channel.MARGIN

    def __init__(self, coefficient: float = UCB_MARGIN_COEFFICIENT, rng: Optional[random.Random] = None):
        super().__init__(coefficient=coefficient, rng=rng)


POLICY_CLASSES = [Greedy, EpsilonGreedy, EpsilonGreedyDecay, UCB, UCBMargin]
