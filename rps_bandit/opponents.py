"""Synthetic opponents for back-testing the bandit policies."""

from typing import Optional

from .hands import ALL_PAIRS, HANDS, Hand, HandPair, random_pair
from .policies import Player


class ConstantPair(Player):
    """Always shows rock+rock.

    The most exploitable opponent there is; every policy should find the
    arm that beats it.

    **Type**: Baseline
    """
    name = "Always Rock Rock"
    pair = HandPair(Hand.ROCK, Hand.ROCK)

    def select_arm(self) -> HandPair:
        return self.pair


class ConstantMixed(ConstantPair):
    """Always shows paper+scissors, a mixed pair in a fixed order."""
    name = "Always Paper Scissors"
    pair = HandPair(Hand.PAPER, Hand.SCISSORS)


class PureRandom(Player):
    """Draws both hands uniformly at random every round.

    Unexploitable in the long run; useful to check that a policy does not
    lose ground against noise.

    **Type**: Baseline
    """
    name = "Pure Random"

    def select_arm(self) -> HandPair:
        return random_pair(self.rng)


class BiasedRandom(Player):
    """Stationary random opponent with a fixed lean towards one hand.

    Each hand is drawn independently with the weights below, so the
    opponent is beatable on average but never predictable round to round.

    **Type**: Stationary
    """
    name = "Biased Random"
    weights = (0.5, 0.3, 0.2)

    def select_arm(self) -> HandPair:
        first, second = self.rng.choices(HANDS, weights=self.weights, k=2)
        return HandPair(first, second)


class Cycle(Player):
    """Steps through all 9 ordered pairs in a fixed order.

    **Type**: Pattern
    """
    name = "Cycle"

    def reset(self):
        self._round = 0

    def select_arm(self) -> HandPair:
        pair = ALL_PAIRS[self._round % len(ALL_PAIRS)]
        self._round += 1
        return pair


class Mirror(Player):
    """Repeats whatever pair the opponent showed last round.

    **Type**: Reactive
    """
    name = "Mirror"

    def reset(self):
        self._last_enemy: Optional[HandPair] = None

    def select_arm(self) -> HandPair:
        if self._last_enemy is None:
            return HandPair(Hand.PAPER, Hand.PAPER)
        return self._last_enemy

    def on_result(self, win_signal, own, enemy):
        self._last_enemy = enemy


OPPONENT_CLASSES = [ConstantPair, ConstantMixed, PureRandom, BiasedRandom, Cycle, Mirror]
