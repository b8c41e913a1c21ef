"""Per-arm reward history owned by a single policy instance."""

from enum import Enum

from .arms import ARM_COUNT


class Channel(Enum):
    WIN = "win"
    MARGIN = "margin"


class EmptyHistoryError(LookupError):
    """A mean was requested for an arm that has never been played."""


class ArmHistory:
    """Append-only reward sequences, one per arm and channel.

    The sequence length is the play count and ``sum / len`` the mean;
    nothing else is kept, and nothing is ever removed or reordered.
    """

    def __init__(self, arm_count: int = ARM_COUNT):
        self.arm_count = arm_count
        self._rewards: dict[Channel, list[list[int]]] = {
            channel: [[] for _ in range(arm_count)] for channel in Channel
        }
        # Running sums so mean() does not rescan the list
        self._sums: dict[Channel, list[int]] = {
            channel: [0] * arm_count for channel in Channel
        }

    def record(self, arm: int, win_signal: int, margin_signal: int):
        """Append one round's rewards to both channels of ``arm``."""
        if not 0 <= arm < self.arm_count:
            raise ValueError(f"Arm out of range: {arm!r}")
        for channel, value in ((Channel.WIN, win_signal), (Channel.MARGIN, margin_signal)):
            self._rewards[channel][arm].append(value)
            self._sums[channel][arm] += value

    def count(self, arm: int, channel: Channel = Channel.WIN) -> int:
        return len(self._rewards[channel][arm])

    def counts(self, channel: Channel = Channel.WIN) -> list[int]:
        return [len(r) for r in self._rewards[channel]]

    def mean(self, arm: int, channel: Channel = Channel.WIN) -> float:
        n = self.count(arm, channel)
        if n == 0:
            raise EmptyHistoryError(f"No {channel.value} rewards recorded for arm {arm}")
        return self._sums[channel][arm] / n

    def means(self, channel: Channel = Channel.WIN) -> list[float]:
        return [self.mean(arm, channel) for arm in range(self.arm_count)]

    def total_plays(self) -> int:
        """Rounds recorded so far, counted on the win channel."""
        return sum(self.counts(Channel.WIN))

    def least_explored(self, channel: Channel = Channel.WIN) -> int:
        """Arm with the fewest observations; lowest index wins ties."""
        counts = self.counts(channel)
        return counts.index(min(counts))

    def snapshot(self) -> list[dict]:
        """Per-arm plays and means for reporting; unplayed arms get ``None``."""
        rows = []
        for arm in range(self.arm_count):
            plays = self.count(arm)
            rows.append({
                "arm": arm,
                "plays": plays,
                "win_rate": self.mean(arm) if plays else None,
                "mean_margin": self.mean(arm, Channel.MARGIN) if plays else None,
            })
        return rows
