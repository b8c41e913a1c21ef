"""Summaries and console reports for matches and gauntlets."""

from dataclasses import dataclass, field

from .arms import ARM_COUNT, ARMS, arm_label, arm_pairs
from .engine import MatchResult, SideResult
from .hands import ALL_PAIRS
from .rewards import MARGIN_TABLE, table_index


@dataclass
class PolicyRecord:
    """One policy's totals over every match it played as side A."""
    name: str
    matches: int = 0
    rounds: int = 0
    wins: int = 0
    losses: int = 0
    net_margin: int = 0
    arm_plays: list = field(default_factory=lambda: [0] * ARM_COUNT)

    @property
    def margin_per_round(self) -> float:
        return self.net_margin / self.rounds if self.rounds else 0.0

    @property
    def win_rate(self) -> float:
        return self.wins / self.rounds if self.rounds else 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "matches": self.matches,
            "rounds": self.rounds,
            "wins": self.wins,
            "losses": self.losses,
            "net_margin": self.net_margin,
            "margin_per_round": round(self.margin_per_round, 4),
            "win_rate": round(self.win_rate, 4),
            "arm_plays": list(self.arm_plays),
        }


def summarize(results: list[MatchResult]) -> list[PolicyRecord]:
    """Fold gauntlet results into one record per policy, best margin first."""
    records: dict[str, PolicyRecord] = {}
    for r in results:
        rec = records.setdefault(r.a.name, PolicyRecord(r.a.name))
        rec.matches += 1
        rec.rounds += r.rounds
        rec.wins += r.a.wins
        rec.losses += r.b.wins
        rec.net_margin += r.a.net_margin
        rec.arm_plays = [x + y for x, y in zip(rec.arm_plays, r.a.arm_plays)]
    return sorted(records.values(), key=lambda rec: (-rec.net_margin, rec.name))


def margin_grid(results: list[MatchResult]) -> dict[str, dict[str, int]]:
    """``{policy: {opponent: net margin}}`` from the policy's side."""
    grid: dict[str, dict[str, int]] = {}
    for r in results:
        grid.setdefault(r.a.name, {})[r.b.name] = r.a.net_margin
    return grid


def _fmt(value, pattern: str) -> str:
    return "-" if value is None else format(value, pattern)


def print_arm_stats(side: SideResult):
    """Per-arm plays and reward means a policy ended the match with."""
    if side.arm_stats is None:
        return
    print(f"  {side.name}: per-arm state")
    print(f"    {'arm':<18s} {'plays':>6s} {'win rate':>9s} {'margin':>7s}")
    for row in side.arm_stats:
        print(f"    {arm_label(row['arm']):<18s} {row['plays']:>6d} "
              f"{_fmt(row['win_rate'], '.3f'):>9s} {_fmt(row['mean_margin'], '.3f'):>7s}")


def print_match(result: MatchResult):
    a, b = result.a, result.b
    print("=" * 60)
    print(f"  {a.name}  vs  {b.name}  ({result.rounds} rounds)")
    print("=" * 60)
    print(f"  {'':16s} {a.name[:18]:>18s} {b.name[:18]:>18s}")
    print(f"  {'Round wins':16s} {a.wins:>18d} {b.wins:>18d}")
    print(f"  {'Net margin':16s} {a.net_margin:>+18d} {b.net_margin:>+18d}")
    print(f"  {'Favourite arm':16s} {arm_label(a.favourite_arm):>18s} {arm_label(b.favourite_arm):>18s}")
    print(f"  {'Draws':16s} {result.draws:>18d}")
    print()
    print(f"  {'arm plays':16s}")
    for arm in ARMS:
        print(f"    {arm_label(arm):<14s} {a.arm_plays[arm]:>18d} {b.arm_plays[arm]:>18d}")
    print()
    print_arm_stats(a)
    print_arm_stats(b)
    print(f"\n  Winner on margin: {result.winner}")
    print("=" * 60)


def print_gauntlet(results: list[MatchResult]):
    """Net margin per pairing, then per-policy totals."""
    grid = margin_grid(results)
    opponents = list(dict.fromkeys(r.b.name for r in results))
    print()
    print("Net margin by opponent (policy side, positive is good):")
    print()
    for i, opp in enumerate(opponents, 1):
        print(f"  {i:>2d} = {opp}")
    print()
    print(f"  {'':>22s} " + " ".join(f"{i:>7d}" for i in range(1, len(opponents) + 1)))
    for policy, row in grid.items():
        cells = " ".join(_fmt(row.get(opp), "+7d").rjust(7) for opp in opponents)
        print(f"  {policy:>22s} {cells}")
    print()

    print("=" * 84)
    print(f"  {'#':>2s}  {'Policy':<22s} {'Rounds':>7s} {'Wins':>6s} {'Losses':>6s} "
          f"{'Margin':>7s} {'M/rnd':>7s}  Favourite arm")
    print("-" * 84)
    for i, rec in enumerate(summarize(results), 1):
        favourite = rec.arm_plays.index(max(rec.arm_plays))
        print(f"  {i:>2d}  {rec.name:<22s} {rec.rounds:>7d} {rec.wins:>6d} {rec.losses:>6d} "
              f"{rec.net_margin:>+7d} {rec.margin_per_round:>+7.3f}  {arm_label(favourite)}")
    print("=" * 84)
    print()


def print_arm_table():
    """Print which ordered pairs each arm covers."""
    print()
    print("Arms:")
    for arm in ARMS:
        pairs = ", ".join(p.label for p in arm_pairs(arm))
        print(f"  {arm}  {arm_label(arm):<18s} {pairs}")
    print()


def print_margin_table():
    """Print the margin reward table, own pair by row."""
    labels = [p.label for p in sorted(ALL_PAIRS, key=table_index)]
    width = max(len(lbl) for lbl in labels)
    print()
    print("Margin table (own pair by row, enemy pair by column, draw = 2):")
    print()
    print(f"  {'':>{width}s} " + " ".join(f"{i:>3d}" for i in range(len(labels))))
    for i, lbl in enumerate(labels):
        row = " ".join(f"{v:>3d}" for v in MARGIN_TABLE[i])
        print(f"  {lbl:>{width}s} {row}   ({i})")
    print()
