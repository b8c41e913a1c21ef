"""CLI entry point for the two-shot RPS bandit simulator."""

import argparse

from .backtest import gauntlet
from .engine import run_match
from .opponents import OPPONENT_CLASSES
from .policies import POLICY_CLASSES
from .report import print_arm_table, print_gauntlet, print_margin_table, print_match
from .roster import get_player_by_name


def list_players():
    """Print all available player names."""
    for title, classes in (("Bandit policies", POLICY_CLASSES), ("Synthetic opponents", OPPONENT_CLASSES)):
        print(f"\n{title}:")
        for cls in classes:
            print(f"  - {cls.name}")
    print()


def cmd_match(args):
    player_a = get_player_by_name(args.player_a)
    player_b = get_player_by_name(args.player_b)
    print_match(run_match(player_a, player_b, rounds=args.rounds, seed=args.seed))


def cmd_gauntlet(args):
    """Every chosen policy against every chosen opponent."""
    results = gauntlet(
        policies=args.policy,
        opponents=args.opponent,
        rounds=args.rounds,
        seed=args.seed,
        parallel=not args.sequential,
    )
    print(f"\n{len(results)} matches of {args.rounds} rounds"
          + (f", seed {args.seed}" if args.seed is not None else ""))
    print_gauntlet(results)


def cmd_tables(args):
    print_arm_table()
    print_margin_table()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rps_bandit",
        description="Two-shot Rock-Paper-Scissors bandit simulator",
    )
    parser.add_argument("--list", action="store_true", help="List all available players")
    subparsers = parser.add_subparsers(dest="command")

    match = subparsers.add_parser("match", help="One match, with per-arm counts and margins")
    match.add_argument("--player-a", default="UCB Margin", help="Side A (default: UCB Margin)")
    match.add_argument("--player-b", default="Biased Random", help="Side B (default: Biased Random)")

    gnt = subparsers.add_parser("gauntlet", help="Policies against a field of opponents")
    gnt.add_argument("--policy", action="append",
                     help="Policy to test; repeatable (default: every policy)")
    gnt.add_argument("--opponent", action="append",
                     help="Opponent to face; repeatable (default: every synthetic opponent)")
    gnt.add_argument("--sequential", action="store_true",
                     help="Run matches in this process instead of a process pool")

    for sub in (match, gnt):
        sub.add_argument("--rounds", type=int, default=1000, help="Rounds per match (default: 1000)")
        sub.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")

    subparsers.add_parser("tables", help="Show the arm map and the margin table")
    return parser


COMMANDS = {
    "match": cmd_match,
    "gauntlet": cmd_gauntlet,
    "tables": cmd_tables,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        list_players()
    elif args.command in COMMANDS:
        COMMANDS[args.command](args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
