"""Back-testing: bandit policies against a field of opponents.

A gauntlet plays every policy against every opponent once.  Each match
is built from player names inside its worker, so policies never carry
history from one match into another, whether run in this process or
in a process pool.
"""

import os
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

from .engine import MatchResult, run_match
from .opponents import OPPONENT_CLASSES
from .policies import POLICY_CLASSES
from .roster import get_player_by_name

Job = tuple[str, str, int, Optional[int]]


def _play(job: Job) -> MatchResult:
    # Top-level so a process pool can pickle it
    policy_name, opponent_name, rounds, seed = job
    return run_match(
        get_player_by_name(policy_name),
        get_player_by_name(opponent_name),
        rounds=rounds,
        seed=seed,
    )


def gauntlet_jobs(
    policies: list[str],
    opponents: list[str],
    rounds: int,
    seed: Optional[int] = None,
) -> list[Job]:
    """One job per policy/opponent pairing, skipping self-pairings.

    With a ``seed`` every pairing gets its own derived seed, so a single
    pairing replays identically whatever else is in the gauntlet.
    """
    jobs = []
    for i, policy in enumerate(policies):
        for j, opponent in enumerate(opponents):
            if policy.lower() == opponent.lower():
                continue
            match_seed = None if seed is None else seed * 1000 + i * 100 + j
            jobs.append((policy, opponent, rounds, match_seed))
    return jobs


def gauntlet(
    policies: Optional[list[str]] = None,
    opponents: Optional[list[str]] = None,
    rounds: int = 1000,
    seed: Optional[int] = None,
    parallel: bool = True,
) -> list[MatchResult]:
    """Play each named policy against each named opponent.

    Defaults to every bandit policy against every synthetic opponent.
    Names are checked up front, so a typo fails before any match runs.
    Results come back in job order, policy-major.
    """
    if policies is None:
        policies = [cls.name for cls in POLICY_CLASSES]
    if opponents is None:
        opponents = [cls.name for cls in OPPONENT_CLASSES]
    policies = [get_player_by_name(n).name for n in policies]
    opponents = [get_player_by_name(n).name for n in opponents]

    jobs = gauntlet_jobs(policies, opponents, rounds, seed)
    if parallel and len(jobs) > 1:
        with ProcessPoolExecutor(max_workers=min(os.cpu_count() or 4, len(jobs))) as pool:
            return list(pool.map(_play, jobs))
    return [_play(job) for job in jobs]
