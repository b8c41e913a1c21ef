"""Tests for the match runner and the player registry."""
import unittest

from rps_bandit.engine import run_match
from rps_bandit.opponents import ConstantPair, Cycle, Mirror, PureRandom
from rps_bandit.policies import Greedy, UCB, UCBMargin
from rps_bandit.roster import ALL_PLAYER_CLASSES, get_player_by_name


class TestRunMatch(unittest.TestCase):
    def test_round_accounting(self):
        result = run_match(UCBMargin(), PureRandom(), rounds=300, seed=4)
        self.assertEqual(result.a.wins + result.b.wins + result.draws, 300)
        self.assertEqual(result.a.net_margin, -result.b.net_margin)
        self.assertEqual(sum(result.a.arm_plays), 300)
        self.assertEqual(sum(result.b.pairs.values()), 300)
        self.assertIsNone(result.b.arm_stats)

    def test_arm_stats_match_arm_plays(self):
        result = run_match(UCB(), Cycle(), rounds=120, seed=9)
        self.assertEqual([row["plays"] for row in result.a.arm_stats], result.a.arm_plays)

    def test_same_seed_same_match(self):
        first = run_match(UCB(), Cycle(), rounds=200, seed=12)
        second = run_match(UCB(), Cycle(), rounds=200, seed=12)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_players_are_reset_between_matches(self):
        policy = UCB()
        run_match(policy, Mirror(), rounds=50, seed=1)
        result = run_match(policy, Mirror(), rounds=50, seed=2)
        self.assertEqual(sum(row["plays"] for row in result.a.arm_stats), 50)

    def test_greedy_locks_onto_paper_paper_against_rock_rock(self):
        # Paper+paper and rock+paper both always win; the lower arm is kept
        result = run_match(Greedy(), ConstantPair(), rounds=1000, seed=0)
        self.assertEqual(result.a.arm_plays, [100, 100, 500, 100, 100, 100])
        self.assertEqual(result.a.favourite_arm, 2)
        self.assertEqual(result.winner, "Greedy")

    def test_margin_ucb_prefers_best_margin_arm(self):
        result = run_match(UCBMargin(), ConstantPair(), rounds=1000, seed=0)
        self.assertEqual(result.a.favourite_arm, 2)
        self.assertGreater(result.a.wins, result.b.wins)
        self.assertEqual(result.a.arm_stats[2]["mean_margin"], 4.0)

    def test_two_policies_keep_separate_histories(self):
        result = run_match(UCB(), UCBMargin(), rounds=100, seed=5)
        self.assertEqual(sum(result.a.arm_plays), 100)
        self.assertEqual(sum(row["plays"] for row in result.b.arm_stats), 100)

    def test_mirror_match_is_a_draw_on_margin(self):
        result = run_match(ConstantPair(), ConstantPair(), rounds=10, seed=0)
        self.assertEqual(result.draws, 10)
        self.assertEqual(result.winner, "DRAW")


class TestRoster(unittest.TestCase):
    def test_lookup_is_case_insensitive(self):
        self.assertIsInstance(get_player_by_name("ucb margin"), UCBMargin)

    def test_lookup_returns_fresh_instances(self):
        self.assertIsNot(get_player_by_name("UCB"), get_player_by_name("UCB"))

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            get_player_by_name("Nobody")

    def test_names_are_unique(self):
        names = [cls.name for cls in ALL_PLAYER_CLASSES]
        self.assertEqual(len(names), len(set(names)))


if __name__ == "__main__":
    unittest.main()
