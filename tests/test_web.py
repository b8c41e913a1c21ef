"""Tests for the Flask API."""
import unittest

from rps_bandit.web import app


class TestWebApi(unittest.TestCase):
    def setUp(self):
        app.config["TESTING"] = True
        self.client = app.test_client()

    def test_players(self):
        data = self.client.get("/api/players").get_json()
        self.assertIn("UCB Margin", data["policies"])
        self.assertIn("Biased Random", data["opponents"])

    def test_tables(self):
        data = self.client.get("/api/tables").get_json()
        self.assertEqual(len(data["arms"]), 6)
        self.assertEqual(data["arms"][3]["pairs"], ["paper+scissors", "scissors+paper"])
        self.assertEqual(data["margin_table"][0][:3], [2, 3, 1])
        self.assertEqual(data["table_code"], {"rock": 0, "scissors": 1, "paper": 2})

    def test_margin_lookup(self):
        data = self.client.get("/api/margin?own=rock+rock&enemy=scissors+scissors").get_json()
        self.assertEqual(data["margin"], 4)
        self.assertEqual(data["win"], 1)
        self.assertEqual(data["own_arm"], 0)

    def test_margin_lookup_rejects_junk(self):
        resp = self.client.get("/api/margin?own=rock&enemy=rock+rock")
        self.assertEqual(resp.status_code, 400)

    def test_match(self):
        resp = self.client.post("/api/match", json={
            "player_a": "Greedy", "player_b": "Cycle", "rounds": 60, "seed": 2,
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data["a"]["wins"] + data["b"]["wins"] + data["draws"], 60)
        self.assertEqual(sum(data["a"]["arm_plays"]), 60)
        self.assertEqual(len(data["a"]["arm_stats"]), 6)
        self.assertIsNone(data["b"]["arm_stats"])
        self.assertIn(data["winner"], ["Greedy", "Cycle", "DRAW"])

    def test_unknown_player_is_bad_request(self):
        resp = self.client.post("/api/match", json={"player_a": "Nobody"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Unknown player", resp.get_json()["error"])

    def test_rounds_out_of_range_is_bad_request(self):
        resp = self.client.post("/api/match", json={"rounds": 0})
        self.assertEqual(resp.status_code, 400)

    def test_gauntlet(self):
        resp = self.client.post("/api/gauntlet", json={
            "policies": ["UCB", "Greedy"], "opponents": ["Cycle", "UCB"],
            "rounds": 10, "seed": 1, "parallel": False,
        })
        data = resp.get_json()
        self.assertEqual(data["matches"], 3)
        self.assertEqual(sorted(rec["name"] for rec in data["policies"]), ["Greedy", "UCB"])
        self.assertEqual(set(data["margin_grid"]["UCB"]), {"Cycle"})
        self.assertEqual(set(data["margin_grid"]["Greedy"]), {"Cycle", "UCB"})


if __name__ == "__main__":
    unittest.main()
