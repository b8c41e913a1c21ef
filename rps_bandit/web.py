"""Flask API for the two-shot RPS bandit simulator."""

from flask import Flask, request, jsonify

from .arms import ARMS, arm_label, arm_pairs, to_arm
from .backtest import gauntlet
from .engine import run_match
from .hands import pair_from_names
from .opponents import OPPONENT_CLASSES
from .policies import POLICY_CLASSES
from .report import margin_grid, summarize
from .rewards import MARGIN_TABLE, TABLE_CODE, margin_reward, win_signal
from .roster import get_player_by_name

app = Flask(__name__)

MAX_ROUNDS = 100_000


@app.errorhandler(ValueError)
def handle_value_error(err):
    return jsonify({"error": str(err)}), 400


def _match_options() -> tuple[dict, int, object]:
    data = request.get_json(silent=True) or {}
    rounds = int(data.get("rounds", 1000))
    if not 0 < rounds <= MAX_ROUNDS:
        raise ValueError(f"rounds must be between 1 and {MAX_ROUNDS}, got {rounds}")
    return data, rounds, data.get("seed")


@app.route("/api/players")
def api_players():
    return jsonify({
        "policies": [cls.name for cls in POLICY_CLASSES],
        "opponents": [cls.name for cls in OPPONENT_CLASSES],
    })


@app.route("/api/tables")
def api_tables():
    return jsonify({
        "arms": [
            {"arm": arm, "label": arm_label(arm), "pairs": [p.label for p in arm_pairs(arm)]}
            for arm in ARMS
        ],
        "margin_table": [list(row) for row in MARGIN_TABLE],
        "table_code": {hand.value: code for hand, code in TABLE_CODE.items()},
    })


@app.route("/api/margin")
def api_margin():
    """Resolve one round: ``?own=rock+paper&enemy=scissors+scissors``."""
    own = pair_from_names(request.args.get("own", ""))
    enemy = pair_from_names(request.args.get("enemy", ""))
    return jsonify({
        "own": own.label,
        "enemy": enemy.label,
        "own_arm": to_arm(own),
        "margin": margin_reward(own, enemy),
        "win": win_signal(own, enemy),
    })


@app.route("/api/match", methods=["POST"])
def api_match():
    data, rounds, seed = _match_options()
    player_a = get_player_by_name(data.get("player_a", "UCB Margin"))
    player_b = get_player_by_name(data.get("player_b", "Biased Random"))
    return jsonify(run_match(player_a, player_b, rounds=rounds, seed=seed).to_dict())


@app.route("/api/gauntlet", methods=["POST"])
def api_gauntlet():
    data, rounds, seed = _match_options()
    results = gauntlet(
        policies=data.get("policies"),
        opponents=data.get("opponents"),
        rounds=rounds,
        seed=seed,
        parallel=bool(data.get("parallel", True)),
    )
    return jsonify({
        "matches": len(results),
        "policies": [rec.to_dict() for rec in summarize(results)],
        "margin_grid": margin_grid(results),
    })


def main():
    print("\nRPS Bandit Web API")
    print("  -> http://localhost:5000/api/players\n")
    app.run(debug=True, port=5000)


if __name__ == "__main__":
    main()
