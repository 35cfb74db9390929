"""
simulate.py
Run full matches between two registered agents (default: computer vs random), save one
summary row per match to CSV and print win rates. With --plot, also save a win% bar chart.
Usage: python scripts/simulate.py --agent0 computer --agent1 random --matches 100 --data-dir data --plot
"""
import os
import argparse
import random
import datetime
import hashlib
from collections import Counter
from typing import Any, Dict

from bluffdice.agents import AGENT_MAP, create_agent
from bluffdice.core.config import GameConfig
from bluffdice.core.engine import GameEngine, IllegalMoveError, play_round
from bluffdice.persistence import csv_io


def generate_match_id(agent0, agent1, timestamp):
    raw = f"{timestamp}_{agent0}_{agent1}"
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def run_full_match(agent0: str, agent1: str, cfg: GameConfig, match_index: int, match_id: str, timestamp: str) -> Dict[str, Any]:
    """
    Play rounds until one player has zero dice and summarise the match.
    An illegal move ends the match without a winner and is recorded in 'error'.
    """
    engine = GameEngine(cfg)
    if cfg.rng_seed is None:
        agents = (create_agent(agent0), create_agent(agent1))
    else:
        agents = (create_agent(agent0, rng=random.Random(cfg.rng_seed * 2)),
                  create_agent(agent1, rng=random.Random(cfg.rng_seed * 2 + 1)))
    counts = Counter()
    error = None

    try:
        while not engine.is_game_over():
            for ev in play_round(engine, agents):
                counts[ev["type"]] += 1
                if ev["type"] == "RoundEnded" and ev["was_true"] is False:
                    counts["bluffs_called"] += 1
    except IllegalMoveError as e:
        error = str(e)

    return {
        "match_id": match_id,
        "match_index": match_index,
        "timestamp": timestamp,
        "agent0": type(agents[0]).__name__,
        "agent1": type(agents[1]).__name__,
        "winner": engine.state.public.winner,
        "rounds_played": engine.state.public.round_index,
        "bids": counts["BidPlaced"],
        "calls": counts["LiarCalled"],
        "bluffs_called": counts["bluffs_called"],
        "final_dice": list(engine.state.public.dice_counts),
        "error": error,
    }


def plot_win_rates(labels, wins, games: int, out_path: str):
    """Save a bar chart of win percentages per agent slot."""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    win_perc = [(w / games * 100.0) if games > 0 else 0.0 for w in wins]
    plt.figure(figsize=(6, 4))
    bars = plt.bar(labels, win_perc, color='C0')
    plt.ylabel('Win percentage (%)')
    plt.ylim(0, 100)
    plt.title(f'Win% over {games} matches')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 1.0, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description="Simulate Liar's Dice matches between two agents.")
    parser.add_argument("--agent0", default="computer")
    parser.add_argument("--agent1", default="random")
    parser.add_argument("--matches", type=int, default=100)
    parser.add_argument("--dice", type=int, default=5, help="starting dice per player")
    parser.add_argument("--seed", type=int, default=None, help="base seed; match i uses seed + i")
    parser.add_argument("--data-dir", default="data")
    parser.add_argument("--plot", action="store_true", help="save a win% chart (needs matplotlib)")
    args = parser.parse_args()

    for key in (args.agent0, args.agent1):
        if key not in AGENT_MAP:
            raise SystemExit(f"Unknown agent {key!r}. Supported: {sorted(AGENT_MAP)}")

    os.makedirs(args.data_dir, exist_ok=True)
    summary_csv = os.path.join(args.data_dir, "match_summary.csv")
    summary_header = csv_io.get_summary_header()

    wins = Counter()
    for i in range(args.matches):
        seed = None if args.seed is None else args.seed + i
        cfg = GameConfig(dice_per_player=args.dice, rng_seed=seed)
        timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
        match_id = generate_match_id(args.agent0, args.agent1, f"{timestamp}_{i}")
        print(f"Running match {i+1}/{args.matches}...", end=" ")
        row = run_full_match(args.agent0, args.agent1, cfg, i, match_id, timestamp)
        csv_io.append_row_to_csv(row, summary_csv, summary_header)
        wins[row["winner"]] += 1
        print("done" if row["error"] is None else f"error: {row['error']}")

    labels = [f"{args.agent0} (0)", f"{args.agent1} (1)"]
    for player, label in enumerate(labels):
        print(f"{label}: {wins[player]}/{args.matches} wins")
    if wins[None]:
        print(f"{wins[None]} matches ended without a winner")
    print(f"Summary saved to {summary_csv}")

    if args.plot:
        chart_png = os.path.join(args.data_dir, "win_percentages.png")
        plot_win_rates(labels, [wins[0], wins[1]], args.matches, chart_png)
        print(f"Chart saved to {chart_png}")


if __name__ == "__main__":
    main()
