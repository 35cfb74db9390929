"""
cli.py
Play a full match of Liar's Dice in the terminal: you are player 0, the computer is player 1.
Every round both sides roll their remaining dice; the loser of each call loses a die and
the first side out of dice loses the match. Win/loss counters are kept in a JSON file.
Usage: python UI/cli.py [--agent computer] [--seed N] [--stats-file data/stats.json]
"""
import argparse
from typing import Optional

from bluffdice.core.config import GameConfig
from bluffdice.core.engine import GameEngine, IllegalMoveError
from bluffdice.core.actions import BidAction, CallLiarAction, Action
from bluffdice.core.bid import Bid
from bluffdice.agents.base import Agent
from bluffdice.agents import AGENT_MAP, create_agent
from bluffdice.persistence.stats import JsonFileStore, record_game, read_stats

HUMAN_ID = 0
AGENT_ID = 1


def choose_agent(name: str) -> Agent:
    """
    Return an Agent instance by name.
    Raises:
        ValueError: If the agent name is unknown.
    """
    return create_agent(name.lower())


def print_state(view):
    """Print the standing bid, dice counts and the human's dice."""
    public = view["public"]
    print("\n=== ROUND {round} ===".format(round=public.round_index))
    print(f"Dice left: you {public.dice_counts[HUMAN_ID]}, AI {public.dice_counts[AGENT_ID]}")
    print(f"Your dice: {tuple(view['my_dice'])}")
    last = public.last_bid
    if last is None:
        print("No bids yet.")
    else:
        print(f"Current bid: {last}")


def prompt_action(view) -> Optional[Action]:
    """
    Ask the human for a bid or a call. Returns None if the input is not usable.
    """
    last = view["public"].last_bid
    print("\nChoose action:")
    print("  1) Bid")
    if last is not None:
        print("  2) Call bluff")
    choice = input("Enter choice: ").strip()
    if choice == "2" and last is not None:
        return CallLiarAction()
    if choice != "1":
        print("Choice not recognized.")
        return None
    while True:
        try:
            qty = int(input("Enter quantity: ").strip())
            face = int(input("Enter face (1-6): ").strip())
        except ValueError:
            print("Please enter whole numbers.")
            continue
        bid = Bid(qty, face)
        try:
            bid.validate(view["total_dice"])
        except ValueError as e:
            print(f"Invalid bid: {e}")
            continue
        if not bid.is_higher_than(last):
            print("Bid must be higher than the current bid.")
            continue
        return BidAction(bid)


def describe_round_end(events) -> str:
    """Build the log line for a settled call from the engine's RoundEnded event."""
    ended = next(e for e in events if e["type"] == "RoundEnded")
    called = next(e for e in events if e["type"] == "LiarCalled")
    quantity, face = called["last_bid"]
    if ended["caller"] == HUMAN_ID:
        line = f"You called bluff on AI's bid of {quantity} {face}'s."
    else:
        line = f"AI called bluff on your bid of {quantity} {face}'s."
    line += f" There were actually {ended['match_count']} {face}'s."
    line += " You lose a die!" if ended["loser"] == HUMAN_ID else " AI loses a die!"
    return line


def play_round(engine: GameEngine, agent: Agent) -> None:
    """Play one round, human against agent, and print what happens."""
    engine.start_new_round()
    events = engine.pop_events()
    opener = next(e for e in events if e["type"] == "RoundStarted")["opener"]
    print("You go first." if opener == HUMAN_ID else "AI goes first.")

    while not engine.is_round_over():
        current = engine.state.public.current_player
        if current == HUMAN_ID:
            view = engine.get_view(HUMAN_ID)
            print_state(view)
            action = None
            while action is None:
                action = prompt_action(view)
            try:
                engine.apply_action(HUMAN_ID, action)
            except IllegalMoveError as e:
                print(f"Illegal move: {e}")
                continue
            if isinstance(action, BidAction):
                print(f"You bid {action.bid}.")
        else:
            view = engine.get_view(AGENT_ID)
            action = engine.sanitize_computer_action(agent.choose_action(view))
            engine.apply_action(AGENT_ID, action)
            if isinstance(action, BidAction):
                print(f"AI bids {action.bid}.")
        events.extend(engine.pop_events())

    p0, p1 = engine.state.players
    print(f"\nYour dice: {p0.private_dice}")
    print(f"AI dice:   {p1.private_dice}")
    print(describe_round_end(events))


def play_match(agent_name: str = "computer", config: Optional[GameConfig] = None,
               stats_file: str = "data/stats.json") -> int:
    """
    Play rounds until one side has no dice, then update the stats file.
    Returns:
        int: Winning player index.
    """
    engine = GameEngine(config or GameConfig())
    agent = choose_agent(agent_name)
    print("New game started.")
    while not engine.is_game_over():
        play_round(engine, agent)

    winner = engine.state.public.winner
    print("\n--- GAME OVER ---")
    print("You win!" if winner == HUMAN_ID else "The AI wins.")
    stats = record_game(JsonFileStore(stats_file), "player" if winner == HUMAN_ID else "computer")
    print(f"Wins: {stats.wins}  Losses: {stats.losses}  Games: {stats.games_played}")
    return winner


def show_rules(config: GameConfig):
    """Print the rules in play."""
    print("\n=== GAME RULES ===")
    print(f"Each player starts with {config.starting_dice()[HUMAN_ID]} dice.")
    print("Bid 'at least N dice show face F' across all dice in play.")
    print("A new bid needs more dice, or the same number of dice with a higher face.")
    print("Call bluff to reveal all dice: if the bid holds the caller loses a die, otherwise the bidder does.")
    print("Lose all your dice and you lose the game. No face is wild.")


def main():
    parser = argparse.ArgumentParser(description="Play Liar's Dice against the computer.")
    parser.add_argument("--agent", default="computer", help=f"opponent, one of {sorted(AGENT_MAP)}")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    parser.add_argument("--dice", type=int, default=5, help="starting dice per player")
    parser.add_argument("--stats-file", default="data/stats.json")
    args = parser.parse_args()

    cfg = GameConfig(dice_per_player=args.dice, rng_seed=args.seed)
    print("Welcome to Liar's Dice (CLI)")
    while True:
        print("\nMenu:\n  1) Show rules\n  2) Play\n  3) Show stats\n  4) Quit")
        sel = input("Choose: ").strip()
        if sel == "1":
            show_rules(cfg)
        elif sel == "2":
            try:
                play_match(args.agent, config=cfg, stats_file=args.stats_file)
            except KeyboardInterrupt:
                print("\nGame abandoned.")
        elif sel == "3":
            stats = read_stats(JsonFileStore(args.stats_file))
            print(f"Wins: {stats.wins}  Losses: {stats.losses}  Games: {stats.games_played}")
        elif sel == "4":
            print("Goodbye")
            break
        else:
            print("Unknown choice")


if __name__ == "__main__":
    main()
