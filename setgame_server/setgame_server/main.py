"""Main entry point for the Set game rules server."""

import argparse
import json
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from setgame_server.config import Config, load_config
from setgame_server.game.dealer import generate_deck
from setgame_server.game.engine import ReplayEngine, find_set
from setgame_server.logging import ReplayLogConfig, ReplayLogger
from setgame_server.models.card import Card
from setgame_server.models.event import GameMode
from setgame_server.models.snapshot import load_snapshot
from setgame_server.utils.logger import ReplayDisplay, setup_logging

logger = logging.getLogger(__name__)

MODE_CHOICES = [m.value for m in GameMode]


def generate_log_filename(log_dir: str, mode: GameMode) -> str:
    """Generate replay log filename with timestamp and mode.

    Format: {ISO timestamp}_{mode}.jsonl

    Args:
        log_dir: Directory for log files.
        mode: Game mode being replayed.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    filename = f"{timestamp}_{mode.value}.jsonl"
    return str(Path(log_dir) / filename)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Set game rules server: deal decks, find matches, replay events"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    deal = subparsers.add_parser("deal", help="Print a shuffled 81-card deck")
    deal.add_argument(
        "--seed",
        type=int,
        help="Shuffle seed (overrides config)",
    )

    find = subparsers.add_parser("find", help="Find a match among cards")
    find.add_argument("cards", nargs="+", help="Card codes, e.g. 0120")
    find.add_argument(
        "-m",
        "--mode",
        choices=MODE_CHOICES,
        help="Game mode (overrides config)",
    )
    find.add_argument(
        "--old",
        nargs="*",
        default=[],
        help="Cards of the previous match (setchain)",
    )
    find.add_argument(
        "--json",
        action="store_true",
        help="Print the match as JSON",
    )

    replay = subparsers.add_parser("replay", help="Replay a game snapshot")
    replay.add_argument("snapshot", type=Path, help="Snapshot JSON file")
    replay.add_argument(
        "-m",
        "--mode",
        choices=MODE_CHOICES,
        help="Game mode (overrides snapshot)",
    )
    replay.add_argument(
        "--show-deck",
        action="store_true",
        help="List remaining cards in output",
    )
    replay.add_argument(
        "--replay-log",
        type=Path,
        help="Directory for replay log files (filename auto-generated)",
    )
    replay.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    return parser


def run_deal(args: argparse.Namespace, config: Config) -> int:
    """Print a shuffled deck as a JSON list of card codes."""
    seed = args.seed if args.seed is not None else config.game.seed
    deck = generate_deck(random.Random(seed))
    print(json.dumps([card.code for card in deck]))
    return 0


def run_find(args: argparse.Namespace, config: Config) -> int:
    """Search the given cards for a match."""
    mode = GameMode(args.mode) if args.mode else config.game.mode
    cards = [Card.from_code(code) for code in args.cards]
    old = [Card.from_code(code) for code in args.old]

    match = find_set(cards, mode, old, config.rules)
    if args.json:
        print(json.dumps([c.code for c in match] if match is not None else None))
    else:
        ReplayDisplay().print_match(match)
    return 0


def run_replay(args: argparse.Namespace, config: Config) -> int:
    """Replay a snapshot and print the resulting game state."""
    snapshot = load_snapshot(args.snapshot)
    if args.mode:
        snapshot.mode = GameMode(args.mode)
    if args.show_deck:
        config.logging.show_deck = True

    # CLI argument overrides config file
    replay_log_enabled = args.replay_log is not None or config.replay_log.enabled
    if args.replay_log is not None:
        log_path = generate_log_filename(str(args.replay_log), snapshot.mode)
        replay_log_config = ReplayLogConfig(enabled=True, output_path=log_path)
    else:
        replay_log_config = ReplayLogConfig(
            enabled=replay_log_enabled, output_path=config.replay_log.output_path
        )

    with ReplayLogger(replay_log_config) as replay_logger:
        engine = ReplayEngine(snapshot.mode, config, replay_logger)
        result = engine.replay(snapshot.deck, snapshot.events)
        game_over = engine.is_game_over(result)

    if args.json:
        print(json.dumps({**result.to_dict(), "gameOver": game_over}))
    else:
        display = ReplayDisplay(show_deck=config.logging.show_deck)
        display.print_result(snapshot.mode.value, result, game_over)
    return 0


COMMANDS = {
    "deal": run_deal,
    "find": run_find,
    "replay": run_replay,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"

    # Setup logging
    setup_logging(config.logging.level)

    try:
        return COMMANDS[args.command](args, config)
    except Exception as e:
        logger.exception(f"Command {args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
