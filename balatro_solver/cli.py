"""
Command line interface for the Balatro solver.

    balatro-solver stats hand-stats -i 10 --four-fingers
    balatro-solver evaluate "AS KS QS JS TS"
"""

import argparse
import logging
from typing import Optional

from .engine.deck import parse_cards
from .engine.hand_detector import Options, find_best_poker_hand
from .engine.scoring import score_breakdown
from .log import configure_logging
from .presets import get_preset, list_presets
from .stats import fresh_draw_stats, eight_card_draw_stats

logger = logging.getLogger(__name__)

ITERATION_UNIT = 10_000
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _add_rule_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--shortcut", action="store_true",
                        help='Whether the "Shortcut" joker is enabled, allowing straights to have a gap')
    parser.add_argument("--four-fingers", action="store_true",
                        help='Whether the "Four Fingers" joker is enabled, '
                             'allowing straights/flushes to consist of 4 cards')
    parser.add_argument("--preset", choices=list_presets(),
                        help="Start from a named rule preset (flags add to it)")


def _options_from_args(args: argparse.Namespace) -> Options:
    options = Options.from_jokers(shortcut=args.shortcut, four_fingers=args.four_fingers)
    if args.preset:
        options = options | get_preset(args.preset).options
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="balatro-solver",
                                     description="Balatro poker hand solver")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (defaults to $BALATRO_SOLVER_LOG_LEVEL or WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    stats_parser = commands.add_parser("stats", help="Generate statistics")
    stats_commands = stats_parser.add_subparsers(dest="stats_command", required=True)

    hand_stats = stats_commands.add_parser(
        "hand-stats", help="Generate statistics for the 12 different types of Balatro hands")
    hand_stats.add_argument("--single-threaded", action="store_true",
                            help="Run on a single thread (for profiling)")
    hand_stats.add_argument("-i", "--iterations", type=float, default=100,
                            help="Perform this many iterations, in tens of thousands")
    hand_stats.add_argument("--workers", type=int, default=None,
                            help="Worker processes to use (defaults to the CPU count)")
    hand_stats.add_argument("--seed", type=int, default=None,
                            help="Seed the random generators for a reproducible run")
    _add_rule_flags(hand_stats)

    evaluate = commands.add_parser("evaluate", help="Classify and score a hand")
    evaluate.add_argument("cards", help='Cards to play, e.g. "AS KS QS JS TS"')
    _add_rule_flags(evaluate)

    return parser


def run_hand_stats(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    options = _options_from_args(args)
    iterations = int(args.iterations * ITERATION_UNIT)
    if iterations <= 0:
        parser.error("--iterations must add up to at least one sample")
    logger.info("Running hand stats: %d iterations, rules: %s", iterations, options)

    for report_stats in (fresh_draw_stats, eight_card_draw_stats):
        report = report_stats(iterations, options,
                              single_threaded=args.single_threaded,
                              workers=args.workers, seed=args.seed)
        print(report)

    return 0


def run_evaluate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        cards = parse_cards(args.cards)
    except ValueError as e:
        parser.error(str(e))
    if not cards:
        parser.error("no cards given")

    options = _options_from_args(args)
    # More than five cards: play the best five
    kind, hand = find_best_poker_hand(cards, options)

    print(f"Cards: {' '.join(str(c) for c in cards)}")
    print(f"  Hand: {kind.name}")
    print(f"  Scoring cards: {hand}")
    print(f"  {score_breakdown(kind, hand)}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "stats":
        return run_hand_stats(args, parser)
    return run_evaluate(args, parser)
