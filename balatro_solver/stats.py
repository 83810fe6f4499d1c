"""
Monte Carlo hand statistics.

Repeatedly shuffles a fresh deck, draws cards, classifies and scores the
result, and reports how often each hand kind shows up.

Usage:
    report = fresh_draw_stats(iterations=100_000, seed=1)
    print(report)
"""

import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from functools import partial, reduce
from typing import Callable, Optional

from .engine.deck import Deck
from .engine.hand_detector import (HandKind, Options, DetectedHand,
                                   evaluate_poker_hand, find_best_poker_hand)
from .engine.scoring import score_hand

logger = logging.getLogger(__name__)

EIGHT_CARD_DRAW = 8

# HandKind -> (times seen, total score)
Tally = dict[HandKind, tuple[int, float]]
DrawFunction = Callable[[random.Random, Options], DetectedHand]


@dataclass
class HandStats:
    """How often a hand kind came up and what it scored on average."""
    frequency: float
    average_score: float

    @property
    def expected_value(self) -> float:
        return self.frequency * self.average_score


@dataclass
class HandStatsReport:
    """Per-kind statistics for one sampling run."""
    title: str
    iterations: int
    options: Options
    stats: dict[HandKind, HandStats] = field(default_factory=dict)

    def __str__(self):
        width = max(len(kind.name) for kind in HandKind)
        lines = [
            self.title,
            f"  ({self.iterations:,} samples, rules: {self.options})",
        ]
        for kind in sorted(self.stats):
            hand_stats = self.stats[kind]
            lines.append(
                f" - {kind.name:<{width}} {hand_stats.frequency * 100:>6.3f}% "
                f"(avg: {hand_stats.average_score:>6.1f}, ev: {hand_stats.expected_value:>6.1f})"
            )
        return "\n".join(lines)

    def to_dict(self):
        return {
            "title": self.title,
            "iterations": self.iterations,
            "options": str(self.options),
            "stats": {
                kind.name: {
                    "frequency": s.frequency,
                    "average_score": s.average_score,
                    "expected_value": s.expected_value,
                }
                for kind, s in sorted(self.stats.items())
            },
        }


def draw_fresh_hand(rng: random.Random, options: Options) -> DetectedHand:
    """Shuffle a deck, draw five cards and classify them."""
    deck = Deck.shuffled(rng)
    return evaluate_poker_hand(deck.draw_hand(), options)


def draw_best_of_eight(rng: random.Random, options: Options) -> DetectedHand:
    """Shuffle a deck, draw eight cards and keep the best five-card hand."""
    deck = Deck.shuffled(rng)
    return find_best_poker_hand(deck.draw_n(EIGHT_CARD_DRAW), options)


def tally_hands(draw: DrawFunction, iterations: int,
                rng: random.Random, options: Options) -> Tally:
    tally: Tally = {}
    for _ in range(iterations):
        kind, hand = draw(rng, options)
        count, total = tally.get(kind, (0, 0.0))
        tally[kind] = (count + 1, total + score_hand(kind, hand))
    return tally


def merge_tallies(left: Tally, right: Tally) -> Tally:
    """Sum two tallies kind by kind."""
    merged = dict(left)
    for kind, (count, total) in right.items():
        left_count, left_total = merged.get(kind, (0, 0.0))
        merged[kind] = (left_count + count, left_total + total)
    return merged


def _tally_chunk(draw: DrawFunction, iterations: int,
                 seed: Optional[int], options: Options) -> Tally:
    # Runs inside a worker process, which owns its generator and decks
    return tally_hands(draw, iterations, random.Random(seed), options)


def _split_iterations(iterations: int, workers: int) -> list[int]:
    base, extra = divmod(iterations, workers)
    chunks = [base + (1 if i < extra else 0) for i in range(workers)]
    return [chunk for chunk in chunks if chunk > 0]


def summarize_tally(tally: Tally) -> dict[HandKind, HandStats]:
    total = sum(count for count, _ in tally.values())
    return {
        kind: HandStats(frequency=count / total, average_score=score / count)
        for kind, (count, score) in tally.items()
    }


def generate_hand_stats(draw: DrawFunction, iterations: int,
                        options: Optional[Options] = None,
                        single_threaded: bool = False,
                        workers: Optional[int] = None,
                        seed: Optional[int] = None) -> dict[HandKind, HandStats]:
    """
    Sample `iterations` hands with `draw` and aggregate them per kind.

    Args:
        draw: Module-level draw function (must be picklable for workers)
        iterations: Number of hands to sample
        options: Hand detection rules
        single_threaded: Run in this process instead of a worker pool
        workers: Worker process count (defaults to the CPU count)
        seed: Seed for reproducible runs; each worker gets its own derived seed
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    options = options or Options()
    start_time = time.time()

    if single_threaded:
        tally = tally_hands(draw, iterations, random.Random(seed), options)
    else:
        workers = workers or os.cpu_count() or 1
        chunks = _split_iterations(iterations, workers)
        if seed is None:
            seeds = [None] * len(chunks)
        else:
            seeder = random.Random(seed)
            seeds = [seeder.getrandbits(64) for _ in chunks]

        logger.debug("Sampling %d hands across %d workers", iterations, len(chunks))
        with ProcessPoolExecutor(max_workers=len(chunks)) as pool:
            partials = pool.map(partial(_tally_chunk, draw, options=options), chunks, seeds)
            tally = reduce(merge_tallies, partials, {})

    logger.info("Sampled %d hands with %s in %.2fs",
                iterations, getattr(draw, "__name__", draw), time.time() - start_time)
    return summarize_tally(tally)


def fresh_draw_stats(iterations: int, options: Optional[Options] = None,
                     single_threaded: bool = False, workers: Optional[int] = None,
                     seed: Optional[int] = None) -> HandStatsReport:
    options = options or Options()
    stats = generate_hand_stats(draw_fresh_hand, iterations, options,
                                single_threaded=single_threaded, workers=workers, seed=seed)
    return HandStatsReport(
        title="When drawing 5 cards from a shuffled 52-card standard deck, "
              "the frequencies of each hand are:",
        iterations=iterations,
        options=options,
        stats=stats,
    )


def eight_card_draw_stats(iterations: int, options: Optional[Options] = None,
                          single_threaded: bool = False, workers: Optional[int] = None,
                          seed: Optional[int] = None) -> HandStatsReport:
    options = options or Options()
    stats = generate_hand_stats(draw_best_of_eight, iterations, options,
                                single_threaded=single_threaded, workers=workers, seed=seed)
    return HandStatsReport(
        title="When drawing 8 cards from a shuffled 52-card standard deck, "
              "the frequencies of each best hand are:",
        iterations=iterations,
        options=options,
        stats=stats,
    )
