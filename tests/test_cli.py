"""
Tests for the command line interface and rule presets.
"""

import logging

import pytest

from balatro_solver.cli import build_parser, main, _options_from_args
from balatro_solver.engine.hand_detector import (
    Options, GAPPED_STRAIGHTS, FOUR_CARD_STRAIGHTS_AND_FLUSHES,
)
from balatro_solver.log import configure_logging, LOG_LEVEL_ENV
from balatro_solver.presets import PRESETS, get_preset, list_presets


class TestPresets:
    def test_lookup(self):
        assert get_preset("standard").options == Options()
        assert get_preset("shortcut").options == GAPPED_STRAIGHTS
        assert get_preset("four_fingers").options == FOUR_CARD_STRAIGHTS_AND_FLUSHES
        assert get_preset("nope") is None

    def test_list(self):
        assert list_presets() == list(PRESETS)
        assert "shortcut_four_fingers" in list_presets()


class TestOptionsFromArgs:
    def test_flags(self):
        args = build_parser().parse_args(["evaluate", "AS", "--shortcut", "--four-fingers"])
        assert _options_from_args(args) == GAPPED_STRAIGHTS | FOUR_CARD_STRAIGHTS_AND_FLUSHES

    def test_preset_adds_to_flags(self):
        args = build_parser().parse_args(["evaluate", "AS", "--shortcut", "--preset", "four_fingers"])
        assert _options_from_args(args) == GAPPED_STRAIGHTS | FOUR_CARD_STRAIGHTS_AND_FLUSHES

    def test_unknown_preset(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["evaluate", "AS", "--preset", "nope"])

    def test_hand_stats_defaults(self):
        args = build_parser().parse_args(["stats", "hand-stats"])
        assert args.iterations == 100
        assert not args.single_threaded
        assert _options_from_args(args) == Options()


class TestEvaluateCommand:
    def test_evaluate(self, capsys):
        assert main(["evaluate", "AS KS QS JS TS"]) == 0
        out = capsys.readouterr().out
        assert "STRAIGHT_FLUSH" in out
        assert "= 1208" in out

    def test_evaluate_with_variant(self, capsys):
        assert main(["evaluate", "5S 8D 7S 6C TS", "--shortcut"]) == 0
        assert "Hand: STRAIGHT" in capsys.readouterr().out

    def test_evaluate_best_of_pool(self, capsys):
        assert main(["evaluate", "2C 9S KD 5S 9D 8S 7S 6S"]) == 0
        out = capsys.readouterr().out
        assert "Hand: STRAIGHT_FLUSH" in out
        assert "Scoring cards: 9S 5S 8S 7S 6S" in out

    @pytest.mark.parametrize("cards", ["AS XX", "", "   "])
    def test_bad_cards(self, cards):
        with pytest.raises(SystemExit) as excinfo:
            main(["evaluate", cards])
        assert excinfo.value.code == 2


class TestHandStatsCommand:
    def test_hand_stats(self, capsys):
        assert main(["stats", "hand-stats", "-i", "0.005", "--single-threaded",
                     "--seed", "1", "--four-fingers"]) == 0
        out = capsys.readouterr().out
        assert "When drawing 5 cards" in out
        assert "When drawing 8 cards" in out
        assert "50 samples" in out

    def test_too_few_iterations(self):
        with pytest.raises(SystemExit):
            main(["stats", "hand-stats", "-i", "0", "--single-threaded"])


class TestLogging:
    def test_log_level_flag_is_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug", "evaluate", "AS"])
        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--log-level", "verbose", "evaluate", "AS"])
        assert excinfo.value.code == 2

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert configure_logging().level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        logger = configure_logging("error")
        assert logger.level == logging.ERROR
        assert len(logger.handlers) == 1
