"""
Smoke tests for the Streamlit front-end.
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).parent.parent / "app.py")


def test_app_renders_default_hand():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    assert not at.exception
    assert at.title[0].value == "🃏 Balatro Solver"
    assert at.metric[0].value == "Straight Flush"


def test_app_reports_bad_cards():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.text_input[0].set_value("AS ZZ").run()
    assert not at.exception
    assert at.error[0].value == "Unknown rank 'Z' in 'ZZ'"
