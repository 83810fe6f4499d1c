"""
Preset rule variants for the Balatro solver.
Each preset names a joker setup that changes how hands are detected.
"""

from dataclasses import dataclass, field
from typing import Optional

from .engine.hand_detector import Options, GAPPED_STRAIGHTS, FOUR_CARD_STRAIGHTS_AND_FLUSHES


@dataclass
class RulePreset:
    """A named set of hand detection rules."""
    name: str
    description: str
    options: Options = field(default_factory=Options)


PRESETS = {
    "standard": RulePreset(
        name="Standard",
        description="Default poker hand rules",
    ),

    "shortcut": RulePreset(
        name="Shortcut",
        description="Straights can have gaps of 1 rank",
        options=GAPPED_STRAIGHTS,
    ),

    "four_fingers": RulePreset(
        name="Four Fingers",
        description="Flushes and Straights can be made with 4 cards",
        options=FOUR_CARD_STRAIGHTS_AND_FLUSHES,
    ),

    "shortcut_four_fingers": RulePreset(
        name="Shortcut + Four Fingers",
        description="Gapped straights and 4-card flushes/straights together",
        options=GAPPED_STRAIGHTS | FOUR_CARD_STRAIGHTS_AND_FLUSHES,
    ),
}


def get_preset(name: str) -> Optional[RulePreset]:
    """Get a preset by name."""
    return PRESETS.get(name)


def list_presets() -> list[str]:
    """List available preset names."""
    return list(PRESETS.keys())
