"""
relove/rules — the three decision tables.

Each operation takes a validated request (or a mapping) and an optional
Picker; pass first_picker for deterministic output.
"""

from relove.rules.daily_action import select_daily_action
from relove.rules.greenlight import check_greenlight
from relove.rules.picker import Picker, first_picker, random_picker, scripted_picker
from relove.rules.safe_text import rewrite_safe_text

__all__ = [
    "Picker",
    "check_greenlight",
    "first_picker",
    "random_picker",
    "rewrite_safe_text",
    "scripted_picker",
    "select_daily_action",
]
