"""
relove — deterministic coaching rules for breakup recovery.

    from relove import select_daily_action, rewrite_safe_text, check_greenlight, analyze_text
"""

from relove.detectors.keyword_detector import analyze_text
from relove.errors import InvalidInput, LogicExhaustion
from relove.rules import check_greenlight, rewrite_safe_text, select_daily_action

__version__ = "1.0.0"

__all__ = [
    "InvalidInput",
    "LogicExhaustion",
    "analyze_text",
    "check_greenlight",
    "rewrite_safe_text",
    "select_daily_action",
]
