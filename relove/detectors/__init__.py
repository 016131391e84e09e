"""
relove/detectors — text risk scan. Offline, no dependencies.
"""

from relove.detectors.keyword_detector import CATEGORIES, analyze_text, category_tags

__all__ = [
    "CATEGORIES",
    "analyze_text",
    "category_tags",
]
