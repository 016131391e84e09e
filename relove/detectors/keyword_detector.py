"""
relove/detectors/keyword_detector.py
Risk scan for outgoing text — pure Python, no I/O, deterministic.
Matches the text against phrase dictionaries, adds weighted points per
category that fires, then applies three shape heuristics (length,
question marks, shouting). The aggregate is clamped to 0-10.
"""

import logging
import re
from types import MappingProxyType
from typing import List, Mapping, Pattern, Tuple

from relove.errors import InvalidInput
from relove.models.record import TextAnalysis

logger = logging.getLogger(__name__)

_APOS = "['’]"     # straight or curly apostrophe


def _compile(*phrases: str) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in phrases)


# ── PATTERN DICTIONARIES ─────────────────────────────────────
# Declaration order is the order tags are reported in.
# Patterns match anywhere in the text, inside longer words too
# ("desperately", "another guy", "need your").
# Extend freely; keys become the public issue tags.

PATTERN_MAP: Mapping[str, Tuple[Pattern[str], ...]] = MappingProxyType({

    'neediness': _compile(
        r"please reply",
        r"need you",
        rf"can{_APOS}?t live without",
        r"miss you so much",
        r"thinking about you constantly",
        r"desperate",
        r"lonely without you",
    ),

    'pressure': _compile(
        r"please call me",
        r"you have to",
        r"(we )?need to (talk|discuss)",
        r"(answer|respond to|reply to) me",
        r"ignoring me",
        r"call me back",
    ),

    'ultimatums': _compile(
        rf"if you don{_APOS}?t",
        r"last chance",
        r"or else",
        r"final time",
        rf"it{_APOS}?s over if",
        r"choose between",
    ),

    'jealousy': _compile(
        r"with someone else",
        r"other guys?",
        r"seeing anyone",
        r"who are you with",
        r"dating someone",
    ),

    'begging': _compile(
        r"please,? please",
        rf"i{_APOS}?m begging",
        r"please give me",
        r"just one (more )?chance",
        rf"i{_APOS}?ll do anything",
    ),

    'manipulation': _compile(
        r"you owe me",
        r"after everything",
        r"how could you",
        rf"you{_APOS}?re being cruel",
        rf"you{_APOS}?re hurting me",
        # Makes the reader responsible for the sender's wellbeing.
        rf"can{_APOS}?t live without you",
        # Conditional threat to end things.
        rf"if you (don{_APOS}?t|do not).{{0,60}}(it{_APOS}?s over|we{_APOS}?re (done|through))",
    ),
})

# Points added once per category that fires.
CATEGORY_WEIGHTS: Mapping[str, int] = MappingProxyType({
    'neediness':    3,
    'pressure':     2,
    'ultimatums':   4,
    'jealousy':     2,
    'begging':      2,
    'manipulation': 4,
})

CATEGORIES: Tuple[str, ...] = tuple(PATTERN_MAP)

# ── SHAPE HEURISTICS ─────────────────────────────────────────
# These tags raise the score but never reach the public issue list.

LENGTH_LIMIT      = 300     # characters; strictly greater fires
LENGTH_POINTS     = 2
QUESTION_LIMIT    = 3       # this many '?' or more fires
QUESTION_POINTS   = 1
CAPS_WORD_LIMIT   = 2       # strictly more shouted words fires
CAPS_POINTS       = 1

HEURISTIC_TAGS: Tuple[str, ...] = (
    'excessive_length', 'excessive_questions', 'excessive_caps',
)

MAX_SCORE = 10

_CAPS_WORD = re.compile(r"\b[A-Z]{3,}\b")


def analyze_text(text: str) -> TextAnalysis:
    """
    Scan text for risky phrasing. Same text in, same analysis out.
    Raises InvalidInput if text is not a string.
    """
    if not isinstance(text, str):
        raise InvalidInput(
            f"text must be a string, got {type(text).__name__}",
            errors=[{"path": ["text"], "message": "Input should be a valid string", "code": "string_type"}],
        )

    issues: List[str] = []
    score = 0

    for category, patterns in PATTERN_MAP.items():
        if any(p.search(text) for p in patterns):
            issues.append(category)
            score += CATEGORY_WEIGHTS[category]

    if len(text) > LENGTH_LIMIT:
        issues.append('excessive_length')
        score += LENGTH_POINTS

    if text.count('?') >= QUESTION_LIMIT:
        issues.append('excessive_questions')
        score += QUESTION_POINTS

    if len(_CAPS_WORD.findall(text)) > CAPS_WORD_LIMIT:
        issues.append('excessive_caps')
        score += CAPS_POINTS

    flagged = set(issues)
    analysis = TextAnalysis(
        neediness    = 'neediness' in flagged,
        pressure     = 'pressure' in flagged,
        ultimatums   = 'ultimatums' in flagged,
        jealousy     = 'jealousy' in flagged,
        begging      = 'begging' in flagged,
        manipulation = 'manipulation' in flagged,
        score        = min(MAX_SCORE, score),
        issues       = tuple(issues),
    )
    logger.debug(f"Risk scan: chars={len(text)} issues={list(analysis.issues)} score={analysis.score}")
    return analysis


def category_tags(analysis: TextAnalysis) -> List[str]:
    """The six category tags that fired, in declaration order."""
    return [c for c in CATEGORIES if getattr(analysis, c)]
