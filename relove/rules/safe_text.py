"""
relove/rules/safe_text.py
Safe-text rewriter. Scores a draft message, rewrites it according to its
risk band, and proposes two template alternatives.

Bands use the raw risk score (higher = riskier):
  0-2   light cleanup, original kept
  3-5   phrase substitution; ultimatums discard the text
  6-10  original discarded, template used
The returned score is inverted: 10 - risk, so higher = safer.
"""

import logging
import re
from typing import Any, List, Optional, Pattern, Tuple

from relove.detectors.keyword_detector import MAX_SCORE, analyze_text, category_tags
from relove.models.record import TextAnalysis
from relove.models.schema import SafeTextRequest, SafeTextResponse, parse_request
from relove.rules.content import REWRITE_POOLS, SAFE_ALTERNATIVES
from relove.rules.picker import Picker, random_picker

logger = logging.getLogger(__name__)

LOW_RISK_MAX  = 2
HIGH_RISK_MIN = 6

ALTERNATIVE_COUNT        = 2
MAX_ALTERNATIVE_ATTEMPTS = 20

Substitutions = Tuple[Tuple[Pattern[str], str], ...]


def _subs(*pairs: Tuple[str, str]) -> Substitutions:
    return tuple((re.compile(p, re.IGNORECASE), r) for p, r in pairs)


LOW_RISK_CLEANUP: Substitutions = _subs(
    (r"please reply", ""),
    (r"need you", "thinking of you"),
)

NEEDINESS_SUBSTITUTIONS: Substitutions = _subs(
    (r"please reply.*", ""),                     # drops the rest of the line
    (r"miss you so much", "been thinking of you"),
    (r"need you", "appreciate you"),
)

PRESSURE_SUBSTITUTIONS: Substitutions = _subs(
    (r"please call me", "would love to catch up sometime"),
    (r"need to talk", "would be nice to chat"),
    (r"answer me", ""),
)

NOTE_NEEDINESS  = "removed needy language"
NOTE_PRESSURE   = "eliminated pressure"
NOTE_ULTIMATUMS = "removed ultimatums"
NOTE_LOW_RISK   = "text was already quite safe"
NOTE_DEFAULT    = "keep it light and positive"


def _apply(text: str, substitutions: Substitutions) -> str:
    for pattern, replacement in substitutions:
        text = pattern.sub(replacement, text)
    return text


def _sample_template(pick: Picker) -> str:
    """Coin flip between the two pools, then a uniform pick inside one."""
    return pick(pick(REWRITE_POOLS))


def rewrite_text(text: str, analysis: TextAnalysis, pick: Picker) -> str:
    """Rewrite text according to the band its raw risk score falls in."""
    risk = analysis.score

    if risk <= LOW_RISK_MAX:
        return _apply(text, LOW_RISK_CLEANUP).strip() or SAFE_ALTERNATIVES[0]

    if risk >= HIGH_RISK_MIN:
        return _sample_template(pick)

    rewritten = text
    if analysis.neediness:
        rewritten = _apply(rewritten, NEEDINESS_SUBSTITUTIONS)
    if analysis.pressure:
        rewritten = _apply(rewritten, PRESSURE_SUBSTITUTIONS)

    if analysis.ultimatums:
        return pick(SAFE_ALTERNATIVES)

    return rewritten.strip() or SAFE_ALTERNATIVES[0]


def sample_alternatives(rewritten: str, pick: Picker) -> List[str]:
    """
    Up to ALTERNATIVE_COUNT distinct templates, none equal to `rewritten`.
    Gives up after MAX_ALTERNATIVE_ATTEMPTS draws, so a degenerate picker
    yields fewer.
    """
    alternatives: List[str] = []
    for _ in range(MAX_ALTERNATIVE_ATTEMPTS):
        if len(alternatives) >= ALTERNATIVE_COUNT:
            break
        candidate = _sample_template(pick)
        if candidate != rewritten and candidate not in alternatives:
            alternatives.append(candidate)
    return alternatives


def build_notes(analysis: TextAnalysis) -> List[str]:
    notes: List[str] = []
    if analysis.neediness:
        notes.append(NOTE_NEEDINESS)
    if analysis.pressure:
        notes.append(NOTE_PRESSURE)
    if analysis.ultimatums:
        notes.append(NOTE_ULTIMATUMS)
    if analysis.score <= LOW_RISK_MAX:
        notes.append(NOTE_LOW_RISK)
    if not notes:
        notes.append(NOTE_DEFAULT)
    return notes


def safety_score(analysis: TextAnalysis) -> int:
    """Invert raw risk: 10 = safest."""
    risk = min(max(analysis.score, 0), MAX_SCORE)
    return max(0, MAX_SCORE - risk)


def rewrite_safe_text(request: Any, picker: Optional[Picker] = None) -> SafeTextResponse:
    """
    Analyze and rewrite a draft message.
    request: SafeTextRequest or a mapping with a `text` key.
    Raises InvalidInput for missing, empty or oversized text.
    """
    req = parse_request(SafeTextRequest, request)
    pick = picker or random_picker()

    analysis  = analyze_text(req.text)
    rewritten = rewrite_text(req.text, analysis, pick)

    response = SafeTextResponse(
        score        = safety_score(analysis),
        issues       = category_tags(analysis),
        rewritten    = rewritten,
        alternatives = sample_alternatives(rewritten, pick),
        notes        = build_notes(analysis),
    )
    logger.debug(
        f"Safe text: risk={analysis.score} score={response.score} "
        f"issues={response.issues} alternatives={len(response.alternatives)}"
    )
    return response
