"""
relove/rules/greenlight.py
Greenlight evaluator: red / yellow / green verdict on reaching out now.

First match wins. Only the three hard stops (relapse, blocked, emotional
state) raise risk flags. wait_hours is hours still to wait; on the
blocked branch it is 0 with wait_indefinite=True.
"""

import logging
from typing import Any, List, Optional, Tuple

from relove.models.schema import GreenlightRequest, GreenlightResponse, parse_request
from relove.rules.chain import Rule, always, first_match
from relove.rules.content import (
    BLOCKED_NEXT_STEP,
    NEGATIVE_CAUTION_NEXT_STEP,
    NEXT_STEPS,
    NO_RESPONSE_RETRY_NEXT_STEP,
    NO_RESPONSE_WAIT_NEXT_STEP,
    PATIENCE_NEXT_STEP,
)
from relove.rules.picker import Picker, random_picker

logger = logging.getLogger(__name__)

RELAPSE_WAIT_HOURS   = 48
EMOTIONAL_WAIT_HOURS = 24
MIN_SILENCE_HOURS    = 24
CONTACT_GAP_HOURS    = 48
COOL_DOWN_HOURS      = 72
ONE_WEEK_HOURS       = 168
DEFAULT_WAIT_HOURS   = 12

UNSTABLE_CHECKINS = frozenset({"triggered", "emotional"})


def _verdict(
    light:      str,
    reason:     str,
    wait_hours: float,
    next_step:  str,
    risk_flags: Optional[List[str]] = None,
    indefinite: bool = False,
) -> GreenlightResponse:
    return GreenlightResponse(
        light           = light,
        reason          = reason,
        wait_hours      = wait_hours,
        next_step       = next_step,
        risk_flags      = risk_flags or [],
        wait_indefinite = indefinite,
    )


def _negative(r: GreenlightRequest, pick: Picker) -> GreenlightResponse:
    if r.silence_hours < COOL_DOWN_HOURS:
        return _verdict(
            "red",
            "Last response was negative. Need more time to let emotions cool.",
            COOL_DOWN_HOURS - r.silence_hours,
            pick(NEXT_STEPS["red"]),
        )
    return _verdict(
        "yellow",
        "Enough time has passed since negative response, but proceed with extreme caution.",
        0,
        NEGATIVE_CAUTION_NEXT_STEP,
    )


def _no_response(r: GreenlightRequest, pick: Picker) -> GreenlightResponse:
    if r.silence_hours < COOL_DOWN_HOURS:
        return _verdict(
            "red",
            "They haven't responded to your last message. Give it more time.",
            COOL_DOWN_HOURS - r.silence_hours,
            NO_RESPONSE_WAIT_NEXT_STEP,
        )
    if r.silence_hours >= ONE_WEEK_HOURS:
        return _verdict(
            "yellow",
            "It's been a week with no response. You could try once more but keep it very light.",
            0,
            NO_RESPONSE_RETRY_NEXT_STEP,
        )
    return _verdict(
        "red",
        "Still too soon after no response. Patience shows strength.",
        ONE_WEEK_HOURS - r.silence_hours,
        pick(NEXT_STEPS["red"]),
    )


def _calm_after_gap(r: GreenlightRequest, last_response: str) -> bool:
    return (
        r.last_response_from_her == last_response
        and r.silence_hours >= CONTACT_GAP_HOURS
        and r.emotional_checkin == "calm"
    )


GREENLIGHT_RULES: Tuple[Rule, ...] = (
    Rule(
        "relapse",
        lambda r: r.relapse_today,
        lambda r, pick: _verdict(
            "red",
            "You had a relapse today. Wait until you're in a better emotional state.",
            RELAPSE_WAIT_HOURS,
            pick(NEXT_STEPS["red"]),
            ["relapse"],
        ),
    ),
    Rule(
        "blocked",
        lambda r: r.scenario == "blocked",
        lambda r, pick: _verdict(
            "red",
            "You're blocked. Any attempt to contact will make things worse.",
            0,
            BLOCKED_NEXT_STEP,
            ["blocked"],
            indefinite=True,
        ),
    ),
    Rule(
        "emotional_instability",
        lambda r: r.emotional_checkin in UNSTABLE_CHECKINS,
        lambda r, pick: _verdict(
            "red",
            "Your emotional state is not stable enough for healthy communication.",
            EMOTIONAL_WAIT_HOURS,
            pick(NEXT_STEPS["red"]),
            ["emotional_instability"],
        ),
    ),
    Rule(
        "too_soon",
        lambda r: r.silence_hours < MIN_SILENCE_HOURS,
        lambda r, pick: _verdict(
            "red",
            "Not enough time has passed since last contact. Patience is key.",
            MIN_SILENCE_HOURS - r.silence_hours,
            PATIENCE_NEXT_STEP,
        ),
    ),
    Rule(
        "negative_response",
        lambda r: r.last_response_from_her == "negative",
        _negative,
    ),
    Rule(
        "positive_calm",
        lambda r: _calm_after_gap(r, "positive"),
        lambda r, pick: _verdict(
            "green",
            "Great timing! Last response was positive, you've given appropriate space, "
            "and you're in a good headspace.",
            0,
            pick(NEXT_STEPS["green"]),
        ),
    ),
    Rule(
        "neutral_calm",
        lambda r: _calm_after_gap(r, "neutral"),
        lambda r, pick: _verdict(
            "yellow",
            "Conditions are decent but not optimal. You could reach out but keep expectations low.",
            0,
            pick(NEXT_STEPS["yellow"]),
        ),
    ),
    Rule(
        "no_response",
        lambda r: r.last_response_from_her == "none",
        _no_response,
    ),
    Rule(
        "default",
        always,
        lambda r, pick: _verdict(
            "yellow",
            "Conditions are mixed. Proceed with caution if you choose to reach out.",
            DEFAULT_WAIT_HOURS,
            pick(NEXT_STEPS["yellow"]),
        ),
    ),
)


def check_greenlight(request: Any, picker: Optional[Picker] = None) -> GreenlightResponse:
    """
    Decide whether reaching out now is advisable.
    request: GreenlightRequest or an equivalent mapping.
    Raises InvalidInput before any rule runs if the request is malformed.
    """
    req = parse_request(GreenlightRequest, request)
    response = first_match(GREENLIGHT_RULES, req, picker or random_picker())
    logger.debug(
        f"Greenlight: scenario={req.scenario} silence={req.silence_hours}h -> "
        f"{response.light} wait={response.wait_hours}h flags={response.risk_flags}"
    )
    return response
