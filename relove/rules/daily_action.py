"""
relove/rules/daily_action.py
Daily action selector: one mission or one outreach message per day.

Rules are evaluated top to bottom and the first match wins. Early
recovery outranks everything; contact is only ever suggested to a calm
user with a positive or neutral last response and a 48h gap.
"""

import logging
from typing import Any, List, Optional, Tuple

from relove.models.record import Mission
from relove.models.schema import DailyActionRequest, DailyActionResponse, Momentum, parse_request
from relove.rules.chain import Rule, always, first_match
from relove.rules.content import MESSAGE_TEMPLATES, MESSAGE_TITLES, MISSIONS, first_mission
from relove.rules.picker import Picker, random_picker

logger = logging.getLogger(__name__)

EARLY_RECOVERY_DAYS = 7
CONTACT_GAP_HOURS   = 48

WHY_EARLY_RECOVERY = "Early recovery phase - building internal stability and self-worth"
WHY_BLOCKED        = "Communication is blocked - focus on personal development"
WHY_EMOTIONAL      = "Emotional state not optimal for contact - stabilize first"
WHY_POSITIVE       = "Positive last response and good timing - maintain momentum"
WHY_NEUTRAL        = "Neutral response with time gap - spark interest without pressure"
WHY_DEFAULT        = "Conditions not optimal for contact - invest in personal growth"


def _mission(
    mission:  Mission,
    why:      str,
    momentum: Tuple[str, int],
    sources:  Optional[List[str]] = None,
) -> DailyActionResponse:
    return DailyActionResponse(
        action   = "mission",
        title    = mission.title,
        content  = mission.content,
        why      = why,
        momentum = Momentum(type=momentum[0], level=momentum[1]),
        sources  = sources,
    )


def _message(
    pool:     str,
    pick:     Picker,
    why:      str,
    momentum: Tuple[str, int],
    sources:  List[str],
) -> DailyActionResponse:
    return DailyActionResponse(
        action   = "message",
        title    = MESSAGE_TITLES[pool],
        content  = pick(MESSAGE_TEMPLATES[pool]),
        why      = why,
        momentum = Momentum(type=momentum[0], level=momentum[1]),
        sources  = sources,
    )


def _contact_gap_ok(req: DailyActionRequest) -> bool:
    return req.last_contact_hours >= CONTACT_GAP_HOURS


DAILY_ACTION_RULES: Tuple[Rule, ...] = (
    Rule(
        "early_recovery",
        lambda r: r.day_index <= EARLY_RECOVERY_DAYS,
        lambda r, pick: _mission(pick(MISSIONS), WHY_EARLY_RECOVERY, ("create", 1),
                                 ["No Contact Recovery Guide"]),
    ),
    Rule(
        "blocked",
        lambda r: r.scenario == "blocked",
        lambda r, pick: _mission(first_mission("selfcare"), WHY_BLOCKED, ("regain", 1),
                                 ["Blocked Contact Recovery"]),
    ),
    Rule(
        "not_calm",
        lambda r: r.emotional_checkin != "calm",
        lambda r, pick: _mission(first_mission("selfcare"), WHY_EMOTIONAL, ("regain", 1)),
    ),
    Rule(
        "positive_with_gap",
        lambda r: r.last_response_from_her == "positive" and _contact_gap_ok(r),
        lambda r, pick: _message("light_checkin", pick, WHY_POSITIVE, ("maintain", 3),
                                 ["Text Chemistry - Momentum Messages"]),
    ),
    Rule(
        "neutral_with_gap",
        lambda r: r.last_response_from_her == "neutral" and _contact_gap_ok(r),
        lambda r, pick: _message("curiosity_based", pick, WHY_NEUTRAL, ("create", 2),
                                 ["Conversation Restart Techniques"]),
    ),
    Rule(
        "default",
        always,
        lambda r, pick: _mission(pick(MISSIONS), WHY_DEFAULT, ("create", 2)),
    ),
)


def select_daily_action(request: Any, picker: Optional[Picker] = None) -> DailyActionResponse:
    """
    Choose today's action.
    request: DailyActionRequest or an equivalent mapping.
    Raises InvalidInput before any rule runs if the request is malformed.
    """
    req = parse_request(DailyActionRequest, request)
    response = first_match(DAILY_ACTION_RULES, req, picker or random_picker())
    logger.debug(f"Daily action: day={req.day_index} scenario={req.scenario} -> {response.action}")
    return response
