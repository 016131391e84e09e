"""
relove/models/schema.py
Request/response contracts for the four coaching operations.

Every enum is a closed Literal and every number carries its range, so a
request that reaches a rule table is already known to be well-formed.
parse_request() is the single entry point that turns pydantic's
ValidationError into relove.errors.InvalidInput.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from relove.errors import InvalidInput

Scenario          = Literal["hot_cold", "blocked", "no_contact", "breadcrumbs"]
GreenlightScenario = Literal["hot_cold", "blocked", "no_contact", "normal"]
LastResponse      = Literal["positive", "neutral", "negative", "none"]
DailyCheckin      = Literal["calm", "anxious", "sad", "angry", "hopeful"]
GreenlightCheckin = Literal["calm", "anxious", "emotional", "triggered"]
Action            = Literal["message", "silence", "mission"]
MomentumType      = Literal["create", "maintain", "regain"]
Light             = Literal["red", "yellow", "green"]

MAX_TEXT_CHARS = 1000


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class _Request(_Record):
    # No coercion: "3" is not a day_index, 1 is not a bool.
    model_config = ConfigDict(frozen=True, strict=True)


# ── REQUESTS ─────────────────────────────────────────────────

class DailyActionRequest(_Request):
    scenario:               Scenario
    day_index:              int   = Field(..., ge=1, le=365)
    last_contact_hours:     float = Field(..., ge=0, allow_inf_nan=False)
    last_response_from_her: LastResponse
    emotional_checkin:      DailyCheckin


class SafeTextRequest(_Request):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_CHARS)


class GreenlightRequest(_Request):
    scenario:               GreenlightScenario
    silence_hours:          float = Field(..., ge=0, allow_inf_nan=False)
    last_response_from_her: LastResponse
    relapse_today:          bool
    emotional_checkin:      GreenlightCheckin


# ── RESPONSES ────────────────────────────────────────────────

class Momentum(_Record):
    type:  MomentumType
    level: int = Field(..., ge=1, le=5)


class DailyActionResponse(_Record):
    action:   Action
    title:    str
    content:  str
    why:      str
    momentum: Momentum
    sources:  Optional[List[str]] = None


class SafeTextResponse(_Record):
    score:        int = Field(..., ge=0, le=10)     # higher = safer
    issues:       List[str]
    rewritten:    str
    alternatives: List[str]
    notes:        List[str]


class GreenlightResponse(_Record):
    light:      Light
    reason:     str
    wait_hours: float = Field(..., ge=0)
    next_step:  str
    risk_flags: List[str] = Field(default_factory=list)
    # wait_hours == 0 on the blocked branch means "indefinite", not "go now".
    wait_indefinite: bool = False


# ── VALIDATION ENTRY POINT ───────────────────────────────────

R = TypeVar("R", bound=BaseModel)


def parse_request(model: Type[R], payload: Any) -> R:
    """
    Return payload as a validated `model` instance.
    Raises InvalidInput (with per-field errors) on any violation.
    """
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = _flatten_errors(exc)
        fields = ", ".join(".".join(str(p) for p in e["path"]) or "<root>" for e in errors)
        raise InvalidInput(f"Invalid {model.__name__}: {fields}", errors=errors) from exc


def _flatten_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "path":    list(err.get("loc", ())),
            "message": err.get("msg", ""),
            "code":    err.get("type", ""),
        }
        for err in exc.errors()
    ]
