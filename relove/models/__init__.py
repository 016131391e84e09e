"""
relove/models — request/response contracts and internal records.
"""

from relove.models.record import Mission, TextAnalysis
from relove.models.schema import (
    DailyActionRequest,
    DailyActionResponse,
    GreenlightRequest,
    GreenlightResponse,
    Momentum,
    SafeTextRequest,
    SafeTextResponse,
    parse_request,
)

__all__ = [
    "DailyActionRequest",
    "DailyActionResponse",
    "GreenlightRequest",
    "GreenlightResponse",
    "Mission",
    "Momentum",
    "SafeTextRequest",
    "SafeTextResponse",
    "TextAnalysis",
    "parse_request",
]
