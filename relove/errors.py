"""
relove/errors.py
Error taxonomy for the coaching engine.

InvalidInput is raised before any rule runs. LogicExhaustion can only
surface from a misconfigured rule table; every shipped table ends in
an unconditional default rule.
"""

from typing import Any, Dict, List, Optional


class InvalidInput(ValueError):
    """A request failed boundary validation. Nothing was evaluated."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors: List[Dict[str, Any]] = errors or []


class LogicExhaustion(RuntimeError):
    """No rule in an ordered rule table matched the request."""
