"""
relove/rules/chain.py
Ordered, first-match-wins rule tables.
A table is a tuple of Rule; the position of a rule is its priority.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from relove.errors import LogicExhaustion
from relove.rules.picker import Picker

logger = logging.getLogger(__name__)


def always(_request: Any) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    name:    str
    applies: Callable[[Any], bool]
    build:   Callable[[Any, Picker], Any]


def first_match(rules: Sequence[Rule], request: Any, pick: Picker) -> Any:
    """Build the response of the first rule whose predicate holds."""
    for rule in rules:
        if rule.applies(request):
            logger.debug(f"Rule matched: {rule.name}")
            return rule.build(request, pick)
    raise LogicExhaustion(
        f"No rule matched {type(request).__name__}; table has {len(rules)} rule(s)"
    )
