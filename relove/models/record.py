"""
relove/models/record.py
Internal dataclass records shared by the detector and the rule tables.
Do not add logic here — data only.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class TextAnalysis:
    """Output of the risk scan for one piece of text."""
    neediness:     bool = False
    pressure:      bool = False
    ultimatums:    bool = False
    jealousy:      bool = False
    begging:       bool = False
    manipulation:  bool = False
    score:         int  = 0            # raw risk, 0-10, higher = riskier

    # Every tag that fired, detection order. Includes the heuristic-only
    # tags (excessive_length / excessive_questions / excessive_caps).
    issues:        Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Mission:
    """One self-improvement activity from the mission catalog."""
    title:     str
    content:   str
    category:  str          # selfcare / physical / growth / social
