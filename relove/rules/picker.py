"""
relove/rules/picker.py
The one seam for randomness. Every template, mission and advice choice
goes through a Picker, so tests can make the rule tables deterministic
without patching the random module.
"""

import random
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")

Picker = Callable[[Sequence[T]], T]


def random_picker() -> Picker:
    """Uniform choice backed by a fresh generator, nothing shared between calls."""
    return random.Random().choice


def first_picker(options: Sequence[T]) -> T:
    """Always the first option."""
    return options[0]


def scripted_picker(indices: Iterable[int]) -> Picker:
    """
    Pick options[i] for each i in indices, in order.
    Indices wrap modulo the option count; StopIteration once exhausted.
    """
    it: Iterator[int] = iter(indices)

    def pick(options: Sequence[T]) -> T:
        return options[next(it) % len(options)]

    return pick
