"""Small helpers shared by the scoring transforms.

Decision trees are ordered ``(predicate, builder)`` lists evaluated
first-match-wins; fallback chains are ordered resolver lists where the
first non-None result wins.
"""

import math
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, places: int = 2) -> float:
    """Half-up rounding to a fixed number of decimals."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def first_match(rules: Iterable[tuple[Callable[[], bool], Callable[[], T]]]) -> T | None:
    """Return the builder result of the first rule whose predicate holds."""
    for predicate, build in rules:
        if predicate():
            return build()
    return None


def first_resolved(resolvers: Iterable[Callable[[], T | None]]) -> T | None:
    """Run resolvers in order and return the first non-None result."""
    for resolve in resolvers:
        result = resolve()
        if result is not None:
            return result
    return None


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
