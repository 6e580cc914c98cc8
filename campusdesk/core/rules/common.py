from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def first_match(candidates: Iterable[T], test: Callable[[T], Optional[R]]) -> Optional[tuple[T, R]]:
    # Candidates after the first hit are never tested.
    for candidate in candidates:
        hit = test(candidate)
        if hit is not None:
            return candidate, hit
    return None
