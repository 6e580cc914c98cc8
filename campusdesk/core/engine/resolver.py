"""First-match strategy resolution and fee totals.

Responsibilities:
  - Pick the first strategy supporting a discriminant, or fall back to a default value.
  - Resolve a primary key plus independent add-on keys and sum them into a FeeTotal.

Inputs/Outputs:
  - Inputs: ordered strategies, discriminant(s), fallback value.
  - Outputs: ResolutionResult per key, FeeTotal for a full request.

Invariants:
  - Exactly one value is used per lookup; later matching strategies are ignored.
  - An unmatched key contributes the fallback and never fails the computation.
"""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence

from ..rules.common import first_match
from ..rules.types import Strategy
from .result import FeeTotal, ResolutionResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_resolver_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def resolve(strategies: Iterable[Strategy], discriminant: Hashable, fallback: float) -> ResolutionResult:
    hit = first_match(strategies, lambda s: True if s.supports(discriminant) else None)
    if hit is None:
        if _DEBUG_FN is not None:
            _DEBUG_FN(f"STRATEGY_FALLBACK key={_key_label(discriminant)} value={fallback}")
        return ResolutionResult(
            discriminant=discriminant,
            value=fallback,
            strategy_name=None,
            matched=False,
        )

    strategy, _ = hit
    if _DEBUG_FN is not None:
        _DEBUG_FN(
            f"STRATEGY_MATCH key={_key_label(discriminant)} strategy={strategy.name} value={strategy.value}"
        )
    return ResolutionResult(
        discriminant=discriminant,
        value=strategy.value,
        strategy_name=strategy.name,
        matched=True,
    )


class StrategyResolver:
    def __init__(self, strategies: Sequence[Strategy], fallback: float = 0.0) -> None:
        if strategies is None:
            raise ValueError("strategies must be a sequence, got None")
        if fallback is None:
            raise ValueError("fallback must be a number, got None")
        strategies = tuple(strategies)
        for strategy in strategies:
            if not callable(getattr(strategy, "supports", None)):
                raise ValueError(f"strategy {strategy!r} has no callable supports()")
        self._strategies = strategies
        self._fallback = float(fallback)

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        return self._strategies

    @property
    def fallback(self) -> float:
        return self._fallback

    def resolve(self, discriminant: Hashable) -> ResolutionResult:
        return resolve(self._strategies, discriminant, self._fallback)

    def resolve_many(self, discriminants: Iterable[Hashable]) -> tuple[ResolutionResult, ...]:
        return tuple(self.resolve(d) for d in discriminants)


def resolve_total(
    primary: StrategyResolver,
    primary_key: Hashable,
    add_ons: StrategyResolver,
    add_on_keys: Iterable[Hashable] = (),
) -> FeeTotal:
    primary_result = primary.resolve(primary_key)
    add_on_results = add_ons.resolve_many(add_on_keys)
    amount = primary_result.value + sum(r.value for r in add_on_results)
    return FeeTotal(primary=primary_result, add_ons=add_on_results, amount=amount)


def _key_label(discriminant: Hashable) -> str:
    name = getattr(discriminant, "name", None)
    if isinstance(name, str):
        return name
    return repr(discriminant)
