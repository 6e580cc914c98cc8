"""Result payloads for rule-chain evaluation and strategy resolution.

Responsibilities:
  - Capture status and reasons of a rule chain run.
  - Capture which strategy (if any) priced a discriminant, and the summed total.

Inputs/Outputs:
  - Inputs: produced by evaluator.evaluate and resolver.resolve / resolve_total.
  - Outputs: immutable dataclasses consumed by app/infra layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from ..domain.enums import EvaluationStatus


@dataclass(frozen=True)
class EvaluationResult:
    status: EvaluationStatus
    reasons: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status == EvaluationStatus.PASS


@dataclass(frozen=True)
class ResolutionResult:
    discriminant: Hashable
    value: float
    strategy_name: Optional[str]
    matched: bool


@dataclass(frozen=True)
class FeeTotal:
    primary: ResolutionResult
    add_ons: tuple[ResolutionResult, ...]
    amount: float

    @property
    def add_on_amount(self) -> float:
        return sum(r.value for r in self.add_ons)
