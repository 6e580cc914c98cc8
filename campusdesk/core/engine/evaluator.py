"""Rule-chain evaluation for a single subject.

Responsibilities:
  - Run an ordered rule sequence against a subject and stop at the first violation.
  - Produce EvaluationResult with status and the single disqualifying reason.

Inputs/Outputs:
  - Inputs: ordered rules (priority order) and an immutable subject.
  - Outputs: EvaluationResult; violations are values, never exceptions.

Invariants:
  - Rules after the first violation are never invoked.
  - Must remain deterministic and free of I/O.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from ..domain.enums import EvaluationStatus
from ..rules.common import first_match
from ..rules.types import Rule
from .result import EvaluationResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def evaluate(rules: Iterable[Rule], subject: Any) -> EvaluationResult:
    hit = first_match(rules, lambda rule: rule.check(subject))
    if hit is None:
        if _DEBUG_FN is not None:
            _DEBUG_FN(f"RULE_CHAIN_PASS subject={_subject_label(subject)}")
        return EvaluationResult(status=EvaluationStatus.PASS, reasons=())

    rule, reason = hit
    if _DEBUG_FN is not None:
        _DEBUG_FN(
            "RULE_CHAIN_FAIL "
            f"subject={_subject_label(subject)} rule={getattr(rule, 'name', rule)} reason={reason!r}"
        )
    return EvaluationResult(status=EvaluationStatus.FAIL, reasons=(reason,))


class RuleChainEvaluator:
    def __init__(self, rules: Sequence[Rule]) -> None:
        if rules is None:
            raise ValueError("rules must be a sequence, got None")
        rules = tuple(rules)
        for rule in rules:
            if not callable(getattr(rule, "check", None)):
                raise ValueError(f"rule {rule!r} has no callable check()")
        self._rules = rules

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def rule_names(self) -> list[str]:
        return [getattr(rule, "name", type(rule).__name__) for rule in self._rules]

    def evaluate(self, subject: Any) -> EvaluationResult:
        return evaluate(self._rules, subject)


def _subject_label(subject: Any) -> str:
    label = getattr(subject, "roll_no", None)
    if label is None:
        return type(subject).__name__
    return str(label)
