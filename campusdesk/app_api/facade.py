from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from campusdesk.core.domain.enums import status_to_persisted
from campusdesk.core.domain.models import BookingRequest, StudentProfile
from campusdesk.core.engine.evaluator import RuleChainEvaluator
from campusdesk.core.engine.resolver import StrategyResolver, resolve_total
from campusdesk.core.engine.result import EvaluationResult, FeeTotal
from .ports import BookingRepository, EligibilityStore


@dataclass(frozen=True)
class BookingReceipt:
    booking_id: str
    request: BookingRequest
    monthly: FeeTotal
    deposit: float

    @property
    def due_now(self) -> float:
        return self.monthly.amount + self.deposit


BOOKING_ID_SPACE = 1000


def seeded_booking_ids(seed: int = 1, prefix: str = "H-", base: int = 7000) -> Callable[[], str]:
    # Drawn without replacement; the space is exhausted after BOOKING_ID_SPACE ids.
    offsets = iter(random.Random(seed).sample(range(BOOKING_ID_SPACE), BOOKING_ID_SPACE))

    def next_id() -> str:
        try:
            return f"{prefix}{base + next(offsets)}"
        except StopIteration:
            raise RuntimeError(f"Booking id space exhausted for prefix {prefix!r}") from None

    return next_id


class PlacementEligibilityApplication:
    def __init__(self, evaluator: RuleChainEvaluator, store: EligibilityStore) -> None:
        self._evaluator = evaluator
        self._store = store

    @property
    def rule_names(self) -> list[str]:
        return self._evaluator.rule_names

    def evaluate(self, profile: StudentProfile) -> EvaluationResult:
        return self._evaluator.evaluate(profile)

    def run(self, profile: StudentProfile) -> EvaluationResult:
        result = self.evaluate(profile)
        self._store.save(profile.roll_no, status_to_persisted(result.status))
        return result


class HostelFeeApplication:
    def __init__(
        self,
        room_resolver: StrategyResolver,
        add_on_resolver: StrategyResolver,
        repo: BookingRepository,
        deposit: float,
        booking_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._room_resolver = room_resolver
        self._add_on_resolver = add_on_resolver
        self._repo = repo
        self._deposit = deposit
        self._next_booking_id = booking_id_factory or seeded_booking_ids()

    def calculate_monthly(self, request: BookingRequest) -> FeeTotal:
        return resolve_total(
            primary=self._room_resolver,
            primary_key=request.room_type,
            add_ons=self._add_on_resolver,
            add_on_keys=request.add_ons,
        )

    def process(self, request: BookingRequest) -> BookingReceipt:
        monthly = self.calculate_monthly(request)
        booking_id = self._allocate_booking_id()
        self._repo.save(booking_id, request, monthly, self._deposit)
        return BookingReceipt(
            booking_id=booking_id,
            request=request,
            monthly=monthly,
            deposit=self._deposit,
        )

    def _allocate_booking_id(self) -> str:
        for _ in range(BOOKING_ID_SPACE):
            booking_id = self._next_booking_id()
            if not self._repo.exists(booking_id):
                return booking_id
        raise RuntimeError(f"No free booking id after {BOOKING_ID_SPACE} attempts")
