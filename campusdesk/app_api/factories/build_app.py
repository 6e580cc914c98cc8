"""Construct fully wired application instances.

Responsibilities:
  - Load configuration, build ordered rules/strategies, and attach persistence ports.
Must not:
  - Implement rule or pricing logic; composition only.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from campusdesk.app_api.facade import HostelFeeApplication, PlacementEligibilityApplication, seeded_booking_ids
from campusdesk.app_api.ports import BookingRepository, EligibilityStore
from campusdesk.core.config import (
    DEFAULT_ELIGIBILITY_CONFIG_ID,
    DEFAULT_HOSTEL_CONFIG_ID,
    load_eligibility_config,
    load_hostel_pricing_config,
)
from campusdesk.core.engine.evaluator import RuleChainEvaluator
from campusdesk.core.engine.resolver import StrategyResolver
from campusdesk.core.rules.eligibility import build_eligibility_rules
from campusdesk.core.rules.pricing import build_add_on_pricings, build_room_pricings


def build_placement_app(
    store: EligibilityStore,
    config_id: str = DEFAULT_ELIGIBILITY_CONFIG_ID,
    config_dir: str | Path | None = None,
) -> PlacementEligibilityApplication:
    config = load_eligibility_config(config_id, config_dir=config_dir)
    evaluator = RuleChainEvaluator(build_eligibility_rules(config))
    return PlacementEligibilityApplication(evaluator=evaluator, store=store)


def build_hostel_app(
    repo: BookingRepository,
    config_id: str = DEFAULT_HOSTEL_CONFIG_ID,
    config_dir: str | Path | None = None,
    booking_seed: int = 1,
    booking_id_factory: Callable[[], str] | None = None,
) -> HostelFeeApplication:
    """
    Composition root: pricing order and fallbacks come from the config file, the
    booking id sequence from a seeded generator unless a factory is injected.
    """
    config = load_hostel_pricing_config(config_id, config_dir=config_dir)
    return HostelFeeApplication(
        room_resolver=StrategyResolver(build_room_pricings(config), fallback=config.room_fallback),
        add_on_resolver=StrategyResolver(build_add_on_pricings(config), fallback=config.add_on_fallback),
        repo=repo,
        deposit=config.deposit,
        booking_id_factory=booking_id_factory or seeded_booking_ids(booking_seed),
    )
