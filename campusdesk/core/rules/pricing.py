"""Hostel room and add-on pricing strategies.

Responsibilities:
  - Pair a discriminant key (RoomType / AddOn) with a price.
  - Build ordered strategy lists from pricing configuration.
Key definitions:
  - RoomPricing, AddOnPricing, build_room_pricings, build_add_on_pricings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, List, TYPE_CHECKING

from campusdesk.core.domain.enums import AddOn, RoomType

if TYPE_CHECKING:
    from campusdesk.core.config import HostelPricingConfig


@dataclass(frozen=True)
class RoomPricing:
    room_type: RoomType
    value: float

    @property
    def name(self) -> str:
        return f"room:{self.room_type.name}"

    def supports(self, discriminant: Hashable) -> bool:
        return discriminant == self.room_type


@dataclass(frozen=True)
class AddOnPricing:
    add_on: AddOn
    value: float

    @property
    def name(self) -> str:
        return f"add_on:{self.add_on.name}"

    def supports(self, discriminant: Hashable) -> bool:
        return discriminant == self.add_on


ROOM_FALLBACK_PRICE = 16000.0
ADD_ON_FALLBACK_PRICE = 0.0
DEFAULT_DEPOSIT = 5000.0


def default_room_pricings() -> List[RoomPricing]:
    return [
        RoomPricing(RoomType.SINGLE, 14000.0),
        RoomPricing(RoomType.DOUBLE, 15000.0),
        RoomPricing(RoomType.TRIPLE, 12000.0),
        RoomPricing(RoomType.DELUXE, 16000.0),
    ]


def default_add_on_pricings() -> List[AddOnPricing]:
    return [
        AddOnPricing(AddOn.MESS, 1000.0),
        AddOnPricing(AddOn.LAUNDRY, 500.0),
        AddOnPricing(AddOn.GYM, 300.0),
    ]


def build_room_pricings(config: "HostelPricingConfig") -> List[RoomPricing]:
    return [RoomPricing(room_type, price) for room_type, price in config.room_prices]


def build_add_on_pricings(config: "HostelPricingConfig") -> List[AddOnPricing]:
    return [AddOnPricing(add_on, price) for add_on, price in config.add_on_prices]
