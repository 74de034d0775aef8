"""Domain models for fleet, pricing, geozone and journey records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from shapely.geometry.base import BaseGeometry


@dataclass(slots=True, frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(slots=True, frozen=True)
class VehicleModel:
    """Vehicle class information used to look up pricing and geozones."""

    type: str
    make: str = ""
    name: str = ""
    energy: str = ""
    tier: str = ""


@dataclass(slots=True, frozen=True)
class Vehicle:
    """A rentable vehicle at its current position."""

    uuid: str
    plate: str
    latitude: float
    longitude: float
    model: VehicleModel
    autonomy: float = 0.0
    autonomy_percentage: float = 0.0
    discount_amount: int = 0
    picture_url: str = ""
    is_eligible_for_fueling: bool = False
    is_eligible_for_charging: bool = False
    fueling_reward: int = 0
    charging_reward: int = 0

    @property
    def location(self) -> Location:
        return Location(lat=self.latitude, lng=self.longitude)


@dataclass(slots=True, frozen=True)
class PricingModel:
    """A tariff. Monetary fields are integers scaled by ``PRICE_UNIT_FACTOR``."""

    type: str
    unlock_fee: int = 0
    minute_price: int = 0
    pause_unit_price: int = 0
    kilometer_price: int = 0
    book_unit_price: int = 0
    hour_cap_price: int = 0
    day_cap_price: int = 0
    included_kilometers: int = 0
    uuid: str = ""
    tier: str = ""
    model_type: str = ""
    move_unit_price: int = 0
    over_kilometer_price: int = 0


@dataclass(slots=True, frozen=True)
class PricingOffers:
    """The three tariffs offered for one vehicle class and tier."""

    per_minute: PricingModel
    per_kilometer: PricingModel
    smart: PricingModel

    def named(self) -> tuple[tuple[str, PricingModel], ...]:
        """Return ``(name, model)`` pairs in evaluation order."""
        return (
            ("per-minute", self.per_minute),
            ("per-kilometer", self.per_kilometer),
            ("smart", self.smart),
        )


@dataclass(slots=True, frozen=True)
class GeoZoneItem:
    geofencing_type: str
    model_type: str
    geometry: Optional[BaseGeometry]


GeoZone = tuple[GeoZoneItem, ...]


@dataclass(slots=True, frozen=True)
class TripLeg:
    start_location: Location
    end_location: Location
    pause_minutes: int = 0


@dataclass(slots=True, frozen=True)
class Journey:
    """Ordered legs; leg order is travel order."""

    legs: tuple[TripLeg, ...] = field(default_factory=tuple)

    @property
    def start_location(self) -> Location:
        return self.legs[0].start_location

    @property
    def end_location(self) -> Location:
        return self.legs[-1].end_location

    @property
    def total_pause_minutes(self) -> int:
        return sum(leg.pause_minutes for leg in self.legs)


@dataclass(slots=True, frozen=True)
class CostBreakdown:
    unlock_fee: float
    booking_cost: float
    travel_cost: float
    pause_cost: float
    walking_time_minutes: float


@dataclass(slots=True, frozen=True)
class JourneyPlan:
    """Cheapest way found to ride ``journey`` with ``vehicle``."""

    vehicle: Vehicle
    journey: Journey
    total_cost: float
    cost_breakdown: CostBreakdown
    pricing_model: str
