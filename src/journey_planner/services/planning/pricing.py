"""Cost evaluation of a journey under a single pricing model."""

from __future__ import annotations

import logging
from typing import Optional

from ...models.domain import CostBreakdown, GeoZone, Journey, JourneyPlan, PricingModel, Vehicle
from ..geofence import is_in_parking_zone, parking_items
from ..geospatial import distance_km, driving_time_minutes, walking_time_minutes

FREE_BOOKING_MINUTES = 15
PRICE_UNIT_FACTOR = 1000.0
OUT_OF_ZONE_PAUSE_MULTIPLIER = 1.5

logger = logging.getLogger(__name__)


def _price(amount: int) -> float:
    return amount / PRICE_UNIT_FACTOR


def _minute_cost(pricing: PricingModel, travel_minutes: float) -> float:
    return travel_minutes * _price(pricing.minute_price)


def _kilometer_cost(pricing: PricingModel, distance: float) -> float:
    chargeable_km = max(0.0, distance - pricing.included_kilometers)
    return chargeable_km * _price(pricing.kilometer_price)


def travel_cost(pricing: PricingModel, travel_minutes: float, distance: float) -> float:
    """Apply the fare rule selected by ``pricing.type``; unknown rules charge nothing."""
    match pricing.type:
        case "minute":
            return _minute_cost(pricing, travel_minutes)
        case "kilometer":
            return _kilometer_cost(pricing, distance)
        case "smart":
            return _minute_cost(pricing, travel_minutes) + _kilometer_cost(pricing, distance)
        case _:
            return 0.0


def evaluate_pricing_model(
    journey: Journey,
    vehicle: Vehicle,
    pricing: PricingModel,
    model_name: str,
    geozone: Optional[GeoZone],
) -> Optional[JourneyPlan]:
    """Price ``journey`` with ``vehicle`` under ``pricing``.

    Returns ``None`` when the journey has no legs, or when ``geozone`` holds
    at least one parking item for the vehicle's model type and the journey
    does not end inside any of them. Zone data without such items, including
    parking items for other model types only, never rejects.
    Pauses that start outside a parking zone are charged at
    ``OUT_OF_ZONE_PAUSE_MULTIPLIER`` times their length.
    """
    if not journey.legs:
        return None

    model_type = vehicle.model.type
    vehicle_location = vehicle.location
    walking_time = walking_time_minutes(journey.start_location, vehicle_location)

    booking_minutes = 0.0
    travel_minutes = 0.0
    pause_minutes = 0.0
    total_distance_km = 0.0

    current_location = vehicle_location
    for leg in journey.legs:
        booking_minutes += walking_time_minutes(current_location, leg.start_location)
        travel_minutes += driving_time_minutes(leg.start_location, leg.end_location)
        total_distance_km += distance_km(leg.start_location, leg.end_location)
        if leg.pause_minutes > 0:
            if is_in_parking_zone(leg.end_location, geozone, model_type):
                pause_minutes += leg.pause_minutes
            else:
                pause_minutes += leg.pause_minutes * OUT_OF_ZONE_PAUSE_MULTIPLIER
        current_location = leg.end_location

    # only the final stop can disqualify a model; intermediate stops just pay the penalty
    if parking_items(geozone, model_type) and not is_in_parking_zone(
        journey.end_location, geozone, model_type
    ):
        logger.debug(f"Pricing model '{model_name}' rejected: journey ends outside a parking zone")
        return None

    unlock_fee = _price(pricing.unlock_fee)
    booking_cost = max(0.0, booking_minutes - FREE_BOOKING_MINUTES) * _price(pricing.book_unit_price)
    fare = travel_cost(pricing, travel_minutes, total_distance_km)
    pause_cost = pause_minutes * _price(pricing.pause_unit_price)

    total_cost = unlock_fee + booking_cost + fare + pause_cost
    day_cap = _price(pricing.day_cap_price)
    if total_cost > day_cap:
        total_cost = day_cap

    return JourneyPlan(
        vehicle=vehicle,
        journey=journey,
        total_cost=total_cost,
        cost_breakdown=CostBreakdown(
            unlock_fee=unlock_fee,
            booking_cost=booking_cost,
            travel_cost=fare,
            pause_cost=pause_cost,
            walking_time_minutes=walking_time,
        ),
        pricing_model=model_name,
    )
