"""Journey planning orchestration service."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import GeoZone, Journey, JourneyPlan, Location, PricingOffers, TripLeg, Vehicle
from ...schemas.journeys import (
    CostBreakdownModel,
    JourneyPlanResponse,
    JourneyRequest,
    LocationModel,
    TripLegModel,
    VehicleModelInfo,
    VehicleResponse,
)
from ..upstream.client import FleetApiClient
from .errors import EmptyFleetError, EmptyJourneyError, NoVehicleFoundError
from .optimizer import select_cheapest_plan
from .selector import find_closest_vehicle

logger = logging.getLogger(__name__)


def _select_vehicle(journey: Journey, fleet: Sequence[Vehicle]) -> Vehicle:
    if not journey.legs:
        raise EmptyJourneyError()
    if not fleet:
        raise EmptyFleetError()
    vehicle = find_closest_vehicle(journey.start_location, fleet)
    if vehicle is None:
        raise NoVehicleFoundError()
    return vehicle


def plan_journey(
    journey: Journey,
    fleet: Sequence[Vehicle],
    offers: PricingOffers,
    geozone: Optional[GeoZone],
) -> JourneyPlan:
    """Plan ``journey`` against already fetched fleet, pricing and geozone data.

    ``offers`` must be the offers for the class of the vehicle closest to the
    journey start. Performs no I/O.
    """
    vehicle = _select_vehicle(journey, fleet)
    return select_cheapest_plan(journey, vehicle, offers, geozone)


def _fetch_geozone_or_none(client: FleetApiClient, vehicle: Vehicle) -> Optional[GeoZone]:
    try:
        return client.fetch_geozone(vehicle.uuid)
    except Exception as exc:
        logger.warning(f"Failed to fetch geozone for vehicle {vehicle.uuid}: {exc}")
        return None


def plan_journey_live(journey: Journey, client: FleetApiClient | None = None) -> JourneyPlan:
    """Fetch live upstream data and plan ``journey``.

    Fleet and pricing failures propagate; a geozone failure degrades to "no
    parking constraint".
    """
    if not journey.legs:
        raise EmptyJourneyError()

    upstream = client or FleetApiClient()
    fleet = upstream.fetch_vehicles()
    logger.info(f"Retrieved {len(fleet)} eligible vehicles for city {settings.city_uuid}")

    vehicle = _select_vehicle(journey, fleet)
    logger.info(f"Closest vehicle is {vehicle.plate} ({vehicle.uuid})")

    with ThreadPoolExecutor(max_workers=2) as executor:
        pricing_future = executor.submit(upstream.fetch_pricing, vehicle.model.type, vehicle.model.tier)
        geozone_future = executor.submit(_fetch_geozone_or_none, upstream, vehicle)
        offers = pricing_future.result()
        geozone = geozone_future.result()

    plan = select_cheapest_plan(journey, vehicle, offers, geozone)
    logger.info(f"Selected pricing model '{plan.pricing_model}' at {plan.total_cost:.2f}")
    return plan


def journey_from_request(payload: JourneyRequest) -> Journey:
    return Journey(
        legs=tuple(
            TripLeg(
                start_location=Location(lat=leg.start_location.lat, lng=leg.start_location.lng),
                end_location=Location(lat=leg.end_location.lat, lng=leg.end_location.lng),
                pause_minutes=leg.pause_minutes,
            )
            for leg in payload.legs
        )
    )


def journey_to_request(journey: Journey) -> JourneyRequest:
    return JourneyRequest(
        legs=[
            TripLegModel(
                start_location=LocationModel(lat=leg.start_location.lat, lng=leg.start_location.lng),
                end_location=LocationModel(lat=leg.end_location.lat, lng=leg.end_location.lng),
                pause_minutes=leg.pause_minutes,
            )
            for leg in journey.legs
        ]
    )


def plan_to_response(plan: JourneyPlan) -> JourneyPlanResponse:
    vehicle = plan.vehicle
    breakdown = plan.cost_breakdown
    return JourneyPlanResponse(
        vehicle=VehicleResponse(
            uuid=vehicle.uuid,
            plate=vehicle.plate,
            location_latitude=vehicle.latitude,
            location_longitude=vehicle.longitude,
            model=VehicleModelInfo(
                type=vehicle.model.type,
                make=vehicle.model.make,
                name=vehicle.model.name,
                energy=vehicle.model.energy,
                tier=vehicle.model.tier,
            ),
            autonomy=vehicle.autonomy,
            autonomy_percentage=vehicle.autonomy_percentage,
            picture_url=vehicle.picture_url,
        ),
        journey=journey_to_request(plan.journey),
        total_cost=plan.total_cost,
        cost_breakdown=CostBreakdownModel(
            unlock_fee=breakdown.unlock_fee,
            booking_cost=breakdown.booking_cost,
            travel_cost=breakdown.travel_cost,
            pause_cost=breakdown.pause_cost,
            walking_time_minutes=breakdown.walking_time_minutes,
        ),
        pricing_model=plan.pricing_model,
    )


def plan_journey_request(payload: JourneyRequest) -> JourneyPlanResponse:
    plan = plan_journey_live(journey_from_request(payload))
    return plan_to_response(plan)
