"""Cheapest pricing model selection."""

from __future__ import annotations

from typing import Optional

from ...models.domain import GeoZone, Journey, JourneyPlan, PricingOffers, Vehicle
from .errors import NoValidPricingPlanError
from .pricing import evaluate_pricing_model


def select_cheapest_plan(
    journey: Journey,
    vehicle: Vehicle,
    offers: PricingOffers,
    geozone: Optional[GeoZone],
) -> JourneyPlan:
    """Evaluate every offered model and return the cheapest accepted plan.

    Models are evaluated in the order given by ``PricingOffers.named``; on an
    exact tie the earlier model wins.
    """
    plans: list[JourneyPlan] = []
    for model_name, pricing in offers.named():
        plan = evaluate_pricing_model(journey, vehicle, pricing, model_name, geozone)
        if plan is not None:
            plans.append(plan)

    if not plans:
        raise NoValidPricingPlanError()

    cheapest = plans[0]
    for plan in plans[1:]:
        if plan.total_cost < cheapest.total_cost:
            cheapest = plan
    return cheapest
