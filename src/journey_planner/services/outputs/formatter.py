"""Human-readable rendering of journey plans."""

from __future__ import annotations

from ...models.domain import JourneyPlan


def format_journey_plan(plan: JourneyPlan) -> str:
    vehicle = plan.vehicle
    breakdown = plan.cost_breakdown
    lines = [
        "=== OPTIMAL JOURNEY PLAN ===",
        f"Vehicle: {vehicle.model.make} {vehicle.model.name} ({vehicle.plate})",
        f"Location: {vehicle.latitude:.6f}, {vehicle.longitude:.6f}",
        f"Pricing Model: {plan.pricing_model}",
        f"Total Cost: €{plan.total_cost:.2f}",
        "",
        "--- Cost Breakdown ---",
        f"Unlock Fee: €{breakdown.unlock_fee:.2f}",
        f"Booking Cost: €{breakdown.booking_cost:.2f}",
        f"Travel Cost: €{breakdown.travel_cost:.2f}",
        f"Pause Cost: €{breakdown.pause_cost:.2f}",
        f"Walking Time: {breakdown.walking_time_minutes:.1f} minutes",
        "",
        "--- Journey Details ---",
    ]
    for index, leg in enumerate(plan.journey.legs, start=1):
        start, end = leg.start_location, leg.end_location
        lines.append(
            f"Leg {index}: ({start.lat:.6f}, {start.lng:.6f}) → ({end.lat:.6f}, {end.lng:.6f})"
        )
        if leg.pause_minutes > 0:
            lines.append(f"  Pause: {leg.pause_minutes} minutes")
    return "\n".join(lines)
