"""Convert upstream JSON payloads into domain records."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from shapely.errors import GeometryTypeError
from shapely.geometry import shape

from ...models.domain import GeoZone, GeoZoneItem, PricingModel, PricingOffers, Vehicle, VehicleModel

logger = logging.getLogger(__name__)


def vehicle_model_from_payload(row: dict[str, Any]) -> VehicleModel:
    return VehicleModel(
        type=str(row["type"]),
        make=str(row.get("make") or ""),
        name=str(row.get("name") or ""),
        energy=str(row.get("energy") or ""),
        tier=str(row.get("tier") or ""),
    )


def vehicle_from_payload(row: dict[str, Any]) -> Vehicle:
    return Vehicle(
        uuid=str(row["uuid"]),
        plate=str(row.get("plate") or ""),
        latitude=float(row["locationLatitude"]),
        longitude=float(row["locationLongitude"]),
        model=vehicle_model_from_payload(row["model"]),
        autonomy=float(row.get("autonomy") or 0.0),
        autonomy_percentage=float(row.get("autonomyPercentage") or 0.0),
        discount_amount=int(row.get("discountAmount") or 0),
        picture_url=str(row.get("pictureUrl") or ""),
        is_eligible_for_fueling=bool(row.get("isElligibleForFueling", False)),
        is_eligible_for_charging=bool(row.get("isElligibleForCharging", False)),
        fueling_reward=int(row.get("fuelingReward") or 0),
        charging_reward=int(row.get("chargingReward") or 0),
    )


def vehicles_from_payload(rows: Iterable[dict[str, Any]], vehicle_type: str) -> list[Vehicle]:
    """Parse fleet rows, keeping only vehicles of ``vehicle_type``."""
    vehicles: list[Vehicle] = []
    for row in rows:
        try:
            vehicle = vehicle_from_payload(row)
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid vehicle row: {e}")
            continue
        if vehicle.model.type != vehicle_type:
            continue
        vehicles.append(vehicle)
    return vehicles


def pricing_model_from_payload(row: dict[str, Any]) -> PricingModel:
    return PricingModel(
        type=str(row.get("type") or ""),
        unlock_fee=int(row.get("unlockFee") or 0),
        minute_price=int(row.get("minutePrice") or 0),
        pause_unit_price=int(row.get("pauseUnitPrice") or 0),
        kilometer_price=int(row.get("kilometerPrice") or 0),
        book_unit_price=int(row.get("bookUnitPrice") or 0),
        hour_cap_price=int(row.get("hourCapPrice") or 0),
        day_cap_price=int(row.get("dayCapPrice") or 0),
        included_kilometers=int(row.get("includedKilometers") or 0),
        uuid=str(row.get("uuid") or ""),
        tier=str(row.get("tier") or ""),
        model_type=str(row.get("modelType") or ""),
        move_unit_price=int(row.get("moveUnitPrice") or 0),
        over_kilometer_price=int(row.get("overKilometerPrice") or 0),
    )


def pricing_offers_from_payload(payload: dict[str, Any]) -> PricingOffers:
    return PricingOffers(
        per_minute=pricing_model_from_payload(payload["pricingPerMinute"]),
        per_kilometer=pricing_model_from_payload(payload["pricingPerKilometer"]),
        smart=pricing_model_from_payload(payload["smartPricing"]),
    )


def geozone_from_payload(rows: Iterable[dict[str, Any]]) -> GeoZone:
    """Parse geozone items; the GeoJSON geometry sits under ``geom.geometry``."""
    items: list[GeoZoneItem] = []
    for row in rows:
        try:
            geometry = shape(row["geom"]["geometry"])
            items.append(
                GeoZoneItem(
                    geofencing_type=str(row.get("geofencingType") or ""),
                    model_type=str(row.get("modelType") or ""),
                    geometry=geometry,
                )
            )
        except (KeyError, ValueError, TypeError, AttributeError, GeometryTypeError) as e:
            logger.warning(f"Skipping invalid geozone item: {e}")
            continue
    return tuple(items)
