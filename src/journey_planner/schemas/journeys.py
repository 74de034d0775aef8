"""Journey planning request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationModel(CamelModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class TripLegModel(CamelModel):
    start_location: LocationModel
    end_location: LocationModel
    pause_minutes: int = Field(default=0, ge=0)


class JourneyRequest(CamelModel):
    legs: List[TripLegModel] = Field(..., min_length=1, description="Legs in travel order.")


class VehicleModelInfo(CamelModel):
    type: str
    make: str
    name: str
    energy: str
    tier: str


class VehicleResponse(CamelModel):
    uuid: str
    plate: str
    location_latitude: float
    location_longitude: float
    model: VehicleModelInfo
    autonomy: float
    autonomy_percentage: float
    picture_url: str


class CostBreakdownModel(CamelModel):
    unlock_fee: float
    booking_cost: float
    travel_cost: float
    pause_cost: float
    walking_time_minutes: float


class JourneyPlanResponse(CamelModel):
    vehicle: VehicleResponse
    journey: JourneyRequest
    total_cost: float
    cost_breakdown: CostBreakdownModel
    pricing_model: str


class ScenarioModel(CamelModel):
    name: str
    journey: JourneyRequest
