import pytest
from shapely.geometry import box

from journey_planner.models.domain import GeoZoneItem, Journey, Location, PricingModel, PricingOffers, TripLeg, Vehicle, VehicleModel
from journey_planner.services.planning import service as planning_service
from journey_planner.services.planning.errors import (
    EmptyFleetError,
    EmptyJourneyError,
    NoValidPricingPlanError,
    UpstreamUnavailableError,
)


def _vehicle(uuid: str, lat: float, lng: float, tier: str = "M") -> Vehicle:
    return Vehicle(
        uuid=uuid,
        plate=f"PLATE-{uuid}",
        latitude=lat,
        longitude=lng,
        model=VehicleModel(type="car", make="Kia", name="Niro", energy="electric", tier=tier),
    )


def _leg(start: tuple[float, float], end: tuple[float, float], pause_minutes: int = 0) -> TripLeg:
    return TripLeg(
        start_location=Location(lat=start[0], lng=start[1]),
        end_location=Location(lat=end[0], lng=end[1]),
        pause_minutes=pause_minutes,
    )


def _offers() -> PricingOffers:
    return PricingOffers(
        per_minute=PricingModel(type="minute", unlock_fee=1000, minute_price=290, pause_unit_price=140, book_unit_price=90, day_cap_price=69000),
        per_kilometer=PricingModel(type="kilometer", unlock_fee=1000, kilometer_price=390, pause_unit_price=140, book_unit_price=90, day_cap_price=69000),
        smart=PricingModel(type="smart", unlock_fee=0, minute_price=190, kilometer_price=190, pause_unit_price=140, book_unit_price=90, day_cap_price=69000),
    )


JANE = Journey(
    legs=(
        _leg((50.8355, 4.3573), (50.8245, 4.3635), pause_minutes=120),
        _leg((50.8245, 4.3635), (50.8275, 4.3745)),
    )
)
NEAR_JANE = _vehicle("near", 50.8463, 4.3573)  # about 1.2 km north of the first start
FAR = _vehicle("far", 50.9011, 4.4844)


class DummyClient:
    def __init__(self, fleet=None, offers=None, geozone=None, geozone_error=None, pricing_error=None, fleet_error=None):
        self.fleet = [NEAR_JANE, FAR] if fleet is None else fleet
        self.offers = offers or _offers()
        self.geozone = geozone
        self.geozone_error = geozone_error
        self.pricing_error = pricing_error
        self.fleet_error = fleet_error
        self.pricing_calls = []
        self.geozone_calls = []

    def fetch_vehicles(self):
        if self.fleet_error:
            raise self.fleet_error
        return self.fleet

    def fetch_pricing(self, model_type, tier):
        self.pricing_calls.append((model_type, tier))
        if self.pricing_error:
            raise self.pricing_error
        return self.offers

    def fetch_geozone(self, vehicle_uuid):
        self.geozone_calls.append(vehicle_uuid)
        if self.geozone_error:
            raise self.geozone_error
        return self.geozone


def test_plan_journey_without_zone_data():
    plan = planning_service.plan_journey(JANE, [FAR, NEAR_JANE], _offers(), None)

    assert plan.vehicle == NEAR_JANE
    assert plan.cost_breakdown.walking_time_minutes > 0
    assert len(plan.journey.legs) == 2
    assert sum(leg.pause_minutes for leg in plan.journey.legs) == 120
    assert plan.pricing_model in {"per-minute", "per-kilometer", "smart"}


def test_plan_journey_rejects_empty_journey():
    with pytest.raises(EmptyJourneyError):
        planning_service.plan_journey(Journey(legs=()), [NEAR_JANE], _offers(), None)


def test_plan_journey_rejects_empty_fleet():
    with pytest.raises(EmptyFleetError):
        planning_service.plan_journey(JANE, [], _offers(), None)


def test_plan_journey_fails_when_end_is_not_parkable():
    geozone = (GeoZoneItem(geofencing_type="parking", model_type="car", geometry=box(4.30, 50.90, 4.31, 50.91)),)

    with pytest.raises(NoValidPricingPlanError):
        planning_service.plan_journey(JANE, [NEAR_JANE], _offers(), geozone)


def test_plan_journey_live_uses_closest_vehicle_class():
    client = DummyClient(fleet=[FAR, _vehicle("near-l", 50.8463, 4.3573, tier="L")])

    plan = planning_service.plan_journey_live(JANE, client=client)

    assert plan.vehicle.uuid == "near-l"
    assert client.pricing_calls == [("car", "L")]
    assert client.geozone_calls == ["near-l"]


def test_plan_journey_live_degrades_when_geozone_is_unavailable(caplog):
    client = DummyClient(geozone_error=UpstreamUnavailableError("geozone down"))

    with caplog.at_level("WARNING"):
        plan = planning_service.plan_journey_live(JANE, client=client)

    assert plan.vehicle == NEAR_JANE
    assert "Failed to fetch geozone" in caplog.text


def test_plan_journey_live_propagates_pricing_failure():
    client = DummyClient(pricing_error=UpstreamUnavailableError("pricing down"))

    with pytest.raises(UpstreamUnavailableError):
        planning_service.plan_journey_live(JANE, client=client)


def test_plan_journey_live_propagates_fleet_failure():
    client = DummyClient(fleet_error=UpstreamUnavailableError("fleet down"))

    with pytest.raises(UpstreamUnavailableError):
        planning_service.plan_journey_live(JANE, client=client)


def test_plan_journey_live_checks_legs_before_fetching():
    client = DummyClient(fleet_error=AssertionError("fleet should not be fetched"))

    with pytest.raises(EmptyJourneyError):
        planning_service.plan_journey_live(Journey(legs=()), client=client)


def test_plan_journey_live_rejects_empty_fleet():
    with pytest.raises(EmptyFleetError):
        planning_service.plan_journey_live(JANE, client=DummyClient(fleet=[]))


def test_plan_journey_live_builds_default_client(monkeypatch):
    client = DummyClient()
    monkeypatch.setattr(planning_service, "FleetApiClient", lambda: client)

    plan = planning_service.plan_journey_live(JANE)

    assert plan.vehicle == NEAR_JANE
    assert client.pricing_calls == [("car", "M")]


def test_response_round_trip_keeps_legs():
    plan = planning_service.plan_journey(JANE, [NEAR_JANE], _offers(), None)

    response = planning_service.plan_to_response(plan)

    assert planning_service.journey_from_request(response.journey) == JANE
    assert response.vehicle.uuid == "near"
    assert response.total_cost == plan.total_cost
