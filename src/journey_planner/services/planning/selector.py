"""Nearest vehicle selection."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ...models.domain import Location, Vehicle
from ..geospatial import distance_km


def find_closest_vehicle(location: Location, vehicles: Sequence[Vehicle]) -> Optional[Vehicle]:
    """Return the vehicle nearest to ``location``; the first one wins ties."""
    closest: Optional[Vehicle] = None
    min_distance = math.inf
    for vehicle in vehicles:
        distance = distance_km(location, vehicle.location)
        if distance < min_distance:
            min_distance = distance
            closest = vehicle
    return closest
