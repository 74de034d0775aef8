"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Location

EARTH_RADIUS_KM = 6371.0
WALKING_SPEED_KMH = 5.0
DRIVING_SPEED_KMH = 25.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push ``a`` just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(origin: Location, destination: Location) -> float:
    return haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)


def walking_time_minutes(origin: Location, destination: Location) -> float:
    """Minutes needed to walk between two points at ``WALKING_SPEED_KMH``."""
    return distance_km(origin, destination) / WALKING_SPEED_KMH * 60


def driving_time_minutes(origin: Location, destination: Location) -> float:
    """Minutes needed to drive between two points at ``DRIVING_SPEED_KMH``."""
    return distance_km(origin, destination) / DRIVING_SPEED_KMH * 60
