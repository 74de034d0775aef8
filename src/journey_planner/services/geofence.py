"""Parking geofence membership tests."""

from __future__ import annotations

from typing import Optional

from shapely.geometry import MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry

from ..models.domain import GeoZone, GeoZoneItem, Location

PARKING_GEOFENCING_TYPE = "parking"


def geometry_contains(geometry: Optional[BaseGeometry], point: Point) -> bool:
    """Planar containment for polygon and multi-polygon geometries.

    Points lying exactly on an edge or vertex are not contained. Any other
    geometry type never contains a point.
    """
    if isinstance(geometry, Polygon):
        return geometry.contains(point)
    if isinstance(geometry, MultiPolygon):
        return any(polygon.contains(point) for polygon in geometry.geoms)
    return False


def parking_items(geozone: Optional[GeoZone], model_type: str) -> list[GeoZoneItem]:
    """Return the parking items of ``geozone`` that apply to ``model_type``."""
    if geozone is None:
        return []
    return [
        item
        for item in geozone
        if item.geofencing_type == PARKING_GEOFENCING_TYPE and item.model_type == model_type
    ]


def is_in_parking_zone(location: Location, geozone: Optional[GeoZone], model_type: str) -> bool:
    """Return True if ``location`` lies inside a parking area for ``model_type``."""
    if geozone is None:
        return False

    # geometries are stored in GeoJSON (lng, lat) order
    point = Point(location.lng, location.lat)
    for item in parking_items(geozone, model_type):
        if geometry_contains(item.geometry, point):
            return True
    return False
