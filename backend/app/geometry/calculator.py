"""Core distance and containment calculations.

Points are WGS84 degrees, all outputs are meters. Distances use the haversine
formula on a spherical earth, which agrees with PostGIS geography distances to
well under a meter at city-block scale.
"""

import math

from shapely.geometry import Polygon, box

from app.geometry.radius import radius_from_dimensions
from app.geometry.types import GeoPoint

EARTH_RADIUS_M = 6_371_008.8
METERS_PER_DEGREE_LAT = 111_320.0

# Absorbs floating point noise from the trig round trip so that boundary
# equalities (distance == radius) stay inclusive.
DISTANCE_EPSILON_M = 1e-6

__all__ = [
    "DISTANCE_EPSILON_M",
    "EARTH_RADIUS_M",
    "distance_m",
    "footprint_envelope",
    "offset_point",
    "radius_from_dimensions",
    "within_radius",
]


def distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in meters."""
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lng - a.lng)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def within_radius(a: GeoPoint, b: GeoPoint, radius_m: float) -> bool:
    """True when ``b`` lies within ``radius_m`` meters of ``a`` (inclusive)."""
    if radius_m < 0:
        return False
    return distance_m(a, b) <= radius_m + DISTANCE_EPSILON_M


def offset_point(origin: GeoPoint, north_m: float = 0.0, east_m: float = 0.0) -> GeoPoint:
    """Move a point by a metric offset.

    Northward moves are exact on the sphere; eastward moves follow the
    parallel, which is accurate for the short offsets used here.
    """
    dlat = math.degrees(north_m / EARTH_RADIUS_M)
    lat = origin.lat + dlat
    dlng = math.degrees(east_m / (EARTH_RADIUS_M * math.cos(math.radians(lat))))
    return GeoPoint(lat=lat, lng=origin.lng + dlng)


def footprint_envelope(center: GeoPoint, width: float, length: float) -> Polygon:
    """Lon/lat bounding box of a rectangular footprint.

    Width runs east-west, length runs north-south.

    Args:
        center: Footprint center
        width: East-west extent in meters
        length: North-south extent in meters

    Returns:
        Shapely polygon in (lng, lat) order
    """
    radius_from_dimensions(width, length)

    lat_deg_per_m = 1 / METERS_PER_DEGREE_LAT
    lng_deg_per_m = 1 / (METERS_PER_DEGREE_LAT * math.cos(math.radians(center.lat)))

    half_width_deg = (width / 2) * lng_deg_per_m
    half_length_deg = (length / 2) * lat_deg_per_m

    return box(
        center.lng - half_width_deg,
        center.lat - half_length_deg,
        center.lng + half_width_deg,
        center.lat + half_length_deg,
    )
