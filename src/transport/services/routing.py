"""Straight-line route estimates used when no directions result is available."""

from geopy.distance import geodesic

from transport.models.routing import Coordinates, TaxiRouteResult

AVERAGE_SPEED_KMH = 40


def get_distance_km(pickup: Coordinates, dropoff: Coordinates) -> float:
    return geodesic((pickup.latitude, pickup.longitude), (dropoff.latitude, dropoff.longitude)).km


def calculate_eta(distance_km: float, avg_speed_kmh: float = AVERAGE_SPEED_KMH) -> int:
    """Travel time in minutes at an average city speed."""
    if distance_km == 0:
        return 0
    return int(distance_km / avg_speed_kmh * 60)


def estimate_route(pickup: Coordinates, dropoff: Coordinates) -> TaxiRouteResult:
    distance = get_distance_km(pickup, dropoff)
    return TaxiRouteResult(distance=round(distance, 2), duration=calculate_eta(distance))
