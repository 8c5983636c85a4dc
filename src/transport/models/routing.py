"""Route shapes exchanged with the directions provider."""

from typing import Any

from pydantic import BaseModel, Field

from transport.models.base import ApiModel


class Coordinates(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class DirectionsRoute(BaseModel):
    distance: float  # meters
    duration: float  # seconds
    geometry: dict[str, Any] | None = None


class DirectionsResponse(BaseModel):
    routes: list[DirectionsRoute]


class TaxiRouteCalculationInput(ApiModel):
    pickup_lat: float = Field(..., ge=-90, le=90)
    pickup_lng: float = Field(..., ge=-180, le=180)
    dropoff_lat: float = Field(..., ge=-90, le=90)
    dropoff_lng: float = Field(..., ge=-180, le=180)


class TaxiRouteResult(ApiModel):
    distance: float  # kilometers
    duration: float  # minutes
    route: DirectionsRoute | None = None

    @classmethod
    def from_directions(cls, response: DirectionsResponse) -> "TaxiRouteResult":
        """Take the provider's first (best) route."""
        if not response.routes:
            raise ValueError("Directions response contains no routes")
        best = response.routes[0]
        return cls(
            distance=round(best.distance / 1000, 2),
            duration=round(best.duration / 60),
            route=best,
        )
