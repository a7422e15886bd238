"""MeteoSwiss data models."""

from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation

__all__ = [
    "MeasuringPoint",
    "MeasuringStation",
]
