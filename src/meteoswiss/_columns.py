"""Column tables mapping CSV header names onto record fields."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation


class Coercion(str, Enum):
    """How a raw cell is turned into a field value."""

    REQUIRED_TEXT = "required_text"
    REQUIRED_INT = "required_int"
    REQUIRED_FLOAT = "required_float"
    OPTIONAL_INT = "optional_int"
    OPTIONAL_FLOAT = "optional_float"

    @property
    def optional(self) -> bool:
        return self in (Coercion.OPTIONAL_INT, Coercion.OPTIONAL_FLOAT)


class CoercionFailed(ValueError):
    """Raised by :meth:`Column.coerce` for a required cell that cannot be used."""


def _check_digits(raw: str) -> str:
    text = raw.strip()
    # int() and float() accept digit separators such as "1_000"
    if "_" in text:
        raise ValueError(f"unexpected underscore in {raw!r}")
    return text


def _to_int(raw: str) -> int:
    return int(_check_digits(raw))


def _to_float(raw: str) -> float:
    value = float(_check_digits(raw))
    if not math.isfinite(value):
        raise ValueError(f"non-finite number {raw!r}")
    return value


_PARSERS = {
    Coercion.REQUIRED_INT: _to_int,
    Coercion.REQUIRED_FLOAT: _to_float,
    Coercion.OPTIONAL_INT: _to_int,
    Coercion.OPTIONAL_FLOAT: _to_float,
}


@dataclass(frozen=True)
class Column:
    """One CSV column bound to a model field.

    Usage:
        Column("Latitude", "latitude", Coercion.REQUIRED_FLOAT).coerce("46.5")
        # -> 46.5
        Column("tre200s0", "temperature", Coercion.OPTIONAL_FLOAT).coerce("-")
        # -> None
    """

    header: str
    field: str
    coercion: Coercion

    def coerce(self, raw: str | None) -> str | int | float | None:
        """Convert a raw cell, ``None`` meaning the cell or column is missing."""
        if self.coercion is Coercion.REQUIRED_TEXT:
            if raw is None:
                raise CoercionFailed("missing value")
            return raw

        if raw is None or not raw.strip():
            if self.coercion.optional:
                return None
            raise CoercionFailed("missing value")

        try:
            return _PARSERS[self.coercion](raw)
        except ValueError as exc:
            if self.coercion.optional:
                return None
            raise CoercionFailed(f"cannot parse {raw!r}: {exc}") from exc


STATION_COLUMNS: tuple[Column, ...] = (
    Column("Station", "name", Coercion.REQUIRED_TEXT),
    Column("Abbr.", "abbreviation", Coercion.REQUIRED_TEXT),
    Column("Station type", "station_type", Coercion.REQUIRED_TEXT),
    Column("Station height m. a. sea level", "height", Coercion.REQUIRED_INT),
    Column("Barometric altitude m. a. ground", "barometric_altitude", Coercion.OPTIONAL_INT),
    Column("Latitude", "latitude", Coercion.REQUIRED_FLOAT),
    Column("Longitude", "longitude", Coercion.REQUIRED_FLOAT),
    Column("Canton", "canton", Coercion.REQUIRED_TEXT),
    Column("Measurements", "measurements", Coercion.REQUIRED_TEXT),
)

MEASUREMENT_COLUMNS: tuple[Column, ...] = (
    Column("Station/Location", "station", Coercion.REQUIRED_TEXT),
    Column("Date", "datetime", Coercion.REQUIRED_TEXT),
    Column("tre200s0", "temperature", Coercion.OPTIONAL_FLOAT),
    Column("rre150z0", "precipitation", Coercion.OPTIONAL_FLOAT),
    Column("sre000z0", "sunshine", Coercion.OPTIONAL_FLOAT),
    Column("gre000z0", "radiation", Coercion.OPTIONAL_FLOAT),
    Column("ure200s0", "humidity", Coercion.OPTIONAL_FLOAT),
    Column("tde200s0", "dew_point", Coercion.OPTIONAL_FLOAT),
    Column("dkl010z0", "wind_direction", Coercion.OPTIONAL_FLOAT),
    Column("fu3010z0", "wind_speed", Coercion.OPTIONAL_FLOAT),
    Column("fu3010z1", "wind_gust_peak", Coercion.OPTIONAL_FLOAT),
    Column("prestas0", "pressure", Coercion.OPTIONAL_FLOAT),
    Column("pp0qffs0", "pressure_at_sea_level", Coercion.OPTIONAL_FLOAT),
)

COLUMNS: dict[type[BaseModel], tuple[Column, ...]] = {
    MeasuringStation: STATION_COLUMNS,
    MeasuringPoint: MEASUREMENT_COLUMNS,
}


def columns_for(model: type[BaseModel]) -> tuple[Column, ...]:
    """Return the column table registered for ``model``."""
    try:
        return COLUMNS[model]
    except KeyError:
        raise ValueError(f"No column table for {model.__name__}") from None
