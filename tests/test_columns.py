"""Tests for the column tables and coercion rules."""

from __future__ import annotations

import pytest

from meteoswiss._columns import (
    MEASUREMENT_COLUMNS,
    STATION_COLUMNS,
    Coercion,
    Column,
    CoercionFailed,
    columns_for,
)
from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation


class TestCoercion:
    def test_required_text_keeps_value(self) -> None:
        col = Column("Canton", "canton", Coercion.REQUIRED_TEXT)
        assert col.coerce("BE") == "BE"

    def test_required_text_missing(self) -> None:
        col = Column("Canton", "canton", Coercion.REQUIRED_TEXT)
        with pytest.raises(CoercionFailed):
            col.coerce(None)

    def test_required_int(self) -> None:
        col = Column("h", "height", Coercion.REQUIRED_INT)
        assert col.coerce(" 1321 ") == 1321

    @pytest.mark.parametrize("raw", [None, "", "  ", "12.5", "n/a", "1_321"])
    def test_required_int_rejects(self, raw: str | None) -> None:
        col = Column("h", "height", Coercion.REQUIRED_INT)
        with pytest.raises(CoercionFailed):
            col.coerce(raw)

    def test_required_float(self) -> None:
        col = Column("Latitude", "latitude", Coercion.REQUIRED_FLOAT)
        assert col.coerce("46.491703") == pytest.approx(46.491703)

    @pytest.mark.parametrize("raw", [None, "", "-", "nan", "inf", "46_5", "4_6.5"])
    def test_required_float_rejects(self, raw: str | None) -> None:
        col = Column("Latitude", "latitude", Coercion.REQUIRED_FLOAT)
        with pytest.raises(CoercionFailed):
            col.coerce(raw)

    @pytest.mark.parametrize("raw", [None, "", "-", "NaN", "x", "1_0.5"])
    def test_optional_float_absent(self, raw: str | None) -> None:
        col = Column("tre200s0", "temperature", Coercion.OPTIONAL_FLOAT)
        assert col.coerce(raw) is None

    def test_optional_float_negative(self) -> None:
        col = Column("tre200s0", "temperature", Coercion.OPTIONAL_FLOAT)
        assert col.coerce("-12.3") == -12.3

    @pytest.mark.parametrize("raw", [None, "", "-", "2.5", "1_000"])
    def test_optional_int_absent(self, raw: str | None) -> None:
        col = Column("baro", "barometric_altitude", Coercion.OPTIONAL_INT)
        assert col.coerce(raw) is None

    def test_optional_flag(self) -> None:
        assert Coercion.OPTIONAL_INT.optional
        assert Coercion.OPTIONAL_FLOAT.optional
        assert not Coercion.REQUIRED_TEXT.optional


class TestTables:
    def test_lookup(self) -> None:
        assert columns_for(MeasuringStation) is STATION_COLUMNS
        assert columns_for(MeasuringPoint) is MEASUREMENT_COLUMNS

    @pytest.mark.parametrize("table,model", [
        (STATION_COLUMNS, MeasuringStation),
        (MEASUREMENT_COLUMNS, MeasuringPoint),
    ])
    def test_every_model_field_is_mapped_once(self, table, model) -> None:
        fields = [c.field for c in table]
        assert sorted(fields) == sorted(model.model_fields)

    def test_measurement_sensors_are_optional(self) -> None:
        optional = [c.header for c in MEASUREMENT_COLUMNS if c.coercion.optional]
        assert len(optional) == 11
        assert "Station/Location" not in optional
        assert "Date" not in optional

    def test_only_barometric_altitude_optional_for_stations(self) -> None:
        optional = [c.field for c in STATION_COLUMNS if c.coercion.optional]
        assert optional == ["barometric_altitude"]
