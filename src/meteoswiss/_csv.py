"""Semicolon-delimited CSV decoding into typed records."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterator

from pydantic import BaseModel, ValidationError

from meteoswiss._columns import CoercionFailed, columns_for
from meteoswiss.exceptions import DecodeError
from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation

CSV_DELIMITER = ";"
STATION_TRAILING_LINES = 3


def remove_trailing_lines(text: str, n: int) -> str:
    """Drop the last ``n`` lines of ``text`` and rejoin the rest with ``\\n``.

    Text with fewer than ``n`` lines becomes the empty string.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return text
    lines = text.splitlines()
    return "\n".join(lines[:-n])


def iter_records[T: BaseModel](text: str, model: type[T]) -> Iterator[T]:
    """Lazily decode ``text`` into ``model`` instances, one per data row.

    The header line is matched by name against the model's column table.
    The first row with an unusable required field raises :class:`DecodeError`
    and ends the iteration.
    """
    columns = columns_for(model)
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")), delimiter=CSV_DELIMITER)

    for row in reader:
        values: dict[str, object] = {}
        for column in columns:
            try:
                values[column.field] = column.coerce(row.get(column.header))
            except CoercionFailed as exc:
                raise DecodeError(reader.line_num, column.header, str(exc)) from exc

        try:
            yield model(**values)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else ""
            header = next((c.header for c in columns if c.field == field), field)
            raise DecodeError(reader.line_num, header, error["msg"]) from exc


def iter_stations(text: str) -> Iterator[MeasuringStation]:
    """Decode a station list that has already had its footer removed."""
    return iter_records(text, MeasuringStation)


def iter_measurements(text: str) -> Iterator[MeasuringPoint]:
    """Decode a 10-minute measurement file."""
    return iter_records(text, MeasuringPoint)
