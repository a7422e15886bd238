"""Shared test fixtures and sample feed payloads."""

from __future__ import annotations

import pytest

STATIONS_URL = "https://data.example.ch/stations.csv"
MEASUREMENTS_URL = "https://data.example.ch/VQHA80.csv"

STATION_HEADER = (
    "Station;Abbr.;WIGOS-ID;Station type;Data Owner;Data since;"
    "Station height m. a. sea level;Barometric altitude m. a. ground;"
    "CH coordinates [m];Latitude;Longitude;Exposition;Canton;Measurements;Link"
)

SAMPLE_STATIONS_CSV = "\n".join([
    STATION_HEADER,
    "Aadorf / Tänikon;TAE;0-20000-0-06679;Weather station;MeteoSwiss;01.01.1981;"
    "539;3;2710518/1259824;47.479892;8.904928;plain;TG;Temperature, Precipitation;https://example.ch/tae",
    "Adelboden;ABO;0-20000-0-06735;Climate station;MeteoSwiss;01.01.1966;"
    "1321;;2609372/1149357;46.491703;7.560703;valley;BE;Temperature;https://example.ch/abo",
    "Basel / Binningen;BAS;0-20000-0-06601;Climate station;MeteoSwiss;01.01.1864;"
    "316;2;2610911/1265600;47.541142;7.583525;plain;BL;Temperature, Pressure;https://example.ch/bas",
    "",
    "Source: MeteoSwiss",
    "Status: 2024-01-01",
])

SAMPLE_MEASUREMENTS_CSV = "\n".join([
    "Station/Location;Date;tre200s0;rre150z0;sre000z0;gre000z0;ure200s0;tde200s0;"
    "dkl010z0;fu3010z0;fu3010z1;prestas0;pp0qffs0;pp0qnhs0;ppz850s0;ppz700s0",
    "TAE;202401010000;5.2;0.0;0;2;88.1;3.4;215;7.9;14.8;956.1;1019.3;1019.0;-;-",
    "ABO;202401010000;-;0.1;-;-;-;-;-;-;-;869.2;-;-;-;-",
    "BAS;202401010000;7.4;;10;45;71.0;2.4;240;11.5;25.9;981.5;1018.0;1018.2;-;-",
    "",
])


@pytest.fixture
def stations_csv() -> str:
    return SAMPLE_STATIONS_CSV


@pytest.fixture
def measurements_csv() -> str:
    return SAMPLE_MEASUREMENTS_CSV


@pytest.fixture
def stations_url() -> str:
    return STATIONS_URL


@pytest.fixture
def measurements_url() -> str:
    return MEASUREMENTS_URL
