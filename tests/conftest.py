"""Pytest configuration and fixtures."""

import gzip
import io
import json

import pandas as pd
import pytest

from worldclock.clock.engine import ClockEngine
from worldclock.data.catalog import CatalogBuilder
from worldclock.data.models import CityEntry
from worldclock.display.surface import TerminalSurface
from worldclock.storage.city_list_file import CityListFile


SAMPLE_DATASET = [
    {
        "id": 109,
        "name": "Japan",
        "iso2": "JP",
        "states": [
            {
                "id": 827,
                "name": "Tokyo",
                "cities": [
                    {
                        "id": 1,
                        "name": "Shibuya",
                        "timezone": "Asia/Tokyo",
                        "latitude": "35.66359000",
                        "longitude": "139.70036000",
                    },
                    {
                        "id": 2,
                        "name": "Shinjuku-ku",
                        "timezone": "Asia/Tokyo",
                        "latitude": "35.69384000",
                        "longitude": "139.70361000",
                    },
                ],
            }
        ],
    }
]


class FakeCountriesClient:
    """Stands in for CountriesClient, serving a fixed payload."""

    def __init__(self, payload: bytes):
        self.payload = payload
        self.closed = False

    def fetch_dataset(self) -> bytes:
        return self.payload

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def gzip_json(document) -> bytes:
    """Serialize and compress a dataset document."""
    return gzip.compress(json.dumps(document).encode("utf-8"))


@pytest.fixture
def sample_dataset():
    """Raw dataset with one country, one state and two cities."""
    return json.loads(json.dumps(SAMPLE_DATASET))


@pytest.fixture
def sample_payload(sample_dataset):
    """Gzip-compressed sample dataset."""
    return gzip_json(sample_dataset)


@pytest.fixture
def sample_builder(sample_payload):
    """Catalog builder reading the sample payload."""
    return CatalogBuilder(
        client_factory=lambda: FakeCountriesClient(sample_payload),
        fallback_flag="🏳",
    )


@pytest.fixture
def shibuya():
    """Shibuya entry."""
    return CityEntry(
        country="Japan",
        state="Tokyo",
        city="Shibuya",
        timezone="Asia/Tokyo",
        latitude=35.66359,
        longitude=139.70036,
    )


@pytest.fixture
def new_york():
    """New York entry."""
    return CityEntry(
        country="United States",
        state="New York",
        city="New York City",
        timezone="America/New_York",
        latitude=40.71427,
        longitude=-74.00597,
    )


@pytest.fixture
def fixed_instant():
    """Monday 15 January 2024, 12:07:42 UTC."""
    return pd.Timestamp("2024-01-15 12:07:42", tz="UTC")


@pytest.fixture
def fixed_engine(fixed_instant):
    """Clock engine frozen at fixed_instant."""
    return ClockEngine(clock=lambda: fixed_instant, rounding="15min")


@pytest.fixture
def surface():
    """Terminal surface writing to a buffer."""
    return TerminalSurface(stream=io.StringIO(), clear=False)


@pytest.fixture
def city_file(tmp_path):
    """City list file in a temporary directory."""
    return CityListFile(path=str(tmp_path / "cities.json"))


@pytest.fixture
def builder_for():
    """Factory making a catalog builder around a raw payload."""

    def _builder(payload: bytes) -> CatalogBuilder:
        return CatalogBuilder(
            client_factory=lambda: FakeCountriesClient(payload),
            fallback_flag="🏳",
        )

    return _builder


@pytest.fixture
def compress():
    """Serializer producing gzip-compressed JSON payloads."""
    return gzip_json
