from __future__ import annotations

import pytest

from wdi.cache import ReferenceCache

from helpers import GNI_VALUES, country, envelope, observation


@pytest.fixture
def gni_records() -> list[dict]:
    return [
        observation("NY.GNP.PCAP.CD", "US", "United States", year, value)
        for year, value in GNI_VALUES.items()
    ]


@pytest.fixture
def countries_payload() -> list:
    return envelope(
        [
            country("BRA", "BR", "Brazil"),
            country("USA", "US", "United States", region="North America", longitude="-77.032", latitude="38.8895"),
            country("WLD", "1W", "World", region="Aggregates", longitude="", latitude=""),
        ]
    )


@pytest.fixture
def indicators_payload() -> list:
    return envelope(
        [
            {
                "id": "NY.GNP.PCAP.CD",
                "name": "GNI per capita, Atlas method (current US$)",
                "unit": "",
                "source": {"id": "2", "value": "World Development Indicators"},
                "sourceNote": "GNI per capita is the gross national income divided by midyear population.",
                "sourceOrganization": "World Bank national accounts data.",
                "topics": [{"id": "3", "value": "Economy & Growth "}],
            },
            {
                "id": "SP.POP.TOTL",
                "name": "Population, total",
                "unit": "",
                "source": {"id": "2", "value": "World Development Indicators"},
                "sourceNote": "Total population counts all residents.",
                "sourceOrganization": "United Nations Population Division.",
                "topics": [{"id": "8", "value": "Health "}, {"id": "19", "value": "Climate Change"}],
            },
        ]
    )


class FakeTransport:
    """Serves canned payloads by URL fragment and records every request."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[str] = []

    def __call__(self, url: str, verbose: bool = False):
        self.calls.append(url)
        for fragment, payload in self.routes.items():
            if fragment in url:
                return payload
        raise AssertionError(f"unexpected request: {url}")


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def cache_factory():
    def _make(routes: dict) -> tuple[ReferenceCache, FakeTransport]:
        transport = FakeTransport(routes)
        return ReferenceCache(fetch_json=transport), transport

    return _make
