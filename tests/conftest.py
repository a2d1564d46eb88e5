"""Shared fixtures and env-var-based skip logic."""

import os

import pytest

from airportinfo.client import AirportInfo
from airportinfo.config import Config
from tests.fakes import FakeResponse

BASE_URL = "https://api.example.test/anbdata/airports/locations/doc7910"
IMAGE_URL = "https://images.example.test/airports"


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "network" in item.keywords and not os.environ.get("AIRPORTINFO_API_KEY"):
            item.add_marker(pytest.mark.skip(reason="Set AIRPORTINFO_API_KEY to run"))


@pytest.fixture(autouse=True)
def default_conf(tmp_path, monkeypatch):
    """Keeps a local config/config.yaml out of the tests."""
    conf = Config(str(tmp_path / "missing.yaml"))
    monkeypatch.setattr("airportinfo.client.common_conf", conf)
    monkeypatch.setattr("airportinfo.scripts.lookup.common_conf", conf)
    return conf


@pytest.fixture
def client():
    return AirportInfo("k1", api_url=BASE_URL, image_url=IMAGE_URL, timeout=None)


@pytest.fixture
def ok_response():
    return FakeResponse(text='[{"airportName":"Kingston","ICAO":"CYGK"}]')
