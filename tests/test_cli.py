import json
import logging
import os

import pytest
import requests

import geocode
from conftest import FakeResponse

OSM = "https://nominatim.openstreetmap.org/search"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path, no_credentials):
    # keep a developer's .env out of the run
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GEOCODE_TIMEOUT", raising=False)
    monkeypatch.delenv("GEOCODE_USER_AGENT", raising=False)


@pytest.fixture
def network(monkeypatch):
    calls = []
    routes = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.append((url, params))
        if url not in routes:
            raise requests.ConnectionError(f"no route to {url}")
        return routes[url]

    monkeypatch.setattr(requests, "get", fake_get)
    return routes, calls


def test_no_address_prints_usage_and_exits_1(network, capsys):
    _, calls = network

    assert geocode.main([]) == 1

    assert "usage: geocode" in capsys.readouterr().err
    assert calls == []


def test_osm_success_prints_json(network, capsys):
    routes, calls = network
    routes[OSM] = FakeResponse([{"lat": "37.4220936", "lon": "-122.083922"}])

    code = geocode.main(["--provider", "osm", "1600", "Amphitheatre", "Parkway"])

    out = capsys.readouterr().out
    assert code == 0
    assert json.loads(out) == {
        "provider": "osm",
        "address": "1600 Amphitheatre Parkway",
        "latitude": 37.4220936,
        "longitude": -122.083922,
    }
    assert out.startswith('{\n  "provider": "osm",')
    assert calls == [(OSM, {"q": "1600 Amphitheatre Parkway", "format": "json", "limit": 1})]


def test_default_provider_is_osm(network, capsys):
    routes, calls = network
    routes[OSM] = FakeResponse([{"lat": "1", "lon": "2"}])

    assert geocode.main(["Lisbon"]) == 0
    assert json.loads(capsys.readouterr().out)["provider"] == "osm"
    assert [url for url, _ in calls] == [OSM]


def test_flags_after_address_are_part_of_address(network, capsys):
    routes, calls = network
    routes[OSM] = FakeResponse([{"lat": "48.85", "lon": "2.35"}])

    assert geocode.main(["Paris", "--provider", "google"]) == 0

    assert json.loads(capsys.readouterr().out)["address"] == "Paris --provider google"
    assert [url for url, _ in calls] == [OSM]


def test_bogus_provider_warns_and_uses_table_order(network, capsys, caplog):
    routes, _ = network
    routes[OSM] = FakeResponse([{"lat": "35.6585805", "lon": "139.7454329"}])

    with caplog.at_level(logging.WARNING):
        code = geocode.main(["--provider", "bogus", "Tokyo", "Tower"])

    assert code == 0
    assert "provider 'bogus' not recognized" in caplog.text
    failed = [m.split()[1] for m in caplog.messages if m.startswith("provider ") and "failed" in m]
    assert failed == ["google", "positionstack", "opencage", "locationiq", "mapquest"]
    assert json.loads(capsys.readouterr().out)["address"] == "Tokyo Tower"


def test_all_failed_exits_1_with_diagnostic(network, capsys):
    code = geocode.main(["--provider", "google", "Eiffel", "Tower"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    last_line = captured.err.strip().splitlines()[-1]
    assert last_line.startswith("All providers failed")
    assert "google: GOOGLE_API_KEY not set" in last_line
    assert "osm: no route to" in last_line


def test_list_providers_makes_no_calls(network, capsys, monkeypatch):
    _, calls = network
    monkeypatch.setenv("OPENCAGE_KEY", "k")

    assert geocode.main(["--list-providers"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == [
        "google", "positionstack", "opencage", "locationiq", "mapquest", "osm",
    ]
    assert "OPENCAGE_KEY set" in lines[2]
    assert "GOOGLE_API_KEY not set" in lines[0]
    assert "no key needed" in lines[5]
    assert calls == []


def test_dotenv_file_supplies_credentials(network, capsys, tmp_path):
    routes, calls = network
    (tmp_path / ".env").write_text("MAPQUEST_KEY=from-dotenv\n", encoding="utf-8")
    routes["http://www.mapquestapi.com/geocoding/v1/address"] = FakeResponse(
        {"info": {"statuscode": 0}, "results": [{"locations": [{"latLng": {"lat": 1.0, "lng": 2.0}}]}]}
    )

    try:
        code = geocode.main(["--provider", "mapquest", "Somewhere"])
    finally:
        os.environ.pop("MAPQUEST_KEY", None)

    assert code == 0
    assert json.loads(capsys.readouterr().out)["provider"] == "mapquest"
    assert calls[0][1]["key"] == "from-dotenv"
