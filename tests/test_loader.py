"""Tests for dataset validation, parsing and fetching."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import time
from decimal import Decimal

import pytest
import requests

from data import loader
from data.loader import fetch_dataset, load_dataset, parse_dataset
from data.validator import parse_area, parse_unit_number, validate_dataset
from engine.errors import DataUnavailable
from engine.occupancy_store import OccupancyStore


def make_record(owner="Ivanov", area="54.2", block="A", client_id="c9"):
    return {"owner": owner, "area": area, "block": block, "client_id": client_id}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False, chunk_delay=0.0):
        self.payload = payload
        self.status_code = status_code
        self.bad_json = bad_json
        self.chunk_delay = chunk_delay

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP error! status: {self.status_code}")

    def iter_content(self, chunk_size=1):
        body = b"{not json" if self.bad_json else json.dumps(self.payload).encode("utf-8")
        for i in range(0, len(body), chunk_size):
            if self.chunk_delay:
                time.sleep(self.chunk_delay)
            yield body[i:i + chunk_size]


class TestValidator:
    def test_valid_document(self):
        result = validate_dataset({"3": {"5": make_record()}})
        assert result.is_valid
        assert result.warnings == []

    def test_not_an_object(self):
        result = validate_dataset(["3"])
        assert not result.is_valid
        assert result.errors

    def test_unknown_floor_warns(self):
        result = validate_dataset({"12": {"1": make_record()}})
        assert result.is_valid
        assert any("unknown floor" in w for w in result.warnings)

    def test_out_of_range_unit_warns(self):
        result = validate_dataset({"3": {"15": make_record(), "x": make_record()}})
        assert len(result.warnings) == 2

    def test_invalid_area_warns(self):
        result = validate_dataset({"3": {"5": make_record(area="big")}})
        assert any("invalid area" in w for w in result.warnings)

    def test_parse_unit_number(self):
        assert parse_unit_number("5") == 5
        assert parse_unit_number("14") == 14
        assert parse_unit_number(5) == 5
        assert parse_unit_number("0") is None
        assert parse_unit_number("15") is None
        assert parse_unit_number("five") is None

    def test_non_plain_keys_rejected(self):
        for key in ["05", "+5", " 5", "5 ", "1_4", "٥", "-1"]:
            assert parse_unit_number(key) is None, key

    def test_colliding_key_warns(self):
        result = validate_dataset({"3": {"5": make_record(), "05": make_record(owner="Petrov")}})
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "collides with apartment '3-5'" in result.warnings[0]

    def test_non_plain_key_warns(self):
        result = validate_dataset({"3": {"1_4": make_record()}})
        assert len(result.warnings) == 1
        assert "not a plain apartment number" in result.warnings[0]

    def test_duplicate_number_warns(self):
        result = validate_dataset({"3": {"5": make_record(), 5: make_record(owner="Petrov")}})
        assert any("listed twice" in w for w in result.warnings)

    def test_parse_area(self):
        assert parse_area("54.2") == Decimal("54.2")
        assert parse_area(40.71) == Decimal("40.71")
        assert parse_area("40,5") == Decimal("40.5")
        assert parse_area("") is None
        assert parse_area("-3") is None
        assert parse_area("NaN") is None


class TestParseDataset:
    def test_parses_records(self):
        occupancy = parse_dataset({"3": {"5": make_record()}})
        record = occupancy["3"][5]
        assert record.owner == "Ivanov"
        assert record.area == Decimal("54.2")
        assert record.client_id == "c9"

    def test_skips_invalid_entries(self):
        occupancy = parse_dataset({
            "3": {"5": make_record(), "99": make_record()},
            "roof": {"1": make_record()},
            "4": "occupied",
        })
        assert occupancy == {"3": {5: occupancy["3"][5]}}

    def test_empty_client_id_is_none(self):
        occupancy = parse_dataset({"3": {"5": make_record(client_id="")}})
        assert occupancy["3"][5].client_id is None

    def test_numeric_client_id_kept_as_string(self):
        occupancy = parse_dataset({"3": {"5": make_record(client_id=42)}})
        assert occupancy["3"][5].client_id == "42"

    def test_non_object_record_still_occupied(self):
        store = OccupancyStore.from_dataset({"3": {"5": None}})
        assert store.unit_at("3", 5).occupied
        assert store.unit_at("3", 5).owner == ""

    def test_non_plain_keys_do_not_overwrite(self):
        store = OccupancyStore.from_dataset({
            "3": {
                "5": make_record(owner="Ivanov"),
                "05": make_record(owner="Petrov"),
                "1_4": make_record(owner="Sidorov"),
            }
        })
        assert store.unit_at("3", 5).owner == "Ivanov"
        assert store.unit_at("3", 14).occupied is False

    def test_first_of_duplicate_numbers_wins(self):
        occupancy = parse_dataset({"3": {"5": make_record(owner="Ivanov"), 5: make_record(owner="Petrov")}})
        assert occupancy["3"][5].owner == "Ivanov"

    def test_rejects_non_object(self):
        with pytest.raises(DataUnavailable):
            parse_dataset("nope")


class TestFetchDataset:
    def test_local_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"1": {"1": make_record()}}), encoding="utf-8")
        assert load_dataset(str(path))["1"][1].owner == "Ivanov"

    def test_url(self, monkeypatch):
        seen = {}

        def fake_get(url, timeout, stream=False):
            seen["url"] = url
            seen["timeout"] = timeout
            seen["stream"] = stream
            return FakeResponse({"3": {"5": make_record()}})

        monkeypatch.setattr(loader.requests, "get", fake_get)
        raw = fetch_dataset("https://example.org/apartments_status.json", timeout=2.5)
        assert raw["3"]["5"]["owner"] == "Ivanov"
        assert seen == {"url": "https://example.org/apartments_status.json", "timeout": 2.5, "stream": True}

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(loader.requests, "get", lambda url, timeout, stream=False: FakeResponse(status_code=404))
        with pytest.raises(DataUnavailable):
            fetch_dataset("https://example.org/missing.json")

    def test_timeout(self, monkeypatch):
        def slow_get(url, timeout, stream=False):
            raise requests.Timeout("timed out")

        monkeypatch.setattr(loader.requests, "get", slow_get)
        with pytest.raises(DataUnavailable):
            fetch_dataset("https://example.org/slow.json")

    def test_timeout_degrades_store(self, monkeypatch):
        def slow_get(url, timeout, stream=False):
            raise requests.Timeout("timed out")

        monkeypatch.setattr(loader.requests, "get", slow_get)
        store = OccupancyStore.load("https://example.org/slow.json")
        assert store.loaded is False
        assert store.free_count() == 140

    def test_trickling_body_is_bounded(self, monkeypatch):
        payload = {"3": {str(n): make_record() for n in range(1, 15)}}
        monkeypatch.setattr(
            loader.requests, "get",
            lambda url, timeout, stream=False: FakeResponse(payload, chunk_delay=0.5),
        )
        started = time.monotonic()
        with pytest.raises(DataUnavailable):
            fetch_dataset("https://example.org/trickle.json", timeout=0.2)
        assert time.monotonic() - started < 1.5

    def test_trickling_body_degrades_store(self, monkeypatch):
        monkeypatch.setattr(
            loader.requests, "get",
            lambda url, timeout, stream=False: FakeResponse({"3": {"5": make_record()}}, chunk_delay=0.5),
        )
        started = time.monotonic()
        store = OccupancyStore.load("https://example.org/trickle.json", timeout=0.2)
        assert time.monotonic() - started < 1.5
        assert store.loaded is False
        assert store.free_count() == 140

    def test_read_body_stops_past_deadline(self):
        response = FakeResponse({"3": {"5": make_record()}})
        with pytest.raises(DataUnavailable):
            loader.read_body(response, deadline=time.monotonic() - 1)

    def test_bad_json_from_url(self, monkeypatch):
        monkeypatch.setattr(loader.requests, "get", lambda url, timeout, stream=False: FakeResponse(bad_json=True))
        with pytest.raises(DataUnavailable):
            fetch_dataset("http://example.org/broken.json")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
