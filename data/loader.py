"""Occupancy dataset retrieval and parsing into typed records."""

import json
import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from typing import Dict

import requests

from config.defaults import FETCH_TIMEOUT_SECONDS
from data.validator import parse_area, parse_unit_number, validate_dataset, is_valid_floor
from engine.errors import DataUnavailable
from models.unit import OccupancyRecord

logger = logging.getLogger(__name__)

OccupancyMap = Dict[str, Dict[int, OccupancyRecord]]


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def read_body(response, deadline: float) -> bytes:
    """Collect the response body, giving up once `deadline` (monotonic) has passed."""
    chunks = []
    for chunk in response.iter_content(chunk_size=1024):
        if time.monotonic() > deadline:
            raise DataUnavailable("Occupancy data download exceeded the time limit")
        chunks.append(chunk)
    return b"".join(chunks)


def download(source: str, timeout: float, deadline: float):
    with requests.get(source, timeout=timeout, stream=True) as response:
        response.raise_for_status()
        body = read_body(response, deadline)
    return json.loads(body)


def fetch_dataset(source: str, timeout: float = FETCH_TIMEOUT_SECONDS):
    """Fetch and decode the raw occupancy document from a URL or a local JSON file.

    For a URL, `timeout` bounds the whole download, not only each socket read.
    """
    if is_url(source):
        deadline = time.monotonic() + timeout
        pool = ThreadPoolExecutor(max_workers=1)
        future = pool.submit(download, source, timeout, deadline)
        try:
            return future.result(timeout=timeout)
        except FuturesTimeout as e:
            raise DataUnavailable(f"Fetching {source} took longer than {timeout}s") from e
        except requests.RequestException as e:
            raise DataUnavailable(f"Could not fetch {source}: {e}") from e
        except ValueError as e:
            raise DataUnavailable(f"Invalid JSON from {source}: {e}") from e
        finally:
            # A stalled worker stops at its next chunk past the deadline
            pool.shutdown(wait=False)

    try:
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataUnavailable(f"Could not read {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise DataUnavailable(f"Invalid JSON in {source}: {e}") from e


def parse_record(record) -> OccupancyRecord:
    """Convert one raw occupancy entry into an OccupancyRecord."""
    if not isinstance(record, dict):
        return OccupancyRecord(owner="", area=None, block="")
    client_id = record.get("client_id")
    if client_id is not None:
        client_id = str(client_id).strip() or None
    return OccupancyRecord(
        owner=str(record.get("owner") or "").strip(),
        area=parse_area(record.get("area")),
        block=str(record.get("block") or "").strip(),
        client_id=client_id,
    )


def parse_dataset(raw) -> OccupancyMap:
    """Convert a raw occupancy document into floor -> number -> record.

    Entries with an unknown floor, an out-of-range apartment number or a key
    that is not a plain decimal ("05", "+5") are skipped. A document that is
    not an object raises DataUnavailable.
    """
    result = validate_dataset(raw)
    if not result.is_valid:
        raise DataUnavailable("; ".join(result.errors))
    for w in result.warnings:
        logger.warning(w)

    occupancy: OccupancyMap = {}
    for floor, units in raw.items():
        if not is_valid_floor(floor) or not isinstance(units, dict):
            continue
        for key, record in units.items():
            number = parse_unit_number(key)
            if number is None or number in occupancy.get(floor, {}):
                continue
            occupancy.setdefault(floor, {})[number] = parse_record(record)
    return occupancy


def load_dataset(source: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> OccupancyMap:
    return parse_dataset(fetch_dataset(source, timeout=timeout))
