"""Tests for host message encoding and the launch-data gate."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
from urllib.parse import urlencode

import pytest

from data.auth import get_user, is_authorized, launch_data
from engine.host import (
    RecordingChannel, build_deep_link, encode_callback_data, selection_popup,
)
from engine.occupancy_store import OccupancyStore
from engine.selection import SelectionController


SCENARIO_DATA = {"3": {"5": {"owner": "Ivanov", "area": "54.2", "block": "B", "client_id": "c9"}}}


def make_selected(floor, number):
    controller = SelectionController(OccupancyStore.from_dataset(SCENARIO_DATA))
    selection = controller.select(floor, number)
    return controller.build_action_payload(), selection


def make_init_data(user=None, **extra):
    params = dict(extra)
    if user is not None:
        params["user"] = json.dumps(user)
    return urlencode(params)


class TestCallbackEncoding:
    def test_receipt(self):
        message, selection = make_selected("3", 5)
        assert encode_callback_data(message, selection) == "apt_receipt_3_5_54.2_B_c9"

    def test_contract_uses_free_defaults(self):
        message, selection = make_selected("1", 2)
        assert encode_callback_data(message, selection) == "apt_contract_1_2_40.71_A_none"

    def test_deep_link(self):
        message, selection = make_selected("3", 5)
        link = build_deep_link(message, selection, bot_username="examplebot")
        assert link == "https://t.me/examplebot?start=receipt_3_5_54.2_B_c9"


class TestSelectionPopup:
    def test_occupied(self):
        _, selection = make_selected("3", 5)
        title, body = selection_popup(selection)
        assert title == "Apartment 3-5"
        assert "Owner: Ivanov" in body
        assert "54.2 m²" in body

    def test_free(self):
        _, selection = make_selected("1", 2)
        title, body = selection_popup(selection)
        assert title == "Apartment 1-2"
        assert "Status: Free" in body


class TestRecordingChannel:
    def test_records_sends(self):
        message, selection = make_selected("1", 2)
        channel = RecordingChannel()
        channel.send(message, selection)
        channel.notify(*selection_popup(selection))
        assert channel.sent == [(message, "apt_contract_1_2_40.71_A_none")]
        assert channel.notifications[0][0] == "Apartment 1-2"


class TestAuthorization:
    def test_valid_user(self):
        init_data = make_init_data({"id": 1001, "first_name": "Anna"}, auth_date="1700000000")
        assert is_authorized(init_data)
        assert get_user(init_data)["id"] == 1001

    def test_missing_init_data(self):
        assert not is_authorized("")

    def test_missing_user(self):
        assert not is_authorized(make_init_data(auth_date="1700000000"))

    def test_user_without_id(self):
        assert not is_authorized(make_init_data({"first_name": "Anna"}))

    def test_malformed_user(self):
        assert not is_authorized(urlencode({"user": "{broken"}))

    def test_forwarded_init_data(self):
        init_data = make_init_data({"id": 1001}, auth_date="1700000000")
        assert launch_data(init_data) == init_data
        assert is_authorized(launch_data(init_data))

    def test_forwarded_fragment(self):
        init_data = make_init_data({"id": 1001}, auth_date="1700000000")
        fragment = "#" + urlencode({"tgWebAppData": init_data, "tgWebAppVersion": "7.0"})
        assert launch_data(fragment) == init_data
        assert is_authorized(launch_data(fragment))

    def test_nothing_forwarded(self):
        assert launch_data("") == ""
        assert not is_authorized(launch_data(None))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
