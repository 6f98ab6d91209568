"""Host trust gate: checks the launch data handed over by the messenger host."""

import json
import logging
from typing import Optional
from urllib.parse import parse_qs

from config.defaults import INIT_DATA_PARAM

logger = logging.getLogger(__name__)


def parse_init_data(init_data: str) -> dict:
    """Split the URL-encoded launch data into a flat dict of first values."""
    return {k: v[0] for k, v in parse_qs(init_data or "", keep_blank_values=True).items()}


def get_user(init_data: str) -> Optional[dict]:
    raw_user = parse_init_data(init_data).get("user")
    if not raw_user:
        return None
    try:
        user = json.loads(raw_user)
    except json.JSONDecodeError:
        return None
    return user if isinstance(user, dict) else None


def is_authorized(init_data: str) -> bool:
    """True when launch data is present and identifies a user."""
    if not init_data:
        logger.error("No launch data from host")
        return False

    user = get_user(init_data)
    if not user or "id" not in user:
        logger.error("Launch data carries no user")
        return False

    logger.info("Host check passed for user %s", user["id"])
    return True


def launch_data(value: str) -> str:
    """Init data from the forwarded query parameter.

    Accepts the bare initData string or the whole URL fragment
    ("tgWebAppData=...&tgWebAppVersion=...") copied over by the launcher.
    """
    value = (value or "").lstrip("#")
    if value.startswith(INIT_DATA_PARAM + "="):
        return parse_init_data(value).get(INIT_DATA_PARAM, "")
    return value
