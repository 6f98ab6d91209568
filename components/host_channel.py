"""Streamlit stand-in for the messenger host: toasts for popups, a deep-link button for sends."""

import logging

import streamlit as st

from engine.host import HostChannel, build_deep_link, encode_callback_data
from models.selection import ActionMessage, Selection

logger = logging.getLogger(__name__)


class StreamlitHostChannel(HostChannel):
    def send(self, message: ActionMessage, selection: Selection):
        callback = encode_callback_data(message, selection)
        link = build_deep_link(message, selection)
        logger.info("Callback %s, deep link %s (created %s)", callback, link, message.created_at.isoformat())
        st.session_state["outbox"] = {
            "payload": message.to_dict(),
            "callback": callback,
            "deep_link": link,
        }

    def notify(self, title: str, text: str):
        st.toast(f"**{title}**\n\n{text}")


def render_outbox():
    """Show the last sent action with a button opening the bot."""
    outbox = st.session_state.get("outbox")
    if not outbox:
        return
    st.success("Request ready for the bot")
    st.json(outbox["payload"])
    st.code(outbox["callback"], language=None)
    st.link_button("Open bot", outbox["deep_link"], use_container_width=True)
