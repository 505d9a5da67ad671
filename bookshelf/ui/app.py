"""Streamlit front end for the Bookshelf reading tracker."""

import asyncio
import logging

import streamlit as st

from bookshelf.config import load_config
from bookshelf.display.surfaces import ShelfPage
from bookshelf.pipeline.loader import ShelfLoader
from bookshelf.updates import FileVersionUpdateChannel, RefreshOutcome, refresh_now

CONFIG_PATH = "config.yaml"
SESSION_KEYS = ("config", "page", "loader", "channel")


def _start_session() -> None:
    """Build the page and its loader, then run the initial load."""
    config = load_config(CONFIG_PATH)
    logging.basicConfig(
        level=config.app.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    page = ShelfPage.from_shell(title=config.app.name)
    loader = ShelfLoader(config, page)

    st.session_state.config = config
    st.session_state.page = page
    st.session_state.loader = loader
    st.session_state.channel = FileVersionUpdateChannel(CONFIG_PATH)

    asyncio.run(loader.load())


def _reset_session() -> None:
    for key in SESSION_KEYS:
        st.session_state.pop(key, None)


def main() -> None:
    # The page survives reruns so a failed refresh keeps the last cards
    if "page" not in st.session_state:
        _start_session()

    config = st.session_state.config
    page: ShelfPage = st.session_state.page
    loader: ShelfLoader = st.session_state.loader
    channel: FileVersionUpdateChannel = st.session_state.channel

    st.set_page_config(page_title=config.app.name, page_icon="📚", layout="wide")

    if channel.has_pending_update():
        st.info("Dostępna jest nowa wersja. Kliknij „Odśwież”, aby ją wczytać.")

    if st.button("Odśwież", type="primary"):
        outcome = asyncio.run(refresh_now(loader, channel, reload=_reset_session))
        if outcome is RefreshOutcome.RELOADED:
            st.rerun()

    st.markdown(page.render_body(), unsafe_allow_html=True)


main()
