import logging

import streamlit as st

from components.gallery import show_rover_information
from components.page import Page, render
from services.config import config
from services.proxy_client import proxy_is_up
from services.rovers import DEFAULT_SOL
from services.store import Store

# ---------------------------
# Logging
# ---------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
)
logger = logging.getLogger("mars_dashboard")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Mars Dashboard",
    page_icon="🔴",
    layout="wide",
    initial_sidebar_state="expanded",
)

css_path = config.public_dir / "styles.css"
if css_path.exists():
    st.markdown(f"<style>{css_path.read_text(encoding='utf-8')}</style>", unsafe_allow_html=True)


# ---------------------------
# Session bootstrap
# ---------------------------
def bootstrap() -> None:
    """One page model and store per browser session; the first render is the load event."""
    page = Page()
    store = Store(on_change=lambda state: render(page, state))
    render(page, store.state)
    st.session_state.page = page
    st.session_state.store = store


if "page" not in st.session_state:
    bootstrap()

page: Page = st.session_state.page
store: Store = st.session_state.store

# ---------------------------
# Sidebar: sol, status
# ---------------------------
st.sidebar.title("⚙️ Controls")
sol = st.sidebar.number_input(
    "Sol",
    min_value=0,
    value=DEFAULT_SOL,
    key="sol",
    step=1,
    help="Martian solar day of the mission to show photos for.",
)

with st.sidebar.expander("🔐 Status"):
    st.write("Proxy:", "Reachable ✅" if proxy_is_up() else "Not reachable ⚠️")

# ---------------------------
# Shell + rover buttons
# ---------------------------
st.markdown(page.shell, unsafe_allow_html=True)

clicked = None
cols = st.columns(max(len(page.rover_buttons), 1))
for col, rover in zip(cols, page.rover_buttons):
    if col.button(rover, key=f"rover_{rover}", width='stretch'):
        clicked = rover

# ---------------------------
# Appended blocks (loading indicator, gallery)
# ---------------------------
slot = st.empty()


def paint(p: Page) -> None:
    slot.markdown(p.body_html(), unsafe_allow_html=True)


page.on_change = paint

if clicked:
    try:
        show_rover_information(page, store, clicked, int(sol))
    except Exception as e:
        logger.exception("Gallery for %s failed", clicked)
        st.error(f"Render failed: {e}")

paint(page)
