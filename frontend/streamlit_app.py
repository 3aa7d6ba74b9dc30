"""
Streamlit frontend for the Student Directory.

    streamlit run frontend/streamlit_app.py

Each browser session fetches the 50-student batch once, then searches and
pages through it locally. While the fetch is outstanding the grid shows
placeholder cards; if it fails the grid is replaced by a single error message
and the user has to reload the page.

The edit / flag / delete buttons on each card are placeholders with no
handler attached.
"""

import locale
import logging
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on sys.path when launched via `streamlit run`
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

from directory.models import Student
from directory.navigation import MENU_ITEMS, NavState
from directory.state import DirectoryState
from etl.pipeline import run as load_students
from etl.randomuser import LoadError
from frontend import ui

COLUMNS = 4
PLACEHOLDER_CARDS = 12

log = logging.getLogger("frontend")
logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(message)s")

try:
    locale.setlocale(locale.LC_TIME, "")
except locale.Error as exc:
    log.warning("Could not apply host locale for dates: %s", exc)

st.set_page_config(page_title="Student Directory", layout="wide")
st.markdown(ui.CSS, unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Callbacks (run before the rerun they trigger)
# ---------------------------------------------------------------------------

def _update_directory(transition) -> None:
    st.session_state.directory = transition(st.session_state.directory)


def _on_search() -> None:
    query = st.session_state.search_query
    _update_directory(lambda d: d.with_query(query))


def _on_select(student_id: str) -> None:
    _update_directory(lambda d: d.select(student_id))
    st.session_state.open_dialog = True


def _toggle_menu() -> None:
    st.session_state.nav = st.session_state.nav.toggle_menu()


def _toggle_submenu(name: str) -> None:
    st.session_state.nav = st.session_state.nav.toggle_submenu(name)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def render_navbar() -> None:
    st.markdown(ui.navbar_html(MENU_ITEMS), unsafe_allow_html=True)

    nav: NavState = st.session_state.setdefault("nav", NavState())
    with st.container(key="mobile_nav"):
        st.button("✕ Close" if nav.mobile_open else "☰ Menu", key="nav_toggle", on_click=_toggle_menu)
        if not nav.mobile_open:
            return
        for item in MENU_ITEMS:
            st.button(
                ui.mobile_label(item, nav),
                key=f"nav_{item.name}",
                on_click=_toggle_submenu,
                args=(item.name,),
                use_container_width=True,
            )
            submenu = ui.mobile_submenu_html(item, nav)
            if submenu:
                st.markdown(submenu, unsafe_allow_html=True)


def render_placeholders() -> None:
    for _ in range(PLACEHOLDER_CARDS // COLUMNS):
        for col in st.columns(COLUMNS):
            col.markdown(ui.skeleton_card_html(), unsafe_allow_html=True)


def render_controls(directory: DirectoryState) -> None:
    search_col, _, pager_col = st.columns([2, 1, 1])
    search_col.text_input(
        "Search",
        key="search_query",
        placeholder="Search students...",
        on_change=_on_search,
        label_visibility="collapsed",
    )

    page = directory.visible
    prev_col, label_col, next_col = pager_col.columns([1, 2, 1])
    prev_col.button(
        "‹", key="prev_page", disabled=not page.has_prev(),
        on_click=_update_directory, args=(DirectoryState.prev_page,),
    )
    label_col.markdown(
        f'<div class="sd-pager">{ui.pager_label(page.page, page.pages)}</div>',
        unsafe_allow_html=True,
    )
    next_col.button(
        "›", key="next_page", disabled=not page.has_next(),
        on_click=_update_directory, args=(DirectoryState.next_page,),
    )


def render_card(student: Student) -> None:
    st.markdown(ui.card_html(student), unsafe_allow_html=True)

    # Inert: no on_click, clicking only triggers a plain rerun
    edit_col, flag_col, delete_col = st.columns(3)
    edit_col.button("✏️", key=f"edit_{student.id}", help="Edit")
    flag_col.button("🚩", key=f"flag_{student.id}", help="Flag")
    delete_col.button("🗑️", key=f"delete_{student.id}", help="Delete")

    st.button(
        "Show More",
        key=f"more_{student.id}",
        on_click=_on_select,
        args=(student.id,),
        type="primary",
        use_container_width=True,
    )


def render_grid(directory: DirectoryState) -> None:
    page = directory.visible
    if not page.items:
        st.markdown(ui.empty_html(), unsafe_allow_html=True)
        return

    for row_start in range(0, len(page.items), COLUMNS):
        cols = st.columns(COLUMNS)
        for col, student in zip(cols, page.items[row_start:row_start + COLUMNS]):
            with col:
                render_card(student)


@st.dialog("Student Details")
def show_details(student: Student) -> None:
    st.subheader(student.name)
    st.markdown(ui.details_html(student), unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

render_navbar()
st.markdown(ui.title_html(), unsafe_allow_html=True)

if "directory" not in st.session_state and "load_error" not in st.session_state:
    placeholder = st.empty()
    with placeholder.container():
        render_placeholders()
    try:
        st.session_state.directory = DirectoryState.loaded(load_students())
    except LoadError as exc:
        st.session_state.load_error = str(exc)
    placeholder.empty()

if "load_error" in st.session_state:
    st.markdown(ui.error_html(st.session_state.load_error), unsafe_allow_html=True)
    st.stop()

directory: DirectoryState = st.session_state.directory
render_controls(directory)
render_grid(directory)

if st.session_state.pop("open_dialog", False) and directory.selected is not None:
    show_details(directory.selected)
