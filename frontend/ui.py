"""
HTML/CSS building blocks for the Streamlit frontend.

Everything here returns strings for st.markdown(..., unsafe_allow_html=True),
so rendering can be checked without a running Streamlit server. Field values
come from a third-party API and are escaped before interpolation.
"""

from html import escape

from directory.models import Student
from directory.navigation import BRAND, MenuItem, NavState

NAVY = "#004493"
NAVY_DARK = "#002E62"
NAVY_DARKEST = "#001731"
GRADIENT = f"linear-gradient(to right, {NAVY}, {NAVY_DARK}, {NAVY_DARKEST})"

EMPTY_MESSAGE = "No students found matching your search criteria."

# Wide/narrow switch at 768px: the hover navbar and the mobile menu container
# (keyed "mobile_nav") are never visible together.
CSS = f"""
<style>
.sd-nav {{
    background: {GRADIENT};
    padding: 1rem 1.5rem;
    border-radius: 8px;
    display: flex;
    align-items: center;
    justify-content: space-between;
    box-shadow: 0 4px 10px rgba(0,0,0,.25);
}}
.sd-brand {{ color: #fff; font-size: 1.5rem; font-weight: 700; text-decoration: none; }}
.sd-menu {{ display: flex; gap: 1.25rem; margin-right: 3rem; }}
.sd-item {{ position: relative; }}
.sd-item > a {{ color: #fff; text-decoration: none; }}
.sd-item > a:hover {{ color: #bfdbfe; }}
.sd-submenu {{
    position: absolute; left: 0; top: 100%; margin-top: .5rem; width: 12rem;
    background: #fff; border-radius: 6px; box-shadow: 0 8px 20px rgba(0,0,0,.2);
    padding: .25rem 0; opacity: 0; visibility: hidden;
    transition: all .2s; z-index: 10;
}}
.sd-item:hover .sd-submenu {{ opacity: 1; visibility: visible; }}
.sd-submenu a {{ display: block; padding: .5rem 1rem; font-size: .875rem; color: #374151; text-decoration: none; }}
.sd-submenu a:hover {{ background: #dbeafe; }}
.sd-title {{ color: {NAVY}; text-align: center; font-size: 2.25rem; font-weight: 700; margin: 1.5rem 0; }}
.sd-card {{ border-radius: 10px; overflow: hidden; background: #fff; box-shadow: 0 2px 8px rgba(0,0,0,.1); margin-bottom: .5rem; }}
.sd-card:hover {{ box-shadow: 0 12px 28px rgba(0,0,0,.25); }}
.sd-card-head {{ background: {GRADIENT}; color: #fff; padding: 1rem; display: flex; align-items: center; gap: 1rem; }}
.sd-card-head .sd-name {{ font-size: 1.1rem; font-weight: 600; white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }}
.sd-card-head .sd-major {{ color: #e5e7eb; font-size: .9rem; }}
.sd-card-body {{ padding: 1rem; font-size: .875rem; }}
.sd-avatar {{
    width: 3rem; height: 3rem; border-radius: 50%; background: #e5e7eb; color: {NAVY_DARK};
    display: flex; align-items: center; justify-content: center; font-weight: 600;
    overflow: hidden; flex-shrink: 0; position: relative;
}}
.sd-avatar img {{ position: absolute; inset: 0; width: 100%; height: 100%; object-fit: cover; }}
.sd-avatar.sd-large {{ width: 6rem; height: 6rem; margin: 0 auto; }}
.sd-skeleton {{ background: #e5e7eb; border-radius: 4px; height: 1rem; margin: .5rem 0; animation: sd-pulse 1.5s infinite; }}
@keyframes sd-pulse {{ 50% {{ opacity: .5; }} }}
.sd-details {{ display: grid; grid-template-columns: 5rem 1fr; gap: .75rem 1rem; align-items: center; }}
.sd-badge {{ background: #fff; color: {NAVY_DARK}; border: 1px solid {NAVY_DARK}; border-radius: 999px; padding: .1rem .6rem; font-size: .75rem; font-weight: 600; text-align: center; }}
.sd-error {{ color: #ef4444; text-align: center; }}
.sd-empty {{ color: #6b7280; text-align: center; margin-top: 2rem; }}
.sd-pager {{ text-align: center; font-size: .875rem; font-weight: 500; padding-top: .5rem; }}
@media (max-width: 767px) {{ .sd-menu {{ display: none; }} }}
@media (min-width: 768px) {{ .st-key-mobile_nav {{ display: none; }} }}
</style>
"""


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

def _link(item: MenuItem) -> str:
    return f'<a href="{escape(item.href)}">{escape(item.name)}</a>'


def navbar_html(items: tuple[MenuItem, ...]) -> str:
    """Wide-viewport navbar. Submenus open on hover via CSS only."""
    parts = []
    for item in items:
        label = escape(item.name) + (" ▾" if item.has_submenu else "")
        html = f'<div class="sd-item"><a href="{escape(item.href)}">{label}</a>'
        if item.has_submenu:
            html += '<div class="sd-submenu">' + "".join(_link(s) for s in item.submenu) + "</div>"
        parts.append(html + "</div>")

    return (
        '<nav class="sd-nav">'
        f'<a class="sd-brand" href="#">{escape(BRAND)}</a>'
        f'<div class="sd-menu">{"".join(parts)}</div>'
        "</nav>"
    )


def mobile_submenu_html(item: MenuItem, nav: NavState) -> str:
    """Links of an expanded mobile submenu; empty when collapsed."""
    if not nav.is_open(item):
        return ""
    links = "".join(
        f'<a href="{escape(s.href)}" style="display:block;padding:.5rem 2rem;'
        f'color:{NAVY_DARK};font-weight:700;text-align:center">{escape(s.name)}</a>'
        for s in item.submenu
    )
    return f'<div style="background:#fff">{links}</div>'


def mobile_label(item: MenuItem, nav: NavState) -> str:
    if not item.has_submenu:
        return item.name
    return f"{item.name} {'▴' if nav.is_open(item) else '▾'}"


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------

def title_html(text: str = "Student Directory") -> str:
    return f'<h1 class="sd-title">{escape(text)}</h1>'


def avatar_html(student: Student, large: bool = False) -> str:
    """Photo layered over the initials; a missing image leaves the initials visible."""
    cls = "sd-avatar sd-large" if large else "sd-avatar"
    return (
        f'<div class="{cls}" title="{escape(student.name)}">'
        f"<span>{escape(student.initials)}</span>"
        f'<img src="{escape(student.picture)}" alt="" onerror="this.remove()">'
        "</div>"
    )


def card_html(student: Student) -> str:
    return (
        '<div class="sd-card">'
        '<div class="sd-card-head">'
        f"{avatar_html(student)}"
        "<div style=\"overflow:hidden\">"
        f'<div class="sd-name">{escape(student.name)}</div>'
        f'<div class="sd-major">{escape(student.major)}</div>'
        "</div></div>"
        '<div class="sd-card-body">'
        f"<p>🎓 {escape(student.major)}</p>"
        f"<p>GPA: {escape(student.gpa)}</p>"
        "</div></div>"
    )


def skeleton_card_html() -> str:
    return (
        '<div class="sd-card"><div class="sd-card-body">'
        '<div class="sd-skeleton" style="width:3rem;height:3rem;border-radius:50%"></div>'
        '<div class="sd-skeleton" style="width:75%"></div>'
        '<div class="sd-skeleton" style="width:50%"></div>'
        '<div class="sd-skeleton" style="width:100%"></div>'
        '<div class="sd-skeleton" style="width:80%"></div>'
        '<div class="sd-skeleton" style="width:5rem;height:2rem"></div>'
        "</div></div>"
    )


def details_html(student: Student) -> str:
    """Body of the "Student Details" dialog."""
    rows = [
        ('<span class="sd-badge">Major</span>', student.major),
        ('<span class="sd-badge">GPA</span>', student.gpa),
        ("✉️", student.email),
        ("📞", student.phone),
        ("📍", student.location),
        ("📅", student.dob),
    ]
    grid = "".join(f"<div>{label}</div><div>{escape(value)}</div>" for label, value in rows)
    return f'{avatar_html(student, large=True)}<div class="sd-details" style="margin-top:1rem">{grid}</div>'


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

def error_html(message: str) -> str:
    return f'<p class="sd-error">{escape(message)}</p>'


def empty_html() -> str:
    return f'<p class="sd-empty">{EMPTY_MESSAGE}</p>'


def pager_label(page: int, pages: int) -> str:
    return f"Page {page} of {pages}"
