"""PassMeter -- Streamlit web interface."""

import streamlit as st

from passmeter import DEGRADED_MESSAGE, evaluate, load_blacklist
from passmeter.config import configure_logging

STRENGTH_COLORS = ["#ef4444", "#f97316", "#eab308", "#86efac", "#22c55e"]
EMPTY_BAR = "#e5e7eb"
MET_COLOR = "#16a34a"
UNMET_COLOR = "#4b5563"
WARN_COLOR = "#dc2626"

CRITERIA_TEXT = {
    "length": "At least 8 characters",
    "uppercase": "An uppercase letter (A-Z)",
    "lowercase": "A lowercase letter (a-z)",
    "number": "A number (0-9)",
    "special": "A special character (!@#$...)",
}

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_GAUGE = _LUCIDE.format(s=32, paths=(
    '<path d="m12 14 4-4"/><path d="M3.34 19a10 10 0 1 1 17.32 0"/>'
))


@st.cache_resource
def _blacklist() -> dict:
    configure_logging()
    return load_blacklist()


def _bars_html(report: dict) -> str:
    filled = report["score"] if report["password_length"] else 0
    color = STRENGTH_COLORS[filled - 1] if filled else EMPTY_BAR
    cells = "".join(
        f'<div style="flex:1;height:8px;border-radius:4px;'
        f'background:{color if i < filled else EMPTY_BAR}"></div>'
        for i in range(len(STRENGTH_COLORS))
    )
    return f'<div style="display:flex;gap:6px;margin:4px 0 12px">{cells}</div>'


def _checklist_html(report: dict) -> str:
    items = "".join(
        f'<li style="color:{MET_COLOR if ok else UNMET_COLOR}">{CRITERIA_TEXT[name]}</li>'
        for name, ok in report["criteria"].items()
    )
    return f'<ul style="list-style:none;padding-left:0">{items}</ul>'


# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Strength Checker",
    page_icon="\U0001f512",
    layout="centered",
)

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_GAUGE} Password Strength Checker</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Live feedback based on length, character types, entropy and a list "
    "of common passwords.  Your password never leaves this page."
)

loaded = _blacklist()
if loaded["degraded"]:
    st.error(DEGRADED_MESSAGE)

# ── Password input ────────────────────────────────────────────────────────

show = st.toggle("Show password", value=False)
password = st.text_input(
    "Password",
    type="default" if show else "password",
    placeholder="Enter a password…",
    autocomplete="off",
)

report = evaluate(password, loaded["passwords"])

st.markdown(_bars_html(report), unsafe_allow_html=True)

text_color = WARN_COLOR if report["blacklisted"] else "inherit"
st.markdown(
    f"<span style='color:{text_color}'>{report['message']}</span>",
    unsafe_allow_html=True,
)
st.markdown(_checklist_html(report), unsafe_allow_html=True)

# ── Copy ──────────────────────────────────────────────────────────────────

if st.button("Copy"):
    if not password:
        st.error("Empty!")
    else:
        st.code(password, language=None)
        st.caption("Use the copy icon on the right of the box.")
