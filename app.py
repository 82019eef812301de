"""
Untertitel-Tool – Streamlit App
- Eingabe: Transkript/Untertitel (beliebige Sprache)
- Zielsprache wird heuristisch vorgewählt (Persisch/Englisch/Deutsch), Nutzer kann überschreiben
- CEFR-Niveau (B1/B2/C1) und Textlänge (100/300/600 Wörter)
- Gemini schreibt den Text um und fasst ihn als Markdown zusammen
- Ergebnis: kopieren, drucken/PDF, als Markdown herunterladen, zurücksetzen
- UI auf Persisch (RTL), Dark Mode umschaltbar

Install:
  pip install -e .

Run:
  API_KEY=... python -m streamlit run app.py
"""

import time

import streamlit as st

from src.untertitel_tool.config import DETECT_DEBOUNCE_SECONDS, configure_logging
from src.untertitel_tool.llm.gemini_client import generate_summary
from src.untertitel_tool.ui.components import (
    LEVEL_OPTIONS,
    WORD_COUNT_OPTIONS,
    inject_theme,
    language_options,
    render_markdown,
    result_actions,
    selection_radio,
)
from src.untertitel_tool.ui.state import (
    apply_pending_selection,
    ensure_defaults_exist,
    needs_polling,
    on_text_change,
    request_generation,
    reset_output,
    run_generation,
    run_pending_detection,
    toggle_dark_mode,
)

configure_logging()

st.set_page_config(page_title="بازنویسی هوشمند زیرنویس", page_icon="✨", layout="centered")

state = st.session_state
ensure_defaults_exist(state, prefers_dark=st.get_option("theme.base") == "dark")
apply_pending_selection(state)
inject_theme(state["dark_mode"])


# =========================
# Timer (Debounce der Spracherkennung)
# =========================
def poll_timers() -> None:
    if run_pending_detection(state, time.monotonic()):
        st.rerun()


st.fragment(poll_timers, run_every=DETECT_DEBOUNCE_SECONDS if needs_polling(state) else None)()

# =========================
# Header
# =========================
head_col, toggle_col = st.columns([9, 1])
with head_col:
    st.title("✨ بازنویسی هوشمند زیرنویس")
    st.caption(
        "متن زیرنویس یوتیوب را وارد کنید تا با کمک هوش مصنوعی، متنی روان و مناسب سطح زبان شما تولید شود."
    )
with toggle_col:
    st.button(
        "☀️" if state["dark_mode"] else "🌙",
        on_click=toggle_dark_mode,
        args=(state,),
        help="حالت روشن" if state["dark_mode"] else "حالت تاریک",
    )

busy = state["is_loading"]

# =========================
# Eingabe
# =========================
with st.container(border=True):
    st.subheader("📄 متن ورودی")
    st.text_area(
        "متن ورودی",
        key="input_text",
        on_change=on_text_change,
        args=(state,),
        placeholder="متن زیرنویس خود را اینجا پیست کنید...",
        height=192,
        label_visibility="collapsed",
    )

# =========================
# Konfiguration
# =========================
with st.container(border=True):
    st.subheader("📖 تنظیمات خروجی")

    selection_radio("زبان مقصد", language_options(state["detected_language"]), key="language", disabled=busy)
    selection_radio("سطح زبان (CEFR)", LEVEL_OPTIONS, key="level", disabled=busy)
    selection_radio("حجم متن", WORD_COUNT_OPTIONS, key="word_count", disabled=busy)

    if state["error"]:
        st.error(state["error"], icon="⚠️")

    st.button(
        "در حال پردازش..." if busy else "✨ ایجاد متن هوشمند",
        type="primary",
        use_container_width=True,
        disabled=busy or not state["input_text"],
        on_click=request_generation,
        args=(state,),
    )

if busy:
    with st.spinner("در حال پردازش..."):
        run_generation(state, generate_summary)
    st.rerun()

# =========================
# Ergebnis
# =========================
if state["output"]:
    with st.container(border=True):
        title_col, reset_col = st.columns([8, 1])
        with title_col:
            st.subheader("✅ متن تولید شده")
        with reset_col:
            st.button("↺", help="شروع مجدد", on_click=reset_output, args=(state,))

        # Drucken/Kopieren laufen im Browser, damit die Klicks als Nutzeraktion zählen
        result_actions(state["output"], state["dark_mode"])

        render_markdown(state["output"], state["language"])

        st.download_button(
            "⬇️ دانلود Markdown",
            data=state["output"],
            file_name="summary.md",
            mime="text/markdown",
        )
