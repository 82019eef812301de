"""
Wiederverwendbare Streamlit-Bausteine der Seite.

- Auswahlgruppen für Sprache, Niveau und Textlänge
- Theme (RTL, hell/dunkel, Druckansicht)
- Ergebnisaktionen im Browser: Zwischenablage und Druckdialog
"""

import json
from string import Template

import streamlit as st
import streamlit.components.v1 as components

from src.untertitel_tool.config import (
    COPY_FEEDBACK_SECONDS,
    LABEL_COPIED,
    LABEL_COPY,
    LABEL_COPY_FAILED,
    LABEL_PRINT,
)
from src.untertitel_tool.models import Language, ProficiencyLevel, SelectOption, WordCount
from src.untertitel_tool.ui.state import language_label

LEVEL_OPTIONS = [
    SelectOption(ProficiencyLevel.B1, "B1", "متوسط"),
    SelectOption(ProficiencyLevel.B2, "B2", "متوسط رو به بالا"),
    SelectOption(ProficiencyLevel.C1, "C1", "پیشرفته"),
]

WORD_COUNT_OPTIONS = [
    SelectOption(WordCount.SHORT, "۱۰۰ کلمه", "خلاصه کوتاه"),
    SelectOption(WordCount.MEDIUM, "۳۰۰ کلمه", "استاندارد"),
    SelectOption(WordCount.LONG, "۶۰۰ کلمه", "جامع"),
]


def language_options(detected: Language | None) -> list[SelectOption]:
    return [SelectOption(lang, language_label(lang, detected)) for lang in Language]


def selection_radio(title: str, options: list[SelectOption], key: str, disabled: bool = False) -> None:
    """
    Horizontale Optionsgruppe mit Unterzeile je Option;
    der gewählte Wert liegt in st.session_state[key].
    """
    labels = {o.value: o.label for o in options}
    st.radio(
        title,
        [o.value for o in options],
        key=key,
        horizontal=True,
        disabled=disabled,
        format_func=lambda v: labels[v],
        captions=[o.sub_label or "" for o in options],
    )


_LIGHT = {"bg": "#f8fafc", "card": "#ffffff", "text": "#1e293b", "muted": "#64748b", "border": "#e2e8f0"}
_DARK = {"bg": "#0f172a", "card": "#1e293b", "text": "#f1f5f9", "muted": "#94a3b8", "border": "#334155"}


def inject_theme(dark: bool) -> None:
    """
    Setzt RTL-Layout und Farbschema; im Druck bleibt nur der Ergebnistext.
    """
    c = _DARK if dark else _LIGHT
    st.markdown(
        f"""
<style>
.stApp {{ direction: rtl; background-color: {c["bg"]}; color: {c["text"]}; }}
.stApp p, .stApp label, .stApp h1, .stApp h2, .stApp h3, .stApp li {{ color: {c["text"]}; }}
.stApp .stCaption, .stApp small {{ color: {c["muted"]}; }}
.stApp textarea {{ background-color: {c["card"]}; color: {c["text"]}; }}
.st-key-result_rtl {{ direction: rtl; text-align: right; }}
.st-key-result_ltr {{ direction: ltr; text-align: left; }}
@media print {{
  header, footer, [data-testid="stSidebar"], .no-print, .stButton, .stDownloadButton,
  [data-testid="stTextArea"], [data-testid="stRadio"], iframe {{ display: none !important; }}
  .stApp {{ background: #ffffff !important; }}
  .stApp * {{ color: #000000 !important; }}
}}
</style>
""",
        unsafe_allow_html=True,
    )


def render_markdown(text: str, language: Language) -> None:
    """
    Rendert den Modell-Output als Markdown; rohes HTML wird nicht ausgeführt.
    Die Schreibrichtung kommt aus der CSS-Regel des Container-Keys.
    """
    direction = "rtl" if language == Language.PERSIAN else "ltr"
    with st.container(key=f"result_{direction}"):
        st.markdown(text)


_ACTIONS_TEMPLATE = Template("""
<style>
body { margin: 0; direction: rtl; font-family: sans-serif; }
button {
  padding: 6px 12px; margin-left: 6px; border-radius: 8px; cursor: pointer; font-size: 14px;
  border: 1px solid $border; background: $card; color: $text;
}
</style>
<button id="print-btn">$print_label</button>
<button id="copy-btn">$copy_label</button>
<script>
const text = $payload;
const copyBtn = document.getElementById("copy-btn");

function showCopyState(label) {
  copyBtn.textContent = label;
  setTimeout(() => { copyBtn.textContent = $copy_label_js; }, $feedback_ms);
}

function legacyCopy() {
  const area = document.createElement("textarea");
  area.value = text;
  document.body.appendChild(area);
  area.select();
  let ok = false;
  try { ok = document.execCommand("copy"); } catch (e) { ok = false; }
  area.remove();
  return ok;
}

copyBtn.addEventListener("click", () => {
  const onFailure = () => showCopyState(legacyCopy() ? $copied_label_js : $failed_label_js);
  if (navigator.clipboard && navigator.clipboard.writeText) {
    navigator.clipboard.writeText(text).then(() => showCopyState($copied_label_js), onFailure);
  } else {
    onFailure();
  }
});

document.getElementById("print-btn").addEventListener("click", () => window.parent.print());
</script>
""")


def _js_string(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


def result_actions_html(text: str, dark: bool = False) -> str:
    """
    HTML für Drucken- und Kopieren-Button.

    Beide Klicks passieren im selben iframe, das auch schreibt bzw. druckt,
    damit die Clipboard-API die Nutzeraktion sieht. Der Kopiert-Hinweis
    springt nach COPY_FEEDBACK_SECONDS zurück; scheitert das Kopieren,
    wird das angezeigt.
    """
    c = _DARK if dark else _LIGHT
    return _ACTIONS_TEMPLATE.substitute(
        border=c["border"],
        card=c["card"],
        text=c["text"],
        print_label=LABEL_PRINT,
        copy_label=LABEL_COPY,
        payload=_js_string(text),
        copy_label_js=_js_string(LABEL_COPY),
        copied_label_js=_js_string(LABEL_COPIED),
        failed_label_js=_js_string(LABEL_COPY_FAILED),
        feedback_ms=int(COPY_FEEDBACK_SECONDS * 1000),
    )


def result_actions(text: str, dark: bool = False) -> None:
    components.html(result_actions_html(text, dark), height=48)
