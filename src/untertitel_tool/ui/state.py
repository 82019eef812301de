"""
Session-State der Seite.

Alle Funktionen arbeiten auf einem Mapping: in der App ist das
st.session_state, in Tests ein normales dict. Dadurch bleibt app.py reine
Darstellung und die Zustandsübergänge sind ohne Streamlit testbar.
"""

import logging
from collections.abc import Callable, MutableMapping

from src.untertitel_tool.config import (
    DEFAULT_LABEL_TEMPLATE,
    LANGUAGE_LABELS,
    MSG_EMPTY_INPUT,
    MSG_GENERIC_ERROR,
)
from src.untertitel_tool.llm.gemini_client import GenerationError
from src.untertitel_tool.models import GenerationRequest, Language, ProficiencyLevel, WordCount
from src.untertitel_tool.nlp.language_detection import detect_language
from src.untertitel_tool.utils import Debouncer

logger = logging.getLogger(__name__)

State = MutableMapping


def ensure_defaults_exist(state: State, prefers_dark: bool = False) -> None:
    state.setdefault("input_text", "")
    state.setdefault("language", Language.PERSIAN)
    state.setdefault("detected_language", None)
    state.setdefault("level", ProficiencyLevel.B2)
    state.setdefault("word_count", WordCount.MEDIUM)

    state.setdefault("output", "")
    state.setdefault("error", None)
    state.setdefault("is_loading", False)
    state.setdefault("dark_mode", prefers_dark)

    if "detect_debouncer" not in state:
        state["detect_debouncer"] = Debouncer()


# =========================
# Spracherkennung
# =========================
def on_text_change(state: State, now: float | None = None) -> None:
    state["detect_debouncer"].submit(state.get("input_text", ""), now)


def run_pending_detection(state: State, now: float | None = None) -> bool:
    """
    Startet die Erkennung, sobald das Debounce-Fenster abgelaufen ist.

    Rückgabe:
        True, wenn eine Sprache erkannt und zur Auswahl vorgemerkt wurde.
        Zu kurze Texte ändern nichts an der bisherigen Auswahl.
    """
    text = state["detect_debouncer"].poll(now)
    if text is None:
        return False

    detected = detect_language(text)
    if detected is None:
        return False

    state["detected_language"] = detected
    # Widget-Keys dürfen nur vor dem Rendern gesetzt werden
    state["pending_language"] = detected
    return True


def apply_pending_selection(state: State) -> None:
    if "pending_language" in state:
        state["language"] = state.pop("pending_language")


def language_label(lang: Language, detected: Language | None) -> str:
    label = LANGUAGE_LABELS[lang.value]
    if detected == lang:
        return DEFAULT_LABEL_TEMPLATE.format(label=label)
    return label


# =========================
# Generierung
# =========================
def build_request(state: State) -> GenerationRequest:
    return GenerationRequest(
        text=state["input_text"],
        language=Language(state["language"]),
        level=ProficiencyLevel(state["level"]),
        word_count=WordCount(state["word_count"]),
    )


def request_generation(state: State) -> bool:
    """
    Validiert die Eingabe und markiert den Request als laufend.

    Leere Eingaben setzen nur die Validierungsmeldung; es wird nichts gesendet.
    """
    if not str(state.get("input_text") or "").strip():
        state["error"] = MSG_EMPTY_INPUT
        return False

    state["is_loading"] = True
    state["error"] = None
    state["output"] = ""
    return True


def run_generation(state: State, generate_fn: Callable[[GenerationRequest], str]) -> None:
    try:
        state["output"] = generate_fn(build_request(state))
    except GenerationError as e:
        state["error"] = str(e) or MSG_GENERIC_ERROR
    except Exception:
        logger.exception("Unerwarteter Fehler bei der Generierung")
        state["error"] = MSG_GENERIC_ERROR
    finally:
        state["is_loading"] = False


def reset_output(state: State) -> None:
    state["output"] = ""


def needs_polling(state: State) -> bool:
    return state["detect_debouncer"].pending


def toggle_dark_mode(state: State) -> None:
    state["dark_mode"] = not state.get("dark_mode", False)
