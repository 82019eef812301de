"""
Gemini-Client Wrapper.

Kapselt:
- API-Key Handling
- Model-Auswahl über zentrale Config
- den einzelnen Generierungs-Call
- die Übersetzung aller Fehler in eine nutzerseitige Meldung

Ziel: Die Streamlit-App soll Gemini nur über generate_summary ansprechen,
damit Provider-Wechsel oder API-Anpassungen lokal bleiben.
"""

import logging

from src.untertitel_tool.config import (
    GEMINI_MODEL,
    MSG_EMPTY_RESPONSE,
    MSG_MISSING_API_KEY,
    MSG_SERVICE_ERROR,
    get_api_key,
)
from src.untertitel_tool.models import GenerationRequest
from src.untertitel_tool.prompt_builder.summary_prompt import build_summary_prompt

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Fehler, dessen Meldung direkt in der UI angezeigt wird."""


class ConfigurationError(GenerationError):
    """Kein API Key vorhanden; es wurde kein Request gesendet."""


def gemini_generate(api_key: str, prompt: str, client=None) -> str:
    """
    Führt einen einzelnen Generierungsaufruf gegen Gemini aus.

    Parameter:
        api_key: Gemini API Key.
        prompt: vollständiger Prompt (Rolle, Constraints, Eingabetext).
        client: optional ein bereits erzeugter genai.Client (z.B. in Tests).

    Rückgabe:
        der Antworttext unverändert, oder MSG_EMPTY_RESPONSE, falls leer.

    Raises:
        ConfigurationError: wenn kein API-Key gesetzt ist.
        Alle Fehler des SDKs werden unverändert weitergereicht.
    """
    if not (api_key or "").strip():
        raise ConfigurationError(MSG_MISSING_API_KEY)

    if client is None:
        from google import genai

        client = genai.Client(api_key=api_key)

    logger.debug("Gemini-Request: model=%s, prompt=%d Zeichen", GEMINI_MODEL, len(prompt))
    resp = client.models.generate_content(
        model=GEMINI_MODEL,
        contents=prompt,
    )

    text = getattr(resp, "text", None)
    if not text:
        logger.warning("Gemini hat keinen Text geliefert.")
        return MSG_EMPTY_RESPONSE
    return text


def generate_summary(request: GenerationRequest, api_key: str | None = None, client=None) -> str:
    """
    Baut den Prompt aus der Anfrage und ruft Gemini auf.

    Jeder Fehler außer dem fehlenden Key wird geloggt und als GenerationError
    mit der generischen Meldung neu geworfen; kein Retry.
    """
    if api_key is None:
        api_key = get_api_key()

    prompt = build_summary_prompt(request)
    try:
        return gemini_generate(api_key, prompt, client=client)
    except ConfigurationError:
        raise
    except Exception as e:
        logger.exception("Gemini API Error")
        raise GenerationError(MSG_SERVICE_ERROR) from e
