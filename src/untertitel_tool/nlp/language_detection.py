"""
Heuristische Spracherkennung für das Eingabefeld.

Kein Modell, nur Zeichen- und Stoppwort-Regeln auf den ersten Zeichen:
1. Zeichen aus dem persisch/arabischen Block → Persisch
2. deutsche Umlaute/ß → Deutsch
3. häufige deutsche Stoppwörter → Deutsch
4. sonst Englisch

Das Ergebnis wählt nur die Zielsprache vor; die Auswahl des Nutzers gewinnt immer.
"""

import logging
import re

from src.untertitel_tool.config import DETECT_MIN_LENGTH, DETECT_SAMPLE_SIZE, GERMAN_STOPWORDS
from src.untertitel_tool.models import Language

logger = logging.getLogger(__name__)

_PERSIAN_RE = re.compile(r"[\u0600-\u06FF]")
_GERMAN_CHARS_RE = re.compile(r"[äöüßÄÖÜ]")


def detect_language(text: str) -> Language | None:
    """
    Klassifiziert einen Text als Persisch, Deutsch oder Englisch.

    Rückgabe:
        None, wenn der Text kürzer als DETECT_MIN_LENGTH ist (keine Aussage),
        sonst die erkannte Sprache (Fallback: Englisch).
    """
    if not text or len(text) < DETECT_MIN_LENGTH:
        return None

    sample = text[:DETECT_SAMPLE_SIZE]

    if _PERSIAN_RE.search(sample):
        detected = Language.PERSIAN
    elif _GERMAN_CHARS_RE.search(sample):
        detected = Language.GERMAN
    elif any(w in GERMAN_STOPWORDS for w in sample.lower().split()):
        detected = Language.GERMAN
    else:
        detected = Language.ENGLISH

    logger.debug("Sprache erkannt: %s (Stichprobe %d Zeichen)", detected.value, len(sample))
    return detected
