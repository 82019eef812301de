"""
Datenmodelle für Generierungsanfragen.

Die Auswahlwerte sind geschlossene Enums, damit UI, Prompt-Builder und
Gemini-Client nur mit gültigen Optionen arbeiten.
"""

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    PERSIAN = "Persian"
    ENGLISH = "English"
    GERMAN = "German"


class ProficiencyLevel(str, Enum):
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"


class WordCount(int, Enum):
    SHORT = 100
    MEDIUM = 300
    LONG = 600


@dataclass
class GenerationRequest:
    """
    Eine vollständige Anfrage an den Generator.

    Attributes:
        text: Rohtext (Transkript/Untertitel) aus dem Eingabefeld.
        language: Zielsprache der Ausgabe.
        level: CEFR-Niveau, an dem sich Wortschatz und Grammatik orientieren.
        word_count: ungefähre Ziel-Wortanzahl.
    """
    text: str
    language: Language
    level: ProficiencyLevel
    word_count: WordCount


@dataclass
class SelectOption:
    """Eine auswählbare Karte in der Konfiguration."""
    value: Enum
    label: str
    sub_label: str | None = None
