"""
Zentrale Konfiguration.

Enthält:
- Modellname für Gemini
- Zeitkonstanten (Debounce, Copy-Feedback)
- Schwellwerte der Spracherkennung
- alle nutzerseitigen Meldungen (Persisch, die UI ist RTL)
- API-Key- und Logging-Setup
"""

import logging
import os

# GEMINI_MODEL = "gemini-3-flash-preview"
GEMINI_MODEL = "gemini-2.5-flash"

# Env-Variablen für den API Key, in dieser Reihenfolge geprüft
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")

# Sekunden
DETECT_DEBOUNCE_SECONDS = 0.5
COPY_FEEDBACK_SECONDS = 2.0

DETECT_MIN_LENGTH = 10
DETECT_SAMPLE_SIZE = 100
GERMAN_STOPWORDS = frozenset({"der", "die", "das", "und", "ist", "ich"})

# =========================
# Meldungen (UI)
# =========================
MSG_EMPTY_INPUT = "لطفا متن زیرنویس را وارد کنید."
MSG_SERVICE_ERROR = "ارتباط با هوش مصنوعی برقرار نشد. لطفا مجددا تلاش کنید."
MSG_EMPTY_RESPONSE = "خطایی در تولید متن رخ داد."
MSG_GENERIC_ERROR = "خطایی رخ داد."
MSG_MISSING_API_KEY = "کلید API تنظیم نشده است (API_KEY یا GEMINI_API_KEY)."

LABEL_COPY = "📋 کپی متن"
LABEL_COPIED = "✔️ کپی شد"
LABEL_COPY_FAILED = "کپی نشد"
LABEL_PRINT = "🖨️ چاپ PDF"

LANGUAGE_LABELS = {
    "Persian": "فارسی",
    "English": "English",
    "German": "Deutsch",
}
DEFAULT_LABEL_TEMPLATE = "پیش‌فرض ({label})"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_api_key() -> str:
    """
    Liest den Gemini API Key aus der Umgebung.

    Eine lokale .env wird vorher geladen (bestehende Variablen werden nicht
    überschrieben). Fehlt der Key, wird "" geliefert; der Fehler entsteht erst
    beim Generieren, damit die UI trotzdem lädt.
    """
    from dotenv import load_dotenv

    load_dotenv(override=False)
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return ""


def configure_logging() -> None:
    """Basis-Logging einmalig setzen; Level über LOG_LEVEL (Default INFO)."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
