"""
Kleine Zeit-Helfer für die UI.

- Debouncer: fasst schnelle Texteingaben zusammen, bevor die Spracherkennung läuft

Arbeitet mit übergebenen Zeitstempeln statt selbst zu schlafen,
damit er in Streamlit-Reruns und in Tests gleich funktioniert.
"""

import time
from typing import Callable

from src.untertitel_tool.config import DETECT_DEBOUNCE_SECONDS


class Debouncer:
    """
    Merkt sich den letzten Wert und gibt ihn erst frei, wenn seit der
    letzten Änderung `delay` Sekunden vergangen sind.

    Jede neue Änderung setzt den Timer zurück; ein freigegebener Wert wird
    genau einmal geliefert.
    """

    def __init__(self, delay: float = DETECT_DEBOUNCE_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self.clock = clock
        self._value = None
        self._changed_at: float | None = None

    def submit(self, value, now: float | None = None) -> None:
        self._value = value
        self._changed_at = self.clock() if now is None else now

    @property
    def pending(self) -> bool:
        return self._changed_at is not None

    def poll(self, now: float | None = None):
        """
        Liefert den Wert, wenn das Fenster abgelaufen ist, sonst None.
        """
        if self._changed_at is None:
            return None
        now = self.clock() if now is None else now
        if now - self._changed_at < self.delay:
            return None
        value = self._value
        self._value = None
        self._changed_at = None
        return value
