"""
LLM-Anbindung.

- gemini_client: Aufruf der Gemini-API für Zusammenfassungen
"""
