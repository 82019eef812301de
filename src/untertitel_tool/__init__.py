"""
Top-Level Package für das Untertitel-Tool.

Enthält:
- config: zentrale Konstanten, Meldungen, API-Key und Logging
- models: Enums und Dataclasses für Anfragen
- utils: Debounce- und Zeit-Helfer
- llm: Gemini-Client
- nlp: heuristische Spracherkennung
- prompt_builder: Enthält die Prompt-Builder Logik
- ui: Streamlit-UI (Zustand + Komponenten)
"""
