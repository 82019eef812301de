"""
NLP-Komponenten.

Dieses Package enthält:
- language_detection: Heuristik zur Vorauswahl der Zielsprache
"""
