"""
Prompt-Builder Package.

Enthält Funktionen, die aus einer GenerationRequest stabile Prompts erzeugen:
- summary_prompt: Umschreib-/Zusammenfassungsauftrag inkl. Formatvorgaben
"""
