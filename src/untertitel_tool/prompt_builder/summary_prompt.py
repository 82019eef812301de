from src.untertitel_tool.models import GenerationRequest


def build_summary_prompt(request: GenerationRequest) -> str:
    """
    Prompt für das Umschreiben und Zusammenfassen eines Transkripts.

    Sprache, CEFR-Niveau und Wortanzahl werden als Constraints eingebettet;
    das Modell soll Markdown liefern, das die UI direkt rendert.
    """
    lines = [
        "You are an expert linguistics assistant.",
        "Task: Rewrite and summarize the provided YouTube transcript text.",
        "",
        "Constraints:",
        f"1. Output Language: {request.language.value}.",
        f"2. Proficiency Level: {request.level.value} (CEFR standards). "
        "Use vocabulary and grammar appropriate for this level.",
        f"3. Length: Approximately {request.word_count.value} words.",
        "4. Style: Educational, clear, and coherent.",
        "5. Formatting: **EXTREMELY IMPORTANT**: Use proper Markdown formatting "
        "to make the text visually appealing and easy to read.",
        "   - Use **Bold** for key terms or important concepts.",
        "   - Use *Italics* for emphasis or foreign words.",
        "   - Use Bullet points or Numbered lists where appropriate to break down information.",
        "   - Use Headings (## or ###) to structure the summary into sections "
        "(e.g., Introduction, Key Points, Conclusion).",
        "   - Use > Blockquotes for important takeaways.",
        "",
        "Input Text:",
        '"""',
        request.text,
        '"""',
    ]
    return "\n".join(lines)
