import pytest

from src.untertitel_tool.models import Language
from src.untertitel_tool.nlp.language_detection import detect_language


@pytest.mark.parametrize("text", ["", "kurz", "123456789", "سلام دنیا"])
def test_short_text_is_not_classified(text):
    assert detect_language(text) is None


def test_persian_characters_win():
    text = "این یک متن فارسی است und der Rest ist deutsch"
    assert detect_language(text) == Language.PERSIAN


def test_persian_anywhere_in_sample_wins_over_german():
    text = "Übersicht über das Thema: " + "ب"
    assert detect_language(text) == Language.PERSIAN


def test_persian_after_sample_is_ignored():
    text = "x" * 100 + " فارسی"
    assert detect_language(text) == Language.ENGLISH


def test_german_umlauts():
    assert detect_language("Schöne Grüße aus Berlin") == Language.GERMAN


def test_german_stopwords_without_umlauts():
    assert detect_language("Heute ist ein guter Tag") == Language.GERMAN


def test_stopwords_are_case_insensitive():
    assert detect_language("Das Wetter war gut gestern") == Language.GERMAN


def test_stopword_must_be_whole_word():
    # "undone" / "dies" enthalten Stoppwörter nur als Teilstring
    assert detect_language("undone things dies slowly") == Language.ENGLISH


def test_defaults_to_english():
    assert detect_language("Hello world, this is a transcript.") == Language.ENGLISH
