import pytest

from src.untertitel_tool.config import GEMINI_MODEL, MSG_EMPTY_RESPONSE, MSG_SERVICE_ERROR
from src.untertitel_tool.llm.gemini_client import (
    ConfigurationError,
    GenerationError,
    gemini_generate,
    generate_summary,
)
from src.untertitel_tool.models import GenerationRequest, Language, ProficiencyLevel, WordCount
from tests.conftest import FakeClient

REQUEST = GenerationRequest(
    text="Hello world",
    language=Language.ENGLISH,
    level=ProficiencyLevel.B2,
    word_count=WordCount.MEDIUM,
)


def test_missing_api_key_fails_before_request(fake_client):
    with pytest.raises(ConfigurationError):
        generate_summary(REQUEST, api_key="  ", client=fake_client)
    assert fake_client.models.calls == []


def test_configuration_error_is_a_generation_error():
    assert issubclass(ConfigurationError, GenerationError)


def test_returns_response_text_verbatim(fake_client):
    out = generate_summary(REQUEST, api_key="key", client=fake_client)
    assert out == "## Zusammenfassung\n\n**Hallo** Welt"


def test_sends_single_request_with_model_and_prompt(fake_client):
    generate_summary(REQUEST, api_key="key", client=fake_client)
    calls = fake_client.models.calls
    assert len(calls) == 1
    assert calls[0]["model"] == GEMINI_MODEL
    assert "Hello world" in calls[0]["contents"]
    assert "Output Language: English." in calls[0]["contents"]


@pytest.mark.parametrize("text", [None, ""])
def test_empty_response_returns_placeholder(text):
    client = FakeClient(text=text)
    assert gemini_generate("key", "prompt", client=client) == MSG_EMPTY_RESPONSE


def test_service_failure_is_mapped_to_user_message(failing_client):
    with pytest.raises(GenerationError) as exc_info:
        generate_summary(REQUEST, api_key="key", client=failing_client)
    assert str(exc_info.value) == MSG_SERVICE_ERROR
    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert len(failing_client.models.calls) == 1


def test_api_key_falls_back_to_environment(monkeypatch, fake_client):
    monkeypatch.setattr("dotenv.load_dotenv", lambda **kwargs: False)
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert generate_summary(REQUEST, client=fake_client) == "## Zusammenfassung\n\n**Hallo** Welt"
