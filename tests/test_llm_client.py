from types import SimpleNamespace

import httpx
import openai
import pytest

from app.agents.llm import ollama
from app.agents.llm.base import LLMError, LLMRateLimited
from app.agents.llm.client import get_llm_client
from app.agents.llm.groq import GroqOpenAIClient
from app.agents.llm.ollama import OllamaOpenAIClient
from app.settings import settings


def test_provider_selection(monkeypatch):
    monkeypatch.setattr(settings, "LLM_PROVIDER", "groq")
    assert isinstance(get_llm_client(), GroqOpenAIClient)

    monkeypatch.setattr(settings, "LLM_PROVIDER", "ollama")
    assert isinstance(get_llm_client(), OllamaOpenAIClient)


def _patch_transport(monkeypatch, handler):
    real_client = httpx.Client
    monkeypatch.setattr(
        ollama.httpx, "Client",
        lambda timeout: real_client(timeout=timeout, transport=httpx.MockTransport(handler)),
    )


def test_ollama_returns_message_content(monkeypatch):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        return httpx.Response(200, json={"choices": [{"message": {"content": '{"phases": []}'}}]})

    _patch_transport(monkeypatch, handler)
    client = OllamaOpenAIClient(base_url="http://ollama.test/v1/", model="llama3.1")

    assert client.generate_text(system="s", user="u") == '{"phases": []}'
    assert seen["url"] == "http://ollama.test/v1/chat/completions"


@pytest.mark.parametrize(
    "response, error",
    [
        (httpx.Response(429, text="slow down"), LLMRateLimited),
        (httpx.Response(500, text="boom"), LLMError),
        (httpx.Response(200, json={"unexpected": True}), LLMError),
    ],
)
def test_ollama_failures(monkeypatch, response, error):
    _patch_transport(monkeypatch, lambda request: response)
    client = OllamaOpenAIClient(base_url="http://ollama.test/v1", model="llama3.1")

    with pytest.raises(error):
        client.generate_text(system="s", user="u")


def _groq_with_create(create):
    client = GroqOpenAIClient(api_key="test-key", base_url="http://groq.test/v1", model="m")
    client.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    return client


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_groq_returns_stripped_content():
    seen = {}

    def create(**kwargs):
        seen.update(kwargs)
        return _completion('  {"phases": []}\n')

    client = _groq_with_create(create)
    assert client.generate_text(system="s", user="u", temperature=0.3) == '{"phases": []}'
    assert seen["model"] == "m"
    assert seen["temperature"] == 0.3
    assert seen["messages"] == [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]


def test_groq_empty_content_is_empty_string():
    assert _groq_with_create(lambda **kwargs: _completion(None)).generate_text(system="s", user="u") == ""


def _raise(error):
    def create(**kwargs):
        raise error
    return create


def test_groq_rate_limit_maps_to_llm_rate_limited():
    request = httpx.Request("POST", "http://groq.test/v1/chat/completions")
    error = openai.RateLimitError(
        "rate_limit_exceeded", response=httpx.Response(429, request=request), body=None
    )

    with pytest.raises(LLMRateLimited):
        _groq_with_create(_raise(error)).generate_text(system="s", user="u")


def test_groq_connection_error_maps_to_llm_error():
    request = httpx.Request("POST", "http://groq.test/v1/chat/completions")
    error = openai.APIConnectionError(request=request)

    with pytest.raises(LLMError) as exc_info:
        _groq_with_create(_raise(error)).generate_text(system="s", user="u")
    assert not isinstance(exc_info.value, LLMRateLimited)
