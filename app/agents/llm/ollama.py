import httpx
from app.agents.llm.base import LLMClient, LLMError, LLMRateLimited

class OllamaOpenAIClient(LLMClient):
    def __init__(self, base_url: str, model: str, timeout: float = 120):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        # Ollama OpenAI-compatible endpoint
        # POST {base_url}/chat/completions with OpenAI message format

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature
        }

        headers = {
            "Content-Type": "application/json",
            #OpenAI-compatible clients require an api key field; Ollama ignores it
            "Authorization": "Bearer ollama",
        }

        try:
            with httpx.Client(timeout=self.timeout) as client:
                r = client.post(url, json=payload, headers=headers)
                if r.status_code == 429:
                    raise LLMRateLimited(f"Ollama rate limited: {r.text}")
                r.raise_for_status()
                data = r.json()
            content = data["choices"][0]["message"]["content"]
        except httpx.HTTPError as e:
            raise LLMError(f"{type(e).__name__}: {e}") from e
        except (KeyError, IndexError, ValueError) as e:
            raise LLMError(f"Unexpected Ollama response: {e}") from e

        return content or ""
