import openai
from openai import OpenAI

from .base import LLMClient, LLMError, LLMRateLimited


class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str, timeout: float = 120):
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except openai.RateLimitError as e:
            raise LLMRateLimited(str(e)) from e
        except openai.APIError as e:
            raise LLMError(f"{type(e).__name__}: {e}") from e

        return (resp.choices[0].message.content or "").strip()
