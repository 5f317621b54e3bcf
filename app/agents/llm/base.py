## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMError(Exception):
    """The model provider could not produce a completion."""


class LLMRateLimited(LLMError):
    pass


class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        """
        Return the raw completion text. Implementations translate provider
        failures into LLMError (LLMRateLimited for HTTP 429).
        """
        raise NotImplementedError
