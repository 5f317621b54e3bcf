from app.settings import settings
from app.agents.llm.base import LLMClient
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.groq import GroqOpenAIClient

def get_llm_client() -> LLMClient:
    if settings.LLM_PROVIDER == "groq":
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    return OllamaOpenAIClient(
        base_url = settings.ollama_base_url,
        model = settings.ollama_model,
        timeout = settings.LLM_TIMEOUT_SECONDS,
    )
