# app/agents/workflow.py
import logging

from app.agents.llm.base import LLMClient
from app.agents.prompts import SYSTEM_ROADMAP, build_roadmap_prompt
from app.agents.recovery.errors import RoadmapOutputError
from app.agents.recovery.pipeline import produce_roadmap_document
from app.agents.schemas import RoadmapDocument
from app.settings import settings

logger = logging.getLogger(__name__)


class BadLlmJson(Exception):
    """Model output could not be turned into a roadmap document."""


def generate_roadmap(goal: str, llm: LLMClient) -> RoadmapDocument:
    """
    Ask the model for a roadmap and recover a document from whatever it returns.
    A single attempt: retrying the model call is up to the caller.
    """
    prompt = build_roadmap_prompt(goal)
    raw_text = llm.generate_text(
        system=SYSTEM_ROADMAP, user=prompt, temperature=settings.LLM_TEMPERATURE
    )

    try:
        return produce_roadmap_document(raw_text)
    except RoadmapOutputError as e:
        logger.error(
            "JSON repair failed (%s: %s)\nRAW OUTPUT:\n%s",
            type(e).__name__, e, raw_text,
        )
        raise BadLlmJson("AI returned unrecoverable malformed data") from e
