## Raw model output -> RoadmapDocument
from app.agents.recovery.extract import extract_json_block
from app.agents.recovery.normalize import normalize_roadmap
from app.agents.recovery.parse import parse_json_text
from app.agents.recovery.repair import repair_json_text
from app.agents.schemas import RoadmapDocument


def produce_roadmap_document(raw_text: str) -> RoadmapDocument:
    """
    Extract, repair, parse and normalize a model completion.
    Raises a RoadmapOutputError subclass on the first stage that fails.
    """
    block = extract_json_block(raw_text)
    repaired = repair_json_text(block)
    value = parse_json_text(repaired)
    return normalize_roadmap(value)
