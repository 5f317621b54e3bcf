## Structural normalization of a parsed roadmap
from typing import Any, Iterator

from pydantic import ValidationError

from app.agents.recovery.errors import InvalidShape
from app.agents.recovery.ids import normalize_id
from app.agents.schemas import RoadmapDocument

DEFAULT_TITLE = "Generated Roadmap"


def explode_item(raw: Any) -> Iterator[tuple[str, str]]:
    """
    Yield (raw_id, label) pairs recovered from one raw item.

    A well-formed {"id", "label"} object yields exactly one pair. Models sometimes
    pack several topics into one object as extra key/value strings; each of those
    becomes its own pair, in key order. Anything that is not an object yields nothing.
    """
    if not isinstance(raw, dict):
        return

    if isinstance(raw.get("id"), str) and isinstance(raw.get("label"), str):
        yield raw["id"], raw["label"]

    for key, value in raw.items():
        if key in ("id", "label"):
            continue
        if isinstance(value, str):
            yield key, value


def _phase_id(phase: dict, index: int) -> str:
    value = phase.get("id")
    if isinstance(value, str) and value:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
        return str(value)
    return f"p{index + 1}"


def normalize_phase(phase: Any, index: int) -> dict:
    if not isinstance(phase, dict):
        raise InvalidShape(f"Phase {index + 1} is not an object")

    phase_id = _phase_id(phase, index)
    raw_items = phase.get("items")
    if not isinstance(raw_items, list):
        raw_items = []

    items: list[dict] = []
    for raw in raw_items:
        for raw_id, label in explode_item(raw):
            # fallback index is the position in the output, not in raw_items
            items.append({"id": normalize_id(raw_id, phase_id, len(items)), "label": label})

    return {**phase, "id": phase_id, "items": items}


def normalize_roadmap(value: Any) -> RoadmapDocument:
    if not isinstance(value, dict):
        raise InvalidShape("Not object")
    if not isinstance(value.get("phases"), list):
        raise InvalidShape("No phases array")

    doc = dict(value)
    doc["phases"] = [normalize_phase(phase, i) for i, phase in enumerate(value["phases"])]

    title = doc.get("title")
    if not isinstance(title, str) or not title:
        doc["title"] = DEFAULT_TITLE
    if not isinstance(doc.get("edges"), list):
        doc["edges"] = []

    try:
        return RoadmapDocument.model_validate(doc)
    except ValidationError as e:
        raise InvalidShape(str(e)) from e
