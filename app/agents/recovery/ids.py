## Item id normalization
import re

_NOT_ID_CHAR = re.compile(r"[^a-z0-9_]")


def normalize_id(raw_id: str, phase_id: str, index_in_phase: int) -> str:
    clean = _NOT_ID_CHAR.sub("", str(raw_id).lower()).strip()
    if not clean:
        # positional fallback, 1-based
        clean = f"{phase_id}_{index_in_phase + 1}"
    return clean
