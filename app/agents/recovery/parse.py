## Strict JSON decoding of repaired model output
import json
from typing import Any

from app.agents.recovery.errors import ParseError


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Non-standard JSON constant: {name}")


def parse_json_text(repaired: str) -> Any:
    """Decode with the standard JSON grammar; no leniency at this stage."""
    try:
        return json.loads(repaired, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), line=e.lineno, column=e.colno) from e
    except RecursionError as e:
        raise ParseError("JSON nested too deeply") from e
