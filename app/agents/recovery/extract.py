## Candidate JSON block extraction
import re

from app.agents.recovery.errors import NoJsonBlockFound

_CONTROL_CHARS = re.compile(r"[\u0000-\u001f\u007f-\u009f]")


def extract_json_block(raw_text: str) -> str:
    """
    Return the text between the first "{" and the last "}" (inclusive),
    with C0/C1 control characters removed and surrounding whitespace trimmed.

    This is a first/last-brace slice, not a balanced scan: stray braces in the
    surrounding prose end up in the result and are left for the parser to reject.
    """
    if not isinstance(raw_text, str):
        raise NoJsonBlockFound("model output is not a string")

    first = raw_text.find("{")
    last = raw_text.rfind("}")
    if first == -1 or last == -1 or last <= first:
        raise NoJsonBlockFound("No JSON block found")

    block = raw_text[first:last + 1]
    return _CONTROL_CHARS.sub("", block).strip()
