## Pattern-based repairs for known malformed shapes in model output
import re
from typing import Callable, NamedTuple


class RepairRule(NamedTuple):
    name: str
    pattern: re.Pattern
    rewrite: Callable[[re.Match], str]


def _item_literal(item_id: str, label: str) -> str:
    return f'{{"id":"{item_id}","label":"{label}"}}'


# "{ "id": "x1", "label": "Docker" }" with bare or backslash-escaped inner quotes.
# Group 1 is the optional backslash, reused so both quotes of a pair agree.
# The escaped form also turns a valid string holding an item literal into the object itself.
_QUOTED_ITEM_OBJECT = re.compile(
    r'"\s*\{\s*(\\?)"id\1"\s*:\s*\1"([^"]+?)\1"\s*,\s*\1"label\1"\s*:\s*\1"([^"]+?)\1"\s*\}\s*"'
)

# { "x1", "label": "Docker" }
_MISSING_ID_KEY = re.compile(
    r'\{\s*"([^"]+)"\s*,\s*"label"\s*:\s*"([^"]+)"\s*\}'
)

REPAIR_RULES: list[RepairRule] = [
    RepairRule(
        name="unwrap_quoted_item_object",
        pattern=_QUOTED_ITEM_OBJECT,
        rewrite=lambda m: _item_literal(m.group(2), m.group(3)),
    ),
    RepairRule(
        name="fill_missing_id_key",
        pattern=_MISSING_ID_KEY,
        rewrite=lambda m: _item_literal(m.group(1), m.group(2)),
    ),
]


def apply_rule(rule: RepairRule, text: str) -> str:
    return rule.pattern.sub(rule.rewrite, text)


def repair_json_text(candidate: str, rules: list[RepairRule] | None = None) -> str:
    """Run every repair rule in order over the whole candidate string."""
    fixed = candidate
    for rule in REPAIR_RULES if rules is None else rules:
        fixed = apply_rule(rule, fixed)
    return fixed
