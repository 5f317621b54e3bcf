import pytest

from app.agents.recovery.errors import NoJsonBlockFound
from app.agents.recovery.extract import extract_json_block


def test_extracts_block_between_first_and_last_brace():
    assert extract_json_block('noise {"a":1} trailing') == '{"a":1}'


def test_no_braces_fails():
    with pytest.raises(NoJsonBlockFound):
        extract_json_block("no braces here")


@pytest.mark.parametrize("text", ["only { open", "only } close", "} backwards {"])
def test_unpaired_or_reversed_markers_fail(text):
    with pytest.raises(NoJsonBlockFound):
        extract_json_block(text)


def test_non_string_input_fails():
    with pytest.raises(NoJsonBlockFound):
        extract_json_block(None)


def test_strips_control_characters_and_whitespace():
    raw = '```json\n{\n\t"title": "X\u0085",\r\n "phases": []\u0007}\n```'
    assert extract_json_block(raw) == '{"title": "X", "phases": []}'


def test_stray_braces_in_prose_are_kept():
    # first/last brace slice, not a balanced scan
    assert extract_json_block('use {braces} like {"a":1}') == '{braces} like {"a":1}'
