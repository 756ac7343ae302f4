import json

import pytest

from vfcutils.json_utils import escape


def test_none_becomes_null():
    assert escape(None) == "null"


def test_newline_escape():
    assert escape("\n") == "\\n"


def test_quote_escape():
    assert escape('"') == '\\"'


def test_control_character_uses_unicode_escape():
    assert escape("\x01") == "\\u0001"


def test_plain_text_unchanged():
    text = "hello world 123"
    assert escape(text) == text


@pytest.mark.parametrize(
    "text",
    [
        'say "hi"',
        "back\\slash",
        "tab\there\r\n",
        "\b\f",
        "".join(chr(c) for c in range(0x20)),
        "mixed \x1f and é",
        "",
    ],
)
def test_round_trip_through_json(text):
    escaped = escape(text)
    assert json.loads('"' + escaped + '"') == text


def test_no_raw_control_characters_remain():
    escaped = escape("".join(chr(c) for c in range(0x40)))
    assert all(ord(char) >= 0x20 for char in escaped)