#!/usr/bin/env python3
"""
Tests for AndroidXmlHandler.

Tests verify:
1. <string> entries are parsed with their translatable marking
2. Malformed XML and wrong root elements raise ParseError
3. Reconstruction uses 2-space indent and XML escaping
4. Parsing reconstructed output gives the same entries back
"""

import pytest

from strtab.errors import ParseError
from strtab.format_handlers import FormatRegistry, ResourceEntry
from strtab.format_handlers.android_xml import AndroidXmlHandler


TEST_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_name" translatable="false">My App</string>
    <string name="welcome">Welcome, %1$s!</string>
    <string name="rich">Tap <xliff:g xmlns:xliff="urn:oasis:names:tc:xliff:document:1.2" id="btn">OK</xliff:g> now</string>
    <string name="escaped">Don\\'t &lt;b&gt; &amp; go</string>
    <string name="empty"></string>
    <plurals name="items_count">
        <item quantity="one">%d item</item>
    </plurals>
</resources>"""


@pytest.fixture
def handler():
    return AndroidXmlHandler()


def test_parse_strings_in_order(handler):
    entries = handler.parse(TEST_XML)
    assert [e.name for e in entries] == ["app_name", "welcome", "rich", "escaped", "empty"]


def test_translatable_marking(handler):
    entries = {e.name: e for e in handler.parse(TEST_XML)}
    assert entries["app_name"].translatable is False
    assert entries["welcome"].translatable is True


def test_entry_text_extraction(handler):
    text_map = {e.name: e.text for e in handler.parse(TEST_XML)}

    assert text_map["welcome"] == "Welcome, %1$s!"
    assert text_map["rich"] == "Tap OK now"
    # Android escapes stay as written; XML entities are decoded
    assert text_map["escaped"] == "Don\\'t <b> & go"
    assert text_map["empty"] == ""


def test_plurals_are_not_parsed(handler):
    names = [e.name for e in handler.parse(TEST_XML)]
    assert "items_count" not in names


def test_invalid_xml_raises_parse_error(handler):
    with pytest.raises(ParseError) as exc:
        handler.parse("<resources><string name='a'>oops</resources>", source="values/strings.xml")
    assert "values/strings.xml" in str(exc.value)
    assert exc.value.path == "values/strings.xml"


def test_wrong_root_raises_parse_error(handler):
    with pytest.raises(ParseError, match="root element must be 'resources'"):
        handler.parse("<strings><string name='a'>x</string></strings>")


def test_string_without_name_raises_parse_error(handler):
    with pytest.raises(ParseError, match="without a name"):
        handler.parse("<resources><string>x</string></resources>")


def test_reconstruct_layout(handler):
    result = handler.reconstruct([
        ResourceEntry(name="welcome", text="Bienvenue"),
        ResourceEntry(name="brand", text="ACME", translatable=False),
    ])

    assert result == (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<resources>\n'
        '  <string name="welcome">Bienvenue</string>\n'
        '  <string name="brand" translatable="false">ACME</string>\n'
        '</resources>\n'
    )


def test_reconstruct_escapes_xml(handler):
    result = handler.reconstruct([ResourceEntry(name='a"b', text="1 < 2 & 3 > 2")])
    assert '<string name="a&quot;b">1 &lt; 2 &amp; 3 &gt; 2</string>' in result


def test_round_trip_preserves_entries(handler):
    entries = handler.parse(TEST_XML)
    assert handler.parse(handler.reconstruct(entries)) == entries


def test_carriage_returns_survive_round_trip(handler):
    entries = [ResourceEntry(name="bye", text="Au\r\nrevoir\rencore\ttab")]
    result = handler.reconstruct(entries)

    assert '\r' not in result
    assert '<string name="bye">Au&#13;\nrevoir&#13;encore\ttab</string>' in result
    assert handler.parse(result) == entries


def test_attribute_whitespace_is_escaped(handler):
    entries = [ResourceEntry(name="a\tb\nc\rd", text="x")]
    result = handler.reconstruct(entries)

    assert 'name="a&#9;b&#10;c&#13;d"' in result
    assert handler.parse(result) == entries


@pytest.mark.parametrize("char", ["\x00", "\x08", "\x0b", "\x0c", "\x0e", "\x1f"])
def test_invalid_xml_characters_are_replaced(handler, char):
    result = handler.reconstruct([ResourceEntry(name="bye", text=f"Au{char}revoir")])

    assert char not in result
    assert handler.parse(result) == [ResourceEntry(name="bye", text="Au\ufffdrevoir")]


def test_placeholder_validation(handler):
    assert handler.validate_placeholders("Hi %1$s, %2$d new", "Salut %1$s, %2$d") == []
    errors = handler.validate_placeholders("Hi %1$s", "Salut")
    assert errors == ["Missing placeholder in translation: %1$s"]


def test_registered_for_xml_extension():
    assert FormatRegistry.get_handler("android").name == "android"
    assert isinstance(FormatRegistry.get_handler_for_extension(".xml"), AndroidXmlHandler)
    with pytest.raises(ValueError):
        FormatRegistry.get_handler("po")
