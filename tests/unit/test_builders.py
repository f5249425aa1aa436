"""Unit tests for building the template view model."""

import pytest

from scribe.contexts.templating import builders
from scribe.contexts.templating.builders import (
    build_contact_items,
    build_main_section,
    build_sidebar_section,
    build_template_input,
    ensure_https,
    resolve_color,
)
from scribe.contexts.templating.defaults import DEFAULT_ACCENT, DEFAULT_DARK, RenderDefaults
from scribe.contexts.templating.document_structure import FrontMatter, Section, parse_document


@pytest.mark.unit
def test_sidebar_section_with_levels():
    section = build_sidebar_section(Section("Talen", "- Engels (professioneel)\n- Nederlands (moedertaal)"))

    assert section.itemized is False
    assert [(i.label, i.level) for i in section.items] == [("Engels", 80), ("Nederlands", 100)]


@pytest.mark.unit
def test_itemized_section_clears_levels():
    """Test that hobby sections keep labels and drop levels."""
    section = build_sidebar_section(Section("Hobby's", "- Schaken\n- Hardlopen (gevorderd)"))

    assert section.itemized is True
    assert [(i.label, i.level) for i in section.items] == [("Schaken", None), ("Hardlopen", None)]


@pytest.mark.unit
def test_main_section_converts_markdown():
    section = build_main_section(Section("Ervaring", "Some **bold** prose."))

    assert section.html == "<p>Some <strong>bold</strong> prose.</p>"


@pytest.mark.unit
def test_main_section_escapes_raw_html():
    section = build_main_section(Section("Ervaring", "<script>alert(1)</script>"))

    assert "<script>" not in section.html


@pytest.mark.unit
def test_main_section_failure_is_isolated(monkeypatch):
    """Test that a conversion error empties only the failing section."""

    def explode(text):
        raise ValueError("boom")

    monkeypatch.setattr(builders, "markdown_to_html", explode)
    section = build_main_section(Section("Ervaring", "tekst"))

    assert section.title == "Ervaring"
    assert section.html == ""


@pytest.mark.unit
def test_contact_items_order_and_links():
    front_matter = FrontMatter(
        {
            "linkedin": "linkedin.com/in/jane",
            "github": "janedoe",
            "location": "Utrecht",
            "phone": "+31 6 1234",
            "email": "jane@example.com",
        }
    )

    items = build_contact_items(front_matter)

    assert [item.text for item in items] == [
        "jane@example.com",
        "+31 6 1234",
        "Utrecht",
        "github.com/janedoe",
        "linkedin.com/in/jane",
    ]
    assert [item.href for item in items] == [
        "mailto:jane@example.com",
        None,
        None,
        "https://github.com/janedoe",
        "https://linkedin.com/in/jane",
    ]


@pytest.mark.unit
def test_contact_items_skip_missing_fields():
    assert build_contact_items(FrontMatter({"name": "Jane"})) == []


@pytest.mark.unit
def test_ensure_https():
    assert ensure_https("linkedin.com/in/x") == "https://linkedin.com/in/x"
    assert ensure_https("http://example.com") == "http://example.com"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("", DEFAULT_ACCENT),
        ("#ff0000", "#ff0000"),
        ("rgb(10, 20, 30)", "rgb(10, 20, 30)"),
        ("teal", "teal"),
        ("red;} body{display:none", DEFAULT_ACCENT),
        ("</style><script>", DEFAULT_ACCENT),
    ],
)
def test_resolve_color(value, expected):
    assert resolve_color(value, DEFAULT_ACCENT, "accent") == expected


@pytest.mark.unit
def test_build_template_input_defaults():
    """Test that colors fall back to the defaults and regions are split."""
    document = parse_document("---\nname: Jane Doe\n---\n## Talen\n- Engels\n## Ervaring\nTekst\n")

    template_input = build_template_input(document)

    assert template_input.name == "Jane Doe"
    assert template_input.role == ""
    assert template_input.accent == DEFAULT_ACCENT
    assert template_input.dark == DEFAULT_DARK
    assert [s.title for s in template_input.sidebar] == ["Talen"]
    assert [s.title for s in template_input.main] == ["Ervaring"]


@pytest.mark.unit
def test_build_template_input_colors_from_front_matter():
    document = parse_document('---\naccent: "#123456"\ndarkColor: "#000000"\n---\n')

    template_input = build_template_input(document, RenderDefaults(accent="#aaaaaa"))

    assert template_input.accent == "#123456"
    assert template_input.dark == "#000000"


@pytest.mark.unit
def test_build_template_input_uses_passed_defaults():
    document = parse_document("## Ervaring\nTekst\n")

    template_input = build_template_input(document, RenderDefaults(accent="#aaaaaa", dark="#bbbbbb"))

    assert template_input.accent == "#aaaaaa"
    assert template_input.dark == "#bbbbbb"
