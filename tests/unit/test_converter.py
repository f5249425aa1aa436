"""Unit tests for the templating entry points."""

import pytest

from scribe.contexts.templating import (
    A4_PAGE,
    Region,
    RenderDefaults,
    SidebarItem,
    load_section_items,
    render_document,
    summarize_sections,
    update_section_items,
)

DOC = """---
name: Jane Doe
template: strak
---
## Profiel
Korte **samenvatting**.

## Vaardigheden
- Python (90)
- SQL

## Hobby's
- Schaken (expert)
"""


@pytest.mark.unit
def test_render_uses_front_matter_template():
    result = render_document(DOC)

    assert result.template_name == "strak"
    assert 'class="layout-strak"' in result.html
    assert result.sidebar_titles == ["Vaardigheden", "Hobby's"]
    assert result.main_titles == ["Profiel"]
    assert result.page == A4_PAGE


@pytest.mark.unit
def test_render_argument_overrides_front_matter():
    assert render_document(DOC, template_name="klassiek").template_name == "klassiek"


@pytest.mark.unit
def test_render_falls_back_to_defaults_template():
    text = "## Profiel\nTekst\n"

    assert render_document(text).template_name == "donker"
    assert render_document(text, defaults=RenderDefaults(template="strak")).template_name == "strak"


@pytest.mark.unit
def test_render_unknown_front_matter_template():
    result = render_document("---\ntemplate: neon\n---\n## Profiel\nTekst\n")
    assert result.template_name == "donker"


@pytest.mark.unit
def test_render_rejects_non_text():
    with pytest.raises(TypeError):
        render_document(42)


@pytest.mark.unit
def test_summarize_sections():
    summaries = summarize_sections(DOC)

    assert [(s.title, s.region) for s in summaries] == [
        ("Profiel", Region.MAIN),
        ("Vaardigheden", Region.SIDEBAR),
        ("Hobby's", Region.SIDEBAR),
    ]
    assert summaries[0].items == []
    assert summaries[1].items == [SidebarItem("Python", 90), SidebarItem("SQL", 70)]
    assert summaries[1].editable is True
    assert summaries[2].itemized is True
    assert summaries[2].items == [SidebarItem("Schaken")]


@pytest.mark.unit
def test_load_section_items():
    assert load_section_items(DOC, "vaardigheden") == [SidebarItem("Python", 90), SidebarItem("SQL", 70)]
    assert load_section_items(DOC, "Talen") is None


@pytest.mark.unit
def test_update_section_items_round_trip():
    """Test that edited items read back as written."""
    items = [SidebarItem("SQL", 75), SidebarItem("Python", 95), SidebarItem("Go", 40)]

    new_text = update_section_items(DOC, "Vaardigheden", items)

    assert load_section_items(new_text, "Vaardigheden") == items
    assert load_section_items(new_text, "Hobby's") == [SidebarItem("Schaken")]


@pytest.mark.unit
def test_update_section_items_itemized_from_title():
    new_text = update_section_items(DOC, "hobby's", [SidebarItem("Lezen", 50)])

    assert new_text.endswith("## Hobby's\n\n- Lezen\n")
