"""Unit tests for TemplateRegistry class."""

import pytest
from pathlib import Path
from jinja2 import TemplateNotFound

from scribe.contexts.templating.registries import TEMPLATES_PATH, TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_base_path == TEMPLATES_PATH
    assert registry.templates_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_get_template_donker():
    """Test loading the donker layout template."""
    registry = TemplateRegistry()
    template = registry.get_template("donker")

    assert template is not None
    assert "donker" in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    # First load
    template1 = registry.get_template("klassiek")
    assert registry.is_cached("klassiek")

    # Second load should return same object from cache
    template2 = registry.get_template("klassiek")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_layout")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("strak")

    assert isinstance(path, Path)
    assert path.name == "template.html.jinja"
    assert "strak" in str(path)
    assert path.exists()


@pytest.mark.unit
def test_available_layouts():
    """Test that every shipped layout directory is discovered."""
    registry = TemplateRegistry()
    assert registry.available_layouts() == ["donker", "klassiek", "strak"]


@pytest.mark.unit
def test_available_layouts_missing_directory(tmp_path):
    registry = TemplateRegistry(templates_base_path=tmp_path)
    assert registry.available_layouts() == []


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    # Load template
    registry.get_template("donker")
    assert len(registry._cache) == 1

    # Clear cache
    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_autoescape_enabled():
    """Test that values inserted into templates are escaped."""
    registry = TemplateRegistry()
    rendered = registry.env.from_string("{{ value }}").render(value='<b>"&"</b>')

    assert rendered == "&lt;b&gt;&#34;&amp;&#34;&lt;/b&gt;"
