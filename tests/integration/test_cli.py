"""
Integration tests for the scribe_cv command line.
Tests: commands run against real files in a temporary directory.
"""

import shutil
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from scripts.scribe_cv import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    """Commands reconfigure loguru; restore a plain stderr sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Sample CV plus a config file pointing all output into tmp_path."""
    document = tmp_path / "cv_v3_2026-10-19.md"
    shutil.copy(FIXTURES_PATH / "cv_sample.md", document)

    config = tmp_path / "scribe.yaml"
    config.write_text(
        f"drafts_dir: {tmp_path}\noutput_dir: {tmp_path / 'html'}\nlogs_dir: {tmp_path / 'logs'}\n"
    )
    monkeypatch.setenv("SCRIBE_CONFIG_PATH", str(config))
    return document


@pytest.mark.integration
def test_render_command(workspace):
    result = runner.invoke(app, ["render", str(workspace)])

    assert result.exit_code == 0, result.output
    html_file = workspace.parent / "html" / "cv_v3_2026-10-19.html"
    assert html_file.exists()
    assert "layout-klassiek" in html_file.read_text(encoding="utf-8")
    assert (next((workspace.parent / "logs").iterdir()) / "render.log").exists()


@pytest.mark.integration
def test_render_command_with_stamp(workspace):
    out = workspace.parent / "custom.html"

    result = runner.invoke(app, ["render", str(workspace), "-t", "strak", "--stamp", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert "layout-strak" in out.read_text(encoding="utf-8")
    assert 'template: "strak"' in workspace.read_text(encoding="utf-8")


@pytest.mark.integration
def test_render_missing_document_fails(workspace):
    result = runner.invoke(app, ["render", str(workspace.parent / "missing.md")])
    assert result.exit_code == 1


@pytest.mark.integration
def test_sections_command(workspace):
    result = runner.invoke(app, ["sections", str(workspace)])

    assert result.exit_code == 0, result.output
    assert "* Talen  [sidebar]" in result.output
    assert "Profiel  [main]" in result.output
    assert "Nederlands" in result.output
    assert "100%" in result.output


@pytest.mark.integration
def test_set_items_command(workspace):
    result = runner.invoke(
        app, ["set-items", str(workspace), "talen", "-i", "Engels (C2)", "-i", "Frans (A2)"]
    )

    assert result.exit_code == 0, result.output
    text = workspace.read_text(encoding="utf-8")
    assert "## Talen\n\n- Engels (95)\n- Frans (35)\n\n## Vaardigheden" in text


@pytest.mark.integration
def test_set_items_unknown_section(workspace):
    before = workspace.read_text(encoding="utf-8")

    result = runner.invoke(app, ["set-items", str(workspace), "Talenn", "-i", "Engels"])

    assert result.exit_code == 1
    assert workspace.read_text(encoding="utf-8") == before


@pytest.mark.integration
def test_set_items_requires_items_or_clear(workspace):
    result = runner.invoke(app, ["set-items", str(workspace), "Talen"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["set-items", str(workspace), "Talen", "--clear"])
    assert result.exit_code == 0, result.output
    assert "## Talen\n\n## Vaardigheden" in workspace.read_text(encoding="utf-8")


@pytest.mark.integration
def test_layouts_command():
    result = runner.invoke(app, ["layouts"])

    assert result.exit_code == 0
    assert "donker (default)" in result.output
    assert "klassiek" in result.output
    assert "strak" in result.output


@pytest.mark.integration
def test_drafts_command(workspace):
    result = runner.invoke(app, ["drafts", "--suffix", "Acme"])

    assert result.exit_code == 0, result.output
    assert "cv_v3_2026-10-19.md" in result.output
    assert "cv_v4_" in result.output
    assert "_acme.md" in result.output


@pytest.mark.integration
def test_set_items_refuses_prose_section(workspace):
    before = workspace.read_text(encoding="utf-8")

    result = runner.invoke(app, ["set-items", str(workspace), "Werkervaring", "-i", "Python (90)"])

    assert result.exit_code == 1
    assert "editable: Talen, Vaardigheden, Hobby's" in result.output
    assert workspace.read_text(encoding="utf-8") == before
