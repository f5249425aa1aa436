#!/usr/bin/env python3
"""
CV Rendering CLI

Renders markdown CVs to self-contained HTML and edits their sidebar sections
without touching the rest of the document.

Commands:
    render    - Render a CV to an HTML file
    sections  - Show how each section is classified, with parsed items
    set-items - Replace the items of one sidebar section
    layouts   - List the available layouts
    drafts    - List drafts and the next free version number

Examples:\n

    scribe_cv.py render data/cv_drafts/cv_v3_2026-10-19.md                  # Layout from document

    scribe_cv.py render cv.md --template klassiek --stamp                   # Override and save layout

    scribe_cv.py sections cv.md                                             # Classification report

    scribe_cv.py set-items cv.md Talen -i "Engels (90)" -i "Duits (basis)"  # Rewrite one section
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from scribe.config import load_config
from scribe.contexts.rendering import export_html, output_path_for
from scribe.contexts.rendering.logger import setup_rendering_logger
from scribe.contexts.templating import (
    Region,
    SectionNotFoundError,
    summarize_sections,
)
from scribe.contexts.templating.classifier import editable_sections, is_editable_title, is_itemized_title
from scribe.contexts.templating.defaults import DEFAULT_TEMPLATE
from scribe.contexts.templating.document_structure import parse_document
from scribe.contexts.templating.html_generator import LAYOUTS
from scribe.contexts.templating.level_parser import parse_item_line
from scribe.contexts.templating.logger import setup_templating_logger
from scribe.contexts.templating.section_writer import format_item
from scribe.utils.document_store import (
    draft_path,
    next_version_number,
    read_document,
    set_front_matter_field,
    update_section,
)
from scribe.utils.text_processing import format_level_bar
from scribe.utils.timestamp import now

app = typer.Typer(
    help="Render markdown CVs to HTML and edit their sidebar sections",
    add_completion=False,
    invoke_without_command=True,
)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="YAML config file (default: SCRIBE_CONFIG_PATH or built-in defaults)",
    ),
]


def _quiet_logging():
    """Console logging at WARNING and above for read-only commands."""
    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <7}</level> | {message}", level="WARNING")


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    document: Annotated[Path, typer.Argument(help="Markdown CV to render")],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="HTML file to write (default: <output_dir>/<document stem>.html)",
        ),
    ] = None,
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Layout to use instead of the document's 'template' key",
        ),
    ] = None,
    stamp: Annotated[
        bool,
        typer.Option(
            "--stamp",
            help="Also store --template in the document's front-matter",
        ),
    ] = False,
    config: ConfigOption = None,
):
    """
    Render a markdown CV to a self-contained HTML file.

    Examples:\n

        $ scribe_cv.py render cv.md                                # Layout from document

        $ scribe_cv.py render cv.md -t strak -o outs/cv.html       # Explicit layout and target
    """
    settings = load_config(config)
    log_dir = Path(settings.logs_dir) / f"render_{now()}"
    setup_rendering_logger(log_dir, template)

    if stamp and template:
        try:
            set_front_matter_field(document, "template", template)
        except OSError as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    typer.secho(f"\nRendering: {document}", fg=typer.colors.BLUE, bold=True)
    target = output or output_path_for(document, Path(settings.output_dir))
    result = export_html(
        document,
        target,
        template_name=template,
        defaults=settings.to_render_defaults(),
    )

    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Layout: {result.template_name}")
        typer.echo(f"  HTML: {result.output_path}")
        typer.echo(f"  Page: {result.page.width} x {result.page.height}")
    else:
        typer.secho("✗ Render failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED)

    typer.echo(f"  Log: {log_dir / 'render.log'}")
    typer.echo("")
    raise typer.Exit(code=0 if result.success else 1)


@app.command("sections")
def sections_command(
    document: Annotated[Path, typer.Argument(help="Markdown CV to inspect")],
):
    """
    Show each section's region and, for sidebar sections, the parsed items.

    Editable sections (can be rewritten with set-items) are marked with *.
    """
    _quiet_logging()
    try:
        text = read_document(document)
    except OSError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    summaries = summarize_sections(text)
    if not summaries:
        typer.secho("No sections found.", fg=typer.colors.YELLOW)
        raise typer.Exit()

    typer.echo("")
    for summary in summaries:
        marker = "*" if summary.editable else " "
        region = summary.region.value
        typer.secho(f"{marker} {summary.title}  [{region}]", bold=True)
        if summary.region is not Region.SIDEBAR:
            continue
        if not summary.items:
            typer.echo("    (no items)")
        for i, item in enumerate(summary.items, 1):
            if summary.itemized or item.level is None:
                typer.echo(f"    {i:>2}. {item.label}")
            else:
                bar = format_level_bar(item.level)
                typer.echo(f"    {i:>2}. {item.label:<28} {bar} {item.level:>3}%")
    typer.echo("")


@app.command("set-items")
def set_items_command(
    document: Annotated[Path, typer.Argument(help="Markdown CV to edit")],
    title: Annotated[str, typer.Argument(help="Section title (case-insensitive)")],
    items: Annotated[
        Optional[List[str]],
        typer.Option(
            "--item",
            "-i",
            help='Item in markdown form, e.g. "Python (90)" or "Engels (vloeiend)"; repeatable',
        ),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Allow leaving the section without items"),
    ] = False,
    config: ConfigOption = None,
):
    """
    Replace the items of one section, in the order given.

    Levels are parsed like list items in the document. Interest/hobby sections
    keep labels only.

    Only sidebar sections edited item-by-item (languages, skills, traits,
    interests) can be rewritten; prose sections are refused.

    Examples:\n

        $ scribe_cv.py set-items cv.md Talen -i "Nederlands (moedertaal)" -i "Engels (C1)"

        $ scribe_cv.py set-items cv.md Hobby's -i Schaken -i Hardlopen
    """
    if not items and not clear:
        typer.secho("Error: no --item given (use --clear to empty the section)\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    settings = load_config(config)
    setup_templating_logger(Path(settings.logs_dir) / f"rewrite_{now()}", phase="rewrite")

    if not is_editable_title(title):
        try:
            editable = [section.title for section in editable_sections(parse_document(read_document(document)))]
        except OSError as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.secho(
            f"Error: '{title}' is not an editable section (editable: {', '.join(editable) or 'none'})\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    parsed = [parse_item_line(line) for line in items or []]
    parsed = [item for item in parsed if item.label]

    try:
        update_section(document, title, parsed)
    except SectionNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Updated '{title}' in {document}", fg=typer.colors.GREEN, bold=True)
    for item in parsed:
        typer.echo(f"  {format_item(item, itemized=is_itemized_title(title))}")
    typer.echo("")


@app.command("layouts")
def layouts_command():
    """List the available layouts."""
    typer.echo("")
    for layout in LAYOUTS.values():
        suffix = " (default)" if layout.name == DEFAULT_TEMPLATE else ""
        typer.secho(f"  {layout.name}{suffix}", bold=True)
        typer.echo(f"    {layout.description}")
    typer.echo("")


@app.command("drafts")
def drafts_command(
    suffix: Annotated[
        Optional[str],
        typer.Option("--suffix", "-s", help='Label for the next draft name, e.g. "Targeted Acme"'),
    ] = None,
    config: ConfigOption = None,
):
    """List drafts in the drafts directory and the next draft name."""
    _quiet_logging()
    settings = load_config(config)
    drafts_dir = Path(settings.drafts_dir)

    drafts = sorted(drafts_dir.glob("*.md")) if drafts_dir.exists() else []
    typer.secho(f"\nDrafts in {drafts_dir}: {len(drafts)}", fg=typer.colors.BLUE, bold=True)
    for draft in drafts:
        typer.echo(f"  {draft.name}")

    next_draft = draft_path(drafts_dir, next_version_number(drafts_dir), suffix=suffix)
    typer.echo(f"\nNext draft: {next_draft}\n")


if __name__ == "__main__":
    app()
