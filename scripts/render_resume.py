#!/usr/bin/env python3
"""
Resume Rendering CLI

Lays out resume text with a color theme and writes PDF, DOCX or plain text.

Examples:\n

    render_resume.py resume.txt                                   # PDF, default theme

    render_resume.py resume.txt --theme classic-serif --format docx

    render_resume.py resume.txt --page-size letter -o out/resume.pdf

    render_resume.py resume.txt --pages                           # Print page breakdown only
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge import pipeline
from resumeforge.contexts.intake.exceptions import TextExtractionError
from resumeforge.contexts.intake.text_extraction import read_text_file
from resumeforge.contexts.rendering.exceptions import SerializationError, UnsupportedFormatError
from resumeforge.contexts.rendering.logger import setup_rendering_logger
from resumeforge.contexts.rendering.page_layout import A4, US_LETTER
from resumeforge.contexts.rendering.serializers import SUPPORTED_FORMATS
from resumeforge.contexts.rendering.themes import DEFAULT_THEME_ID

PAGE_SIZES = {"a4": A4, "letter": US_LETTER}

app = typer.Typer(
    help="Render resume text to PDF, DOCX or plain text with a color theme",
    add_completion=False,
)


@app.command()
def render(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Resume text file (.txt or .md)", exists=True, dir_okay=False),
    ],
    theme_id: Annotated[
        str,
        typer.Option("--theme", "-t", help="Theme id (see list_themes.py)"),
    ] = DEFAULT_THEME_ID,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help=f"Output format: {', '.join(SUPPORTED_FORMATS)}"),
    ] = "pdf",
    page_size: Annotated[
        str,
        typer.Option("--page-size", help=f"Page size: {', '.join(PAGE_SIZES)}"),
    ] = "a4",
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: resume_<theme name>.<format> next to the input)",
        ),
    ] = None,
    pages_only: Annotated[
        bool,
        typer.Option("--pages", help="Print the page breakdown without writing a file"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Session log directory (default: new folder under LOGS_PATH)"),
    ] = None,
):
    """
    Render a resume file.

    Unknown theme ids fall back to the default theme with a warning.
    """
    geometry = PAGE_SIZES.get(page_size.lower())
    if geometry is None:
        typer.secho(
            f"Error: unknown page size '{page_size}' (use {', '.join(PAGE_SIZES)})\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        text = read_text_file(resume_file)
    except TextExtractionError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_file = setup_rendering_logger(log_dir, theme_id=theme_id)
    theme = pipeline.get_theme(theme_id)

    if pages_only:
        layout = pipeline.layout(pipeline.parse(text), theme, geometry)
        typer.secho(f"\n{resume_file.name}: {layout.page_count} page(s)", bold=True)
        for page in layout.pages:
            first = page.runs[0].text if page.runs else ""
            typer.echo(f"  Page {page.number}: {len(page.runs)} runs, starts with '{first}'")
        typer.echo("")
        return

    try:
        data = pipeline.render(text, theme.id, fmt, geometry)
    except (UnsupportedFormatError, SerializationError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        output = resume_file.parent / theme.download_filename(fmt.lower().lstrip("."))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)

    typer.secho("✓ Resume rendered", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Theme: {theme.name}")
    typer.echo(f"  Output: {output} ({len(data):,} bytes)")
    typer.echo(f"  Log: {log_file}")


if __name__ == "__main__":
    app()
