#!/usr/bin/env python3
"""
List available resume themes.

Examples:\n

    list_themes.py                       # Bundled themes (or THEMES_PATH)

    list_themes.py --themes-file my.yaml # Themes from another file
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge.contexts.rendering.exceptions import ThemeConfigError
from resumeforge.contexts.rendering.themes import load_theme_catalog, rgb_to_hex
from resumeforge.utils.report_formatter import Column, TableFormatter

app = typer.Typer(help="List available resume themes", add_completion=False)


@app.command()
def list_themes(
    themes_file: Annotated[
        Optional[Path],
        typer.Option("--themes-file", help="Theme YAML file (default: THEMES_PATH)"),
    ] = None,
):
    """Print every theme with its colors and font."""
    try:
        catalog = load_theme_catalog(themes_file)
    except ThemeConfigError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    formatter = TableFormatter(
        columns=[
            Column("Id", 20),
            Column("Name", 24),
            Column("Primary", 8),
            Column("Accent", 8),
            Column("Font", 10),
        ],
        total_width=74,
    )
    formatter.add_section_header(f"THEMES ({len(catalog)})")
    formatter.add_table_header()
    formatter.add_separator()
    for theme in catalog:
        marker = " *" if theme.id == catalog.default_id else ""
        formatter.add_row(
            [
                theme.id + marker,
                theme.name,
                rgb_to_hex(theme.primary_color),
                rgb_to_hex(theme.accent_color),
                theme.font_family,
            ]
        )
    formatter.add_blank_line()
    formatter.add_text("* default theme (used for unknown ids)")

    typer.echo(formatter.render())


if __name__ == "__main__":
    app()
