#!/usr/bin/env python3
"""
Resume Builder CLI

Assembles resume text from a YAML form (personal details, skills, experience,
education, projects, certifications) and optionally renders it straight away.

Example form (resume_form.yaml):\n

    name: Jane Doe
    title: Backend Engineer
    email: jane@example.com
    phone: 555-123-4567
    skills: [Python, PostgreSQL, Docker]
    experience:
      - role: Software Engineer
        company: Acme
        startDate: 2020
        endDate: Present
        bullets:
          - Developed billing APIs serving 2M requests per day

Examples:\n

    build_resume.py resume_form.yaml                          # Print resume text

    build_resume.py resume_form.yaml -o resume.txt            # Write resume text

    build_resume.py resume_form.yaml -o resume.txt --render pdf --theme tech-green
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge import pipeline
from resumeforge.contexts.rendering.exceptions import SerializationError, UnsupportedFormatError
from resumeforge.contexts.rendering.themes import DEFAULT_THEME_ID
from resumeforge.contexts.templating.exceptions import FormDataError, TemplateRenderError
from resumeforge.contexts.templating.logger import setup_templating_logger
from resumeforge.contexts.templating.resume_builder import load_form_data

app = typer.Typer(
    help="Build resume text from a YAML form",
    add_completion=False,
)


@app.command()
def build(
    form_file: Annotated[
        Path,
        typer.Argument(help="YAML (or JSON) form data file", exists=True, dir_okay=False),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write resume text here (default: stdout)"),
    ] = None,
    render_format: Annotated[
        Optional[str],
        typer.Option("--render", "-r", help="Also render to this format (pdf, docx, txt)"),
    ] = None,
    theme_id: Annotated[
        str,
        typer.Option("--theme", "-t", help="Theme id for --render"),
    ] = DEFAULT_THEME_ID,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Session log directory (default: new folder under LOGS_PATH)"),
    ] = None,
):
    """Build resume text from form data and report which parts are filled in."""
    if render_format and output is None:
        typer.secho("Error: --render requires --output\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is not None:
        setup_templating_logger(log_dir)

    try:
        form = load_form_data(form_file)
        text = pipeline.build(form)
    except (FormDataError, TemplateRenderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.secho("✓ Resume built", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {output}")

    typer.echo("\nForm completion:")
    for part, done in form.completion_status().items():
        mark = "✓" if done else "✗"
        typer.secho(
            f"  {mark} {part}", fg=typer.colors.GREEN if done else typer.colors.YELLOW
        )

    if render_format:
        try:
            data = pipeline.render(text, theme_id, render_format)
        except (UnsupportedFormatError, SerializationError) as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        rendered_path = output.with_suffix(f".{render_format.lower().lstrip('.')}")
        rendered_path.write_bytes(data)
        typer.echo(f"\n  Rendered: {rendered_path} ({len(data):,} bytes)")


if __name__ == "__main__":
    app()
