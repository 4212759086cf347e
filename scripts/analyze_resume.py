#!/usr/bin/env python3
"""
Resume Analysis CLI

Scores a resume against a job description and rewrites weak wording.

Commands:
    score    - Print the ATS score report (heuristic, or AI-first with --ai)
    improve  - Write an improved resume (rule-based, or AI-first with --ai)

Examples:\n

    analyze_resume.py score resume.txt --jd-file job.txt            # Heuristic report

    analyze_resume.py score resume.txt --jd "Python, AWS, Docker"   # Inline job description

    analyze_resume.py score resume.txt --jd-file job.txt --ai       # Try the LLM first

    analyze_resume.py score resume.txt --jd-file job.txt --json     # Machine-readable output

    analyze_resume.py improve resume.txt --jd-file job.txt -o improved.txt
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from resumeforge import pipeline
from resumeforge.contexts.intake.exceptions import TextExtractionError
from resumeforge.contexts.intake.text_extraction import read_text_file
from resumeforge.contexts.scoring.analyzers import HeuristicAnalyzer, LLMAnalyzer
from resumeforge.contexts.scoring.improver import LLMImprover, RuleBasedImprover
from resumeforge.contexts.scoring.logger import setup_scoring_logger
from resumeforge.contexts.scoring.report_summary import format_score_report

app = typer.Typer(
    help="Score resumes against job descriptions and improve their wording",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _read_inputs(resume_file: Path, jd_file: Optional[Path], jd_text: Optional[str]):
    """Load resume and job description text, exiting with an error message on failure."""
    if (jd_file is None) == (jd_text is None):
        typer.secho(
            "Error: provide exactly one of --jd-file or --jd\n", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    try:
        resume_text = read_text_file(resume_file)
        job_description = read_text_file(jd_file) if jd_file else jd_text
    except TextExtractionError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    return resume_text, job_description


ResumeFileArg = Annotated[
    Path,
    typer.Argument(help="Resume text file (.txt or .md)", exists=True, dir_okay=False),
]
JobFileOpt = Annotated[
    Optional[Path],
    typer.Option(
        "--jd-file", "-j", help="Job description text file", exists=True, dir_okay=False
    ),
]
JobTextOpt = Annotated[
    Optional[str],
    typer.Option("--jd", help="Job description text (instead of --jd-file)"),
]
UseAIOpt = Annotated[
    bool,
    typer.Option("--ai", help="Try the LLM provider first, falling back to local rules"),
]
ProviderOpt = Annotated[
    Optional[str],
    typer.Option("--provider", help="LLM provider: openai or anthropic (default: LLM_PROVIDER)"),
]
ModelOpt = Annotated[
    Optional[str],
    typer.Option("--model", help="LLM model (default: provider default)"),
]
LogDirOpt = Annotated[
    Optional[Path],
    typer.Option("--log-dir", help="Session log directory (default: new folder under LOGS_PATH)"),
]


@app.command("score")
def score_command(
    resume_file: ResumeFileArg,
    jd_file: JobFileOpt = None,
    jd_text: JobTextOpt = None,
    use_ai: UseAIOpt = False,
    provider: ProviderOpt = None,
    model: ModelOpt = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON instead of a table"),
    ] = False,
    log_dir: LogDirOpt = None,
):
    """
    Score a resume against a job description.

    Examples:\n

        $ analyze_resume.py score resume.txt --jd-file job.txt

        $ analyze_resume.py score resume.txt --jd-file job.txt --ai --provider anthropic
    """
    resume_text, job_description = _read_inputs(resume_file, jd_file, jd_text)

    # JSON output stays clean on stdout; logs go to loguru's default stderr sink
    log_file = None if json_output else setup_scoring_logger(log_dir)

    analyzer = (
        LLMAnalyzer(provider_name=provider, model=model) if use_ai else HeuristicAnalyzer()
    )
    report = pipeline.analyze(resume_text, job_description, analyzer=analyzer)

    if json_output:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    typer.echo("")
    typer.echo(format_score_report(report, title=f"ATS SCORE REPORT: {resume_file.name}"))
    typer.echo("")
    typer.echo(f"  Log: {log_file}")
    typer.echo("")


@app.command("improve")
def improve_command(
    resume_file: ResumeFileArg,
    jd_file: JobFileOpt = None,
    jd_text: JobTextOpt = None,
    use_ai: UseAIOpt = False,
    provider: ProviderOpt = None,
    model: ModelOpt = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the improved resume here (default: stdout)"),
    ] = None,
    log_dir: LogDirOpt = None,
):
    """
    Rewrite weak phrasing in a resume.

    Without --ai, weak phrases ("responsible for", "worked on", ...) are replaced
    by strong action verbs. With --ai the LLM rewrites the resume using the
    heuristic report's findings, falling back to the rule-based rewrite.

    Examples:\n

        $ analyze_resume.py improve resume.txt --jd-file job.txt -o improved.txt
    """
    resume_text, job_description = _read_inputs(resume_file, jd_file, jd_text)
    if output is not None:
        setup_scoring_logger(log_dir)

    improver = LLMImprover(provider_name=provider, model=model) if use_ai else RuleBasedImprover()
    report = pipeline.score(resume_text, job_description)
    improved = pipeline.improve(resume_text, job_description, report, improver=improver)

    if output is None:
        typer.echo(improved)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(improved.rstrip() + "\n", encoding="utf-8")
    typer.secho("✓ Improved resume written", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {output}")
    typer.echo(f"  Score before: {report.composite_score} ({report.rating})")
    after = pipeline.score(improved, job_description)
    typer.echo(f"  Score after:  {after.composite_score} ({after.rating})")


if __name__ == "__main__":
    app()
