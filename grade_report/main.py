from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Optional

import typer

from grade_report.config import get_settings
from grade_report.domain.errors import ErrorKind, GradeReportError
from grade_report.pipeline import run_pipeline
from grade_report.reporter import print_summary
from grade_report.utils.logging import configure_logging

app = typer.Typer(help="Student grade report CLI.")

_ERROR_LABELS: Dict[ErrorKind, str] = {
    ErrorKind.RESOURCE_ERROR: "File Error",
    ErrorKind.MISSING_FIELD: "Missing Field Error",
    ErrorKind.INVALID_FORMAT: "Score Format Error",
    ErrorKind.UNEXPECTED: "Unexpected Error",
}


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"input={settings.input_path} output={settings.output_path} | "
        f"env={settings.app_env} log_level={settings.log_level} json_logs={settings.log_json}"
    )


@app.command()
def run(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Student records file (default from settings).",
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report destination, overwritten if present (default from settings).",
    ),
    summary: bool = typer.Option(
        True,
        "--summary/--no-summary",
        help="Print a table of processed students after the report is written.",
    ),
) -> None:
    """
    Read student records, grade them and write the report.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    source = input_path or settings.input_path
    destination = output_path or settings.output_path

    typer.echo(f"Reading student data from '{source}'...")
    try:
        result = run_pipeline(source, destination)
    except GradeReportError as exc:
        typer.echo(f"{_ERROR_LABELS[exc.kind]}: {exc.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Successfully read {len(result.students)} student records.")
    typer.echo("Report generated successfully!")
    typer.echo(f"Completed in {result.stats.duration_seconds:.3f}s.")
    if summary:
        print_summary(result.students)
    typer.echo(f"Detailed report saved to: {result.output_path}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
