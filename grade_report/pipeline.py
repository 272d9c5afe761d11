"""
Pipeline orchestrator: load student records, then write the grade report.

Usage (example from CLI):
    from grade_report.pipeline import run_pipeline

    result = run_pipeline("students.txt", "grade_report.txt")
    print(result.distribution)

Loading is fail-fast: the first invalid line aborts the run and no report is
written. Writing truncates and recreates the destination.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from grade_report.domain.errors import ErrorKind, GradeReportError
from grade_report.domain.models import StudentRecord
from grade_report.formatter import format_report, grade_distribution
from grade_report.parser import parse_lines
from grade_report.utils.logging import get_logger
from grade_report.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

# utf-8-sig drops a leading byte-order mark when reading
INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"

Clock = Callable[[], datetime]


@dataclass
class PipelineResult:
    """Outcome of a successful pipeline run."""

    students: List[StudentRecord]
    output_path: Path
    distribution: Dict[str, int]
    stats: ProfileStats = field(repr=False)


def load_students(input_path: Path | str) -> List[StudentRecord]:
    """
    Read and validate every record of the input file.

    Raises
    ------
    GradeReportError
        RESOURCE_ERROR when the file is missing, unreadable or not valid
        UTF-8; MISSING_FIELD, INVALID_FORMAT or UNEXPECTED for the first bad
        line.
    """
    path = Path(input_path)
    log.info("Reading student data", extra={"input_path": str(path)})
    try:
        with path.open("r", encoding=INPUT_ENCODING) as f:
            students = parse_lines(f)
    except FileNotFoundError as exc:
        raise GradeReportError(
            ErrorKind.RESOURCE_ERROR, f"Input file not found: '{path}'"
        ) from exc
    except UnicodeDecodeError as exc:
        raise GradeReportError(
            ErrorKind.RESOURCE_ERROR, f"Input file '{path}' is not valid UTF-8: {exc.reason}"
        ) from exc
    except OSError as exc:
        raise GradeReportError(
            ErrorKind.RESOURCE_ERROR, f"Cannot read input file '{path}': {exc.strerror or exc}"
        ) from exc

    log.info(
        "Student data loaded",
        extra={"input_path": str(path), "records": len(students)},
    )
    return students


def write_report(
    students: Sequence[StudentRecord],
    output_path: Path | str,
    generated_at: Optional[datetime] = None,
    clock: Clock = datetime.now,
) -> Path:
    """
    Render the report and write it to `output_path`, replacing any existing file.

    Parameters
    ----------
    students : Sequence[StudentRecord]
        Records in input order.
    output_path : Path | str
        Destination file.
    generated_at : datetime | None
        Timestamp printed in the header. Defaults to `clock()`.
    clock : Callable[[], datetime]
        Wall-clock source used when `generated_at` is not given.

    Returns
    -------
    Path
        The path written.
    """
    path = Path(output_path)
    text = format_report(students, generated_at or clock())
    try:
        with path.open("w", encoding=OUTPUT_ENCODING, newline="\n") as f:
            f.write(text)
    except OSError as exc:
        raise GradeReportError(
            ErrorKind.RESOURCE_ERROR, f"Cannot write report to '{path}': {exc.strerror or exc}"
        ) from exc

    log.info("Report written", extra={"output_path": str(path), "records": len(students)})
    return path


def run_pipeline(
    input_path: Path | str,
    output_path: Path | str,
    generated_at: Optional[datetime] = None,
) -> PipelineResult:
    """
    Load students from `input_path` and write the report to `output_path`.

    Any GradeReportError is logged and propagated; the destination is left
    untouched when loading fails.
    """
    with profile_block("grade-report") as stats:
        try:
            students = load_students(input_path)
            written = write_report(students, output_path, generated_at=generated_at)
        except GradeReportError as exc:
            log.error(
                f"[PIPELINE FAILED] {exc.message}",
                extra={"kind": exc.kind.value, "line_number": exc.line_number},
            )
            raise

    log.info(
        "[PIPELINE COMPLETE]",
        extra={
            "records": len(students),
            "duration": round(stats.duration_seconds, 4),
            "peak_rss_bytes": stats.peak_rss_bytes,
        },
    )
    return PipelineResult(
        students=students,
        output_path=written,
        distribution=grade_distribution(students),
        stats=stats,
    )


__all__ = [
    "PipelineResult",
    "load_students",
    "run_pipeline",
    "write_report",
]
