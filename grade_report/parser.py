"""
Line parser and validator for student input files.

Each physical line is either blank (skipped) or must hold exactly
`id,name,score`. The first invalid line aborts the whole parse; no partial
result is ever returned.

Usage:
    from grade_report.parser import parse_lines

    students = parse_lines(["101,Alice Smith,84", "", "102,Bob Johnson,76"])
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from grade_report.domain.errors import ErrorKind, GradeReportError
from grade_report.domain.models import MAX_SCORE, MIN_SCORE, StudentRecord
from grade_report.utils.logging import get_logger

log = get_logger(__name__)

FIELD_DELIMITER = ","
EXPECTED_FIELD_COUNT = 3

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str) -> Optional[int]:
    # int() alone would also accept "1_000" and non-ASCII digits
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return None


def parse_line(line: str, line_number: int) -> Optional[StudentRecord]:
    """
    Parse one raw input line into a StudentRecord.

    Parameters
    ----------
    line : str
        Line content without its terminator.
    line_number : int
        1-based physical line number, used in error messages.

    Returns
    -------
    StudentRecord | None
        The parsed record, or None when the line is empty or whitespace-only.

    Raises
    ------
    GradeReportError
        MISSING_FIELD or INVALID_FORMAT when the line is not a valid record.
    """
    if not line.strip():
        return None

    fields = line.split(FIELD_DELIMITER)
    if len(fields) != EXPECTED_FIELD_COUNT:
        raise GradeReportError(
            ErrorKind.MISSING_FIELD,
            f"Line {line_number}: Expected {EXPECTED_FIELD_COUNT}, found {len(fields)} fields. "
            f"Line content: '{line}'",
            line_number,
        )

    raw_id, full_name, raw_score = (field.strip() for field in fields)

    student_id = _parse_int(raw_id)
    if student_id is None:
        raise GradeReportError(
            ErrorKind.INVALID_FORMAT,
            f"Line {line_number}: Invalid ID format '{raw_id}'",
            line_number,
        )

    if not full_name:
        raise GradeReportError(
            ErrorKind.MISSING_FIELD,
            f"Line {line_number}: Student name is missing or empty",
            line_number,
        )

    score = _parse_int(raw_score)
    if score is None:
        raise GradeReportError(
            ErrorKind.INVALID_FORMAT,
            f"Line {line_number}: Invalid score format '{raw_score}'",
            line_number,
        )

    if not MIN_SCORE <= score <= MAX_SCORE:
        raise GradeReportError(
            ErrorKind.INVALID_FORMAT,
            f"Line {line_number}: Score {score} is out of valid range ({MIN_SCORE}-{MAX_SCORE})",
            line_number,
        )

    return StudentRecord(id=student_id, full_name=full_name, score=score)


def parse_lines(lines: Iterable[str]) -> List[StudentRecord]:
    """
    Parse lines in order, numbering every physical line from 1.

    Trailing line terminators are removed before parsing. Raises on the first
    invalid line.
    """
    students: List[StudentRecord] = []
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        try:
            record = parse_line(line, line_number)
        except GradeReportError:
            raise
        except Exception as exc:  # noqa: BLE001 - attach line context to anything else
            raise GradeReportError(
                ErrorKind.UNEXPECTED,
                f"Line {line_number}: Unexpected error - {exc}",
                line_number,
            ) from exc
        if record is None:
            log.debug("Skipping blank line", extra={"line_number": line_number})
            continue
        students.append(record)
    return students


__all__ = ["EXPECTED_FIELD_COUNT", "FIELD_DELIMITER", "parse_line", "parse_lines"]
