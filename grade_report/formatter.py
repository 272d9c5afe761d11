"""
Plain-text grade report formatting.

The report layout is a presentation contract: the literal headings and line
shapes below are what downstream readers and tests compare against.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Sequence

from grade_report.domain.models import GRADE_LETTERS, StudentRecord

REPORT_TITLE = "=== Student Grade Report ==="
DISTRIBUTION_TITLE = "=== Grade Distribution ==="
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def grade_distribution(students: Sequence[StudentRecord]) -> Dict[str, int]:
    """Count students per letter grade, A through F, zero counts included."""
    counts: Dict[str, int] = {letter: 0 for letter in GRADE_LETTERS}
    for student in students:
        counts[student.grade] += 1
    return counts


def format_report(students: Sequence[StudentRecord], generated_at: datetime) -> str:
    """
    Render the full report text, one `\\n`-terminated line per entry.

    Students are listed in input order. No validation is performed.
    """
    lines: List[str] = [
        REPORT_TITLE,
        f"Generated on: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"Total Students: {len(students)}",
        "",
    ]
    lines.extend(str(student) for student in students)
    lines.append("")
    lines.append(DISTRIBUTION_TITLE)
    lines.extend(
        f"{letter}: {count} students" for letter, count in grade_distribution(students).items()
    )
    return "\n".join(lines) + "\n"


__all__ = [
    "DISTRIBUTION_TITLE",
    "REPORT_TITLE",
    "TIMESTAMP_FORMAT",
    "format_report",
    "grade_distribution",
]
