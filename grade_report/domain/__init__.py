"""
Domain package for the Grade Report pipeline.

Exports the record model, grade bands and the error taxonomy used across the
parser, formatter and pipeline. Keep this package focused on data definitions
and validation concerns.
"""

from grade_report.domain.errors import ErrorKind, GradeReportError
from grade_report.domain.models import (
    GRADE_BANDS,
    GRADE_LETTERS,
    GradeBand,
    StudentRecord,
    get_grade,
)

__all__ = [
    "ErrorKind",
    "GRADE_BANDS",
    "GRADE_LETTERS",
    "GradeBand",
    "GradeReportError",
    "StudentRecord",
    "get_grade",
]
