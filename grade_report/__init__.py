"""
Grade Report - validate student score files and produce grade reports.

This package reads comma-delimited student records, validates every line
(fail-fast on the first bad one), derives letter grades from fixed score bands
and writes a plain-text report with per-student lines and a grade distribution.

- `grade_report.parser`: line parsing and validation
- `grade_report.formatter`: report text and grade distribution
- `grade_report.pipeline`: load/write orchestration
- `grade_report.main`: command-line interface
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from grade_report.config import Settings, get_settings
from grade_report.domain import (
    GRADE_BANDS,
    ErrorKind,
    GradeBand,
    GradeReportError,
    StudentRecord,
    get_grade,
)
from grade_report.formatter import format_report, grade_distribution
from grade_report.parser import parse_line, parse_lines
from grade_report.pipeline import PipelineResult, load_students, run_pipeline, write_report
from grade_report.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "GRADE_BANDS",
    "ErrorKind",
    "GradeBand",
    "GradeReportError",
    "StudentRecord",
    "get_grade",
    # Pipeline
    "PipelineResult",
    "format_report",
    "grade_distribution",
    "load_students",
    "parse_line",
    "parse_lines",
    "run_pipeline",
    "write_report",
    # Logging
    "configure_logging",
    "get_logger",
]
