"""
Error taxonomy for the Grade Report pipeline.

Every failure surfaces as a single exception type tagged with an ErrorKind so
callers branch on the kind rather than on exception classes.
"""
from __future__ import annotations

import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    MISSING_FIELD = "missing_field"
    INVALID_FORMAT = "invalid_format"
    RESOURCE_ERROR = "resource_error"
    UNEXPECTED = "unexpected"


class GradeReportError(Exception):
    """
    Failure raised by the parser or the pipeline.

    Attributes
    ----------
    kind : ErrorKind
        Category of the failure.
    message : str
        Human-readable description, already prefixed with the line number when
        one applies.
    line_number : int | None
        1-based physical line number in the input file, if the error is tied
        to a line.
    """

    def __init__(self, kind: ErrorKind, message: str, line_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.line_number = line_number

    def __repr__(self) -> str:
        return (
            f"GradeReportError(kind={self.kind.name}, message={self.message!r}, "
            f"line_number={self.line_number!r})"
        )


__all__ = ["ErrorKind", "GradeReportError"]
