from __future__ import annotations

from typing import Dict, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from grade_report.domain.models import StudentRecord
from grade_report.formatter import grade_distribution

_GRADE_STYLES: Dict[str, str] = {
    "A": "bold green",
    "B": "green",
    "C": "yellow",
    "D": "dark_orange",
    "F": "bold red",
}


def print_summary(
    students: Sequence[StudentRecord], console: Optional[Console] = None
) -> None:
    """
    Render processed students and the grade distribution as rich tables.

    Students keep their input order; the distribution always lists A to F.
    """
    console = console or Console()

    if not students:
        console.print("[yellow]No student records to display.[/yellow]")
        return

    table = Table(
        title="Processing Summary",
        box=box.ROUNDED,
        caption=f"Total Students: {len(students)}",
    )
    table.add_column("ID", justify="right", style="magenta", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Score", justify="right", style="blue")
    table.add_column("Grade", justify="center")

    for student in students:
        grade = student.grade
        table.add_row(
            str(student.id),
            student.full_name,
            str(student.score),
            f"[{_GRADE_STYLES[grade]}]{grade}[/]",
        )

    distribution = Table(title="Grade Distribution", box=box.SIMPLE)
    distribution.add_column("Grade", justify="center")
    distribution.add_column("Students", justify="right", style="bold")
    for letter, count in grade_distribution(students).items():
        distribution.add_row(f"[{_GRADE_STYLES[letter]}]{letter}[/]", str(count))

    console.print(table)
    console.print(distribution)
