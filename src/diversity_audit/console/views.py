from __future__ import annotations

from typing import Sequence

from ..audits.model import AuditRecord
from ..common.datetime_utils import format_iso_date
from ..employees.model import Employee
from ..metrics.model import DiversityMetrics

_ROW_FORMAT = "{:<10} {:<20} {:<5} {:<12} {:<15} {:<10}"


def employee_table(employees: Sequence[Employee]) -> list[str]:
    if not employees:
        return ["No employees found."]
    lines = [_ROW_FORMAT.format("ID", "Name", "Age", "Gender", "Ethnicity", "Disability")]
    for e in employees:
        lines.append(_ROW_FORMAT.format(e.employee_id, e.name, e.age, e.gender, e.ethnicity, e.disability_label))
    return lines


def employee_summary(e: Employee) -> str:
    return (
        f"Found - ID: {e.employee_id}, Name: {e.name}, Age: {e.age}, Gender: {e.gender}, "
        f"Ethnicity: {e.ethnicity}, Disability: {e.disability_label}"
    )


def audit_listing(employee_id: str, audits: Sequence[AuditRecord]) -> list[str]:
    if not audits:
        return [f"No audit records for employee {employee_id}"]
    lines: list[str] = []
    for a in audits:
        lines.extend(
            [
                "----",
                f"Date: {format_iso_date(a.audit_date)}",
                f"Auditor: {a.auditor}",
                f"Inclusion Score: {a.inclusion_score}",
                f"Notes: {a.notes}",
            ]
        )
    return lines


def metrics_report(m: DiversityMetrics) -> list[str]:
    lines = ["=== Employee Diversity Snapshot ===", f"Total employees: {m.total_employees}"]
    if m.total_employees > 0:
        for g in m.genders:
            lines.append(f"{g.label}: {g.count} ({g.percent:.1f}%)")
        lines.append(f"{m.disability.label}: {m.disability.count} ({m.disability.percent:.1f}%)")

    lines.append("")
    lines.append("=== Inclusion Score Metrics (from audit records) ===")
    if m.average_score is None:
        lines.append("No audit scores available.")
    else:
        lines.append(f"Average Inclusion Score: {m.average_score:.2f} (based on {m.score_count} records)")

    lines.append("")
    lines.append("=== Ethnicity Breakdown ===")
    if not m.ethnicities:
        lines.append("No ethnicity data.")
    for row in m.ethnicities:
        lines.append(f"{row.label}: {row.count} ({row.percent:.1f}%)")
    return lines
