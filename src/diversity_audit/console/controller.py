from __future__ import annotations

import logging
from typing import Callable

from ..core.constants import MAX_INCLUSION_SCORE, MIN_INCLUSION_SCORE
from ..core.exceptions import DomainError
from ..employees.model import Employee
from ..roster.service import RecordManager
from . import views
from .prompts import Console

logger = logging.getLogger(__name__)

MENU = (
    "",
    "--- Diversity & Inclusion Audit Tool ---",
    "1. Add Employee",
    "2. Display Employees",
    "3. Search Employee",
    "4. Update Employee",
    "5. Delete Employee",
    "6. Add Audit Record",
    "7. Display Audits for Employee",
    "8. Compute D&I Metrics",
    "9. Exit",
)
EXIT_CHOICE = 9


def run_menu(manager: RecordManager, console: Console, *, debug: bool = False) -> None:
    """Serve the numbered menu until the user exits or input runs out."""

    def show(lines) -> None:
        for line in lines:
            console.write(line)

    def add_employee() -> None:
        employee_id = console.ask("Enter ID: ")
        name = console.ask("Enter Name: ")
        age = console.read_int("Enter Age: ")
        gender = console.ask("Enter Gender (Male/Female/Non-binary/Other): ")
        ethnicity = console.ask("Enter Ethnicity: ")
        has_disability = console.read_yes_no("Has disability? (yes/no): ")
        manager.add(
            Employee(
                employee_id=employee_id,
                name=name,
                age=age,
                gender=gender,
                ethnicity=ethnicity,
                has_disability=has_disability,
            )
        )
        console.write("Employee added.")

    def display_employees() -> None:
        show(views.employee_table(manager.list_employees()))

    def search_employee() -> None:
        employee = manager.find(console.ask("Enter ID to search: "))
        console.write(views.employee_summary(employee) if employee else "Employee not found.")

    def update_employee() -> None:
        employee_id = console.ask("Enter ID to update: ")
        current = manager.find(employee_id)
        if current is None:
            console.write("Employee not found.")
            return
        manager.update(
            employee_id,
            name=console.ask(f"Enter new name [{current.name}]: "),
            age=console.read_optional_int(f"Enter new age [{current.age}]: "),
            gender=console.ask(f"Enter new gender [{current.gender}]: "),
            ethnicity=console.ask(f"Enter new ethnicity [{current.ethnicity}]: "),
            has_disability=console.read_optional_yes_no(
                f"Has disability? (yes/no) [{'yes' if current.has_disability else 'no'}]: "
            ),
        )
        console.write("Employee updated.")

    def delete_employee() -> None:
        manager.delete(console.ask("Enter ID to delete: "))
        console.write("Employee and their audit records deleted.")

    def add_audit() -> None:
        employee_id = console.ask("Enter Employee ID for audit: ")
        if manager.find(employee_id) is None:
            console.write("Employee not found. Cannot add audit.")
            return
        auditor = console.ask("Enter Auditor name: ")
        audit_date = console.read_optional_date("Enter date (YYYY-MM-DD) or leave blank for today: ")
        score = console.read_int_in_range(
            f"Enter inclusion score ({MIN_INCLUSION_SCORE}-{MAX_INCLUSION_SCORE}): ",
            MIN_INCLUSION_SCORE,
            MAX_INCLUSION_SCORE,
        )
        notes = console.ask("Enter notes: ")
        manager.add_audit(employee_id, auditor=auditor, audit_date=audit_date, score=score, notes=notes)
        console.write("Audit record saved.")

    def display_audits() -> None:
        employee_id = console.ask("Enter Employee ID to view audits: ")
        show(views.audit_listing(employee_id, manager.list_audits(employee_id)))

    def compute_metrics() -> None:
        show(views.metrics_report(manager.compute_metrics()))

    actions: dict[int, Callable[[], None]] = {
        1: add_employee,
        2: display_employees,
        3: search_employee,
        4: update_employee,
        5: delete_employee,
        6: add_audit,
        7: display_audits,
        8: compute_metrics,
    }

    while True:
        show(MENU)
        try:
            raw = console.ask("Enter choice: ")
        except EOFError:
            console.write("Exiting...")
            return

        try:
            choice = int(raw)
        except ValueError:
            console.write("Invalid input. Enter a number.")
            continue

        if choice == EXIT_CHOICE:
            console.write("Exiting...")
            return

        action = actions.get(choice)
        if action is None:
            console.write("Invalid choice.")
            continue

        try:
            action()
        except EOFError:
            console.write("Exiting...")
            return
        except DomainError as e:
            console.write(str(e))
        except Exception as e:
            logger.exception("menu action %s failed", choice)
            if debug:
                console.write(f"Unexpected error: {e}")
            else:
                console.write("Unexpected error, see log for details.")
