from __future__ import annotations

from datetime import date

from diversity_audit.console.controller import run_menu
from diversity_audit.console.prompts import Console


class ScriptedConsole(Console):
    def __init__(self, answers):
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []
        super().__init__(input_fn=self._next, output_fn=self.lines.append)

    def _next(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def test_read_int_reprompts_until_valid():
    console = ScriptedConsole(["abc", "", "42"])

    assert console.read_int("Age: ") == 42
    assert console.prompts[1:] == ["Enter a valid integer: ", "Enter a valid integer: "]


def test_read_int_in_range_reprompts():
    console = ScriptedConsole(["150", "-3", "99"])

    assert console.read_int_in_range("Score: ", 0, 100) == 99


def test_read_yes_no_accepts_short_forms():
    console = ScriptedConsole(["maybe", "Y"])

    assert console.read_yes_no("Disabled? ") is True
    assert console.prompts[-1] == "Please answer yes or no: "


def test_read_optional_date_blank_and_malformed():
    assert ScriptedConsole([""]).read_optional_date("Date: ") is None
    assert ScriptedConsole(["2025-13-01", "2025-02-03"]).read_optional_date("Date: ") == date(2025, 2, 3)


def test_menu_add_and_display(manager):
    console = ScriptedConsole(["1", "E010", "Dana", "x", "28", "Female", "Maori", "no", "2", "9"])

    run_menu(manager, console)

    assert manager.find("E010").age == 28
    assert "Employee added." in console.lines
    assert any(line.startswith("E010") and "Dana" in line for line in console.lines)
    assert console.lines[-1] == "Exiting..."


def test_menu_duplicate_add_reports_error(manager):
    console = ScriptedConsole(["1", "E001", "Other", "40", "Male", "", "n", "9"])

    run_menu(manager, console)

    assert "Employee with this ID already exists." in console.lines
    assert manager.find("E001").name == "Alice"


def test_menu_update_blank_keeps_values(manager):
    console = ScriptedConsole(["4", "E003", "", "", "", "Korean", "", "9"])

    run_menu(manager, console)

    e = manager.find("E003")
    assert (e.name, e.age, e.gender, e.ethnicity, e.has_disability) == ("Sam", 29, "Non-binary", "Korean", False)
    assert "Enter new name [Sam]: " in console.prompts


def test_menu_audit_for_unknown_employee(manager, audits_repo):
    console = ScriptedConsole(["6", "E999", "9"])

    run_menu(manager, console)

    assert "Employee not found. Cannot add audit." in console.lines
    assert audits_repo.records == []


def test_menu_add_audit_then_list(manager):
    console = ScriptedConsole(["6", "E001", "Ann", "2025-04-01", "101", "88", "fine", "7", "E001", "9"])

    run_menu(manager, console)

    assert "Audit record saved." in console.lines
    assert "Date: 2025-04-01" in console.lines
    assert "Inclusion Score: 88" in console.lines


def test_menu_metrics_and_invalid_choices(manager):
    console = ScriptedConsole(["x", "12", "8"])

    run_menu(manager, console)

    assert "Invalid input. Enter a number." in console.lines
    assert "Invalid choice." in console.lines
    assert "Employees with disability: 1 (25.0%)" in console.lines
    assert "No audit scores available." in console.lines
    assert console.lines[-1] == "Exiting..."


def test_menu_delete_and_search(manager):
    console = ScriptedConsole(["5", "E002", "3", "E002", "5", "E002", "9"])

    run_menu(manager, console)

    assert "Employee and their audit records deleted." in console.lines
    assert console.lines.count("Employee not found.") == 2


def test_menu_unexpected_error_keeps_running(manager, employees_repo):
    def boom(_employee):
        raise RuntimeError("store down")

    employees_repo.update = boom
    console = ScriptedConsole(["4", "E001", "Al", "", "", "", "", "9"])

    run_menu(manager, console)

    assert "Unexpected error, see log for details." in console.lines
    assert manager.find("E001").name == "Alice"
    assert console.lines[-1] == "Exiting..."
