from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Employee:
    """Domain entity: a roster entry.

    Mutable on purpose: the record manager updates roster entries in place.
    """

    employee_id: str
    name: str
    age: int
    gender: str
    ethnicity: str
    has_disability: bool = False

    @property
    def disability_label(self) -> str:
        return "Yes" if self.has_disability else "No"
