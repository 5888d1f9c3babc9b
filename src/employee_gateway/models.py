r"""Data structures exchanged with the upstream employee API.

The gateway never inspects most employee fields; it only reshapes the
upstream representation (``employee_*`` keys) into plain field names.
"""

from __future__ import annotations

__all__ = ["CreateEmployeeInput", "Employee"]

from dataclasses import asdict, dataclass
from typing import Any

# Upstream key aliases accepted when parsing an employee
_ALIASES = {
    "name": "employee_name",
    "salary": "employee_salary",
    "age": "employee_age",
    "title": "employee_title",
    "email": "employee_email",
}


@dataclass(frozen=True)
class Employee:
    """An employee as returned by the upstream API.

    Attributes:
        id: Upstream identifier (a UUID string).
        name: Full name.
        salary: Yearly salary.
        age: Age in years.
        title: Job title.
        email: Email address.

    Example:
        ```pycon
        >>> from employee_gateway.models import Employee
        >>> employee = Employee.from_dict(
        ...     {"id": "4a3a", "employee_name": "Jane Smith", "employee_salary": 80000}
        ... )
        >>> employee.name, employee.salary
        ('Jane Smith', 80000)
        >>> employee.to_dict()["name"]
        'Jane Smith'

        ```
    """

    id: str | None = None
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Employee:
        """Create an employee from an upstream JSON object.

        Both plain (``name``) and upstream (``employee_name``) keys are
        accepted; plain keys win when both are present.
        """
        values: dict[str, Any] = {"id": data.get("id")}
        for field_name, alias in _ALIASES.items():
            values[field_name] = data.get(field_name, data.get(alias))
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the employee with plain field names."""
        return asdict(self)


@dataclass(frozen=True)
class CreateEmployeeInput:
    """Input used to create an employee upstream.

    Validation happens in
    ``employee_gateway.core.validation.validate_employee_input``.
    """

    name: str | None
    salary: int | None
    age: int | None
    title: str | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
