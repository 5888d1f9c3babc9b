r"""Pure read operations computed from a list of employees.

These functions are applied to the result of a single retried fetch of
all employees, so they inherit its failure behavior and never call the
upstream API themselves.
"""

from __future__ import annotations

__all__ = ["TOP_EARNERS_LIMIT", "highest_salary", "search_by_name", "top_earner_names"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from employee_gateway.models import Employee

TOP_EARNERS_LIMIT = 10


def search_by_name(employees: Sequence[Employee], query: str) -> list[Employee]:
    """Return the employees whose name contains the query.

    Matching is case-insensitive and preserves the input order.
    Employees without a name never match.

    Example:
        ```pycon
        >>> from employee_gateway.models import Employee
        >>> from employee_gateway.operations import search_by_name
        >>> employees = [Employee(name="John Doe"), Employee(name="Jane Smith"), Employee()]
        >>> [e.name for e in search_by_name(employees, "JOHN")]
        ['John Doe']

        ```
    """
    needle = query.lower()
    return [e for e in employees if e.name is not None and needle in e.name.lower()]


def highest_salary(employees: Sequence[Employee]) -> int:
    """Return the highest non-null salary, or 0 if there is none.

    Example:
        ```pycon
        >>> from employee_gateway.models import Employee
        >>> from employee_gateway.operations import highest_salary
        >>> highest_salary([Employee(salary=50000), Employee(salary=80000), Employee()])
        80000
        >>> highest_salary([])
        0

        ```
    """
    return max((e.salary for e in employees if e.salary is not None), default=0)


def top_earner_names(
    employees: Sequence[Employee], limit: int = TOP_EARNERS_LIMIT
) -> list[str | None]:
    """Return the names of the best paid employees, highest first.

    Employees without a salary are excluded. Ties keep the input order.

    Args:
        employees: The employees to rank.
        limit: Maximum number of names returned.

    Returns:
        Up to ``limit`` names sorted by descending salary.
    """
    paid = [e for e in employees if e.salary is not None]
    # sorted() is stable, and reverse=True keeps ties in input order
    ranked = sorted(paid, key=lambda e: e.salary, reverse=True)
    return [e.name for e in ranked[:limit]]
