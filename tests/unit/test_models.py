from __future__ import annotations

from coola.equality import objects_are_equal

from employee_gateway.models import CreateEmployeeInput, Employee
from tests.helpers import EMPLOYEE_ID, make_employee_payload

##############################
#     Tests for Employee     #
##############################


def test_employee_from_dict_upstream_keys() -> None:
    assert Employee.from_dict(make_employee_payload()) == Employee(
        id=EMPLOYEE_ID,
        name="John Doe",
        salary=50000,
        age=30,
        title="Engineer",
        email="john@company.com",
    )


def test_employee_from_dict_plain_keys() -> None:
    employee = Employee.from_dict({"id": "1", "name": "Ann", "salary": 10, "age": 20})
    assert employee == Employee(id="1", name="Ann", salary=10, age=20)


def test_employee_from_dict_plain_keys_win() -> None:
    assert Employee.from_dict({"name": "Plain", "employee_name": "Alias"}).name == "Plain"


def test_employee_from_dict_missing_fields() -> None:
    assert Employee.from_dict({}) == Employee()


def test_employee_to_dict() -> None:
    assert objects_are_equal(
        Employee.from_dict(make_employee_payload()).to_dict(),
        {
            "id": EMPLOYEE_ID,
            "name": "John Doe",
            "salary": 50000,
            "age": 30,
            "title": "Engineer",
            "email": "john@company.com",
        },
    )


#########################################
#     Tests for CreateEmployeeInput     #
#########################################


def test_create_employee_input_to_dict() -> None:
    assert objects_are_equal(
        CreateEmployeeInput(name="Ann", salary=10, age=20, title="CEO").to_dict(),
        {"name": "Ann", "salary": 10, "age": 20, "title": "CEO"},
    )
