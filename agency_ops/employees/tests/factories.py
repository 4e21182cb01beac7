from decimal import Decimal

from factory import SubFactory
from factory.django import DjangoModelFactory

from agency_ops.employees.models import Employee
from agency_ops.users.tests.factories import UserFactory


class EmployeeFactory(DjangoModelFactory):
    user = SubFactory(UserFactory)
    position = "Designer"
    status = Employee.Status.ACTIVE
    base_salary = Decimal("5000000")

    class Meta:
        model = Employee
