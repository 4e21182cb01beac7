from datetime import date

from factory import SubFactory
from factory.django import DjangoModelFactory

from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.leaves.models import LeaveRequest


class LeaveRequestFactory(DjangoModelFactory):
    employee = SubFactory(EmployeeFactory)
    leave_type = LeaveRequest.LeaveType.ANNUAL
    start_date = date(2024, 7, 1)
    end_date = date(2024, 7, 3)
    reason = "Family trip"

    class Meta:
        model = LeaveRequest
