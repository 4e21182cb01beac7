import django_filters
from django.db.models import Q

from agency_ops.employees.models import Employee


class EmployeeFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Employee.Status.choices)
    position = django_filters.CharFilter(lookup_expr="icontains")
    role = django_filters.CharFilter(field_name="user__groups__name", distinct=True)
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Employee
        fields = ["status", "position", "role"]

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(user__name__icontains=value) | Q(user__username__icontains=value)
        )
