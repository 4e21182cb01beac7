import django_filters
from django.utils import timezone

from agency_ops.meetings.models import Meeting

STATUS_FILTERS = ("upcoming", "past", "completed", "cancelled")


class MeetingFilter(django_filters.FilterSet):
    type = django_filters.ChoiceFilter(choices=Meeting.MeetingType.choices)
    mode = django_filters.ChoiceFilter(choices=Meeting.Mode.choices)
    status = django_filters.ChoiceFilter(
        choices=[(s, s) for s in STATUS_FILTERS], method="filter_status"
    )
    search = django_filters.CharFilter(field_name="title", lookup_expr="icontains")
    client = django_filters.NumberFilter(field_name="client_id")
    project = django_filters.NumberFilter(field_name="project_id")

    class Meta:
        model = Meeting
        fields = ["type", "mode", "client", "project"]

    def filter_status(self, queryset, name, value):
        today = timezone.localdate()
        if value == "upcoming":
            return queryset.filter(
                status=Meeting.Status.SCHEDULED, meeting_date__gte=today
            )
        if value == "past":
            return queryset.filter(
                status=Meeting.Status.SCHEDULED, meeting_date__lt=today
            )
        return queryset.filter(status=value)
