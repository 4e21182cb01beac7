TAG_PREFIXES = [
    ("/api/v1/auth/", "Authentication"),
    ("/api/v1/users/", "Users"),
    ("/api/v1/employees/", "Employees"),
    ("/api/v1/attendance-notifications/", "Attendance"),
    ("/api/v1/attendance/", "Attendance"),
    ("/api/v1/clients/", "Clients"),
    ("/api/v1/projects/", "Projects"),
    ("/api/v1/tasks/", "Tasks"),
    ("/api/v1/meetings/", "Meetings"),
    ("/api/v1/discipline/", "Discipline"),
    ("/api/v1/leave-requests/", "Leaves"),
    ("/api/v1/finance/", "Finance"),
    ("/api/v1/recruitment/", "Recruitment"),
    ("/api/v1/reports/", "Social Media Reports"),
    ("/api/v1/hr-analytics/", "HR Analytics"),
    ("/api/v1/ceo-dashboard/", "CEO Dashboard"),
    ("/api/v1/shared/", "Shared"),
    ("/api/v1/notifications/", "Notifications"),
    ("/api/v1/email-logs/", "Notifications"),
    ("/api/v1/audit/", "Audit"),
]


def group_tags(result, generator, request, public):
    """Give every operation of a module one tag, taken from its URL prefix."""
    for path, operations in result.get("paths", {}).items():
        tag = next((name for prefix, name in TAG_PREFIXES if path.startswith(prefix)), None)
        if tag is None:
            continue
        for op in operations.values():
            op["tags"] = [tag]
    return result
