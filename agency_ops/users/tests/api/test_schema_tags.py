from drf_spectacular.generators import SchemaGenerator


def test_schema_tag_grouping(db):
    schema = SchemaGenerator().get_schema(request=None, public=True)
    paths = schema["paths"]
    expected = {
        "/api/v1/auth/jwt/create/": "Authentication",
        "/api/v1/users/": "Users",
        "/api/v1/attendance/clock-in/": "Attendance",
        "/api/v1/attendance-notifications/": "Attendance",
        "/api/v1/finance/income-statement/": "Finance",
        "/api/v1/reports/analytics/": "Social Media Reports",
        "/api/v1/shared/task/": "Shared",
        "/api/v1/ceo-dashboard/": "CEO Dashboard",
        "/api/v1/audit/recent/": "Audit",
    }
    for path, tag in expected.items():
        first_op = next(iter(paths[path].values()))
        assert first_op["tags"] == [tag], path
