from django.contrib.auth.models import Group
from django.core.management import call_command

from agency_ops.users.api.permissions import ALL_ROLES


def test_setup_roles_creates_groups_with_admin_permissions(db):
    Group.objects.filter(name__in=ALL_ROLES).delete()

    call_command("setup_roles")

    assert set(
        Group.objects.filter(name__in=ALL_ROLES).values_list("name", flat=True)
    ) == set(ALL_ROLES)
    finance = Group.objects.get(name="finance")
    assert finance.permissions.filter(codename="add_expense").exists()
    assert finance.permissions.filter(codename="view_client").exists()
    assert not finance.permissions.filter(codename="add_client").exists()

    hr = Group.objects.get(name="hr")
    assert hr.permissions.filter(codename="change_disciplinarycase").exists()

    super_admin = Group.objects.get(name="super_admin")
    assert super_admin.permissions.filter(codename="delete_auditlog").exists()
    assert not Group.objects.get(name="copywriter").permissions.exists()


def test_role_groups_exist_after_migrations(db):
    assert Group.objects.filter(name__in=ALL_ROLES).count() == len(ALL_ROLES)
