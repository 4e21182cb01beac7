"""Role names and DRF permission classes shared by every API module.

Roles are Django auth Groups named after the agency's app roles. Staff users
are treated as ``super_admin`` everywhere.
"""

from collections.abc import Iterable

from rest_framework.permissions import SAFE_METHODS
from rest_framework.permissions import BasePermission

ROLE_SUPER_ADMIN = "super_admin"
ROLE_HR = "hr"
ROLE_FINANCE = "finance"
ROLE_ACCOUNTING = "accounting"
ROLE_DIRECTOR = "director"
ROLE_PROJECT_MANAGER = "project_manager"
ROLE_SALES = "sales"
ROLE_MARKETING = "marketing"
ROLE_SOCMED_ADMIN = "socmed_admin"
ROLE_GRAPHIC_DESIGNER = "graphic_designer"
ROLE_COPYWRITER = "copywriter"
ROLE_VIDEO_EDITOR = "video_editor"
ROLE_PHOTOGRAPHER = "photographer"

ALL_ROLES = (
    ROLE_SUPER_ADMIN,
    ROLE_HR,
    ROLE_FINANCE,
    ROLE_ACCOUNTING,
    ROLE_DIRECTOR,
    ROLE_PROJECT_MANAGER,
    ROLE_SALES,
    ROLE_MARKETING,
    ROLE_SOCMED_ADMIN,
    ROLE_GRAPHIC_DESIGNER,
    ROLE_COPYWRITER,
    ROLE_VIDEO_EDITOR,
    ROLE_PHOTOGRAPHER,
)

HR_ROLES = (ROLE_SUPER_ADMIN, ROLE_HR)
FINANCE_ROLES = (ROLE_SUPER_ADMIN, ROLE_FINANCE, ROLE_ACCOUNTING)
REPORT_ROLES = (ROLE_SUPER_ADMIN, ROLE_SOCMED_ADMIN, ROLE_MARKETING)
PROJECT_ROLES = (ROLE_SUPER_ADMIN, ROLE_PROJECT_MANAGER, ROLE_SALES, ROLE_DIRECTOR)


def _user_in_groups(user, names: Iterable[str]) -> bool:
    groups = getattr(user, "groups", None)
    names_list = list(names)
    if not groups or not names_list:
        return False
    return groups.filter(name__in=names_list).exists()


def user_has_role(user, *roles: str) -> bool:
    """True when the user is authenticated and staff or in any of ``roles``."""
    if not (user and getattr(user, "is_authenticated", False)):
        return False
    if getattr(user, "is_staff", False):
        return True
    return _user_in_groups(user, roles)


def is_super_admin(user) -> bool:
    return user_has_role(user, ROLE_SUPER_ADMIN)


def role_names(user) -> list[str]:
    if not (user and getattr(user, "is_authenticated", False)):
        return []
    names = sorted(user.groups.filter(name__in=ALL_ROLES).values_list("name", flat=True))
    if getattr(user, "is_staff", False) and ROLE_SUPER_ADMIN not in names:
        names.insert(0, ROLE_SUPER_ADMIN)
    return names


class _RolePermission(BasePermission):
    """Base helper to gate access by role names."""

    allowed_roles: tuple[str, ...] = ()

    def has_permission(self, request, view) -> bool:
        return user_has_role(getattr(request, "user", None), *self.allowed_roles)


class _RoleCanWrite(_RolePermission):
    """Any authenticated user may read; only ``allowed_roles`` may write."""

    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return bool(getattr(request.user, "is_authenticated", False))
        return super().has_permission(request, view)


class IsSuperAdmin(_RolePermission):
    allowed_roles = (ROLE_SUPER_ADMIN,)


class IsHRStaff(_RolePermission):
    """HR domain: disciplinary cases, recruitment, HR analytics."""

    allowed_roles = HR_ROLES


class IsHRCanWrite(_RoleCanWrite):
    allowed_roles = HR_ROLES


class IsFinanceStaff(_RolePermission):
    allowed_roles = FINANCE_ROLES


class IsReportStaff(_RolePermission):
    allowed_roles = REPORT_ROLES


class IsReportCanWrite(_RoleCanWrite):
    allowed_roles = REPORT_ROLES


class IsProjectCanWrite(_RoleCanWrite):
    allowed_roles = PROJECT_ROLES
