from collections import defaultdict
from contextlib import suppress

from django.apps import apps
from django.contrib.auth.models import Group
from django.contrib.auth.models import Permission
from django.contrib.contenttypes.models import ContentType
from django.core.management.base import BaseCommand
from django.utils.translation import gettext as _

from agency_ops.users.api.permissions import ALL_ROLES
from agency_ops.users.api.permissions import ROLE_ACCOUNTING
from agency_ops.users.api.permissions import ROLE_DIRECTOR
from agency_ops.users.api.permissions import ROLE_FINANCE
from agency_ops.users.api.permissions import ROLE_HR
from agency_ops.users.api.permissions import ROLE_MARKETING
from agency_ops.users.api.permissions import ROLE_PROJECT_MANAGER
from agency_ops.users.api.permissions import ROLE_SALES
from agency_ops.users.api.permissions import ROLE_SOCMED_ADMIN
from agency_ops.users.api.permissions import ROLE_SUPER_ADMIN

FULL_ACTIONS = ("add", "change", "delete", "view")
MANAGE_ACTIONS = ("add", "change", "view")
READ_ACTIONS = ("view",)

# Django admin permissions per role, keyed by app label. The REST API enforces
# roles through permission classes; these only matter inside /admin/.
ROLE_APP_ACTIONS = {
    ROLE_HR: {
        "attendance": FULL_ACTIONS,
        "employees": FULL_ACTIONS,
        "discipline": FULL_ACTIONS,
        "leaves": FULL_ACTIONS,
        "recruitment": FULL_ACTIONS,
        "meetings": READ_ACTIONS,
    },
    ROLE_FINANCE: {
        "finance": FULL_ACTIONS,
        "clients": READ_ACTIONS,
        "employees": READ_ACTIONS,
    },
    ROLE_ACCOUNTING: {
        "finance": MANAGE_ACTIONS,
        "clients": READ_ACTIONS,
    },
    ROLE_DIRECTOR: {
        "finance": READ_ACTIONS,
        "clients": READ_ACTIONS,
        "reports": READ_ACTIONS,
    },
    ROLE_PROJECT_MANAGER: {
        "clients": FULL_ACTIONS,
        "meetings": FULL_ACTIONS,
    },
    ROLE_SALES: {
        "clients": MANAGE_ACTIONS,
        "meetings": MANAGE_ACTIONS,
    },
    ROLE_SOCMED_ADMIN: {
        "reports": FULL_ACTIONS,
        "clients": READ_ACTIONS,
    },
    ROLE_MARKETING: {
        "reports": MANAGE_ACTIONS,
        "clients": READ_ACTIONS,
    },
}


class Command(BaseCommand):
    help = _("Create the agency role groups and their admin permissions")

    def handle(self, *args, **options):
        role_perm_ids: dict[str, set[int]] = defaultdict(set)
        all_perm_ids: set[int] = set()

        for app_label in self._target_app_labels():
            for model in self._collect_app_models(app_label):
                ct = ContentType.objects.get_for_model(model)
                perms = {p.codename: p for p in Permission.objects.filter(content_type=ct)}
                all_perm_ids.update(p.pk for p in perms.values())
                model_name = model._meta.model_name  # noqa: SLF001
                for role, app_rules in ROLE_APP_ACTIONS.items():
                    for action in app_rules.get(app_label, ()):
                        perm = perms.get(f"{action}_{model_name}")
                        if perm:
                            role_perm_ids[role].add(perm.pk)

        role_perm_ids[ROLE_SUPER_ADMIN] = all_perm_ids

        for role in ALL_ROLES:
            group, _created = Group.objects.get_or_create(name=role)
            perm_ids = role_perm_ids.get(role, set())
            group.permissions.set(list(Permission.objects.filter(pk__in=perm_ids)))
            msg = f"Ensured group '{role}' with permissions ({len(perm_ids)})"
            self.stdout.write(self.style.SUCCESS(msg))

        self.stdout.write(self.style.SUCCESS("Role setup complete"))

    def _target_app_labels(self):
        labels = {"users", "audit", "notifications", "reports"}
        for rules in ROLE_APP_ACTIONS.values():
            labels.update(rules.keys())
        return sorted(labels)

    def _collect_app_models(self, label):
        with suppress(LookupError):
            return list(apps.get_app_config(label).get_models())
        return []
