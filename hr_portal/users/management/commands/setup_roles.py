from collections import defaultdict
from contextlib import suppress

from django.apps import apps
from django.contrib.auth.models import Group
from django.contrib.auth.models import Permission
from django.contrib.contenttypes.models import ContentType
from django.core.management.base import BaseCommand
from django.utils.translation import gettext as _

from hr_portal.employees.api.permissions import ROLE_ADMIN
from hr_portal.employees.api.permissions import ROLE_HR
from hr_portal.employees.api.permissions import ROLE_MANAGER

FULL_ACTIONS = ("add", "change", "delete", "view")
MANAGE_ACTIONS = ("add", "change", "view")
READ_ACTIONS = ("view",)

ROLE_APP_ACTIONS = {
    ROLE_ADMIN: {
        "employees": FULL_ACTIONS,
        "org": FULL_ACTIONS,
        "audit": READ_ACTIONS,
        "users": FULL_ACTIONS,
    },
    ROLE_MANAGER: {
        "employees": MANAGE_ACTIONS,
        "org": READ_ACTIONS,
        "audit": READ_ACTIONS,
    },
    ROLE_HR: {
        "employees": MANAGE_ACTIONS,
        "org": MANAGE_ACTIONS,
    },
}


class Command(BaseCommand):
    help = _("Create the HR role groups and assign their permissions")

    def handle(self, *args, **options):
        role_perm_ids: dict[str, set[int]] = defaultdict(set)
        for role_name, app_rules in ROLE_APP_ACTIONS.items():
            for app_label, actions in app_rules.items():
                for model in self._collect_app_models(app_label):
                    self._add_actions(role_perm_ids[role_name], model, actions)

        for role_name in ROLE_APP_ACTIONS:
            group, _created = Group.objects.get_or_create(name=role_name)
            perm_ids = role_perm_ids.get(role_name, set())
            group.permissions.set(Permission.objects.filter(pk__in=perm_ids))
            msg = f"Ensured group '{role_name}' with permissions ({len(perm_ids)})"
            self.stdout.write(self.style.SUCCESS(msg))

        self.stdout.write(self.style.SUCCESS("Role setup complete"))

    def _collect_app_models(self, label):
        with suppress(LookupError):
            app_config = apps.get_app_config(label)
            return list(app_config.get_models())
        return []

    def _add_actions(self, bucket, model, actions):
        ct = ContentType.objects.get_for_model(model)
        model_name = model._meta.model_name  # noqa: SLF001
        codenames = [f"{action}_{model_name}" for action in actions]
        bucket.update(
            Permission.objects.filter(
                content_type=ct, codename__in=codenames
            ).values_list("pk", flat=True)
        )
