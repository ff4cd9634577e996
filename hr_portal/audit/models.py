from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class AuditLog(models.Model):
    """Append-only trail of changes made through the portal."""

    class Action(models.TextChoices):
        EMPLOYEE_CREATED = "employee_created", _("Employee created")

    action = models.CharField(_("Action"), max_length=100, choices=Action.choices)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="audit_entries",
        verbose_name=_("Actor"),
    )
    message = models.TextField(_("Message"), blank=True)
    # Target record, kept as plain values so entries outlive deletions
    model_name = models.CharField(_("Model"), max_length=150, blank=True)
    record_id = models.BigIntegerField(_("Record id"), null=True, blank=True)
    after = models.JSONField(_("Snapshot"), null=True, blank=True)
    ip_address = models.CharField(_("IP address"), max_length=64, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["model_name", "record_id"], name="audit_target_idx"),
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        who = self.actor or _("system")
        return f"[{self.created_at:%Y-%m-%d %H:%M}] {who}: {self.get_action_display()}"
