from django.conf import settings
from django.db import models


class AuditLog(models.Model):
    """Append-only trail of sensitive mutations (cases, locks, status moves)."""

    action = models.CharField(max_length=100)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    message = models.TextField(blank=True)
    # "<app_label>.<ModelName>" of the touched row, blank for auth events
    model_name = models.CharField(max_length=150, blank=True)
    record_id = models.BigIntegerField(null=True, blank=True)
    before = models.JSONField(null=True, blank=True)
    after = models.JSONField(null=True, blank=True)
    ip_address = models.CharField(max_length=64, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["model_name", "record_id"], name="audit_model_record_idx")
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        who = self.actor_id or "system"
        return f"[{self.created_at}] {who}: {self.action}"

    @property
    def changed_fields(self) -> list[str]:
        """Keys whose value differs between ``before`` and ``after``."""
        before = self.before if isinstance(self.before, dict) else {}
        after = self.after if isinstance(self.after, dict) else {}
        keys = set(before) | set(after)
        return sorted(k for k in keys if before.get(k) != after.get(k))
