import secrets

from django.conf import settings
from django.db import models


def generate_share_token() -> str:
    return secrets.token_urlsafe(getattr(settings, "AGENCY_SHARE_TOKEN_BYTES", 24))


class Shareable(models.Model):
    """Adds a public share token; a null token means the record is not shared."""

    share_token = models.CharField(max_length=64, unique=True, null=True, blank=True)

    class Meta:
        abstract = True

    def issue_share_token(self) -> str:
        """Issue a fresh token, invalidating any link handed out before."""
        self.share_token = generate_share_token()
        self.save(update_fields=["share_token"])
        return self.share_token

    def revoke_share_token(self) -> None:
        self.share_token = None
        self.save(update_fields=["share_token"])
