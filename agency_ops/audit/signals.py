from django.contrib.auth.signals import user_logged_in
from django.contrib.auth.signals import user_login_failed
from django.dispatch import receiver

from .utils import client_ip
from .utils import log_action


@receiver(user_logged_in)
def on_user_logged_in(sender, request, user, **kwargs):
    ua = request.META.get("HTTP_USER_AGENT", "-") if request else "-"
    log_action(
        "login",
        actor=user,
        message=f"ua={ua}",
        ip_address=client_ip(request) if request else "",
    )


@receiver(user_login_failed)
def on_user_login_failed(sender, credentials, request=None, **kwargs):
    username = (credentials or {}).get("username", "")
    log_action(
        "login_failed",
        message=f"username={username}",
        ip_address=client_ip(request) if request else "",
    )
