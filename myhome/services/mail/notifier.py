"""
User-facing email notifications.

Two implementations share the ``Notifier`` protocol: ``MailNotifier``
renders the HTML templates and sends them over SMTP, ``DevMailNotifier``
only logs. ``create_notifier`` picks one from settings.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol

from jinja2 import TemplateError

from myhome.config.settings import Settings
from myhome.core.exceptions import MailSendError
from myhome.utils.email import EmailConfig, EmailMessage, send_email
from myhome.utils.templates import TemplateRenderer

if TYPE_CHECKING:
    from myhome.models import SecurityToken, User

logger = logging.getLogger(__name__)


class MailTemplate(str, Enum):
    ACCOUNT_CREATED = "email/account_created.html"
    ACCOUNT_CONFIRMED = "email/account_confirmed.html"
    PASSWORD_RESET = "email/password_reset.html"
    PASSWORD_CHANGED = "email/password_changed.html"


SUBJECTS = {
    MailTemplate.ACCOUNT_CREATED: "Account created",
    MailTemplate.ACCOUNT_CONFIRMED: "Account confirmed",
    MailTemplate.PASSWORD_RESET: "Password recover code",
    MailTemplate.PASSWORD_CHANGED: "Password successfully changed",
}


class Notifier(Protocol):
    """Delivers account emails. Every method reports success as a bool and never raises."""

    def send_account_created(self, user: "User", email_confirm_token: "SecurityToken") -> bool: ...

    def send_account_confirmed(self, user: "User") -> bool: ...

    def send_password_recover_code(self, user: "User", recover_code: str) -> bool: ...

    def send_password_successfully_changed(self, user: "User") -> bool: ...


class MailNotifier:
    """SMTP notifier rendering Jinja2 HTML templates."""

    def __init__(
        self,
        config: EmailConfig,
        *,
        link_base_url: str,
        app_name: str = "MyHome",
        renderer: Optional[TemplateRenderer] = None,
        transport: Callable[[EmailMessage, EmailConfig], None] = send_email,
    ) -> None:
        self._config = config
        self._link_base_url = link_base_url.rstrip("/")
        self._app_name = app_name
        self._renderer = renderer or TemplateRenderer()
        self._transport = transport

    def send_account_created(self, user: "User", email_confirm_token: "SecurityToken") -> bool:
        return self._send(
            user.email,
            MailTemplate.ACCOUNT_CREATED,
            username=user.name,
            email_confirm_link=self.account_confirm_link(user, email_confirm_token),
        )

    def send_account_confirmed(self, user: "User") -> bool:
        return self._send(user.email, MailTemplate.ACCOUNT_CONFIRMED, username=user.name)

    def send_password_recover_code(self, user: "User", recover_code: str) -> bool:
        return self._send(
            user.email,
            MailTemplate.PASSWORD_RESET,
            username=user.name,
            recover_code=recover_code,
        )

    def send_password_successfully_changed(self, user: "User") -> bool:
        return self._send(user.email, MailTemplate.PASSWORD_CHANGED, username=user.name)

    def account_confirm_link(self, user: "User", token: "SecurityToken") -> str:
        return f"{self._link_base_url}/users/{user.user_id}/email-confirm/{token.token}"

    def _send(self, email_to: str, template: MailTemplate, **context: Any) -> bool:
        try:
            html_body = self._renderer.render(template.value, app_name=self._app_name, **context)
            message = EmailMessage(
                subject=SUBJECTS[template],
                to=[email_to],
                body_html=html_body,
                from_email=self._config.from_email or self._config.username,
            )
            self._transport(message, self._config)
        except TemplateError:
            logger.error(f"Rendering {template.value} failed", exc_info=True)
            return False
        except MailSendError:
            logger.error("Mail send error!", exc_info=True)
            return False
        return True


class DevMailNotifier:
    """Development notifier: logs what would be sent and always reports success."""

    def send_account_created(self, user: "User", email_confirm_token: "SecurityToken") -> bool:
        logger.info(f"Account created message sent to user [{user.user_id}]")
        return True

    def send_account_confirmed(self, user: "User") -> bool:
        logger.info(f"Account confirmed message sent to user [{user.user_id}]")
        return True

    def send_password_recover_code(self, user: "User", recover_code: str) -> bool:
        logger.info(f"Password recover code sent to user [{user.user_id}]")
        return True

    def send_password_successfully_changed(self, user: "User") -> bool:
        logger.info(f"Password successfully changed message sent to user [{user.user_id}]")
        return True


def create_notifier(settings: Settings) -> Notifier:
    """Pick the notifier for the configured mail mode."""
    if settings.MAIL_DEV_MODE:
        logger.info("Mail dev mode enabled, emails will only be logged")
        return DevMailNotifier()
    return MailNotifier(
        EmailConfig.from_settings(settings),
        link_base_url=settings.MAIL_LINK_BASE_URL,
        app_name=settings.APP_NAME,
    )
