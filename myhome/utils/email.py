"""
Email utilities: configuration, message structure, and SMTP-based sending.

This module provides:
- EmailMessage: validated email message dataclass.
- EmailConfig: SMTP configuration built from application settings.
- send_email: SMTP-based sending.
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from myhome.config.settings import Settings
from myhome.core.exceptions import MailSendError

logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    """Email message structure with validation."""
    subject: str
    to: list[str]
    body_text: Optional[str] = None
    body_html: Optional[str] = None
    from_email: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.subject.strip():
            raise MailSendError("Subject cannot be empty")
        if not self.to:
            raise MailSendError("At least one recipient is required")
        if not self.body_text and not self.body_html:
            raise MailSendError("Either body_text or body_html must be provided")


@dataclass
class EmailConfig:
    """Email configuration."""
    smtp_host: str
    smtp_port: int
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    from_email: Optional[str] = None
    timeout: int = 30

    @classmethod
    def from_settings(cls, settings: Settings) -> EmailConfig:
        return cls(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            from_email=settings.MAIL_FROM,
        )


def build_mime_message(message: EmailMessage, config: EmailConfig) -> MIMEMultipart:
    msg = MIMEMultipart('alternative')
    msg['Subject'] = message.subject
    msg['From'] = message.from_email or config.from_email or config.username or ""
    msg['To'] = ', '.join(message.to)

    if message.body_text:
        msg.attach(MIMEText(message.body_text, 'plain'))
    if message.body_html:
        msg.attach(MIMEText(message.body_html, 'html'))
    return msg


def send_email(message: EmailMessage, config: EmailConfig) -> None:
    """Send an email using SMTP. Raises ``MailSendError`` on any SMTP failure."""
    msg = build_mime_message(message, config)
    try:
        with smtplib.SMTP(config.smtp_host, config.smtp_port, timeout=config.timeout) as server:
            if config.use_tls:
                server.starttls()

            if config.username and config.password:
                server.login(config.username, config.password)

            server.send_message(msg, to_addrs=message.to)

        logger.info(f"Email sent successfully to {len(message.to)} recipients")

    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email: {e}")
        raise MailSendError(f"Failed to send email: {e}") from e
