from myhome.services.mail.notifier import (
    DevMailNotifier,
    MailNotifier,
    MailTemplate,
    Notifier,
    create_notifier,
)

__all__ = ["DevMailNotifier", "MailNotifier", "MailTemplate", "Notifier", "create_notifier"]
