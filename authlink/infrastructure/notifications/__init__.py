"""Notification sink adapters.

- StubNotificationSink: structured log only (development/testing)
- SmtpNotificationSink: SMTP with STARTTLS
- SESNotificationSink: AWS SES
"""

from authlink.infrastructure.notifications.ses_notification_sink import (
    SESNotificationSink,
)
from authlink.infrastructure.notifications.smtp_notification_sink import (
    SmtpNotificationSink,
)
from authlink.infrastructure.notifications.stub_notification_sink import (
    StubNotificationSink,
)

__all__ = [
    "SESNotificationSink",
    "SmtpNotificationSink",
    "StubNotificationSink",
]
