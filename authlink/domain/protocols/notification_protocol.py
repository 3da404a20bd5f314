"""NotificationSink protocol - out-of-band message delivery.

Fire-and-forget from the caller's point of view: the auth service awaits the
call only so that it runs after persistence, and logs (never propagates)
delivery failures.
"""

from typing import Protocol


class NotificationSink(Protocol):
    """Deliver an HTML message to one or more addresses.

    Implementations:
        - StubNotificationSink: structured log only (development/testing)
        - SmtpNotificationSink: SMTP with STARTTLS
        - SESNotificationSink: AWS SES
    """

    async def send(self, subject: str, html_body: str, recipients: list[str]) -> None:
        """Send a message.

        Args:
            subject: Subject line.
            html_body: HTML body.
            recipients: Recipient addresses.

        Raises:
            Exception: Adapter-specific delivery failures.
        """
        ...
