"""SMTP notification sink.

Sends HTML mail over SMTP with STARTTLS (e.g. smtp.gmail.com:587). smtplib
is blocking, so each send runs on a worker thread.
"""

import asyncio
import smtplib
from email.message import EmailMessage


class SmtpNotificationSink:
    """Deliver messages through an SMTP relay.

    Example:
        >>> sink = SmtpNotificationSink(
        ...     host="smtp.gmail.com",
        ...     port=587,
        ...     sender="me@gmail.com",
        ...     username="me@gmail.com",
        ...     password="app-password",
        ... )
        >>> await sink.send("Verify Email", "<p>...</p>", ["a@b.com"])
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._username = username
        self._password = password
        self._timeout = timeout

    def _build_message(
        self, subject: str, html_body: str, recipients: list[str]
    ) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self._sender
        message["To"] = ", ".join(recipients)
        message.set_content(html_body, subtype="html", charset="utf-8")
        return message

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
            smtp.starttls()
            if self._username and self._password:
                smtp.login(self._username, self._password)
            smtp.send_message(message)

    async def send(self, subject: str, html_body: str, recipients: list[str]) -> None:
        """Send a message.

        Raises:
            smtplib.SMTPException, OSError: On delivery failure.
        """
        message = self._build_message(subject, html_body, recipients)
        await asyncio.to_thread(self._send_sync, message)
