"""Stub notification sink (development/testing).

Logs messages instead of sending them. The recipient list and subject are
logged; the body is truncated so verification links are not written to
production logs by accident.
"""

from authlink.core.constants import RESPONSE_BODY_MAX_LENGTH
from authlink.domain.protocols.logger_protocol import LoggerProtocol


class StubNotificationSink:
    """Notification sink that only logs. Nothing is retained in memory."""

    def __init__(self, logger: LoggerProtocol, *, log_body: bool = True) -> None:
        self._logger = logger
        self._log_body = log_body

    async def send(self, subject: str, html_body: str, recipients: list[str]) -> None:
        context: dict[str, object] = {
            "subject": subject,
            "recipients": list(recipients),
        }
        if self._log_body:
            context["body"] = html_body[:RESPONSE_BODY_MAX_LENGTH]
        self._logger.info("email_would_be_sent", **context)
