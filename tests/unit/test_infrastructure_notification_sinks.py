"""Unit tests for notification sink adapters.

Tests cover:
- StubNotificationSink: logs messages without retaining them
- SmtpNotificationSink: STARTTLS, login, message headers (smtplib mocked)
- SESNotificationSink: send_email payload (boto3 client mocked)
"""

from unittest.mock import MagicMock, Mock, patch

import pytest

from authlink.infrastructure.notifications import (
    SESNotificationSink,
    SmtpNotificationSink,
    StubNotificationSink,
)


@pytest.mark.unit
class TestStubNotificationSink:
    async def test_logs_message(self):
        logger = Mock()
        sink = StubNotificationSink(logger)

        await sink.send("Verify Email", "<p>hi</p>", ["ada@example.com"])

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args[0] == "email_would_be_sent"
        assert kwargs["recipients"] == ["ada@example.com"]
        assert kwargs["body"] == "<p>hi</p>"

    async def test_body_can_be_omitted_from_logs(self):
        logger = Mock()
        sink = StubNotificationSink(logger, log_body=False)

        await sink.send("Verify Email", "<p>secret link</p>", ["ada@example.com"])

        assert "body" not in logger.info.call_args.kwargs

    async def test_keeps_no_state_between_sends(self):
        sink = StubNotificationSink(Mock())

        for i in range(3):
            await sink.send("Verify Email", f"<p>{i}</p>", ["ada@example.com"])

        assert vars(sink).keys() == {"_logger", "_log_body"}


@pytest.mark.unit
class TestSmtpNotificationSink:
    async def test_sends_html_over_starttls(self):
        sink = SmtpNotificationSink(
            host="smtp.gmail.com",
            port=587,
            sender="noreply@example.com",
            username="noreply@example.com",
            password="app-password",
        )

        with patch(
            "authlink.infrastructure.notifications.smtp_notification_sink.smtplib.SMTP"
        ) as smtp_class:
            smtp = MagicMock()
            smtp_class.return_value.__enter__.return_value = smtp

            await sink.send("Verify Email", "<p>link</p>", ["ada@example.com"])

        smtp_class.assert_called_once_with("smtp.gmail.com", 587, timeout=30.0)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("noreply@example.com", "app-password")
        message = smtp.send_message.call_args.args[0]
        assert message["Subject"] == "Verify Email"
        assert message["From"] == "noreply@example.com"
        assert message["To"] == "ada@example.com"
        assert message.get_content_type() == "text/html"

    async def test_skips_login_without_credentials(self):
        sink = SmtpNotificationSink(host="localhost", port=25, sender="a@example.com")

        with patch(
            "authlink.infrastructure.notifications.smtp_notification_sink.smtplib.SMTP"
        ) as smtp_class:
            smtp = MagicMock()
            smtp_class.return_value.__enter__.return_value = smtp

            await sink.send("s", "<p>b</p>", ["x@example.com"])

        smtp.login.assert_not_called()

    async def test_delivery_errors_propagate(self):
        sink = SmtpNotificationSink(host="localhost", port=25, sender="a@example.com")

        with patch(
            "authlink.infrastructure.notifications.smtp_notification_sink.smtplib.SMTP",
            side_effect=ConnectionRefusedError("refused"),
        ):
            with pytest.raises(ConnectionRefusedError):
                await sink.send("s", "<p>b</p>", ["x@example.com"])


@pytest.mark.unit
class TestSESNotificationSink:
    async def test_send_email_payload(self):
        client = Mock()
        sink = SESNotificationSink(
            sender="noreply@example.com", region="us-east-1", client=client
        )

        await sink.send("Verify Email", "<p>link</p>", ["ada@example.com"])

        client.send_email.assert_called_once_with(
            Source="noreply@example.com",
            Destination={"ToAddresses": ["ada@example.com"]},
            Message={
                "Subject": {"Charset": "UTF-8", "Data": "Verify Email"},
                "Body": {"Html": {"Charset": "UTF-8", "Data": "<p>link</p>"}},
            },
        )

    def test_builds_boto3_client_for_region(self):
        with patch(
            "authlink.infrastructure.notifications.ses_notification_sink.boto3.client"
        ) as client_factory:
            SESNotificationSink(sender="noreply@example.com", region="eu-west-1")

        client_factory.assert_called_once_with("ses", region_name="eu-west-1")
