"""AWS SES notification sink.

boto3 is synchronous, so each send runs on a worker thread.
"""

import asyncio
from typing import Any

import boto3


class SESNotificationSink:
    """Deliver messages through AWS Simple Email Service.

    Credentials come from the standard boto3 chain (environment, profile,
    instance role).
    """

    def __init__(self, *, sender: str, region: str, client: Any = None) -> None:
        self._sender = sender
        self._client = client or boto3.client("ses", region_name=region)

    def _send_sync(self, subject: str, html_body: str, recipients: list[str]) -> None:
        self._client.send_email(
            Source=self._sender,
            Destination={"ToAddresses": recipients},
            Message={
                "Subject": {"Charset": "UTF-8", "Data": subject},
                "Body": {"Html": {"Charset": "UTF-8", "Data": html_body}},
            },
        )

    async def send(self, subject: str, html_body: str, recipients: list[str]) -> None:
        """Send a message.

        Raises:
            botocore.exceptions.ClientError: On SES rejection.
        """
        await asyncio.to_thread(self._send_sync, subject, html_body, list(recipients))
