"""SMTP mail transport.

Delivers invitation and offer emails through an SMTP relay (Gmail with an
app password in the default configuration). smtplib is blocking, so every
conversation with the server runs in a worker thread.
"""

import asyncio
import smtplib
import ssl
from datetime import datetime
from email.message import EmailMessage
from email.utils import make_msgid, parseaddr
from uuid import uuid4

import logfire

from ideamarket.domain.error import MailDispatchError
from ideamarket.domain.model.mail import MailMessage, OutboxEntry
from ideamarket.domain.service.mail import MailTransport
from ideamarket.domain.value import MessageId


class SmtpMailTransport(MailTransport):
    """Mail transport backed by smtplib."""

    def __init__(
        self,
        host: str,
        port: int,
        secure: bool,
        user: str | None = None,
        password: str | None = None,
    ) -> None:
        """Initialize SMTP transport.

        Args:
            host: SMTP server host
            port: SMTP server port
            secure: Use implicit TLS; otherwise STARTTLS when credentials are set
            user: Login user (optional for an open relay)
            password: Login password
        """
        self.host = host
        self.port = port
        self.secure = secure
        self.user = user
        self.password = password

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self.secure:
            server: smtplib.SMTP = smtplib.SMTP_SSL(self.host, self.port, context=context)
        else:
            server = smtplib.SMTP(self.host, self.port)
        try:
            if not self.secure and self.user:
                server.starttls(context=context)
            if self.user and self.password:
                server.login(self.user, self.password)
        except (smtplib.SMTPException, OSError):
            server.close()
            raise
        return server

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["Subject"] = message.subject
        email["From"] = message.sender
        email["To"] = message.to
        address = parseaddr(message.sender)[1]
        domain = address.rpartition("@")[2] if "@" in address else None
        email["Message-ID"] = make_msgid(domain=domain)
        email.set_content(message.text)
        email.add_alternative(message.html, subtype="html")
        return email

    def _send_sync(self, message: MailMessage) -> MessageId:
        email = self._build(message)
        with self._connect() as server:
            server.send_message(email)
        return MessageId(str(email["Message-ID"]))

    def _verify_sync(self) -> None:
        with self._connect() as server:
            server.noop()

    async def send(self, message: MailMessage) -> MessageId:
        """Deliver a message through the SMTP server.

        Raises:
            MailDispatchError: On connection, authentication or recipient errors
        """
        try:
            message_id = await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as e:
            logfire.error(
                "SMTP send failed",
                host=self.host,
                to=message.to,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise MailDispatchError(str(e) or type(e).__name__) from e

        logfire.info("SMTP message sent", to=message.to, message_id=message_id)
        return message_id

    async def verify(self) -> None:
        """Connect and log in without sending anything.

        Raises:
            MailDispatchError: If the server is unreachable or rejects login
        """
        try:
            await asyncio.to_thread(self._verify_sync)
        except (smtplib.SMTPException, OSError) as e:
            raise MailDispatchError(str(e) or type(e).__name__) from e
        logfire.info("SMTP connection verified", host=self.host, user=self.user)


class MockMailTransport(MailTransport):
    """In-process mail transport for tests and local development.

    Keeps every delivered message in ``outbox`` (newest first) instead of
    talking to a server. Set ``fail_with`` to make every send fail.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        self.fail_with = fail_with
        self.outbox: list[OutboxEntry] = []

    async def send(self, message: MailMessage) -> MessageId:
        """Record the message in the outbox.

        Raises:
            MailDispatchError: If the transport was told to fail
        """
        if self.fail_with is not None:
            raise MailDispatchError(self.fail_with)

        message_id = MessageId(f"<{uuid4()}@mock.ideamarket>")
        self.outbox.insert(
            0,
            OutboxEntry(
                id=message_id,
                to=message.to,
                subject=message.subject,
                body=message.text,
                at=datetime.now(),
            ),
        )
        return message_id

    async def verify(self) -> None:
        """Fail the same way sends would."""
        if self.fail_with is not None:
            raise MailDispatchError(self.fail_with)
