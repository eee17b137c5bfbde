"""Mock mail providers for testing."""

from dishka import Scope, provide

from ideamarket.adapter.smtp import MockMailTransport
from ideamarket.domain.service import MailTransport
from ideamarket.util.di.infrastructure.mail import MailProvider


class MockMailProvider(MailProvider):
    """Mock mail provider recording messages in an outbox.

    APP scope, like the SMTP transport: tests fetch the same instance the
    routes use to inspect the outbox or make sends fail.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mail_transport(self) -> MailTransport:
        """Provide in-process mail transport."""
        return MockMailTransport()
