"""Mail infrastructure providers."""

from dishka import Scope, provide

from ideamarket.adapter.smtp import SmtpMailTransport
from ideamarket.config import MailSettings
from ideamarket.domain.service import MailTransport
from ideamarket.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_transport(self, mail_settings: MailSettings) -> MailTransport:
        """Provide SMTP mail transport.

        Returns:
            Mail transport configured from MAIL__* settings
        """
        return SmtpMailTransport(
            host=mail_settings.smtp_host,
            port=mail_settings.smtp_port,
            secure=mail_settings.smtp_secure,
            user=mail_settings.smtp_user,
            password=mail_settings.smtp_pass,
        )
