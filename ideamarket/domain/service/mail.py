"""Mail transport interface."""

from ideamarket.domain.model.mail import MailMessage
from ideamarket.domain.value import MessageId


class MailTransport:
    """Generic mail transport interface.

    Implementations deliver a composed message and return the transport's
    tracking id. Any failure is raised as MailDispatchError.
    """

    async def send(self, message: MailMessage) -> MessageId:
        """Deliver a message.

        Args:
            message: Composed message

        Returns:
            Message id assigned by the mail system

        Raises:
            MailDispatchError: If the message could not be delivered
        """
        raise NotImplementedError

    async def verify(self) -> None:
        """Check that the transport can reach its mail server.

        Raises:
            MailDispatchError: If the server is unreachable or rejects login
        """
        raise NotImplementedError
