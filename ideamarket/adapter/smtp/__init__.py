"""SMTP adapter."""

from .transport import MockMailTransport, SmtpMailTransport

__all__ = [
    "MockMailTransport",
    "SmtpMailTransport",
]
