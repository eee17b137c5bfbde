"""Outbound mail entities."""

from datetime import datetime

from pydantic import Field

from ideamarket.domain.model.common import DomainModel


class MailMessage(DomainModel):
    """A fully composed email ready for the mail transport."""

    sender: str = Field(alias="from")
    to: str
    subject: str
    text: str
    html: str


class OutboxEntry(DomainModel):
    """Record of a delivered message, kept by the in-process transport."""

    id: str
    to: str
    subject: str
    body: str
    at: datetime
