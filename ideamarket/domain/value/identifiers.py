"""Strongly typed identifiers for IdeaMarket entities.

Project and seller ids are minted by the client data store, invitation ids
by this service. All of them travel as plain strings.
"""

from typing import NewType

ProjectId = NewType("ProjectId", str)
SellerId = NewType("SellerId", str)
InvitationId = NewType("InvitationId", str)
MessageId = NewType("MessageId", str)
