"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (invalid payload)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(DomainError):
    """Raised when an invitation cannot move to the requested status."""

    def __init__(self, invitation_id: str, current: str, target: str):
        self.invitation_id = invitation_id
        self.current = current
        self.target = target
        super().__init__(
            f"Invitation {invitation_id} cannot move from {current} to {target}"
        )


class MailDispatchError(DomainError):
    """Raised by a mail transport when a message could not be delivered."""

    pass
