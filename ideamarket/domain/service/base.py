"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services own the invitation rules: they load entities from repositories,
    apply transitions and talk to outbound collaborators such as mail.
    """

    pass
