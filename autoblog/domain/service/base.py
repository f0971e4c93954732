"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span an aggregate and its collaborators
    (repositories, external clients) and log their work with logfire.
    """

    pass
