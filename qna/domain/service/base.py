"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services sit between use cases/routes and repositories. They log and
    trace store operations and let typed domain errors propagate.
    """

    pass
