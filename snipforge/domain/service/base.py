"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services wrap the pure search and tagging functions with repository
    access, configuration and tracing.
    """
