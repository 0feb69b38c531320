"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold logic that belongs to no single model.
    """

    pass
