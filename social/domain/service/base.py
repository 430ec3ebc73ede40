"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span repositories (threading, reactions)
    and wrap each operation in a logfire span.
    """
