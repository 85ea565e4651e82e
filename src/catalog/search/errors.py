"""Error types raised by the search core."""


class InvalidConfiguration(ValueError):
    """Raised when search options or a query configuration are unusable.

    Attributes:
        field: Name of the offending setting.
    """

    def __init__(self, message: str, field: str) -> None:
        """Initialize configuration error.

        Args:
            message: Error description.
            field: Name of the offending setting.
        """
        super().__init__(message)
        self.field = field
