"""Exceptions raised by the package."""


class ParsingError(ValueError):
    """Raised when a field of an alignment record cannot be parsed."""

    def __init__(self, message: str = "Fail to parse") -> None:
        super().__init__(message)