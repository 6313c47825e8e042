"""Errors raised by the greeters and price sources."""


class GreeterError(Exception):
    """Base class for Hello Blockchain errors."""


class NameNotFound(GreeterError, KeyError):
    """The requested name is not in the price feed registry."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Price feed not found: {self.name!r}"


class NoActiveSource(GreeterError):
    """No price feed has been selected yet."""

    def __str__(self) -> str:
        return "No active price feed, set a blockchain name first"


class SourceUnavailable(GreeterError):
    """The price source could not be read."""
