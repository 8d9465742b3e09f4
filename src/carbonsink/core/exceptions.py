"""Exceptions raised by carbonsink."""


class CarbonSinkError(Exception):
    """Base class for all carbonsink errors."""


class ConfigurationError(CarbonSinkError, ValueError):
    """The sink URI could not be turned into a sink configuration."""


class TransportError(CarbonSinkError):
    """The export request could not be built or sent.

    Attributes:
        url: Endpoint the request was meant for.
    """

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url
