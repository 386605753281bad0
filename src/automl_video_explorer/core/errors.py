"""Error types raised by the explorer.

Argument parsing failures are not listed here: they surface as click's
``UsageError`` and are reported by typer with the generated usage text.
"""


class ExplorerError(Exception):
    """Base class for errors reported to the user with exit code 1."""

    pass


class ConfigError(ExplorerError):
    """Raised when the environment configuration is missing or malformed."""

    pass


class InvalidArgumentError(ExplorerError):
    """Raised when an argument cannot be turned into a valid request."""

    pass


class NotFoundError(ExplorerError):
    """Raised when a resource the command needs is absent from a listing."""

    pass


class RemoteCallError(ExplorerError):
    """Raised when a call to the AutoML service fails.

    Attributes:
        code: Remote status code, when the service reported one.
    """

    def __init__(self, message: str, code: int | str | None = None) -> None:
        super().__init__(message)
        self.code = code
