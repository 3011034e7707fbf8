from __future__ import annotations


class UntilConnectedError(Exception):
    """Base class for errors raised by until_connected."""


class InvalidTargetError(UntilConnectedError, ValueError):
    def __init__(self, message: str = "Invalid target option") -> None:
        super().__init__(message)


class ConnectionAttemptError(UntilConnectedError, OSError):
    """A single connection attempt timed out."""


class ConnectionFailedError(UntilConnectedError):
    """
    No connection could be established within the attempt budget.

    The error from the final attempt is chained as ``__cause__``.
    """

    host: str | None
    port: int
    retries: int

    def __init__(self, host: str | None, port: int, retries: int) -> None:
        self.host = host
        self.port = port
        self.retries = retries
        super().__init__(
            f"Failed to await connection at {host or ''}:{port}. "
            f"Connection never established (retries: {retries})."
        )
