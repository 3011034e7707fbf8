from .errors import (
    ConnectionAttemptError,
    ConnectionFailedError,
    InvalidTargetError,
    UntilConnectedError,
)
from .models import DEFAULT_MAX_RETRIES, RetryConfig
from .poll import connect, until_connected
from .target import ConnectionParameters, resolve_target

__all__ = [
    "connect",
    "until_connected",
    "ConnectionAttemptError",
    "ConnectionFailedError",
    "InvalidTargetError",
    "UntilConnectedError",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "ConnectionParameters",
    "resolve_target",
]
