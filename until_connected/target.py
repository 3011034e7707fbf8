from __future__ import annotations

from typing import NamedTuple
from urllib.parse import ParseResult, SplitResult, urlsplit

from until_connected.errors import InvalidTargetError

Target = int | str | SplitResult | ParseResult


class ConnectionParameters(NamedTuple):
    port: int
    # The URL authority, as reported in messages
    host: str | None = None
    # The bare name or address handed to the resolver
    hostname: str | None = None


def resolve_target(target: Target) -> ConnectionParameters:
    """
    Translate a port number or URL into the parameters for a connection attempt.

    A URL without an explicit port yields port 0, which is passed through as-is. Nothing here
    touches the network.
    """
    if isinstance(target, int) and not isinstance(target, bool):
        if not 0 < target < 65536:
            raise InvalidTargetError()
        return ConnectionParameters(port=target)

    if isinstance(target, (SplitResult, ParseResult)):
        target = target.geturl()

    if not isinstance(target, str):
        raise InvalidTargetError()

    try:
        url = urlsplit(target)
        port = url.port or 0
    except ValueError as error:
        raise InvalidTargetError() from error

    # Relative references such as "3000" or "//host" are not URLs
    if not url.scheme:
        raise InvalidTargetError()

    host = url.netloc.rpartition("@")[2].lower()
    return ConnectionParameters(port=port, host=host, hostname=url.hostname or None)
