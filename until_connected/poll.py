from __future__ import annotations

import asyncio

from until_connected.errors import ConnectionAttemptError, ConnectionFailedError
from until_connected.models import DEFAULT_MAX_RETRIES, RetryConfig
from until_connected.target import Target, resolve_target
from until_connected.utils.logger import logger


async def connect(port: int, host: str | None = None, timeout: float | None = None) -> None:
    """
    Open a TCP connection to a port on the specified host, then close it.

    When no host is given, the port is tried on the loopback addresses. Socket errors are raised
    unchanged; exceeding the timeout raises ConnectionAttemptError.
    """
    try:
        async with asyncio.timeout(timeout):
            _, writer = await asyncio.open_connection(host, port)
    except TimeoutError as error:
        raise ConnectionAttemptError(f"Connection at {host or ''}:{port} timed out") from error

    # The attempt has succeeded once connected; teardown errors do not change that
    writer.close()
    try:
        await writer.wait_closed()
    except OSError as error:
        logger.debug(f"Closing connection at {host or ''}:{port} failed: {error}")


async def _delay(milliseconds: int) -> None:
    await asyncio.sleep(milliseconds / 1000)


async def until_connected(
    target: Target,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    connection_interval: int | None = None,
    timeout: float | None = None,
) -> None:
    """
    Block until a TCP connection to the target can be opened.

    At most "max_retries" attempts are made, one at a time. If "connection_interval" is set, that
    many milliseconds are awaited before each attempt after the first. Once every attempt has
    failed, ConnectionFailedError is raised, with the last attempt's error as its cause.
    """
    params = resolve_target(target)
    config = RetryConfig(
        max_retries=max_retries, connection_interval=connection_interval, timeout=timeout
    )

    connection_error: OSError | None = None
    for attempt in range(1, config.max_retries + 1):
        if attempt > 1 and config.connection_interval is not None:
            await _delay(config.connection_interval)
        try:
            await connect(params.port, params.hostname, config.timeout)
        except OSError as error:
            logger.debug(
                f"Attempt {attempt}/{config.max_retries} at {params.host or ''}:{params.port}"
                f" failed: {error}"
            )
            connection_error = error
        else:
            logger.info(
                f"Connected to {params.host or ''}:{params.port} after {attempt} attempt(s)"
            )
            return

    logger.warning(
        f"Gave up on {params.host or ''}:{params.port} after {config.max_retries} attempts"
    )
    raise ConnectionFailedError(params.host, params.port, config.max_retries) from connection_error
