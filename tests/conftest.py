import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable

from click.testing import CliRunner
import pytest
import pytest_asyncio

StartServer = Callable[..., Awaitable[asyncio.Server]]


def _close_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    writer.close()


@pytest_asyncio.fixture
async def start_server() -> AsyncGenerator[StartServer, None]:
    """Start TCP listeners on demand, and stop all of them on teardown."""
    servers: list[asyncio.Server] = []

    async def _start_server(port: int, host: str = "127.0.0.1") -> asyncio.Server:
        server = await asyncio.start_server(_close_connection, host, port)
        servers.append(server)
        return server

    yield _start_server

    for server in servers:
        server.close()
        await server.wait_closed()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
