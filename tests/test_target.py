from urllib.parse import urlparse, urlsplit

import pytest

from until_connected.errors import InvalidTargetError
from until_connected.target import ConnectionParameters, resolve_target


@pytest.mark.parametrize("port", [1, 80, 3000, 56789, 65535])
def test_target_port_number(port: int) -> None:
    params = resolve_target(port)

    assert params == ConnectionParameters(port=port, host=None, hostname=None)


@pytest.mark.parametrize(
    "target,expected",
    [
        ("http://127.0.0.1:56789", ConnectionParameters(56789, "127.0.0.1:56789", "127.0.0.1")),
        ("http://localhost:3000/health", ConnectionParameters(3000, "localhost:3000", "localhost")),
        ("postgres://user:secret@db:5432/app", ConnectionParameters(5432, "db:5432", "db")),
        ("http://[::1]:8080", ConnectionParameters(8080, "[::1]:8080", "::1")),
        ("tcp://example.com:1", ConnectionParameters(1, "example.com:1", "example.com")),
        ("http://LOCALHOST:3000", ConnectionParameters(3000, "localhost:3000", "localhost")),
        ("http://[::ABCD]:80", ConnectionParameters(80, "[::abcd]:80", "::abcd")),
    ],
    ids=[
        "ip",
        "hostname with path",
        "userinfo",
        "ipv6",
        "custom scheme",
        "uppercase",
        "uppercase ipv6",
    ],
)
def test_target_url(target: str, expected: ConnectionParameters) -> None:
    assert resolve_target(target) == expected


def test_target_url_without_port() -> None:
    params = resolve_target("http://localhost")

    assert params == ConnectionParameters(port=0, host="localhost", hostname="localhost")


@pytest.mark.parametrize("parse", [urlsplit, urlparse], ids=["split", "parse"])
def test_target_parsed_url(parse) -> None:
    params = resolve_target(parse("http://127.0.0.1:8000"))

    assert params == ConnectionParameters(8000, "127.0.0.1:8000", "127.0.0.1")


@pytest.mark.parametrize(
    "target",
    [
        "not a url",
        "3000",
        "",
        "//localhost:3000",
        "http://localhost:port",
        "http://localhost:70000",
        "http://[::1",
        0,
        -1,
        65536,
        True,
        3000.0,
        None,
    ],
)
def test_target_invalid(target) -> None:
    with pytest.raises(InvalidTargetError, match="Invalid target option"):
        resolve_target(target)
