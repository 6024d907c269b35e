"""Pytest configuration and fixtures."""

import asyncio
import socket
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def service():
    """In-process mock pendant service."""
    from mock_pendant import MockPendantService

    return MockPendantService()


@pytest.fixture
def settings():
    """Settings with short timeouts for tests."""
    from pendant_demo.config import ExtensionSettings

    return ExtensionSettings(
        pendant_url="http://mock-pendant",
        poll_interval=0.01,
        network_read_timeout=0.3,
        network_connect_timeout=2.0,
    )


@pytest.fixture
def ctx(service, settings):
    """Application context over the mock service, English strings."""
    from pendant_demo.context import ExtensionContext
    from pendant_demo.i18n import Translations

    return ExtensionContext(service, settings, Translations.load("en"))


@pytest.fixture
def dispatcher():
    """Empty EventDispatcher."""
    from pendant_demo.dispatcher import EventDispatcher

    return EventDispatcher()


@pytest.fixture
def make_event():
    """Build pendant events: make_event("Clicked", item="successbutton")."""
    from pendant_demo.models import Event, PendantEventType

    def _make(kind: str, **props):
        return Event(PendantEventType(kind), props)

    return _make


@pytest_asyncio.fixture
async def echo_server():
    """TCP server that answers each line with the line minus its newline. Yields the port."""

    async def handle(reader, writer):
        line = await reader.readline()
        writer.write(line.rstrip(b"\n"))
        await writer.drain()
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    yield port
    server.close()
    await server.wait_closed()


@pytest_asyncio.fixture
async def silent_server():
    """TCP server that accepts data but never answers. Yields the port."""

    async def handle(reader, writer):
        # Hold the connection until the client hangs up
        await reader.read()
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    yield port
    server.close()
    await server.wait_closed()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
