"""
Pytest fixtures shared by the memkv tests.
"""

import socket
from contextlib import closing

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer

from memkv.http_server import HTTPKVStore
from memkv.store import KeyValueStore


def find_free_port() -> int:
    """Find an available port for testing."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]


@pytest.fixture
def store() -> KeyValueStore:
    """A fresh, empty store per test."""
    return KeyValueStore()


@pytest_asyncio.fixture
async def client(store):
    """HTTP client talking to an in-process server backed by ``store``."""
    kv = HTTPKVStore(store)
    async with TestClient(TestServer(kv.app)) as c:
        yield c


@pytest_asyncio.fixture
async def client_without_delete(store):
    kv = HTTPKVStore(store, expose_delete=False)
    async with TestClient(TestServer(kv.app)) as c:
        yield c


@pytest.fixture
def occupied_port():
    """A port with a listening socket on 127.0.0.1."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('127.0.0.1', 0))
        s.listen(1)
        yield s.getsockname()[1]
