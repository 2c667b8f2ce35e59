"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file holds the in-process HTTP server used by checker tests.
"""

import asyncio

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


def _serve(routes, body):
    """Start an aiohttp app with ``routes`` and return ``await body(session, server)``."""

    async def _main():
        app = web.Application()
        app.add_routes(routes)
        async with TestServer(app) as server:
            async with aiohttp.ClientSession() as session:
                return await body(session, server)

    return asyncio.run(_main())


@pytest.fixture
def serve():
    return _serve


@pytest.fixture
def hits():
    """Per-test request log: list of (method, path)."""
    return []


@pytest.fixture
def status_routes(hits):
    """Route table answering HEAD and GET with fixed statuses per path."""

    def _routes(table: dict[str, tuple[int, int]]):
        routes = []
        for path, (head_status, get_status) in table.items():

            async def head(request, status=head_status):
                hits.append(("HEAD", request.path))
                return web.Response(status=status)

            async def get(request, status=get_status):
                hits.append(("GET", request.path))
                return web.Response(status=status, text="body")

            routes.append(web.head(path, head))
            routes.append(web.get(path, get, allow_head=False))
        return routes

    return _routes
