"""Unit tests for the HTTP liveness check."""

import asyncio

import aiohttp
import pytest
from aiohttp import web

from doclinks.api.link.CheckResult import CheckResult
from doclinks.api.link.check_url import BROWSER_HEADERS, check_url
from doclinks.api.link.classify_status import classify_status


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (200, CheckResult(ok=True)),
        (204, CheckResult(ok=True)),
        (301, CheckResult(ok=True)),
        (399, CheckResult(ok=True)),
        (403, CheckResult(ok=True)),
        (429, CheckResult(ok=True)),
        (404, CheckResult(ok=False, reason="HTTP 404")),
        (410, CheckResult(ok=False, reason="HTTP 410")),
        (500, CheckResult(ok=False, reason="HTTP 500")),
        (199, CheckResult(ok=False, reason="HTTP 199")),
    ],
)
def test_classify_status(status, expected):
    assert classify_status(status) == expected


def test_classify_status_custom_accepted():
    assert classify_status(403, accepted_statuses=()) == CheckResult(ok=False, reason="HTTP 403")
    assert classify_status(503, accepted_statuses={503}) == CheckResult(ok=True)
    assert classify_status(404, accepted_statuses={404}) == CheckResult(ok=False, reason="HTTP 404")


def _check(serve, routes, path, **kwargs):
    async def body(session, server):
        return await check_url(session, str(server.make_url(path)), **kwargs)

    return serve(routes, body)


def test_head_ok_skips_get(serve, status_routes, hits):
    result = _check(serve, status_routes({"/ok": (200, 200)}), "/ok")
    assert result == CheckResult(ok=True)
    assert hits == [("HEAD", "/ok")]


def test_head_and_get_404_fails(serve, status_routes, hits):
    result = _check(serve, status_routes({"/missing": (404, 404)}), "/missing")
    assert result == CheckResult(ok=False, reason="HTTP 404")
    assert hits == [("HEAD", "/missing"), ("GET", "/missing")]


def test_head_rejected_get_ok_passes(serve, status_routes, hits):
    result = _check(serve, status_routes({"/no-head": (405, 200)}), "/no-head")
    assert result == CheckResult(ok=True)
    assert hits == [("HEAD", "/no-head"), ("GET", "/no-head")]


def test_soft_block_statuses_pass(serve, status_routes, hits):
    routes = status_routes({"/blocked": (403, 403), "/limited": (429, 429)})
    assert _check(serve, routes, "/blocked") == CheckResult(ok=True)
    assert _check(serve, routes, "/limited") == CheckResult(ok=True)
    # both escalate to GET before being accepted
    assert [method for method, _ in hits] == ["HEAD", "GET", "HEAD", "GET"]


def test_server_error_fails_with_status(serve, status_routes):
    result = _check(serve, status_routes({"/broken": (500, 502)}), "/broken")
    assert result == CheckResult(ok=False, reason="HTTP 502")


def test_redirects_are_followed(serve, status_routes):
    async def moved(request):
        raise web.HTTPMovedPermanently(location="/target")

    routes = status_routes({"/target": (200, 200)}) + [web.head("/old", moved)]
    assert _check(serve, routes, "/old") == CheckResult(ok=True)


def test_browser_headers_sent(serve):
    captured = []

    async def head(request):
        captured.append(request.headers)
        return web.Response(status=200)

    _check(serve, [web.head("/h", head)], "/h")
    seen = captured[0]
    assert seen["User-Agent"] == BROWSER_HEADERS["user-agent"]
    assert seen["Accept"] == BROWSER_HEADERS["accept"]
    assert seen["Accept-Language"] == BROWSER_HEADERS["accept-language"]


def test_timeout(serve):
    async def slow(request):
        await asyncio.sleep(1.0)
        return web.Response(status=200)

    result = _check(serve, [web.head("/slow", slow)], "/slow", timeout=0.1)
    assert result == CheckResult(ok=False, reason="timeout")


def test_transport_error_reports_message():
    async def main():
        async with aiohttp.ClientSession() as session:
            return await check_url(session, "http://127.0.0.1:1/", timeout=5)

    result = asyncio.run(main())
    assert result.ok is False
    assert result.reason
    assert result.reason != "timeout"
