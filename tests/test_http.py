"""Request pipeline — URL building, headers, status handling, in-flight tracking."""

import asyncio
import json

import httpx
import pytest

from backdrop_admin import (
    HTTPStatusError,
    InvalidURLError,
    NotAuthenticatedError,
    ServerError,
    Session,
    TransportError,
)
from backdrop_admin.transport.http import HttpClient, InFlight

from conftest import COOKIE, envelope


def make_http(site, session):
    return HttpClient(session, transport=site.transport)


class TestExecute:
    @pytest.mark.asyncio
    async def test_requires_authenticated_session(self, site):
        http = make_http(site, Session())
        with pytest.raises(NotAuthenticatedError):
            await http.execute("cache/clear", "POST")
        assert site.requests == []

    @pytest.mark.asyncio
    async def test_builds_url_and_headers_for_ip_site(self, site, session):
        site.api("POST", "cache/clear")
        http = make_http(site, session)

        await http.execute("cache/clear", "POST")

        request = site.last
        assert str(request.url) == "http://192.168.30.85/api/admin/cache/clear"
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/json"
        assert request.headers["host"] == "backdrop-for-ios.ddev.site"
        assert request.headers["cookie"] == COOKIE

    @pytest.mark.asyncio
    async def test_hostname_site_has_no_compat_host(self, site):
        site.api("GET", "reports/status", {"requirements": []})
        http = make_http(site, Session.authenticated("https://example.com", COOKIE))

        await http.execute("reports/status")

        assert str(site.last.url) == "https://example.com/api/admin/reports/status"
        assert site.last.headers["host"] == "example.com"

    @pytest.mark.asyncio
    async def test_subdirectory_install(self, site):
        site.add("GET", "/cms/api/admin/reports/status", json_body=envelope({"requirements": []}))
        http = make_http(site, Session.authenticated("https://example.com/cms", COOKIE))

        await http.execute("/reports/status")

        assert str(site.last.url) == "https://example.com/cms/api/admin/reports/status"

    @pytest.mark.asyncio
    async def test_ip_session_without_saved_host_uses_default(self, site):
        site.api("POST", "cache/clear")
        http = HttpClient(Session.authenticated("http://10.0.0.5", COOKIE), transport=site.transport,
                          default_host="dev.ddev.site")

        await http.execute("cache/clear", "POST")

        assert site.last.headers["host"] == "dev.ddev.site"

    @pytest.mark.asyncio
    async def test_returns_raw_bytes_unmodified(self, site, session):
        raw = b'{"success": true,   "message": null, "data": [1, 2]}'
        site.add("GET", "/api/admin/blocks/list", content=raw)
        http = make_http(site, session)

        assert await http.execute("blocks/list") == raw

    @pytest.mark.asyncio
    async def test_json_body_and_params(self, site, session):
        site.api("PUT", "content/7", {"nid": 7})
        site.api("GET", "content/list", {})
        http = make_http(site, session)

        await http.put("content/7", {"title": "Hello"})
        assert json.loads(site.last.content) == {"title": "Hello"}

        await http.get("content/list", params={"page": 2, "limit": 20})
        assert site.last.url.params["page"] == "2"
        assert site.last.url.params["limit"] == "20"


class TestStatusHandling:
    @pytest.mark.asyncio
    async def test_error_body_becomes_server_error(self, site, session):
        site.add("POST", "/api/admin/cache/clear", status=403,
                 json_body={"error": True, "message": "Access denied", "code": 403})
        http = make_http(site, session)

        with pytest.raises(ServerError) as exc:
            await http.execute("cache/clear", "POST")
        assert str(exc.value) == "Access denied"
        assert exc.value.status_code == 403
        assert exc.value.server_code == 403

    @pytest.mark.asyncio
    async def test_unstructured_error_becomes_http_error(self, site, session):
        site.add("GET", "/api/admin/reports/status", status=500, content=b"<h1>Internal Server Error</h1>")
        http = make_http(site, session)

        with pytest.raises(HTTPStatusError) as exc:
            await http.execute("reports/status")
        assert exc.value.status_code == 500
        assert str(exc.value) == "HTTP error: 500"

    @pytest.mark.asyncio
    async def test_error_envelope_on_401_is_http_error(self, site, session):
        site.add("GET", "/api/admin/reports/status", status=401,
                 json_body=envelope(success=False, message="Not logged in"))
        http = make_http(site, session)

        with pytest.raises(HTTPStatusError) as exc:
            await http.execute("reports/status")
        assert exc.value.status_code == 401

    @pytest.mark.asyncio
    async def test_malformed_login_url_is_invalid_url(self, site):
        http = make_http(site, Session())

        with pytest.raises(InvalidURLError):
            await http.submit_login("https://2001:db8::1:8443/cms/user/login", {"name": "admin"})
        assert site.requests == []
        assert http.in_flight.count == 0

    @pytest.mark.asyncio
    async def test_malformed_base_url_is_invalid_url(self, site):
        http = make_http(site, Session.authenticated("https://2001:db8::1:8443", COOKIE))

        with pytest.raises(InvalidURLError):
            await http.execute("reports/status")
        assert site.requests == []

    @pytest.mark.asyncio
    async def test_transport_failure(self, site, session):
        def timeout(request):
            raise httpx.ReadTimeout("timed out", request=request)
        site.add_handler("GET", "/api/admin/reports/status", timeout)
        http = make_http(site, session)

        with pytest.raises(TransportError):
            await http.execute("reports/status")
        assert http.in_flight.count == 0


class TestUpload:
    @pytest.mark.asyncio
    async def test_multipart(self, site, session):
        site.api("POST", "files/upload", {"fid": 1})
        http = make_http(site, session)

        await http.upload("files/upload", "logo.png", b"\x89PNG")

        request = site.last
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="logo.png"' in request.content
        assert request.headers["cookie"] == COOKIE

    @pytest.mark.asyncio
    async def test_requires_authenticated_session(self, site):
        http = make_http(site, Session())
        with pytest.raises(NotAuthenticatedError):
            await http.upload("files/upload", "a.txt", b"a")
        assert site.requests == []


class TestInFlight:
    def test_counter_notifies_on_edges_only(self):
        changes = []
        flight = InFlight(on_change=changes.append)
        with flight.track():
            with flight.track():
                assert flight.count == 2
            assert flight.active
        assert not flight.active
        assert changes == [True, False]

    def test_released_on_exception(self):
        flight = InFlight()
        with pytest.raises(RuntimeError):
            with flight.track():
                raise RuntimeError("boom")
        assert flight.count == 0

    @pytest.mark.asyncio
    async def test_loading_until_last_concurrent_call_finishes(self, site, session):
        gates = {"cache": asyncio.Event(), "cron": asyncio.Event()}

        def gated(name):
            async def handler(request):
                await gates[name].wait()
                return httpx.Response(200, json=envelope())
            return handler

        site.add_handler("POST", "/api/admin/cache/clear", gated("cache"))
        site.add_handler("POST", "/api/admin/cron/run", gated("cron"))
        http = make_http(site, session)

        first = asyncio.create_task(http.post("cache/clear"))
        second = asyncio.create_task(http.post("cron/run"))
        await asyncio.sleep(0.01)
        assert http.is_loading
        assert http.in_flight.count == 2

        gates["cache"].set()
        await first
        assert http.is_loading

        gates["cron"].set()
        await second
        assert not http.is_loading
