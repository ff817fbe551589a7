"""Unit tests for doclinks.api.link.ExternalLinkProber."""

import asyncio

import httpx
import pytest

from doclinks.api.link.ExternalLinkProber import ExternalLinkProber
from doclinks.api.link.ResultCategory import ResultCategory
from doclinks.constants import USER_AGENT
from tests.unit.conftest import make_link, mock_client

pytestmark = pytest.mark.link


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200)


@pytest.mark.asyncio
async def test_skip_domain_short_circuits_network():
    calls: list[str] = []

    def handler(request):
        calls.append(str(request.url))
        return httpx.Response(200)

    async with ExternalLinkProber(skip_domains=["localhost"], client=mock_client(handler)) as prober:
        result = await prober.probe(make_link("http://localhost:8080/health"))

    assert calls == []
    assert result.is_valid
    assert result.category == ResultCategory.EXTERNAL_SKIPPED
    assert result.status_code == 0
    assert result.error is None


@pytest.mark.asyncio
async def test_concurrency_bound_is_respected():
    in_flight = 0
    peak = 0

    async def handler(request):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return httpx.Response(200)

    links = [make_link(f"https://example.org/page/{i}", line=i) for i in range(50)]
    async with ExternalLinkProber(concurrency=5, client=mock_client(handler)) as prober:
        results = await asyncio.gather(*(prober.probe(link) for link in links))

    assert 1 <= peak <= 5
    assert [result.link for result in results] == links
    assert all(result.category == ResultCategory.EXTERNAL_VALID for result in results)


@pytest.mark.asyncio
async def test_duplicate_urls_are_probed_once():
    calls: list[str] = []

    async def handler(request):
        calls.append(str(request.url))
        await asyncio.sleep(0.01)
        return httpx.Response(200)

    links = [make_link("https://example.org/same", line=line) for line in (1, 2, 3)]
    async with ExternalLinkProber(client=mock_client(handler)) as prober:
        results = await asyncio.gather(*(prober.probe(link) for link in links))
        again = await prober.probe(make_link("https://example.org/same", line=9))

    assert calls == ["https://example.org/same"]
    assert [result.link.line for result in results] == [1, 2, 3]
    assert again.link.line == 9
    assert again.status_code == 200
    assert prober.cached_urls == ["https://example.org/same"]


@pytest.mark.asyncio
async def test_timeout_is_reported():
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200)

    async with ExternalLinkProber(timeout=0.05, client=mock_client(handler)) as prober:
        result = await prober.probe(make_link("https://slow.example.org"))

    assert result.category == ResultCategory.TIMEOUT
    assert result.error == "Request timeout after 50ms"
    assert result.status_code is None


@pytest.mark.asyncio
async def test_http_error_status():
    async with ExternalLinkProber(client=mock_client(lambda request: httpx.Response(404))) as prober:
        result = await prober.probe(make_link("https://example.org/missing"))

    assert not result.is_valid
    assert result.category == ResultCategory.HTTP_ERROR
    assert result.status_code == 404
    assert result.error == "HTTP 404 Not Found"


@pytest.mark.asyncio
async def test_redirect_records_final_url():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.org/new"})
        return httpx.Response(200)

    async with ExternalLinkProber(client=mock_client(handler)) as prober:
        result = await prober.probe(make_link("https://example.org/old"))

    assert result.category == ResultCategory.EXTERNAL_VALID
    assert result.redirect_url == "https://example.org/new"


@pytest.mark.asyncio
async def test_network_failure_becomes_result():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with ExternalLinkProber(client=mock_client(handler)) as prober:
        result = await prober.probe(make_link("https://down.example.org"))

    assert result.category == ResultCategory.NETWORK_ERROR
    assert result.error == "connection refused"


@pytest.mark.asyncio
async def test_protocol_relative_url_is_probed_over_https():
    seen: list[str] = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200)

    async with ExternalLinkProber(client=mock_client(handler)) as prober:
        result = await prober.probe(make_link("//cdn.example.org/lib.js"))

    assert seen == ["https://cdn.example.org/lib.js"]
    assert result.is_valid
    assert result.link.url == "//cdn.example.org/lib.js"


@pytest.mark.asyncio
async def test_probe_sends_head_requests():
    methods: list[str] = []

    def handler(request):
        methods.append(request.method)
        return httpx.Response(200)

    async with ExternalLinkProber(client=mock_client(handler)) as prober:
        await prober.probe_url("https://example.org")

    assert methods == ["HEAD"]


@pytest.mark.asyncio
async def test_owned_client_sends_user_agent():
    prober = ExternalLinkProber()
    try:
        assert prober._get_client().headers["User-Agent"] == USER_AGENT
    finally:
        await prober.aclose()


def test_concurrency_must_be_positive():
    with pytest.raises(ValueError, match="concurrency"):
        ExternalLinkProber(concurrency=0)
