import asyncio

import httpx
import pytest

from reportview.client.poller import ReportPoller
from reportview.client.reports import ReportClient, ReportStats
from reportview.models.report import LegacyReport, MultiMarketReport


def _client(handler):
    return ReportClient(base_url="http://api.test", transport=httpx.MockTransport(handler))


def test_fetch_report_parses_document(multi_market_doc):
    def handler(request):
        assert request.url.path == "/api/reports/rep-1"
        return httpx.Response(200, json=multi_market_doc)

    report = asyncio.run(_client(handler).fetch_report("rep-1"))
    assert isinstance(report, MultiMarketReport)
    assert report.entity == "Nike"


def test_fetch_shared_report(legacy_doc):
    def handler(request):
        assert request.url.path == "/api/reports/shared/tok123"
        return httpx.Response(200, json=legacy_doc)

    report = asyncio.run(_client(handler).fetch_shared_report("tok123"))
    assert isinstance(report, LegacyReport)


def test_transport_errors_propagate():
    """HTTP failures reach the caller unchanged."""

    def handler(request):
        return httpx.Response(404, json={"error": "Report not found"})

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        asyncio.run(_client(handler).fetch_report("missing"))
    assert excinfo.value.response.status_code == 404


def test_delete_report_and_share_tokens():
    calls = []

    def handler(request):
        calls.append((request.method, request.url.path))
        if request.url.path.endswith("/share") and request.method in ("GET", "POST"):
            return httpx.Response(200, json={"share_token": "abc" if request.method == "POST" else None})
        return httpx.Response(200, json={"success": True})

    client = _client(handler)

    async def run():
        await client.delete_report("rep-1")
        existing = await client.get_share_token("rep-1")
        created = await client.create_share_token("rep-1")
        await client.revoke_share_token("rep-1")
        return existing, created

    assert asyncio.run(run()) == (None, "abc")
    assert calls == [
        ("DELETE", "/api/reports/rep-1"),
        ("GET", "/api/reports/rep-1/share"),
        ("POST", "/api/reports/rep-1/share"),
        ("DELETE", "/api/reports/rep-1/share"),
    ]


def test_report_stats():
    stats = ReportStats.from_reports(
        [{"status": "completed"}, {"status": "processing"}, {"status": "failed"}, {}]
    )
    assert (stats.total, stats.completed, stats.processing, stats.failed) == (4, 1, 1, 1)
    assert stats.any_processing
    assert not ReportStats.from_reports([]).any_processing


def test_report_stats_skip_non_dict_rows():
    stats = ReportStats.from_reports([{"status": "processing"}, "rep-2", None])
    assert (stats.total, stats.processing) == (1, 1)


def test_poller_stops_when_nothing_processing():
    responses = [
        [{"id": "a", "status": "processing"}],
        [{"id": "a", "status": "processing"}],
        [{"id": "a", "status": "completed"}],
    ]

    def handler(request):
        assert request.url.params["limit"] == "50"
        return httpx.Response(200, json={"reports": responses.pop(0)})

    updates = []

    async def run():
        poller = ReportPoller(_client(handler), lambda reports, stats: updates.append(stats), interval=0)
        await poller.start()
        return poller

    poller = asyncio.run(run())
    assert [s.processing for s in updates] == [1, 1, 0]
    assert not poller.running
    assert poller.last_error is None


def test_poller_stop_cancels_task():
    def handler(request):
        return httpx.Response(200, json={"reports": [{"status": "processing"}]})

    updates = []

    async def on_update(reports, stats):
        updates.append(stats)

    async def run():
        poller = ReportPoller(_client(handler), on_update, interval=10)
        poller.start()
        while not updates:
            await asyncio.sleep(0)
        await poller.stop()
        return poller

    poller = asyncio.run(run())
    assert len(updates) == 1
    assert not poller.running


def test_poller_records_failure():
    def handler(request):
        return httpx.Response(500)

    async def run():
        poller = ReportPoller(_client(handler), lambda r, s: None, interval=0)
        await poller.start()
        return poller

    poller = asyncio.run(run())
    assert isinstance(poller.last_error, httpx.HTTPStatusError)
    assert not poller.running
