import asyncio

import httpx
import pytest

from catalog_gateway import loadtest


def test_generators_produce_known_routes():
    for generator in loadtest.GENERATORS:
        method, path, body = generator()
        assert method in ("GET", "POST")
        assert path.startswith("/")
        assert (body is None) == (method == "GET")


def test_run_counts_successes_and_failures():
    def handler(request):
        if request.method == "POST":
            return httpx.Response(500, text="boom")
        return httpx.Response(200, json=[])

    stats = asyncio.run(loadtest.run_load_test(
        "http://gateway.test", total=40, concurrency=5, delay=0,
        transport=httpx.MockTransport(handler),
    ))
    assert stats.total == 40
    assert stats.succeeded + stats.failed == 40
    assert stats.duration > 0
    assert "LOAD TEST RESULTS" in stats.summary()


def test_unhealthy_target_stops_the_run():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(loadtest.run_load_test("http://gateway.test", 5, 1, 0, transport=transport))


def test_stats_summary_percentages():
    stats = loadtest.Stats()
    stats.record(True, 0.1)
    stats.record(False, 0.3)
    stats.duration = 2.0
    assert stats.average_latency == pytest.approx(0.2)
    assert stats.requests_per_second == pytest.approx(1.0)
    assert "50.00%" in stats.summary()
