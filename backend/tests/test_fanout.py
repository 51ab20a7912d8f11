import asyncio

import aiohttp
import pytest

from fakes import FakeResponse, FakeSession, build_network, relayer_url
from relaystatus.jobs.fanout import run_bounded
from relaystatus.providers.relayer import probe_status, status_url


def test_results_follow_input_order() -> None:
    async def handler(item: int) -> int:
        # Later items finish first.
        await asyncio.sleep(0.001 * (10 - item))
        return item * 10

    results = asyncio.run(run_bounded(list(range(10)), handler, concurrency=4))

    assert results == [item * 10 for item in range(10)]


def test_each_item_is_handled_exactly_once() -> None:
    seen: list[int] = []

    async def handler(item: int) -> int:
        seen.append(item)
        await asyncio.sleep(0)
        return item

    asyncio.run(run_bounded(list(range(50)), handler, concurrency=12))

    assert sorted(seen) == list(range(50))


def test_in_flight_calls_never_exceed_the_cap() -> None:
    state = {"in_flight": 0, "peak": 0}

    async def handler(item: int) -> int:
        state["in_flight"] += 1
        state["peak"] = max(state["peak"], state["in_flight"])
        await asyncio.sleep(0.001)
        state["in_flight"] -= 1
        return item

    asyncio.run(run_bounded(list(range(50)), handler, concurrency=12))

    assert state["peak"] == 12


def test_fewer_items_than_workers() -> None:
    async def handler(item: str) -> str:
        return item.upper()

    assert asyncio.run(run_bounded(["a", "b"], handler, concurrency=12)) == ["A", "B"]
    assert asyncio.run(run_bounded([], handler, concurrency=12)) == []


def test_invalid_concurrency() -> None:
    async def handler(item):
        return item

    with pytest.raises(ValueError):
        asyncio.run(run_bounded([1], handler, concurrency=0))


def test_status_url_uses_network_name() -> None:
    assert status_url(build_network("arbitrum-nova")) == relayer_url("arbitrum-nova")


def test_probe_success() -> None:
    network = build_network("polygon", "POL")
    session = FakeSession({relayer_url("polygon"): FakeResponse(200, {"healthOK": True})})

    result = asyncio.run(probe_status(session, network))

    assert result.ok is True
    assert result.status == 200
    assert result.payload == {"healthOK": True}
    assert result.error is None
    _, _, headers = session.calls[0]
    assert headers == {"accept": "application/json"}


def test_probe_http_error_skips_body() -> None:
    response = FakeResponse(503, {"error": "maintenance"})
    session = FakeSession({relayer_url("polygon"): response})

    result = asyncio.run(probe_status(session, build_network("polygon")))

    assert result.ok is False
    assert result.status == 503
    assert result.error == "HTTP 503"
    assert result.payload is None
    assert response.json_calls == 0


def test_probe_transport_fault_reports_status_zero() -> None:
    session = FakeSession(
        {relayer_url("polygon"): aiohttp.ClientConnectionError("dns lookup failed")}
    )

    result = asyncio.run(probe_status(session, build_network("polygon")))

    assert result.ok is False
    assert result.status == 0
    assert result.error == "dns lookup failed"


def test_probe_timeout_uses_exception_name() -> None:
    session = FakeSession({relayer_url("polygon"): asyncio.TimeoutError()})

    result = asyncio.run(probe_status(session, build_network("polygon")))

    assert result.status == 0
    assert result.error == "TimeoutError"


def test_probe_undecodable_body_is_a_failure() -> None:
    session = FakeSession({relayer_url("polygon"): FakeResponse(200, ValueError("bad json"))})

    result = asyncio.run(probe_status(session, build_network("polygon")))

    assert result.ok is False
    assert result.status == 0
    assert result.error == "bad json"


def test_probe_non_object_body_is_empty_status() -> None:
    session = FakeSession({relayer_url("polygon"): FakeResponse(200, ["unexpected"])})

    result = asyncio.run(probe_status(session, build_network("polygon")))

    assert result.ok is True
    assert result.payload == {}
