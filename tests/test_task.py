import asyncio

import pytest

from auth.codes import CommonErrorCode
from auth.errors import AuthenticationFailed, RequestFailed
from auth.task import run


class Sink:
    def __init__(self):
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)


def test_successful_operation_returns_true():
    sink = Sink()
    ran = []

    async def op():
        ran.append(True)

    assert asyncio.run(run(op, sink)) is True
    assert ran == [True]
    assert sink.messages == []


def test_request_failure_is_reported_once():
    sink = Sink()

    async def op():
        raise RequestFailed("x", CommonErrorCode.TIMEOUT)

    assert asyncio.run(run(op, sink)) is False
    assert len(sink.messages) == 1
    assert sink.messages[0].startswith("Server took too long to respond. Please retry")
    assert sink.messages[0].endswith("\nError Code Timeout")


def test_authentication_failure_is_reported():
    sink = Sink()

    async def op():
        raise AuthenticationFailed("bad_credential", 42)

    assert asyncio.run(run(op, sink)) is False
    assert sink.messages == ["Authentication Failed with Error: Bad Credential\nError Code 42"]


def test_unrelated_errors_propagate():
    sink = Sink()

    async def op():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        asyncio.run(run(op, sink))
    assert sink.messages == []


def test_concurrent_runs_do_not_interfere():
    ok_sink, fail_sink = Sink(), Sink()

    async def slow_ok():
        await asyncio.sleep(0.01)

    async def fast_fail():
        raise RequestFailed("x", CommonErrorCode.FORBIDDEN)

    async def main():
        return await asyncio.gather(run(slow_ok, ok_sink), run(fast_fail, fail_sink))

    ok, failed = asyncio.run(main())

    assert ok is True
    assert failed is False
    assert ok_sink.messages == []
    assert fail_sink.messages == [
        "You don't have permission to perform this action.\nError Code Forbidden"
    ]


def test_failures_are_logged(caplog):
    async def op():
        raise RequestFailed("x", CommonErrorCode.NOT_FOUND)

    with caplog.at_level("WARNING", logger="auth.task"):
        asyncio.run(run(op, Sink()))

    assert any("auth.task.failed" in r.getMessage() for r in caplog.records)


def test_unknown_named_code_reaches_fallback():
    sink = Sink()

    async def op():
        raise RequestFailed("gateway_teapot", "Teapot")

    assert asyncio.run(run(op, sink)) is False
    assert sink.messages == ["Request Failed with Error: Gateway Teapot\nError Code Teapot"]
