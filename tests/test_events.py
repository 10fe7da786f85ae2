import asyncio

from auth.events import Signal


def test_handlers_run_in_order_and_awaitables_are_awaited():
    calls = []
    signal = Signal("test")

    def first(value):
        calls.append(("first", value))

    async def second(value):
        await asyncio.sleep(0)
        calls.append(("second", value))

    signal.subscribe(first)
    signal.subscribe(second)

    asyncio.run(signal.emit(1))

    assert calls == [("first", 1), ("second", 1)]


def test_subscribe_is_idempotent_and_unsubscribe_tolerates_missing():
    calls = []
    signal = Signal()

    def handler():
        calls.append(1)

    signal.subscribe(handler)
    signal.subscribe(handler)
    assert signal.handler_count == 1

    signal.unsubscribe(handler)
    signal.unsubscribe(handler)

    asyncio.run(signal.emit())
    assert calls == []


def test_handler_may_unsubscribe_itself_during_emit():
    signal = Signal()
    calls = []

    def once():
        calls.append("once")
        signal.unsubscribe(once)

    signal.subscribe(once)
    asyncio.run(signal.emit())
    asyncio.run(signal.emit())

    assert calls == ["once"]
