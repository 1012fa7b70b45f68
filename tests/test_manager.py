import asyncio

import pytest

from chesswire.manager import WsManager
from chesswire.messages import WsEvent, WsEventType


@pytest.mark.asyncio
async def test_subscribe_returns_unique_ids():
    mgr = WsManager()
    id1, _rx1 = await mgr.subscribe("g1")
    id2, _rx2 = await mgr.subscribe("g1")
    assert id1 != id2


@pytest.mark.asyncio
async def test_subscriber_count_tracks_correctly():
    mgr = WsManager()
    assert await mgr.subscriber_count("g1") == 0
    id1, _rx1 = await mgr.subscribe("g1")
    assert await mgr.subscriber_count("g1") == 1
    _id2, _rx2 = await mgr.subscribe("g1")
    assert await mgr.subscriber_count("g1") == 2
    await mgr.unsubscribe("g1", id1)
    assert await mgr.subscriber_count("g1") == 1


@pytest.mark.asyncio
async def test_unsubscribe_removes_empty_game():
    mgr = WsManager()
    id1, _rx1 = await mgr.subscribe("g1")
    await mgr.unsubscribe("g1", id1)
    assert await mgr.subscriber_count("g1") == 0
    assert await mgr.active_games() == []


@pytest.mark.asyncio
async def test_broadcast_delivers_to_all_subscribers():
    mgr = WsManager()
    _id1, rx1 = await mgr.subscribe("g1")
    _id2, rx2 = await mgr.subscribe("g1")
    event = WsEvent.game_state("g1", "startfen", "active", "white", 0, False)
    await mgr.broadcast("g1", event)
    msg1 = await rx1.recv()
    msg2 = await rx2.recv()
    assert msg1.to_json() == msg2.to_json()
    assert msg1.event_type is WsEventType.GAME_STATE


@pytest.mark.asyncio
async def test_broadcast_does_not_cross_games():
    mgr = WsManager()
    _id1, rx1 = await mgr.subscribe("g1")
    _id2, rx2 = await mgr.subscribe("g2")
    await mgr.broadcast("g1", WsEvent.game_state("g1", "fen", "active", "white", 0, False))
    received = await rx1.recv()
    assert received.payload["gameId"] == "g1"
    with pytest.raises(asyncio.QueueEmpty):
        rx2.try_recv()


@pytest.mark.asyncio
async def test_broadcast_removes_stale_clients():
    mgr = WsManager()
    _id1, rx1 = await mgr.subscribe("g1")
    _id2, _rx2 = await mgr.subscribe("g1")
    rx1.close()
    await mgr.broadcast("g1", WsEvent.pong())
    assert await mgr.subscriber_count("g1") == 1


@pytest.mark.asyncio
async def test_broadcast_drops_game_when_all_stale():
    mgr = WsManager()
    _id1, rx1 = await mgr.subscribe("g1")
    rx1.close()
    await mgr.broadcast("g1", WsEvent.pong())
    assert await mgr.active_games() == []


@pytest.mark.asyncio
async def test_total_connections_across_games():
    mgr = WsManager()
    await mgr.subscribe("g1")
    await mgr.subscribe("g1")
    await mgr.subscribe("g2")
    assert await mgr.total_connections() == 3


@pytest.mark.asyncio
async def test_active_games_lists_games():
    mgr = WsManager()
    await mgr.subscribe("g1")
    await mgr.subscribe("g2")
    games = await mgr.active_games()
    assert sorted(games) == ["g1", "g2"]


@pytest.mark.asyncio
async def test_broadcast_to_nonexistent_game_is_noop():
    mgr = WsManager()
    await mgr.broadcast("nonexistent", WsEvent.pong())
    assert await mgr.total_connections() == 0


@pytest.mark.asyncio
async def test_unsubscribe_nonexistent_is_noop():
    mgr = WsManager()
    _id, _rx = await mgr.subscribe("g2")
    await mgr.unsubscribe("g1", 999)
    assert await mgr.total_connections() == 1


@pytest.mark.asyncio
async def test_recv_after_unsubscribe_drains_then_ends():
    mgr = WsManager()
    client_id, rx = await mgr.subscribe("g1")
    await mgr.broadcast("g1", WsEvent.error("late"))
    await mgr.unsubscribe("g1", client_id)
    first = await rx.recv()
    assert first.payload == {"message": "late"}
    assert await rx.recv() is None
    assert await rx.recv() is None


@pytest.mark.asyncio
async def test_async_iteration_yields_events_in_order():
    mgr = WsManager()
    client_id, rx = await mgr.subscribe("g1")
    for text in ("a", "b", "c"):
        await mgr.broadcast("g1", WsEvent.error(text))
    await mgr.unsubscribe("g1", client_id)
    messages = [event.payload["message"] async for event in rx]
    assert messages == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_try_recv_returns_pending_event():
    mgr = WsManager()
    _id, rx = await mgr.subscribe("g1")
    await mgr.broadcast("g1", WsEvent.ai_thinking("g1", "easy"))
    event = rx.try_recv()
    assert event.payload["difficulty"] == "easy"
    with pytest.raises(asyncio.QueueEmpty):
        rx.try_recv()


@pytest.mark.asyncio
async def test_closed_subscription_recv_returns_none():
    mgr = WsManager()
    _id, rx = await mgr.subscribe("g1")
    rx.close()
    assert rx.closed is True
    assert await rx.recv() is None