"""Per-game tracking of connected clients with broadcast of events."""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import AsyncIterator, Dict, List, Optional, Tuple

from chesswire.messages import WsEvent

logger = logging.getLogger(__name__)

_END = object()


class Subscription:
    """The receiving end of one client's event stream."""

    def __init__(self, client_id: int) -> None:
        self.client_id = client_id
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        self._disconnected = False

    @property
    def closed(self) -> bool:
        """Whether the receiver has been closed."""
        return self._closed

    def _deliver(self, event: WsEvent) -> bool:
        if self._closed or self._disconnected:
            return False
        self._queue.put_nowait(event)
        return True

    def _disconnect(self) -> None:
        if not self._disconnected:
            self._disconnected = True
            self._queue.put_nowait(_END)

    async def recv(self) -> Optional[WsEvent]:
        """Wait for the next event; None once the stream has ended."""
        if self._closed:
            return None
        if self._disconnected and self._queue.empty():
            return None
        item = await self._queue.get()
        if item is _END:
            return None
        return item

    def try_recv(self) -> WsEvent:
        """Return a pending event; raises asyncio.QueueEmpty if there is none."""
        if self._closed:
            raise asyncio.QueueEmpty
        item = self._queue.get_nowait()
        if item is _END:
            raise asyncio.QueueEmpty
        return item

    def close(self) -> None:
        """Stop receiving; further deliveries to this client fail."""
        self._closed = True
        while not self._queue.empty():
            self._queue.get_nowait()

    def __aiter__(self) -> AsyncIterator[WsEvent]:
        return self._events()

    async def _events(self) -> AsyncIterator[WsEvent]:
        while True:
            event = await self.recv()
            if event is None:
                return
            yield event


class WsManager:
    """Tracks subscribers per game and broadcasts events to them."""

    def __init__(self) -> None:
        self._subs: Dict[str, Dict[int, Subscription]] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def subscribe(self, game_id: str) -> Tuple[int, Subscription]:
        """Register a new client for a game and return its id and stream."""
        client_id = next(self._ids)
        subscription = Subscription(client_id)
        async with self._lock:
            self._subs.setdefault(game_id, {})[client_id] = subscription
        logger.debug("WS client subscribed game_id=%s client_id=%s", game_id, client_id)
        return client_id, subscription

    async def unsubscribe(self, game_id: str, client_id: int) -> None:
        """Remove a client from a game; unknown ids are ignored."""
        async with self._lock:
            clients = self._subs.get(game_id)
            if clients is not None:
                subscription = clients.pop(client_id, None)
                if subscription is not None:
                    subscription._disconnect()
                if not clients:
                    del self._subs[game_id]
        logger.debug(
            "WS client unsubscribed game_id=%s client_id=%s", game_id, client_id
        )

    async def broadcast(self, game_id: str, event: WsEvent) -> None:
        """Send an event to every subscriber of a game, dropping closed ones."""
        async with self._lock:
            clients = self._subs.get(game_id)
            if clients is None:
                return
            stale = [
                client_id
                for client_id, subscription in clients.items()
                if not subscription._deliver(event)
            ]
            for client_id in stale:
                del clients[client_id]
                logger.warning(
                    "removed stale WS client game_id=%s client_id=%s",
                    game_id,
                    client_id,
                )
            if not clients:
                del self._subs[game_id]

    async def subscriber_count(self, game_id: str) -> int:
        async with self._lock:
            return len(self._subs.get(game_id, {}))

    async def total_connections(self) -> int:
        async with self._lock:
            return sum(len(clients) for clients in self._subs.values())

    async def active_games(self) -> List[str]:
        """Ids of games that have at least one subscriber."""
        async with self._lock:
            return list(self._subs)