"""Real-time game event envelopes sent to clients and commands received from them."""

from __future__ import annotations

import enum
import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Union

_FALLBACK_JSON = '{"type":"error","message":"serialization failed"}'


class WsEventType(enum.Enum):
    """Discriminator carried in the ``type`` field of every event."""

    GAME_STATE = "game_state"
    MOVE_MADE = "move_made"
    AI_THINKING = "ai_thinking"
    AI_MOVE_COMPLETE = "ai_move_complete"
    GAME_OVER = "game_over"
    ERROR = "error"
    PONG = "pong"
    SUBSCRIBED = "subscribed"

    def __str__(self) -> str:
        return self.value


def _state_payload(
    game_id: str, fen: str, status: str, player: str, moves: int, check: bool
) -> Dict[str, Any]:
    return {
        "gameId": game_id,
        "fen": fen,
        "status": status,
        "currentPlayer": player,
        "moveCount": moves,
        "check": check,
    }


@dataclass(frozen=True)
class WsEvent:
    """A server-to-client event: its type and a camelCase payload."""

    event_type: WsEventType
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def game_state(
        cls, game_id: str, fen: str, status: str, player: str, moves: int, check: bool
    ) -> WsEvent:
        return cls(
            WsEventType.GAME_STATE,
            _state_payload(game_id, fen, status, player, moves, check),
        )

    @classmethod
    def move_made(
        cls,
        game_id: str,
        san: str,
        from_square: str,
        to_square: str,
        player: str,
        fen: str,
        status: str,
        moves: int,
        check: bool,
    ) -> WsEvent:
        return cls(
            WsEventType.MOVE_MADE,
            {
                "gameId": game_id,
                "san": san,
                "from": from_square,
                "to": to_square,
                "player": player,
                "fen": fen,
                "status": status,
                "moveCount": moves,
                "check": check,
            },
        )

    @classmethod
    def ai_thinking(cls, game_id: str, difficulty: str) -> WsEvent:
        return cls(
            WsEventType.AI_THINKING, {"gameId": game_id, "difficulty": difficulty}
        )

    @classmethod
    def ai_move_complete(
        cls,
        game_id: str,
        san: str,
        from_square: str,
        to_square: str,
        fen: str,
        status: str,
        thinking_time_ms: int,
        moves: int,
        check: bool,
    ) -> WsEvent:
        return cls(
            WsEventType.AI_MOVE_COMPLETE,
            {
                "gameId": game_id,
                "san": san,
                "from": from_square,
                "to": to_square,
                "fen": fen,
                "status": status,
                "thinkingTimeMs": thinking_time_ms,
                "moveCount": moves,
                "check": check,
            },
        )

    @classmethod
    def game_over(cls, game_id: str, result: str, fen: str) -> WsEvent:
        return cls(
            WsEventType.GAME_OVER, {"gameId": game_id, "result": result, "fen": fen}
        )

    @classmethod
    def error(cls, message: str) -> WsEvent:
        return cls(WsEventType.ERROR, {"message": message})

    @classmethod
    def pong(cls) -> WsEvent:
        """A pong carrying the current time in milliseconds since the epoch."""
        return cls(WsEventType.PONG, {"timestamp": int(time.time() * 1000)})

    @classmethod
    def subscribed(
        cls, game_id: str, fen: str, status: str, player: str, moves: int, check: bool
    ) -> WsEvent:
        return cls(
            WsEventType.SUBSCRIBED,
            _state_payload(game_id, fen, status, player, moves, check),
        )

    def to_dict(self) -> Dict[str, Any]:
        """The event as a flat mapping with ``type`` first."""
        return {"type": self.event_type.value, **self.payload}

    def to_json(self) -> str:
        """Compact JSON text for sending to a client."""
        try:
            return json.dumps(self.to_dict(), separators=(",", ":"))
        except (TypeError, ValueError):
            return _FALLBACK_JSON


@dataclass(frozen=True)
class SubscribeCommand:
    """Client asks to follow a game."""

    game_id: str


@dataclass(frozen=True)
class UnsubscribeCommand:
    """Client asks to stop following a game."""

    game_id: str


@dataclass(frozen=True)
class PingCommand:
    """Client keep-alive; answered with a pong."""


WsCommand = Union[SubscribeCommand, UnsubscribeCommand, PingCommand]


def _game_id(data: Dict[str, Any]) -> str:
    game_id = data.get("game_id")
    if not isinstance(game_id, str):
        raise ValueError("command requires a string 'game_id'")
    return game_id


def parse_command(text: str) -> WsCommand:
    """Parse a client command from JSON text; raises ValueError if invalid."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("command must be a JSON object")
    kind = data.get("type")
    if kind == "subscribe":
        return SubscribeCommand(_game_id(data))
    if kind == "unsubscribe":
        return UnsubscribeCommand(_game_id(data))
    if kind == "ping":
        return PingCommand()
    raise ValueError(f"unknown command type: {kind!r}")