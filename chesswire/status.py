"""Game status, draw reasons, AI difficulty levels and engine errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional

_KINDS = ("active", "check", "checkmate", "stalemate", "draw")
_TERMINAL_KINDS = frozenset({"checkmate", "stalemate", "draw"})


class DrawReason(enum.Enum):
    """Why a game ended in a draw."""

    FIFTY_MOVE_RULE = "fifty_move_rule"
    THREEFOLD_REPETITION = "threefold_repetition"
    INSUFFICIENT_MATERIAL = "insufficient_material"

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GameStatus:
    """The state of a game; draws carry the reason they were declared."""

    kind: str
    reason: Optional[DrawReason] = None

    ACTIVE: ClassVar[GameStatus]
    CHECK: ClassVar[GameStatus]
    CHECKMATE: ClassVar[GameStatus]
    STALEMATE: ClassVar[GameStatus]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown game status: {self.kind!r}")
        if (self.kind == "draw") != (self.reason is not None):
            raise ValueError("a draw needs a reason and only a draw has one")

    @classmethod
    def draw(cls, reason: DrawReason) -> GameStatus:
        """A drawn status with the given reason."""
        return cls("draw", reason)

    def as_str(self) -> str:
        """Wire name: the draw reason for draws, otherwise the status kind."""
        if self.reason is not None:
            return self.reason.as_str()
        return self.kind

    def is_game_over(self) -> bool:
        return self.kind in _TERMINAL_KINDS

    def __str__(self) -> str:
        return self.as_str()


GameStatus.ACTIVE = GameStatus("active")
GameStatus.CHECK = GameStatus("check")
GameStatus.CHECKMATE = GameStatus("checkmate")
GameStatus.STALEMATE = GameStatus("stalemate")


class Difficulty(enum.Enum):
    """AI strength levels."""

    HARMLESS = "harmless"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"
    GODLIKE = "godlike"

    @classmethod
    def from_str_loose(cls, text: str) -> Optional[Difficulty]:
        """Parse a level name case-insensitively; None if unknown."""
        try:
            return cls(text.lower())
        except ValueError:
            return None

    def depth(self) -> int:
        """Search depth in plies; 0 means random play."""
        return _DEPTHS[self]

    def __str__(self) -> str:
        return self.value


_DEPTHS = {
    Difficulty.HARMLESS: 0,
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
    Difficulty.EXPERT: 6,
    Difficulty.GODLIKE: 8,
}


class ChessError(Exception):
    """Base class for chess engine errors."""


class InvalidMoveError(ChessError):
    """A move that cannot be played."""

    def __init__(self, from_square: str, to_square: str, reason: str) -> None:
        self.from_square = from_square
        self.to_square = to_square
        self.reason = reason
        super().__init__(f"invalid move: {from_square} -> {to_square}: {reason}")


class InvalidFenError(ChessError):
    """A malformed FEN string."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid FEN string: {detail}")


class InvalidSquareError(ChessError):
    """Text that does not name a square."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid square notation: {text}")


class GameOverError(ChessError):
    """An action attempted on a finished game."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"game is already over: {detail}")


class InvalidPromotionError(ChessError):
    """A promotion to a piece that is not allowed."""

    def __init__(self, piece: str) -> None:
        self.piece = piece
        super().__init__(f"invalid promotion piece: {piece}")


class NothingToUndoError(ChessError):
    """Undo requested with no moves played."""

    def __init__(self) -> None:
        super().__init__("no moves to undo")