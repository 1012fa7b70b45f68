"""Zobrist hashing keys generated from a fixed-seed xorshift generator."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from chesswire.types import Color, PieceType, Square

_MASK64 = (1 << 64) - 1

CASTLING_KEYS = 16
EP_KEYS = 8
TOTAL_KEYS = 2 * 6 * 64 + 1 + CASTLING_KEYS + EP_KEYS

_SEED = 0x3243_F6A8_885A_308D


class Xorshift64:
    """Deterministic 64-bit xorshift generator; a zero seed is replaced by 1."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        self.state = seed or 1

    def next_u64(self) -> int:
        x = self.state
        x ^= (x << 13) & _MASK64
        x ^= x >> 7
        x ^= (x << 17) & _MASK64
        self.state = x
        return x

    def __iter__(self):
        while True:
            yield self.next_u64()


@dataclass(frozen=True)
class ZobristKeys:
    """Random keys for pieces on squares, side to move, castling and en passant."""

    piece: Tuple[Tuple[Tuple[int, ...], ...], ...]
    side_to_move: int
    castling: Tuple[int, ...]
    en_passant: Tuple[int, ...]

    @classmethod
    def generate(cls, seed: int = _SEED) -> ZobristKeys:
        """Draw every key from a generator started at the given seed."""
        rng = Xorshift64(seed)
        piece = tuple(
            tuple(tuple(rng.next_u64() for _ in range(64)) for _ in range(6))
            for _ in range(2)
        )
        side_to_move = rng.next_u64()
        castling = tuple(rng.next_u64() for _ in range(CASTLING_KEYS))
        en_passant = tuple(rng.next_u64() for _ in range(EP_KEYS))
        return cls(piece, side_to_move, castling, en_passant)

    def piece_key(self, color: Color, piece: PieceType, square: Square) -> int:
        return self.piece[color.index][piece.index][square.index]

    def ep_key(self, file: int) -> int:
        """Key for an en-passant file, 0..7."""
        return self.en_passant[file]

    def castling_key(self, rights: int) -> int:
        """Key for a castling-rights bitmask, 0..15."""
        return self.castling[int(rights)]


@lru_cache(maxsize=None)
def keys() -> ZobristKeys:
    """The shared key set, generated once."""
    return ZobristKeys.generate()