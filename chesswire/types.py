"""Core chess value types: colours, pieces, squares, bitboards, moves and castling rights."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Tuple

_MASK64 = (1 << 64) - 1


class Color(enum.Enum):
    """The two sides in a chess game."""

    WHITE = 0
    BLACK = 1

    @property
    def index(self) -> int:
        """Index for table lookups: white is 0, black is 1."""
        return self.value

    def opposite(self) -> Color:
        """The other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __invert__(self) -> Color:
        return self.opposite()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class PieceType:
    """One of the six piece kinds."""

    index: int
    name: str
    letter: str
    centipawns: int

    PAWN: ClassVar[PieceType]
    KNIGHT: ClassVar[PieceType]
    BISHOP: ClassVar[PieceType]
    ROOK: ClassVar[PieceType]
    QUEEN: ClassVar[PieceType]
    KING: ClassVar[PieceType]
    ALL: ClassVar[Tuple[PieceType, ...]]
    COUNT: ClassVar[int] = 6

    def value(self) -> int:
        """Material value in centipawns (the king counts as 0)."""
        return self.centipawns

    def to_char(self, color: Color) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        return self.letter.upper() if color is Color.WHITE else self.letter

    @classmethod
    def from_char(cls, char: str) -> Optional[Tuple[Color, PieceType]]:
        """Parse a FEN piece letter into (colour, piece), or None if unknown."""
        if len(char) != 1 or not char.isascii():
            return None
        color = Color.WHITE if char.isupper() else Color.BLACK
        piece = _BY_LETTER.get(char.lower())
        if piece is None:
            return None
        return color, piece

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"PieceType.{self.name.upper()}"


PieceType.PAWN = PieceType(0, "pawn", "p", 100)
PieceType.KNIGHT = PieceType(1, "knight", "n", 320)
PieceType.BISHOP = PieceType(2, "bishop", "b", 330)
PieceType.ROOK = PieceType(3, "rook", "r", 500)
PieceType.QUEEN = PieceType(4, "queen", "q", 900)
PieceType.KING = PieceType(5, "king", "k", 0)
PieceType.ALL = (
    PieceType.PAWN,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
    PieceType.KING,
)
_BY_LETTER = {piece.letter: piece for piece in PieceType.ALL}


@dataclass(frozen=True, order=True)
class Square:
    """A board square indexed 0..63 with a1 = 0 and h8 = 63."""

    index: int

    NUM: ClassVar[int] = 64

    def __post_init__(self) -> None:
        if not 0 <= self.index < 64:
            raise ValueError(f"square index out of range: {self.index}")

    @property
    def file(self) -> int:
        return self.index & 7

    @property
    def rank(self) -> int:
        return self.index >> 3

    @classmethod
    def from_file_rank(cls, file: int, rank: int) -> Square:
        """Square at the given file and rank, both 0..7."""
        if not (0 <= file < 8 and 0 <= rank < 8):
            raise ValueError(f"file/rank out of range: {file}, {rank}")
        return cls(rank * 8 + file)

    @classmethod
    def from_algebraic(cls, text: str) -> Optional[Square]:
        """Parse notation like "e4"; None if it is not a square."""
        if len(text) != 2:
            return None
        file = ord(text[0]) - ord("a")
        rank = ord(text[1]) - ord("1")
        if 0 <= file < 8 and 0 <= rank < 8:
            return cls.from_file_rank(file, rank)
        return None

    def to_algebraic(self) -> str:
        return f"{chr(ord('a') + self.file)}{chr(ord('1') + self.rank)}"

    def __str__(self) -> str:
        return self.to_algebraic()


@dataclass(eq=True)
class Bitboard:
    """A set of squares held as a 64-bit integer, one bit per square."""

    bits: int = 0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        self.bits &= _MASK64

    @classmethod
    def full(cls) -> Bitboard:
        return cls(_MASK64)

    @classmethod
    def from_square(cls, square: Square) -> Bitboard:
        return cls(1 << square.index)

    def is_set(self, square: Square) -> bool:
        return bool(self.bits >> square.index & 1)

    def set(self, square: Square) -> None:
        self.bits |= 1 << square.index

    def clear(self, square: Square) -> None:
        self.bits &= ~(1 << square.index) & _MASK64

    def pop_count(self) -> int:
        return bin(self.bits).count("1")

    def is_empty(self) -> bool:
        return self.bits == 0

    def lsb(self) -> Optional[Square]:
        """The lowest set square, or None if empty."""
        if not self.bits:
            return None
        return Square((self.bits & -self.bits).bit_length() - 1)

    def pop_lsb(self) -> Optional[Square]:
        """Remove and return the lowest set square, or None if empty."""
        square = self.lsb()
        if square is not None:
            self.bits &= self.bits - 1
        return square

    def __iter__(self) -> Iterator[Square]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield Square(low.bit_length() - 1)
            bits ^= low

    def __len__(self) -> int:
        return self.pop_count()

    def __bool__(self) -> bool:
        return self.bits != 0

    def __contains__(self, square: Square) -> bool:
        return self.is_set(square)

    def __and__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits & other.bits)

    def __or__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits | other.bits)

    def __xor__(self, other: Bitboard) -> Bitboard:
        return Bitboard(self.bits ^ other.bits)

    def __invert__(self) -> Bitboard:
        return Bitboard(~self.bits & _MASK64)

    def __iand__(self, other: Bitboard) -> Bitboard:
        self.bits &= other.bits
        return self

    def __ior__(self, other: Bitboard) -> Bitboard:
        self.bits |= other.bits
        return self

    def __repr__(self) -> str:
        return f"Bitboard(0x{self.bits:016x})"

    def __str__(self) -> str:
        lines = [repr(self)]
        for rank in range(7, -1, -1):
            cells = " ".join(
                "1" if self.is_set(Square.from_file_rank(file, rank)) else "."
                for file in range(8)
            )
            lines.append(f"  {rank + 1} {cells}")
        lines.append("    a b c d e f g h")
        return "\n".join(lines)


class MoveFlags(enum.IntFlag):
    """Special-move markers."""

    NONE = 0
    CAPTURE = 1
    EN_PASSANT = 2
    CASTLING = 4
    DOUBLE_PUSH = 8

    def is_capture(self) -> bool:
        return bool(self & MoveFlags.CAPTURE)

    def is_en_passant(self) -> bool:
        return bool(self & MoveFlags.EN_PASSANT)

    def is_castling(self) -> bool:
        return bool(self & MoveFlags.CASTLING)

    def is_double_push(self) -> bool:
        return bool(self & MoveFlags.DOUBLE_PUSH)


@dataclass(frozen=True)
class Move:
    """A move: origin, destination, optional promotion piece and flags."""

    from_square: Square
    to_square: Square
    promotion: Optional[PieceType] = None
    flags: MoveFlags = field(default=MoveFlags.NONE)

    def __str__(self) -> str:
        text = f"{self.from_square}{self.to_square}"
        if self.promotion is not None:
            text += f"={self.promotion.letter}"
        return text


class CastlingRights(enum.IntFlag):
    """Castling availability: white/black, kingside/queenside."""

    NONE = 0
    WHITE_KINGSIDE = 1
    WHITE_QUEENSIDE = 2
    BLACK_KINGSIDE = 4
    BLACK_QUEENSIDE = 8
    ALL = 15

    def has(self, flag: CastlingRights) -> bool:
        return bool(int(self) & int(flag))

    def without(self, flag: CastlingRights) -> CastlingRights:
        """These rights with the given ones removed."""
        return CastlingRights(int(self) & ~int(flag) & 15)

    def can_castle_kingside(self, color: Color) -> bool:
        flag = (
            CastlingRights.WHITE_KINGSIDE
            if color is Color.WHITE
            else CastlingRights.BLACK_KINGSIDE
        )
        return self.has(flag)

    def can_castle_queenside(self, color: Color) -> bool:
        flag = (
            CastlingRights.WHITE_QUEENSIDE
            if color is Color.WHITE
            else CastlingRights.BLACK_QUEENSIDE
        )
        return self.has(flag)

    @classmethod
    def from_fen(cls, text: str) -> Optional[CastlingRights]:
        """Parse a FEN castling field such as "KQkq" or "-"; None if malformed."""
        if text == "-":
            return cls.NONE
        rights = 0
        for char in text:
            flag = _CASTLING_LETTERS.get(char)
            if flag is None:
                return None
            rights |= flag
        return cls(rights)

    def to_fen(self) -> str:
        text = "".join(
            letter for letter, flag in _CASTLING_LETTERS.items() if self.has(flag)
        )
        return text or "-"

    def __str__(self) -> str:
        return self.to_fen()


_CASTLING_LETTERS = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}