# chesswire

chesswire provides building blocks for a chess server. It has no runtime dependencies. It is made of these modules:

- `chesswire.types` holds the board value types: `Color`, `PieceType`, `Square`, `Bitboard`, `MoveFlags`, `Move` and `CastlingRights`.
- `chesswire.status` holds `GameStatus`, `DrawReason`, the AI `Difficulty` levels and the `ChessError` exception family.
- `chesswire.zobrist` holds deterministic Zobrist hashing keys, `ZobristKeys`, and the generator behind them, `Xorshift64`.
- `chesswire.messages` holds the server-to-client events (`WsEvent`, `WsEventType`) and the client command parser (`parse_command`).
- `chesswire.manager` holds `WsManager`, which tracks subscribers per game and broadcasts events to them over asyncio queues, and `Subscription`, which is the receiving end of one client.

## Installation

```
pip install chesswire
```

## Squares, bitboards, moves and castling rights

```python
from chesswire.types import Bitboard, CastlingRights, Color, Move, MoveFlags, PieceType, Square

e4 = Square.from_algebraic("e4")       # None if the text is not a square
print(e4.file, e4.rank, e4.to_algebraic())   # 4 3 e4

bb = Bitboard.from_square(e4) | Bitboard.from_square(Square(0))
print(bb.pop_count(), bb.is_set(e4))   # 2 True
print([str(sq) for sq in bb])          # ['a1', 'e4']
print(bb.pop_lsb())                    # a1

promo = Move(Square.from_algebraic("e7"), Square.from_algebraic("e8"), PieceType.QUEEN)
print(promo)                           # e7e8=q
print((MoveFlags.CAPTURE | MoveFlags.EN_PASSANT).is_en_passant())  # True

print(PieceType.from_char("N"))        # (<Color.WHITE: 0>, PieceType.KNIGHT)
print(PieceType.KNIGHT.value())        # 320

rights = CastlingRights.from_fen("KQkq")     # None if malformed
print(rights.can_castle_kingside(Color.WHITE))              # True
print(rights.without(CastlingRights.WHITE_KINGSIDE).to_fen())  # Qkq
```

`~Color.WHITE` and `Color.WHITE.opposite()` both give `Color.BLACK`.

## Game status, difficulty and errors

```python
from chesswire.status import Difficulty, DrawReason, GameStatus, NothingToUndoError

status = GameStatus.draw(DrawReason.FIFTY_MOVE_RULE)
print(status.is_game_over(), status.as_str())   # True fifty_move_rule
print(GameStatus.CHECK.is_game_over())          # False

level = Difficulty.from_str_loose("GODLIKE")    # None if unknown
print(level.depth())                            # 8
```

Every engine error derives from `ChessError`. The subclasses are `InvalidMoveError`, `InvalidFenError`, `InvalidSquareError`, `GameOverError`, `InvalidPromotionError` and `NothingToUndoError`.

## Zobrist keys

```python
from chesswire.types import Color, PieceType, Square
from chesswire.zobrist import keys

k = keys()
print(hex(k.piece_key(Color.WHITE, PieceType.KING, Square.from_algebraic("e1"))))
print(hex(k.castling_key(15)), hex(k.ep_key(4)), hex(k.side_to_move))
```

The keys come from an `Xorshift64` generator with a fixed seed, so they are the same on every run. `keys()` builds the key set once and then returns the same object on every call.

## Game events and commands

```python
import asyncio
from chesswire.manager import WsManager
from chesswire.messages import WsEvent, parse_command

async def demo():
    manager = WsManager()
    client_id, sub = await manager.subscribe("g1")
    await manager.broadcast("g1", WsEvent.move_made(
        "g1", "e4", "e2", "e4", "white", "fen...", "active", 1, False))
    event = await sub.recv()
    print(event.to_json())
    # {"type":"move_made","gameId":"g1","san":"e4","from":"e2",...}
    print(await manager.subscriber_count("g1"))   # 1
    await manager.unsubscribe("g1", client_id)
    print(await sub.recv())                       # None: the stream has ended

asyncio.run(demo())

print(parse_command('{"type":"subscribe","game_id":"g1"}'))
# SubscribeCommand(game_id='g1')
```

- Events have camelCase payload keys and a snake_case `type`. `to_dict()` returns the flat mapping and `to_json()` returns compact JSON text.
- `parse_command` accepts `subscribe`, `unsubscribe` and `ping`. Anything else raises `ValueError`, and that includes text that is not valid JSON.
- A `Subscription` can be read with `await sub.recv()` or with `async for event in sub`. `sub.try_recv()` raises `asyncio.QueueEmpty` when nothing is waiting.
- After `sub.close()`, the next broadcast to that game drops the client.

## What the package does not do

The package has no move generation, no board position or game controller, no FEN or PGN handling, no SAN notation and no AI search. It also runs no network server: `WsManager` only routes `WsEvent` objects between asyncio queues. Carrying those events over WebSocket connections is left to the application.

## Running the tests

```
pip install -e ".[test]"
pytest
```