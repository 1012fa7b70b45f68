"""Chess value types, game status, Zobrist keys, and asyncio game-event broadcasting."""

__version__ = "0.2.0"

__all__ = ["types", "status", "zobrist", "messages", "manager"]