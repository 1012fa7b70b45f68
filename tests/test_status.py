import pytest

from chesswire.status import (
    ChessError,
    Difficulty,
    DrawReason,
    GameOverError,
    GameStatus,
    InvalidFenError,
    InvalidMoveError,
    InvalidPromotionError,
    InvalidSquareError,
    NothingToUndoError,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        (GameStatus.ACTIVE, "active"),
        (GameStatus.CHECK, "check"),
        (GameStatus.CHECKMATE, "checkmate"),
        (GameStatus.STALEMATE, "stalemate"),
        (GameStatus.draw(DrawReason.FIFTY_MOVE_RULE), "fifty_move_rule"),
        (GameStatus.draw(DrawReason.THREEFOLD_REPETITION), "threefold_repetition"),
        (GameStatus.draw(DrawReason.INSUFFICIENT_MATERIAL), "insufficient_material"),
    ],
)
def test_game_status_strings(status, expected):
    assert status.as_str() == expected
    assert str(status) == expected


def test_game_status_is_game_over():
    assert not GameStatus.ACTIVE.is_game_over()
    assert not GameStatus.CHECK.is_game_over()
    assert GameStatus.CHECKMATE.is_game_over()
    assert GameStatus.STALEMATE.is_game_over()
    assert GameStatus.draw(DrawReason.FIFTY_MOVE_RULE).is_game_over()


def test_draw_statuses_compare_by_reason():
    assert GameStatus.draw(DrawReason.FIFTY_MOVE_RULE) == GameStatus.draw(
        DrawReason.FIFTY_MOVE_RULE
    )
    assert GameStatus.draw(DrawReason.FIFTY_MOVE_RULE) != GameStatus.draw(
        DrawReason.THREEFOLD_REPETITION
    )


def test_draw_without_reason_rejected():
    with pytest.raises(ValueError):
        GameStatus("draw")


def test_reason_on_non_draw_rejected():
    with pytest.raises(ValueError):
        GameStatus("active", DrawReason.FIFTY_MOVE_RULE)


def test_unknown_status_rejected():
    with pytest.raises(ValueError):
        GameStatus("resigned")


@pytest.mark.parametrize(
    "level, depth",
    [
        (Difficulty.HARMLESS, 0),
        (Difficulty.EASY, 1),
        (Difficulty.MEDIUM, 3),
        (Difficulty.HARD, 5),
        (Difficulty.EXPERT, 6),
        (Difficulty.GODLIKE, 8),
    ],
)
def test_difficulty_depth_mapping(level, depth):
    assert level.depth() == depth


def test_difficulty_from_str():
    assert Difficulty.from_str_loose("medium") is Difficulty.MEDIUM
    assert Difficulty.from_str_loose("GODLIKE") is Difficulty.GODLIKE
    assert Difficulty.from_str_loose("invalid") is None


@pytest.mark.parametrize("text, expected", [("HARD", "hard"), ("Harmless", "harmless")])
def test_difficulty_display(text, expected):
    assert str(Difficulty.from_str_loose(text)) == expected


def test_invalid_move_error_message():
    err = InvalidMoveError("e2", "e5", "not a legal move")
    assert str(err) == "invalid move: e2 -> e5: not a legal move"
    assert err.reason == "not a legal move"
    assert isinstance(err, ChessError)


@pytest.mark.parametrize(
    "err, message",
    [
        (InvalidFenError("bad"), "invalid FEN string: bad"),
        (InvalidSquareError("z9"), "invalid square notation: z9"),
        (GameOverError("checkmate"), "game is already over: checkmate"),
        (InvalidPromotionError("K"), "invalid promotion piece: K"),
        (NothingToUndoError(), "no moves to undo"),
    ],
)
def test_error_messages(err, message):
    assert str(err) == message
    assert isinstance(err, ChessError)