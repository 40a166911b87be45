import pytest

from chesslab.position import ADD_C, ADD_R, SUB_C, SUB_R, Delta, Position


@pytest.mark.parametrize(
    "location,row,col,valid",
    [
        (0, 0, 0, True),
        (33, 4, 1, True),
        (63, 7, 7, True),
        (-1, 0, 0, False),
        (-50, 0, 0, False),
    ],
)
def test_getters(location, row, col, valid):
    pos = Position(location)
    assert pos.row == row
    assert pos.col == col
    assert pos.is_valid() is valid
    assert pos.is_invalid() is (not valid)
    assert pos.location == location


def test_default_is_invalid():
    assert Position().is_invalid()
    assert Position().location == -1


def test_set_col():
    pos = Position(0)
    pos.set_col(5)
    assert pos.location == 5


def test_set_row():
    pos = Position(0)
    pos.set_row(5)
    assert pos.location == 40


def test_set_both():
    pos = Position()
    pos.set(4, 7)
    assert pos.location == 39


def test_set_off_board_is_invalid():
    pos = Position()
    pos.set(20, 15)
    assert pos.is_invalid()
    assert pos.row == 0 and pos.col == 0


def test_from_row_col():
    assert Position.from_row_col(4, 7).location == 39


def test_set_text():
    assert Position.from_text("c6").location == 42


@pytest.mark.parametrize("text", ["", "z1", "a9", "a", None])
def test_bad_text_is_invalid(text):
    assert Position.from_text(text).is_invalid()


def test_copy():
    rhs = Position(42)
    pos = rhs.copy()
    assert pos.location == 42
    pos.location = 0
    assert rhs.location == 42


def test_adjust_add_column():
    pos = Position(22)
    pos += ADD_C
    assert pos.location == 23


def test_adjust_add_row():
    pos = Position(22)
    pos += ADD_R
    assert pos.location == 30


def test_adjust_off_right():
    pos = Position(31)
    pos += ADD_C
    assert pos.location == -1


def test_adjust_off_top():
    pos = Position(59)
    pos += ADD_R
    assert pos.location == -1


def test_adjust_off_left():
    pos = Position(32)
    pos += SUB_C
    assert pos.location == -1


def test_adjust_off_bottom():
    pos = Position(4)
    pos += SUB_R
    assert pos.location == -1


def test_adjust_invalid():
    pos = Position(-1)
    pos += ADD_R
    assert pos.location == -1


def test_add_leaves_original():
    pos = Position(22)
    moved = pos + Delta(1, 1)
    assert pos.location == 22
    assert moved == Position.from_row_col(pos.row + 1, pos.col + 1)


def test_invalid_positions_are_equal():
    assert Position(-1) == Position(-50)
    assert Position(-1) != Position(0)
    assert hash(Position(-1)) == hash(Position(-50))


def test_ordering():
    assert Position(3) < Position(4)
    assert not Position(4) < Position(3)


def test_text_round_trip():
    for location in range(64):
        pos = Position(location)
        assert Position.from_text(str(pos)) == pos


def test_str_invalid():
    assert str(Position()) == "error"