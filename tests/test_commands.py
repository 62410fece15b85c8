import pytest

from floodit.commands import Command, CommandKind
from floodit.constants import COLOR_COUNT
from floodit.game import GameState


def test_none_command_has_no_color():
    command = Command.none()
    assert command.kind is CommandKind.NONE
    assert command.color is None
    assert not command.is_paint


def test_paint_command_carries_color():
    command = Command.paint(3)
    assert command.is_paint
    assert command.color == 3
    assert command == Command.paint(3)


@pytest.mark.parametrize("color", [-1, COLOR_COUNT, None, 2.5, "1", True])
def test_paint_command_rejects_non_color_values(color):
    with pytest.raises(ValueError):
        Command(CommandKind.PAINT, color)


def test_none_command_rejects_color():
    with pytest.raises(ValueError):
        Command(CommandKind.NONE, 2)


def test_float_paint_never_reaches_the_field():
    game = GameState(1, cells=[[0, 1], [0, 2]])
    with pytest.raises(ValueError):
        game.update(Command.paint(2.5))
    assert game.cells == [[0, 1], [0, 2]]
    assert game.painted_count == 0
