"""
Unit tests for the command registry and the (placed, keyword) transition table.
"""

import pytest

from robotsim.commands.base import CommandBase, KeywordCommand
from robotsim.commands.basic_commands import PlaceCommand
from robotsim.commands.motion_commands import LeftCommand, MoveCommand, RightCommand
from robotsim.commands.query_commands import ReportCommand
from robotsim.server import command_registry
from robotsim.server.command_registry import (
    clear_registry,
    create_command_from_parts,
    discover_commands,
    get_command_class,
    list_registered_commands,
    register_command,
)
from robotsim.server.simulator import (
    INVALID_COMMAND,
    NOT_PLACED,
    build_transition_table,
    default_transition,
)


def test_all_commands_registered():
    assert list_registered_commands() == ["LEFT", "MOVE", "PLACE", "REPORT", "RIGHT"]


@pytest.mark.parametrize(
    "name,cls",
    [
        ("PLACE", PlaceCommand),
        ("move", MoveCommand),
        ("Left", LeftCommand),
        ("RIGHT", RightCommand),
        ("report", ReportCommand),
    ],
)
def test_lookup_is_case_insensitive(name, cls):
    assert get_command_class(name) is cls


def test_registered_name_attribute():
    assert MoveCommand._registered_name == "MOVE"
    assert MoveCommand().name == "MOVE"


def test_unknown_command_returns_none_none():
    assert create_command_from_parts(["JUMP"]) == (None, None)
    assert create_command_from_parts([]) == (None, None)


def test_create_keyword_command():
    command, error = create_command_from_parts(["REPORT"])
    assert isinstance(command, ReportCommand)
    assert error is None


def test_keyword_command_rejects_parameters():
    command, error = create_command_from_parts(["MOVE", "3"])
    assert command is None
    assert error == "MOVE requires 0 parameters, got 1"


def test_create_place_with_bad_coordinates():
    command, error = create_command_from_parts(["PLACE", "1x", "2"])
    assert command is None
    assert error == "Invalid PLACE coordinates."


def test_duplicate_registration_of_other_class_fails():
    with pytest.raises(ValueError):

        @register_command("MOVE")
        class OtherMove(KeywordCommand):
            def do_execute(self, state):
                return state, None


def test_re_registering_same_class_is_noop():
    command_registry._registry.register("MOVE", MoveCommand)
    assert get_command_class("MOVE") is MoveCommand


def test_register_requires_command_base():
    with pytest.raises(TypeError):

        @register_command("NOPE")
        class NotACommand:
            pass


def test_clear_then_rediscover():
    clear_registry()
    try:
        discover_commands()
        assert list_registered_commands() == ["LEFT", "MOVE", "PLACE", "REPORT", "RIGHT"]
    finally:
        discover_commands()


def test_transition_table_placed_rows():
    table = build_transition_table()
    assert table[(True, "MOVE")] is MoveCommand
    assert table[(True, "LEFT")] is LeftCommand
    assert table[(True, "RIGHT")] is RightCommand
    assert table[(True, "REPORT")] is ReportCommand


def test_transition_table_unplaced_rows_reject():
    table = build_transition_table()
    for keyword in ["MOVE", "LEFT", "RIGHT", "REPORT"]:
        assert table[(False, keyword)] is NOT_PLACED


def test_place_is_not_a_keyword_transition():
    table = build_transition_table()
    assert (True, "PLACE") not in table
    assert (False, "PLACE") not in table


def test_default_transition():
    assert default_transition(True) is INVALID_COMMAND
    assert default_transition(False) is NOT_PLACED


def test_simulator_transition_for(sim):
    assert sim.transition_for(False, "MOVE") is NOT_PLACED
    assert sim.transition_for(True, "MOVE") is MoveCommand
    assert sim.transition_for(True, "JUMP") is INVALID_COMMAND
    assert sim.transition_for(False, "JUMP") is NOT_PLACED


def test_command_classes_flags():
    assert PlaceCommand.takes_arguments and not PlaceCommand.requires_placement
    for cls in (MoveCommand, LeftCommand, RightCommand, ReportCommand):
        assert issubclass(cls, CommandBase)
        assert cls.requires_placement and not cls.takes_arguments
