import logging

from mars.core import Command, Orientation, Outcome
from mars.scenario import parse_scenario
from mars.simulator import Simulator, run_input
from mars.world import World


def commands(text):
    return [Command.parse(c) for c in text]


def test_sample_scenario(sample_text):
    simulator = Simulator()
    outcomes = simulator.run(parse_scenario(sample_text))
    assert outcomes == [
        Outcome((1, 1), Orientation.EAST, lost=False),
        Outcome((3, 3), Orientation.NORTH, lost=True),
        Outcome((2, 3), Orientation.SOUTH, lost=False),
    ]
    assert simulator.world.scents == frozenset({(3, 4)})


def test_run_input_lines(sample_text):
    assert run_input(sample_text) == ["1 1 E", "3 3 N LOST", "2 3 S"]


def test_turning_never_moves():
    world = World(5, 3)
    robot = world.place_robot(2, 2, Orientation.NORTH)
    outcome = Simulator().run_robot(world, robot, commands("LLLLRRRRLR"))
    assert outcome == Outcome((2, 2), Orientation.NORTH)


def test_lost_robot_stops_processing():
    world = World(5, 3)
    robot = world.place_robot(0, 0, Orientation.SOUTH)
    outcome = Simulator().run_robot(world, robot, commands("FLLFFF"))
    assert outcome == Outcome((0, 0), Orientation.SOUTH, lost=True)
    assert world.scents == frozenset({(0, -1)})


def test_edge_robot_lost_then_protected():
    world = World(5, 3)
    simulator = Simulator()
    first = simulator.run_robot(world, world.place_robot(5, 1, Orientation.EAST), commands("F"))
    second = simulator.run_robot(world, world.place_robot(5, 1, Orientation.EAST), commands("FLF"))
    assert first == Outcome((5, 1), Orientation.EAST, lost=True)
    assert second == Outcome((5, 2), Orientation.NORTH, lost=False)


def test_later_robots_depend_on_order():
    lost_first = "5 3\n3 3 N\nF\n\n3 3 N\nFRF\n"
    assert run_input(lost_first) == ["3 3 N LOST", "4 3 E"]

    reversed_order = "5 3\n3 3 N\nFRF\n\n3 3 N\nF\n"
    assert run_input(reversed_order) == ["3 3 N LOST", "3 3 N"]


def test_no_robots_no_output():
    assert run_input("5 3\n") == []


def test_robot_with_no_commands():
    assert run_input("5 3\n2 2 W\n\n") == ["2 2 W"]


def test_robots_numbered_by_input_position_in_logs(sample_text, caplog):
    caplog.set_level(logging.INFO, logger="mars")
    Simulator().run(parse_scenario(sample_text))
    finished = [r.getMessage() for r in caplog.records if "finished" in r.getMessage()]
    assert finished == [
        "Robot 1 finished: 1 1 E",
        "Robot 2 finished: 3 3 N LOST",
        "Robot 3 finished: 2 3 S",
    ]
