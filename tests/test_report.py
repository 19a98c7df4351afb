from mars.report import RunReport
from mars.scenario import parse_scenario
from mars.simulator import Simulator


def test_report_from_run(sample_text):
    simulator = Simulator()
    outcomes = simulator.run(parse_scenario(sample_text))
    report = RunReport.from_run(simulator.world, outcomes)

    assert report.grid.max_x == 5
    assert report.scents == [(3, 4)]
    assert report.lines() == ["1 1 E", "3 3 N LOST", "2 3 S"]


def test_report_json_round_trip(sample_text):
    simulator = Simulator()
    outcomes = simulator.run(parse_scenario(sample_text))
    report = RunReport.from_run(simulator.world, outcomes)

    restored = RunReport.model_validate_json(report.model_dump_json())
    assert restored == report
    assert [model.to_outcome() for model in restored.outcomes] == outcomes
