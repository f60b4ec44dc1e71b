#!/usr/bin/env python3
"""
Tests for the entry point: headless training, scenarios, engine loading.
"""

import io

import pytest

from evolution_sim.__main__ import main, run_headless
from evolution_sim.engine_base import load_engine
from evolution_sim.errors import EngineLoadError
from evolution_sim.presets import get_scenario, list_scenarios, intro_lines, SCENARIO_ORDER
from evolution_sim.terminal import StreamTerminal

from fake_engine import FakeSimulation


def test_run_headless_trains_and_echoes():
    print("Testing headless training...")
    terminal = StreamTerminal(stream=io.StringIO())
    session = run_headless(FakeSimulation, 2, terminal=terminal)

    assert terminal.lines == [
        "", "$ train 2",
        "generation 1: min=0.00, max=1.00, avg=0.50", "",
        "generation 2: min=0.00, max=1.00, avg=0.50",
    ]
    assert session.simulation.trains == 2
    assert "$ train 2" in terminal.stream.getvalue()
    print("  ✓ Headless training working correctly")


def test_run_headless_with_scenario():
    terminal = StreamTerminal(stream=io.StringIO())
    session = run_headless(FakeSimulation, 1, scenario="narrow", terminal=terminal)
    assert session.config()["eye_fov_angle"] == 0.45
    assert session.simulation.trains == 1


def test_scenarios_are_valid_reset_commands():
    defaults = FakeSimulation.default_config()
    for key in SCENARIO_ORDER:
        terminal = StreamTerminal(stream=io.StringIO())
        run_headless(FakeSimulation, 0, scenario=key, terminal=terminal)
        errors = [line for line in terminal.lines if "^ err" in line]
        assert not errors, f"Scenario {key} failed: {errors}"

    assert get_scenario("nope") is None
    assert [k for k, _, _ in list_scenarios()] == SCENARIO_ORDER
    assert defaults["food_size"] == 0.01


def test_intro_lists_scenarios():
    lines = intro_lines()
    assert lines[0] == "Evolution Simulation."
    assert lines[-1] == "----"
    for _, command, description in list_scenarios():
        assert f"  * {command}" in lines
        assert f"    ({description})" in lines


def test_load_engine():
    assert load_engine("fake_engine:FakeSimulation") is FakeSimulation

    for path in ("fake_engine", "no_such_module_xyz:Engine", "fake_engine:Missing"):
        with pytest.raises(EngineLoadError):
            load_engine(path)


def test_main_headless_and_errors():
    assert main(["--engine", "fake_engine:FakeSimulation", "--train", "2"]) == 0
    assert main(["--engine", "fake_engine:FakeSimulation", "--list"]) == 0
    assert main(["--engine", "no_such_module_xyz:Engine", "--train", "1"]) == 1
    assert main(["--bogus"]) == 2
    assert main(["--help"]) == 0


def test_main_rejects_malformed_numbers():
    assert main(["--window", "800"]) == 2, "Window size needs both dimensions"
    assert main(["--window", "wide x tall"]) == 2
    assert main(["--train", "x"]) == 2
    assert main(["--engine", "fake_engine:FakeSimulation", "--window", "640x480", "--list"]) == 0


if __name__ == "__main__":
    print("\n=== Testing Entry Point ===\n")

    test_run_headless_trains_and_echoes()

    print("\n✓ All tests passed!\n")
