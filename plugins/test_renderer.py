#!/usr/bin/env python3
"""
Tests for the frame renderer.

Verifies:
1. Eye cells split the field of view into contiguous, equal slices
2. A frame steps the simulation only while active
3. Every food, animal and eye cell produces the expected primitive
4. Generation summaries from step() reach the terminal
"""

import io
import math

import pytest

from evolution_sim.renderer import (
    Renderer, eye_cell_angles, energy_color, FOOD_COLOR, ANIMAL_COLOR,
)
from evolution_sim.session import Session
from evolution_sim.terminal import StreamTerminal

from fake_engine import FakeSimulation


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def draw_triangle(self, x, y, size, rotation, color):
        self.calls.append(("triangle", x, y, size, rotation, color))

    def draw_arc(self, x, y, radius, angle_from, angle_to, color):
        self.calls.append(("arc", x, y, radius, angle_from, angle_to, color))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


def make_renderer(active=True):
    session = Session(FakeSimulation, active=active)
    canvas = RecordingCanvas()
    terminal = StreamTerminal(stream=io.StringIO())
    return session, canvas, terminal, Renderer(session, canvas, terminal)


def test_eye_cells_cover_field_of_view():
    print("Testing eye cell angular coverage...")
    for heading in (0.0, 1.3, -2.0):
        for fov in (0.45, 3.5, 2 * math.pi):
            for n in (1, 2, 9, 13):
                cells = eye_cell_angles(heading, fov, n)
                assert len(cells) == n
                assert cells[0][0] == pytest.approx(heading - fov / 2.0)
                assert cells[-1][1] == pytest.approx(heading + fov / 2.0)

                for (_, end), (start, _) in zip(cells, cells[1:]):
                    assert end == pytest.approx(start, abs=1e-12), "Cells must be contiguous"

                widths = [b - a for a, b in cells]
                assert sum(widths) == pytest.approx(fov)
                assert all(w > 0 for w in widths)
    print("  ✓ Eye cells tile the field of view")


def test_eye_cell_angles_formula():
    heading, fov, n = 0.7, 3.5, 9
    per_cell = fov / n
    for i, (a, b) in enumerate(eye_cell_angles(heading, fov, n)):
        expected = (heading - fov / 2.0) + i * per_cell
        assert a == expected
        assert b == expected + per_cell


def test_eye_cell_angles_without_cells():
    assert eye_cell_angles(0.0, 1.0, 0) == []


def test_energy_color_alpha():
    assert energy_color(0.0) == (0, 255, 128, 0)
    assert energy_color(1.0) == (0, 255, 128, 255)
    assert energy_color(0.5)[3] == 128
    assert energy_color(1.7)[3] == 255
    assert energy_color(-0.2)[3] == 0


def test_active_frame_steps_once():
    session, canvas, _, renderer = make_renderer(active=True)
    renderer.redraw()
    assert session.simulation.steps == 1
    renderer.redraw()
    assert session.simulation.steps == 2


def test_paused_frame_is_pure_repaint():
    session, canvas, _, renderer = make_renderer(active=False)
    renderer.redraw()
    assert session.simulation.steps == 0, "Paused frame must not step"
    assert canvas.calls[0] == ("clear",)
    assert len(canvas.of_kind("triangle")) == 4


def test_frame_draws_every_entity():
    print("Testing frame primitives...")
    session, canvas, _, renderer = make_renderer()
    renderer.redraw()

    cfg = session.config()
    world = session.world()
    food_size = cfg["food_size"]

    assert canvas.calls[0] == ("clear",), "Frame must start with clear"

    circles = canvas.of_kind("circle")
    assert len(circles) == cfg["world_foods"]
    for call, food in zip(circles, world.foods):
        assert call == ("circle", food.x, food.y, food_size / 2.0, FOOD_COLOR)

    triangles = canvas.of_kind("triangle")
    assert len(triangles) == cfg["world_animals"]
    for call, animal in zip(triangles, world.animals):
        assert call == ("triangle", animal.x, animal.y, food_size, animal.rotation, ANIMAL_COLOR)

    arcs = canvas.of_kind("arc")
    assert len(arcs) == cfg["world_animals"] * cfg["eye_cells"]
    print("  ✓ Frame primitives working correctly")


def test_eye_arcs_follow_their_animal():
    session, canvas, _, renderer = make_renderer()
    renderer.redraw()

    cfg = session.config()
    cells = cfg["eye_cells"]
    animal_calls = [c for c in canvas.calls if c[0] in ("triangle", "arc")]

    for i, animal in enumerate(session.world().animals):
        block = animal_calls[i * (cells + 1):(i + 1) * (cells + 1)]
        assert block[0][0] == "triangle"
        expected = eye_cell_angles(animal.rotation, cfg["eye_fov_angle"], cells)
        for cell_id, arc in enumerate(block[1:]):
            _, x, y, radius, a_from, a_to, color = arc
            assert (x, y) == (animal.x, animal.y)
            assert radius == pytest.approx(cfg["food_size"] * 2.5)
            assert (a_from, a_to) == expected[cell_id]
            assert color == energy_color(animal.vision[cell_id])


def test_step_summary_reaches_terminal():
    session, _, terminal, renderer = make_renderer()
    length = session.config()["sim_generation_length"]

    for _ in range(length - 1):
        renderer.redraw()
    assert terminal.lines == [], "No summary before the generation ends"

    renderer.redraw()
    assert terminal.lines == ["generation 1: min=0.00, max=1.00, avg=0.50"]


def test_renderer_follows_session_reset():
    session, canvas, _, renderer = make_renderer()
    session.reset(session.default_config().copy())
    renderer.redraw()
    assert session.simulation.steps == 1, "Renderer must read the installed simulation"


if __name__ == "__main__":
    print("\n=== Testing Renderer ===\n")

    test_eye_cells_cover_field_of_view()
    test_frame_draws_every_entity()

    print("\n✓ All tests passed!\n")
