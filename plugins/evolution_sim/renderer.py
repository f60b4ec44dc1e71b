"""
Frame Renderer

Turns the session's current world into drawing calls, once per frame:
advance one tick (if active), clear, then draw every food, every animal,
and every eye cell of every animal.

The canvas is anything with clear / draw_circle / draw_triangle /
draw_arc; coordinates and angles stay in engine units.
"""

import numpy as np


FOOD_COLOR = (0, 255, 128)
ANIMAL_COLOR = (255, 255, 255)
EYE_COLOR = (0, 255, 128)

# Eye arcs sit at this multiple of food_size around the animal
EYE_RADIUS_FACTOR = 2.5


def eye_cell_angles(rotation, fov_angle, cells):
    """Angular span (angle_from, angle_to) of each eye cell.

    The field of view is centred on `rotation`; cell i covers
    [rotation - fov/2 + i*fov/n, rotation - fov/2 + (i+1)*fov/n).
    """
    if cells <= 0:
        return []
    angle_per_cell = fov_angle / cells
    starts = (rotation - fov_angle / 2.0) + np.arange(cells) * angle_per_cell
    return [(float(a), float(a + angle_per_cell)) for a in starts]


def energy_color(energy):
    """Eye colour with alpha proportional to the sensed energy (0..1)."""
    alpha = int(round(float(np.clip(energy, 0.0, 1.0)) * 255))
    return EYE_COLOR + (alpha,)


class Renderer:
    """Per-frame pipeline from Session state to canvas primitives."""

    def __init__(self, session, canvas, terminal):
        self.session = session
        self.canvas = canvas
        self.terminal = terminal
        self.last_world = None

    def redraw(self):
        session = self.session

        if session.active:
            stats = session.simulation.step()
            if stats:
                self.terminal.println(stats)

        config = session.config()
        world = session.world()
        self.last_world = world

        self.canvas.clear()

        food_size = config["food_size"]

        for food in world.foods:
            self.canvas.draw_circle(food.x, food.y, food_size / 2.0, FOOD_COLOR)

        for animal in world.animals:
            self.canvas.draw_triangle(
                animal.x, animal.y, food_size, animal.rotation, ANIMAL_COLOR)
            self._draw_eye(animal, config)

        return world

    def _draw_eye(self, animal, config):
        radius = config["food_size"] * EYE_RADIUS_FACTOR
        cells = eye_cell_angles(
            animal.rotation, config["eye_fov_angle"], config["eye_cells"])

        for cell_id, (angle_from, angle_to) in enumerate(cells):
            self.canvas.draw_arc(
                animal.x, animal.y, radius, angle_from, angle_to,
                energy_color(animal.vision[cell_id]),
            )
