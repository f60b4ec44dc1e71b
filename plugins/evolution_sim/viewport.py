"""
Pygame Drawing Surface

Immediate-mode canvas in engine coordinates. The engine's unit square
is mapped onto the largest centred square that fits the surface, so
positions and lengths share one scale on any window shape.

Heading convention: rotation 0 faces +y (down on screen) and angles
grow clockwise on screen, matching the engine's world.

Colours with an alpha channel are drawn on a scratch surface the size
of the primitive and blitted, so overlapping translucent arcs blend.
"""

import math

import pygame

from .terminal import THEME


# Arc stroke width as a fraction of the world square's side
ARC_WIDTH = 0.003


def triangle_points(x, y, size, rotation):
    """Corners of an animal triangle: tip 1.5*size ahead, base corners size away."""
    return [
        (x - math.sin(rotation) * size * 1.5,
         y + math.cos(rotation) * size * 1.5),
        (x - math.sin(rotation + 2.0 / 3.0 * math.pi) * size,
         y + math.cos(rotation + 2.0 / 3.0 * math.pi) * size),
        (x - math.sin(rotation + 4.0 / 3.0 * math.pi) * size,
         y + math.cos(rotation + 4.0 / 3.0 * math.pi) * size),
    ]


def arc_span(angle_from, angle_to):
    """Convert a heading-space arc to pygame's (start, stop) angles.

    Heading angle a points along (-sin a, cos a); pygame measures
    counter-clockwise from +x with y up, so the span is mirrored.
    """
    start = -(angle_to + math.pi / 2.0)
    stop = -(angle_from + math.pi / 2.0)
    return start, stop


class Viewport:
    """Draws engine-space primitives onto a pygame surface."""

    def __init__(self, surface):
        self.surface = surface

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    @property
    def scale(self):
        """Side of the world square in pixels."""
        return min(self.width, self.height)

    @property
    def origin(self):
        """Pixel position of world (0, 0); centres the square."""
        return ((self.width - self.scale) / 2.0, (self.height - self.scale) / 2.0)

    def to_pixels(self, x, y):
        ox, oy = self.origin
        return (ox + x * self.scale, oy + y * self.scale)

    def _blend(self, bounds, draw):
        """Run draw(target, offset) on a scratch surface covering bounds, then blit it."""
        bounds = bounds.clip(self.surface.get_rect())
        if bounds.width == 0 or bounds.height == 0:
            return
        scratch = pygame.Surface(bounds.size, pygame.SRCALPHA)
        draw(scratch, (-bounds.x, -bounds.y))
        self.surface.blit(scratch, bounds.topleft)

    def clear(self):
        self.surface.fill(THEME["bg"])

    def draw_circle(self, x, y, radius, color):
        cx, cy = self.to_pixels(x, y)
        r = max(1.0, radius * self.scale)

        if len(color) == 3:
            pygame.draw.circle(self.surface, color, (cx, cy), r)
            return

        bounds = pygame.Rect(int(cx - r) - 1, int(cy - r) - 1, int(2 * r) + 3, int(2 * r) + 3)
        self._blend(bounds, lambda target, off: pygame.draw.circle(
            target, color, (cx + off[0], cy + off[1]), r))

    def draw_triangle(self, x, y, size, rotation, color):
        points = [self.to_pixels(px, py) for px, py in triangle_points(x, y, size, rotation)]

        if len(color) == 3:
            pygame.draw.polygon(self.surface, color, points)
            return

        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        bounds = pygame.Rect(int(min(xs)) - 1, int(min(ys)) - 1,
                             int(max(xs) - min(xs)) + 3, int(max(ys) - min(ys)) + 3)
        self._blend(bounds, lambda target, off: pygame.draw.polygon(
            target, color, [(px + off[0], py + off[1]) for px, py in points]))

    def draw_arc(self, x, y, radius, angle_from, angle_to, color):
        cx, cy = self.to_pixels(x, y)
        r = int(round(radius * self.scale))
        rect = pygame.Rect(0, 0, 2 * r, 2 * r)
        rect.center = (int(round(cx)), int(round(cy)))
        start, stop = arc_span(angle_from, angle_to)
        width = max(1, int(round(ARC_WIDTH * self.scale)))

        if len(color) == 3:
            pygame.draw.arc(self.surface, color, rect, start, stop, width)
            return

        self._blend(rect.inflate(2, 2), lambda target, off: pygame.draw.arc(
            target, color, rect.move(off), start, stop, width))
