"""
Interactive Pygame Viewer for the Evolution Simulation

Left: the world, redrawn every frame. Right: a terminal panel that
accepts commands (pause, reset, train) and shows generation summaries.

Controls:
  Type + ENTER  Run a command in the terminal panel
  PGUP / PGDN   Scroll the terminal (mouse wheel works too)
  TAB           Toggle terminal panel
  F1            Toggle HUD overlay
  ESC           Quit
"""

import time

import numpy as np
import pygame

from .commands import CommandInterpreter
from .presets import get_scenario, intro_lines
from .renderer import Renderer
from .session import Session
from .terminal import TerminalPanel, THEME
from .viewport import Viewport


PANEL_WIDTH = 420
FPS = 60


class Viewer:
    def __init__(self, engine_cls, width=800, height=800, start_scenario=None):
        self.canvas_w = width
        self.canvas_h = height
        self.panel_visible = True
        self.running = True
        self.show_hud = True
        self.fps_history = []

        self.session = Session(engine_cls)
        self.terminal = TerminalPanel(width, 0, PANEL_WIDTH, height)
        self.interpreter = CommandInterpreter(self.session, self.terminal)
        self.terminal.on_input(self.interpreter.handle_input)

        # Built in run(), once pygame is initialised
        self.renderer = None
        self.viewport = None
        self.canvas = None

        for line in intro_lines():
            self.terminal.println(line)

        if start_scenario:
            scenario = get_scenario(start_scenario)
            if scenario is not None:
                self.interpreter.handle_input(scenario["command"])

        self.terminal.scroll_to_top()

    @property
    def total_w(self):
        return self.canvas_w + (PANEL_WIDTH if self.panel_visible else 0)

    def hud_text(self, fps):
        world = self.renderer.last_world if self.renderer else None
        animals = len(world.animals) if world else 0
        foods = len(world.foods) if world else 0

        line = f"Animals: {animals}  |  Foods: {foods}  |  FPS: {fps:.0f}"
        if not self.session.active:
            line = "[PAUSED]  " + line
        return line

    def _draw_hud(self, screen, fps):
        if not self.show_hud:
            return

        padding = 6
        bg_surface = pygame.Surface((self.canvas_w, 24), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))

        text_surface = self.hud_font.render(self.hud_text(fps), True, THEME["text_bright"])
        screen.blit(text_surface, (padding + 4, padding))

    def _build_renderer(self):
        self.canvas = pygame.Surface((self.canvas_w, self.canvas_h))
        self.viewport = Viewport(self.canvas)
        self.renderer = Renderer(self.session, self.viewport, self.terminal)

    def _handle_keydown(self, event):
        key = event.key

        if key == pygame.K_ESCAPE:
            self.running = False
            return True

        if key == pygame.K_TAB:
            self.panel_visible = not self.panel_visible
            pygame.display.set_mode((self.total_w, self.canvas_h))
            return True

        if key == pygame.K_F1:
            self.show_hud = not self.show_hud
            return True

        return False

    def frame(self, screen):
        """Render one frame onto the screen."""
        frame_start = time.time()

        self.renderer.redraw()
        screen.blit(self.canvas, (0, 0))

        frame_time = time.time() - frame_start
        self.fps_history.append(frame_time)
        if len(self.fps_history) > 30:
            self.fps_history.pop(0)
        avg_fps = 1.0 / max(np.mean(self.fps_history), 0.001)

        self._draw_hud(screen, avg_fps)

        if self.panel_visible:
            self.terminal.resize(self.canvas_w, self.canvas_h)
            self.terminal.draw(screen, self.panel_font)

    def run(self):
        """Main viewer loop: one event drain and one redraw per display frame."""
        pygame.init()

        screen = pygame.display.set_mode((self.total_w, self.canvas_h))
        pygame.display.set_caption("Evolution Simulation")
        clock = pygame.time.Clock()

        self.hud_font = pygame.font.SysFont("menlo", 13)
        self.panel_font = pygame.font.SysFont("menlo", 13)
        pygame.key.start_text_input()

        self._build_renderer()

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    continue

                if event.type == pygame.KEYDOWN and self._handle_keydown(event):
                    continue

                if self.panel_visible:
                    self.terminal.handle_event(event)

            if not self.running:
                break

            self.frame(pygame.display.get_surface())
            pygame.display.flip()
            clock.tick(FPS)

        pygame.quit()
