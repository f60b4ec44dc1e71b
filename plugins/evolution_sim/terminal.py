"""
Text I/O Surfaces

Two line-oriented terminals sharing the same small interface:

    println(line)        append a line of output
    on_input(callback)   callback(line) runs once per submitted line
    scroll_to_top()      show the first line of the scrollback

TerminalPanel is a dark-themed pygame side panel with a scrollback and
an input line. StreamTerminal writes to stdout and is fed lines by hand
(headless mode, tests).
"""

import sys
import textwrap

import pygame


# Theme colors
THEME = {
    "bg": (10, 10, 14),
    "panel": (25, 25, 35),
    "input": (32, 32, 45),
    "text": (180, 185, 195),
    "text_bright": (230, 235, 245),
    "text_dim": (100, 105, 115),
    "error": (230, 110, 100),
    "accent": (80, 140, 220),
    "divider": (40, 40, 55),
}

INPUT_PROMPT = "> "
SCROLL_STEP = 3


class StreamTerminal:
    """Terminal backed by a text stream. Keeps every printed line in `lines`."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout
        self.lines = []
        self._callback = None

    def println(self, line):
        self.lines.append(line)
        print(line, file=self.stream)

    def on_input(self, callback):
        self._callback = callback

    def feed(self, line):
        """Submit a line as if the user typed it."""
        line = line.strip()
        if line and self._callback:
            self._callback(line)

    def scroll_to_top(self):
        # Output already went to the stream; nothing to scroll.
        pass


class TerminalPanel:
    """Scrollback + input line drawn with pygame.

    Scroll position is counted in wrapped rows back from the newest
    line; 0 means the view follows new output.
    """

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.lines = []
        self.input_text = ""
        self.scroll_back = 0
        self._callback = None
        self._visible_rows = 10
        self.surface = pygame.Surface((width, height))

    def println(self, line):
        self.lines.append(line)
        self.scroll_back = 0

    def on_input(self, callback):
        self._callback = callback

    def scroll_to_top(self):
        # Clamped to the real top on the next draw
        self.scroll_back = sys.maxsize

    def resize(self, x, height):
        self.x = x
        if height != self.height:
            self.height = height
            self.surface = pygame.Surface((self.width, height))

    def submit(self):
        line = self.input_text.strip()
        self.input_text = ""
        if line and self._callback:
            self._callback(line)

    def handle_event(self, event):
        """Consume text entry, editing and scrolling events."""
        if event.type == pygame.TEXTINPUT:
            self.input_text += event.text
            return True

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.submit()
                return True
            if event.key == pygame.K_BACKSPACE:
                self.input_text = self.input_text[:-1]
                return True
            if event.key == pygame.K_PAGEUP:
                self.scroll_back += self._visible_rows
                return True
            if event.key == pygame.K_PAGEDOWN:
                self.scroll_back = max(0, self.scroll_back - self._visible_rows)
                return True

        elif event.type == pygame.MOUSEWHEEL:
            self.scroll_back = max(0, self.scroll_back + event.y * SCROLL_STEP)
            return True

        return False

    def wrapped_rows(self, columns):
        """Scrollback split into display rows of at most `columns` characters."""
        rows = []
        for line in self.lines:
            wrapped = textwrap.wrap(line, columns, drop_whitespace=False,
                                    replace_whitespace=False)
            rows.extend(wrapped or [""])
        return rows

    def visible_rows(self, columns, row_count):
        """Rows currently on screen, after clamping the scroll position."""
        rows = self.wrapped_rows(columns)
        max_back = max(0, len(rows) - row_count)
        self.scroll_back = min(self.scroll_back, max_back)
        end = len(rows) - self.scroll_back
        return rows[max(0, end - row_count):end]

    def _row_color(self, row):
        if row.startswith("  ^ err:"):
            return THEME["error"]
        if row.startswith("$ "):
            return THEME["text_bright"]
        return THEME["text"]

    def draw(self, target_surface, font):
        """Draw the panel onto the target surface."""
        self.surface.fill(THEME["panel"])
        pygame.draw.line(self.surface, THEME["divider"], (0, 0), (0, self.height))

        padding = 8
        line_h = font.get_linesize()
        char_w = max(1, font.size("M")[0])
        columns = max(1, (self.width - 2 * padding) // char_w)

        input_h = line_h + 2 * padding
        self._visible_rows = max(1, (self.height - input_h - padding) // line_h)

        ty = padding
        for row in self.visible_rows(columns, self._visible_rows):
            if row:
                self.surface.blit(font.render(row, True, self._row_color(row)), (padding, ty))
            ty += line_h

        # Input line
        input_rect = pygame.Rect(0, self.height - input_h, self.width, input_h)
        pygame.draw.rect(self.surface, THEME["input"], input_rect)
        text = INPUT_PROMPT + self.input_text + "_"
        text = text[-columns:]
        self.surface.blit(font.render(text, True, THEME["text_bright"]),
                          (padding, input_rect.y + padding))

        target_surface.blit(self.surface, (self.x, self.y))
