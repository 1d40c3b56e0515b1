"""
Rendering Engine
=================
Double-buffered terminal renderer that implements the drawing surface
with braille sub-pixels.
"""

import math
from typing import List, Tuple

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .surface import DrawingSurface, Point, TextStyle


# ANSI 256 color constants
NEON_CYAN = 51
NEON_MAGENTA = 201
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196

GRAY_MED = 245
GRAY_DARK = 238
GRAY_DARKER = 235

WHITE = 255

# Rows reserved under the game area for the HUD
UI_ROWS = 3

# (char, fg_color)
Cell = Tuple[str, int]
BLANK: Cell = (' ', 7)


class DoubleBuffer:
    """
    Two grids of cells: the frame being drawn and the frame on screen.

    present() diffs them and emits escape sequences for the changed runs
    only, so the screen is never cleared between frames.
    """

    def __init__(self, term: Terminal):
        self.term = term
        self._normal = term.normal
        self.resize(term.width, term.height)

    def _blank_grid(self) -> List[List[Cell]]:
        return [[BLANK] * self.width for _ in range(self.height)]

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self.front = self._blank_grid()
        self.back = self._blank_grid()

    def clear_back(self):
        self.back = self._blank_grid()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.back[y][x] = (char, fg_color)

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        if not 0 <= y < self.height:
            return
        row = self.back[y]
        for i, char in enumerate(text[max(0, -x):], start=max(0, x)):
            if i >= self.width:
                break
            row[i] = (char, fg_color)

    def is_blank(self, x: int, y: int) -> bool:
        return self.back[y][x][0] == ' '

    def present(self) -> str:
        """Emit the changed cells, then make the drawn frame the visible one."""
        term = self.term
        out = []
        color = None

        for y, (new_row, old_row) in enumerate(zip(self.back, self.front)):
            in_run = False
            for x, cell in enumerate(new_row):
                if cell == old_row[x]:
                    in_run = False
                    continue
                if not in_run:
                    out.append(term.move_xy(x, y))
                    in_run = True
                char, fg = cell
                if fg != color:
                    out.append(self._normal + term.color(fg))
                    color = fg
                out.append(char or ' ')

        if out:
            out.append(self._normal)
        self.front, self.back = self.back, self.front
        return ''.join(out)


class BrailleCanvas:
    """
    Pixel layer drawn with braille glyphs; each cell holds a 2x4 dot grid.

    A cell takes the color of the last dot set in it.
    """

    BASE = 0x2800
    # DOT_BITS[row][column]
    DOT_BITS = (
        (0x01, 0x08),
        (0x02, 0x10),
        (0x04, 0x20),
        (0x40, 0x80),
    )

    def __init__(self, char_width: int, char_height: int):
        self.char_width = char_width
        self.char_height = char_height
        self.pixel_width = char_width * 2
        self.pixel_height = char_height * 4
        self.clear()

    def clear(self):
        size = self.char_width * self.char_height
        self.dots = [0] * size
        self.colors = [WHITE] * size

    def set_pixel(self, px: int, py: int, color: int = WHITE):
        if 0 <= px < self.pixel_width and 0 <= py < self.pixel_height:
            index = (py >> 2) * self.char_width + (px >> 1)
            self.dots[index] |= self.DOT_BITS[py & 3][px & 1]
            self.colors[index] = color

    def get_char(self, cx: int, cy: int) -> Tuple[str, int]:
        """Glyph and color of a cell, or ('', WHITE) when it has no dots."""
        if 0 <= cx < self.char_width and 0 <= cy < self.char_height:
            index = cy * self.char_width + cx
            if self.dots[index]:
                return chr(self.BASE + self.dots[index]), self.colors[index]
        return '', WHITE

    def blit_to_buffer(self, buffer: DoubleBuffer, offset_x: int = 0, offset_y: int = 0):
        """Copy lit cells into the buffer wherever no text was drawn."""
        for index, pattern in enumerate(self.dots):
            if not pattern:
                continue
            cy, cx = divmod(index, self.char_width)
            bx, by = cx + offset_x, cy + offset_y
            if 0 <= bx < buffer.width and 0 <= by < buffer.height and buffer.is_blank(bx, by):
                buffer.put(bx, by, chr(self.BASE + pattern), self.colors[index])


class TerminalSurface(DrawingSurface):
    """
    Drawing surface backed by the terminal.

    World units are scaled uniformly onto the braille canvas covering the
    game area (everything above the HUD rows) and centred. Text is placed
    directly in cells and wins over braille dots in the same cell.
    """

    def __init__(self, term: Terminal, world_width: float, world_height: float):
        super().__init__()
        self.term = term
        self.world_width = world_width
        self.world_height = world_height
        self.buffer = DoubleBuffer(term)
        self.braille = BrailleCanvas(term.width, max(1, term.height - UI_ROWS))
        self.show_fps = False
        self.current_fps = 60.0
        self._fit()

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def game_height(self) -> int:
        """Height of the playable area (excluding UI rows)."""
        return self.buffer.height - UI_ROWS

    def _fit(self):
        """Compute the world -> pixel scale and centring offsets."""
        pw = self.braille.pixel_width
        ph = self.braille.pixel_height
        self.scale = min(pw / self.world_width, ph / self.world_height)
        self.offset_x = round((pw - self.world_width * self.scale) / 2)
        self.offset_y = round((ph - self.world_height * self.scale) / 2)

    def resize(self, width: int, height: int):
        """Handle terminal resize."""
        self.buffer.resize(width, height)
        self.braille = BrailleCanvas(width, max(1, height - UI_ROWS))
        self._fit()

    def world_to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        return self.offset_x + x * self.scale, self.offset_y + y * self.scale

    def world_to_cell(self, x: float, y: float) -> Tuple[int, int]:
        px, py = self.world_to_pixel(x, y)
        return int(px // 2), int(py // 4)

    # -------------------------------------------------------------------------
    # DrawingSurface primitives
    # -------------------------------------------------------------------------

    def clear(self, width: float, height: float) -> None:
        self.buffer.clear_back()
        self.braille.clear()

    def draw_circle(self, center: Point, radius: float, color: int,
                    filled: bool = True) -> None:
        cx, cy = self.world_to_pixel(*self.to_world(*center))
        r = radius * self.scale

        if r < 0.75:
            self.braille.set_pixel(int(cx), int(cy), color)
            return

        if filled:
            for py in range(int(cy - r), int(cy + r) + 1):
                for px in range(int(cx - r), int(cx + r) + 1):
                    if (px + 0.5 - cx) ** 2 + (py + 0.5 - cy) ** 2 <= r * r:
                        self.braille.set_pixel(px, py, color)
        else:
            steps = max(12, int(2 * math.pi * r * 1.5))
            for i in range(steps):
                a = 2 * math.pi * i / steps
                self.braille.set_pixel(
                    int(cx + math.cos(a) * r), int(cy + math.sin(a) * r), color
                )

    def draw_rect(self, origin: Point, size: Point, color: int) -> None:
        ox, oy = origin
        w, h = size
        # Sample the local rectangle at half-pixel spacing so rotation leaves no gaps
        step = 0.5 / self.scale
        nx = max(1, int(w / step) + 1)
        ny = max(1, int(h / step) + 1)
        for j in range(ny):
            ly = oy + min(h, j * step)
            for i in range(nx):
                lx = ox + min(w, i * step)
                px, py = self.world_to_pixel(*self.to_world(lx, ly))
                self.braille.set_pixel(int(px), int(py), color)

    def draw_text(self, text: str, position: Point,
                  style: TextStyle = TextStyle()) -> None:
        if style.size == 'large':
            text = ' '.join(text.upper())
        cx, cy = self.world_to_cell(*self.to_world(*position))
        if style.align == 'center':
            cx -= len(text) // 2
        elif style.align == 'right':
            cx -= len(text)
        self.buffer.put_string(cx, cy, text, style.color)

    # -------------------------------------------------------------------------
    # Host helpers (HUD, borders, output)
    # -------------------------------------------------------------------------

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        self.buffer.put_string(x, y, text, fg_color)

    def draw_box(self, x: int, y: int, w: int, h: int, color: int = GRAY_DARK,
                 char: str = '#'):
        """Draw a rectangular border of cells."""
        for i in range(w):
            self.buffer.put(x + i, y, char, color)
            self.buffer.put(x + i, y + h - 1, char, color)
        for j in range(1, h - 1):
            self.buffer.put(x, y + j, char, color)
            self.buffer.put(x + w - 1, y + j, char, color)

    def draw_playfield_border(self, color: int = GRAY_DARKER):
        """Outline the cells just outside the scaled playfield."""
        left, top = self.world_to_cell(0, 0)
        right, bottom = self.world_to_cell(self.world_width, self.world_height)
        self.draw_box(left - 1, top - 1, right - left + 2, bottom - top + 2,
                      color, '.')

    def present(self) -> str:
        """Finalize frame: blit braille overlay and return changed cells."""
        self.braille.blit_to_buffer(self.buffer)
        return self.buffer.present()
