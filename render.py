from collections.abc import Iterable
import io, pathlib

from core import CANVAS_WIDTH, CANVAS_HEIGHT, BACKGROUND_COLOR, LINE_WIDTH
from core import DrawCommand, load_line_width

import pygame as pg


class SceneRenderer:
    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 background=BACKGROUND_COLOR, line_width: int = LINE_WIDTH):
        self.canvas = pg.Surface((width, height))
        self.background = background
        self.line_width = load_line_width(line_width)

    def clear_canvas(self):
        self.canvas.fill(self.background)

    def draw_command(self, command: DrawCommand):
        circle, color = command
        # truncate like an integer rasterizer would
        x, y = int(circle.center.real), int(circle.center.imag)
        r = int(circle.radius)
        if r < 1:
            # pygame draws nothing below 1 px
            return
        pg.draw.circle(self.canvas, color, [x, y], r, self.line_width)

    def render(self, commands: Iterable[DrawCommand]) -> pg.Surface:
        self.clear_canvas()
        for command in commands:
            self.draw_command(command)
        return self.canvas


def save_png(surface: pg.Surface, path: pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(path)
    if path.suffix == "":
        path = path.with_suffix(".png")
    pg.image.save(surface, str(path))
    return path


def encode_png(surface: pg.Surface) -> bytes:
    buf = io.BytesIO()
    pg.image.save(surface, buf, "png")
    return buf.getvalue()
