from typing import NamedTuple
from collections.abc import Iterable, Sequence
from math import isfinite
import json, pathlib, io

# ==================== Constants Definition ====================
# Colors of the drawable scene
COLOR_ORIGINAL = (0, 0, 255)
COLOR_FIRST_MERGE = (0, 255, 0)
COLOR_SECOND_MERGE = (255, 0, 0)

CIRCLE_COUNT = 3

# tolerance used by covering checks, in px
EPSILON = 1e-3

# Rendering definitions
RENDER_FPS = 60
PANEL_WIDTH = 220

# User defined constants
config_path = pathlib.Path(__file__).parent.absolute() / "config.json"
if not config_path.exists():
    with config_path.open("w", encoding="u8") as f:
        obj = {
            "canvas_width": 500,
            "canvas_height": 500,
            "radius_max": 500,
            "circles": [[150, 150, 100], [350, 130, 30], [120, 330, 80]],
            "show_first_merge": True,
            "show_second_merge": False,
            "background": [0, 0, 0],
            "line_width": 1,
        }
        json.dump(obj, f, indent=4)

with config_path.open(encoding="u8") as f:
    obj = json.load(f)

CANVAS_WIDTH = int(obj["canvas_width"])
CANVAS_HEIGHT = int(obj["canvas_height"])
RADIUS_MAX = float(obj["radius_max"])     # upper bound of the radius editor

SHOW_FIRST_MERGE = bool(obj["show_first_merge"])
SHOW_SECOND_MERGE = bool(obj["show_second_merge"])


def load_line_width(value) -> int:
    """outline width in px, 0 would make pygame fill the disk"""
    width = int(value)
    if width < 1:
        raise ValueError("Line width must be at least 1, got %r" % value)
    return width


BACKGROUND_COLOR = tuple(obj["background"])
LINE_WIDTH = load_line_width(obj["line_width"])


# ==================== Circle ====================
class Circle(NamedTuple):
    center: complex
    radius: float

    @classmethod
    def from_xy(cls, x: float, y: float, radius: float) -> "Circle":
        return cls(complex(x, y), float(radius))

    @property
    def xy(self) -> tuple[float, float]:
        return self.center.real, self.center.imag

    def contains(self, other: "Circle", eps: float = EPSILON) -> bool:
        """whether the closed disk of `other` lies inside this one"""
        return abs(other.center - self.center) + other.radius <= self.radius + eps


class DrawCommand(NamedTuple):
    circle: Circle
    color: tuple[int, int, int]


def load_circle_set(rows: Iterable[Sequence[float]]) -> tuple[Circle, ...]:
    """
    Build a circle set from [x, y, radius] rows.

    @param rows: exactly three rows of numbers
    @return: a tuple of three circles
    """
    circles = []
    for row in rows:
        if len(row) != 3:
            raise ValueError("Circle needs x, y and radius, got %r" % (row,))
        x, y, r = (float(v) for v in row)
        if not (isfinite(x) and isfinite(y) and isfinite(r)):
            raise ValueError("Circle values must be finite, got %r" % (row,))
        if r < 0:
            raise ValueError("Circle radius must not be negative, got %r" % r)
        circles.append(Circle.from_xy(x, y, r))
    if len(circles) != CIRCLE_COUNT:
        raise ValueError("Expected %d circles, got %d" % (CIRCLE_COUNT, len(circles)))
    return tuple(circles)


INITIAL_CIRCLES = load_circle_set(obj["circles"])


# ==================== Report ====================
class ReportWriter:
    def __init__(self):
        self.buf = io.StringIO()

    def dump(self, file) -> None:
        lines = self.buf.getvalue().splitlines()
        for line in lines:
            print(line, file=file)

    def writeln(self, *args, **kw):
        print(*args, **kw)
        print(*args, **kw, file=self.buf)

    def writeln_no_stdout(self, *args, **kw):
        print(*args, **kw, file=self.buf)

REPORT_WRITER = ReportWriter()


def format_circle(circle: Circle) -> str:
    x, y = circle.xy
    return "(%.2f, %.2f) r=%.2f" % (x, y, circle.radius)


if __name__ == "__main__":
    for c in INITIAL_CIRCLES:
        print(format_circle(c))
