import pathlib
import traceback
from collections.abc import Sequence

from core import CANVAS_WIDTH, CANVAS_HEIGHT, RADIUS_MAX, PANEL_WIDTH, RENDER_FPS, REPORT_WRITER
from core import INITIAL_CIRCLES, SHOW_FIRST_MERGE, SHOW_SECOND_MERGE
from core import Circle, format_circle
from merge import build_scene, best_covering_circle
from render import SceneRenderer, save_png

import pygame as pg


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SceneEditor:
    """
    Owns the circle set and both flags. Every edit replaces a circle with a new
    one and marks the scene dirty, the scene is then rebuilt from scratch.
    """

    def __init__(self, circles: Sequence[Circle] = INITIAL_CIRCLES,
                 show_first: bool = SHOW_FIRST_MERGE, show_second: bool = SHOW_SECOND_MERGE):
        self.circles = list(circles)
        self.show_first = show_first
        self.show_second = show_second
        self.selected = 0
        self.dirty = True

    def select(self, idx: int):
        if 0 <= idx < len(self.circles):
            self.selected = idx

    def move_to(self, x: float, y: float):
        c = self.circles[self.selected]
        x = clamp(x, 0, CANVAS_WIDTH)
        y = clamp(y, 0, CANVAS_HEIGHT)
        self.circles[self.selected] = Circle.from_xy(x, y, c.radius)
        self.dirty = True

    def move_by(self, dx: float, dy: float):
        x, y = self.circles[self.selected].xy
        self.move_to(x + dx, y + dy)

    def resize_by(self, dr: float):
        c = self.circles[self.selected]
        self.circles[self.selected] = Circle(c.center, clamp(c.radius + dr, 0, RADIUS_MAX))
        self.dirty = True

    def toggle_first(self):
        self.show_first = not self.show_first
        self.dirty = True

    def toggle_second(self):
        self.show_second = not self.show_second
        self.dirty = True

    def scene(self):
        return build_scene(self.circles, self.show_first, self.show_second)

    def status_lines(self) -> list[str]:
        lines = []
        for i, c in enumerate(self.circles):
            mark = ">" if i == self.selected else " "
            lines.append("%s Circle %d" % (mark, i))
            lines.append("   %s" % format_circle(c))
        lines.append("")
        lines.append("[F] first merge: %s" % ("on" if self.show_first else "off"))
        lines.append("[S] second merge: %s" % ("on" if self.show_second else "off"))
        lines.append("")
        lines.append("best r=%.2f" % best_covering_circle(self.circles).radius)
        return lines


class EditorWindow:
    screenshot_path = pathlib.Path("merge_sphere.png")

    def __init__(self, editor: SceneEditor):
        self.editor = editor
        self.display = pg.display.set_mode((CANVAS_WIDTH + PANEL_WIDTH, CANVAS_HEIGHT))
        pg.display.set_caption("Merge sphere")
        self.renderer = SceneRenderer()
        self.font = pg.font.Font(None, 22)
        self.clock = pg.time.Clock()
        self.dragging = False
        self.running = True

    def event_loop(self):
        editor = self.editor
        for event in pg.event.get():
            if event.type == pg.QUIT:
                self.running = False
            elif event.type == pg.KEYDOWN:
                step = 10 if event.mod & pg.KMOD_SHIFT else 1
                if event.key == pg.K_ESCAPE:
                    self.running = False
                elif event.key in (pg.K_1, pg.K_2, pg.K_3):
                    editor.select(event.key - pg.K_1)
                elif event.key == pg.K_LEFT:
                    editor.move_by(-step, 0)
                elif event.key == pg.K_RIGHT:
                    editor.move_by(step, 0)
                elif event.key == pg.K_UP:
                    editor.move_by(0, -step)
                elif event.key == pg.K_DOWN:
                    editor.move_by(0, step)
                elif event.key in (pg.K_PLUS, pg.K_EQUALS, pg.K_KP_PLUS):
                    editor.resize_by(step)
                elif event.key in (pg.K_MINUS, pg.K_KP_MINUS):
                    editor.resize_by(-step)
                elif event.key == pg.K_f:
                    editor.toggle_first()
                elif event.key == pg.K_s:
                    editor.toggle_second()
                elif event.key == pg.K_p:
                    path = save_png(self.renderer.canvas, self.screenshot_path)
                    REPORT_WRITER.writeln("Saved %s" % path)
            elif event.type == pg.MOUSEBUTTONDOWN and event.button == 1:
                if event.pos[0] < CANVAS_WIDTH:
                    self.dragging = True
                    editor.move_to(*event.pos)
            elif event.type == pg.MOUSEBUTTONUP and event.button == 1:
                self.dragging = False
            elif event.type == pg.MOUSEMOTION and self.dragging:
                editor.move_to(*event.pos)
            elif event.type == pg.MOUSEWHEEL:
                editor.resize_by(event.y)

    def render_panel(self):
        panel = pg.Rect(CANVAS_WIDTH, 0, PANEL_WIDTH, CANVAS_HEIGHT)
        self.display.fill([40, 40, 40], panel)
        for i, line in enumerate(self.editor.status_lines()):
            surf = self.font.render(line, True, [255, 255, 255])
            self.display.blit(surf, [CANVAS_WIDTH + 10, 10 + i * 20])

    def run(self):
        while self.running:
            self.event_loop()
            if self.editor.dirty:
                self.renderer.render(self.editor.scene())
                self.editor.dirty = False
            self.display.blit(self.renderer.canvas, [0, 0])
            self.render_panel()
            pg.display.update()
            self.clock.tick(RENDER_FPS)


def main():
    pg.init()
    try:
        window = EditorWindow(SceneEditor())
        window.run()
    except Exception:
        REPORT_WRITER.writeln(traceback.format_exc())
    finally:
        pg.quit()


if __name__ == "__main__":
    main()
