from core import Circle, CANVAS_WIDTH, CANVAS_HEIGHT, RADIUS_MAX
from merge import build_scene
from main import SceneEditor

CIRCLES = (
    Circle.from_xy(150, 150, 100),
    Circle.from_xy(350, 130, 30),
    Circle.from_xy(120, 330, 80),
)


def make_editor() -> SceneEditor:
    editor = SceneEditor(CIRCLES, True, False)
    editor.dirty = False
    return editor


def test_edit_replaces_circle():
    editor = make_editor()
    editor.select(1)
    editor.move_by(5, -10)
    assert editor.circles[1] == Circle.from_xy(355, 120, 30)
    assert editor.circles[0] == CIRCLES[0]
    assert editor.dirty


def test_move_is_clamped_to_canvas():
    editor = make_editor()
    editor.move_to(-20, CANVAS_HEIGHT + 50)
    assert editor.circles[0].xy == (0, CANVAS_HEIGHT)
    editor.move_to(CANVAS_WIDTH + 1, -1)
    assert editor.circles[0].xy == (CANVAS_WIDTH, 0)


def test_radius_is_clamped():
    editor = make_editor()
    editor.select(1)
    editor.resize_by(-100)
    assert editor.circles[1].radius == 0
    editor.resize_by(RADIUS_MAX + 100)
    assert editor.circles[1].radius == RADIUS_MAX


def test_select_out_of_range_is_ignored():
    editor = make_editor()
    editor.select(5)
    assert editor.selected == 0


def test_toggles_rebuild_scene():
    editor = make_editor()
    assert len(editor.scene()) == 9
    editor.toggle_second()
    assert editor.dirty
    assert editor.scene() == build_scene(CIRCLES, True, True)
    editor.toggle_first()
    editor.toggle_second()
    assert len(editor.scene()) == 3


def test_status_lines():
    lines = make_editor().status_lines()
    assert lines[0] == "> Circle 0"
    assert "[F] first merge: on" in lines
    assert "[S] second merge: off" in lines
    assert lines[-1].startswith("best r=")
