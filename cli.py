import pathlib
import argparse
import json

from core import REPORT_WRITER, INITIAL_CIRCLES, SHOW_FIRST_MERGE, SHOW_SECOND_MERGE
from core import Circle, load_circle_set, format_circle
from merge import merge_stages, build_scene, best_covering_circle
from render import SceneRenderer, save_png


def circle_record(circle: Circle) -> dict:
    x, y = circle.xy
    return {"x": x, "y": y, "radius": circle.radius}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Merge three circles into covering circles"
    )
    parser.add_argument("-c", "--circle", action="append", nargs=3, type=float,
                        metavar=("X", "Y", "R"), help="give exactly three times")
    parser.add_argument("--first", default=SHOW_FIRST_MERGE, action=argparse.BooleanOptionalAction,
                        help="draw the first merge of each ordering")
    parser.add_argument("--second", default=SHOW_SECOND_MERGE, action=argparse.BooleanOptionalAction,
                        help="draw the second merge of each ordering")
    parser.add_argument("-o", "--output", default=None, type=pathlib.Path)
    parser.add_argument("-j", "--json", default=None, type=pathlib.Path)
    parser.add_argument("-r", "--report", default=None, type=pathlib.Path,
                        help="save the printed report to a text file")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    namespace = parser.parse_args(argv)

    if namespace.circle is None:
        circles = INITIAL_CIRCLES
    else:
        try:
            circles = load_circle_set(namespace.circle)
        except ValueError as e:
            parser.error(str(e))

    REPORT_WRITER.writeln_no_stdout("first merge: %s, second merge: %s\n" % (
        "on" if namespace.first else "off", "on" if namespace.second else "off"))
    for i, c in enumerate(circles):
        REPORT_WRITER.writeln("Circle %d: %s" % (i, format_circle(c)))
    stages = merge_stages(circles)
    for stage in stages:
        REPORT_WRITER.writeln("%s first: %s, second: %s" % (
            stage.order, format_circle(stage.first), format_circle(stage.second)))
    best = best_covering_circle(circles)
    REPORT_WRITER.writeln("Best: %s" % format_circle(best))

    scene = build_scene(circles, namespace.first, namespace.second)

    if namespace.output is not None:
        surface = SceneRenderer().render(scene)
        path = save_png(surface, namespace.output)
        REPORT_WRITER.writeln("Saved %s" % path)

    if namespace.json is not None:
        record = {
            "circles": [circle_record(c) for c in circles],
            "stages": [
                {"order": list(s.order), "first": circle_record(s.first), "second": circle_record(s.second)}
                for s in stages
            ],
            "best": circle_record(best),
            "commands": [dict(circle_record(cmd.circle), color=list(cmd.color)) for cmd in scene],
        }
        with namespace.json.open("w", encoding="u8") as f:
            json.dump(record, f, indent=4)

    if namespace.report is not None:
        report_path = namespace.report
        if report_path.suffix == "":
            report_path = report_path.with_suffix(".txt")
        with report_path.open("w", encoding="utf-8") as f:
            REPORT_WRITER.dump(f)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
