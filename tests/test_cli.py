import json

import pytest

from cli import main

ARGS = ["-c", "0", "0", "10", "-c", "30", "0", "5", "-c", "10", "40", "8"]


def test_report(capsys):
    assert main(ARGS) == 0
    out = capsys.readouterr().out
    assert "Circle 2: (10.00, 40.00) r=8.00" in out
    assert "(0, 1, 2) first: (12.50, 0.00) r=22.50" in out
    assert "Best:" in out


def test_json_dump(tmp_path):
    path = tmp_path / "scene.json"
    assert main(ARGS + ["--first", "--second", "-j", str(path)]) == 0
    record = json.loads(path.read_text(encoding="utf-8"))
    assert len(record["circles"]) == 3
    assert [s["order"] for s in record["stages"]] == [
        [0, 1, 2], [0, 2, 1], [1, 0, 2], [1, 2, 0], [2, 0, 1], [2, 1, 0]
    ]
    assert len(record["commands"]) == 15
    assert record["commands"][0]["color"] == [0, 0, 255]
    assert record["commands"][3]["color"] == [0, 255, 0]
    assert record["commands"][4]["color"] == [255, 0, 0]


def test_flags_off(tmp_path):
    path = tmp_path / "scene.json"
    main(ARGS + ["--no-first", "--no-second", "-j", str(path)])
    record = json.loads(path.read_text(encoding="utf-8"))
    assert len(record["commands"]) == 3


def test_png_output(tmp_path):
    path = tmp_path / "scene.png"
    assert main(ARGS + ["-o", str(path)]) == 0
    assert path.read_bytes().startswith(b"\x89PNG")


def test_default_scene(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.count("first:") == 6


@pytest.mark.parametrize("argv", [
    ["-c", "0", "0", "10", "-c", "30", "0", "5"],
    ["-c", "0", "0", "10", "-c", "30", "0", "-5", "-c", "10", "40", "8"],
])
def test_invalid_circles(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2


def test_report_file(tmp_path, capsys):
    path = tmp_path / "report"
    assert main(ARGS + ["--no-second", "-r", str(path)]) == 0
    out = capsys.readouterr().out
    text = (tmp_path / "report.txt").read_text(encoding="utf-8")
    # the flag header goes to the report only
    assert "first merge: " not in out
    assert "second merge: off" in text
    assert "Circle 2: (10.00, 40.00) r=8.00" in text
    assert "(0, 1, 2) first: (12.50, 0.00) r=22.50" in text
