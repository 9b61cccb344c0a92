# tests/test_demo.py
"""CLI: JSON output and error exit codes."""

from __future__ import annotations

import json

import pytest

from color_palette_resolver.demo import main


def _run(capsys, *argv):
    main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_list(capsys):
    rows = _run(capsys, "list")
    keys = [r["key"] for r in rows]
    assert keys[:3] == ["Alphabet", "CGA", "HTML4"]
    assert "xkcd" in keys


def test_show(capsys):
    rows = _run(capsys, "show", "MATLAB")
    assert rows[0] == {"name": "Black", "rgb": [0.0, 0.0, 0.0]}


def test_names(capsys):
    rows = _run(capsys, "names", "MATLAB", "c", "m", "y", "k")
    assert [r["name"] for r in rows] == ["Cyan", "Magenta", "Yellow", "Black"]


def test_colors_with_metric(capsys):
    rows = _run(capsys, "colors", "HTML4", "0,0.5,1", "1,0.5,0", "--metric", "RGB")
    assert [r["name"] for r in rows] == ["Teal", "Olive"]


def test_unmatched_name_exits_1(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["names", "Natural", "Z"])
    assert ei.value.code == 1
    err = capsys.readouterr().err
    assert '"Z"' in err
    assert "Black" in err


def test_bad_sample_is_an_argparse_error(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["colors", "HTML4", "red"])
    assert ei.value.code == 2
