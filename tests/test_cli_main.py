from __future__ import annotations

import pytest

import cli.main as cli_main
from cli.main import main

SAMPLE = """ncols 4
nrows 3
xllcorner 0
yllcorner 0
cellsize 10
NODATA_value -99999
1 2 3 4
5 6 -99999 8
9 10 11 12
"""


def _write(tmp_path, text: str = SAMPLE):
    path = tmp_path / "dem.asc"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_reports_summary(tmp_path, capsys) -> None:
    path = _write(tmp_path)

    code = main([str(path), "--mode", "color+hillshade", "--no-show"])
    assert code == 0

    out = capsys.readouterr().out
    assert "Loaded grid: 4x3" in out
    assert "nodata cells=1" in out
    assert "Rendered color+hillshade: 4x3x3" in out


def test_cli_shows_buffer(tmp_path, monkeypatch) -> None:
    path = _write(tmp_path)
    shown = []
    monkeypatch.setattr(cli_main, "show_buffer", lambda buffer, title: shown.append((buffer, title)))

    assert main([str(path), "--mode", "hillshade"]) == 0
    assert len(shown) == 1
    assert shown[0][0].channels == 1
    assert "hillshade" in shown[0][1]


def test_cli_unknown_mode_is_usage_error(tmp_path, capsys) -> None:
    path = _write(tmp_path)

    with pytest.raises(SystemExit) as exc:
        main([str(path), "--mode", "sepia", "--no-show"])

    assert exc.value.code == 2
    assert "Unknown mode" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys) -> None:
    code = main([str(tmp_path / "missing.asc"), "--no-show"])

    assert code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_cli_malformed_file(tmp_path, capsys) -> None:
    path = _write(tmp_path, "ncols 4\nnrows x\n")

    assert main([str(path), "--no-show"]) == 1
    assert "Cannot render" in capsys.readouterr().err


def test_cli_all_nodata_hillshade_renders(tmp_path, capsys) -> None:
    text = SAMPLE.split("-99999\n", 1)[0] + "-99999\n" + "-99999 " * 12 + "\n"
    path = _write(tmp_path, text)

    assert main([str(path), "--mode", "hillshade", "--no-show"]) == 0
    assert "no valid samples" in capsys.readouterr().out


def test_cli_all_nodata_grayscale_fails(tmp_path, capsys) -> None:
    text = SAMPLE.split("-99999\n", 1)[0] + "-99999\n" + "-99999 " * 12 + "\n"
    path = _write(tmp_path, text)

    assert main([str(path), "--mode", "grayscale", "--no-show"]) == 1
    assert "no valid elevation samples" in capsys.readouterr().err
