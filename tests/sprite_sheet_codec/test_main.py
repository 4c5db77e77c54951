"""Tests for the command-line interface."""

import pytest
from PIL import Image
from sprite_sheet_codec.__main__ import build_parser, main
from tests.fixtures.create_test_data import create_source_directory


@pytest.fixture
def source_dir(tmp_path):
    directory = tmp_path / "sources"
    create_source_directory(directory, {"hero.png": (64, 64)})
    return directory


def test_cli_build_and_parse(source_dir, tmp_path):
    sheet_dir = tmp_path / "sheet"
    assert main(["-b", "30", str(source_dir), str(sheet_dir)]) == 0

    sheet_path = sheet_dir / "spritesheet_30.png"
    assert Image.open(sheet_path).size == (90, 93)

    parsed_dir = tmp_path / "parsed"
    assert main(["-p", "30", str(sheet_path), str(parsed_dir)]) == 0
    assert Image.open(parsed_dir / "hero.png").size == (64, 64)


def test_cli_parse_without_destination(source_dir, tmp_path, capsys):
    main(["-b", "30", str(source_dir), str(tmp_path)])

    assert main(["-p", "30", str(tmp_path / "spritesheet_30.png")]) == 0
    out = capsys.readouterr().out
    assert "Recovered 1 image(s)" in out
    assert "hero: 64x64" in out


def test_cli_non_numeric_tile_size(source_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-b", "big", str(source_dir), str(tmp_path)])

    assert exc.value.code == 2
    assert "Invalid non-numeric tile size: big" in capsys.readouterr().err


def test_cli_wrong_argument_count(tmp_path):
    with pytest.raises(SystemExit):
        main(["-b", "30", str(tmp_path)])
    with pytest.raises(SystemExit):
        main(["-p", "30"])
    with pytest.raises(SystemExit):
        main(["-p", "30", "a.png", "out", "extra"])


def test_cli_requires_an_action():
    with pytest.raises(SystemExit):
        main([])


def test_cli_help_lists_tips(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-h"])

    assert exc.value.code == 0
    assert "TILE_SIZE must match" in capsys.readouterr().out


def test_cli_build_and_parse_are_exclusive():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["-b", "30", "a", "b", "-p", "30", "c"])
