"""End-to-end tests for the colored-title-bar command line."""

import json

import pytest
from PIL import Image

from colored_title_bar.cli import NO_WORKSPACE_MESSAGE, main
from colored_title_bar.palette import generate_title_bar_colors_from_hue
from colored_title_bar.theme import ThemeKind


def _customizations(workspace):
    data = json.loads((workspace / ".vscode" / "settings.json").read_text(encoding="utf-8"))
    return data["workbench.colorCustomizations"]


def test_randomize_is_reproducible_with_seed(workspace, tmp_path, capsys):
    other = tmp_path / "other"
    other.mkdir()
    assert main(["randomize", str(workspace), "--random-seed", "7"]) == 0
    assert main(["randomize", str(other), "--random-seed", "7"]) == 0
    assert _customizations(workspace) == _customizations(other)
    assert "Title bar color updated to #" in capsys.readouterr().out


def test_randomize_without_workspace(tmp_path, capsys):
    assert main(["randomize", str(tmp_path / "missing")]) == 1
    assert NO_WORKSPACE_MESSAGE in capsys.readouterr().out


class TestPickHue:
    def test_lists_presets(self, capsys):
        assert main(["pick-hue"]) == 0
        out = capsys.readouterr().out
        assert "Color families:" in out
        assert "Teal" in out

    def test_preset_for_light_theme(self, workspace, capsys):
        assert main(["pick-hue", str(workspace), "--hue", "teal", "--theme", "light"]) == 0
        expected = generate_title_bar_colors_from_hue(175, ThemeKind.LIGHT)
        assert _customizations(workspace) == expected.to_settings()
        assert f"Teal ({expected.active_background})" in capsys.readouterr().out

    def test_degrees(self, workspace):
        assert main(["pick-hue", str(workspace), "--hue", "200"]) == 0
        expected = generate_title_bar_colors_from_hue(200, ThemeKind.DARK)
        assert _customizations(workspace) == expected.to_settings()

    def test_unknown_hue(self, workspace, capsys):
        assert main(["pick-hue", str(workspace), "--hue", "bogus"]) == 2
        assert "Error:" in capsys.readouterr().err
        assert not (workspace / ".vscode").exists()


def test_seed_is_stable(workspace, tmp_path, capsys):
    other = tmp_path / "other"
    other.mkdir()
    assert main(["seed", str(workspace), "--seed", "my-service"]) == 0
    assert main(["seed", str(other), "--seed", "my-service"]) == 0
    assert _customizations(workspace) == _customizations(other)
    assert "Title bar color for my-service is #" in capsys.readouterr().out


def test_startup_runs_once(workspace, capsys):
    assert main(["startup", str(workspace)]) == 0
    first = _customizations(workspace)
    assert main(["startup", str(workspace)]) == 0
    assert _customizations(workspace) == first
    out = capsys.readouterr().out
    assert "Title bar color set to #" in out
    assert "Title bar already colored; nothing to do." in out


def test_startup_without_workspace(tmp_path, capsys):
    assert main(["startup", str(tmp_path / "missing")]) == 1
    assert NO_WORKSPACE_MESSAGE in capsys.readouterr().out


def test_show_and_reset(workspace, capsys):
    assert main(["show", str(workspace)]) == 1
    assert "No title bar colors applied" in capsys.readouterr().out

    main(["seed", str(workspace)])
    capsys.readouterr()
    assert main(["show", str(workspace)]) == 0
    out = capsys.readouterr().out
    assert "titleBar.activeBackground" in out
    assert "READABILITY REPORT" in out

    assert main(["reset", str(workspace)]) == 0
    assert "reset to default" in capsys.readouterr().out
    assert main(["show", str(workspace)]) == 1


def test_custom_state_file(workspace, tmp_path):
    state_file = tmp_path / "elsewhere.json"
    assert main(["seed", str(workspace), "--state-file", str(state_file)]) == 0
    assert state_file.exists()
    assert not (workspace / ".vscode" / "colored-title-bar.json").exists()


def test_corrupt_settings(workspace, write_settings, capsys):
    write_settings("{ not json")
    assert main(["randomize", str(workspace)]) == 1
    assert "Error:" in capsys.readouterr().err


class TestPreview:
    def test_writes_all_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        out_dir = tmp_path / "out"
        assert main(["preview", "--hue", "Blue", "-o", str(out_dir), "--name", "blue"]) == 0
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "blue-report.txt",
            "blue.html",
            "blue.json",
            "blue.png",
        ]
        data = json.loads((out_dir / "blue.json").read_text(encoding="utf-8"))
        assert data["_source"] == "hue:220"
        assert data["titleBar.activeBackground"] == generate_title_bar_colors_from_hue(220, ThemeKind.DARK).active_background
        with Image.open(out_dir / "blue.png") as image:
            assert image.size == (640, 84)

    def test_from_json_round_trip(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["preview", "--seed", "alpha", "--theme", "light", "-o", "first"]) == 0
        assert main(["preview", "--from-json", "first/title-bar.json", "-o", "second"]) == 0
        first = json.loads((tmp_path / "first" / "title-bar.json").read_text(encoding="utf-8"))
        second = json.loads((tmp_path / "second" / "title-bar.json").read_text(encoding="utf-8"))
        assert second["_theme"] == "light"
        assert second["_source"] == "title-bar.json"
        for key in first:
            if key.startswith("titleBar."):
                assert second[key] == first[key]

    def test_does_not_touch_workspace(self, workspace, monkeypatch):
        monkeypatch.chdir(workspace)
        assert main(["preview", "--random-seed", "3", "-o", "out"]) == 0
        assert not (workspace / ".vscode").exists()

    def test_bad_hue(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["preview", "--hue", "nope"]) == 2


class TestContrast:
    def test_best_foreground(self, capsys):
        assert main(["contrast", "#000000"]) == 0
        out = capsys.readouterr().out
        assert "#ffffff on #000000: 21.00:1 (passes" in out
        assert "Best foreground: #ffffff" in out

    def test_explicit_foreground_fails(self, capsys):
        assert main(["contrast", "#777777", "#ffffff"]) == 0
        out = capsys.readouterr().out
        assert "fails WCAG AA" in out
        assert "Best foreground" not in out

    @pytest.mark.parametrize("value", ["#12345", "zzzzzz", "#1234567"])
    def test_invalid_hex(self, value, capsys):
        assert main(["contrast", value]) == 1
        assert "Error:" in capsys.readouterr().err
