"""Tests for the workspace settings, state memento and title bar manager."""

import json

import pytest

from colored_title_bar.constants import STATE_KEY, TITLE_BAR_KEYS
from colored_title_bar.error_handler import SettingsError
from colored_title_bar.palette import generate_title_bar_colors_from_seed
from colored_title_bar.theme import ThemeKind
from colored_title_bar.vscode import TitleBarManager, WorkspaceSettings, WorkspaceState, color_on_startup


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestWorkspaceSettings:
    def test_apply_creates_settings_file(self, workspace, sample_colors):
        settings = WorkspaceSettings(workspace)
        settings.apply_title_bar_colors(sample_colors)
        data = _read(workspace / ".vscode" / "settings.json")
        assert data["workbench.colorCustomizations"] == sample_colors.to_settings()

    def test_apply_keeps_unrelated_settings(self, workspace, write_settings, sample_colors):
        path = write_settings(
            {
                "editor.fontSize": 14,
                "workbench.colorCustomizations": {
                    "statusBar.background": "#123456",
                    "titleBar.activeBackground": "#000000",
                },
            }
        )
        WorkspaceSettings(workspace).apply_title_bar_colors(sample_colors)
        data = _read(path)
        assert data["editor.fontSize"] == 14
        customizations = data["workbench.colorCustomizations"]
        assert customizations["statusBar.background"] == "#123456"
        assert customizations["titleBar.activeBackground"] == "#2b4a6b"

    def test_reset_removes_only_title_bar_keys(self, workspace, write_settings, sample_colors):
        customizations = dict(sample_colors.to_settings(), **{"statusBar.background": "#123456"})
        path = write_settings({"workbench.colorCustomizations": customizations})
        WorkspaceSettings(workspace).reset_title_bar_colors()
        assert _read(path)["workbench.colorCustomizations"] == {"statusBar.background": "#123456"}

    def test_reset_drops_empty_map(self, workspace, write_settings, sample_colors):
        path = write_settings({"editor.tabSize": 2, "workbench.colorCustomizations": sample_colors.to_settings()})
        WorkspaceSettings(workspace).reset_title_bar_colors()
        assert _read(path) == {"editor.tabSize": 2}

    def test_reset_without_file_is_noop(self, workspace):
        WorkspaceSettings(workspace).reset_title_bar_colors()
        assert not (workspace / ".vscode" / "settings.json").exists()

    def test_corrupt_file_is_not_overwritten(self, workspace, write_settings, sample_colors):
        content = "{ // hand-edited\n }"
        path = write_settings(content)
        with pytest.raises(SettingsError):
            WorkspaceSettings(workspace).apply_title_bar_colors(sample_colors)
        assert path.read_text(encoding="utf-8") == content

    def test_blank_file_reads_empty(self, workspace, write_settings):
        write_settings("   \n")
        assert WorkspaceSettings(workspace).load() == {}

    def test_non_object_rejected(self, workspace, write_settings):
        write_settings("[]")
        with pytest.raises(SettingsError):
            WorkspaceSettings(workspace).load()

    def test_properties(self, workspace, write_settings):
        write_settings({"workbench.colorTheme": "Solarized Light", "coloredTitleBar.colorOnStartup": True})
        settings = WorkspaceSettings(workspace)
        assert settings.color_theme == "Solarized Light"
        assert settings.color_on_startup is True
        assert settings.color_customizations == {}

    def test_no_temp_file_left(self, workspace, sample_colors):
        WorkspaceSettings(workspace).apply_title_bar_colors(sample_colors)
        assert sorted(p.name for p in (workspace / ".vscode").iterdir()) == ["settings.json"]


class TestWorkspaceState:
    def test_update_and_get(self, tmp_path):
        path = tmp_path / "state.json"
        state = WorkspaceState(path)
        assert state.get("missing", "fallback") == "fallback"
        state.update("answer", 42)
        assert WorkspaceState(path).get("answer") == 42
        assert state.keys() == ["answer"]

    def test_none_removes_key_and_file(self, tmp_path):
        path = tmp_path / "state.json"
        state = WorkspaceState(path)
        state.update("answer", 42)
        state.update("answer", None)
        assert state.get("answer") is None
        assert not path.exists()


class TestTitleBarManager:
    def test_apply_and_read_back(self, workspace, sample_colors):
        manager = TitleBarManager(workspace)
        assert manager.apply_colors(sample_colors) is True
        assert manager.has_saved_colors()
        assert TitleBarManager(workspace).get_saved_colors() == sample_colors
        state = _read(workspace / ".vscode" / "colored-title-bar.json")
        assert state[STATE_KEY]["active_background"] == "#2b4a6b"

    def test_no_workspace(self, tmp_path, sample_colors):
        manager = TitleBarManager(tmp_path / "missing")
        assert manager.has_workspace() is False
        assert manager.get_workspace_seed() is None
        assert manager.apply_colors(sample_colors) is False
        assert not (tmp_path / "missing").exists()

    def test_reset(self, workspace, sample_colors):
        manager = TitleBarManager(workspace)
        manager.apply_colors(sample_colors)
        manager.reset_colors()
        assert not manager.has_saved_colors()
        assert manager.get_saved_colors() is None
        assert "workbench.colorCustomizations" not in _read(workspace / ".vscode" / "settings.json")

    def test_malformed_saved_colors(self, workspace):
        state = WorkspaceState(workspace / ".vscode" / "colored-title-bar.json")
        state.update(STATE_KEY, {"active_background": "#000000"})
        assert TitleBarManager(workspace, state=state).get_saved_colors() is None

    def test_workspace_seed_is_folder_uri(self, workspace):
        seed = TitleBarManager(workspace).get_workspace_seed()
        assert seed.startswith("file://")
        assert seed.endswith("/project")

    @pytest.mark.parametrize(
        "theme_name, expected",
        [
            (None, ThemeKind.DARK),
            ("Default Dark Modern", ThemeKind.DARK),
            ("Default Light Modern", ThemeKind.LIGHT),
            ("Default High Contrast", ThemeKind.HIGH_CONTRAST),
        ],
    )
    def test_theme_from_settings(self, workspace, write_settings, theme_name, expected):
        if theme_name:
            write_settings({"workbench.colorTheme": theme_name})
        assert TitleBarManager(workspace).get_theme_kind() is expected

    def test_theme_override_wins(self, workspace, write_settings):
        write_settings({"workbench.colorTheme": "Default Light Modern"})
        assert TitleBarManager(workspace).get_theme_kind("hc-black") is ThemeKind.HIGH_CONTRAST


class TestColorOnStartup:
    def test_first_start_uses_workspace_seed(self, workspace):
        manager = TitleBarManager(workspace)
        colors = color_on_startup(manager)
        expected = generate_title_bar_colors_from_seed(manager.get_workspace_seed(), ThemeKind.DARK)
        assert colors == expected
        assert manager.get_saved_colors() == expected

    def test_second_start_keeps_colors(self, workspace):
        manager = TitleBarManager(workspace)
        first = color_on_startup(manager)
        assert color_on_startup(manager) is None
        assert manager.get_saved_colors() == first

    def test_color_on_startup_setting_randomizes(self, workspace, write_settings, random_source):
        write_settings({"coloredTitleBar.colorOnStartup": True})
        manager = TitleBarManager(workspace)
        first = color_on_startup(manager, random_source=random_source)
        second = color_on_startup(manager, random_source=random_source)
        assert first is not None and second is not None
        assert first != second
        customizations = manager.settings.color_customizations
        assert [customizations[key] for key in TITLE_BAR_KEYS] == list(second)

    def test_no_workspace(self, tmp_path):
        assert color_on_startup(TitleBarManager(tmp_path / "missing")) is None
