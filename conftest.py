"""Shared pytest fixtures for colored-title-bar tests."""

from __future__ import annotations

import json

import numpy as np
import pytest

from colored_title_bar.palette import TitleBarColors


@pytest.fixture
def random_source():
    """A seeded "next float in [0, 1)" provider."""
    return np.random.default_rng(1234).random


@pytest.fixture
def sample_colors() -> TitleBarColors:
    """A realistic dark-theme color set."""
    return TitleBarColors(
        active_background="#2b4a6b",
        active_foreground="#ffffff",
        inactive_background="#2f3f50",
        inactive_foreground="#ffffffcc",
        border="#24364a",
    )


@pytest.fixture
def workspace(tmp_path):
    """An empty workspace folder."""
    folder = tmp_path / "project"
    folder.mkdir()
    return folder


@pytest.fixture
def write_settings(workspace):
    """Write a .vscode/settings.json into the workspace and return its path."""

    def _write(data):
        path = workspace / ".vscode" / "settings.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
