"""Pytest configuration - ensure consistent CWD and provide fixtures.

Qt runs on the offscreen platform so widget tests work without a display.
Every fixture that touches persistence gets its own temporary store
directory; nothing is written to the real user data dir.
"""
from __future__ import annotations

import os
from pathlib import Path
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]


def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def tmp_store(tmp_path):
    """LocalStore in a fresh temporary directory."""
    from src.utils.local_store import LocalStore
    return LocalStore(tmp_path / "local_store")


@pytest.fixture
def preset_manager(tmp_store):
    from src.presets import PresetManager
    return PresetManager(tmp_store)


@pytest.fixture
def store(preset_manager):
    """ParameterStore starting from the Default preset."""
    from src.model.parameter_store import ParameterStore
    return ParameterStore(preset_manager)


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for widget tests."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
