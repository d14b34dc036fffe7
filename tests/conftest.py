"""Shared pytest configuration and fixtures for all tests."""

import os

import pytest

# Qt widgets need a platform plugin; offscreen works without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication shared by every widget test."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    """An ini-file backed QSettings isolated per test."""
    from PyQt5.QtCore import QSettings

    return QSettings(str(tmp_path / "codecpad.ini"), QSettings.IniFormat)
