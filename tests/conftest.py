"""Shared fixtures for the Qt based tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from Qt.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every test that touches Qt documents or widgets"""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
