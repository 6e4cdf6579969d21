"""pytest configuration and fixtures for touchee tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from touchee.config import set_touchee_config
from touchee.protocols import Notifier, register_notifier


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class RecordingNotifier(Notifier):
    """Notifier that remembers what it was asked to show."""

    def __init__(self):
        self.shown = []

    def show(self, title, message, severity=None):
        self.shown.append((title, message, severity))

    def severities(self):
        return [severity for _, _, severity in self.shown]


@pytest.fixture
def notifier():
    """RecordingNotifier registered as the global notifier."""
    recorder = RecordingNotifier()
    register_notifier(recorder)
    yield recorder
    register_notifier(None)


@pytest.fixture(autouse=True)
def reset_config():
    yield
    set_touchee_config(None)
