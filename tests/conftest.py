import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


class RecordingListener:
    """Collects selection callbacks in the order they arrive."""
    def __init__(self):
        self.events = []

    def on_selection_started(self):
        self.events.append(("started",))

    def on_selection_updated(self, current_word):
        self.events.append(("updated", current_word))

    def on_word_selected(self, word):
        self.events.append(("selected", word))

    def words(self):
        return [e[1] for e in self.events if e[0] == "selected"]


@pytest.fixture
def listener():
    return RecordingListener()
