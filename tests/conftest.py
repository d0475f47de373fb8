"""pytest configuration and fixtures for pyqt-listedit tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_list_config():
    """Restore the default global config after every test."""
    from pyqt_listedit.protocols import set_list_editor_config

    yield
    set_list_editor_config(None)


@pytest.fixture
def make_editor():
    """Factory for headless sequence editors over plain values."""
    from pyqt_listedit.core import HeadlessRenderer, ValueBlockDefinition
    from pyqt_listedit.protocols import ListBlockDefinition

    def _make(initial_state=None, initial_error=None, default="X", **kwargs):
        definition = ListBlockDefinition(
            name="tags",
            child_block_def=ValueBlockDefinition(),
            initial_child_state=default,
        )
        renderer = HeadlessRenderer()
        return definition.render(renderer, "tags", initial_state, initial_error, **kwargs)

    return _make


def assert_consistent(editor):
    """Check cardinality, index contiguity and boundary affordances."""
    items, points = editor.items, editor.insertion_points
    n = len(items)
    assert len(points) == n + 1
    for i, item in enumerate(items):
        assert item.index == i
        assert item.view.index == i
    for i, point in enumerate(points):
        assert point.index == i
        assert point.view.index == i
    for i, item in enumerate(items):
        assert item.can_move_up == (i > 0)
        assert item.can_move_down == (i < n - 1)
        assert item.view.move_up_enabled == item.can_move_up
        assert item.view.move_down_enabled == item.can_move_down
    # Renderer holds exactly the live views, interleaved
    expected = []
    for point, item in zip(points, items):
        expected += [point.view, item.view]
    expected.append(points[-1].view)
    assert editor.renderer.views == expected
