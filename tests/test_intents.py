"""Tests for intents emitted by views and handled by the sequence editor."""

import pytest

from conftest import assert_consistent


def test_insertion_point_click_inserts_default(make_editor):
    """Clicking the '+' between items inserts the default child there and focuses it."""
    editor = make_editor(["A", "B"], default="X")
    editor.insertion_points[1].view.click()

    assert editor.get_state() == ["A", "X", "B"]
    assert editor.items[1].child.focused
    assert_consistent(editor)


def test_insertion_point_click_uses_current_index(make_editor):
    """A point that shifted after earlier inserts reports its new index."""
    editor = make_editor(["A"], default="X")
    last_point = editor.insertion_points[1]
    editor.insert("Z", 0)
    last_point.view.click()
    assert editor.get_state() == ["Z", "A", "X"]


def test_default_state_not_shared_between_inserts(make_editor):
    editor = make_editor([], default={"tags": []})
    editor.request_insert_at(0)
    editor.request_insert_at(1)
    editor.items[0].child.state["tags"].append("a")
    assert editor.get_state() == [{"tags": ["a"]}, {"tags": []}]


def test_item_buttons_dispatch_intents(make_editor):
    editor = make_editor(["A", "B", "C"])

    editor.items[1].view.click("move_up")
    assert editor.get_state() == ["B", "A", "C"]

    editor.items[1].view.click("move_down")
    assert editor.get_state() == ["B", "C", "A"]

    editor.items[0].view.click("duplicate")
    assert editor.get_state() == ["B", "B", "C", "A"]

    editor.items[2].view.click("delete")
    assert editor.get_state() == ["B", "B", "A"]
    assert_consistent(editor)


def test_disabled_affordances_emit_nothing(make_editor):
    """First item can't move up and last can't move down, even if clicked."""
    editor = make_editor(["A", "B"])
    editor.items[0].view.click("move_up")
    editor.items[1].view.click("move_down")
    assert editor.get_state() == ["A", "B"]


def test_deleted_item_emits_nothing(make_editor):
    editor = make_editor(["A", "B"])
    stale = editor.items[0]
    editor.delete(0)
    stale.view.click("delete")
    assert editor.get_state() == ["B"]


def test_dispatch_routes_each_intent(make_editor):
    from pyqt_listedit.core import (
        DeleteRequested, Direction, DuplicateRequested, InsertRequested, MoveRequested,
    )

    editor = make_editor(["A", "B"], default="X")
    editor.dispatch(InsertRequested(0))
    editor.dispatch(MoveRequested(0, Direction.DOWN))
    editor.dispatch(DuplicateRequested(2))
    editor.dispatch(DeleteRequested(0))
    assert editor.get_state() == ["X", "B", "B"]
    assert_consistent(editor)


def test_move_requested_target_index():
    from pyqt_listedit.core import Direction, MoveRequested

    assert MoveRequested(3, Direction.UP).target_index == 2
    assert MoveRequested(3, Direction.DOWN).target_index == 4


def test_dispatch_rejects_unknown_objects(make_editor):
    from pyqt_listedit.core import UnknownIntentError

    editor = make_editor(["A"])
    with pytest.raises(UnknownIntentError):
        editor.dispatch(("delete", 0))


def test_custom_item_factory_supplies_child_data():
    """Variants can decide what an insertion creates without touching the editor."""
    from pyqt_listedit.core import HeadlessRenderer, ListItemFactory, ValueBlockDefinition
    from pyqt_listedit.protocols import ListBlockDefinition

    class NumberedFactory(ListItemFactory):
        def child_data_for_insertion(self, definition, intent=None):
            return definition.child_block_def, f"new@{intent.index}"

    definition = ListBlockDefinition("tags", ValueBlockDefinition(), "X")
    editor = definition.render(HeadlessRenderer(), "tags", ["A"], item_factory=NumberedFactory())
    editor.insertion_points[1].view.click()
    editor.request_insert_at(0)
    assert editor.get_state() == ["new@0", "A", "new@1"]


def test_items_from_before_reload_emit_nothing(make_editor):
    """Views left over from a previous load can't touch the new list."""
    editor = make_editor(["A", "B"])
    stale = editor.items[0]
    editor.set_state(["C", "D"])

    assert stale.deleted
    stale.view.click("delete")
    stale.view.click("duplicate")
    assert editor.get_state() == ["C", "D"]
    assert_consistent(editor)


def test_insertion_points_from_before_reload_emit_nothing(make_editor):
    editor = make_editor(["A", "B"])
    stale = editor.insertion_points[2]
    editor.set_state(["C"])

    assert stale.deleted
    stale.view.click()
    assert editor.get_state() == ["C"]
    assert_consistent(editor)


def test_clear_discards_old_views(make_editor):
    editor = make_editor(["A", "B"])
    old_views = [item.view for item in editor.items]
    editor.clear()

    assert all(view.deleted and view.animated_delete is False for view in old_views)
    assert editor.renderer.views == [editor.insertion_points[0].view]


def test_item_factory_requires_insertion_hook():
    """A factory without child_data_for_insertion can't be instantiated."""
    from pyqt_listedit.core import ItemFactory

    class NoHookFactory(ItemFactory):
        pass

    with pytest.raises(TypeError):
        NoHookFactory()
