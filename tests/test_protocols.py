"""Tests for collaborator contracts and configuration."""

import pytest


def test_child_block_abc_enforced():
    """A child missing part of the contract can't be instantiated."""
    from pyqt_listedit.protocols import ChildBlock

    class HalfChild(ChildBlock):
        def get_state(self):
            return None

    with pytest.raises(TypeError):
        HalfChild()


def test_headless_views_implement_contracts():
    from pyqt_listedit.core import HeadlessRenderer, ValueChildBlock
    from pyqt_listedit.protocols import InsertionView, ItemView, SequenceRenderer

    renderer = HeadlessRenderer()
    assert isinstance(renderer, SequenceRenderer)
    assert isinstance(renderer.create_insertion_view(0, 0), InsertionView)
    assert isinstance(renderer.create_item_view(1, 0, ValueChildBlock("p-0")), ItemView)


def test_default_config():
    from pyqt_listedit.protocols import ListEditorConfig, get_list_editor_config

    config = get_list_editor_config()
    assert isinstance(config, ListEditorConfig)
    assert config.error_index_policy == "raise"
    assert config.animate_user_actions is True
    assert config.get_string("ADD") == "Add"


def test_config_string_overrides():
    from pyqt_listedit.protocols import ListEditorConfig

    config = ListEditorConfig(strings={"ADD": "Insert"})
    assert config.get_string("ADD") == "Insert"
    assert config.get_string("ADD", {"ADD": "Plus"}) == "Plus"
    assert config.get_string("DELETE") == "Delete"


def test_config_rejects_unknown_policy():
    from pyqt_listedit.protocols import ListEditorConfig

    with pytest.raises(ValueError):
        ListEditorConfig(error_index_policy="clamp")


def test_set_list_editor_config_is_global(make_editor):
    from pyqt_listedit.protocols import ListEditorConfig, set_list_editor_config

    set_list_editor_config(ListEditorConfig(animate_user_actions=False))
    editor = make_editor(["A"])
    view = editor.items[0].view
    editor.delete(0)
    assert view.deleted and view.animated_delete is False


def test_user_delete_animates_by_default(make_editor):
    editor = make_editor(["A"])
    view = editor.items[0].view
    editor.items[0].view.click("delete")
    assert view.animated_delete is True


def test_list_block_definition_render_and_help_text():
    from pyqt_listedit.core import HeadlessRenderer, SequenceEditor, ValueBlockDefinition
    from pyqt_listedit.protocols import ListBlockDefinition, ListBlockMeta

    definition = ListBlockDefinition(
        name="tags",
        child_block_def=ValueBlockDefinition(),
        initial_child_state="",
        meta=ListBlockMeta(help_text="One tag per row"),
    )
    renderer = HeadlessRenderer()
    editor = definition.render(renderer, "page-tags", ["a"])

    assert isinstance(editor, SequenceEditor)
    assert renderer.help_text == "One tag per row"
    assert editor.items[0].prefix == "page-tags-0"


def test_help_text_suppressed_by_config():
    from pyqt_listedit.core import HeadlessRenderer, ValueBlockDefinition
    from pyqt_listedit.protocols import (
        ListBlockDefinition, ListBlockMeta, ListEditorConfig, set_list_editor_config,
    )

    set_list_editor_config(ListEditorConfig(show_help_text=False))
    definition = ListBlockDefinition("tags", ValueBlockDefinition(), "", ListBlockMeta(help_text="hidden"))
    renderer = HeadlessRenderer()
    definition.render(renderer, "tags")
    assert renderer.help_text is None


def test_slot_layout():
    """Insertion point i is slot 2i and item i is slot 2i+1."""
    from pyqt_listedit.core import insertion_slot, item_slot

    assert [insertion_slot(i) for i in range(3)] == [0, 2, 4]
    assert [item_slot(i) for i in range(3)] == [1, 3, 5]


def test_editor_logs_under_package_logger(make_editor, caplog):
    """Hosts capture every editor message through the package's root logger."""
    import logging

    with caplog.at_level(logging.DEBUG, logger="pyqt_listedit"):
        editor = make_editor(["A"])
        editor.delete(0)

    names = {record.name for record in caplog.records}
    assert "pyqt_listedit.core.sequence_editor" in names
    assert any("Deleted item 0" in record.getMessage() for record in caplog.records)
