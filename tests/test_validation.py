"""Tests for validation error carriage and routing."""

import pytest


def test_error_routed_to_single_item(make_editor):
    from pyqt_listedit.core import ListValidationError

    editor = make_editor(["A", "B", "C"])
    editor.set_error([ListValidationError({1: "E"})])

    assert editor.items[1].child.error == "E"
    assert editor.items[0].child.error is None
    assert editor.items[2].child.error is None


def test_error_report_of_wrong_length_is_ignored(make_editor):
    from pyqt_listedit.core import ListValidationError

    editor = make_editor(["A", "B", "C"])
    editor.set_error([ListValidationError({0: "E"}), ListValidationError({1: "E"})])
    editor.set_error([])
    assert [item.child.error for item in editor.items] == [None, None, None]


def test_initial_error_applied_after_load(make_editor):
    from pyqt_listedit.core import ListValidationError

    editor = make_editor(["A", "B"], initial_error=[ListValidationError({0: ["Required"]})])
    assert editor.items[0].child.error == ["Required"]


def test_out_of_range_error_index_raises_before_routing(make_editor):
    """Fail fast, and don't half-apply the report."""
    from pyqt_listedit.core import ErrorRoutingError, ListValidationError

    editor = make_editor(["A", "B"])
    with pytest.raises(ErrorRoutingError):
        editor.set_error([ListValidationError({0: "E", 5: "F"})])
    assert editor.items[0].child.error is None


def test_out_of_range_error_index_ignored_by_policy(make_editor):
    from pyqt_listedit.core import ListValidationError
    from pyqt_listedit.protocols import ListEditorConfig, set_list_editor_config

    set_list_editor_config(ListEditorConfig(error_index_policy="ignore"))
    editor = make_editor(["A", "B"])
    editor.set_error([ListValidationError({1: "E", 7: "F"})])
    assert editor.items[1].child.error == "E"


def test_errors_follow_index_not_identity(make_editor):
    """Errors name positions at the time they are applied."""
    from pyqt_listedit.core import ListValidationError

    editor = make_editor(["A", "B"])
    editor.move(0, 1)
    editor.set_error([ListValidationError({0: "E"})])
    assert editor.items[0].get_state() == "B"
    assert editor.items[0].child.error == "E"


def test_validation_error_is_immutable():
    from dataclasses import FrozenInstanceError
    from pyqt_listedit.core import ListValidationError

    source = {1: "E"}
    error = ListValidationError(source)
    source[2] = "F"

    assert dict(error.item_errors) == {1: "E"}
    with pytest.raises(TypeError):
        error.item_errors[3] = "G"
    with pytest.raises(FrozenInstanceError):
        error.item_errors = {}


def test_validation_error_from_backend_json():
    from pyqt_listedit.core import ListValidationError

    error = ListValidationError.from_dict({"item_errors": {"0": ["Too long"], "2": ["Required"]}})
    assert dict(error.item_errors) == {0: ["Too long"], 2: ["Required"]}
    assert error.to_dict() == {"item_errors": {"0": ["Too long"], "2": ["Required"]}}
    assert ListValidationError.from_dict({}) == ListValidationError()
