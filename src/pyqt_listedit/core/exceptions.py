"""Sequence editor exceptions."""


class SequenceEditorError(Exception):
    """Base class for contract violations at the sequence editor boundary."""


class InvalidIndexError(SequenceEditorError, IndexError):
    """Raised when an insert/delete/duplicate/move index is out of range."""


class ErrorRoutingError(SequenceEditorError, IndexError):
    """Raised when a validation error names an item index that does not exist."""


class UnknownIntentError(SequenceEditorError, TypeError):
    """Raised when dispatch() receives something that is not a list intent."""
