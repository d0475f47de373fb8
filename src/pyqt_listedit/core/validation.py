"""Validation error carrier for list-typed values."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True, eq=False)
class ListValidationError:
    """
    Aggregate validation error for a list value.

    Maps item index to an opaque per-item error payload. Only the indices
    that failed validation are present.
    """

    item_errors: Mapping[int, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze a private copy so later changes to the caller's dict can't leak in
        frozen = MappingProxyType({int(k): v for k, v in dict(self.item_errors).items()})
        object.__setattr__(self, "item_errors", frozen)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ListValidationError":
        """
        Build from the JSON shape a backend validator produces.

        Args:
            data: {"item_errors": {"<index>": payload, ...}}; string keys are accepted
        """
        return cls(item_errors={int(k): v for k, v in (data.get("item_errors") or {}).items()})

    def to_dict(self) -> Dict[str, Any]:
        return {"item_errors": {str(k): v for k, v in self.item_errors.items()}}

    def __eq__(self, other):
        if not isinstance(other, ListValidationError):
            return NotImplemented
        return dict(self.item_errors) == dict(other.item_errors)
