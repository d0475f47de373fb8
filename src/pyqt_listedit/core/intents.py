"""
User intents emitted by item handles and insertion points.

Handles and insertion points never mutate the list themselves. They emit one
of these messages, and the sequence editor is the only handler.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Direction(IntEnum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class InsertRequested:
    index: int


@dataclass(frozen=True)
class DeleteRequested:
    index: int


@dataclass(frozen=True)
class MoveRequested:
    index: int
    direction: Direction

    @property
    def target_index(self) -> int:
        return self.index + int(self.direction)


@dataclass(frozen=True)
class DuplicateRequested:
    index: int


ListIntent = Union[InsertRequested, DeleteRequested, MoveRequested, DuplicateRequested]
