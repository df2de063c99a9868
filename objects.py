"""Object model stub for the evaluator.

This module defines the `ObjectType` enum and the value dataclasses an
evaluator would produce (`Integer`, `Boolean`, `Null`). Each value reports
its type via `type_of()` and its display text via `inspect()`. There is no
evaluation logic here; the front end does not execute programs.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


class ObjectType(Enum):
    INTEGER = auto()
    BOOLEAN = auto()
    NULL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Integer:
    value: int = 0

    def type_of(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)


@dataclass
class Boolean:
    value: bool = False

    def type_of(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


@dataclass
class Null:
    def type_of(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"
