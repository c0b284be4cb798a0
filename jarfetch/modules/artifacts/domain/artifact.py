"""Artifact coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from jarfetch.modules.artifacts.exceptions import InvalidCoordinateError


@dataclass(frozen=True, order=True)
class Coordinate:
    """Identifies an artifact by group, name and version.

    Two coordinates are the same artifact iff all three fields match exactly;
    no case or separator normalization is applied.
    """

    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Build a coordinate from the ``group:name:version`` form."""
        parts = text.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise InvalidCoordinateError(
                f"expected 'group:name:version', got {text!r}"
            )
        group, name, version = parts
        return cls(group=group, name=name, version=version)

    @property
    def group_segments(self) -> List[str]:
        return self.group.split(".")

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"
