from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a computed area."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
