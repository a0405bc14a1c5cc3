"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair whose area is computed on demand."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Create a :class:`Rectangle` with read-only *width* and *height*."""
    return Rectangle(width=width, height=height)
