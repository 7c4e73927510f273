"""Detection results and the integer rectangle they are reported in."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def area(self) -> int:
        """Return width times height."""
        return self.width * self.height

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap with another rectangle, or an empty Rect."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        width = right - left
        height = bottom - top
        if width <= 0 or height <= 0:
            return Rect()
        return Rect(left, top, width, height)

    def __and__(self, other: Rect) -> Rect:
        return self.intersect(other)

    def __str__(self) -> str:
        return f"[{self.width} x {self.height} from ({self.x}, {self.y})]"


@dataclass
class Detection:
    """One object found in an image."""

    class_id: int = 0
    class_name: str = ""
    confidence: float = 0.0
    color: tuple[int, int, int] = (0, 0, 0)
    box: Rect = field(default_factory=Rect)