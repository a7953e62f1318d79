"""Integer geometry value types shared by the popup position providers (pure, no Qt)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class LayoutDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"

    @classmethod
    def from_token(cls, token: str) -> "LayoutDirection":
        value = (token or "").strip().lower().replace("-", "_")
        if value in {"ltr", "left_to_right"}:
            return cls.LTR
        if value in {"rtl", "right_to_left"}:
            return cls.RTL
        raise ValueError(f"Unsupported layout direction: {token!r}")


@dataclass(frozen=True)
class Offset:
    """A 2D translation in pixels."""

    x: int
    y: int

    ZERO: ClassVar["Offset"]

    def __add__(self, other: "Offset") -> "Offset":
        return Offset(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Offset") -> "Offset":
        return Offset(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Offset":
        return Offset(-self.x, -self.y)


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    ZERO: ClassVar["Size"]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; right and bottom are exclusive edges."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_origin_size(cls, x: int, y: int, width: int, height: int) -> "Rect":
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def top_left(self) -> Offset:
        return Offset(self.left, self.top)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


Offset.ZERO = Offset(0, 0)
Size.ZERO = Size(0, 0)
