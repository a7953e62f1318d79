"""Popup position providers.

Both providers take the anchor bounds in the coordinate space the result is
wanted in (normally global screen space) and return the popup's top-left
corner in that same space. Nothing is clamped to the screen; a caller that
needs the popup to stay visible must pick a different provider or direction.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from overlay_popup.alignment import Alignment
from overlay_popup.geometry import LayoutDirection, Offset, Rect, Size


class PositionProvider(Protocol):
    def calculate_position(
        self,
        anchor_bounds: Rect,
        direction: LayoutDirection,
        overlay_size: Size,
    ) -> Offset:
        ...


class EdgeAlignment(str, Enum):
    START = "start"
    END = "end"

    @classmethod
    def from_token(cls, token: str) -> "EdgeAlignment":
        value = (token or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unsupported edge alignment: {token!r}")


def resolve_offset(offset: Offset, direction: LayoutDirection) -> Offset:
    """Mirror the horizontal component for RTL so positive x always moves forward."""
    if direction is LayoutDirection.RTL:
        return Offset(-offset.x, offset.y)
    return offset


@dataclass(frozen=True)
class AnchorAlignmentPositionProvider:
    """Line up the popup's aligned point with the anchor's aligned point."""

    alignment: Alignment = Alignment.TOP_START
    offset: Offset = Offset.ZERO

    def calculate_position(
        self,
        anchor_bounds: Rect,
        direction: LayoutDirection,
        overlay_size: Size,
    ) -> Offset:
        anchor_point = self.alignment.align(anchor_bounds.size, direction)
        overlay_point = self.alignment.align(overlay_size, direction)
        position = anchor_bounds.top_left + anchor_point - overlay_point
        return position + resolve_offset(self.offset, direction)


@dataclass(frozen=True)
class EdgeDropPositionProvider:
    """Drop the popup below the anchor, snapped to its start or end edge.

    START lines the popup's leading edge up with the anchor's leading edge.
    END starts the popup right past the anchor's trailing edge.
    """

    edge_alignment: EdgeAlignment = EdgeAlignment.START
    offset: Offset = Offset.ZERO

    def calculate_position(
        self,
        anchor_bounds: Rect,
        direction: LayoutDirection,
        overlay_size: Size,
    ) -> Offset:
        ltr = direction is LayoutDirection.LTR
        if self.edge_alignment is EdgeAlignment.START:
            x = 0 if ltr else anchor_bounds.width - overlay_size.width
        else:
            x = anchor_bounds.width if ltr else -overlay_size.width
        position = anchor_bounds.top_left + Offset(x, anchor_bounds.height)
        return position + resolve_offset(self.offset, direction)
