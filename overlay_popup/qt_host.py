"""PyQt6 glue: feed widget geometry into a position provider and move the popup."""
from __future__ import annotations

import logging

from PyQt6.QtCore import QPoint, QRect, QSize, Qt
from PyQt6.QtWidgets import QWidget

from overlay_popup.geometry import LayoutDirection, Offset, Rect, Size
from overlay_popup.logging_utils import LOGGER_NAME
from overlay_popup.position_provider import PositionProvider

_LOGGER = logging.getLogger(f"{LOGGER_NAME}.Qt")


def rect_from_qrect(rect: QRect) -> Rect:
    # QRect.right() is inclusive; use x + width for the exclusive edge.
    return Rect.from_origin_size(rect.x(), rect.y(), rect.width(), rect.height())


def size_from_qsize(size: QSize) -> Size:
    return Size(max(0, size.width()), max(0, size.height()))


def layout_direction_from_qt(direction: Qt.LayoutDirection) -> LayoutDirection:
    if direction == Qt.LayoutDirection.RightToLeft:
        return LayoutDirection.RTL
    return LayoutDirection.LTR


def anchor_bounds_for(anchor: QWidget) -> Rect:
    """Global screen bounds of ``anchor``."""
    origin = anchor.mapToGlobal(QPoint(0, 0))
    return Rect.from_origin_size(origin.x(), origin.y(), anchor.width(), anchor.height())


def _measure(popup: QWidget) -> Size:
    # Unshown widgets report a placeholder size(); their sizeHint() is what they will lay out to.
    if not popup.isVisible():
        hint = popup.sizeHint()
        if hint.isValid():
            return size_from_qsize(hint)
    return size_from_qsize(popup.size())


def place_widget(popup: QWidget, anchor: QWidget, provider: PositionProvider) -> Offset:
    """Move ``popup`` to the position ``provider`` computes against ``anchor``."""
    bounds = anchor_bounds_for(anchor)
    direction = layout_direction_from_qt(anchor.layoutDirection())
    size = _measure(popup)
    position = provider.calculate_position(bounds, direction, size)
    _LOGGER.debug(
        "Placing popup at (%d, %d): anchor=%s size=%s direction=%s",
        position.x,
        position.y,
        bounds,
        size,
        direction.value,
    )
    popup.move(QPoint(position.x, position.y))
    return position
