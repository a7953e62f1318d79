"""Caller-side popup composition: provider factories and the measured-state holder."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from overlay_popup.alignment import Alignment
from overlay_popup.geometry import LayoutDirection, Offset, Rect, Size
from overlay_popup.logging_utils import LOGGER_NAME
from overlay_popup.position_provider import (
    AnchorAlignmentPositionProvider,
    EdgeAlignment,
    EdgeDropPositionProvider,
    PositionProvider,
)

_LOGGER = logging.getLogger(f"{LOGGER_NAME}.Popup")

PROVIDER_CACHE_SIZE = 64


@lru_cache(maxsize=PROVIDER_CACHE_SIZE)
def popup_provider(
    alignment: Alignment = Alignment.TOP_START,
    offset: Offset = Offset.ZERO,
) -> AnchorAlignmentPositionProvider:
    """Provider for a popup aligned relative to its anchor.

    ``offset`` respects the layout direction: it is added to the aligned
    position in LTR and its x component is subtracted in RTL.
    """
    return AnchorAlignmentPositionProvider(alignment, offset)


@lru_cache(maxsize=PROVIDER_CACHE_SIZE)
def dropdown_provider(
    edge_alignment: EdgeAlignment = EdgeAlignment.START,
    offset: Offset = Offset.ZERO,
) -> EdgeDropPositionProvider:
    """Provider for a dropdown placed below its anchor at the start or end edge."""
    return EdgeDropPositionProvider(edge_alignment, offset)


@dataclass
class PopupPositionProperties:
    """Last measured anchor bounds, popup size and direction, updated by the host on layout."""

    parent_bounds: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    children_size: Size = Size.ZERO
    parent_layout_direction: LayoutDirection = LayoutDirection.LTR


def calculate_popup_position(provider: PositionProvider, properties: PopupPositionProperties) -> Offset:
    position = provider.calculate_position(
        properties.parent_bounds,
        properties.parent_layout_direction,
        properties.children_size,
    )
    _LOGGER.debug(
        "Popup position %s for anchor=%s size=%s direction=%s",
        position,
        properties.parent_bounds,
        properties.children_size,
        properties.parent_layout_direction.value,
    )
    return position
