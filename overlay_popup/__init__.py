"""Popup placement relative to an anchor rectangle."""

from overlay_popup.alignment import Alignment
from overlay_popup.geometry import LayoutDirection, Offset, Rect, Size
from overlay_popup.popup import (
    PopupPositionProperties,
    calculate_popup_position,
    dropdown_provider,
    popup_provider,
)
from overlay_popup.position_provider import (
    AnchorAlignmentPositionProvider,
    EdgeAlignment,
    EdgeDropPositionProvider,
    PositionProvider,
    resolve_offset,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Alignment",
    "AnchorAlignmentPositionProvider",
    "EdgeAlignment",
    "EdgeDropPositionProvider",
    "LayoutDirection",
    "Offset",
    "PopupPositionProperties",
    "PositionProvider",
    "Rect",
    "Size",
    "calculate_popup_position",
    "dropdown_provider",
    "popup_provider",
    "resolve_offset",
]
