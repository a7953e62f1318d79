"""Standard box alignments used to pick a point inside an anchor or popup."""
from __future__ import annotations

from enum import Enum
from typing import Dict

from overlay_popup.geometry import LayoutDirection, Offset, Size, round_half_up


class Alignment(Enum):
    """Nine-point alignment expressed as (horizontal, vertical) bias in [-1, 1].

    Horizontal bias is measured from the start edge, so it is mirrored for
    right-to-left layouts.
    """

    TOP_START = (-1, -1)
    TOP_CENTER = (0, -1)
    TOP_END = (1, -1)
    CENTER_START = (-1, 0)
    CENTER = (0, 0)
    CENTER_END = (1, 0)
    BOTTOM_START = (-1, 1)
    BOTTOM_CENTER = (0, 1)
    BOTTOM_END = (1, 1)

    @property
    def horizontal_bias(self) -> int:
        return self.value[0]

    @property
    def vertical_bias(self) -> int:
        return self.value[1]

    def align(self, size: Size, direction: LayoutDirection) -> Offset:
        """Return the aligned point inside a box of ``size``, relative to its top-left."""
        bias_x = self.horizontal_bias if direction is LayoutDirection.LTR else -self.horizontal_bias
        x = round_half_up(size.width / 2.0 * (1 + bias_x))
        y = round_half_up(size.height / 2.0 * (1 + self.vertical_bias))
        return Offset(x, y)

    @classmethod
    def from_token(cls, token: str) -> "Alignment":
        value = (token or "").strip().lower().replace("-", "_")
        alignment = _TOKEN_ALIASES.get(value)
        if alignment is None:
            raise ValueError(f"Unsupported alignment: {token!r}")
        return alignment


# Compass tokens as used by anchor pickers; west is the start edge.
_TOKEN_ALIASES: Dict[str, Alignment] = {member.name.lower(): member for member in Alignment}
_TOKEN_ALIASES.update(
    {
        "nw": Alignment.TOP_START,
        "n": Alignment.TOP_CENTER,
        "top": Alignment.TOP_CENTER,
        "ne": Alignment.TOP_END,
        "w": Alignment.CENTER_START,
        "c": Alignment.CENTER,
        "e": Alignment.CENTER_END,
        "sw": Alignment.BOTTOM_START,
        "s": Alignment.BOTTOM_CENTER,
        "bottom": Alignment.BOTTOM_CENTER,
        "se": Alignment.BOTTOM_END,
    }
)
