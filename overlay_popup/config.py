"""Popup placement settings loaded from a JSON file."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from overlay_popup.alignment import Alignment
from overlay_popup.geometry import LayoutDirection, Offset, round_half_up
from overlay_popup.logging_utils import LOGGER_NAME
from overlay_popup.popup import PopupPositionProperties, dropdown_provider, popup_provider
from overlay_popup.position_provider import (
    AnchorAlignmentPositionProvider,
    EdgeAlignment,
    EdgeDropPositionProvider,
)

_LOGGER = logging.getLogger(f"{LOGGER_NAME}.Config")

SETTINGS_ENV_VAR = "OVERLAY_POPUP_SETTINGS"
MODE_ALIGNMENT = "alignment"
MODE_DROPDOWN = "dropdown"
_MODES = {MODE_ALIGNMENT, MODE_DROPDOWN}

_T = TypeVar("_T")


@dataclass(frozen=True)
class PopupSettings:
    mode: str = MODE_ALIGNMENT
    alignment: Alignment = Alignment.TOP_START
    dropdown_alignment: EdgeAlignment = EdgeAlignment.START
    offset: Offset = Offset.ZERO
    layout_direction: LayoutDirection = LayoutDirection.LTR

    def build_provider(self) -> Union[AnchorAlignmentPositionProvider, EdgeDropPositionProvider]:
        if self.mode == MODE_DROPDOWN:
            return dropdown_provider(self.dropdown_alignment, self.offset)
        return popup_provider(self.alignment, self.offset)

    def properties(self) -> PopupPositionProperties:
        """Fresh placement state seeded with the configured layout direction."""
        return PopupPositionProperties(parent_layout_direction=self.layout_direction)


def _coerce_token(key: str, value: Any, parser: Callable[[str], _T], default: _T) -> _T:
    if value is None:
        return default
    if not isinstance(value, str):
        _LOGGER.warning("Ignoring non-string popup setting '%s': %r", key, value)
        return default
    try:
        return parser(value)
    except ValueError as exc:
        _LOGGER.warning("Ignoring popup setting '%s' (%s); using %s", key, exc, default)
        return default


def _coerce_offset(value: Any) -> Offset:
    if value is None:
        return Offset.ZERO
    if isinstance(value, Mapping):
        raw = (value.get("x", 0), value.get("y", 0))
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        raw = (value[0], value[1])
    else:
        _LOGGER.warning("Ignoring invalid popup offset %r; expected [x, y]", value)
        return Offset.ZERO
    try:
        return Offset(round_half_up(float(raw[0])), round_half_up(float(raw[1])))
    except (TypeError, ValueError, OverflowError):
        _LOGGER.warning("Ignoring invalid popup offset %r; expected finite numbers", value)
        return Offset.ZERO


def _coerce_mode(value: Any) -> str:
    if value is None:
        return MODE_ALIGNMENT
    token = str(value).strip().lower()
    if token not in _MODES:
        _LOGGER.warning("Ignoring unknown popup mode %r; using '%s'", value, MODE_ALIGNMENT)
        return MODE_ALIGNMENT
    return token


def parse_popup_settings(data: Mapping[str, Any]) -> PopupSettings:
    """Build settings from a decoded JSON object, replacing bad fields with defaults."""
    defaults = PopupSettings()
    return PopupSettings(
        mode=_coerce_mode(data.get("mode")),
        alignment=_coerce_token("alignment", data.get("alignment"), Alignment.from_token, defaults.alignment),
        dropdown_alignment=_coerce_token(
            "dropdown_alignment",
            data.get("dropdown_alignment"),
            EdgeAlignment.from_token,
            defaults.dropdown_alignment,
        ),
        offset=_coerce_offset(data.get("offset")),
        layout_direction=_coerce_token(
            "layout_direction",
            data.get("layout_direction"),
            LayoutDirection.from_token,
            defaults.layout_direction,
        ),
    )


def resolve_settings_path(default: Path) -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return default


def load_popup_settings(path: Path) -> PopupSettings:
    """Read popup settings from ``path``; unreadable or malformed files yield defaults."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _LOGGER.debug("Popup settings not found at %s; using defaults", path)
        return PopupSettings()
    except OSError as exc:
        _LOGGER.warning("Failed to read %s; using default popup settings (%s)", path, exc)
        return PopupSettings()
    try:
        data: Optional[Any] = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Failed to parse %s; using default popup settings (%s)", path, exc)
        return PopupSettings()
    if not isinstance(data, dict):
        _LOGGER.warning("Popup settings at %s are not a JSON object; using defaults", path)
        return PopupSettings()
    return parse_popup_settings(data)
