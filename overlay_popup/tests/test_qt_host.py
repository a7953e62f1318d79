from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QRect, QSize, Qt  # noqa: E402
from PyQt6.QtWidgets import QApplication, QWidget  # noqa: E402

from overlay_popup.geometry import LayoutDirection, Offset, Rect, Size  # noqa: E402
from overlay_popup.position_provider import EdgeAlignment, EdgeDropPositionProvider  # noqa: E402
from overlay_popup.qt_host import (  # noqa: E402
    anchor_bounds_for,
    layout_direction_from_qt,
    place_widget,
    rect_from_qrect,
    size_from_qsize,
)


@pytest.fixture
def qt_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.mark.pyqt_required
def test_rect_from_qrect_uses_exclusive_edges(qt_app):
    assert rect_from_qrect(QRect(10, 20, 100, 50)) == Rect(10, 20, 110, 70)


@pytest.mark.pyqt_required
def test_size_from_qsize_clamps_invalid_sizes(qt_app):
    assert size_from_qsize(QSize(40, 10)) == Size(40, 10)
    assert size_from_qsize(QSize()) == Size.ZERO


@pytest.mark.pyqt_required
def test_layout_direction_from_qt(qt_app):
    assert layout_direction_from_qt(Qt.LayoutDirection.LeftToRight) is LayoutDirection.LTR
    assert layout_direction_from_qt(Qt.LayoutDirection.RightToLeft) is LayoutDirection.RTL


@pytest.mark.pyqt_required
def test_place_widget_moves_popup_below_anchor(qt_app):
    anchor = QWidget()
    anchor.setGeometry(10, 20, 100, 50)
    popup = QWidget()
    popup.resize(40, 10)
    provider = EdgeDropPositionProvider(EdgeAlignment.END, Offset.ZERO)

    bounds = anchor_bounds_for(anchor)
    position = place_widget(popup, anchor, provider)

    assert position == Offset(bounds.right, bounds.bottom)
    assert (popup.x(), popup.y()) == (position.x, position.y)


@pytest.mark.pyqt_required
def test_place_widget_respects_rtl_anchor(qt_app):
    anchor = QWidget()
    anchor.setGeometry(10, 20, 100, 50)
    anchor.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
    popup = QWidget()
    popup.resize(40, 10)
    provider = EdgeDropPositionProvider(EdgeAlignment.START, Offset(5, 0))

    bounds = anchor_bounds_for(anchor)
    position = place_widget(popup, anchor, provider)

    assert position == Offset(bounds.left + bounds.width - 40 - 5, bounds.bottom)


class _HintedPopup(QWidget):
    def sizeHint(self) -> QSize:
        return QSize(40, 10)


@pytest.mark.pyqt_required
def test_place_widget_measures_unshown_popup_from_size_hint(qt_app):
    anchor = QWidget()
    anchor.setGeometry(10, 20, 100, 50)
    popup = _HintedPopup()
    provider = EdgeDropPositionProvider(EdgeAlignment.END, Offset.ZERO)
    anchor.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

    bounds = anchor_bounds_for(anchor)
    position = place_widget(popup, anchor, provider)

    assert not popup.isVisible()
    assert position == Offset(bounds.left - 40, bounds.bottom)
