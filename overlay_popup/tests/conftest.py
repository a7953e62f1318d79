from __future__ import annotations

import importlib.util
import os

import pytest

_HAS_PYQT = importlib.util.find_spec("PyQt6") is not None


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required") is None:
        return
    if not _HAS_PYQT:
        pytest.skip("PyQt6 not installed; install the 'qt' extra to run Qt placement tests")
    if not os.getenv("PYQT_TESTS"):
        pytest.skip("PYQT_TESTS not set; skipping Qt placement test")
