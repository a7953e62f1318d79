from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "OverlayPopup"
LOG_DIR_ENV_VAR = "OVERLAY_POPUP_LOG_DIR"
DEBUG_ENV_VAR = "OVERLAY_POPUP_DEBUG"
PROPAGATE_ENV_VAR = "OVERLAY_POPUP_PROPAGATE_LOGS"
DEFAULT_LOG_FILENAME = "overlay-popup.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None:
        return None
    token = value.strip().lower()
    if token in _TRUTHY:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return None


def resolve_logs_dir(base_path: Path, log_dir_name: str = "OverlayPopup") -> Path:
    """
    Resolve the directory to store popup placement logs.

    Order: OVERLAY_POPUP_LOG_DIR, XDG state home, XDG cache home, `cwd/logs`,
    then tempdir/<log_dir_name>. ``base_path`` is only used to anchor a
    relative OVERLAY_POPUP_LOG_DIR.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        override = Path(env_override).expanduser()
        if not override.is_absolute():
            override = base_path.resolve() / override
        candidates.append(override)

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.append(state_home / "logs")
    candidates.append(cache_home / "logs")
    candidates.append(Path.cwd() / "logs")

    for base in candidates:
        target = base / log_dir_name
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return target

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


class PopupLogHandler(RotatingFileHandler):
    """Rotating popup placement log; ``retention`` counts the live file plus its backups."""

    def __init__(self, path: Path, *, retention: int, max_bytes: int) -> None:
        super().__init__(path, maxBytes=max_bytes, backupCount=max(1, retention) - 1, encoding="utf-8")


def build_rotating_file_handler(
    log_dir: Path,
    filename: str = DEFAULT_LOG_FILENAME,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> PopupLogHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = PopupLogHandler(log_dir / filename, retention=retention, max_bytes=max_bytes)
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    return handler


def debug_enabled_from_env() -> bool:
    return bool(_env_flag(DEBUG_ENV_VAR))


def resolve_log_level(debug_enabled: Optional[bool] = None) -> int:
    """DEBUG when asked for (or OVERLAY_POPUP_DEBUG is set), INFO otherwise."""
    if debug_enabled is None:
        debug_enabled = debug_enabled_from_env()
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_logging(
    base_path: Path,
    *,
    debug_enabled: Optional[bool] = None,
    filename: str = DEFAULT_LOG_FILENAME,
    retention: int = 5,
) -> logging.Logger:
    """Attach the rotating file handler to the package logger once and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug_enabled))
    logger.propagate = bool(_env_flag(PROPAGATE_ENV_VAR))

    if any(isinstance(handler, PopupLogHandler) for handler in logger.handlers):
        return logger

    log_dir = resolve_logs_dir(base_path)
    logger.addHandler(build_rotating_file_handler(log_dir, filename, retention=retention))
    logger.debug("Popup placement logging to %s", log_dir / filename)
    return logger
