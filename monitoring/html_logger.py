# monitoring/html_logger.py
"""
HTML logger for the monitoring application.

This module provides simple logging functions (info, warn, error)
that append log entries to an HTML file. Every entry is also
forwarded to the standard ``logging`` module so that console and
file handlers configured in ``settings.LOGGING`` see it too.

The log file lives in ``settings.LOG_DIR`` and can be opened
directly in a browser or through ``/monitoring/logs``.
"""

import logging
from html import escape
from pathlib import Path

from django.conf import settings
from django.utils.timezone import now

logger = logging.getLogger("pxl_activiteiten.events")

LOG_FILENAME = "app.log.html"

# HTML header for a new log file
HEADER = """<!doctype html>
<html lang="nl"><head><meta charset="utf-8"><title>Logboek</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
</style></head><body>
<h3>Applicatielogboek</h3>
"""


def log_file() -> Path:
    """
    Return the path of the HTML log file.

    Read on every call so that ``override_settings(LOG_DIR=...)``
    is honoured in tests.
    """
    log_dir = Path(getattr(settings, "LOG_DIR", Path(settings.BASE_DIR) / "logs"))
    return log_dir / LOG_FILENAME


def _ensure_file(path: Path):
    """
    Ensure that the log file exists.

    The directory and the file (with the HTML header) are created
    on first use.
    """
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(HEADER, encoding="utf-8")


def _append(level: str, css_class: str, message: str):
    """
    Append a single HTML entry to the log file.

    Parameters
    ----------
    level : str
        Label printed in front of the entry (INFO, WARN, ERROR).
    css_class : str
        CSS class of the entry.
    message : str
        Plain text message; it is escaped before being written.
    """
    path = log_file()
    ts = now().strftime("%Y-%m-%d %H:%M:%S")
    line = f'<div class="{css_class}"><strong>[{level} {ts}]</strong> {escape(message)}</div>'
    try:
        _ensure_file(path)
        with path.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        logger.exception("Cannot write to %s", path)


def info(message: str):
    """
    Log an informational message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.info(message)
    _append("INFO", "log-info", message)


def warn(message: str):
    """
    Log a warning message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.warning(message)
    _append("WARN", "log-warn", message)


def error(message: str):
    """
    Log an error message.

    Parameters
    ----------
    message : str
        The message to log.
    """
    logger.error(message)
    _append("ERROR", "log-error", message)
