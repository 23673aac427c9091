"""Coloured single-line log formatting."""

from __future__ import annotations

import logging

TRACE = 5

COLOR_PANIC = "\x1b[1;31m"
COLOR_FATAL = "\x1b[1;31m"
COLOR_ERROR = "\x1b[31m"
COLOR_WARN = "\x1b[33m"
COLOR_INFO = "\x1b[37m"
COLOR_DEBUG = "\x1b[32m"
COLOR_TRACE = "\x1b[36m"
COLOR_RESET = "\x1b[0m"

_COLORS = {
    logging.CRITICAL: COLOR_FATAL,
    logging.ERROR: COLOR_ERROR,
    logging.WARNING: COLOR_WARN,
    logging.INFO: COLOR_INFO,
    logging.DEBUG: COLOR_DEBUG,
    TRACE: COLOR_TRACE,
}


def level_color(levelno: int) -> str:
    """Return the terminal colour code for a log level; unknown levels get the info colour."""
    return _COLORS.get(levelno, COLOR_INFO)


class LogFormat(logging.Formatter):
    """Formats records as a coloured '[LEVEL] message' line."""

    def format(self, record: logging.LogRecord) -> str:
        return (
            f"{level_color(record.levelno)}"
            f"[{record.levelname.upper()}] {record.getMessage()} \n"
            f"{COLOR_RESET}"
        )