#!/usr/bin/env python3
"""
Logging utilities for tcdinspect
"""

import logging
import sys
from pathlib import Path

import colorlog

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COLOR_LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s"


def setup_logger(name: str = "tcdinspect", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with console and file handlers"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler on stderr, stdout carries decoded text
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(COLOR_LOG_FORMAT))
    logger.addHandler(console_handler)

    # File handler (optional)
    try:
        log_dir = Path.home() / ".tcdinspect" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "tcdinspect.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError:
        # Console only
        pass

    return logger


def get_logger(name: str = "tcdinspect") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
