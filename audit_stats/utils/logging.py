"""Logging helpers for audit statistics."""

from __future__ import annotations

import logging


def get_logger(name: str = "audit_stats", level: int | None = None) -> logging.Logger:
    """Return `name`'s logger, attaching one stream handler to its top-level package logger."""

    package_logger = logging.getLogger(name.split(".")[0])
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
