"""Shared handler plumbing."""

from __future__ import annotations

import logging


class Handler:
    """Base for command/query handlers; falls back to the module logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(type(self).__module__)


__all__ = ["Handler"]
