"""Verbosity levels for logging."""

from __future__ import annotations

import logging
from enum import IntEnum


class Verbosity(IntEnum):
    """Logging verbosity levels."""

    QUIET = 0
    INFO = 1
    DEBUG = 2

    @property
    def log_level(self) -> int:
        """The :mod:`logging` level matching this verbosity."""
        return {
            Verbosity.QUIET: logging.WARNING,
            Verbosity.INFO: logging.INFO,
            Verbosity.DEBUG: logging.DEBUG,
        }[self]

    @classmethod
    def parse(cls, value: object) -> Verbosity:
        """Accept a ``Verbosity``, an integer or a case-insensitive name."""
        if isinstance(value, Verbosity):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            token = value.strip()
            try:
                return cls[token.upper()]
            except KeyError:
                try:
                    return cls(int(token))
                except ValueError:
                    pass
        raise ValueError("verbosity must be one of quiet, info, debug, or 0/1/2")


__all__ = ["Verbosity"]
