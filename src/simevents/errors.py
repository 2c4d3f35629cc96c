"""Exceptions raised by simevents."""

from __future__ import annotations


class InvalidParameterError(ValueError):
    """
    A generator, stream or replay was given a parameter it cannot use.

    Raised at construction time so that ``generate_events()`` never fails
    for an instance that was accepted.
    """


class ConfigError(Exception):
    """A process definition document could not be read or validated."""
