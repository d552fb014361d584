"""Argument checks for civiltime.

This module is not part of the public API.
"""

from __future__ import annotations


def check_integers(**fields: object) -> None:
    """Check that every named field is an ``int``.

    ``bool`` is rejected even though it subclasses ``int``.

    Raises:
        TypeError: If a field is not an int.

    Examples:
        >>> check_integers(year=2024, day=1.5)
        Traceback (most recent call last):
        ...
        TypeError: day must be an int, got float
    """
    for name, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")


__all__ = ["check_integers"]
