"""Markers recognized by the indexgen Python front end."""

from typing import TypeVar

T = TypeVar("T", bound=type)


def indexed(cls: T) -> T:
    """Mark a class for companion accessor generation. Returns `cls` unchanged."""
    return cls
