"""Naming helpers."""

import re

_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """Convert `PersonRecord` or `HTTPHeader` to `person_record` / `http_header`."""
    return _BOUNDARY.sub("_", name).lower()
