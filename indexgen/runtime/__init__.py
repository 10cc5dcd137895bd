"""Runtime support for generated indexgen accessors."""

from .errors import OutOfRangeError as OutOfRangeError
from .markers import indexed as indexed
