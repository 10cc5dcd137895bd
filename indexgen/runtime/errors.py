"""Errors raised by generated accessors."""


class OutOfRangeError(LookupError):
    """Raised when a string key does not name an accessible member."""

    def __init__(self, name: object):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return str(self.name)
