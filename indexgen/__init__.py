"""indexgen - String-keyed accessor generator for declared types."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("indexgen")
except PackageNotFoundError:
    __version__ = "(local)"
