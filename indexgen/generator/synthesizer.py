"""Accessor synthesis: turn a type descriptor into companion source text."""

import logging
from typing import Any

from . import csharp, python
from .types import TypeDescriptor

logger = logging.getLogger(__name__)

LANGUAGES = {
    "csharp": csharp,
    "python": python,
}


def _target(language: str) -> Any:
    try:
        return LANGUAGES[language]
    except KeyError:
        supported = ", ".join(sorted(LANGUAGES))
        raise ValueError(f"Unknown language: {language} (expected one of {supported})") from None


def unit_name(identifier: str) -> str:
    """Return the name of the output unit generated for a type."""
    return f"{identifier}.Indexer.generated"


def filename(identifier: str, language: str) -> str:
    """Return the file name the target language uses for the output unit."""
    return _target(language).filename(identifier)


def synthesize(type_descriptor: TypeDescriptor, language: str = "python", **options: Any) -> str:
    """Render the string-keyed accessor for a type.

    Args:
        type_descriptor: Extracted member model of the type
        language: Target language (see LANGUAGES)
        options: Target specific render options (python: runtime_import)
    """
    target = _target(language)
    logger.debug("Synthesizing %s accessor for %s", language, type_descriptor.qualified_name)
    return target.render(type_descriptor, **options)
