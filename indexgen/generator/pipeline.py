"""Generation pipeline: declaration -> member model -> generated unit."""

import logging
from collections import Counter
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from .extractor import DeclarationView, extract
from .synthesizer import filename, synthesize, unit_name
from .types import Declaration, TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedUnit:
    """Generated source for one type, ready to hand to the build."""

    identifier: str
    language: str
    filename: str
    source: str

    @property
    def name(self) -> str:
        return unit_name(self.identifier)

    def encode(self) -> bytes:
        return self.source.encode("utf-8")


def duplicate_members(type_descriptor: TypeDescriptor) -> list[str]:
    """Return member names that occur more than once, in first-seen order."""
    counts = Counter(m.name for m in type_descriptor.members)
    return [name for name, count in counts.items() if count > 1]


def candidates(declarations: Iterable[Declaration]) -> list[Declaration]:
    """Keep the declarations that accept companion fragments."""
    return [d for d in declarations if d.augmentable]


def generate(
    declaration: DeclarationView, language: str = "python", **options: Any
) -> GeneratedUnit:
    """Generate the accessor unit for a single declaration."""
    type_descriptor = extract(declaration)

    duplicates = duplicate_members(type_descriptor)
    if duplicates:
        # Left as-is; the generated code may not compile.
        logger.warning(
            "%s declares duplicate member name(s): %s",
            type_descriptor.qualified_name,
            ", ".join(duplicates),
        )

    return GeneratedUnit(
        identifier=type_descriptor.identifier,
        language=language,
        filename=filename(type_descriptor.identifier, language),
        source=synthesize(type_descriptor, language, **options),
    )


def generate_all(
    declarations: Iterable[Declaration],
    language: str = "python",
    *,
    max_workers: int | None = None,
    **options: Any,
) -> list[GeneratedUnit]:
    """Generate units for every candidate declaration, in input order.

    Declarations are independent, so they are processed in parallel.
    """
    selected = candidates(declarations)
    logger.debug("Generating %d unit(s) for %s", len(selected), language)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda d: generate(d, language, **options), selected))
