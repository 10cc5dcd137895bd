"""Member model extraction."""

import logging
from collections.abc import Iterable
from typing import Protocol

from .types import (
    Accessibility,
    MemberDescriptor,
    MemberKind,
    MemberSymbol,
    SetterKind,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


class DeclarationView(Protocol):
    """Read-only view of a type declaration supplied by the host.

    Both front ends (`parser.parse` and `pysource.parse_python`) produce
    `Declaration` objects that satisfy this protocol; other hosts only need
    to answer the same four questions.
    """

    @property
    def identifier(self) -> str: ...

    @property
    def declaration_header(self) -> str: ...

    @property
    def namespace(self) -> str | None: ...

    def declared_members(self) -> Iterable[MemberSymbol]: ...


def is_eligible(symbol: MemberSymbol) -> bool:
    """Check if a member can be reached through the string-keyed accessor."""
    return (
        symbol.kind == MemberKind.PROPERTY
        and symbol.accessibility == Accessibility.PUBLIC
        and not symbol.inherited
    )


def describe(symbol: MemberSymbol) -> MemberDescriptor:
    """Build the descriptor for an eligible member.

    Init-only setters are not writable: they cannot be reached after
    construction.
    """
    return MemberDescriptor(
        name=symbol.name,
        type=symbol.type,
        readable=symbol.has_getter,
        writable=symbol.setter == SetterKind.SET,
    )


def extract(declaration: DeclarationView) -> TypeDescriptor:
    """Extract the member model of a type declaration."""
    members = tuple(describe(s) for s in declaration.declared_members() if is_eligible(s))

    logger.debug(
        "Extracted %d eligible member(s) from %s", len(members), declaration.identifier
    )

    return TypeDescriptor(
        identifier=declaration.identifier,
        declaration_header=declaration.declaration_header,
        namespace=declaration.namespace or None,
        members=members,
    )
