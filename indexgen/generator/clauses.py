"""Ordered get/set clause lists shared by the target renderers.

Each target emits one clause per member; the clauses are kept in member
order and joined with a fixed separator, so the same descriptor always
renders to the same text.
"""

import textwrap
from collections.abc import Callable
from dataclasses import dataclass

from .types import MemberDescriptor, TypeDescriptor

SEPARATOR = "\n"


@dataclass(frozen=True)
class Clause:
    """One dispatch arm: the key it matches and the code it emits."""

    key: str
    text: str


Emitter = Callable[[MemberDescriptor], str]


def get_clauses(type_descriptor: TypeDescriptor, emit: Emitter) -> list[Clause]:
    """Build the get dispatch for every readable member."""
    return [Clause(m.name, emit(m)) for m in type_descriptor.readable_members]


def set_clauses(type_descriptor: TypeDescriptor, emit: Emitter) -> list[Clause]:
    """Build the set dispatch for every writable member."""
    return [Clause(m.name, emit(m)) for m in type_descriptor.writable_members]


def join(clauses: list[Clause], indent: str = "") -> str:
    """Join clauses in order, indenting every line of every clause."""
    return SEPARATOR.join(textwrap.indent(c.text, indent) for c in clauses)
