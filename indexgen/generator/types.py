"""Type definitions for declaration parsing and accessor generation."""

from dataclasses import dataclass
from enum import StrEnum, auto

from dataclasses_json import DataClassJsonMixin


class Accessibility(StrEnum):
    """Declared accessibility of a member."""

    PUBLIC = auto()
    INTERNAL = auto()
    PROTECTED = auto()
    PRIVATE = auto()


class MemberKind(StrEnum):
    """Shape of a declared member."""

    PROPERTY = auto()  # Named, typed slot with get/set semantics
    INDEXER = auto()  # Parameterized accessor, e.g. this[int] or __getitem__
    FIELD = auto()
    METHOD = auto()


class SetterKind(StrEnum):
    """How a property can be assigned."""

    SET = auto()
    INIT = auto()  # Only during construction/initialization


@dataclass(frozen=True)
class MemberSymbol(DataClassJsonMixin):
    """A member as reported by a declaration host, before filtering."""

    name: str
    type: str
    kind: MemberKind = MemberKind.PROPERTY
    accessibility: Accessibility = Accessibility.PUBLIC
    has_getter: bool = True
    setter: SetterKind | None = SetterKind.SET
    inherited: bool = False


@dataclass(frozen=True)
class Declaration(DataClassJsonMixin):
    """A type declaration discovered by one of the front ends.

    `keyword` holds the declaration kind as written ("record class",
    "struct", "class", ...). `augmentable` is set when the declaration is
    open to companion fragments (`partial` in declaration files, `@indexed`
    in Python source).
    """

    identifier: str
    keyword: str
    namespace: str | None
    members: tuple[MemberSymbol, ...]
    augmentable: bool = False
    bases: tuple[str, ...] = ()

    @property
    def declaration_header(self) -> str:
        return f"{self.keyword} {self.identifier}"

    def declared_members(self) -> tuple[MemberSymbol, ...]:
        return self.members


@dataclass(frozen=True)
class MemberDescriptor(DataClassJsonMixin):
    """One member eligible for string-keyed access."""

    name: str
    type: str
    readable: bool
    writable: bool


@dataclass(frozen=True)
class TypeDescriptor(DataClassJsonMixin):
    """The type being augmented, with its eligible members in declaration order."""

    identifier: str
    declaration_header: str
    namespace: str | None
    members: tuple[MemberDescriptor, ...]

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.identifier}"
        return self.identifier

    @property
    def readable_members(self) -> list[MemberDescriptor]:
        return [m for m in self.members if m.readable]

    @property
    def writable_members(self) -> list[MemberDescriptor]:
        return [m for m in self.members if m.writable]
