"""Declaration file parser using Lark."""

import os
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from lark import Lark, Token
from lark.exceptions import VisitError
from lark.visitors import Transformer

from .types import Accessibility, Declaration, MemberKind, MemberSymbol, SetterKind

_g_parser: Lark | None = None

ACCESS_MODIFIERS = {
    "public": Accessibility.PUBLIC,
    "internal": Accessibility.INTERNAL,
    "protected": Accessibility.PROTECTED,
    "private": Accessibility.PRIVATE,
}


class ValidationError(RuntimeError):
    """Raised when a declaration file is semantically invalid."""


@dataclass
class _Namespace:
    value: str


@dataclass
class _Kind:
    value: str


@dataclass
class _Modifier:
    value: str


@dataclass
class _Parameter:
    name: str
    type: str


@dataclass
class _Parameters:
    values: list[_Parameter]


@dataclass
class _Bases:
    values: list[str]


@dataclass
class _Accessors:
    values: list[str]


@dataclass
class _Type:
    value: str


TFilter = TypeVar("TFilter", bound=object)


def _filter(args: list[Any], class_type: type[TFilter]) -> list[TFilter]:
    return [v for v in args if isinstance(v, class_type)]


def _find_one(args: list[Any], class_type: type[object]) -> Any:
    filtered = _filter(args, class_type)
    if len(filtered) == 0:
        return None
    if len(filtered) > 1:
        raise RuntimeError(f"Found more than one {class_type}")
    return filtered[0]


def _name(args: list[Any]) -> str:
    return str(next(a for a in args if isinstance(a, Token) and a.type == "NAME"))


def _modifiers(args: list[Any]) -> list[str]:
    return [m.value for m in _filter(args, _Modifier)]


def _accessibility(modifiers: list[str]) -> Accessibility:
    for modifier in modifiers:
        if modifier in ACCESS_MODIFIERS:
            return ACCESS_MODIFIERS[modifier]
    return Accessibility.PUBLIC


def _setter(accessors: list[str]) -> SetterKind | None:
    if "set" in accessors:
        return SetterKind.SET
    if "init" in accessors:
        return SetterKind.INIT
    return None


class TreeTransformer(Transformer):
    """Transform parse tree into declarations."""

    def start(self, args: list[Any]) -> list[Any]:
        return args

    def namespace(self, args: list[Any]) -> _Namespace:
        return _Namespace(value=args[0])

    def dotted_name(self, args: list[Any]) -> str:
        return ".".join(str(a) for a in args)

    def kind(self, args: list[Any]) -> _Kind:
        return _Kind(value=" ".join(str(a) for a in args))

    def modifier(self, args: list[Any]) -> _Modifier:
        return _Modifier(value=str(args[0]))

    def parameter(self, args: list[Any]) -> _Parameter:
        return _Parameter(name=str(args[0]), type=args[1].value)

    def parameters(self, args: list[Any]) -> _Parameters:
        return _Parameters(values=_filter(args, _Parameter))

    def bases(self, args: list[Any]) -> _Bases:
        return _Bases(values=[t.value for t in _filter(args, _Type)])

    def accessor(self, args: list[Any]) -> str:
        return str(args[0])

    def accessors(self, args: list[Any]) -> _Accessors:
        if not args:
            raise ValidationError("Accessor block must declare at least one accessor")
        if len(set(args)) != len(args):
            raise ValidationError(f"Repeated accessor in {{ {'; '.join(args)} }}")
        if "set" in args and "init" in args:
            raise ValidationError("A property cannot declare both set and init")
        return _Accessors(values=args)

    def property(self, args: list[Any]) -> MemberSymbol:
        accessors = _find_one(args, _Accessors).values
        return MemberSymbol(
            name=_name(args),
            type=_find_one(args, _Type).value,
            kind=MemberKind.PROPERTY,
            accessibility=_accessibility(_modifiers(args)),
            has_getter="get" in accessors,
            setter=_setter(accessors),
        )

    def field(self, args: list[Any]) -> MemberSymbol:
        return MemberSymbol(
            name=_name(args),
            type=_find_one(args, _Type).value,
            kind=MemberKind.FIELD,
            accessibility=_accessibility(_modifiers(args)),
        )

    def indexer(self, args: list[Any]) -> MemberSymbol:
        accessors = _find_one(args, _Accessors).values
        return MemberSymbol(
            name="this",
            type=_find_one(args, _Type).value,
            kind=MemberKind.INDEXER,
            accessibility=_accessibility(_modifiers(args)),
            has_getter="get" in accessors,
            setter=_setter(accessors),
        )

    def method(self, args: list[Any]) -> MemberSymbol:
        returns = _find_one(args, _Type)
        return MemberSymbol(
            name=_name(args),
            type=returns.value if returns else "void",
            kind=MemberKind.METHOD,
            accessibility=_accessibility(_modifiers(args)),
            has_getter=False,
            setter=None,
        )

    def declaration(self, args: list[Any]) -> Declaration:
        kind = _find_one(args, _Kind).value
        modifiers = _modifiers(args)
        parameters = _find_one(args, _Parameters)
        bases = _find_one(args, _Bases)

        body = _filter(args, MemberSymbol)
        declared = {m.name for m in body}

        # Positional record parameters become public properties ahead of the body,
        # unless the body declares a member of the same name
        positional: list[MemberSymbol] = []
        if parameters and kind.startswith("record"):
            mutable = kind == "record struct" and "readonly" not in modifiers
            positional = [
                MemberSymbol(
                    name=p.name,
                    type=p.type,
                    setter=SetterKind.SET if mutable else SetterKind.INIT,
                )
                for p in parameters.values
                if p.name not in declared
            ]

        return Declaration(
            identifier=_name(args),
            keyword=kind,
            namespace=None,
            members=tuple(positional + body),
            augmentable="partial" in modifiers,
            bases=tuple(bases.values) if bases else (),
        )

    def type(self, args: list[Any]) -> _Type:
        return _Type(value="".join(str(a) for a in args))

    def type_name(self, args: list[Any]) -> str:
        return ".".join(str(a) for a in args)

    def type_args(self, args: list[Any]) -> str:
        return "<" + ", ".join(t.value for t in args) + ">"

    def array_suffix(self, args: list[Any]) -> str:
        return "".join(str(a) for a in args)

    def nullable(self, args: list[Any]) -> str:
        return "?"


def validate(declarations: list[Declaration]) -> None:
    """Validate parsed declarations."""
    seen: set[str] = set()
    for declaration in declarations:
        if declaration.identifier in seen:
            raise ValidationError(f"{declaration.identifier} is declared more than once")
        seen.add(declaration.identifier)


def parse(text: str) -> list[Declaration]:
    """Parse a declaration file into declarations, in source order."""
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/declarations.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    tree = _g_parser.parse(text)
    try:
        items = TreeTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ValidationError):
            raise e.orig_exc from None
        raise

    declarations: list[Declaration] = []
    namespace: str | None = None
    for item in items:
        if isinstance(item, _Namespace):
            namespace = item.value
        else:
            declarations.append(replace(item, namespace=namespace))

    validate(declarations)

    return declarations
