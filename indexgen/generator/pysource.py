"""Python source front end.

Reads class declarations out of a module with `ast` (the module is never
imported) and reports their members the same way the declaration file parser
does. Only top-level classes decorated with `@indexed` are augmentable.
"""

import ast
from dataclasses import replace

from .types import Accessibility, Declaration, MemberKind, MemberSymbol, SetterKind

MARKER = "indexed"


def _decorator_name(node: ast.expr) -> str | None:
    if isinstance(node, ast.Call):
        node = node.func
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


def _is_frozen_dataclass(cls: ast.ClassDef) -> bool:
    for node in cls.decorator_list:
        if not isinstance(node, ast.Call) or _decorator_name(node) != "dataclass":
            continue
        for keyword in node.keywords:
            if (
                keyword.arg == "frozen"
                and isinstance(keyword.value, ast.Constant)
                and keyword.value.value is True
            ):
                return True
    return False


def _qualifier(annotation: ast.expr) -> tuple[str | None, ast.expr]:
    """Split `Final[int]` into ("Final", int). Bare qualifiers keep themselves."""
    if isinstance(annotation, ast.Subscript):
        name = _decorator_name(annotation.value)
        if name in ("ClassVar", "Final", "InitVar"):
            return name, annotation.slice
    name = _decorator_name(annotation)
    if name in ("ClassVar", "Final", "InitVar"):
        return name, annotation
    return None, annotation


def _accessibility(name: str) -> Accessibility:
    return Accessibility.PRIVATE if name.startswith("_") else Accessibility.PUBLIC


def _annotated(node: ast.AnnAssign, frozen: bool) -> MemberSymbol | None:
    if not isinstance(node.target, ast.Name):
        return None
    name = node.target.id
    qualifier, annotation = _qualifier(node.annotation)

    if qualifier in ("ClassVar", "InitVar"):
        return MemberSymbol(
            name=name,
            type=ast.unparse(annotation),
            kind=MemberKind.FIELD,
            accessibility=_accessibility(name),
        )

    if qualifier and annotation is node.annotation:
        type_text = "Any"  # bare Final
    else:
        type_text = ast.unparse(annotation)

    init_only = frozen or qualifier == "Final"
    return MemberSymbol(
        name=name,
        type=type_text,
        accessibility=_accessibility(name),
        setter=SetterKind.INIT if init_only else SetterKind.SET,
    )


def _property_role(node: ast.FunctionDef) -> tuple[str, str] | None:
    """Return (role, property name) when `node` is a property accessor.

    Role is "property" for the defining getter, otherwise the accessor
    attribute used ("setter", "getter", "deleter").
    """
    for decorator in node.decorator_list:
        if isinstance(decorator, ast.Name) and decorator.id == "property":
            return "property", node.name
        if (
            isinstance(decorator, ast.Attribute)
            and decorator.attr in ("setter", "getter", "deleter")
            and isinstance(decorator.value, ast.Name)
        ):
            return decorator.attr, decorator.value.id
    return None


def _members(cls: ast.ClassDef) -> list[MemberSymbol]:
    frozen = _is_frozen_dataclass(cls)
    members: dict[str, MemberSymbol] = {}
    # Positional keys keep a later setter from moving its property
    order: list[str] = []

    def add(symbol: MemberSymbol, key: str) -> None:
        if key not in members:
            order.append(key)
        members[key] = symbol

    for index, node in enumerate(cls.body):
        if isinstance(node, ast.AnnAssign):
            symbol = _annotated(node, frozen)
            if symbol is not None:
                add(symbol, symbol.name)
        elif isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name):
                    add(
                        MemberSymbol(
                            name=target.id,
                            type="Any",
                            kind=MemberKind.FIELD,
                            accessibility=_accessibility(target.id),
                        ),
                        target.id,
                    )
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            role = _property_role(node) if isinstance(node, ast.FunctionDef) else None
            if role is None:
                kind = MemberKind.INDEXER if node.name == "__getitem__" else MemberKind.METHOD
                add(
                    MemberSymbol(
                        name=node.name,
                        type=ast.unparse(node.returns) if node.returns else "Any",
                        kind=kind,
                        accessibility=_accessibility(node.name),
                        has_getter=kind is MemberKind.INDEXER,
                        setter=None,
                    ),
                    f"{node.name}#{index}",
                )
            elif role[0] == "property":
                add(
                    MemberSymbol(
                        name=node.name,
                        type=ast.unparse(node.returns) if node.returns else "Any",
                        accessibility=_accessibility(node.name),
                        setter=None,
                    ),
                    node.name,
                )
            elif role[0] == "setter" and role[1] in members:
                add(replace(members[role[1]], setter=SetterKind.SET), role[1])

    return [members[key] for key in order]


def parse_python(text: str, module: str | None = None) -> list[Declaration]:
    """Collect top-level class declarations from Python source text.

    Args:
        text: Module source code
        module: Dotted module name recorded as each declaration's namespace
    """
    tree = ast.parse(text)

    declarations: list[Declaration] = []
    for node in tree.body:
        if not isinstance(node, ast.ClassDef):
            continue
        declarations.append(
            Declaration(
                identifier=node.name,
                keyword="class",
                namespace=module or None,
                members=tuple(_members(node)),
                augmentable=any(_decorator_name(d) == MARKER for d in node.decorator_list),
                bases=tuple(ast.unparse(b) for b in node.bases),
            )
        )
    return declarations
