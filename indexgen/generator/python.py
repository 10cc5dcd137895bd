"""Python code generator: companion mixin with `__getitem__`/`__setitem__`."""

import json
from importlib import resources

from jinja2 import Environment, PackageLoader

from .clauses import get_clauses, join, set_clauses
from .types import MemberDescriptor, TypeDescriptor
from .util import to_snake_case

RUNTIME_FILES = [
    "__init__.py",
    "errors.py",
    "markers.py",
]

env = Environment(
    loader=PackageLoader("indexgen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("python.py.j2")


def _literal(text: str) -> str:
    """Quote text as a Python string literal."""
    return json.dumps(text)


def _get_case(member: MemberDescriptor) -> str:
    return f"case {_literal(member.name)}:\n    return self.{member.name}"


def _set_case(member: MemberDescriptor) -> str:
    return (
        f"case {_literal(member.name)}:\n"
        f"    self.{member.name} = cast({_literal(member.type)}, value)"
    )


def class_name(identifier: str) -> str:
    """Return the name of the generated mixin class."""
    return f"{identifier}Indexer"


def filename(identifier: str) -> str:
    """Return the module file name of the generated unit."""
    return f"{to_snake_case(identifier)}_indexer.py"


def render(type_descriptor: TypeDescriptor, runtime_import: str = "indexgen_runtime") -> str:
    """Render the companion mixin to Python source code."""
    return template.render(
        type=type_descriptor,
        class_name=class_name(type_descriptor.identifier),
        get_block=join(get_clauses(type_descriptor, _get_case), indent=" " * 12),
        set_block=join(set_clauses(type_descriptor, _set_case), indent=" " * 12),
        runtime_import=runtime_import,
    )


def runtime() -> dict[str, str]:
    """Return the Python runtime files as a dict of filename -> content."""
    result: dict[str, str] = {}
    for name in RUNTIME_FILES:
        content = resources.files("indexgen.runtime").joinpath(name).read_text()
        result[name] = content
    return result
