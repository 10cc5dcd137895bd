"""C# code generator: partial companion with a string-keyed indexer."""

from jinja2 import Environment, PackageLoader

from .clauses import get_clauses, join, set_clauses
from .types import MemberDescriptor, TypeDescriptor

env = Environment(
    loader=PackageLoader("indexgen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("csharp.cs.j2")


def _get_arm(member: MemberDescriptor) -> str:
    """Generate a switch expression arm returning the member."""
    return f'"{member.name}" => {member.name},'


def _set_case(member: MemberDescriptor) -> str:
    """Generate a switch section assigning the member."""
    return (
        f'case "{member.name}":\n'
        f"    {member.name} = ({member.type}) value;\n"
        f"    break;"
    )


def filename(identifier: str) -> str:
    """Return the file name of the generated unit."""
    return f"{identifier}.Indexer.generated.cs"


def render(type_descriptor: TypeDescriptor) -> str:
    """Render the companion partial declaration to C# source code."""
    return template.render(
        type=type_descriptor,
        get_block=join(get_clauses(type_descriptor, _get_arm), indent=" " * 12),
        set_block=join(set_clauses(type_descriptor, _set_case), indent=" " * 16),
    )
