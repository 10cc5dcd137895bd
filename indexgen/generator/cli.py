"""Command-line interface for indexgen code generation."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from lark.exceptions import LarkError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from indexgen.generator import extract, parse, parse_python, python
from indexgen.generator.logs import configure_logging
from indexgen.generator.parser import ValidationError
from indexgen.generator.pipeline import candidates, generate_all
from indexgen.generator.synthesizer import LANGUAGES

if TYPE_CHECKING:
    from indexgen.generator.pipeline import GeneratedUnit
    from indexgen.generator.types import Declaration, TypeDescriptor


def _load(input_file: str, module: str | None) -> list[Declaration]:
    """Read an input file with the front end matching its suffix."""
    path = Path(input_file)
    text = path.read_text(encoding="utf-8")

    try:
        if path.suffix == ".py":
            return parse_python(text, module=module or path.stem)
        return parse(text)
    except (LarkError, ValidationError, SyntaxError) as e:
        print(f"Error: {input_file}: {e}")
        sys.exit(1)


def _filename_clashes(units: list[GeneratedUnit]) -> list[str]:
    """Describe output files that more than one type would write."""
    owners: dict[str, list[str]] = {}
    for unit in units:
        owners.setdefault(unit.filename, []).append(unit.identifier)
    return [
        f"{filename} ({', '.join(identifiers)})"
        for filename, identifiers in owners.items()
        if len(identifiers) > 1
    ]


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """indexgen string-keyed accessor generator."""
    configure_logging(verbose=verbose)


@cli.command()
@click.option("--language", "-l", required=True, help="Target language (csharp, python)")
@click.option("--input", "-i", "input_file", required=True, help="Input declaration file")
@click.option("--output", "-o", "output_path", required=True, help="Output directory")
@click.option(
    "--runtime-import",
    "runtime_import",
    is_flag=False,
    flag_value="indexgen.runtime",
    default=None,
    help="Import path for runtime. No value=indexgen.runtime, omit=indexgen_runtime",
)
@click.option("--module", default=None, help="Module name for Python input (default: file stem)")
@click.option(
    "--jobs", "-j", type=click.IntRange(min=1), default=None, help="Parallel generation workers"
)
def gen(
    language: str,
    input_file: str,
    output_path: str,
    runtime_import: str | None,
    module: str | None,
    jobs: int | None,
) -> None:
    """Generate accessor companions for every candidate type in a file."""
    if language not in LANGUAGES:
        print(f"Unknown language: {language}")
        sys.exit(1)

    declarations = _load(input_file, module)

    options: dict[str, str] = {}
    if language == "python":
        # Default to "indexgen_runtime" (copied runtime) if not specified
        options["runtime_import"] = (
            runtime_import if runtime_import is not None else "indexgen_runtime"
        )

    units = generate_all(declarations, language, max_workers=jobs, **options)

    clashes = _filename_clashes(units)
    if clashes:
        print(f"Error: {input_file}: output file name collision: {'; '.join(clashes)}")
        sys.exit(1)

    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    for unit in units:
        (output_dir / unit.filename).write_bytes(unit.encode())


@cli.command()
@click.option("--language", "-l", required=True, help="Target language (csharp, python)")
@click.option("--output", "-o", "output_path", default=".", help="Output directory")
@click.option("--name", default="indexgen_runtime", help="Runtime folder name (python only)")
def runtime(language: str, output_path: str, name: str) -> None:
    """Generate runtime support code."""
    if language == "python":
        runtime_dir = Path(output_path) / name
        runtime_dir.mkdir(parents=True, exist_ok=True)
        for filename, content in python.runtime().items():
            (runtime_dir / filename).write_text(content)
        print(f"Generated Python runtime in {runtime_dir}")
    elif language == "csharp":
        print("C# accessors use System.IndexOutOfRangeException; no runtime needed")
    else:
        print(f"Unknown language: {language}")
        sys.exit(1)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input declaration file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--module", default=None, help="Module name for Python input (default: file stem)")
def info(input_file: str, output_json: bool, module: str | None) -> None:
    """Display the member model extracted for each candidate type."""
    declarations = _load(input_file, module)
    types = [extract(d) for d in candidates(declarations)]

    if output_json:
        print(json.dumps([t.to_dict() for t in types], indent=2))
    else:
        _output_plain(types)


def _flag(value: bool) -> str:
    return "yes" if value else "no"


def _output_plain(types: list[TypeDescriptor]) -> None:
    """Output member models using rich text formatting."""
    console = Console()

    if not types:
        console.print("[dim]No candidate types[/dim]")
        return

    for type_descriptor in types:
        console.print(f"[bold cyan]{escape(type_descriptor.qualified_name)}[/bold cyan]")

        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("Member", style="white")
        table.add_column("Type", style="yellow")
        table.add_column("Get", style="green", justify="center")
        table.add_column("Set", style="green", justify="center")

        for member in type_descriptor.members:
            table.add_row(
                escape(member.name),
                escape(member.type),
                _flag(member.readable),
                _flag(member.writable),
            )

        if not type_descriptor.members:
            console.print("[dim]No accessible members[/dim]")
        else:
            console.print(table)
        console.print()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
