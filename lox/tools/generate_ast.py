"""
AST node generator for Lox.

Build-time helper, not part of the scanner. Given a base name and a list
of ``"ClassName : Type field, Type field"`` entries it writes a Python
module with:

- a ``<Base>Visitor`` ABC with one ``visit_<class>_<base>`` method per node
- an abstract ``<Base>`` class with ``accept(visitor)``
- one frozen dataclass per node whose ``accept`` dispatches to its method

Usage:
    lox-generate-ast <output directory>
"""

import keyword
import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

EXIT_USAGE = 64

# Grammar for expressions, the only tree the front end needs so far
EXPR_TYPES = [
    "Binary   : Expr left, Token operator, Expr right",
    "Grouping : Expr expression",
    "Literal  : object value",
    "Unary    : Token operator, Expr right",
]

HEADER = '''"""
{base} syntax tree nodes.

Generated by lox.tools.generate_ast; do not edit by hand.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
'''

TOKEN_IMPORT = "\nfrom lox.lexer.tokens import Token"


class AstSpecError(ValueError):
    """A node description that cannot be turned into a class."""


def _is_name(text: str) -> bool:
    return text.isidentifier() and not keyword.iskeyword(text)


def snake_case(name: str) -> str:
    """``BinaryOp`` -> ``binary_op``"""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def parse_type(spec: str) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Split one ``"ClassName : Type name, ..."`` entry.

    Returns:
        (class name, [(field type, field name), ...])

    Raises:
        AstSpecError: If the entry is malformed
    """
    if ":" not in spec:
        raise AstSpecError(f"missing ':' in node spec {spec!r}")

    class_part, field_part = spec.split(":", 1)
    class_name = class_part.strip()
    if not _is_name(class_name):
        raise AstSpecError(f"invalid class name {class_name!r}")

    fields = []
    seen = set()
    for field in field_part.split(","):
        field = field.strip()
        if not field:
            continue
        parts = field.split()
        if len(parts) != 2:
            raise AstSpecError(f"field {field!r} in {class_name} must be 'Type name'")
        field_type, field_name = parts
        if not _is_name(field_name):
            raise AstSpecError(f"invalid field name {field_name!r} in {class_name}")
        if field_name in seen:
            raise AstSpecError(f"duplicate field {field_name!r} in {class_name}")
        seen.add(field_name)
        fields.append((field_type, field_name))

    return class_name, fields


def _define_visitor(lines: List[str], base_name: str, class_names: Sequence[str]):
    lines.append("")
    lines.append("")
    lines.append(f"class {base_name}Visitor(ABC):")
    lines.append(f'    """Visitor interface for {base_name} nodes."""')
    for class_name in class_names:
        method = f"visit_{snake_case(class_name)}_{base_name.lower()}"
        lines.append("")
        lines.append("    @abstractmethod")
        lines.append(f"    def {method}(self, {base_name.lower()}: '{class_name}') -> Any:")
        lines.append("        pass")


def _define_base(lines: List[str], base_name: str):
    lines.append("")
    lines.append("")
    lines.append(f"class {base_name}(ABC):")
    lines.append(f'    """Base class for all {base_name} nodes."""')
    lines.append("")
    lines.append("    @abstractmethod")
    lines.append(f"    def accept(self, visitor: {base_name}Visitor) -> Any:")
    lines.append("        pass")


def _define_type(lines: List[str], base_name: str, class_name: str,
                 fields: Sequence[Tuple[str, str]]):
    method = f"visit_{snake_case(class_name)}_{base_name.lower()}"
    lines.append("")
    lines.append("")
    lines.append("@dataclass(frozen=True)")
    lines.append(f"class {class_name}({base_name}):")
    for field_type, field_name in fields:
        lines.append(f"    {field_name}: '{field_type}'")
    if fields:
        lines.append("")
    lines.append(f"    def accept(self, visitor: {base_name}Visitor) -> Any:")
    lines.append(f"        return visitor.{method}(self)")


def render_ast(base_name: str, types: Sequence[str]) -> str:
    """Return the source of the node module without writing it."""
    if not _is_name(base_name):
        raise AstSpecError(f"invalid base name {base_name!r}")

    parsed = [parse_type(spec) for spec in types]
    class_names = [name for name, _ in parsed]
    duplicates = {name for name in class_names if class_names.count(name) > 1}
    if duplicates:
        raise AstSpecError(f"duplicate node names: {', '.join(sorted(duplicates))}")

    lines = [HEADER.format(base=base_name).rstrip("\n")]
    field_types = [field_type for _, fields in parsed for field_type, _field in fields]
    if any(re.search(r"\bToken\b", field_type) for field_type in field_types):
        lines.append(TOKEN_IMPORT)
    _define_visitor(lines, base_name, class_names)
    _define_base(lines, base_name)
    for class_name, fields in parsed:
        _define_type(lines, base_name, class_name, fields)
    lines.append("")
    return "\n".join(lines)


def define_ast(output_dir, base_name: str, types: Sequence[str]) -> Path:
    """
    Generate ``<output_dir>/<base_name lower>.py``.

    Args:
        output_dir: Directory to write into (created if missing)
        base_name: Name of the abstract base class, e.g. ``Expr``
        types: Node descriptions, ``"ClassName : Type name, ..."``

    Returns:
        Path of the written module
    """
    source = render_ast(base_name, types)
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / f"{base_name.lower()}.py"
    path.write_text(source, encoding="utf-8")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``lox-generate-ast``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: generate_ast <output directory>", file=sys.stderr)
        return EXIT_USAGE

    path = define_ast(args[0], "Expr", EXPR_TYPES)
    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
