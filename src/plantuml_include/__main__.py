"""Command line entry point for the PlantUML include preprocessor.

Usage:
    python -m plantuml_include diagram.puml [-o expanded.puml] [-v]
    python -m plantuml_include diagram.puml --list-includes
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from plantuml_include.config import PreprocessOptions
from plantuml_include.errors import PlantUMLIncludeError
from plantuml_include.include_directive_parser import IncludeDirectiveParser
from plantuml_include.preprocessor import PlantUMLPreprocessor


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Expand !include directives of a PlantUML diagram")
    parser.add_argument("input", help="Input .puml file")
    parser.add_argument("--output", "-o", help="Output path (default: stdout)")
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the input and included files")
    parser.add_argument("--timeout", type=float, default=30.0, help="Timeout in seconds for remote includes")
    parser.add_argument("--list-includes", action="store_true", help="Only list the include directives of the input")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every resolved include")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: {input_path} not found", file=sys.stderr)
        return 1
    content = input_path.read_text(encoding=args.encoding)

    if args.list_includes:
        for directive in IncludeDirectiveParser().extract_includes(content):
            selector = f"!{directive.selector}" if directive.selector else ""
            print(f"{directive.line + 1}: !{directive.keyword} {directive.locator}{selector}")
        return 0

    options = PreprocessOptions(source_path=str(input_path), encoding=args.encoding, remote_timeout=args.timeout)
    try:
        expanded = PlantUMLPreprocessor(options).expand(content)
    except PlantUMLIncludeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(expanded, encoding="utf-8")
    else:
        sys.stdout.write(expanded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
