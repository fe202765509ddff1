"""Entry point: python -m servicegen REGISTRY [-o OUTPUT]

Reads a registry document, generates the AngularJS services module and writes
it to OUTPUT (stdout when omitted).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .codegen import generate_services, write_services
from .config import GeneratorOptions
from .errors import ServiceGenError
from .loader import load_registry


def _build_parser() -> argparse.ArgumentParser:
    defaults = GeneratorOptions()
    parser = argparse.ArgumentParser(
        prog="servicegen",
        description="Generate AngularJS $resource services from a model registry.",
    )
    parser.add_argument("registry", type=Path, help="Registry document (JSON).")
    parser.add_argument("-o", "--output", type=Path, help="Output file (default: stdout).")
    parser.add_argument("--module-name", default=defaults.module_name)
    parser.add_argument("--api-url", default=defaults.api_url)
    parser.add_argument("--namespace-models", action="store_true")
    parser.add_argument("--namespace-common-models", action="store_true")
    parser.add_argument("--namespace-delimiter", default=defaults.namespace_delimiter)
    parser.add_argument(
        "--ignore", dest="models_to_ignore", action="append", default=[],
        metavar="MODEL", help="Formatted model name to leave out (repeatable).",
    )
    parser.add_argument("--comments", action="store_true", help="Emit ngdoc comments.")
    parser.add_argument("--include-schema", action="store_true")
    parser.add_argument(
        "--no-common-modules", dest="include_common_modules", action="store_false",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _setup_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        options = GeneratorOptions.from_mapping({
            "module_name": args.module_name,
            "api_url": args.api_url,
            "include_common_modules": args.include_common_modules,
            "namespace_models": args.namespace_models,
            "namespace_common_models": args.namespace_common_models,
            "namespace_delimiter": args.namespace_delimiter,
            "models_to_ignore": args.models_to_ignore,
            "comments": args.comments,
            "include_schema": args.include_schema,
        })
        registry = load_registry(args.registry)
        code = generate_services(registry, options)
    except (OSError, ValueError, ServiceGenError) as exc:
        print(f"servicegen: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(code)
    else:
        write_services(code, args.output)
        print(f"Generated {args.output} ({options.module_name})", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
