"""
Command line front end.

    python -m polytope_engine permutahedron --param permutahedron_type=B3/C3 --size 2
    python -m polytope_engine orbit --param point1=0 --param point4=1
    python -m polytope_engine --list

Prints {vertices, faces, edges} as JSON on stdout; logs go to stderr.
"""

import argparse
import json
import logging
import sys

from .logging_config import setup_logging
from .registry import FAMILIES, create_polytope, get_family


def parse_param(text: str):
    """NAME=VALUE pair of a --param argument."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name, value


def family_schemas() -> dict:
    schemas = {}
    for family_id in FAMILIES:
        family = get_family(family_id)
        schemas[family_id] = {
            "name": family.name,
            "parameters": [spec._asdict() for spec in family.parameters()],
        }
    return schemas


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polytope-engine",
        description="Compute polytope vertices, faces and edges as JSON.")
    parser.add_argument("family", nargs="?", help=f"Family id: {', '.join(FAMILIES)}")
    parser.add_argument("--size", type=float, default=None, help="Uniform scale factor (default 1.0)")
    parser.add_argument("--param", type=parse_param, action="append", default=[], metavar="NAME=VALUE",
                        help="Family parameter; repeatable")
    parser.add_argument("--list", action="store_true", help="List families and their parameters")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    if args.list:
        json.dump(family_schemas(), sys.stdout, indent=args.indent, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0

    if args.family is None:
        parser.error("a family id is required unless --list is given")
    if args.family not in FAMILIES:
        parser.error(f"unknown family {args.family!r}; choose from {', '.join(FAMILIES)}")

    polytope = create_polytope(args.family, dict(args.param), size=args.size)
    json.dump(polytope.to_dict(), sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
