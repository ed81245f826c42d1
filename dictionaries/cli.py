# dictionaries/cli.py
"""
Command line inspection of the dictionary assets.

Usage:
    strength-dictionaries list
    strength-dictionaries show top10k --limit 25
    strength-dictionaries --asset-dir ./my-assets validate --strict

Exit codes:
    0  success
    1  validation found problems
    2  assets could not be loaded, or bad usage
"""

from __future__ import annotations

import argparse
import json
import sys
from itertools import islice
from typing import Any, List, Mapping, Optional

from dictionaries.adapters.persistence.filesystem_source import DirectoryAssetSource
from dictionaries.api import load_dictionaries
from dictionaries.core.domain.exceptions import DictionaryError
from dictionaries.core.domain.manifest import LOGICAL_NAMES, MANIFEST, spec_for
from dictionaries.core.domain.models import Dictionaries
from dictionaries.core.domain.schema import has_errors, validate_dictionaries
from dictionaries.shared.logging_config import configure_logging


EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strength-dictionaries",
        description="Inspect and validate the bundled password-strength dictionaries.",
    )
    parser.add_argument(
        "--asset-dir",
        help="Read assets from this directory instead of the configured source.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override DICTIONARIES_LOG_LEVEL (DEBUG, INFO, WARNING, ...).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List every asset with its entry count.")

    show = sub.add_parser("show", help="Print the first entries of one asset as JSON.")
    show.add_argument("name", choices=LOGICAL_NAMES)
    show.add_argument("--limit", type=int, default=10, help="Entries to print (0 = all).")

    validate = sub.add_parser("validate", help="Run structural checks over every asset.")
    validate.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures too.",
    )

    return parser


def _jsonable(value: Any, limit: int) -> Any:
    if isinstance(value, Mapping):
        items = value.items() if limit <= 0 else islice(value.items(), limit)
        return {str(k): list(v) if isinstance(v, tuple) else v for k, v in items}
    items = value if limit <= 0 else islice(value, limit)
    return list(items)


def _cmd_list(dicts: Dictionaries) -> int:
    for spec in MANIFEST:
        print(f"{spec.name:<14} {spec.resource:<20} {spec.shape.value:<9} {len(dicts[spec.name])}")
    return EXIT_OK


def _cmd_show(dicts: Dictionaries, name: str, limit: int) -> int:
    spec = spec_for(name)
    value = dicts[name]
    shown = _jsonable(value, limit)
    print(json.dumps(shown, ensure_ascii=False, indent=2))
    if 0 < limit < len(value):
        print(f"... {len(value) - limit} more {spec.shape.value} entries", file=sys.stderr)
    return EXIT_OK


def _cmd_validate(dicts: Dictionaries, strict: bool) -> int:
    issues = validate_dictionaries(dicts)
    for issue in issues:
        print(f"[{issue.level.upper()}] {issue.path}: {issue.message}")

    if has_errors(issues) or (strict and issues):
        print(f"Validation failed: {len(issues)} issue(s).")
        return EXIT_INVALID

    print(f"OK: {len(LOGICAL_NAMES)} assets valid.")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    # validate reports schema errors itself instead of aborting the load
    strict = False if args.command == "validate" else None
    try:
        source = DirectoryAssetSource(args.asset_dir) if args.asset_dir else None
        dicts = load_dictionaries(source, strict=strict)
    except DictionaryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    if args.command == "list":
        return _cmd_list(dicts)
    if args.command == "show":
        return _cmd_show(dicts, args.name, args.limit)
    return _cmd_validate(dicts, args.strict)


if __name__ == "__main__":
    sys.exit(main())
