#!/usr/bin/env python3
# CLI entry point for the Narrative Engine
# Generate copy for one product, or check an edited bundle against the style charter

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from narrative_engine.pipeline import run_pipeline
from narrative_engine.state import (
    EMOTIONAL_CORES,
    ENERGY_TONES,
    INTENDED_USES,
    ITEM_TYPES,
    LIMITED_TYPES,
    PRIMARY_SYMBOLS,
    SECTION_KEYS,
    NarrativeBundle,
)
from narrative_engine.style_validator import validate_style

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_BAD_INPUT = 2


def _read_json(source: str) -> Any:
    """Read JSON from a file path, or stdin when source is '-'."""
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def build_request(args: argparse.Namespace) -> dict[str, Any]:
    """Assemble a request body from command-line flags, leaving unset flags out."""
    request: dict[str, Any] = {}
    for name in (
        "item_name",
        "item_type",
        "primary_symbol",
        "emotional_core",
        "energy_tone",
        "drop_name",
        "limited",
        "intended_use",
    ):
        value = getattr(args, name)
        if value is not None:
            request[name] = value
    if args.avoid:
        request["avoid_list"] = list(args.avoid)
    return request


def cmd_generate(args: argparse.Namespace) -> int:
    if args.input:
        try:
            request = _read_json(args.input)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error: cannot read request from {args.input}: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT
    else:
        request = build_request(args)

    result = run_pipeline(request)
    _, body = result.to_response()
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return EXIT_OK if result.success else EXIT_REJECTED


def cmd_check(args: argparse.Namespace) -> int:
    try:
        data = _read_json(args.bundle)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read bundle from {args.bundle}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if not isinstance(data, dict):
        print("Error: bundle must be a JSON object", file=sys.stderr)
        return EXIT_BAD_INPUT
    missing = [key for key in SECTION_KEYS if not isinstance(data.get(key), str)]
    if missing:
        print(f"Error: bundle is missing sections: {', '.join(missing)}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = validate_style(NarrativeBundle.from_dict(data), args.avoid)
    if result.valid:
        print("Style check passed")
        return EXIT_OK

    print(f"Style check failed: {len(result.violations)} violation(s)")
    for v in result.violations:
        print(f"  - {v.section} [{v.violation_type}] '{v.matched_pattern}' at {v.position}")
    return EXIT_REJECTED


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="narrative-engine",
        description="Narrative Engine - on-brand product copy",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate the six copy sections for a product")
    generate.add_argument(
        "--input",
        help="Request JSON file ('-' for stdin). Overrides the field flags.",
    )
    generate.add_argument("--item-name", dest="item_name", help="Name of the piece")
    generate.add_argument("--item-type", dest="item_type", choices=ITEM_TYPES)
    generate.add_argument("--primary-symbol", dest="primary_symbol", choices=PRIMARY_SYMBOLS)
    generate.add_argument("--emotional-core", dest="emotional_core", choices=EMOTIONAL_CORES)
    generate.add_argument("--energy-tone", dest="energy_tone", choices=ENERGY_TONES)
    generate.add_argument("--drop-name", dest="drop_name", help="Drop name (enables the tagline)")
    generate.add_argument("--limited", choices=LIMITED_TYPES)
    generate.add_argument("--intended-use", dest="intended_use", choices=INTENDED_USES)
    generate.add_argument(
        "--avoid",
        action="append",
        default=[],
        help="Word or phrase the copy must not contain (repeatable)",
    )
    generate.set_defaults(func=cmd_generate)

    check = subparsers.add_parser("check", help="Check an edited bundle against the style charter")
    check.add_argument("bundle", help="Bundle JSON file ('-' for stdin)")
    check.add_argument(
        "--avoid",
        action="append",
        default=[],
        help="Word or phrase the copy must not contain (repeatable)",
    )
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
