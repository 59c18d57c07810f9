#!/usr/bin/env python3
"""L1 + style validator CLI for an edited narrative bundle JSON file

Usage:
    python scripts/validate_bundle.py /path/to/bundle.json [avoid words...]

Exit codes:
    0 = L1 (sections present) and style check passed
    1 = L1 or style check failed

Stderr contains one line per problem so editors can fix copy by hand.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from narrative_engine.state import SECTION_KEYS, NarrativeBundle
from narrative_engine.style_validator import validate_style


def main() -> int:
    if len(sys.argv) < 2:
        print("Usage: validate_bundle.py <bundle.json> [avoid words...]", file=sys.stderr)
        return 1

    bundle_file = Path(sys.argv[1])
    avoid_list = sys.argv[2:]

    # Load JSON
    try:
        data = json.loads(bundle_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print("L1_SCHEMA_FAILED", file=sys.stderr)
        print(f"  - Cannot read {bundle_file}: {e}", file=sys.stderr)
        return 1

    # L1: every section present as a string
    if not isinstance(data, dict):
        print("L1_SCHEMA_FAILED", file=sys.stderr)
        print("  - Bundle must be a JSON object", file=sys.stderr)
        return 1
    errors = [f"Missing or non-string section: {key}" for key in SECTION_KEYS if not isinstance(data.get(key), str)]
    if errors:
        print("L1_SCHEMA_FAILED", file=sys.stderr)
        for err in errors:
            print(f"  - {err}", file=sys.stderr)
        return 1

    # Style charter
    result = validate_style(NarrativeBundle.from_dict(data), avoid_list)
    if not result.valid:
        print("STYLE_FAILED", file=sys.stderr)
        for v in result.violations:
            print(
                f"  - {v.section}: {v.violation_type} '{v.matched_pattern}' at {v.position}",
                file=sys.stderr,
            )
        return 1

    print("L1_STYLE_PASSED")
    return 0


if __name__ == "__main__":
    sys.exit(main())
