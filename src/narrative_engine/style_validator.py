# Style validator
# Exhaustive, read-only scan of a bundle against the style charter

import re
from collections.abc import Iterable
from functools import lru_cache

from narrative_engine.forbidden_patterns import PHRASE_CATEGORIES, REGEX_CATEGORIES
from narrative_engine.state import NarrativeBundle, StyleValidationResult, StyleViolation


@lru_cache(maxsize=1024)
def _phrase_pattern(phrase: str) -> re.Pattern:
    """Case-insensitive phrase bounded by non-word characters or string edges."""
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", re.IGNORECASE)


def find_pattern_matches(text: str, pattern: re.Pattern) -> list[tuple[str, int]]:
    """All non-overlapping matches as (matched text, offset)."""
    return [(match.group(0), match.start()) for match in pattern.finditer(text)]


def find_phrase_matches(text: str, phrases: Iterable[str]) -> list[tuple[str, int]]:
    """Whole-word matches of each phrase, in phrase order then position.

    The matched text keeps the casing found in ``text``. Blank phrases are skipped.
    """
    matches: list[tuple[str, int]] = []
    for phrase in phrases:
        if not phrase.strip():
            continue
        matches.extend(find_pattern_matches(text, _phrase_pattern(phrase)))
    return matches


def _scan_section(section: str, text: str, avoid_list: list[str] | None) -> list[StyleViolation]:
    violations: list[StyleViolation] = []

    def _record(violation_type: str, matches: list[tuple[str, int]]) -> None:
        for matched, position in matches:
            violations.append(
                StyleViolation(
                    section=section,
                    violation_type=violation_type,
                    matched_pattern=matched,
                    position=position,
                )
            )

    for violation_type, pattern in REGEX_CATEGORIES.items():
        _record(violation_type, find_pattern_matches(text, pattern))

    for violation_type, phrases in PHRASE_CATEGORIES.items():
        _record(violation_type, find_phrase_matches(text, phrases))

    if avoid_list:
        _record("avoid_list_violation", find_phrase_matches(text, avoid_list))

    return violations


def validate_style(
    bundle: NarrativeBundle,
    avoid_list: Iterable[str] | None = None,
) -> StyleValidationResult:
    """Check every section of a bundle against the style charter.

    Never stops at the first finding and never modifies the bundle.

    Args:
        bundle: Generated (usually toned) copy
        avoid_list: Extra caller-supplied words/phrases, skipped when empty

    Returns:
        StyleValidationResult, valid iff no violations were found
    """
    avoid = list(avoid_list) if avoid_list else None

    violations: list[StyleViolation] = []
    for section, text in bundle.sections():
        violations.extend(_scan_section(section, text, avoid))

    return StyleValidationResult(valid=not violations, violations=violations)
