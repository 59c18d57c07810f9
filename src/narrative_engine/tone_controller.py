# Tone controller
# Verb substitution and sentence restructuring per energy tone

import re

from narrative_engine.generator import capitalize, third_person
from narrative_engine.state import EnergyTone, NarrativeBundle, ToneModifiers

# Source verb -> replacement verb, base forms
TONE_VERBS: dict[str, dict[str, str]] = {
    "soft_whispered": {
        "command": "rest",
        "claim": "hold",
        "wield": "whisper",
        "possess": "keep",
        "guard": "settle",
        "shield": "cradle",
        "ward": "nestle",
        "defend": "shelter",
    },
    "balanced_reverent": {
        "command": "carry",
        "claim": "honor",
        "wield": "keep",
        "possess": "hold",
    },
    "dark_commanding": {
        "rest": "command",
        "hold": "claim",
        "whisper": "bind",
        "keep": "forge",
        "settle": "wield",
        "cradle": "possess",
        "nestle": "channel",
    },
}

TONE_MODIFIERS: dict[str, ToneModifiers] = {
    "soft_whispered": ToneModifiers(intensity="gentle", sentence_length="short", mysticism_level="grounded"),
    "balanced_reverent": ToneModifiers(intensity="moderate", sentence_length="medium", mysticism_level="balanced"),
    "dark_commanding": ToneModifiers(intensity="strong", sentence_length="varied", mysticism_level="elevated"),
}

# Sections kept as plain descriptive clauses
STRUCTURE_EXEMPT_SECTIONS = frozenset({"alt_text"})

_SPLIT_PATTERN = re.compile(r",\s+(\w?)")
_MERGE_PATTERN = re.compile(r"\. +(It|The) +")


def _build_substitutions(verb_map: dict[str, str]) -> tuple[re.Pattern, dict[str, str]]:
    """Compile one alternation covering base and third-person forms."""
    replacements: dict[str, str] = {}
    for source, target in verb_map.items():
        replacements[source] = target
        replacements[third_person(source)] = third_person(target)
    # Longest first so "possesses" wins over "possess"
    alternatives = sorted(replacements, key=len, reverse=True)
    pattern = re.compile(
        r"\b(" + "|".join(re.escape(word) for word in alternatives) + r")\b",
        re.IGNORECASE,
    )
    return pattern, replacements


_SUBSTITUTIONS: dict[str, tuple[re.Pattern, dict[str, str]]] = {
    tone: _build_substitutions(verb_map) for tone, verb_map in TONE_VERBS.items()
}


def get_tone_modifiers(tone: EnergyTone) -> ToneModifiers:
    return TONE_MODIFIERS[tone]


def replace_verbs(text: str, tone: EnergyTone) -> str:
    """Whole-word, case-preserving verb substitution in a single pass."""
    pattern, replacements = _SUBSTITUTIONS[tone]

    def _substitute(match: re.Match) -> str:
        original = match.group(0)
        replacement = replacements[original.lower()]
        if original[0].isupper():
            return capitalize(replacement)
        return replacement

    return pattern.sub(_substitute, text)


def split_clauses(text: str) -> str:
    """Turn comma-joined clauses into separate short sentences."""
    return _SPLIT_PATTERN.sub(lambda m: ". " + m.group(1).upper(), text)


def merge_sentences(text: str) -> str:
    """Fold "It"/"The" openers into the previous sentence."""
    return _MERGE_PATTERN.sub(lambda m: ", " + m.group(1).lower() + " ", text)


def adjust_sentence_structure(text: str, tone: EnergyTone) -> str:
    sentence_length = get_tone_modifiers(tone).sentence_length
    if sentence_length == "short":
        return split_clauses(text)
    if sentence_length == "varied":
        return merge_sentences(text)
    return text


def apply_tone_control(bundle: NarrativeBundle, tone: EnergyTone) -> NarrativeBundle:
    """Return a new bundle with tone applied section by section.

    Every section gets verb substitution; all but alt_text are restructured.
    """
    adjusted: dict[str, str] = {}
    for section, text in bundle.sections():
        text = replace_verbs(text, tone)
        if section not in STRUCTURE_EXEMPT_SECTIONS:
            text = adjust_sentence_structure(text, tone)
        adjusted[section] = text
    return NarrativeBundle(**adjusted)
