# Lexical tables for the narrative generator
# Keyed by primary symbol, emotional core and item type. Read-only after import.
#
# Verbs (emotional-core verbs, item-type presence and wearing) are stored in
# base form; the generator inflects them. Imagery entries are nouns,
# descriptors and qualities are adjectives.

from collections.abc import Mapping
from types import MappingProxyType

from narrative_engine.state import EMOTIONAL_CORES, ITEM_TYPES, PRIMARY_SYMBOLS


class LexicalTableError(Exception):
    """A lexical table is missing an entry or an entry is too short"""

    pass


# ===== Symbol imagery and descriptors =====

SYMBOL_PHRASES: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "moon": {
        "imagery": ("crescent", "tide", "phase", "eclipse", "halo", "night"),
        "descriptors": ("silver", "pale", "quiet", "watching", "cyclical", "distant"),
    },
    "rose": {
        "imagery": ("petal", "thorn", "bloom", "stem", "garden", "bud"),
        "descriptors": ("velvet", "crimson", "soft", "sharp", "layered", "unfolding"),
    },
    "heart": {
        "imagery": ("chamber", "pulse", "beat", "core", "center", "vessel"),
        "descriptors": ("deep", "steady", "warm", "enclosed", "vital", "tender"),
    },
    "blade": {
        "imagery": ("edge", "point", "steel", "cut", "line", "boundary"),
        "descriptors": ("sharp", "clean", "precise", "cold", "decisive", "clear"),
    },
    "bone": {
        "imagery": ("marrow", "structure", "frame", "remains", "foundation", "relic"),
        "descriptors": ("white", "bare", "enduring", "stark", "essential", "ancient"),
    },
    "mirror": {
        "imagery": ("reflection", "surface", "glass", "image", "double", "gaze"),
        "descriptors": ("clear", "still", "revealing", "truthful", "facing", "silent"),
    },
    "candle": {
        "imagery": ("flame", "wax", "wick", "light", "glow", "shadow"),
        "descriptors": ("warm", "flickering", "steady", "golden", "burning", "soft"),
    },
})


# ===== Emotional core vocabulary =====
# Every verb slot takes a direct object, so no theme verb may be one the soft
# tone turns into rest, whisper, settle or nestle. Adjacent quality and noun
# positions never share a stem.

EMOTIONAL_CORE_THEMES: Mapping[str, Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "devotion": {
        "verbs": ("honor", "keep", "hold", "carry", "tend", "preserve"),
        "nouns": ("commitment", "dedication", "faithfulness", "constancy", "loyalty", "care"),
        "qualities": ("steadfast", "unwavering", "constant", "true", "faithful", "devoted"),
    },
    "grief": {
        "verbs": ("remember", "mourn", "hold", "carry", "honor", "bear"),
        "nouns": ("loss", "absence", "memory", "sorrow", "weight", "silence"),
        "qualities": ("heavy", "quiet", "deep", "tender", "aching", "gentle"),
    },
    "protection": {
        "verbs": ("shield", "defend", "shelter", "keep", "tend", "protect"),
        "nouns": ("safety", "boundary", "refuge", "sanctuary", "barrier", "haven"),
        "qualities": ("strong", "vigilant", "secure", "watchful", "firm", "resolute"),
    },
    "longing": {
        "verbs": ("seek", "await", "answer", "desire", "approach", "follow"),
        "nouns": ("absence", "distance", "wanting", "hunger", "pull", "ache"),
        "qualities": ("distant", "reaching", "unfulfilled", "patient", "tender", "persistent"),
    },
    "transformation": {
        "verbs": ("change", "shift", "become", "shed", "tend", "renew"),
        "nouns": ("passage", "threshold", "metamorphosis", "transition", "rebirth", "renewal"),
        "qualities": ("changing", "fluid", "liminal", "emerging", "unfolding", "becoming"),
    },
    "memory": {
        "verbs": ("remember", "recall", "preserve", "hold", "keep", "honor"),
        "nouns": ("past", "echo", "trace", "remnant", "imprint", "record"),
        "qualities": ("fading", "preserved", "lingering", "distant", "cherished", "remembered"),
    },
    "power": {
        "verbs": ("claim", "possess", "channel", "hold", "bear", "summon"),
        "nouns": ("strength", "force", "authority", "will", "mastery", "dominion"),
        "qualities": ("potent", "commanding", "formidable", "sovereign", "assured", "unyielding"),
    },
})


# ===== Item type context =====
# presence verbs take an object: "carries the moon", "holds steadfast commitment"

ITEM_TYPE_CONTEXT: Mapping[str, Mapping[str, object]] = MappingProxyType({
    "jewelry": {
        "noun": "piece of jewelry",
        "wearing": ("wear", "carry", "adorn", "hold close", "keep near"),
        "presence": ("carry", "hold", "mark", "adorn", "grace"),
    },
    "apparel": {
        "noun": "garment",
        "wearing": ("wear", "drape", "wrap", "carry", "hold"),
        "presence": ("bear", "wrap", "drape", "cover", "envelop"),
    },
    "home_object": {
        "noun": "home object",
        "wearing": ("keep", "place", "hold", "display", "house"),
        "presence": ("hold", "keep", "frame", "occupy", "inhabit"),
    },
    "altar_piece": {
        "noun": "altar piece",
        "wearing": ("place", "keep", "tend", "honor", "maintain"),
        "presence": ("enshrine", "anchor", "mark", "hold space for", "honor"),
    },
    "wearable_symbol": {
        "noun": "wearable symbol",
        "wearing": ("wear", "carry", "bear", "display", "hold"),
        "presence": ("declare", "signify", "mark", "show", "bear"),
    },
})


# ===== Completeness invariant =====
# Highest position the generator reads from each field, plus one.

MIN_ENTRY_LENGTHS: dict[str, dict[str, int]] = {
    "symbol": {"imagery": 3, "descriptors": 5},
    "theme": {"verbs": 5, "nouns": 6, "qualities": 6},
    "context": {"wearing": 1, "presence": 3},
}


def _check_table(
    name: str,
    table: Mapping[str, Mapping[str, object]],
    keys: tuple[str, ...],
    minimums: dict[str, int],
) -> list[str]:
    errors: list[str] = []
    for key in keys:
        entry = table.get(key)
        if entry is None:
            errors.append(f"{name} has no entry for '{key}'")
            continue
        for field, minimum in minimums.items():
            values = entry.get(field, ())
            if len(values) < minimum:
                errors.append(
                    f"{name}['{key}']['{field}'] has {len(values)} entries, needs {minimum}"
                )
    return errors


def check_tables() -> None:
    """Verify every closed-set value has a complete table entry.

    Raises:
        LexicalTableError: listing every gap found
    """
    errors = (
        _check_table("SYMBOL_PHRASES", SYMBOL_PHRASES, PRIMARY_SYMBOLS, MIN_ENTRY_LENGTHS["symbol"])
        + _check_table(
            "EMOTIONAL_CORE_THEMES", EMOTIONAL_CORE_THEMES, EMOTIONAL_CORES, MIN_ENTRY_LENGTHS["theme"]
        )
        + _check_table("ITEM_TYPE_CONTEXT", ITEM_TYPE_CONTEXT, ITEM_TYPES, MIN_ENTRY_LENGTHS["context"])
    )
    for item_type in ITEM_TYPES:
        if not ITEM_TYPE_CONTEXT.get(item_type, {}).get("noun"):
            errors.append(f"ITEM_TYPE_CONTEXT['{item_type}'] has no noun")
    if errors:
        raise LexicalTableError("; ".join(errors))


check_tables()
