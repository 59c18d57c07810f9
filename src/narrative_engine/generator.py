# Narrative generator
# Deterministic template expansion of a ProductInput into six copy sections

from narrative_engine.state import NarrativeBundle, ProductInput
from narrative_engine.templates import EMOTIONAL_CORE_THEMES, ITEM_TYPE_CONTEXT, SYMBOL_PHRASES

INTENDED_USE_PHRASES: dict[str, str] = {
    "worn_daily": "daily wear",
    "worn_intentionally": "intentional moments",
    "displayed": "quiet display",
    "gifted": "thoughtful gifting",
}

_SIBILANT_ENDINGS = ("s", "sh", "ch", "x", "z", "o")
_VOWELS = "aeiou"


# ===== Text helpers =====


def display(value: str) -> str:
    """Enum value as prose: underscores become spaces."""
    return value.replace("_", " ")


def third_person(phrase: str) -> str:
    """Inflect the leading verb of a phrase for third person singular.

    "carry" -> "carries", "possess" -> "possesses", "hold space for" -> "holds space for"
    """
    verb, sep, rest = phrase.partition(" ")
    if verb.endswith(_SIBILANT_ENDINGS):
        verb += "es"
    elif verb.endswith("y") and len(verb) > 1 and verb[-2] not in _VOWELS:
        verb = verb[:-1] + "ies"
    else:
        verb += "s"
    return verb + sep + rest


def with_article(word: str) -> str:
    """Prefix the indefinite article that fits ``word``."""
    article = "an" if word[:1].lower() in _VOWELS else "a"
    return f"{article} {word}"


def capitalize(text: str) -> str:
    """Uppercase the first character only (str.capitalize lowercases the rest)."""
    return text[:1].upper() + text[1:]


# ===== Section generators =====


def generate_short_description(input: ProductInput) -> str:
    symbol = SYMBOL_PHRASES[input.primary_symbol]
    theme = EMOTIONAL_CORE_THEMES[input.emotional_core]
    context = ITEM_TYPE_CONTEXT[input.item_type]

    description = (
        f"{input.item_name} is {with_article(symbol['descriptors'][0])} {context['noun']} "
        f"that {third_person(context['presence'][0])} the {display(input.primary_symbol)}. "
        f"It {third_person(context['presence'][1])} {theme['qualities'][0]} {theme['nouns'][0]}."
    )

    # First matching condition wins: drop, numbered edition, intended use
    if input.drop_name:
        description += f" Part of the {input.drop_name} collection."
    elif input.limited == "numbered":
        description += " A numbered piece."
    elif input.intended_use:
        description += f" Made for {INTENDED_USE_PHRASES[input.intended_use]}."

    return description


def generate_long_ritual_description(input: ProductInput) -> str:
    """Three paragraphs: presence and symbolism, emotional core, object and owner.

    Table positions advance from one paragraph to the next and are never reused.
    """
    symbol = SYMBOL_PHRASES[input.primary_symbol]
    theme = EMOTIONAL_CORE_THEMES[input.emotional_core]
    context = ITEM_TYPE_CONTEXT[input.item_type]

    imagery = symbol["imagery"]
    descriptors = symbol["descriptors"]
    verbs = theme["verbs"]
    nouns = theme["nouns"]
    qualities = theme["qualities"]
    presence = context["presence"]

    opening = (
        f"{input.item_name} {third_person(presence[0])} the {display(input.primary_symbol)} "
        f"as {with_article(descriptors[0])} emblem of {display(input.emotional_core)}. "
        f"Its {imagery[0]} {third_person(presence[1])} something {descriptors[1]} and {descriptors[2]}, "
        f"{with_article(qualities[0])} presence."
    )

    middle = (
        f"This {context['noun']} {third_person(verbs[0])} {nouns[0]} through its {descriptors[3]} form. "
        f"{capitalize(imagery[1])} and {imagery[2]} meet in {qualities[1]} {nouns[1]}, "
        f"{with_article(qualities[2])} {nouns[2]} that {third_person(verbs[1])} without demand."
    )

    closing = (
        f"To {context['wearing'][0]} this {context['noun']} is to {verbs[2]} {nouns[3]}. "
        f"It {third_person(presence[2])} what is {qualities[3]} and {qualities[4]}, "
        f"{with_article(descriptors[4])} {nouns[4]} that {third_person(verbs[3])} its {qualities[5]} nature."
    )

    return "\n\n".join([opening, middle, closing])


def generate_ritual_intention_prompt(input: ProductInput) -> str:
    theme = EMOTIONAL_CORE_THEMES[input.emotional_core]
    context = ITEM_TYPE_CONTEXT[input.item_type]

    return (
        f"What {theme['nouns'][0]} will you {theme['verbs'][0]} "
        f"when you {context['wearing'][0]} this {context['noun']}? "
        f"What {theme['nouns'][1]} will it {theme['verbs'][1]} for you?"
    )


def generate_care_use_note(input: ProductInput) -> str:
    theme = EMOTIONAL_CORE_THEMES[input.emotional_core]
    context = ITEM_TYPE_CONTEXT[input.item_type]
    verbs = theme["verbs"]
    qualities = theme["qualities"]

    return (
        f"{capitalize(verbs[4])} this {context['noun']} with {qualities[0]} {theme['nouns'][5]}. "
        f"It asks for {qualities[1]} attention and {qualities[2]} care. "
        f"Store it away from water and harsh light. "
        f"{capitalize(verbs[0])} it as it {third_person(verbs[0])} you."
    )


def generate_alt_text(input: ProductInput) -> str:
    """Accessibility text: a plain descriptive clause, no marketing language."""
    symbol = SYMBOL_PHRASES[input.primary_symbol]
    context = ITEM_TYPE_CONTEXT[input.item_type]
    descriptors = symbol["descriptors"]

    return capitalize(
        f"{context['noun']} featuring {with_article(display(input.primary_symbol))} symbol, "
        f"{descriptors[0]} and {descriptors[1]}, with {symbol['imagery'][0]} detail"
    )


def generate_one_line_drop_tagline(input: ProductInput) -> str:
    if not input.drop_name:
        return ""

    theme = EMOTIONAL_CORE_THEMES[input.emotional_core]
    symbol = SYMBOL_PHRASES[input.primary_symbol]

    return (
        f"{input.drop_name}: {theme['qualities'][0]}, {display(input.emotional_core)}, "
        f"{symbol['descriptors'][0]} {display(input.primary_symbol)}."
    )


def generate_narrative(input: ProductInput) -> NarrativeBundle:
    """Expand a validated ProductInput into a NarrativeBundle.

    Pure and deterministic: the same input always yields the same bundle.
    """
    return NarrativeBundle(
        short_description=generate_short_description(input),
        long_ritual_description=generate_long_ritual_description(input),
        ritual_intention_prompt=generate_ritual_intention_prompt(input),
        care_use_note=generate_care_use_note(input),
        alt_text=generate_alt_text(input),
        one_line_drop_tagline=generate_one_line_drop_tagline(input),
    )
