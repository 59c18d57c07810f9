"""Style charter: language the brand voice never uses.

Regex categories are scanned as-is. Phrase categories are matched
case-insensitively on word boundaries by the style validator.
"""

import re

EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001FAFF"  # pictographs, emoticons, transport, supplemental symbols
    "\u2600-\u27BF"  # miscellaneous symbols and dingbats
    "\U0001F1E6-\U0001F1FF"  # regional indicators (flags)
    "]"
)
HASHTAG_PATTERN = re.compile(r"#\w+")
EXCLAMATION_PATTERN = re.compile(r"!")

# violation_type -> compiled pattern
REGEX_CATEGORIES: dict[str, re.Pattern] = {
    "emoji": EMOJI_PATTERN,
    "hashtag": HASHTAG_PATTERN,
    "exclamation": EXCLAMATION_PATTERN,
}

SLANG: tuple[str, ...] = (
    "gonna", "wanna", "gotta", "kinda", "sorta",
    "yeah", "nope", "yep", "nah",
)

INTERNET_LANGUAGE: tuple[str, ...] = (
    "lol", "omg", "tbh", "imo", "fyi", "btw",
    "af", "lowkey", "highkey", "literally",
)

TREND_LABELS: tuple[str, ...] = (
    "witchcore", "spooky", "goth girl", "dark academia",
    "cottagecore", "aesthetic", "vibe", "vibes",
)

HYPE_PHRASES: tuple[str, ...] = (
    "perfect for", "must-have", "statement piece",
    "you'll love", "amazing", "stunning", "gorgeous",
    "obsessed", "iconic", "slay", "serve",
)

SEASONAL_MENTIONS: tuple[str, ...] = (
    "spring", "summer", "fall", "autumn", "winter",
    "halloween", "christmas", "valentine", "holiday",
)

# violation_type -> phrase list
PHRASE_CATEGORIES: dict[str, tuple[str, ...]] = {
    "slang": SLANG,
    "internet_language": INTERNET_LANGUAGE,
    "trend_label": TREND_LABELS,
    "hype_phrase": HYPE_PHRASES,
    "seasonal_mention": SEASONAL_MENTIONS,
}
