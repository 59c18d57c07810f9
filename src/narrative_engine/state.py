# ProductInput, NarrativeBundle and validation result definitions
# Data structures shared by every stage of the narrative pipeline

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

# ===== Closed value sets =====
# Tuple order is the order reported back in validation errors.

ItemType = Literal["jewelry", "apparel", "home_object", "altar_piece", "wearable_symbol"]
PrimarySymbol = Literal["moon", "rose", "heart", "blade", "bone", "mirror", "candle"]
EmotionalCore = Literal[
    "devotion", "grief", "protection", "longing", "transformation", "memory", "power"
]
EnergyTone = Literal["soft_whispered", "balanced_reverent", "dark_commanding"]
LimitedType = Literal["yes", "no", "numbered"]
IntendedUse = Literal["worn_daily", "worn_intentionally", "displayed", "gifted"]

ITEM_TYPES: tuple[str, ...] = ("jewelry", "apparel", "home_object", "altar_piece", "wearable_symbol")
PRIMARY_SYMBOLS: tuple[str, ...] = ("moon", "rose", "heart", "blade", "bone", "mirror", "candle")
EMOTIONAL_CORES: tuple[str, ...] = (
    "devotion", "grief", "protection", "longing", "transformation", "memory", "power",
)
ENERGY_TONES: tuple[str, ...] = ("soft_whispered", "balanced_reverent", "dark_commanding")
LIMITED_TYPES: tuple[str, ...] = ("yes", "no", "numbered")
INTENDED_USES: tuple[str, ...] = ("worn_daily", "worn_intentionally", "displayed", "gifted")

ViolationType = Literal[
    "emoji",
    "hashtag",
    "slang",
    "internet_language",
    "trend_label",
    "hype_phrase",
    "exclamation",
    "seasonal_mention",
    "avoid_list_violation",
]

VIOLATION_TYPES: tuple[str, ...] = (
    "emoji",
    "hashtag",
    "slang",
    "internet_language",
    "trend_label",
    "hype_phrase",
    "exclamation",
    "seasonal_mention",
    "avoid_list_violation",
)

# Bundle field order, also the order sections are scanned in
SECTION_KEYS: tuple[str, ...] = (
    "short_description",
    "long_ritual_description",
    "ritual_intention_prompt",
    "care_use_note",
    "alt_text",
    "one_line_drop_tagline",
)


@dataclass(frozen=True)
class ProductInput:
    """A validated generation request"""

    item_name: str
    item_type: ItemType
    primary_symbol: PrimarySymbol
    emotional_core: EmotionalCore
    energy_tone: EnergyTone

    drop_name: Optional[str] = None
    limited: Optional[LimitedType] = None
    intended_use: Optional[IntendedUse] = None
    avoid_list: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        """Request-shaped dict; absent optional fields are left out."""
        data: dict[str, Any] = {
            "item_name": self.item_name,
            "item_type": self.item_type,
            "primary_symbol": self.primary_symbol,
            "emotional_core": self.emotional_core,
            "energy_tone": self.energy_tone,
        }
        if self.drop_name is not None:
            data["drop_name"] = self.drop_name
        if self.limited is not None:
            data["limited"] = self.limited
        if self.intended_use is not None:
            data["intended_use"] = self.intended_use
        if self.avoid_list is not None:
            data["avoid_list"] = list(self.avoid_list)
        return data


@dataclass(frozen=True)
class NarrativeBundle:
    """The six pieces of copy produced for one product"""

    short_description: str
    long_ritual_description: str
    ritual_intention_prompt: str
    care_use_note: str
    alt_text: str
    one_line_drop_tagline: str

    def sections(self) -> list[tuple[str, str]]:
        """(section, text) pairs in bundle field order."""
        return [(key, getattr(self, key)) for key in SECTION_KEYS]

    def to_dict(self) -> dict[str, str]:
        return dict(self.sections())

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "NarrativeBundle":
        return cls(**{key: data[key] for key in SECTION_KEYS})


@dataclass(frozen=True)
class ValidationError:
    """One structural problem found in a raw request"""

    field: str
    message: str
    expected: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.expected is not None:
            data["expected"] = list(self.expected)
        return data


@dataclass
class ValidationResult:
    """Input validation result: either normalized input or a list of errors"""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    normalized: Optional[ProductInput] = None


@dataclass(frozen=True)
class StyleViolation:
    """A single style charter finding inside one bundle section"""

    section: str
    violation_type: ViolationType
    matched_pattern: str
    position: int  # character offset within the section text

    def to_dict(self) -> dict[str, Any]:
        return {
            "section": self.section,
            "violation_type": self.violation_type,
            "matched_pattern": self.matched_pattern,
            "position": self.position,
        }


@dataclass
class StyleValidationResult:
    """Style validation result"""

    valid: bool
    violations: list[StyleViolation] = field(default_factory=list)


@dataclass(frozen=True)
class ToneModifiers:
    """How an energy tone shapes the copy"""

    intensity: Literal["gentle", "moderate", "strong"]
    sentence_length: Literal["short", "medium", "varied"]
    mysticism_level: Literal["grounded", "balanced", "elevated"]


@dataclass(frozen=True)
class GenerationContext:
    """Input plus the tone modifiers derived from its energy tone"""

    input: ProductInput
    tone_modifiers: ToneModifiers
