# Input validator
# Structural validation of raw generation requests (never raises)

from collections.abc import Mapping
from typing import Any

from narrative_engine.state import (
    EMOTIONAL_CORES,
    ENERGY_TONES,
    INTENDED_USES,
    ITEM_TYPES,
    LIMITED_TYPES,
    PRIMARY_SYMBOLS,
    ProductInput,
    ValidationError,
    ValidationResult,
)

MISSING = "Required field missing"
INVALID_ENUM = "Invalid enum value"
NON_EMPTY_STRING = "Must be a non-empty string"
NOT_AN_OBJECT = "Input must be an object"
NOT_A_LIST = "Must be an array of strings"
NON_STRING_ITEMS = "All items must be strings"

REQUIRED_ENUM_FIELDS: dict[str, tuple[str, ...]] = {
    "item_type": ITEM_TYPES,
    "primary_symbol": PRIMARY_SYMBOLS,
    "emotional_core": EMOTIONAL_CORES,
    "energy_tone": ENERGY_TONES,
}

OPTIONAL_ENUM_FIELDS: dict[str, tuple[str, ...]] = {
    "limited": LIMITED_TYPES,
    "intended_use": INTENDED_USES,
}


def _is_absent(data: Mapping[str, Any], field: str) -> bool:
    # JSON null counts as absent
    return data.get(field) is None


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _check_enum(field: str, value: Any, allowed: tuple[str, ...]) -> list[ValidationError]:
    if isinstance(value, str) and value in allowed:
        return []
    return [ValidationError(field=field, message=INVALID_ENUM, expected=list(allowed))]


def _check_avoid_list(value: Any) -> list[ValidationError]:
    if not isinstance(value, list):
        return [ValidationError(field="avoid_list", message=NOT_A_LIST)]
    if not all(isinstance(item, str) for item in value):
        return [ValidationError(field="avoid_list", message=NON_STRING_ITEMS)]
    return []


def validate_input(raw: Any) -> ValidationResult:
    """Validate a raw request and re-type it as ProductInput.

    Every applicable error is collected in one pass. Values are checked, not
    rewritten: item_name is trimmed only to decide whether it is blank.

    Args:
        raw: Decoded JSON request body (anything)

    Returns:
        ValidationResult with ``normalized`` set when valid, ``errors`` otherwise
    """
    if not isinstance(raw, Mapping):
        return ValidationResult(
            valid=False,
            errors=[ValidationError(field="input", message=NOT_AN_OBJECT)],
        )

    errors: list[ValidationError] = []

    # Required fields
    if _is_absent(raw, "item_name"):
        errors.append(ValidationError(field="item_name", message=MISSING))
    elif not _is_non_empty_string(raw["item_name"]):
        errors.append(ValidationError(field="item_name", message=NON_EMPTY_STRING))

    for field, allowed in REQUIRED_ENUM_FIELDS.items():
        if _is_absent(raw, field):
            errors.append(ValidationError(field=field, message=MISSING))
        else:
            errors.extend(_check_enum(field, raw[field], allowed))

    # Optional fields: absence is never an error
    if not _is_absent(raw, "drop_name") and not _is_non_empty_string(raw["drop_name"]):
        errors.append(ValidationError(field="drop_name", message=NON_EMPTY_STRING))

    for field, allowed in OPTIONAL_ENUM_FIELDS.items():
        if not _is_absent(raw, field):
            errors.extend(_check_enum(field, raw[field], allowed))

    if not _is_absent(raw, "avoid_list"):
        errors.extend(_check_avoid_list(raw["avoid_list"]))

    if errors:
        return ValidationResult(valid=False, errors=errors)

    avoid_list = raw.get("avoid_list")
    normalized = ProductInput(
        item_name=raw["item_name"],
        item_type=raw["item_type"],
        primary_symbol=raw["primary_symbol"],
        emotional_core=raw["emotional_core"],
        energy_tone=raw["energy_tone"],
        drop_name=raw.get("drop_name"),
        limited=raw.get("limited"),
        intended_use=raw.get("intended_use"),
        avoid_list=tuple(avoid_list) if avoid_list is not None else None,
    )
    return ValidationResult(valid=True, normalized=normalized)
