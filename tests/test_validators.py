# Tests for the input validator
# Structural checks: missing fields, enum closure, optional field types

import pytest

from narrative_engine.state import ProductInput
from narrative_engine.validators import validate_input

VALID_INPUT = {
    "item_name": "Test Ring",
    "item_type": "jewelry",
    "primary_symbol": "moon",
    "emotional_core": "devotion",
    "energy_tone": "balanced_reverent",
}


def _error_dicts(result) -> list[dict]:
    return [e.to_dict() for e in result.errors]


class TestRequiredFields:
    """Required fields must be present and well-formed"""

    def test_accepts_valid_input(self):
        """Valid input passes and comes back unchanged as ProductInput"""
        result = validate_input(VALID_INPUT)
        assert result.valid is True
        assert result.errors == []
        assert isinstance(result.normalized, ProductInput)
        assert result.normalized.to_dict() == VALID_INPUT

    @pytest.mark.parametrize(
        "field", ["item_name", "item_type", "primary_symbol", "emotional_core", "energy_tone"]
    )
    def test_missing_field(self, field):
        """A missing required field is reported as missing"""
        data = {k: v for k, v in VALID_INPUT.items() if k != field}
        result = validate_input(data)
        assert result.valid is False
        assert {"field": field, "message": "Required field missing"} in _error_dicts(result)
        assert result.normalized is None

    def test_null_counts_as_missing(self):
        """JSON null is treated the same as an absent key"""
        result = validate_input({**VALID_INPUT, "item_type": None})
        assert _error_dicts(result) == [{"field": "item_type", "message": "Required field missing"}]

    def test_missing_three_fields_reports_three_errors(self):
        """Errors accumulate: k missing fields give k errors"""
        data = {"item_name": "Test Ring", "item_type": "jewelry"}
        result = validate_input(data)
        assert result.valid is False
        missing = [e for e in result.errors if e.message == "Required field missing"]
        assert [e.field for e in missing] == ["primary_symbol", "emotional_core", "energy_tone"]
        assert len(result.errors) == 3

    def test_empty_object_reports_every_required_field(self):
        """An empty object reports all five required fields in order"""
        result = validate_input({})
        assert [e.field for e in result.errors] == [
            "item_name",
            "item_type",
            "primary_symbol",
            "emotional_core",
            "energy_tone",
        ]

    def test_blank_item_name(self):
        """Whitespace-only item_name is present but invalid"""
        result = validate_input({**VALID_INPUT, "item_name": "   "})
        assert _error_dicts(result) == [{"field": "item_name", "message": "Must be a non-empty string"}]

    def test_empty_item_name(self):
        """An empty item_name is present but invalid"""
        result = validate_input({**VALID_INPUT, "item_name": ""})
        assert _error_dicts(result) == [{"field": "item_name", "message": "Must be a non-empty string"}]

    def test_non_string_item_name(self):
        """A non-string item_name is rejected"""
        result = validate_input({**VALID_INPUT, "item_name": 123})
        assert _error_dicts(result) == [{"field": "item_name", "message": "Must be a non-empty string"}]

    def test_item_name_is_not_trimmed(self):
        """Validation checks the trimmed value but returns the original"""
        result = validate_input({**VALID_INPUT, "item_name": "  Test Ring  "})
        assert result.valid is True
        assert result.normalized.item_name == "  Test Ring  "


class TestEnumValidation:
    """Values outside a closed set list the exact expected set"""

    @pytest.mark.parametrize(
        "field,expected",
        [
            ("item_type", ["jewelry", "apparel", "home_object", "altar_piece", "wearable_symbol"]),
            ("primary_symbol", ["moon", "rose", "heart", "blade", "bone", "mirror", "candle"]),
            (
                "emotional_core",
                ["devotion", "grief", "protection", "longing", "transformation", "memory", "power"],
            ),
            ("energy_tone", ["soft_whispered", "balanced_reverent", "dark_commanding"]),
            ("limited", ["yes", "no", "numbered"]),
            ("intended_use", ["worn_daily", "worn_intentionally", "displayed", "gifted"]),
        ],
    )
    def test_invalid_enum_value(self, field, expected):
        """Each enum field reports its ordered closed set"""
        result = validate_input({**VALID_INPUT, field: "invalid"})
        assert result.valid is False
        assert {"field": field, "message": "Invalid enum value", "expected": expected} in _error_dicts(result)

    def test_non_string_enum_value(self):
        """A non-string enum value is an invalid enum value"""
        result = validate_input({**VALID_INPUT, "item_type": ["jewelry"]})
        assert result.errors[0].message == "Invalid enum value"

    def test_enum_match_is_case_sensitive(self):
        """Enum values must match exactly"""
        result = validate_input({**VALID_INPUT, "primary_symbol": "Moon"})
        assert result.valid is False
        assert result.errors[0].field == "primary_symbol"


class TestOptionalFields:
    """Optional fields are validated only when present"""

    def test_accepts_all_optional_fields(self):
        """All optional fields together pass and round-trip"""
        data = {
            **VALID_INPUT,
            "drop_name": "Test Drop",
            "limited": "numbered",
            "intended_use": "worn_intentionally",
            "avoid_list": ["word1", "word2"],
        }
        result = validate_input(data)
        assert result.valid is True
        assert result.normalized.avoid_list == ("word1", "word2")
        assert result.normalized.to_dict() == data

    def test_absent_optional_fields_are_none(self):
        """Absent optional fields normalize to None"""
        result = validate_input(VALID_INPUT)
        assert result.normalized.drop_name is None
        assert result.normalized.limited is None
        assert result.normalized.intended_use is None
        assert result.normalized.avoid_list is None

    @pytest.mark.parametrize("value", ["", "   ", 123])
    def test_invalid_drop_name(self, value):
        """drop_name must be a non-empty string when present"""
        result = validate_input({**VALID_INPUT, "drop_name": value})
        assert _error_dicts(result) == [{"field": "drop_name", "message": "Must be a non-empty string"}]

    def test_avoid_list_not_an_array(self):
        """avoid_list must be a list"""
        result = validate_input({**VALID_INPUT, "avoid_list": "not an array"})
        assert _error_dicts(result) == [{"field": "avoid_list", "message": "Must be an array of strings"}]

    def test_avoid_list_with_non_string_items(self):
        """Every avoid_list item must be a string"""
        result = validate_input({**VALID_INPUT, "avoid_list": ["valid", 123, "also valid"]})
        assert _error_dicts(result) == [{"field": "avoid_list", "message": "All items must be strings"}]

    def test_empty_avoid_list_is_valid(self):
        """An empty avoid_list is allowed"""
        result = validate_input({**VALID_INPUT, "avoid_list": []})
        assert result.valid is True
        assert result.normalized.avoid_list == ()

    def test_unknown_keys_are_dropped(self):
        """Unknown keys are ignored and not carried forward"""
        result = validate_input({**VALID_INPUT, "price": 120})
        assert result.valid is True
        assert "price" not in result.normalized.to_dict()

    def test_errors_across_required_and_optional_fields(self):
        """One pass collects errors from every field"""
        data = {"item_type": "shoe", "limited": "sometimes", "avoid_list": 5}
        result = validate_input(data)
        assert [e.field for e in result.errors] == [
            "item_name",
            "item_type",
            "primary_symbol",
            "emotional_core",
            "energy_tone",
            "limited",
            "avoid_list",
        ]


class TestNonObjectInput:
    """Anything but a JSON object gets a single generic error"""

    @pytest.mark.parametrize("raw", ["not an object", None, 42, ["item_name"], True])
    def test_rejects_non_object(self, raw):
        """Non-object input gets one generic error"""
        result = validate_input(raw)
        assert result.valid is False
        assert _error_dicts(result) == [{"field": "input", "message": "Input must be an object"}]
