# Tests for the lexical tables and their load-time completeness check

import pytest

from narrative_engine import templates
from narrative_engine.state import EMOTIONAL_CORES, ITEM_TYPES, PRIMARY_SYMBOLS
from narrative_engine.templates import (
    EMOTIONAL_CORE_THEMES,
    ITEM_TYPE_CONTEXT,
    MIN_ENTRY_LENGTHS,
    SYMBOL_PHRASES,
    LexicalTableError,
    check_tables,
)


class TestTableCoverage:
    """Every closed-set value has an entry long enough for the generator"""

    def test_every_symbol_has_an_entry(self):
        """Each primary symbol has imagery and descriptors"""
        assert set(SYMBOL_PHRASES) == set(PRIMARY_SYMBOLS)

    def test_every_emotional_core_has_an_entry(self):
        """Each emotional core has verbs, nouns and qualities"""
        assert set(EMOTIONAL_CORE_THEMES) == set(EMOTIONAL_CORES)

    def test_every_item_type_has_an_entry(self):
        """Each item type has a context entry"""
        assert set(ITEM_TYPE_CONTEXT) == set(ITEM_TYPES)

    @pytest.mark.parametrize("symbol", PRIMARY_SYMBOLS)
    def test_symbol_entry_lengths(self, symbol):
        """Symbol entries reach every position the generator reads"""
        for field, minimum in MIN_ENTRY_LENGTHS["symbol"].items():
            assert len(SYMBOL_PHRASES[symbol][field]) >= minimum

    @pytest.mark.parametrize("core", EMOTIONAL_CORES)
    def test_theme_entry_lengths(self, core):
        """Theme entries reach every position the generator reads"""
        for field, minimum in MIN_ENTRY_LENGTHS["theme"].items():
            assert len(EMOTIONAL_CORE_THEMES[core][field]) >= minimum

    @pytest.mark.parametrize("core", EMOTIONAL_CORES)
    def test_neighbouring_words_do_not_echo(self, core):
        """Words the generator sets side by side never share a stem"""
        theme = EMOTIONAL_CORE_THEMES[core]
        verbs, nouns, qualities = theme["verbs"], theme["nouns"], theme["qualities"]
        neighbours = [
            (qualities[0], nouns[0]),
            (qualities[1], nouns[1]),
            (qualities[2], nouns[2]),
            (qualities[3], nouns[4]),
            (qualities[4], nouns[4]),
            (qualities[0], nouns[5]),
            (verbs[0], nouns[0]),
            (verbs[2], nouns[3]),
            (verbs[3], qualities[5]),
        ]
        for first, second in neighbours:
            assert first[:4] != second[:4], (core, first, second)

    def test_shipped_tables_pass_the_check(self):
        """The tables as shipped pass the import-time check"""
        check_tables()


class TestCompletenessCheck:
    """check_tables fails loudly instead of letting the generator read past an entry"""

    def test_missing_entry_raises(self, monkeypatch):
        """A closed-set value without an entry is reported by name"""
        partial = {k: v for k, v in SYMBOL_PHRASES.items() if k != "candle"}
        monkeypatch.setattr(templates, "SYMBOL_PHRASES", partial)
        with pytest.raises(LexicalTableError, match="no entry for 'candle'"):
            check_tables()

    def test_short_entry_raises(self, monkeypatch):
        """A short entry is reported with its length and minimum"""
        themes = dict(EMOTIONAL_CORE_THEMES)
        themes["grief"] = {**themes["grief"], "qualities": ("heavy", "quiet")}
        monkeypatch.setattr(templates, "EMOTIONAL_CORE_THEMES", themes)
        with pytest.raises(LexicalTableError, match=r"\['grief'\]\['qualities'\] has 2 entries, needs 6"):
            check_tables()

    def test_missing_noun_raises(self, monkeypatch):
        """An item type without a display noun is reported"""
        context = dict(ITEM_TYPE_CONTEXT)
        context["apparel"] = {k: v for k, v in context["apparel"].items() if k != "noun"}
        monkeypatch.setattr(templates, "ITEM_TYPE_CONTEXT", context)
        with pytest.raises(LexicalTableError, match="has no noun"):
            check_tables()


class TestReadOnly:
    def test_tables_cannot_be_reassigned(self):
        """The top-level tables are read-only"""
        with pytest.raises(TypeError):
            SYMBOL_PHRASES["moon"] = {}

    def test_entries_are_tuples(self):
        """Table entries are immutable tuples"""
        assert isinstance(SYMBOL_PHRASES["moon"]["imagery"], tuple)
        assert isinstance(EMOTIONAL_CORE_THEMES["power"]["verbs"], tuple)
