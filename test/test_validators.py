"""
Tests for argument normalization.
"""

import pytest

from silver_diamond.enums import Language, Sentiment
from silver_diamond.exceptions import InvalidArgument
from silver_diamond.utils import label_value, normalize_labels, normalize_text, optional_label


class TestNormalizeText:
    """Test text trimming and rejection rules"""

    def test_trims_whitespace(self):
        assert normalize_text("  Hola mundo \n") == "Hola mundo"

    def test_keeps_inner_whitespace(self):
        assert normalize_text("Hola   mundo") == "Hola   mundo"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_rejects_blank(self, text):
        with pytest.raises(InvalidArgument, match="must not be empty"):
            normalize_text(text)

    @pytest.mark.parametrize("text", [None, 42, ["Hola"], b"Hola"])
    def test_rejects_non_strings(self, text):
        with pytest.raises(InvalidArgument, match="must be a string"):
            normalize_text(text)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_text("")


class TestNormalizeLabels:
    """Test label coercion used by the membership helpers"""

    def test_single_string(self):
        assert normalize_labels(" ES ") == ["es"]

    def test_list_of_strings(self):
        assert normalize_labels(["ES", "en"]) == ["es", "en"]

    def test_enum_members(self):
        assert normalize_labels([Language.SPANISH, Sentiment.VERY_POSITIVE]) == [
            "es",
            "very positive",
        ]

    def test_single_enum_member(self):
        assert normalize_labels(Sentiment.NEUTRAL) == ["neutral"]

    @pytest.mark.parametrize("labels", [None, 3, {"es": True}])
    def test_rejects_other_types(self, labels):
        with pytest.raises(InvalidArgument):
            normalize_labels(labels, "ISO Codes")

    def test_rejects_non_string_items(self):
        with pytest.raises(InvalidArgument):
            normalize_labels(["es", 3])


class TestLabelValue:
    """Test enum to wire value conversion"""

    def test_enum(self):
        assert label_value(Language.GERMAN) == "de"

    def test_plain_string(self):
        assert label_value("de") == "de"

    def test_optional_label_omits_empty(self):
        assert optional_label(None) is None
        assert optional_label("") is None
        assert optional_label(Language.FRENCH) == "fr"
