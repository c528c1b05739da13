"""Unit tests for keyword rules."""

import json

import pytest

from receipt_tips.core.categorization import (DEFAULT_SALE_KEYWORDS, DEFAULT_TIP_KEYWORDS,
                                              ExtractorConfig, classify_line,
                                              config_from_rules, load_rules)


class TestClassifyLine:
    """Test cases for line classification."""

    @pytest.mark.parametrize("line, expected", [
        ("Credit Card $12.34", "Sale"),
        ("CHARGE 45", "Sale"),
        ("Tip on Card: $3.00", "Tip"),
        ("tip", "Tip"),
        ("Burger 12.00", None),
        ("", None),
    ])
    def test_default_keywords(self, line, expected):
        """Test the default credit/card/charge/tip keywords."""
        assert classify_line(line) == expected

    def test_keywords_are_lowercased(self):
        """Test that configured keywords match case-insensitively."""
        config = ExtractorConfig(sale_keywords=("VISA",), tip_keywords=("Gratuity",))

        assert config.sale_keywords == ("visa",)
        assert classify_line("visa 10", config) == "Sale"
        assert classify_line("GRATUITY 2", config) == "Tip"


class TestRules:
    """Test cases for loading rules files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test that a missing rules file falls back to defaults."""
        rules = load_rules(tmp_path / "missing.json")
        config = config_from_rules(rules)

        assert rules == {}
        assert config.sale_keywords == DEFAULT_SALE_KEYWORDS
        assert config.tip_keywords == DEFAULT_TIP_KEYWORDS
        assert config.report_unpaired is False

    def test_rules_file(self, tmp_path):
        """Test keywords and flags read from JSON."""
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({
            "sale_keywords": ["visa", "amex"],
            "tip_keywords": ["gratuity"],
            "report_unpaired": True,
        }), encoding="utf-8")

        config = config_from_rules(load_rules(path))

        assert config.sale_keywords == ("visa", "amex")
        assert config.tip_keywords == ("gratuity",)
        assert config.report_unpaired is True

    def test_single_keyword_string(self):
        """Test that a bare string is one keyword, not its letters."""
        config = config_from_rules({"sale_keywords": "visa", "tip_keywords": "gratuity"})

        assert config.sale_keywords == ("visa",)
        assert config.tip_keywords == ("gratuity",)
        assert classify_line("Vegetables 4.00", config) is None

    @pytest.mark.parametrize("value, expected", [
        ("false", False),
        ("False", False),
        ("no", False),
        ("true", True),
        ("yes", True),
        (0, False),
        (1, True),
    ])
    def test_report_unpaired_string_values(self, value, expected):
        """Test that textual flags are read by meaning."""
        assert config_from_rules({"report_unpaired": value}).report_unpaired is expected

    def test_flag_overrides_rules(self):
        """Test that an explicit report_unpaired wins over the file."""
        config = config_from_rules({"report_unpaired": True}, report_unpaired=False)

        assert config.report_unpaired is False
