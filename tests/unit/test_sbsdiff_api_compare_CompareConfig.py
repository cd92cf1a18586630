"""Unit tests for sbsdiff.api.compare.CompareConfig module."""

import pytest
from pydantic import ValidationError

from sbsdiff.api.compare.CompareConfig import CompareConfig
from sbsdiff.api.compare.CompareConfigError import CompareConfigError

pytestmark = pytest.mark.unit


class TestCompareConfig:
    """Test CompareConfig validation."""

    def test_defaults(self):
        cfg = CompareConfig()
        assert cfg.ignore_whitespace is False
        assert cfg.granularity == "character"
        assert cfg.context_lines == 3
        assert cfg.show_line_numbers is True

    def test_negative_context_lines_rejected(self):
        with pytest.raises(ValidationError):
            CompareConfig(context_lines=-1)

    def test_unknown_granularity_rejected(self):
        with pytest.raises(ValidationError):
            CompareConfig(granularity="sentence")

    def test_non_bool_flag_rejected(self):
        with pytest.raises(ValidationError):
            CompareConfig(ignore_whitespace="yes")

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            CompareConfig(ignore_case=True)

    def test_frozen(self):
        cfg = CompareConfig()
        with pytest.raises(ValidationError):
            cfg.context_lines = 5


class TestCompareConfigFromDict:
    """Test CompareConfig.from_config_dict."""

    def test_missing_section_gives_defaults(self):
        assert CompareConfig.from_config_dict({}) == CompareConfig()

    def test_valid_section(self):
        cfg = CompareConfig.from_config_dict(
            {"compare": {"ignore_whitespace": True, "granularity": "word", "context_lines": 0}}
        )
        assert cfg.ignore_whitespace is True
        assert cfg.granularity == "word"
        assert cfg.context_lines == 0

    def test_section_must_be_dict(self):
        with pytest.raises(CompareConfigError) as exc:
            CompareConfig.from_config_dict({"compare": ["word"]})
        assert "compare must be a dict" in str(exc.value)

    def test_collects_every_error(self):
        with pytest.raises(CompareConfigError) as exc:
            CompareConfig.from_config_dict({"compare": {"context_lines": -2, "granularity": "line"}})
        assert len(exc.value.errors) == 2
        assert any("context_lines" in e for e in exc.value.errors)
        assert any("granularity" in e for e in exc.value.errors)

    def test_unknown_key_reported(self):
        with pytest.raises(CompareConfigError) as exc:
            CompareConfig.from_config_dict({"compare": {"colour": "red"}})
        assert "compare.colour" in str(exc.value)


class TestCompareConfigError:
    """Test CompareConfigError formatting."""

    def test_single_string_becomes_list(self):
        err = CompareConfigError("bad value")
        assert err.errors == ["bad value"]
        assert "Compare configuration validation failed" in str(err)
        assert "  - bad value" in str(err)
