"""Tests for FormatService."""

from __future__ import annotations

import re

import pytest

from timemask.config.models import MaskConfig
from timemask.config.settings import TmSettings
from timemask.domain.duration import DurationPolicy
from timemask.services.formatting import FormatService, parse_duration_ms


@pytest.fixture
def svc() -> FormatService:
    return FormatService()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> TmSettings:
    monkeypatch.delenv("TIMEMASK_MASK__REGEX", raising=False)
    return TmSettings(
        duration=DurationPolicy(pad_seconds=True, show_milliseconds="always"),
        mask=MaskConfig(regex=True),
    )


class TestTokenize:
    def test_segments_payload(self, svc: FormatService) -> None:
        result = svc.tokenize("[Year]: YYYY")
        assert result.ok
        assert result.op == "tokenize"
        assert result.data["format"] == "[Year]: YYYY"
        assert result.data["segments"] == [
            {"kind": "literal", "text": "Year", "escaped": True},
            {"kind": "literal", "text": ": ", "escaped": False},
            {"kind": "token", "symbol": "YYYY", "type": "Year", "unit": "Y"},
        ]
        assert result.warnings == []
        assert result.meta == {"tokens": 1, "literals": 2}

    def test_empty_format(self, svc: FormatService) -> None:
        result = svc.tokenize("")
        assert result.ok
        assert result.data["segments"] == []

    def test_unclosed_bracket_warns(self, svc: FormatService) -> None:
        result = svc.tokenize("[YYYY")
        assert result.ok
        assert any("Unclosed" in w for w in result.warnings)


class TestMask:
    def test_mask_payload(self, svc: FormatService) -> None:
        result = svc.mask("MM/YY")
        assert result.ok
        assert result.data["mask"] == [
            {"placeholder": "digit"},
            {"placeholder": "digit"},
            {"literal": "/"},
            {"placeholder": "digit"},
            {"placeholder": "digit"},
        ]
        assert "pattern" not in result.data

    def test_regex_requested(self, svc: FormatService) -> None:
        result = svc.mask("HH:mm", regex=True)
        assert re.fullmatch(result.data["pattern"], "23:59")

    def test_regex_from_settings(self, settings: TmSettings) -> None:
        result = FormatService(settings).mask("HH:mm")
        assert "pattern" in result.data

    def test_explicit_flag_beats_settings(self, settings: TmSettings) -> None:
        result = FormatService(settings).mask("HH:mm", regex=False)
        assert "pattern" not in result.data

    def test_empty_format_is_error(self, svc: FormatService) -> None:
        result = svc.mask("")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "EMPTY_FORMAT"

    def test_variable_width_warning(self, svc: FormatService) -> None:
        result = svc.mask("dddd, MMMM D")
        assert result.ok
        assert len(result.warnings) == 2
        assert "'dddd'" in result.warnings[0]

    def test_timestamp_mask_has_no_warning(self, svc: FormatService) -> None:
        result = svc.mask("x", regex=True)
        assert result.warnings == []
        assert result.data["mask"] == [{"placeholder": "digits"}]
        assert result.data["pattern"] == r"^\d+$"

    def test_meta_counts(self, svc: FormatService) -> None:
        result = svc.mask("[at] HH:mm")
        assert result.meta == {"elements": 7, "placeholders": 4}



class TestDuration:
    def test_default_policy(self, svc: FormatService) -> None:
        result = svc.duration(90_061_000)
        assert result.ok
        assert result.data == {"duration_ms": 90_061_000, "text": "1:01:01:01"}

    def test_string_input(self, svc: FormatService) -> None:
        assert svc.duration("-90061000").data["text"] == "-1:01:01:01"

    def test_overrides(self, svc: FormatService) -> None:
        result = svc.duration(500, {"show_milliseconds": "always"})
        assert result.data["text"] == "0.500"

    def test_settings_policy(self, settings: TmSettings) -> None:
        result = FormatService(settings).duration(5_000)
        assert result.data["text"] == "05.000"

    def test_overrides_merge_over_settings(self, settings: TmSettings) -> None:
        result = FormatService(settings).duration(5_000, {"show_milliseconds": "never"})
        assert result.data["text"] == "05"

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", None, ""])
    def test_invalid_duration(self, svc: FormatService, raw: object) -> None:
        result = svc.duration(raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DURATION"

    def test_invalid_policy(self, svc: FormatService) -> None:
        result = svc.duration(1_000, {"show_days": "sometimes"})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POLICY"
        assert result.error.detail["errors"]


class TestParseDurationMs:
    @pytest.mark.parametrize(
        "raw,expected",
        [("1000", 1000), (" 42 ", 42), ("1_000", 1000), ("1.5", 1.5), ("-7", -7), (5, 5)],
    )
    def test_parses(self, raw: object, expected: float) -> None:
        assert parse_duration_ms(raw) == expected

    def test_unparseable_passes_through(self) -> None:
        assert parse_duration_ms("ten") == "ten"
