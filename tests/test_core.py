"""Unit tests for core business logic (pure functions).

These tests demonstrate the simplicity of testing pure functions
without any mocks or complex setup. Each test is fast and deterministic.
"""

import pytest

from version_tag_parser.commit_extraction import extract_commit
from version_tag_parser.config import TWO_DIGIT_YEAR_MIN, OUTPUT_NAMES
from version_tag_parser.models import ParseResult, VersionInfo, VersionType
from version_tag_parser.output_generation import (
    build_outputs,
    build_empty_outputs,
    format_summary,
)
from version_tag_parser.tag_classification import (
    is_plausible_year,
    is_plausible_month,
    is_plausible_day,
    is_calendar_date,
    is_calendar_ambiguous,
    is_zero_padded_month,
)


class TestYearPlausibility:
    """Test the year plausibility rules."""

    def test_four_digit_years(self):
        """Test that four-digit years in the 2000s are plausible."""
        assert is_plausible_year("2000")
        assert is_plausible_year("2024")
        assert is_plausible_year("2099")
        assert not is_plausible_year("1999")
        assert not is_plausible_year("2100")

    def test_two_digit_years(self):
        """Test the two-digit year threshold."""
        assert is_plausible_year(str(TWO_DIGIT_YEAR_MIN))
        assert is_plausible_year("24")
        assert is_plausible_year("99")
        assert not is_plausible_year(str(TWO_DIGIT_YEAR_MIN - 1))
        assert not is_plausible_year("01")

    def test_other_lengths(self):
        """Test that other lengths are never years."""
        assert not is_plausible_year("1")
        assert not is_plausible_year("202")
        assert not is_plausible_year("20240")
        assert not is_plausible_year("")
        assert not is_plausible_year("20a4")


class TestMonthAndDay:
    """Test month and day ranges."""

    @pytest.mark.parametrize("value", ["1", "01", "9", "12"])
    def test_valid_months(self, value):
        assert is_plausible_month(value)

    @pytest.mark.parametrize("value", ["0", "00", "13", "001", ""])
    def test_invalid_months(self, value):
        assert not is_plausible_month(value)

    def test_days(self):
        assert is_plausible_day("1")
        assert is_plausible_day("31")
        assert not is_plausible_day("0")
        assert not is_plausible_day("32")


class TestCalendarAmbiguity:
    """Test the policy deciding when semver defers to calver."""

    def test_calendar_dates(self):
        assert is_calendar_date("2024", "01", "15")
        assert is_calendar_date("24", "01")
        assert not is_calendar_date("2024", "13")
        assert not is_calendar_date("1", "2", "3")

    def test_two_part_defers_on_year_alone(self):
        """Two-part versions defer whenever the first part reads as a year."""
        assert is_calendar_ambiguous("24", "01")
        assert is_calendar_ambiguous("2024", "01")
        assert is_calendar_ambiguous("2024", "13")
        assert not is_calendar_ambiguous("1", "2")
        assert not is_calendar_ambiguous("3", "23")

    def test_three_part_defers_on_full_date(self):
        """Three-part versions defer only when all parts form a date."""
        assert is_calendar_ambiguous("2024", "01", "15")
        assert is_calendar_ambiguous("24", "01", "15")
        assert not is_calendar_ambiguous("24", "0", "7")
        assert not is_calendar_ambiguous("1", "2", "3")

    def test_three_part_two_digit_year_needs_padded_month(self):
        """Ordinary releases with a year-like major stay semver."""
        assert is_calendar_ambiguous("2024", "1", "5")
        assert not is_calendar_ambiguous("20", "10", "7")
        assert not is_calendar_ambiguous("20", "11", "1")
        assert not is_calendar_ambiguous("22", "3", "1")

    def test_zero_padded_month(self):
        assert is_zero_padded_month("01")
        assert is_zero_padded_month("09")
        assert not is_zero_padded_month("1")
        assert not is_zero_padded_month("10")
        assert not is_zero_padded_month("00")


class TestCommitExtraction:
    """Test commit SHA extraction from tags."""

    def test_extracts_sha_segment(self):
        assert extract_commit("3.23-d34fa4d2-ls4") == "d34fa4d2"
        assert extract_commit("dev-abc1234") == "abc1234"
        assert extract_commit("v1.2.3+ABCDEF0123") == "abcdef0123"

    def test_full_length_sha(self):
        sha = "0123456789abcdef0123456789abcdef01234567"
        assert extract_commit(f"build-{sha}") == sha

    def test_ignores_non_sha_segments(self):
        """Test that dates, short hex runs and words are not SHAs."""
        assert extract_commit("v1.2.3") == ""
        assert extract_commit("20240115-1430") == ""
        assert extract_commit("release-abc12") == ""
        assert extract_commit("latest") == ""
        assert extract_commit("") == ""


class TestOutputGeneration:
    """Test flattening of parse results into action outputs."""

    def test_semver_outputs(self):
        result = ParseResult(
            is_valid=True,
            version="v1.2.3-alpha.1",
            info=VersionInfo(major="1", minor="2", patch="3", prerelease="alpha.1"),
            format=VersionType.SEMVER,
        )
        outputs = build_outputs(result, commit="abc1234")

        assert list(outputs) == list(OUTPUT_NAMES)
        assert outputs["isValid"] == "true"
        assert outputs["version"] == "v1.2.3-alpha.1"
        assert outputs["format"] == "semver"
        assert outputs["commit"] == "abc1234"
        assert outputs["hasPrerelease"] == "true"
        assert outputs["hasBuild"] == "false"
        assert outputs["year"] == ""

    def test_calver_outputs_fill_date_fields(self):
        result = ParseResult(
            is_valid=True,
            version="2024.01.15",
            info=VersionInfo(major="2024", minor="01", patch="15"),
            format=VersionType.CALVER,
        )
        outputs = build_outputs(result)

        assert outputs["year"] == "2024"
        assert outputs["month"] == "01"
        assert outputs["day"] == "15"
        assert outputs["hasPrerelease"] == "false"

    def test_docker_prerelease_does_not_set_flag(self):
        """Test that has* flags only describe semver results."""
        result = ParseResult(
            is_valid=True,
            version="1.2.0-alpine",
            info=VersionInfo(major="1", minor="2", prerelease="alpine"),
            format=VersionType.DOCKER,
        )
        outputs = build_outputs(result)

        assert outputs["prerelease"] == "alpine"
        assert outputs["hasPrerelease"] == "false"

    def test_failed_result_outputs(self):
        result = ParseResult(is_valid=False, version="v1")
        outputs = build_outputs(result)

        assert outputs["isValid"] == "false"
        assert outputs["version"] == "v1"
        assert outputs["format"] == ""

    def test_empty_outputs(self):
        outputs = build_empty_outputs()

        assert list(outputs) == list(OUTPUT_NAMES)
        assert outputs["isValid"] == "false"
        assert outputs["hasPrerelease"] == "false"
        assert outputs["hasBuild"] == "false"
        assert outputs["version"] == ""

    def test_summary(self):
        valid = ParseResult(
            is_valid=True,
            version="v1.2",
            info=VersionInfo(major="1", minor="2"),
            format=VersionType.SEMVER,
        )
        assert format_summary(valid) == [
            "Version output: v1.2",
            "   Format: semver",
            "   Components: 1.2.0",
        ]
        assert format_summary(ParseResult(is_valid=False, version="x")) == [
            "Version output (original tag): x"
        ]
