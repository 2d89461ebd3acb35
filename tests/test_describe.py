"""Tests for describe parsing and ltrimv."""

import pytest

from versiongen.domain import DescribeResult, ltrimv


class TestDescribeResult:

    def test_parse_long_form(self):
        result = DescribeResult.parse("1.3.1-20-gc5f7a99", head_commit="ignored")
        assert result.tag_latest == "1.3.1"
        assert result.distance == 20
        assert result.commit == "c5f7a99"
        assert result.raw == "1.3.1-20-gc5f7a99"

    def test_parse_tag_with_dashes(self):
        result = DescribeResult.parse("release-2024-01-3-gabc1234", head_commit="x")
        assert result.tag_latest == "release-2024-01"
        assert result.distance == 3
        assert result.commit == "abc1234"

    def test_parse_exact_tag(self):
        result = DescribeResult.parse("v1.0.0\n", head_commit="deadbee")
        assert result.tag_latest == "v1.0.0"
        assert result.distance == 0
        assert result.commit == "deadbee"
        assert result.raw == "v1.0.0"

    def test_exact_flag_keeps_long_looking_tag(self):
        result = DescribeResult.parse("odd-1-gabc", head_commit="1234567", exact=True)
        assert result.tag_latest == "odd-1-gabc"
        assert result.distance == 0
        assert result.commit == "1234567"

    def test_untagged(self):
        result = DescribeResult.untagged("1234567")
        assert result.tag_latest is None
        assert result.distance == 0
        assert result.commit == "1234567"
        assert result.raw is None


class TestLtrimv:

    @pytest.mark.parametrize("value,expected", [
        ("v1.2.0", "1.2.0"),
        ("1.2.0", "1.2.0"),
        ("v10", "10"),
        ("version-1", "version-1"),
        ("V1.0", "V1.0"),
        ("vv1.0", "vv1.0"),
        ("v", "v"),
        ("", ""),
    ])
    def test_ltrimv(self, value, expected):
        assert ltrimv(value) == expected

    def test_none(self):
        assert ltrimv(None) is None

    @pytest.mark.parametrize("value", ["v1.2.0", "1.2.0", "vv1", "v", "v0v1"])
    def test_idempotent(self, value):
        assert ltrimv(ltrimv(value)) == ltrimv(value)
