"""Tests for stroke line cap/join enums and their parsing helpers."""

import pytest

from msvg.core.styles import (
    StrokeLineCap, StrokeLineJoin,
    coerce_line_cap, coerce_line_join, parse_line_cap, parse_line_join,
)
from msvg.utils.errors import MsvgError, MsvgValueError


class TestText:
    def test_line_cap(self):
        assert [str(c) for c in StrokeLineCap] == ["butt", "round", "square"]

    def test_line_join(self):
        assert [str(j) for j in StrokeLineJoin] == ["arcs", "bevel", "miter", "miter-clip", "round"]


class TestCoerce:
    def test_case_and_spaces(self):
        assert coerce_line_cap("  ROUND ") is StrokeLineCap.ROUND
        assert coerce_line_join("Miter-Clip") is StrokeLineJoin.MITER_CLIP

    def test_underscore_alias(self):
        assert coerce_line_join("miter_clip") is StrokeLineJoin.MITER_CLIP

    def test_member_passthrough(self):
        assert coerce_line_cap(StrokeLineCap.SQUARE) is StrokeLineCap.SQUARE

    def test_unknown_returns_default(self):
        assert coerce_line_cap("blunt") is None
        assert coerce_line_join(None, StrokeLineJoin.BEVEL) is StrokeLineJoin.BEVEL


class TestParse:
    def test_valid(self):
        assert parse_line_cap("butt") is StrokeLineCap.BUTT
        assert parse_line_join("arcs") is StrokeLineJoin.ARCS

    def test_invalid_raises(self):
        with pytest.raises(MsvgValueError, match="stroke-linecap"):
            parse_line_cap("blunt")
        with pytest.raises(MsvgValueError, match="stroke-linejoin"):
            parse_line_join("")

    def test_error_hierarchy(self):
        with pytest.raises(MsvgError):
            parse_line_cap("x")
        with pytest.raises(ValueError):
            parse_line_join("x")
