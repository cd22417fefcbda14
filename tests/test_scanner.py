"""Tests for the warning pattern scanner."""

import pytest
from QSpanWarn.scanner import scan


# fmt: off
@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("a\t\tb",           [(1, 2), (2, 3)],  id="each_tab_separately"),
        pytest.param("\t\t\t",           [(0, 1), (1, 2), (2, 3)], id="run_of_tabs"),
        pytest.param("foo @:\n",         [(4, 7)],          id="at_colon_includes_newline"),
        pytest.param("foo @:",           [(4, 6)],          id="at_colon_at_end_of_text"),
        pytest.param("foo @: bar\n",     [],                id="at_colon_mid_line"),
        pytest.param("(@pxref{X})\n",    [(9, 12)],         id="brace_paren_at_line_end"),
        pytest.param("(@pxref{X}) \n",   [],                id="brace_paren_then_space"),
        pytest.param("a})b})\n",         [(4, 7)],          id="only_the_last_pair"),
        pytest.param("x@:\ny\t",         [(1, 4), (5, 6)],  id="mixed_lines"),
        pytest.param("@:\n@:\n",         [(0, 3), (3, 6)],  id="consecutive_lines"),
        pytest.param("}\n)\n",           [],                id="pair_split_by_newline"),
        pytest.param("no warnings\n",    [],                id="clean_text"),
        pytest.param("",                 [],                id="empty"),
    ],
)
def test_scan_whole_text(text, expected):
    """Test the matches found when scanning the whole text"""
    assert list(scan(text)) == expected
# fmt: on


class TestScanRange:
    """Test scanning only part of the text."""

    def test_matches_before_start_are_skipped(self):
        """Test that a match before the range start is not reported"""
        assert list(scan("\ta\t", 1, 3)) == [(2, 3)]

    def test_matches_at_end_are_skipped(self):
        """Test that a match starting at the range end is not reported"""
        assert list(scan("\ta\t", 0, 2)) == [(0, 1)]

    def test_line_end_match_may_cross_range_end(self):
        """Test that a match beginning in range keeps its newline past the bound"""
        assert list(scan("ab@:\n", 0, 3)) == [(2, 5)]

    def test_anchor_uses_real_line_end(self):
        """Test that stopping the range right after the pair doesn't fake a line end"""
        assert list(scan("ab@:cd\n", 0, 4)) == []

    def test_empty_range(self):
        """Test that an empty range finds nothing"""
        assert list(scan("\t\t", 1, 1)) == []

    def test_range_is_clamped(self):
        """Test that an out of bounds range is clamped to the text"""
        assert list(scan("\t", -5, 100)) == [(0, 1)]

    def test_restartable(self):
        """Test that scanning twice gives the same matches"""
        text = "a\tb\tc"
        assert list(scan(text)) == list(scan(text))

    def test_lazy(self):
        """Test that matches can be pulled one at a time"""
        gen = scan("\t" * 1000)
        assert next(gen) == (0, 1)
        assert next(gen) == (1, 2)
