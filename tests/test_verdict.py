"""
Tests for the Verdict Engine
Tests the two-clue rule and the early outs for empty ledgers and bad accusations.
"""

import os
import sys
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from detective_quest.ledger import ClueLedger
from detective_quest.suspect_index import SuspectIndex
from detective_quest.verdict import (
    EVIDENCE_THRESHOLD,
    Verdict,
    format_verdict,
    render_verdict,
)


def ledger_with(*clues):
    ledger = ClueLedger()
    for clue in clues:
        ledger.add(clue)
    return ledger


INDEX_PAIRS = [("X", "A"), ("Y", "A"), ("Z", "Butler")]


class TestRenderVerdict:
    """Test judging accusations."""

    def test_threshold_is_two(self):
        assert EVIDENCE_THRESHOLD == 2

    def test_empty_ledger_is_impossible_without_index(self):
        """An empty ledger never touches the suspect index."""
        index = Mock(spec=SuspectIndex)
        report = render_verdict(ClueLedger(), index, "Butler")
        assert report.verdict == Verdict.IMPOSSIBLE
        assert report.match_count == 0
        index.lookup.assert_not_called()

    def test_short_accusation_is_invalid_without_count(self):
        index = Mock(spec=SuspectIndex)
        report = render_verdict(ledger_with("X"), index, "A\n")
        assert report.verdict == Verdict.INVALID_ACCUSATION
        assert report.accused == "A"
        index.lookup.assert_not_called()

    def test_empty_accusation_is_invalid(self):
        report = render_verdict(ledger_with("X"), SuspectIndex.from_pairs(INDEX_PAIRS), "")
        assert report.verdict == Verdict.INVALID_ACCUSATION

    def test_one_match_is_insufficient(self):
        """Ledger {X}, accuse A -> count 1, insufficient evidence."""
        index = SuspectIndex.from_pairs([("X", "Aa"), ("Y", "Aa")])
        report = render_verdict(ledger_with("X"), index, "Aa")
        assert report.match_count == 1
        assert report.verdict == Verdict.INSUFFICIENT_EVIDENCE
        assert not report.sustained

    def test_two_matches_sustained(self):
        index = SuspectIndex.from_pairs([("X", "Aa"), ("Y", "Aa")])
        report = render_verdict(ledger_with("X", "Y"), index, "Aa")
        assert report.match_count == 2
        assert report.verdict == Verdict.SUSTAINED
        assert report.sustained

    def test_accused_compared_case_insensitively(self):
        index = SuspectIndex.from_pairs([("X", "Butler"), ("Y", "Butler")])
        report = render_verdict(ledger_with("X", "Y"), index, "bUtLeR\r\n")
        assert report.verdict == Verdict.SUSTAINED
        assert report.accused == "bUtLeR"

    def test_wrong_suspect_has_no_matches(self):
        index = SuspectIndex.from_pairs(INDEX_PAIRS)
        report = render_verdict(ledger_with("X", "Y"), index, "Butler")
        assert report.match_count == 0
        assert report.verdict == Verdict.INSUFFICIENT_EVIDENCE

    def test_report_lists_clues_in_order(self):
        index = SuspectIndex.from_pairs(INDEX_PAIRS)
        report = render_verdict(ledger_with("Z", "x", "Y"), index, "Butler")
        assert report.clues == ["x", "Y", "Z"]


class TestFormatVerdict:
    """Test the verdict block text."""

    def test_sustained_block(self):
        index = SuspectIndex.from_pairs([("X", "Butler"), ("Y", "Butler")])
        text = format_verdict(render_verdict(ledger_with("X", "Y"), index, "Butler"))
        assert "Butler" in text
        assert "2" in text
        assert "sustained" in text.lower()

    def test_insufficient_block_shows_count_and_threshold(self):
        index = SuspectIndex.from_pairs([("X", "Butler")])
        text = format_verdict(render_verdict(ledger_with("X"), index, "Butler"))
        assert "1 (needed: 2)" in text
        assert "Insufficient evidence" in text

    def test_impossible_block(self):
        text = format_verdict(render_verdict(ClueLedger(), SuspectIndex(), "Butler"))
        assert "impossible" in text.lower()

    def test_invalid_block(self):
        text = format_verdict(render_verdict(ledger_with("X"), SuspectIndex(), "B"))
        assert "not a valid accusation" in text
