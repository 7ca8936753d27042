"""
Verdict Engine - judges the final accusation against the collected clues.

The rule is fixed: the accusation holds when at least two clues in the
ledger point at the accused suspect.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from detective_quest.ledger import ClueLedger
from detective_quest.suspect_index import SuspectIndex


EVIDENCE_THRESHOLD = 2
MIN_ACCUSATION_LENGTH = 2


class Verdict(Enum):
    IMPOSSIBLE = "Accusation impossible"
    INVALID_ACCUSATION = "Invalid accusation"
    INSUFFICIENT_EVIDENCE = "Insufficient evidence"
    SUSTAINED = "Accusation sustained"


@dataclass
class VerdictReport:
    """Outcome of an accusation."""
    verdict: Verdict
    accused: str
    match_count: int = 0
    clues: List[str] = field(default_factory=list)  # Ledger contents, in order

    @property
    def sustained(self) -> bool:
        return self.verdict == Verdict.SUSTAINED


def render_verdict(ledger: ClueLedger, index: SuspectIndex, accused: str) -> VerdictReport:
    """
    Judge an accusation.

    - An empty ledger makes any accusation impossible (the index is not consulted)
    - An accusation shorter than two characters is invalid
    - Otherwise the accusation is sustained with two or more matching clues
    """
    accused = accused.rstrip("\r\n")

    if ledger.is_empty():
        return VerdictReport(Verdict.IMPOSSIBLE, accused)

    clues = list(ledger)
    if len(accused) < MIN_ACCUSATION_LENGTH:
        return VerdictReport(Verdict.INVALID_ACCUSATION, accused, clues=clues)

    count = ledger.count_matching(accused, index)
    verdict = Verdict.SUSTAINED if count >= EVIDENCE_THRESHOLD else Verdict.INSUFFICIENT_EVIDENCE
    return VerdictReport(verdict, accused, count, clues)


def format_verdict(report: VerdictReport) -> str:
    """Render the verdict block shown at the end of the game."""
    lines = ["=" * 50, "⚖️  FINAL VERDICT", "=" * 50]

    if report.verdict == Verdict.IMPOSSIBLE:
        lines.append("No clues were collected - an accusation is impossible.")
    elif report.verdict == Verdict.INVALID_ACCUSATION:
        lines.append(f"'{report.accused}' is not a valid accusation (at least {MIN_ACCUSATION_LENGTH} characters).")
    else:
        lines.append(f"Accused: {report.accused}")
        lines.append(f"Clues pointing at the accused: {report.match_count} (needed: {EVIDENCE_THRESHOLD})")
        if report.sustained:
            lines.append(f"✅ {report.verdict.value}! {report.accused} is the culprit.")
        else:
            lines.append(f"❌ {report.verdict.value}. {report.accused} cannot be convicted.")

    lines.append("=" * 50)
    return "\n".join(lines)
