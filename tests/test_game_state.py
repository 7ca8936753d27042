"""
Tests for Game Session
Tests ownership and release of the run's structures, and full-game scenarios.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from detective_quest.game_state import (
    GameSession,
    collected_clue_lines,
    get_game_session,
    reset_game_session,
)
from detective_quest.ledger import ClueLedger
from detective_quest.mansion import create_room, link_left, link_right
from detective_quest.navigation import explore
from detective_quest.suspect_index import SuspectIndex
from detective_quest.verdict import Verdict


def scripted(*tokens):
    remaining = list(tokens)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def quiet(_):
    pass


class TestScenarios:
    """End-to-end scenarios through explore and the verdict."""

    def test_one_clue_is_not_enough(self):
        """Hall -> Study -> quit: ledger {X}, one clue for A, insufficient."""
        hall = create_room("Hall")
        study = link_left(hall, create_room("Study", "X"))
        link_right(hall, create_room("Kitchen", "Y"))
        link_left(study, create_room("Attic"))
        index = SuspectIndex.from_pairs([("X", "A"), ("Y", "A")])

        with GameSession(mansion=hall, index=index) as session:
            explore(session.mansion, session.ledger, scripted("e", "s"), quiet)
            assert list(session.ledger) == ["X"]
            assert session.ledger.count_matching("A", index) == 1
            report = session.accuse("Ab")
            assert report.verdict == Verdict.INSUFFICIENT_EVIDENCE
            # Single-letter suspect names fall under the minimum accusation length
            assert session.accuse("A").verdict == Verdict.INVALID_ACCUSATION

    def test_two_clues_on_one_path_sustained(self):
        """Hall has a clue and Study has a clue, both for the same suspect."""
        hall = create_room("Hall", "X")
        link_left(hall, create_room("Study", "Y"))
        index = SuspectIndex.from_pairs([("X", "Ann"), ("Y", "Ann")])

        with GameSession(mansion=hall, index=index) as session:
            explore(session.mansion, session.ledger, scripted("e"), quiet)
            assert len(session.ledger) == 2
            report = session.accuse("Ann")
            assert report.match_count == 2
            assert report.verdict == Verdict.SUSTAINED

    @pytest.mark.parametrize("path,culprit", [
        (["e", "e", "e"], "Butler"),
        (["d", "e"], "Cook"),
        (["d", "d", "d"], "Gardener"),
    ])
    def test_default_case_paths(self, path, culprit):
        with GameSession.new_game() as session:
            explore(session.mansion, session.ledger, scripted(*path), quiet)
            assert session.accuse(culprit).sustained

    def test_quitting_at_entrance_makes_accusation_impossible(self):
        with GameSession.new_game() as session:
            explore(session.mansion, session.ledger, scripted("s"), quiet)
            assert session.accuse("Butler").verdict == Verdict.IMPOSSIBLE


class TestRelease:
    """Test the session frees everything on every exit path."""

    def test_context_manager_releases(self):
        with GameSession.new_game() as session:
            explore(session.mansion, session.ledger, scripted("e", "e", "e"), quiet)
            hall = session.mansion
        assert session.released
        assert session.mansion is None
        assert hall.left is None and hall.right is None
        assert session.ledger.is_empty()
        assert len(session.index) == 0

    def test_release_on_exception(self):
        with pytest.raises(RuntimeError):
            with GameSession.new_game() as session:
                raise RuntimeError("boom")
        assert session.released

    def test_release_twice_is_harmless(self):
        session = GameSession.new_game()
        session.release()
        session.release()
        assert session.released

    def test_cannot_navigate_released_session(self):
        session = GameSession.new_game()
        session.release()
        with pytest.raises(ValueError, match="released"):
            session.start_navigation(quiet)

    def test_index_capacity_is_used(self):
        with GameSession.new_game(index_capacity=3) as session:
            assert session.index.capacity == 3


class TestSessionAccessor:
    """Test the shared session used by the agent tools."""

    def test_reset_returns_fresh_session(self):
        first = reset_game_session()
        second = reset_game_session()
        assert first is not second
        assert first.released
        assert get_game_session() is second

    def test_get_replaces_released_session(self):
        session = reset_game_session()
        session.release()
        assert get_game_session() is not session

    def test_start_navigation_enters_root(self):
        session = reset_game_session()
        navigator = session.start_navigation(quiet)
        assert navigator.current.name == "Entrance Hall"
        assert session.navigator is navigator


class TestCollectedClueLines:
    def test_numbered_and_sorted(self):
        session = GameSession(mansion=None, index=SuspectIndex(), ledger=ClueLedger())
        for clue in ["b clue", "A clue"]:
            session.ledger.add(clue)
        assert collected_clue_lines(session) == ["1. A clue", "2. b clue"]
