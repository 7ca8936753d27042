"""
Game Session for Detective Quest
Owns the three structures of a run - the mansion, the clue ledger and the
suspect index - and releases all of them together when the run ends.

Use it as a context manager so every way out of the game (leaf, quit,
invalid accusation, error) goes through the same teardown:

    with GameSession.new_game() as session:
        explore(session.mansion, session.ledger)
        render_verdict(session.ledger, session.index, accused)
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from detective_quest.case_data import build_mansion, build_suspect_index
from detective_quest.ledger import ClueLedger
from detective_quest.mansion import Room, release_rooms
from detective_quest.navigation import Navigator
from detective_quest.suspect_index import DEFAULT_CAPACITY, SuspectIndex
from detective_quest.verdict import VerdictReport, render_verdict


logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Everything a single run of the game owns."""
    mansion: Optional[Room]
    index: SuspectIndex
    ledger: ClueLedger = field(default_factory=ClueLedger)
    navigator: Optional[Navigator] = None
    verdict: Optional[VerdictReport] = None
    released: bool = False

    @classmethod
    def new_game(cls, index_capacity: int = DEFAULT_CAPACITY) -> "GameSession":
        """Build the mansion and the suspect index from the case data."""
        return cls(mansion=build_mansion(), index=build_suspect_index(index_capacity))

    def start_navigation(self, write: Callable[[str], None] = print) -> Navigator:
        """Enter the mansion and keep the navigator for step-by-step play."""
        if self.mansion is None:
            raise ValueError("Game session has already been released")
        self.navigator = Navigator(self.mansion, self.ledger, write)
        return self.navigator

    def accuse(self, accused: str) -> VerdictReport:
        self.verdict = render_verdict(self.ledger, self.index, accused)
        return self.verdict

    def release(self) -> None:
        """Free the mansion, the ledger and the index. Safe to call twice."""
        if self.released:
            return
        rooms = release_rooms(self.mansion)
        nodes = self.ledger.clear()
        entries = self.index.clear()
        self.mansion = None
        self.navigator = None
        self.released = True
        logger.debug(f"Released {rooms} rooms, {nodes} ledger nodes, {entries} index entries")

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


# Session shared with the agent tools
_game_session: Optional[GameSession] = None


def get_game_session() -> GameSession:
    """Get the current game session, starting a new game if there is none."""
    global _game_session
    if _game_session is None or _game_session.released:
        _game_session = GameSession.new_game()
    return _game_session


def reset_game_session(index_capacity: int = DEFAULT_CAPACITY) -> GameSession:
    """Release the current session (if any) and start a fresh game."""
    global _game_session
    if _game_session is not None:
        _game_session.release()
    _game_session = GameSession.new_game(index_capacity)
    return _game_session


def collected_clue_lines(session: GameSession) -> List[str]:
    """The ledger as numbered display lines, in alphabetical order."""
    return [f"{i}. {clue}" for i, clue in enumerate(session.ledger, 1)]
