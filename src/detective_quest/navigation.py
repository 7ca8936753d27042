"""
Navigation Engine for Detective Quest
Walks the player through the mansion tree one choice at a time.

Exploration rules:
- Entering a room collects its clue into the ledger (only once per room)
- Reaching a room with no exits ends the exploration automatically
- Only the exits that exist are offered, plus leaving the mansion
- An unknown option or a missing exit changes nothing - the player is asked again
- Running out of input counts as leaving the mansion
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from detective_quest.ledger import ClueLedger
from detective_quest.mansion import Room


logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = "e"
    RIGHT = "d"
    QUIT = "s"


class EndReason(Enum):
    LEAF = "leaf"                # Reached a room with no exits
    QUIT = "quit"                # Player chose to leave
    INTERRUPTED = "interrupted"  # Input ran out or the player hit Ctrl+C


CHOICE_KEYS = {direction.value: direction for direction in Direction}

DIRECTION_LABELS = {
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
    Direction.QUIT: "Leave the mansion",
}


def parse_choice(token: Optional[str]) -> Optional[Direction]:
    """
    Turn a raw input token into a direction.

    Accepts exactly one character (surrounding whitespace ignored):
    e/E for left, d/D for right, s/S to quit.

    Returns:
        The Direction, or None for anything else
    """
    if token is None:
        return None
    token = token.strip()
    if len(token) != 1:
        return None
    return CHOICE_KEYS.get(token.lower())


@dataclass
class ExplorationResult:
    """What the exploration left behind when it ended."""
    final_room: Room
    reason: EndReason
    ledger: ClueLedger
    visited: List[str] = field(default_factory=list)


class Navigator:
    """
    The exploration state machine.

    State is the current room plus the ledger it fills. The navigator
    enters the starting room as soon as it is created.
    """

    def __init__(self, root: Room, ledger: ClueLedger, write: Callable[[str], None] = print):
        self.current = root
        self.ledger = ledger
        self.write = write
        self.visited: List[str] = []
        self.end_reason: Optional[EndReason] = None
        self._enter(root)

    @property
    def finished(self) -> bool:
        return self.end_reason is not None

    def available_directions(self) -> List[Direction]:
        """Exits of the current room that exist, followed by quit."""
        directions = []
        if self.current.left is not None:
            directions.append(Direction.LEFT)
        if self.current.right is not None:
            directions.append(Direction.RIGHT)
        directions.append(Direction.QUIT)
        return directions

    def prompt_text(self) -> str:
        lines = ["Where do you want to go?"]
        for direction in self.available_directions():
            lines.append(f"  [{direction.value}] {DIRECTION_LABELS[direction]}")
        return "\n".join(lines)

    def step(self, choice: Direction) -> bool:
        """
        Apply one player choice.

        Returns:
            True if the state changed (moved or left), False otherwise
        """
        if self.finished:
            logger.debug(f"Ignoring {choice} - exploration already over")
            return False

        if choice == Direction.QUIT:
            self.write("\n🚪 Exploration over. Leaving the mansion...")
            self.stop(EndReason.QUIT)
            return True

        child = self.current.left if choice == Direction.LEFT else self.current.right
        if child is None:
            logger.debug(f"No {choice.name.lower()} exit from {self.current.name}")
            self.write("❌ There is no path that way. Try again.")
            return False

        self.current = child
        self._enter(child)
        return True

    def stop(self, reason: EndReason) -> None:
        if not self.finished:
            self.end_reason = reason
            logger.debug(f"Exploration ended at {self.current.name}: {reason.value}")

    def result(self) -> ExplorationResult:
        return ExplorationResult(
            final_room=self.current,
            reason=self.end_reason,
            ledger=self.ledger,
            visited=list(self.visited),
        )

    def _enter(self, room: Room) -> None:
        self.visited.append(room.name)
        logger.debug(f"Entering {room.name}")
        self.write(f"\n📍 You are in: {room.name}")

        clue = room.collect_clue()
        if clue is not None:
            self.write(f"🔍 You found a clue: {clue}")
            if not self.ledger.add(clue):
                self.write("   (You already noted this clue.)")

        if room.is_leaf():
            self.write("🏁 End of the path! This room has no more exits.")
            self.stop(EndReason.LEAF)


def explore(
    root: Room,
    ledger: ClueLedger,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> ExplorationResult:
    """
    Run an interactive exploration from the root room until a leaf,
    a quit, or the end of input.

    Args:
        root: The room where the player starts
        ledger: The ledger collected clues are added to
        read: Returns one line of player input; raises EOFError when input is exhausted
        write: Receives every line of output

    Returns:
        The final room, why the exploration ended and the rooms visited
    """
    navigator = Navigator(root, ledger, write)
    while not navigator.finished:
        write(navigator.prompt_text())
        try:
            token = read("> ")
        except (EOFError, KeyboardInterrupt):
            write("\n🚪 No more input. Leaving the mansion...")
            navigator.stop(EndReason.INTERRUPTED)
            break

        choice = parse_choice(token)
        if choice is None:
            logger.debug(f"Rejected input {token!r}")
            write("❌ Invalid option. Try again.")
            continue
        navigator.step(choice)

    return navigator.result()
