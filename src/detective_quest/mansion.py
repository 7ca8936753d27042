"""
Mansion Graph for Detective Quest
The mansion is a fixed binary tree of rooms wired by hand before play.

Rules:
- Every room has at most a left and a right exit, never a way back
- A room without a clue starts out as already searched
- A clue can only be collected once, after that the room is empty
- Rooms are never added, removed or re-wired once exploration starts
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Room:
    """A room in the mansion."""
    name: str
    clue: str = ""  # Empty string means there is nothing to find here
    collected: bool = False
    left: Optional["Room"] = None
    right: Optional["Room"] = None
    has_parent: bool = field(default=False, init=False, repr=False)  # Set by link_left/link_right

    def is_leaf(self) -> bool:
        """A leaf room has no exits - the path ends here."""
        return self.left is None and self.right is None

    def has_uncollected_clue(self) -> bool:
        return bool(self.clue) and not self.collected

    def collect_clue(self) -> Optional[str]:
        """
        Take the clue out of the room.

        Returns:
            The clue text, or None if there was nothing left to collect
        """
        if not self.has_uncollected_clue():
            return None
        clue = self.clue
        self.collected = True
        self.clue = ""
        return clue


def create_room(name: str, clue: str = "") -> Room:
    """
    Build a room. A room created without a clue is marked as collected.

    Args:
        name: Display name of the room
        clue: Clue text hidden in the room ("" for none)
    """
    return Room(name=name, clue=clue, collected=(clue == ""))


def _is_descendant(root: Room, candidate: Room) -> bool:
    return any(room is candidate for room in iter_rooms(root))


def _check_link(parent: Room, child: Room, side: str) -> None:
    if getattr(parent, side) is not None:
        raise ValueError(f"{parent.name} already has a {side} exit")
    if child.has_parent:
        raise ValueError(f"{child.name} is already linked under another room")
    if _is_descendant(child, parent):
        raise ValueError(f"Linking {child.name} under {parent.name} would create a cycle")


def link_left(parent: Room, child: Room) -> Room:
    """Make child the left exit of parent. Returns the child for chaining."""
    _check_link(parent, child, "left")
    parent.left = child
    child.has_parent = True
    return child


def link_right(parent: Room, child: Room) -> Room:
    """Make child the right exit of parent. Returns the child for chaining."""
    _check_link(parent, child, "right")
    parent.right = child
    child.has_parent = True
    return child


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the tree in pre-order (room, left, right)."""
    if root is None:
        return
    stack = [root]
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def release_rooms(root: Optional[Room]) -> int:
    """
    Tear the mansion down, children before parents.

    Every child edge is cut exactly once so no room keeps another alive.

    Returns:
        Number of rooms released
    """
    if root is None:
        return 0
    released = release_rooms(root.left) + release_rooms(root.right)
    root.left = None
    root.right = None
    root.has_parent = False
    logger.debug(f"Released room {root.name}")
    return released + 1
