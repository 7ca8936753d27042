"""
Clue Ledger - the detective's sorted record of collected clues.

The ledger is a binary search tree keyed on the clue text compared
case-insensitively. It never holds two clues that differ only by case,
and walking it in order always gives the clues alphabetically, no matter
in which order they were found.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

if TYPE_CHECKING:
    from detective_quest.suspect_index import SuspectIndex


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class LedgerNode:
    """One collected clue in the ledger tree."""
    clue: str
    left: Optional["LedgerNode"] = None
    right: Optional["LedgerNode"] = None


def _key(text: str) -> str:
    return text.casefold()


def _insert(root: Optional[LedgerNode], clue: str) -> Tuple[LedgerNode, bool]:
    """Insert and report whether a node was actually added."""
    if root is None:
        return LedgerNode(clue), True

    key = _key(clue)
    node = root
    while True:
        node_key = _key(node.clue)
        if key < node_key:
            if node.left is None:
                node.left = LedgerNode(clue)
                return root, True
            node = node.left
        elif key > node_key:
            if node.right is None:
                node.right = LedgerNode(clue)
                return root, True
            node = node.right
        else:
            logger.info(f"Clue already in ledger, ignoring duplicate: {clue!r}")
            return root, False


def insert(root: Optional[LedgerNode], clue: str) -> LedgerNode:
    """
    Insert a clue into the ledger tree.

    Smaller clues (case-insensitive) go left, greater ones go right.
    A clue equal to one already stored is rejected and the tree is
    left untouched.

    Returns:
        The root of the tree (a new node when the tree was empty)
    """
    new_root, _ = _insert(root, clue)
    return new_root


def inorder_traverse(root: Optional[LedgerNode]) -> Iterator[str]:
    """Lazily yield the clues in ascending case-insensitive order."""
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.clue
        node = node.right


def count_matching(root: Optional[LedgerNode], suspect_name: str, index: "SuspectIndex") -> int:
    """
    Count the clues in the ledger that point at the given suspect.

    Each clue is looked up in the suspect index; a clue the index does
    not know about counts for nobody.
    """
    wanted = _key(suspect_name)
    count = 0
    for clue in inorder_traverse(root):
        suspect = index.lookup(clue)
        if suspect and _key(suspect) == wanted:
            count += 1
    return count


def release(root: Optional[LedgerNode]) -> int:
    """
    Tear down the ledger tree post-order, children before parents.

    Returns:
        Number of nodes released
    """
    released = 0
    stack = [(root, False)] if root is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            node.left = None
            node.right = None
            released += 1
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
    return released


class ClueLedger:
    """
    Owning handle for a ledger tree.

    Passed explicitly to the navigation and verdict engines so the
    collected clues are never held in module state.
    """

    def __init__(self):
        self.root: Optional[LedgerNode] = None
        self._size = 0

    def add(self, clue: str) -> bool:
        """
        Record a clue.

        Returns:
            True if the clue was new, False if it was a duplicate
        """
        self.root, added = _insert(self.root, clue)
        if added:
            self._size += 1
        return added

    def is_empty(self) -> bool:
        return self.root is None

    def count_matching(self, suspect_name: str, index: "SuspectIndex") -> int:
        return count_matching(self.root, suspect_name, index)

    def clear(self) -> int:
        """Release every node. Returns the number of nodes released."""
        released = release(self.root)
        self.root = None
        self._size = 0
        return released

    def __iter__(self) -> Iterator[str]:
        return inorder_traverse(self.root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: str) -> bool:
        key = _key(clue)
        node = self.root
        while node is not None:
            node_key = _key(node.clue)
            if key == node_key:
                return True
            node = node.left if key < node_key else node.right
        return False

    def __repr__(self) -> str:
        return f"ClueLedger({list(self)!r})"
