"""
Suspect Index - maps clue text to the suspect it implicates.

A fixed-size hash table with separate chaining. It is filled once before
the game starts and only read afterwards.

Re-insertion policy: last insert wins for a given clue text. New entries
are pushed at the head of their bucket and lookups scan from the head, so
the most recent association shadows any older one.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


DEFAULT_CAPACITY = 10
HASH_MULTIPLIER = 31


@dataclass
class IndexEntry:
    """A clue -> suspect association chained inside a bucket."""
    clue: str
    suspect: str
    next: Optional["IndexEntry"] = None


class SuspectIndex:
    """Hash table from clue text to suspect name."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Suspect index capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.buckets: List[Optional[IndexEntry]] = [None] * capacity

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]], capacity: int = DEFAULT_CAPACITY) -> "SuspectIndex":
        """Build an index from (clue, suspect) pairs, inserted in order."""
        index = cls(capacity)
        for clue, suspect in pairs:
            index.insert(clue, suspect)
        return index

    def hash(self, clue: str) -> int:
        """Polynomial string hash reduced to a bucket number. Case-sensitive."""
        value = 0
        for char in clue:
            value = (value * HASH_MULTIPLIER + ord(char)) % self.capacity
        return value

    def insert(self, clue: str, suspect: str) -> None:
        """Associate a clue with a suspect. Empty clue text is ignored."""
        if not clue:
            return
        bucket = self.hash(clue)
        self.buckets[bucket] = IndexEntry(clue, suspect, self.buckets[bucket])

    def lookup(self, clue: str) -> str:
        """
        Find the suspect for a clue.

        Returns:
            The suspect name, or "" when no entry matches (case-insensitive)
        """
        key = clue.casefold()
        entry = self.buckets[self.hash(clue)]
        while entry is not None:
            if entry.clue.casefold() == key:
                return entry.suspect
            entry = entry.next
        return ""

    def suspects(self) -> List[str]:
        """Distinct suspect names in the index, sorted."""
        names = {}
        for entry in self._entries():
            names.setdefault(entry.suspect.casefold(), entry.suspect)
        return sorted(names.values(), key=str.casefold)

    def clear(self) -> int:
        """Drop every entry from every bucket. Returns how many were dropped."""
        dropped = 0
        for i, entry in enumerate(self.buckets):
            while entry is not None:
                following = entry.next
                entry.next = None
                entry = following
                dropped += 1
            self.buckets[i] = None
        return dropped

    def _entries(self):
        for entry in self.buckets:
            while entry is not None:
                yield entry
                entry = entry.next

    def __len__(self) -> int:
        return sum(1 for _ in self._entries())
