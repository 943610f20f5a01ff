"""Hierarchical target filtering: accept or reject records by namespace."""

from enum import Enum
from typing import Iterable

DELIMITER = "::"


class Decision(Enum):
    ACCEPT = "accept"
    REJECT = "reject"
    NEUTRAL = "neutral"


class TargetFilter:
    """Blacklist/whitelist filter over ``::``-separated namespaces.

    The namespace and then each of its ancestors is looked up in turn; the
    first exact match wins, blacklist before whitelist at every level. When
    nothing matches up to the root segment the record is let through unless a
    whitelist is in use.
    """

    def __init__(self, blacklist: Iterable[str] = (), whitelist: Iterable[str] = ()):
        self._blacklist = frozenset(blacklist)
        self._whitelist = frozenset(whitelist)

    @classmethod
    def from_config(cls, text: str) -> "TargetFilter":
        """Parse ``"a::b,-a::b::c,+x"`` style rules.

        ``-name`` blacklists *name*; ``+name`` or a bare ``name`` whitelists it.
        Entries are stored as written, surrounding spaces included. Any text
        is accepted.
        """
        blacklist = set()
        whitelist = set()
        for entry in text.split(","):
            if entry.startswith("-"):
                blacklist.add(entry[1:])
            elif entry.startswith("+"):
                whitelist.add(entry[1:])
            else:
                whitelist.add(entry)
        return cls(blacklist, whitelist)

    @property
    def blacklist(self) -> frozenset:
        return self._blacklist

    @property
    def whitelist(self) -> frozenset:
        return self._whitelist

    def decide(self, namespace: str) -> Decision:
        current = namespace
        while True:
            if current in self._blacklist:
                return Decision.REJECT
            if current in self._whitelist:
                return Decision.NEUTRAL
            parent, sep, _ = current.rpartition(DELIMITER)
            if not sep:
                return Decision.REJECT if self._whitelist else Decision.NEUTRAL
            current = parent

    def allows(self, namespace: str) -> bool:
        return self.decide(namespace) is not Decision.REJECT

    def __repr__(self) -> str:
        return (f"TargetFilter(blacklist={sorted(self._blacklist)!r}, "
                f"whitelist={sorted(self._whitelist)!r})")
