"""
Duplicate Index Value Object - Usernames of other logins at the same origin.
"""

from dataclasses import dataclass, field
from typing import Iterable

from .credential_record import CredentialRecord


@dataclass(frozen=True)
class DuplicateIndex:
    """
    Immutable set of usernames belonging to other saved logins that share
    the edited login's origin.
    
    The index is delivered asynchronously and is only ever replaced as a
    whole; a pending index is empty and reports ``loaded = False``.
    Membership is an exact, case-sensitive string comparison.
    
    Attributes:
        usernames: Usernames of the other logins
        loaded: Whether a lookup result has been delivered
    """
    
    usernames: frozenset[str] = field(default_factory=frozenset)
    loaded: bool = False

    def __post_init__(self) -> None:
        """Normalize any iterable into a frozenset."""
        if isinstance(self.usernames, str):
            raise TypeError("usernames must be a collection of strings, not a str")
        if not isinstance(self.usernames, frozenset):
            object.__setattr__(self, "usernames", frozenset(self.usernames))

    @classmethod
    def pending(cls) -> "DuplicateIndex":
        """Index before the lookup has resolved."""
        return cls()

    @classmethod
    def of(cls, usernames: Iterable[str]) -> "DuplicateIndex":
        """Loaded index with the given usernames."""
        if isinstance(usernames, str):
            raise TypeError("usernames must be a collection of strings, not a str")
        return cls(usernames=frozenset(usernames), loaded=True)

    @classmethod
    def from_records(cls, records: Iterable[CredentialRecord], exclude_id: str) -> "DuplicateIndex":
        """Build a loaded index from stored logins, skipping the edited one."""
        return cls.of(r.username for r in records if r.id != exclude_id)

    def replace(self, usernames: Iterable[str]) -> "DuplicateIndex":
        """Return a new loaded index that fully supersedes this one."""
        return DuplicateIndex.of(usernames)

    def contains(self, username: str) -> bool:
        """Check whether another login already uses this username."""
        return username in self.usernames

    def __len__(self) -> int:
        return len(self.usernames)
