"""
Credential Record Value Objects - The stored login and the edit to commit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CredentialRecord:
    """
    Immutable snapshot of a saved login as persisted at session start.
    
    Attributes:
        id: Opaque identifier of the stored login
        origin: Site origin the login belongs to
        username: Stored username (may be empty)
        password: Stored password
    """
    
    id: str
    origin: str
    username: str
    password: str

    def __post_init__(self) -> None:
        """Validate record."""
        if not self.id:
            raise ValueError("id is required")
        if not self.origin:
            raise ValueError("origin is required")


@dataclass(frozen=True)
class CommittedEdit:
    """Values handed to the storage collaborator when an edit is saved."""
    
    id: str
    new_username: str
    new_password: str
