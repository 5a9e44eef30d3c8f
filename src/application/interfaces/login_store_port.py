"""
Login Store Port - Abstract interface for the saved-login storage.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.value_objects import CommittedEdit, CredentialRecord


class LoginStorePort(ABC):
    """Abstract interface for saved-login storage."""
    
    @abstractmethod
    async def initialize(self) -> None:
        """Initialize storage connection."""
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close storage connection."""
        pass
    
    @abstractmethod
    async def add_login(self, origin: str, username: str, password: str) -> CredentialRecord:
        """Store a new login and return it with its id."""
        pass
    
    @abstractmethod
    async def get_login(self, login_id: str) -> Optional[CredentialRecord]:
        """Get a login by id."""
        pass
    
    @abstractmethod
    async def get_logins(self) -> list[CredentialRecord]:
        """Get all stored logins."""
        pass
    
    @abstractmethod
    async def find_potential_duplicates(
        self,
        origin: str,
        exclude_id: str,
    ) -> list[CredentialRecord]:
        """Get the other logins stored for the same origin."""
        pass
    
    @abstractmethod
    async def update_login(self, edit: CommittedEdit) -> None:
        """Persist an edited username/password."""
        pass
