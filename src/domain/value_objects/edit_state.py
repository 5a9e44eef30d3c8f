"""
Edit State Value Object - Complete snapshot of one edit-login session.
"""

from dataclasses import dataclass
from enum import Enum

from .credential_record import CredentialRecord
from .duplicate_index import DuplicateIndex
from .field_state import FieldState


class SessionPhase(Enum):
    """Whether the duplicate lookup has been delivered."""
    
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class EditState:
    """
    Immutable snapshot of the edit form.
    
    Every entry point of the validation engine takes one of these and
    returns the next one; the hosting layer compares old and new to decide
    what to redraw.
    """
    
    record: CredentialRecord
    username: FieldState
    password: FieldState
    duplicates: DuplicateIndex

    @property
    def can_save(self) -> bool:
        """Save gate: both fields valid and at least one changed."""
        return (
            self.username.valid
            and self.password.valid
            and (self.username.dirty or self.password.dirty)
        )

    @property
    def is_dirty(self) -> bool:
        """Whether the user has changed anything."""
        return self.username.dirty or self.password.dirty

    @property
    def phase(self) -> SessionPhase:
        """Loading until the first duplicate delivery."""
        return SessionPhase.READY if self.duplicates.loaded else SessionPhase.LOADING
