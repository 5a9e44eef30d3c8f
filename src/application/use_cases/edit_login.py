"""
Edit Login Use Case - Connects an edit session to the login store.

Handles the two collaborator calls around the validation core:
- Fetching the other logins at the same origin (single in-flight lookup)
- Persisting the committed edit
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.application.interfaces import LoginStorePort
from src.domain.services import EditSession
from src.domain.value_objects import CommittedEdit, CredentialRecord, DuplicateIndex


logger = logging.getLogger(__name__)


class SaveOutcome(Enum):
    """Result of a save attempt."""
    SAVED = "saved"
    FAILED = "failed"


@dataclass
class SaveResult:
    """Detailed result of a save attempt."""
    outcome: SaveOutcome
    edit: Optional[CommittedEdit] = None
    message: str = ""

    @property
    def is_saved(self) -> bool:
        return self.outcome == SaveOutcome.SAVED


class EditLoginUseCase:
    """
    Use case for editing one saved login.
    
    Flow:
    1. Open an EditSession for the record
    2. Load duplicates in the background (session stays LOADING until then)
    3. Forward keystrokes to the session
    4. On save, commit the session and persist the edit
    
    Storage failures are reported in the result, never retried.
    """

    def __init__(self, store: LoginStorePort, record: CredentialRecord) -> None:
        """
        Initialize the use case.
        
        Args:
            store: Login storage.
            record: Login being edited.
        """
        self.store = store
        self.session = EditSession(record)
        self._lookup_pending = False

    @property
    def lookup_pending(self) -> bool:
        """Whether a duplicate lookup is in flight."""
        return self._lookup_pending

    async def load_duplicates(self) -> bool:
        """
        Fetch the other logins at this origin and deliver them to the session.
        
        Returns:
            True if the index was delivered, False if the lookup failed
            (the session then stays in the LOADING phase).
            
        Raises:
            RuntimeError: If a lookup is already in flight.
        """
        if self._lookup_pending:
            raise RuntimeError("Duplicate lookup already in progress")
        
        record = self.session.record
        self._lookup_pending = True
        try:
            records = await self.store.find_potential_duplicates(record.origin, record.id)
        except Exception as e:
            logger.error(f"Duplicate lookup failed for login {record.id}: {e}")
            return False
        finally:
            self._lookup_pending = False
        
        self.session.on_duplicates_loaded(
            DuplicateIndex.from_records(records, exclude_id=record.id)
        )
        return True

    async def save(self) -> SaveResult:
        """
        Commit the session and persist the edit.
        
        Returns:
            SaveResult with outcome details.
            
        Raises:
            GateClosedError: If called while the save gate is closed.
        """
        edit = self.session.commit()
        
        try:
            await self.store.update_login(edit)
        except Exception as e:
            logger.error(f"Failed to save login {edit.id}: {e}")
            return SaveResult(
                outcome=SaveOutcome.FAILED,
                edit=edit,
                message=str(e),
            )
        
        logger.info(f"Saved login {edit.id}")
        return SaveResult(outcome=SaveOutcome.SAVED, edit=edit)
