"""
Edit Session - Owning controller for one edit-login form.

Holds the current snapshot, routes every input through the validation
engine and notifies listeners with the old and new snapshots so the
hosting screen can redraw only what changed.
"""

import logging
from typing import Callable, Iterable, Union

from src.domain.exceptions import GateClosedError
from src.domain.value_objects import (
    CommittedEdit,
    CredentialRecord,
    DuplicateIndex,
    EditState,
    FieldState,
    SessionPhase,
)

from . import validation_engine as engine


logger = logging.getLogger(__name__)


StateListener = Callable[[EditState, EditState], None]


class EditSession:
    """
    Edit session for a single saved login.
    
    The session starts in the LOADING phase with an empty duplicate index
    and moves to READY once ``on_duplicates_loaded`` is called. The save
    gate is never stored; it is always derived from the current snapshot.
    """
    
    def __init__(self, record: CredentialRecord) -> None:
        """
        Initialize the session.
        
        Args:
            record: Login being edited, as stored when the form opened.
        """
        self._state = engine.initial_state(record)
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> EditState:
        """Current snapshot."""
        return self._state

    @property
    def record(self) -> CredentialRecord:
        return self._state.record

    @property
    def username(self) -> FieldState:
        return self._state.username

    @property
    def password(self) -> FieldState:
        return self._state.password

    @property
    def duplicates(self) -> DuplicateIndex:
        return self._state.duplicates

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def can_save(self) -> bool:
        """Whether the save control should be enabled."""
        return self._state.can_save

    def add_listener(self, callback: StateListener) -> None:
        """Register a callback receiving (old_state, new_state)."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Unregister a previously added callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _transition(self, new_state: EditState) -> EditState:
        """Swap in the next snapshot and notify listeners."""
        old_state = self._state
        self._state = new_state
        
        if old_state.can_save != new_state.can_save:
            logger.debug(f"Save gate {'opened' if new_state.can_save else 'closed'}")
        
        for callback in list(self._listeners):
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.error(f"State listener error: {e}")
        return new_state

    def on_username_changed(self, value: str) -> EditState:
        """Handle a username text change."""
        return self._transition(engine.on_username_input(self._state, value))

    def on_password_changed(self, value: str) -> EditState:
        """Handle a password text change."""
        return self._transition(engine.on_password_input(self._state, value))

    def on_duplicates_loaded(
        self,
        duplicates: Union[DuplicateIndex, Iterable[str]],
    ) -> EditState:
        """Handle delivery of the duplicate lookup result."""
        new_state = engine.on_duplicates_loaded(self._state, duplicates)
        logger.info(
            f"Duplicate index ready for login {self.record.id} "
            f"({len(new_state.duplicates)} other logins at {self.record.origin})"
        )
        return self._transition(new_state)

    def commit(self) -> CommittedEdit:
        """
        Produce the values to persist.
        
        Returns:
            CommittedEdit built from the current field values.
            
        Raises:
            GateClosedError: If the edit is unchanged or invalid.
        """
        if not self.can_save:
            raise GateClosedError()
        
        edit = CommittedEdit(
            id=self.record.id,
            new_username=self.username.value,
            new_password=self.password.value,
        )
        logger.info(f"Committing edit for login {edit.id}")
        return edit

