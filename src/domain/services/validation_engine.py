"""
Validation Engine - Pure rules for the edit-login form.

Every entry point takes the full session snapshot and returns the next one.
Nothing here mutates its inputs or raises for bad user input; problems are
reported as field-level error kinds.

Rules:
- Username: equal to the stored value is always clean and valid; otherwise
  it is dirty and invalid when another login at the origin uses it.
- Password: empty is always dirty and invalid; otherwise dirty iff it
  differs from the stored value.
- Comparisons are exact and case-sensitive.
"""

import logging
from dataclasses import replace
from typing import Iterable, Union

from src.domain.value_objects import (
    CredentialRecord,
    DuplicateIndex,
    EditState,
    ErrorKind,
    FieldState,
)


logger = logging.getLogger(__name__)


def initial_state(record: CredentialRecord) -> EditState:
    """Snapshot for a freshly opened form, duplicates not yet loaded."""
    return EditState(
        record=record,
        username=FieldState.clean(record.username),
        password=FieldState.clean(record.password),
        duplicates=DuplicateIndex.pending(),
    )


def validate_username(
    original: str,
    value: str,
    duplicates: DuplicateIndex,
) -> FieldState:
    """
    Classify a username draft.
    
    Equality with the stored value is checked before the duplicate lookup,
    so reverting always clears a duplicate error.
    """
    if value == original:
        return FieldState.clean(value)
    if duplicates.contains(value):
        return FieldState.invalid(value, ErrorKind.DUPLICATE_USERNAME)
    return FieldState(value=value, dirty=True)


def validate_password(original: str, value: str) -> FieldState:
    """Classify a password draft. Emptiness wins over equality."""
    if not value:
        return FieldState.invalid(value, ErrorKind.EMPTY_PASSWORD)
    if value == original:
        return FieldState.clean(value)
    return FieldState(value=value, dirty=True)


def on_username_input(state: EditState, value: str) -> EditState:
    """Apply a username keystroke."""
    username = validate_username(state.record.username, value, state.duplicates)
    logger.debug(
        f"Username input: dirty={username.dirty} valid={username.valid}"
    )
    return replace(state, username=username)


def on_password_input(state: EditState, value: str) -> EditState:
    """Apply a password keystroke."""
    password = validate_password(state.record.password, value)
    logger.debug(
        f"Password input: dirty={password.dirty} valid={password.valid}"
    )
    return replace(state, password=password)


def on_duplicates_loaded(
    state: EditState,
    duplicates: Union[DuplicateIndex, Iterable[str]],
) -> EditState:
    """
    Replace the duplicate index and re-check the current username.
    
    The password field is left untouched.
    
    Args:
        state: Current snapshot.
        duplicates: New index, or a collection of usernames (a bare str
            is rejected with TypeError).
    
    Returns:
        Next snapshot in the READY phase.
    """
    if isinstance(duplicates, DuplicateIndex):
        index = duplicates if duplicates.loaded else state.duplicates.replace(duplicates.usernames)
    else:
        index = state.duplicates.replace(duplicates)
    
    username = validate_username(state.record.username, state.username.value, index)
    logger.debug(
        f"Duplicates loaded ({len(index)} entries): username valid={username.valid}"
    )
    return replace(state, duplicates=index, username=username)
