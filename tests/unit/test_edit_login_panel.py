"""
Unit tests for the edit-login panel wiring.

The panel is exercised without a page: handlers are awaited directly with
a minimal event object.
"""

import asyncio
import inspect
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from src.application.interfaces import LoginStorePort
from src.application.use_cases import EditLoginUseCase
from src.domain.value_objects import CredentialRecord, ErrorKind
from src.presentation.gui.components import EditLoginPanel
from src.presentation.gui.components.edit_login import (
    CONFIRM_DISCARD_TEXT,
    LOOKUP_FAILED_TEXT,
    LOOKUP_PENDING_TEXT,
)


ORIGIN = "https://example.com"


@pytest.fixture
def store() -> AsyncMock:
    """Store double with one other login at the origin."""
    store = AsyncMock(spec=LoginStorePort)
    store.find_potential_duplicates.return_value = [
        CredentialRecord(id="2", origin=ORIGIN, username="bob", password="x"),
    ]
    return store


@pytest.fixture
def use_case(store: AsyncMock) -> EditLoginUseCase:
    record = CredentialRecord(id="1", origin=ORIGIN, username="alice", password="secret")
    return EditLoginUseCase(store, record)


@pytest.fixture
def on_cancel() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def panel(use_case: EditLoginUseCase, on_cancel: AsyncMock) -> EditLoginPanel:
    return EditLoginPanel(use_case, on_cancel=on_cancel)


def type_into(field, value: str) -> None:
    """Simulate a change event on a text field."""
    field.value = value
    asyncio.run(field.on_change(SimpleNamespace(control=field)))


def click(button) -> None:
    asyncio.run(button.on_click(SimpleNamespace(control=button)))


class TestHandlers:
    """Tests for how input reaches the session."""
    
    def test_handlers_run_on_event_loop(self, panel: EditLoginPanel):
        """Every handler that touches the session is a coroutine."""
        controls = panel._controls
        
        assert inspect.iscoroutinefunction(controls["username_input"].on_change)
        assert inspect.iscoroutinefunction(controls["password_input"].on_change)
        assert inspect.iscoroutinefunction(controls["clear_username_button"].on_click)
        assert inspect.iscoroutinefunction(controls["clear_password_button"].on_click)
        assert inspect.iscoroutinefunction(controls["save_button"].on_click)
        assert inspect.iscoroutinefunction(controls["cancel_button"].on_click)
    
    def test_typing_updates_session_and_errors(self, panel: EditLoginPanel, use_case):
        """Duplicate username shows its inline error and closes the gate."""
        asyncio.run(panel.load_duplicates())
        
        type_into(panel._controls["username_input"], "bob")
        
        assert use_case.session.username.error_kind == ErrorKind.DUPLICATE_USERNAME
        assert panel._controls["username_input"].error_text == ErrorKind.DUPLICATE_USERNAME.message
        assert panel._controls["save_button"].disabled is True
    
    def test_clear_password(self, panel: EditLoginPanel, use_case):
        """Clearing the password flags it as required."""
        click(panel._controls["clear_password_button"])
        
        assert use_case.session.password.value == ""
        assert panel._controls["password_input"].error_text == "Password required"
        assert panel._controls["clear_password_button"].disabled is True


class TestDuplicateLookupStatus:
    """Tests for the lookup status line."""
    
    def test_success_clears_status(self, panel: EditLoginPanel):
        """Status disappears once duplicates are delivered."""
        assert panel._controls["status_text"].value == LOOKUP_PENDING_TEXT
        
        assert asyncio.run(panel.load_duplicates()) is True
        
        assert panel._controls["status_text"].value == ""
    
    def test_failure_is_shown(self, panel: EditLoginPanel, store: AsyncMock):
        """A failed lookup replaces the pending message."""
        store.find_potential_duplicates.side_effect = OSError("disk gone")
        
        assert asyncio.run(panel.load_duplicates()) is False
        
        assert panel._controls["status_text"].value == LOOKUP_FAILED_TEXT


class TestCancel:
    """Tests for leaving the form."""
    
    def test_cancel_clean_form(self, panel: EditLoginPanel, on_cancel: AsyncMock):
        """Nothing changed: cancel leaves immediately."""
        click(panel._controls["cancel_button"])
        
        on_cancel.assert_awaited_once()
    
    def test_cancel_dirty_form_confirms(self, panel: EditLoginPanel, on_cancel: AsyncMock):
        """Unsaved changes need a second press."""
        type_into(panel._controls["password_input"], "hunter2")
        
        click(panel._controls["cancel_button"])
        on_cancel.assert_not_awaited()
        assert panel._controls["result_text"].value == CONFIRM_DISCARD_TEXT
        
        click(panel._controls["cancel_button"])
        on_cancel.assert_awaited_once()
    
    def test_editing_resets_confirmation(self, panel: EditLoginPanel, on_cancel: AsyncMock):
        """Typing after the first press asks again."""
        type_into(panel._controls["password_input"], "hunter2")
        click(panel._controls["cancel_button"])
        
        type_into(panel._controls["password_input"], "hunter3")
        click(panel._controls["cancel_button"])
        
        on_cancel.assert_not_awaited()
    
    def test_reverted_form_cancels_immediately(self, panel: EditLoginPanel, on_cancel: AsyncMock):
        """Retyping the stored values counts as unchanged."""
        type_into(panel._controls["username_input"], "dave")
        type_into(panel._controls["username_input"], "alice")
        
        click(panel._controls["cancel_button"])
        
        on_cancel.assert_awaited_once()
