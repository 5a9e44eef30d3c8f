"""
Edit Login Panel Component

Form for changing the username/password of one saved login. The panel
holds no validation state of its own: it forwards raw text to the edit
session and redraws from the snapshots the session reports.

All handlers are coroutines so that every session entry point runs on the
page's event loop, in order with the duplicate delivery.
"""

import flet as ft
from typing import Awaitable, Callable, Optional

from src.application.use_cases import EditLoginUseCase, SaveResult
from src.domain.value_objects import EditState, SessionPhase
from ..styles import Theme


LOOKUP_PENDING_TEXT = "Checking for other logins on this site..."
LOOKUP_FAILED_TEXT = "Could not check for other logins on this site"
CONFIRM_DISCARD_TEXT = "You have unsaved changes. Press Cancel again to discard them."


def create_edit_login_panel(
    use_case: EditLoginUseCase,
    on_saved: Optional[Callable[[SaveResult], Awaitable[None]]] = None,
    on_cancel: Optional[Callable[[], Awaitable[None]]] = None,
) -> tuple[ft.Container, dict]:
    """
    Create the edit form for a saved login.

    Features:
    - Read-only origin
    - Username and password inputs with inline errors
    - Clear buttons, enabled while the field has text
    - Save button driven by the session's save gate
    - Cancel asks for a second press when there are unsaved changes
    """
    session = use_case.session
    record = session.record
    pending = {"discard": False}

    def _refresh() -> None:
        if container.page:
            container.update()

    async def _on_username_change(e) -> None:
        session.on_username_changed(e.control.value or "")

    async def _on_password_change(e) -> None:
        session.on_password_changed(e.control.value or "")

    origin_input = ft.TextField(
        label="Site",
        value=record.origin,
        read_only=True,
        border_radius=Theme.RADIUS_MD,
        prefix_icon="language",
    )

    username_input = ft.TextField(
        label="Username",
        value=session.username.value,
        border_radius=Theme.RADIUS_MD,
        prefix_icon="person",
        expand=True,
        on_change=_on_username_change,
    )

    password_input = ft.TextField(
        label="Password",
        value=session.password.value,
        password=True,
        can_reveal_password=True,
        border_radius=Theme.RADIUS_MD,
        prefix_icon="lock",
        expand=True,
        on_change=_on_password_change,
    )

    async def _on_clear_username(e) -> None:
        username_input.value = ""
        session.on_username_changed("")

    async def _on_clear_password(e) -> None:
        password_input.value = ""
        session.on_password_changed("")

    clear_username_button = ft.IconButton(
        icon="clear",
        tooltip="Clear username",
        disabled=not session.username.can_clear,
        on_click=_on_clear_username,
    )

    clear_password_button = ft.IconButton(
        icon="clear",
        tooltip="Clear password",
        disabled=not session.password.can_clear,
        on_click=_on_clear_password,
    )

    status_text = ft.Text(
        LOOKUP_PENDING_TEXT,
        size=12,
        color=Theme.DARK_TEXT_SECONDARY,
    )

    result_text = ft.Text("", size=12, color=Theme.ERROR)

    async def _on_save(e) -> None:
        """Persist the edit if the gate is open."""
        if not session.can_save:
            return

        result = await use_case.save()
        if not result.is_saved:
            result_text.value = f"Could not save: {result.message}"
            _refresh()
            return

        if on_saved:
            await on_saved(result)

    async def _on_cancel(e) -> None:
        """Leave the form, confirming first if anything changed."""
        if session.state.is_dirty and not pending["discard"]:
            pending["discard"] = True
            result_text.value = CONFIRM_DISCARD_TEXT
            _refresh()
            return

        if on_cancel:
            await on_cancel()

    save_button = ft.ElevatedButton(
        "Save",
        icon="save",
        disabled=not session.can_save,
        on_click=_on_save,
    )

    cancel_button = ft.OutlinedButton(
        "Cancel",
        icon="close",
        on_click=_on_cancel,
    )

    container = ft.Container(
        content=ft.Column([
            ft.Text("Edit login", size=18, weight="bold"),
            origin_input,
            ft.Row([username_input, clear_username_button]),
            ft.Row([password_input, clear_password_button]),
            status_text,
            ft.Row([save_button, cancel_button], spacing=Theme.SPACING_MD),
            result_text,
        ], spacing=Theme.SPACING_MD),
        **Theme.card_style(),
    )

    controls = {
        "username_input": username_input,
        "password_input": password_input,
        "clear_username_button": clear_username_button,
        "clear_password_button": clear_password_button,
        "status_text": status_text,
        "result_text": result_text,
        "save_button": save_button,
        "cancel_button": cancel_button,
        "pending": pending,
    }

    return container, controls


class EditLoginPanel:
    """Wrapper class binding the edit form to its session."""

    def __init__(
        self,
        use_case: EditLoginUseCase,
        on_saved: Optional[Callable[[SaveResult], Awaitable[None]]] = None,
        on_cancel: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self.use_case = use_case
        self.container, self._controls = create_edit_login_panel(
            use_case, on_saved, on_cancel
        )
        use_case.session.add_listener(self._on_state_change)

    def _refresh(self) -> None:
        if self.container.page:
            self.container.update()

    def _on_state_change(self, old: EditState, new: EditState) -> None:
        """Redraw the parts of the form that changed."""
        if old.username != new.username:
            self._controls["username_input"].error_text = new.username.error_message
            self._controls["clear_username_button"].disabled = not new.username.can_clear

        if old.password != new.password:
            self._controls["password_input"].error_text = new.password.error_message
            self._controls["clear_password_button"].disabled = not new.password.can_clear

        if old.phase != new.phase and new.phase == SessionPhase.READY:
            self._controls["status_text"].value = ""

        self._controls["save_button"].disabled = not new.can_save
        self._controls["result_text"].value = ""
        self._controls["pending"]["discard"] = False
        self._refresh()

    async def load_duplicates(self) -> bool:
        """Run the duplicate lookup and report a failure inline."""
        delivered = await self.use_case.load_duplicates()
        if not delivered:
            self._controls["status_text"].value = LOOKUP_FAILED_TEXT
            self._refresh()
        return delivered

    def dispose(self) -> None:
        """Detach from the session."""
        self.use_case.session.remove_listener(self._on_state_change)

    def __getattr__(self, name):
        return getattr(self.container, name)
