"""
LoginEdit Main Application - Flet GUI over the saved-login store.

Shows the stored logins; choosing one opens the edit form.
"""

import logging

import flet as ft

from src.application.use_cases import EditLoginUseCase, SaveResult
from src.config.settings import Settings
from src.domain.value_objects import CredentialRecord
from src.infrastructure.storage import SQLiteAdapter

from .components import EditLoginPanel
from .styles import Theme


logger = logging.getLogger(__name__)


async def build_app(page: ft.Page, settings: Settings) -> None:
    """Build the LoginEdit application."""
    
    # === PAGE CONFIGURATION ===
    page.title = "LoginEdit - Saved Logins"
    page.theme = Theme.get_flet_theme()
    page.theme_mode = ft.ThemeMode.DARK
    page.bgcolor = Theme.DARK_BG
    page.padding = 20
    page.scroll = ft.ScrollMode.AUTO
    
    # === STORAGE ===
    store = SQLiteAdapter(settings.database_path)
    await store.initialize()
    
    async def _on_disconnect(e) -> None:
        await store.close()
    
    page.on_disconnect = _on_disconnect
    
    body = ft.Column(spacing=Theme.SPACING_MD)
    notice = ft.Text("", color=Theme.SUCCESS)
    state = {"panel": None}
    
    # === LOGIN LIST ===
    async def show_list() -> None:
        if state["panel"]:
            state["panel"].dispose()
            state["panel"] = None
        
        logins = await store.get_logins()
        rows: list[ft.Control] = []
        for login in logins:
            async def _open(e, record: CredentialRecord = login) -> None:
                await show_editor(record)
            
            rows.append(
                ft.ListTile(
                    leading=ft.Icon("key"),
                    title=ft.Text(login.origin),
                    subtitle=ft.Text(login.username or "(no username)"),
                    on_click=_open,
                )
            )
        
        if not rows:
            rows.append(ft.Text("No saved logins", color=Theme.DARK_TEXT_SECONDARY))
        
        body.controls = [ft.Text("Saved logins", size=18, weight="bold"), notice, *rows]
        page.update()
    
    # === EDITOR ===
    async def show_editor(record: CredentialRecord) -> None:
        use_case = EditLoginUseCase(store, record)
        
        async def _on_saved(result: SaveResult) -> None:
            notice.value = f"Saved changes for {record.origin}"
            await show_list()
        
        async def _on_cancel() -> None:
            notice.value = ""
            await show_list()
        
        panel = EditLoginPanel(use_case, on_saved=_on_saved, on_cancel=_on_cancel)
        state["panel"] = panel
        body.controls = [panel.container]
        page.update()
        
        # Duplicates arrive while the user may already be typing
        page.run_task(panel.load_duplicates)
    
    page.add(body)
    await show_list()
