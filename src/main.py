"""
LoginEdit - Edit saved logins with duplicate-aware validation.

Entry point for the application.
"""

import logging
import sys

import flet as ft

from src.config.settings import Settings, get_settings


def setup_logging(settings: Settings) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


async def main(page: ft.Page) -> None:
    """Main entry point - Flet app target."""
    from src.presentation.gui.app import build_app
    await build_app(page, get_settings())


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_view else ft.AppView.FLET_APP,
        port=settings.gui_port,
    )
