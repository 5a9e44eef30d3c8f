"""
Theme Configuration for the LoginEdit GUI.
"""

import flet as ft


class Theme:
    """Theme configuration for the application."""
    
    # Color palette
    PRIMARY = "#6366f1"  # Indigo
    SECONDARY = "#10b981"  # Emerald
    
    ERROR = "#ef4444"  # Red
    WARNING = "#f59e0b"  # Amber
    SUCCESS = "#22c55e"  # Green
    
    # Dark theme
    DARK_BG = "#0f172a"  # Slate 900
    DARK_CARD = "#334155"  # Slate 700
    DARK_TEXT_SECONDARY = "#94a3b8"  # Slate 400
    
    # Spacing
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24
    
    # Border radius
    RADIUS_MD = 8
    RADIUS_LG = 12
    
    @classmethod
    def get_flet_theme(cls) -> ft.Theme:
        """Get Flet theme configuration."""
        return ft.Theme(
            color_scheme_seed=cls.PRIMARY,
            color_scheme=ft.ColorScheme(
                primary=cls.PRIMARY,
                secondary=cls.SECONDARY,
                error=cls.ERROR,
            ),
        )
    
    @classmethod
    def card_style(cls) -> dict:
        """Get card styling."""
        return {
            "bgcolor": cls.DARK_CARD,
            "border_radius": cls.RADIUS_LG,
            "padding": cls.SPACING_MD,
        }
