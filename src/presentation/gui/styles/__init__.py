# GUI Styles
from .theme import Theme

__all__ = ["Theme"]
