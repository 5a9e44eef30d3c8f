# GUI Components
from .edit_login import EditLoginPanel

__all__ = ["EditLoginPanel"]
