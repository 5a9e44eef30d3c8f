# Domain Services
from . import validation_engine
from .edit_session import EditSession, StateListener

__all__ = ["EditSession", "StateListener", "validation_engine"]
