# Use Cases Package
from .edit_login import EditLoginUseCase, SaveOutcome, SaveResult

__all__ = ["EditLoginUseCase", "SaveOutcome", "SaveResult"]
