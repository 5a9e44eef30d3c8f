"""
Field State Value Object - Draft value of one editable field.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Why a field is currently invalid."""
    
    DUPLICATE_USERNAME = "duplicate_username"
    EMPTY_PASSWORD = "empty_password"

    @property
    def message(self) -> str:
        """Inline error text for the field."""
        messages = {
            ErrorKind.DUPLICATE_USERNAME: "A login with this username already exists",
            ErrorKind.EMPTY_PASSWORD: "Password required",
        }
        return messages[self]


@dataclass(frozen=True)
class FieldState:
    """
    Immutable state of a single form field.
    
    Attributes:
        value: Current draft text
        dirty: Whether the value differs from the stored one
        valid: Whether the field rule passes
        error_kind: Reason for invalidity (set iff not valid)
    """
    
    value: str
    dirty: bool = False
    valid: bool = True
    error_kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        """Enforce valid/error_kind consistency."""
        if self.valid and self.error_kind is not None:
            raise ValueError("A valid field cannot carry an error")
        if not self.valid and self.error_kind is None:
            raise ValueError("An invalid field requires an error_kind")

    @classmethod
    def clean(cls, value: str) -> "FieldState":
        """Field showing its stored value."""
        return cls(value=value)

    @classmethod
    def invalid(cls, value: str, error_kind: ErrorKind) -> "FieldState":
        """Dirty field failing its rule."""
        return cls(value=value, dirty=True, valid=False, error_kind=error_kind)

    @property
    def can_clear(self) -> bool:
        """Whether there is any text to clear."""
        return bool(self.value)

    @property
    def error_message(self) -> Optional[str]:
        """Inline error text, if any."""
        return self.error_kind.message if self.error_kind else None
