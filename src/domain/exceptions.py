"""
Domain Exceptions.
"""


class LoginEditError(Exception):
    """Base error for the edit-login core."""


class GateClosedError(LoginEditError):
    """Raised when an edit is committed while the save gate is closed."""
    
    def __init__(self, message: str = "Cannot commit: edit is unchanged or invalid") -> None:
        super().__init__(message)
