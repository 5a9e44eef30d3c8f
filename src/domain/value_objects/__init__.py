# Domain Value Objects
from .credential_record import CredentialRecord, CommittedEdit
from .field_state import ErrorKind, FieldState
from .duplicate_index import DuplicateIndex
from .edit_state import EditState, SessionPhase

__all__ = [
    "CredentialRecord",
    "CommittedEdit",
    "ErrorKind",
    "FieldState",
    "DuplicateIndex",
    "EditState",
    "SessionPhase",
]
