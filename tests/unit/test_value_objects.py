"""
Unit tests for domain value objects.
"""

import pytest

from src.domain.value_objects import (
    CredentialRecord,
    DuplicateIndex,
    EditState,
    ErrorKind,
    FieldState,
    SessionPhase,
)


class TestCredentialRecord:
    """Tests for CredentialRecord."""
    
    def test_create_record(self):
        """Should create record with all fields."""
        record = CredentialRecord(
            id="guid-1",
            origin="https://example.com",
            username="alice",
            password="secret",
        )
        
        assert record.id == "guid-1"
        assert record.origin == "https://example.com"
    
    def test_requires_id(self):
        """Should raise error without id."""
        with pytest.raises(ValueError, match="id is required"):
            CredentialRecord(id="", origin="https://example.com", username="a", password="p")
    
    def test_allows_empty_username(self):
        """Logins without a username are valid records."""
        record = CredentialRecord(id="1", origin="https://example.com", username="", password="p")
        assert record.username == ""
    
    def test_is_immutable(self):
        """Records cannot be modified."""
        record = CredentialRecord(id="1", origin="https://example.com", username="a", password="p")
        with pytest.raises(AttributeError):
            record.username = "b"  # type: ignore


class TestFieldState:
    """Tests for FieldState."""
    
    def test_clean_field(self):
        """Clean field is valid and not dirty."""
        state = FieldState.clean("alice")
        
        assert state.dirty is False
        assert state.valid is True
        assert state.error_kind is None
    
    def test_invalid_field(self):
        """Invalid field carries its error kind."""
        state = FieldState.invalid("", ErrorKind.EMPTY_PASSWORD)
        
        assert state.dirty is True
        assert state.valid is False
        assert state.error_kind == ErrorKind.EMPTY_PASSWORD
        assert state.error_message == "Password required"
    
    def test_valid_field_cannot_have_error(self):
        """Should reject a valid field with an error kind."""
        with pytest.raises(ValueError):
            FieldState(value="x", valid=True, error_kind=ErrorKind.DUPLICATE_USERNAME)
    
    def test_invalid_field_requires_error(self):
        """Should reject an invalid field without an error kind."""
        with pytest.raises(ValueError):
            FieldState(value="x", dirty=True, valid=False)
    
    def test_can_clear(self):
        """Only fields with text can be cleared."""
        assert FieldState.clean("alice").can_clear is True
        assert FieldState.invalid("", ErrorKind.EMPTY_PASSWORD).can_clear is False


class TestErrorKind:
    """Tests for ErrorKind messages."""
    
    def test_messages(self):
        """Every error kind has inline text."""
        assert "already exists" in ErrorKind.DUPLICATE_USERNAME.message
        assert ErrorKind.EMPTY_PASSWORD.message == "Password required"


class TestDuplicateIndex:
    """Tests for DuplicateIndex."""
    
    def test_pending_index(self):
        """Pending index is empty and not loaded."""
        index = DuplicateIndex.pending()
        
        assert index.loaded is False
        assert len(index) == 0
        assert index.contains("bob") is False
    
    def test_contains_is_exact(self):
        """Membership is case-sensitive with no trimming."""
        index = DuplicateIndex.of(["bob"])
        
        assert index.contains("bob") is True
        assert index.contains("Bob") is False
        assert index.contains("bob ") is False
    
    def test_replace_supersedes(self):
        """Replacement drops every earlier entry."""
        first = DuplicateIndex.of(["bob", "carol"])
        second = first.replace(["dave"])
        
        assert second.loaded is True
        assert second.contains("dave") is True
        assert second.contains("bob") is False
        assert first.contains("bob") is True
    
    def test_replace_with_empty_set_is_loaded(self):
        """An empty delivery still marks the index as loaded."""
        index = DuplicateIndex.pending().replace([])
        
        assert index.loaded is True
        assert len(index) == 0
    
    def test_from_records_excludes_own_id(self):
        """The edited login never counts as its own duplicate."""
        records = [
            CredentialRecord(id="1", origin="https://example.com", username="alice", password="p"),
            CredentialRecord(id="2", origin="https://example.com", username="bob", password="p"),
        ]
        
        index = DuplicateIndex.from_records(records, exclude_id="1")
        
        assert index.contains("alice") is False
        assert index.contains("bob") is True
    
    def test_accepts_any_iterable(self):
        """Usernames are normalized to a frozenset."""
        index = DuplicateIndex(usernames=["a", "a", "b"], loaded=True)  # type: ignore
        
        assert index.usernames == frozenset({"a", "b"})


class TestEditState:
    """Tests for the EditState snapshot."""
    
    @pytest.fixture
    def record(self) -> CredentialRecord:
        return CredentialRecord(id="1", origin="https://example.com", username="alice", password="secret")
    
    def test_gate_closed_when_clean(self, record: CredentialRecord):
        """Unchanged form cannot be saved."""
        state = EditState(
            record=record,
            username=FieldState.clean("alice"),
            password=FieldState.clean("secret"),
            duplicates=DuplicateIndex.pending(),
        )
        
        assert state.can_save is False
        assert state.is_dirty is False
        assert state.phase == SessionPhase.LOADING
    
    def test_gate_open_when_dirty_and_valid(self, record: CredentialRecord):
        """A valid change opens the gate."""
        state = EditState(
            record=record,
            username=FieldState(value="bob", dirty=True),
            password=FieldState.clean("secret"),
            duplicates=DuplicateIndex.of([]),
        )
        
        assert state.can_save is True
        assert state.phase == SessionPhase.READY
    
    def test_gate_closed_when_any_field_invalid(self, record: CredentialRecord):
        """An invalid field keeps the gate closed."""
        state = EditState(
            record=record,
            username=FieldState(value="bob", dirty=True),
            password=FieldState.invalid("", ErrorKind.EMPTY_PASSWORD),
            duplicates=DuplicateIndex.of([]),
        )
        
        assert state.can_save is False
        assert state.is_dirty is True


class TestDuplicateIndexRejectsStr:
    """A bare string is not a set of usernames."""
    
    def test_of_rejects_str(self):
        """Should not split a username into characters."""
        with pytest.raises(TypeError):
            DuplicateIndex.of("bob")
    
    def test_replace_rejects_str(self):
        """Replacement with a bare string is refused."""
        with pytest.raises(TypeError):
            DuplicateIndex.pending().replace("bob")
    
    def test_constructor_rejects_str(self):
        """Direct construction with a bare string is refused."""
        with pytest.raises(TypeError):
            DuplicateIndex(usernames="bob", loaded=True)  # type: ignore
