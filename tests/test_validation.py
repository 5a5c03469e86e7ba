"""
NoteVault Backend — Request Validation Tests
============================================

What:  Tests for the explicit boundary validators in notevault/validation.py.
How:   Plain function calls on raw payloads; no HTTP involved.
"""

import pytest

from notevault.exceptions import ValidationError
from notevault.validation import (
    validate_auth,
    validate_create_note,
    validate_edit_note,
    validate_edit_user,
)


class TestValidateAuth:
    def test_valid_payload(self):
        result = validate_auth({"email": "foo@baz.com", "password": "foobaz"})

        assert result.ok
        assert result.value.email == "foo@baz.com"
        assert result.value.password == "foobaz"

    def test_missing_email(self):
        result = validate_auth({"password": "foobaz"})

        assert not result.ok
        assert result.errors["email"] == ["Email is not provided"]

    def test_empty_body(self):
        """A request without a body reports every required field."""
        result = validate_auth(None)

        assert result.errors == {
            "email": ["Email is not provided"],
            "password": ["Password is not provided"],
        }

    def test_blank_email(self):
        result = validate_auth({"email": "   ", "password": "foobaz"})
        assert result.errors["email"] == ["Email is not provided"]

    def test_invalid_email(self):
        result = validate_auth({"email": "not-an-email", "password": "foobaz"})
        assert result.errors["email"] == ["Email is not valid"]

    def test_empty_password(self):
        result = validate_auth({"email": "foo@baz.com", "password": ""})
        assert result.errors["password"] == ["Password is not provided"]

    def test_non_string_password(self):
        result = validate_auth({"email": "foo@baz.com", "password": 12345})
        assert "password" in result.errors

    def test_non_object_body(self):
        result = validate_auth(["foo@baz.com", "foobaz"])
        assert result.errors == {"body": ["Request body must be a JSON object"]}

    def test_unknown_fields_are_dropped(self):
        result = validate_auth({"email": "foo@baz.com", "password": "foobaz", "is_admin": True})

        assert result.ok
        assert not hasattr(result.value, "is_admin")

    def test_unwrap_raises_validation_error_with_fields(self):
        result = validate_auth({"email": "nope", "password": ""})

        with pytest.raises(ValidationError) as exc_info:
            result.unwrap()

        exc = exc_info.value
        assert exc.status_code == 400
        assert exc.message == "Email is not valid"
        assert exc.context["fields"]["password"] == ["Password is not provided"]


class TestValidateEditUser:
    def test_partial_payload_keeps_only_sent_fields(self):
        result = validate_edit_user({"firstname": "baz"})

        assert result.ok
        assert result.value.model_dump(exclude_unset=True) == {"firstname": "baz"}

    def test_empty_payload_is_valid_noop(self):
        result = validate_edit_user({})

        assert result.ok
        assert result.value.model_dump(exclude_unset=True) == {}

    def test_invalid_email_rejected(self):
        result = validate_edit_user({"email": "baz-at-foo"})
        assert result.errors["email"] == ["Email is not valid"]

    def test_null_email_rejected(self):
        result = validate_edit_user({"email": None})
        assert result.errors["email"] == ["Email is not valid"]


class TestValidateNotes:
    def test_create_requires_title(self):
        result = validate_create_note({"description": "baz note"})
        assert result.errors["title"] == ["Title is not provided"]

    def test_create_rejects_blank_title(self):
        result = validate_create_note({"title": "   "})
        assert result.errors["title"] == ["Title is not provided"]

    def test_create_defaults_description(self):
        result = validate_create_note({"title": "foo note"})

        assert result.ok
        assert result.value.description == ""

    def test_create_rejects_overlong_title(self):
        result = validate_create_note({"title": "x" * 256})
        assert "title" in result.errors

    def test_edit_accepts_partial_patch(self):
        result = validate_edit_note({"description": "new body"})

        assert result.ok
        assert result.value.model_dump(exclude_unset=True) == {"description": "new body"}

    def test_edit_rejects_empty_title(self):
        result = validate_edit_note({"title": ""})
        assert result.errors["title"] == ["Title is not provided"]
