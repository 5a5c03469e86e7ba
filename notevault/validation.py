"""
NoteVault Backend — Request Validation
======================================

What:  Explicit validation functions run at the HTTP boundary before any
       service is called.
How:   Each function takes the raw JSON body (or None when the body is empty),
       validates it against a request schema and returns a ValidationResult:
       either the parsed model, or a mapping of field → messages.
Who:   Route handlers; they call `.unwrap()` which raises ValidationError (400).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from notevault.exceptions import ValidationError
from notevault.schemas.auth import AuthRequest, EditUserRequest
from notevault.schemas.note import CreateNoteRequest, EditNoteRequest

ModelT = TypeVar("ModelT", bound=BaseModel)

# Messages for fields that are absent from the body altogether
MISSING_MESSAGES: Dict[str, str] = {
    "email": "Email is not provided",
    "password": "Password is not provided",
    "title": "Title is not provided",
}


@dataclass
class ValidationResult(Generic[ModelT]):
    """Outcome of validating a request body: a value, or field-level errors."""

    value: Optional[ModelT] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        """First error message, used as the top-level response message."""
        for messages in self.errors.values():
            if messages:
                return messages[0]
        return "Validation failed"

    def unwrap(self) -> ModelT:
        """Return the validated model or raise ValidationError with every field message."""
        if not self.ok:
            raise ValidationError(message=self.message, errors=self.errors)
        return self.value


def field_messages(
    exc: PydanticValidationError,
    missing: Mapping[str, str] = MISSING_MESSAGES,
) -> Dict[str, List[str]]:
    """Flatten a pydantic error into {field: [message, ...]}."""
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        name = ".".join(str(part) for part in loc) or "body"
        if err["type"] == "missing":
            message = missing.get(name, f"{name} is required")
        elif err["type"] == "value_error" and "error" in err.get("ctx", {}):
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        errors.setdefault(name, []).append(message)
    return errors


def _validate(model: Type[ModelT], payload: Any) -> ValidationResult[ModelT]:
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return ValidationResult(errors={"body": ["Request body must be a JSON object"]})
    try:
        return ValidationResult(value=model.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult(errors=field_messages(exc))


def validate_auth(payload: Any) -> ValidationResult[AuthRequest]:
    """Validate a signup/signin body: email present and well-formed, password present."""
    return _validate(AuthRequest, payload)


def validate_edit_user(payload: Any) -> ValidationResult[EditUserRequest]:
    return _validate(EditUserRequest, payload)


def validate_create_note(payload: Any) -> ValidationResult[CreateNoteRequest]:
    """Validate a new note: title required and non-empty, description optional."""
    return _validate(CreateNoteRequest, payload)


def validate_edit_note(payload: Any) -> ValidationResult[EditNoteRequest]:
    return _validate(EditNoteRequest, payload)
