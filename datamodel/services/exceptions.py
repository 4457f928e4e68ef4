from typing import Any, Optional


class DataModelError(Exception):
    """Base exception for rejected creates and updates."""

    def __init__(self, model: str, field: Optional[str] = None, message: Optional[str] = None):
        self.model = model
        self.field = field
        super().__init__(message or self.default_message())

    def default_message(self) -> str:
        if self.field is None:
            return f"{self.model}: invalid value"
        return f"{self.model}: invalid value for '{self.field}'"


class MissingRequiredField(DataModelError):
    """Exception raised when a required field is absent or set to None."""

    def default_message(self) -> str:
        if self.field is None:
            return f"{self.model}: a required field is missing"
        return f"{self.model}: field '{self.field}' is required"


class UniquenessViolation(DataModelError):
    """Exception raised when a unique field collides with an existing record."""

    def __init__(self, model: str, field: Optional[str] = None, value: Any = None):
        self.value = value
        super().__init__(model, field)

    def default_message(self) -> str:
        if self.field is None:
            return f"{self.model}: unique constraint violated"
        return f"{self.model} with {self.field} '{self.value}' already exists"


class TypeMismatch(DataModelError):
    """Exception raised when a value cannot be coerced to the declared type."""
    pass
