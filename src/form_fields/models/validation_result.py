"""
Field error models.

These models carry errors produced elsewhere (a validator, a service
call) so they can be shown next to the projected fields they name.
"""

from pydantic import BaseModel, Field


class FieldValidationError(BaseModel):
    """Error reported against one flattened field key."""

    field_name: str = Field(..., description="Flattened key of the field with the error")
    message: str = Field(..., description="Human-readable error message")
    error_type: str = Field(default="invalid", description="Kind of error")


class ValidationResult(BaseModel):
    """A batch of field errors for one form submission."""

    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of field errors"
    )

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert errors to a dict mapping field names to error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            if error.field_name not in result:
                result[error.field_name] = []
            result[error.field_name].append(error.message)
        return result
