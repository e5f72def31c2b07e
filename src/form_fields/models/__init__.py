"""
Data models for form-fields.

This module contains Pydantic models for:
- Parsed field directives
- Projected form fields (output)
- Field errors shown alongside projected fields
"""

from form_fields.models.directives import FieldDirectives
from form_fields.models.form_field import (
    SECTION_TYPE,
    FormField,
    ProjectedForm,
    TrustedHTML,
)
from form_fields.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Directives
    "FieldDirectives",
    # Output
    "FormField",
    "ProjectedForm",
    "TrustedHTML",
    "SECTION_TYPE",
    # Errors
    "FieldValidationError",
    "ValidationResult",
]
