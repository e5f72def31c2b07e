"""
Error overlay.

Attaches errors produced elsewhere to the projected fields they name,
so a template can show each message next to its input.
"""

from typing import Iterable

from form_fields.logs import logger
from form_fields.models.form_field import FormField
from form_fields.models.validation_result import FieldValidationError, ValidationResult


def apply_errors(
    fields: list[FormField],
    errors: ValidationResult | Iterable[FieldValidationError],
) -> list[FormField]:
    """
    Attach error messages to fields by flattened key.

    Args:
        fields: Projected fields.
        errors: A ValidationResult or any iterable of FieldValidationError.

    Returns:
        Copies of the fields with matching messages appended to ``errors``.
        The input fields are left untouched. Section markers never
        receive errors.
    """
    if not isinstance(errors, ValidationResult):
        errors = ValidationResult(errors=list(errors))
    messages = errors.to_error_dict()

    result: list[FormField] = []
    matched: set[str] = set()
    for field in fields:
        if field.is_section or field.name not in messages:
            result.append(field.model_copy(deep=True))
            continue
        matched.add(field.name)
        result.append(
            field.model_copy(update={"errors": [*field.errors, *messages[field.name]]})
        )

    unmatched = sorted(messages.keys() - matched)
    if unmatched:
        logger.debug(f"No projected field for errors on: {unmatched}")
    return result
