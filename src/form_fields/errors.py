"""
Exceptions raised by form-fields.

Malformed annotation strings never raise; only record shapes the
projector cannot render do.
"""

from typing import Any


class FormFieldsError(Exception):
    """Base class for form-fields errors."""


class UnsupportedRecordError(FormFieldsError, TypeError):
    """The value passed to the projector is not a dataclass or pydantic model."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Cannot project {type(value).__name__!s}: expected a dataclass or "
            f"pydantic model (class or instance)"
        )


class UnsupportedFieldTypeError(FormFieldsError, TypeError):
    """A non-skipped field is neither a scalar nor a nested record."""

    def __init__(self, record: type, field: str, annotation: Any, reason: str | None = None):
        self.record = record
        self.field = field
        self.annotation = annotation
        reason = reason or f"unsupported field type {annotation!r}"
        super().__init__(
            f"Cannot project {record.__name__}.{field}: {reason} "
            f"(mark it with '-' to skip it)"
        )


class RecursiveRecordError(UnsupportedFieldTypeError):
    """A nested record field refers back to a record already being projected."""

    def __init__(self, record: type, field: str, annotation: Any, path: tuple[type, ...]):
        self.path = path
        chain = " -> ".join(t.__name__ for t in path)
        super().__init__(
            record,
            field,
            annotation,
            reason=f"recursive record type ({chain} -> {field})",
        )


class UnresolvedAnnotationError(UnsupportedFieldTypeError):
    """A field's string annotation names a type that cannot be found."""

    def __init__(self, record: type, field: str, annotation: Any, reference: str | None):
        self.reference = reference
        missing = f"name {reference!r} is not defined" if reference else "cannot be evaluated"
        super().__init__(
            record,
            field,
            annotation,
            reason=f"unresolved annotation {annotation!r}: {missing}",
        )
