"""
Field Projector.

This is the main entry point for form-fields. Give it a record (a
dataclass or pydantic model, class or instance) and get back the
ordered form fields a template can render.
"""

import datetime
import decimal
import enum
from typing import Any, Iterable

from form_fields.config import get_config
from form_fields.constants import KNOWN_DIRECTIVES
from form_fields.errors import (
    RecursiveRecordError,
    UnresolvedAnnotationError,
    UnsupportedFieldTypeError,
    UnsupportedRecordError,
)
from form_fields.logs import logger
from form_fields.models.directives import FieldDirectives
from form_fields.models.form_field import SECTION_TYPE, FormField, ProjectedForm, TrustedHTML
from form_fields.models.validation_result import FieldValidationError, ValidationResult
from form_fields.overlay import apply_errors
from form_fields.shape import FieldKind, is_record, record_shape
from form_fields.tags import parse_tag


class _EmptyRecord:
    """Value source for an absent record: every field reads as None."""

    def __getattr__(self, name: str) -> None:
        return None

    def __repr__(self) -> str:
        return "EMPTY_RECORD"


EMPTY_RECORD = _EmptyRecord()


def stringify(value: Any) -> str:
    """
    Render a field value as input text.

    None and zero values (``""``, ``0``, ``0.0``, ``False``) render as
    an empty string. Enum members render their value, dates and times
    their ISO format.
    """
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return stringify(value.value)
    if isinstance(value, bool):
        return "true" if value else ""
    if isinstance(value, (int, float, decimal.Decimal)) and value == 0:
        return ""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


class FieldProjector:
    """
    Projects records onto ordered form fields.

    Usage:
        projector = FieldProjector()

        fields = projector.project(signup)
        for field in fields:
            print(field.name, field.type, field.value)
    """

    def __init__(
        self,
        tag_name: str | None = None,
        default_input_type: str | None = None,
        path_separator: str | None = None,
        strict_types: bool | None = None,
    ):
        """
        Initialize the projector.

        Args:
            tag_name: Metadata key holding annotation strings. If None, uses config.tag_name.
            default_input_type: Input type for fields without a type directive.
            path_separator: Joins parent and child names in flattened keys.
            strict_types: Raise on unsupported field types instead of dropping them.
        """
        config = get_config()
        self.tag_name = config.tag_name if tag_name is None else tag_name
        self.default_input_type = (
            config.default_input_type if default_input_type is None else default_input_type
        )
        self.path_separator = config.path_separator if path_separator is None else path_separator
        self.strict_types = config.strict_types if strict_types is None else strict_types

    def project(self, record: Any) -> list[FormField]:
        """
        Project a record onto form fields.

        Args:
            record: A dataclass or pydantic model instance, or the class
                itself to get fields with empty values.

        Returns:
            Fields in declaration order, nested records flattened in place.

        Raises:
            UnsupportedRecordError: If ``record`` is not a record.
            UnsupportedFieldTypeError: If a non-skipped field is neither a
                scalar nor a record (when strict_types is enabled).
            RecursiveRecordError: If a nested record field refers back to a
                record on the current path (when strict_types is enabled).
            UnresolvedAnnotationError: If a string annotation names an
                undefined type (when strict_types is enabled).
        """
        if not is_record(record):
            raise UnsupportedRecordError(record)

        if isinstance(record, type):
            record_type, source = record, EMPTY_RECORD
        else:
            record_type, source = type(record), record

        logger.debug(f"Projecting {record_type.__name__}")
        fields: list[FormField] = []
        self._walk(record_type, source, None, fields, (record_type,))
        logger.debug(f"Projected {record_type.__name__} onto {len(fields)} fields")
        return fields

    def _walk(
        self,
        record_type: type,
        source: Any,
        prefix: str | None,
        out: list[FormField],
        ancestors: tuple[type, ...],
    ) -> None:
        # ancestors holds the record types on the current descent path, outermost first
        for shape in record_shape(record_type, self.tag_name):
            directives = parse_tag(shape.tag)
            if directives.skip:
                logger.debug(f"Skipping {record_type.__name__}.{shape.name}")
                continue

            unknown = directives.raw.keys() - KNOWN_DIRECTIVES
            if unknown:
                logger.debug(
                    f"Ignoring unknown directives on {record_type.__name__}.{shape.name}: "
                    f"{sorted(unknown)}"
                )

            key = self._flatten(prefix, shape.name, directives)
            value = getattr(source, shape.name, None)

            if shape.kind is FieldKind.RECORD:
                if shape.record_type in ancestors:
                    self._reject(
                        RecursiveRecordError(
                            record_type, shape.name, shape.annotation, ancestors
                        )
                    )
                    continue
                if directives.header:
                    out.append(self._section(shape.name, directives))
                nested = value if value is not None else EMPTY_RECORD
                logger.debug(f"Descending into {key} ({shape.record_type.__name__})")
                self._walk(
                    shape.record_type, nested, key, out, ancestors + (shape.record_type,)
                )
            elif shape.kind is FieldKind.SCALAR:
                out.append(self._leaf(key, shape.name, value, directives))
            elif shape.kind is FieldKind.UNRESOLVED:
                self._reject(
                    UnresolvedAnnotationError(
                        record_type, shape.name, shape.annotation, shape.unresolved
                    )
                )
            else:
                self._reject(
                    UnsupportedFieldTypeError(record_type, shape.name, shape.annotation)
                )

    def _reject(self, error: UnsupportedFieldTypeError) -> None:
        if self.strict_types:
            raise error
        logger.warning(f"Dropping field: {error}")

    def _flatten(self, prefix: str | None, name: str, directives: FieldDirectives) -> str:
        # A name override replaces the whole accumulated path
        if directives.name:
            return directives.name
        if prefix is None:
            return name
        return f"{prefix}{self.path_separator}{name}"

    def _section(self, name: str, directives: FieldDirectives) -> FormField:
        return FormField(
            name=name,
            label=name,
            type=SECTION_TYPE,
            id=name.lower(),
            read_only=directives.read_only,
        )

    def _leaf(self, key: str, name: str, value: Any, directives: FieldDirectives) -> FormField:
        label = directives.label if directives.label is not None else name
        return FormField(
            name=key,
            label=label,
            placeholder=directives.placeholder if directives.placeholder is not None else label,
            type=directives.type or self.default_input_type,
            value=directives.value if directives.value is not None else stringify(value),
            id=directives.id,
            footer=TrustedHTML(directives.footer) if directives.footer is not None else None,
            read_only=directives.read_only,
        )


def project(record: Any, **options: Any) -> list[FormField]:
    """
    Project a record onto form fields.

    Simple function interface for one-off projections. Keyword options
    are passed to ``FieldProjector``.

    Example:
        >>> @dataclass
        ... class Login:
        ...     email: str = ""
        >>> [f.name for f in project(Login)]
        ['email']
    """
    return FieldProjector(**options).project(record)


def project_form(
    record: Any,
    errors: ValidationResult | Iterable[FieldValidationError] | None = None,
    **options: Any,
) -> ProjectedForm:
    """Project a record and attach any field errors to the result."""
    fields = project(record, **options)
    if errors is not None:
        fields = apply_errors(fields, errors)
    return ProjectedForm(fields=fields)
