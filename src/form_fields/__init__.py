"""
form-fields: Form Field Projection for Python Records.

Turn any dataclass or pydantic model into the ordered list of form
fields a template needs to render it. Nested records are flattened
into dotted keys, and per-field annotation strings tune the output.

Simple Usage:
    from dataclasses import dataclass, field
    from form_fields import project

    @dataclass
    class Address:
        street1: str = ""

    @dataclass
    class Signup:
        name: str = field(default="", metadata={"form": "label=Full Name"})
        password: str = field(default="", metadata={"form": "type=password"})
        address: Address | None = field(default=None, metadata={"form": "header=true"})

    fields = project(Signup(name="Michael Scott"))
    # -> name, password, section "address", address.street1

Annotation strings:
    name=...         Replace the whole flattened key
    label=...        Caption (defaults to the field name)
    placeholder=...  Hint text (defaults to the label)
    type=...         Input type (defaults to "text")
    value=...        Hardcoded value
    id=...           HTML id
    footer=...       Trusted markup shown below the field
    readonly=true    Read-only control
    header=true      Section marker before a nested record's fields
    -                Skip the field (and its nested fields)

Annotated Usage:
    from typing import Annotated
    from form_fields import FormTag

    class Login(BaseModel):
        password: Annotated[str, FormTag("type=password")] = ""

Errors:
    from form_fields import project_form, FieldValidationError

    form = project_form(signup, errors=[
        FieldValidationError(field_name="name", message="is required"),
    ])
    form.get("name").errors  # ["is required"]

Logging:
    from form_fields.logs import setup_logging

    setup_logging(level="DEBUG")
"""

from form_fields.projector import (
    FieldProjector,
    project,
    project_form,
    stringify,
)
from form_fields.tags import parse_tag
from form_fields.shape import (
    FormTag,
    record_shape,
)
from form_fields.overlay import apply_errors
from form_fields.models import (
    FieldDirectives,
    FieldValidationError,
    FormField,
    ProjectedForm,
    TrustedHTML,
    ValidationResult,
)
from form_fields.errors import (
    FormFieldsError,
    RecursiveRecordError,
    UnresolvedAnnotationError,
    UnsupportedFieldTypeError,
    UnsupportedRecordError,
)
from form_fields.logs import (
    setup_logging,
    disable_logging,
    enable_logging,
)

__all__ = [
    # Main interface
    "FieldProjector",
    "project",
    "project_form",
    "stringify",
    # Annotation strings
    "parse_tag",
    "FormTag",
    "FieldDirectives",
    # Shape
    "record_shape",
    # Output models
    "FormField",
    "ProjectedForm",
    "TrustedHTML",
    # Errors shown with fields
    "apply_errors",
    "FieldValidationError",
    "ValidationResult",
    # Exceptions
    "FormFieldsError",
    "RecursiveRecordError",
    "UnresolvedAnnotationError",
    "UnsupportedFieldTypeError",
    "UnsupportedRecordError",
    # Logging
    "setup_logging",
    "disable_logging",
    "enable_logging",
]

__version__ = "0.1.0"
