"""
Form field descriptor models.

These models represent the output of the field projector: an ordered
list of descriptors a rendering layer turns into HTML input controls.
"""

from typing import Any

from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema

SECTION_TYPE = "section"


class TrustedHTML(str):
    """
    A string of pre-sanitized markup.

    Template engines that honour the ``__html__`` protocol (Jinja2,
    Mako, Django) emit it verbatim instead of escaping it.
    """

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"TrustedHTML({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())


class FormField(BaseModel):
    """A single projected form field."""

    name: str = Field(..., description="Flattened key, used as the submission key")
    label: str = Field(..., description="Human-readable caption")
    placeholder: str = Field(default="", description="Hint text")
    type: str = Field(default="text", description="Input kind: text, password, section, ...")
    value: str = Field(default="", description="Current value, stringified")
    id: str | None = Field(default=None, description="HTML id attribute")
    footer: TrustedHTML | None = Field(
        default=None,
        description="Trusted markup rendered below the field, never escaped",
    )
    read_only: bool = Field(default=False, description="Whether the control is editable")
    errors: list[str] = Field(
        default_factory=list, description="Error messages shown with the field"
    )

    @property
    def is_section(self) -> bool:
        """Whether this descriptor is a section marker rather than an input."""
        return self.type == SECTION_TYPE

    def to_config(self) -> dict[str, Any]:
        """Export as a camelCase dict for client-side renderers."""
        config: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "placeholder": self.placeholder,
            "type": self.type,
            "value": self.value,
            "readOnly": self.read_only,
        }
        if self.id is not None:
            config["id"] = self.id
        if self.footer is not None:
            config["footer"] = str(self.footer)
        if self.errors:
            config["errors"] = list(self.errors)
        return config


class ProjectedForm(BaseModel):
    """
    Ordered collection of projected fields.

    Thin container around the projector output with lookups and a
    JSON-ready export.
    """

    fields: list[FormField] = Field(default_factory=list, description="Fields in render order")

    def names(self) -> list[str]:
        """Flattened keys of every input field, in order. Section markers are excluded."""
        return [f.name for f in self.fields if not f.is_section]

    def get(self, name: str) -> FormField | None:
        """Get the first input field with the given flattened key."""
        for field in self.fields:
            if field.name == name and not field.is_section:
                return field
        return None

    def sections(self) -> list[FormField]:
        return [f for f in self.fields if f.is_section]

    def to_form_config(self) -> dict[str, Any]:
        """Export complete form configuration for client libraries."""
        return {"fields": [f.to_config() for f in self.fields]}
