"""
Directive models for field annotation strings.

A field's annotation string (``"label=Full Name;id=name"``) is decoded
once into a ``FieldDirectives`` instance so the projector works with
typed attributes instead of raw string lookups.
"""

from pydantic import BaseModel, Field


class FieldDirectives(BaseModel):
    """
    Parsed directives for one record field.

    Every ``key=value`` pair is kept in ``raw``, including keys with no
    defined effect. The typed attributes mirror the recognised keys.
    """

    name: str | None = Field(default=None, description="Override for the whole flattened key")
    label: str | None = Field(default=None, description="Caption override")
    placeholder: str | None = Field(default=None, description="Placeholder override")
    type: str | None = Field(default=None, description="Input type override")
    value: str | None = Field(default=None, description="Hardcoded value, ignores the instance")
    footer: str | None = Field(default=None, description="Trusted markup below the field")
    id: str | None = Field(default=None, description="HTML id attribute")
    read_only: bool = Field(default=False, description="Set by readonly=true")
    header: bool = Field(default=False, description="Emit a section marker before nested fields")
    skip: bool = Field(default=False, description="Set by the bare '-' marker")
    raw: dict[str, str] = Field(
        default_factory=dict, description="Every parsed key/value pair"
    )

    @classmethod
    def from_mapping(cls, raw: dict[str, str]) -> "FieldDirectives":
        """Build typed directives from a parsed key/value mapping."""
        return cls(
            name=raw.get("name"),
            label=raw.get("label"),
            placeholder=raw.get("placeholder"),
            type=raw.get("type"),
            value=raw.get("value"),
            footer=raw.get("footer"),
            id=raw.get("id"),
            read_only=raw.get("readonly") == "true",
            header=raw.get("header") == "true",
            raw=dict(raw),
        )

    @classmethod
    def skipped(cls) -> "FieldDirectives":
        return cls(skip=True)
