"""
Annotation string parser.

Decodes a field's annotation string into ``FieldDirectives``:

    >>> parse_tag("label=Full Name;id=name").label
    'Full Name'
    >>> parse_tag("-").skip
    True
"""

from form_fields.constants import (
    KEY_VALUE_SEPARATOR,
    SKIP_MARKER,
    TOKEN_SEPARATOR,
)
from form_fields.models.directives import FieldDirectives


def split_directives(tag: str | None) -> dict[str, str] | None:
    """
    Split an annotation string into a key/value mapping.

    Returns None when the string carries the skip marker. Tokens are
    split on the first ``=`` only, so values may contain ``=``. Keys and
    values are both stripped of surrounding whitespace; whitespace inside
    a value is kept. Tokens without ``=`` are ignored.
    """
    raw: dict[str, str] = {}
    if not tag or not tag.strip():
        return raw

    for token in tag.split(TOKEN_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        if token == SKIP_MARKER:
            return None
        key, sep, value = token.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            continue
        key = key.strip()
        if key:
            raw[key] = value.strip()
    return raw


def parse_tag(tag: str | None) -> FieldDirectives:
    """Parse an annotation string (or None) into typed directives."""
    raw = split_directives(tag)
    if raw is None:
        return FieldDirectives.skipped()
    return FieldDirectives.from_mapping(raw)
