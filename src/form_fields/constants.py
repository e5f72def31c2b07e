"""
Constants for form-fields.

This module contains the directive grammar and the set of Python types
the projector renders as single inputs. Centralizing these makes them
easier to maintain and update.
"""

import datetime
import decimal
import enum
import uuid

# Directive grammar: "key=value;key=value" or the bare skip marker
TOKEN_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
SKIP_MARKER = "-"

# Metadata key holding the annotation string on dataclass / pydantic fields
DEFAULT_TAG_NAME = "form"

# Recognised directive keys (others are kept but have no effect)
KNOWN_DIRECTIVES = frozenset({
    "name",
    "label",
    "placeholder",
    "type",
    "value",
    "footer",
    "readonly",
    "id",
    "header",
})

DEFAULT_INPUT_TYPE = "text"
DEFAULT_PATH_SEPARATOR = "."

# Types rendered as a single input. bool is covered by int.
SCALAR_TYPES: tuple[type, ...] = (
    str,
    int,
    float,
    decimal.Decimal,
    datetime.date,
    datetime.time,
    uuid.UUID,
    enum.Enum,
)
