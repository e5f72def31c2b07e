"""
Record shape introspection.

Reads the declared fields of a dataclass or pydantic model, in
declaration order, and classifies each one so the projector can walk
any record type with a single recursive function. Shapes depend on the
type only, never on an instance, and are cached per type.
"""

import dataclasses
import enum
import functools
import sys
import types
import typing
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from form_fields.constants import DEFAULT_TAG_NAME, SCALAR_TYPES
from form_fields.logs import logger


@dataclass(frozen=True)
class FormTag:
    """
    Annotation string attached with ``typing.Annotated``.

    Example:
        @dataclass
        class Signup:
            password: Annotated[str, FormTag("type=password")] = ""
    """

    tag: str


class FieldKind(str, enum.Enum):
    SCALAR = "scalar"
    RECORD = "record"
    UNSUPPORTED = "unsupported"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class FieldShape:
    """Static description of one declared record field."""

    name: str
    annotation: Any
    kind: FieldKind
    record_type: type | None = None
    tag: str | None = None
    # Name a string annotation failed on, for UNRESOLVED fields
    unresolved: str | None = None


def is_record_type(tp: Any) -> bool:
    """Whether ``tp`` is a dataclass type or a pydantic model class."""
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_record(value: Any) -> bool:
    """Whether ``value`` is a record class or a record instance."""
    if isinstance(value, type):
        return is_record_type(value)
    return is_record_type(type(value))


def unwrap_annotation(annotation: Any) -> tuple[Any, str | None]:
    """
    Strip ``Annotated`` and ``Optional`` wrappers from an annotation.

    Returns the underlying type and the first ``FormTag`` found on the way.
    ``Optional[T]`` is treated as a pointer to ``T``.
    """
    tag: str | None = None
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            base, *extras = get_args(annotation)
            for extra in extras:
                if isinstance(extra, FormTag) and tag is None:
                    tag = extra.tag
            annotation = base
            continue
        if origin is Union or origin is types.UnionType:
            args = get_args(annotation)
            present = [a for a in args if a is not type(None)]
            if len(present) == 1 and len(present) < len(args):
                annotation = present[0]
                continue
        return annotation, tag


def classify(annotation: Any) -> FieldKind:
    """Classify an unwrapped annotation."""
    if is_record_type(annotation):
        return FieldKind.RECORD
    if annotation is Any or get_origin(annotation) is Literal:
        return FieldKind.SCALAR
    if get_origin(annotation) is not None:
        return FieldKind.UNSUPPORTED
    if isinstance(annotation, type) and issubclass(annotation, SCALAR_TYPES):
        return FieldKind.SCALAR
    return FieldKind.UNSUPPORTED


def _build_field(name: str, annotation: Any, metadata_tag: str | None) -> FieldShape:
    underlying, annotated_tag = unwrap_annotation(annotation)
    kind = classify(underlying)
    return FieldShape(
        name=name,
        annotation=annotation,
        kind=kind,
        record_type=underlying if kind is FieldKind.RECORD else None,
        tag=annotated_tag if annotated_tag is not None else metadata_tag,
    )


def _resolve_annotation(record_type: type, annotation: Any) -> Any:
    """Evaluate a string annotation in the namespace of the record's module."""
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(record_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {record_type.__name__: record_type}
    return eval(annotation, globalns, localns)


def _dataclass_fields(record_type: type, tag_name: str) -> tuple[FieldShape, ...]:
    try:
        hints = typing.get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as e:
        # Resolve field by field below so one bad annotation only affects its own field
        logger.debug(f"Could not resolve all annotations of {record_type.__name__}: {e}")
        hints = None

    shapes = []
    for f in dataclasses.fields(record_type):
        tag = f.metadata.get(tag_name)
        if hints is not None:
            shapes.append(_build_field(f.name, hints[f.name], tag))
            continue
        try:
            annotation = _resolve_annotation(record_type, f.type)
        except (NameError, AttributeError, TypeError, SyntaxError) as e:
            logger.debug(f"Unresolved annotation {record_type.__name__}.{f.name}: {e}")
            shapes.append(
                FieldShape(
                    name=f.name,
                    annotation=f.type,
                    kind=FieldKind.UNRESOLVED,
                    tag=tag,
                    unresolved=getattr(e, "name", None),
                )
            )
            continue
        shapes.append(_build_field(f.name, annotation, tag))
    return tuple(shapes)


def _model_fields(record_type: type[BaseModel], tag_name: str) -> tuple[FieldShape, ...]:
    shapes = []
    for name, info in record_type.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        shapes.append(_build_field(name, annotation, extra.get(tag_name)))
    return tuple(shapes)


@functools.lru_cache(maxsize=256)
def record_shape(record_type: type, tag_name: str = DEFAULT_TAG_NAME) -> tuple[FieldShape, ...]:
    """
    Get the ordered field shapes of a record type.

    Annotation strings are looked up, first match wins, in:
    ``Annotated[..., FormTag(...)]``, dataclass ``metadata[tag_name]``,
    pydantic ``json_schema_extra[tag_name]``.
    """
    if dataclasses.is_dataclass(record_type):
        return _dataclass_fields(record_type, tag_name)
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return _model_fields(record_type, tag_name)
    raise TypeError(f"{record_type!r} is not a record type")
