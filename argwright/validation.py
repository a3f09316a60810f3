"""
Model validation: the legality table, applied once per model after every
directive has been interpreted and the field's type shape is known.

Struct models
- no `parse` directive, no subcommand/flatten kind.

Field models, by kind
- FlattenStruct: no `parse`, no directive other than the doc-derived help.
- Subcommand(shape): no `parse`, no directive other than the doc-derived help,
  shape is neither OptionalOptional nor OptionalSequence.
- Arg(shape): a custom parser downgrades every shape but Optional/Sequence to
  Other; Bool and Optional reject default_value and required;
  OptionalOptional and OptionalSequence need short or long.

The first violation raises; nothing is collected or logged.
"""
from .faults import IllegalDirectiveForKindError, IllegalDirectiveForShapeError
from .shapes import TypeShape

# Directives that only make sense for shapes where a value may be absent.
_ABSENCE_DIRECTIVES = ("default_value", "required")


def validate_struct(model, /):
    """
    Check a struct-level model.

    Raises
    - IllegalDirectiveForKindError: `parse`, `subcommand` or `flatten` was used
      on the struct itself.
    """
    if model.custom_parser:
        raise IllegalDirectiveForKindError(
            "parse attribute is only allowed on fields",
            hint="move the parse directive to the field it converts",
        )
    if model.kind.is_subcommand:
        raise IllegalDirectiveForKindError("subcommand is only allowed on fields")
    if model.kind.is_flatten:
        raise IllegalDirectiveForKindError("flatten is only allowed on fields")


def _only_documentation(model, /):
    # doc-derived entries are matched by identity, not by value
    documentation = model.documentation
    return all(any(directive is entry for entry in documentation) for directive in model.directives)


def validate_field(model, shape, /):
    """
    Check a field-level model against the shape of its declared type.

    Parameters
    - model: AttributeModel
    - shape: TypeShape
      Shape of the field's declared type (see shapes.classify).

    Returns
    - ArgumentKind: the resolved kind, carrying the (possibly downgraded) shape.

    Raises
    - IllegalDirectiveForKindError, IllegalDirectiveForShapeError
    """
    if not isinstance(shape, TypeShape):
        raise TypeError("validate_field() shape must be a TypeShape")

    kind = model.kind

    if kind.is_flatten:
        if model.custom_parser:
            raise IllegalDirectiveForKindError("parse attribute is not allowed for flattened entry")
        if not _only_documentation(model):
            raise IllegalDirectiveForKindError(
                "methods are not allowed for flattened entry",
                hint="configure the flattened type itself",
            )
        return kind

    if kind.is_subcommand:
        if model.custom_parser:
            raise IllegalDirectiveForKindError("parse attribute is not allowed for subcommand")
        if not _only_documentation(model):
            raise IllegalDirectiveForKindError(
                "methods in attributes are not allowed for subcommand",
                hint="configure the subcommand type itself",
            )
        if shape in (TypeShape.OptionalOptional, TypeShape.OptionalSequence):
            raise IllegalDirectiveForShapeError(f"{shape.name} type is not allowed for subcommand")
        return kind.refine(shape)

    if model.custom_parser and shape not in (TypeShape.Optional, TypeShape.Sequence):
        shape = TypeShape.Other

    match shape:
        case TypeShape.Bool | TypeShape.Optional:
            for method in _ABSENCE_DIRECTIVES:
                if model.has_method(method):
                    raise IllegalDirectiveForShapeError(f"{method} is meaningless for {shape.name}")
        case TypeShape.OptionalOptional | TypeShape.OptionalSequence:
            if not (model.has_method("long") or model.has_method("short")):
                raise IllegalDirectiveForShapeError(
                    f"{shape.name} type is meaningless for positional argument",
                    hint="add `short` or `long` to make it an option",
                )

    return kind.refine(shape)


__all__ = (
    "validate_struct",
    "validate_field",
)
