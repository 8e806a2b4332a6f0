"""
Payload Validation

validate() checks a decoded JSON payload against one of the request schemas
in app.schemas.book and reports the outcome as a ValidationResult instead of
raising. Callers branch on result.valid:

    result = validate(payload, BookCreate)
    if not result.valid:
        raise BookValidationError(result.errors)
    repository.create(result.data)

Violations are rendered with JSON Schema style wording, one string per
problem, in the order pydantic reports them (schema field order):

    instance requires property "title"
    instance.pages is not of a type(s) integer
    instance is not allowed to have the additional property "price"
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

# pydantic error type → JSON type name used in "is not of a type(s) ..."
_TYPE_NAMES = {
    "string_type": "string",
    "int_type": "integer",
    "int_from_float": "integer",
    "int_parsing": "integer",
    "bool_type": "boolean",
    "float_type": "number",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "list_type": "array",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate(): data holds only the fields the caller sent."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)


def _path(loc: tuple[int | str, ...], root: str = "instance") -> str:
    path = root
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def format_error(error: dict[str, Any], root: str = "instance") -> str:
    """Render one pydantic error as a human-readable violation."""
    loc = tuple(error["loc"])
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        if not loc:
            # No value at all (absent or null request body)
            return f"{root} is not of a type(s) object"
        return f'{_path(loc[:-1], root)} requires property "{loc[-1]}"'
    if kind == "json_invalid":
        # loc holds a character offset into the raw text, not a path
        detail = ctx.get("error", error["msg"])
        where = f" at character {loc[-1]}" if loc else ""
        return f"{root} is not valid JSON: {detail}{where}"
    if kind == "extra_forbidden" and loc:
        return (
            f"{_path(loc[:-1], root)} is not allowed to have the additional "
            f'property "{loc[-1]}"'
        )

    path = _path(loc, root)
    if kind in _TYPE_NAMES:
        return f"{path} is not of a type(s) {_TYPE_NAMES[kind]}"
    if kind == "greater_than":
        return f"{path} must be greater than {ctx['gt']}"
    if kind == "string_too_short":
        return f"{path} does not meet minimum length of {ctx['min_length']}"
    if kind == "value_error" and "error" in ctx:
        return f"{path} {ctx['error']}"
    return f"{path} {error['msg']}"


def validate(payload: Any, schema: type[BaseModel]) -> ValidationResult:
    """
    Validate payload against schema.

    Never raises for bad input; an invalid payload yields valid=False and a
    non-empty error list.
    """
    try:
        model = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(
            valid=False,
            errors=[format_error(error) for error in exc.errors()],
        )
    return ValidationResult(valid=True, data=model.model_dump(exclude_unset=True))
