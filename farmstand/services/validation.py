"""Explicit validation of product input before it reaches the store.

Form values arrive as strings; blank values are treated as missing so that
required fields report "Field required" and optional ones fall back to their
defaults. Results are returned, not raised: the caller decides how a failed
result is signalled.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from farmstand.schemas.product import ProductFields


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    value: ProductFields | None = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _clean(data: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and not value.strip():
            continue
        if value is None:
            continue
        out[key] = value
    return out


def _field_errors(exc: ValidationError) -> tuple[FieldError, ...]:
    errors: list[FieldError] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "__root__"
        errors.append(FieldError(field=loc, message=err.get("msg", "invalid value")))
    return tuple(errors)


def validate_product(data: Mapping[str, Any]) -> ValidationResult:
    try:
        value = ProductFields.model_validate(_clean(data))
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))
    return ValidationResult(value=value)


def validate_product_update(
    current: Mapping[str, Any], data: Mapping[str, Any]
) -> ValidationResult:
    """Apply ``data`` over the stored ``current`` fields and validate the merged document."""
    merged = dict(current)
    merged.update(_clean(data))
    return validate_product(merged)
