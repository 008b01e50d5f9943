"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from typing import Any, TypeAlias

Coordinate: TypeAlias = float | list[float]
JSONValue: TypeAlias = Any
QueryParams: TypeAlias = dict[str, str | int | float]


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def format_number(value: float | int) -> str:
    """Render a number in its shortest decimal form.

    Integral floats drop the fractional part, so ``250.0`` becomes ``"250"``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def join_numbers(values: float | int | list[float]) -> str:
    """Serialize a scalar or an ordered list of numbers as a comma-joined string."""
    if isinstance(values, list):
        return ",".join(format_number(v) for v in values)
    return format_number(values)
