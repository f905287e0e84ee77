"""Conversion between native Python scalars and gNMI typed values."""

from __future__ import annotations

import enum
import json
import math
import struct
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ValueKind",
    "Decimal64",
    "ScalarArray",
    "TypedValue",
    "DeprecatedScalar",
    "ScalarError",
    "from_scalar",
    "to_scalar",
    "equal",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class ScalarError(ValueError):
    """Raised when a value cannot be converted to or from a scalar."""


class ValueKind(enum.Enum):
    """The kind of value held by a TypedValue."""

    STRING = "string_val"
    INT = "int_val"
    UINT = "uint_val"
    BOOL = "bool_val"
    BYTES = "bytes_val"
    FLOAT = "float_val"
    DOUBLE = "double_val"
    DECIMAL = "decimal_val"
    LEAFLIST = "leaflist_val"
    ANY = "any_val"
    JSON = "json_val"
    JSON_IETF = "json_ietf_val"
    ASCII = "ascii_val"
    PROTO_BYTES = "proto_bytes"


@dataclass
class Decimal64:
    """A fixed point number: digits scaled down by 10**precision."""

    digits: int = 0
    precision: int = 0


@dataclass
class ScalarArray:
    """An ordered list of typed values, used for leaf-lists."""

    elements: list[TypedValue] = field(default_factory=list)


@dataclass
class TypedValue:
    """A value tagged with its kind; an empty value has kind None."""

    kind: ValueKind | None = None
    value: Any = None


@dataclass
class DeprecatedScalar:
    """A decoded scalar carried by an encoding slated for removal."""

    message: str
    value: Any


def from_scalar(value: Any) -> TypedValue:
    """Convert a native scalar (or list of scalars) to a TypedValue."""
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ScalarError(f"string {value!r} contains non-UTF-8 bytes") from None
        return TypedValue(ValueKind.STRING, value)
    if isinstance(value, bool):
        return TypedValue(ValueKind.BOOL, value)
    if isinstance(value, int):
        if _INT64_MIN <= value <= _INT64_MAX:
            return TypedValue(ValueKind.INT, value)
        if 0 <= value <= _UINT64_MAX:
            return TypedValue(ValueKind.UINT, value)
        raise ScalarError(f"integer {value} out of 64-bit range")
    if isinstance(value, float):
        return TypedValue(ValueKind.DOUBLE, value)
    if isinstance(value, (bytes, bytearray)):
        return TypedValue(ValueKind.BYTES, bytes(value))
    if isinstance(value, (list, tuple)):
        elements = []
        for item in value:
            try:
                elements.append(from_scalar(item))
            except ScalarError as exc:
                raise ScalarError(f"in list: {exc}") from exc
        return TypedValue(ValueKind.LEAFLIST, ScalarArray(elements))
    raise ScalarError(f"non-scalar type {value!r}")


def _to_float32(x: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _decimal_to_float(d: Decimal64) -> float:
    return _to_float32(float(d.digits) / math.pow(10, float(d.precision)))


def _decode_json(raw: bytes, message: str) -> DeprecatedScalar:
    try:
        decoded = json.loads(bytes(raw), parse_int=float)
    except (ValueError, TypeError) as exc:
        raise ScalarError(str(exc)) from exc
    return DeprecatedScalar(message=message, value=decoded)


def to_scalar(tv: TypedValue | None) -> Any:
    """Convert a scalar TypedValue to its native Python value."""
    kind = tv.kind if tv is not None else None
    if kind is ValueKind.DECIMAL:
        return _decimal_to_float(tv.value or Decimal64())
    if kind in (ValueKind.STRING, ValueKind.INT, ValueKind.UINT, ValueKind.BOOL):
        return tv.value
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return float(tv.value)
    if kind is ValueKind.LEAFLIST:
        array = tv.value or ScalarArray()
        result = []
        for element in array.elements:
            try:
                result.append(to_scalar(element))
            except ScalarError as exc:
                raise ScalarError(
                    f"to_scalar for ScalarArray {element.value!r}: {exc}"
                ) from exc
        return result
    if kind is ValueKind.BYTES:
        return bytes(tv.value)
    if kind is ValueKind.JSON:
        return _decode_json(tv.value or b"", "Deprecated TypedValue_JsonVal")
    if kind is ValueKind.JSON_IETF:
        return _decode_json(tv.value or b"", "Deprecated TypedValue_JsonIetfVal")
    raise ScalarError(f"non-scalar type {tv.value if tv is not None else None!r}")


_SIMPLE_KINDS = {
    ValueKind.STRING,
    ValueKind.INT,
    ValueKind.UINT,
    ValueKind.BOOL,
    ValueKind.DOUBLE,
    ValueKind.FLOAT,
}


def equal(a: TypedValue | None, b: TypedValue | None) -> bool:
    """Report whether two primitive or leaf-list values are the same.

    Values of any other kind, and missing values, never compare equal.
    """
    if a is None or b is None or a.kind is None or a.kind is not b.kind:
        return False
    kind = a.kind
    if kind in _SIMPLE_KINDS:
        return a.value == b.value
    if kind is ValueKind.BYTES:
        return bytes(a.value) == bytes(b.value)
    if kind is ValueKind.DECIMAL:
        return (a.value.digits, a.value.precision) == (b.value.digits, b.value.precision)
    if kind is ValueKind.LEAFLIST:
        ae = (a.value or ScalarArray()).elements
        be = (b.value or ScalarArray()).elements
        return len(ae) == len(be) and all(equal(x, y) for x, y in zip(ae, be))
    return False