"""Equality semantics used by the assertion suite.

Test packages compare values the way the browser-based suites this engine runs
always have: ``assert_same`` uses *loose* (abstract) equality and
``assert_not_same`` uses *strict* inequality. Python's ``==`` matches neither,
so both are modelled here over Python values.

Every value falls into one of five kinds:

- ``null``: ``None``
- ``boolean``: ``bool``
- ``number``: ``int`` and ``float`` (but not ``bool``)
- ``string``: ``str``
- ``object``: everything else (lists, dicts, instances, ...)

Objects are compared by identity. When an object meets a primitive in a loose
comparison it is first converted to its primitive string form: sequences join
their items with ``","`` and mappings become ``"[object Object]"``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any


class Kind(Enum):
    """Value kinds distinguished by the equality rules."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"


PRIMITIVE_KINDS = frozenset({Kind.BOOLEAN, Kind.NUMBER, Kind.STRING})

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def kind_of(value: Any) -> Kind:
    """Return the equality kind of *value*."""
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    return Kind.OBJECT


def is_composite(value: Any) -> bool:
    """Return True if *value* is serialized before a structural comparison.

    ``None`` counts as composite: structural comparisons serialize it to
    ``"null"`` like any other object.
    """
    return kind_of(value) not in PRIMITIVE_KINDS


def to_string(value: Any) -> str:
    """Convert a value to its primitive string form."""
    kind = kind_of(value)
    if kind is Kind.NULL:
        return "null"
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    if kind is Kind.NUMBER:
        return _number_to_string(value)
    if kind is Kind.STRING:
        return value
    return to_primitive(value)


def _number_to_string(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_primitive(value: Any) -> str:
    """Convert an object to the primitive string it stands for in comparisons."""
    if isinstance(value, Mapping):
        return "[object Object]"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_string(item) for item in value)
    return str(value)


def to_number(value: Any) -> float:
    """Coerce *value* to a number.

    ``None`` and blank strings become ``0``, booleans ``0``/``1``; strings that
    are not numeric literals become ``nan``. Objects are converted through
    their primitive string form.
    """
    kind = kind_of(value)
    if kind is Kind.NULL:
        return 0
    if kind is Kind.BOOLEAN:
        return 1 if value else 0
    if kind is Kind.NUMBER:
        return value
    if kind is Kind.STRING:
        return _string_to_number(value)
    return _string_to_number(to_primitive(value))


def _string_to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0
    if text in _INFINITY:
        return _INFINITY[text]
    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if _RADIX_PATTERN.fullmatch(text):
        return int(text, 0)
    return math.nan


def strict_equals(a: Any, b: Any) -> bool:
    """Strict equality: same kind and same value, objects by identity."""
    kind = kind_of(a)
    if kind is not kind_of(b):
        return False
    if kind is Kind.OBJECT:
        return a is b
    return a == b


def loose_equals(a: Any, b: Any) -> bool:
    """Loose (abstract) equality with type coercion between primitives."""
    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a is kind_b:
        return strict_equals(a, b)
    if Kind.NULL in (kind_a, kind_b):
        return False
    if kind_a is Kind.BOOLEAN:
        return loose_equals(to_number(a), b)
    if kind_b is Kind.BOOLEAN:
        return loose_equals(a, to_number(b))
    if {kind_a, kind_b} == {Kind.NUMBER, Kind.STRING}:
        return to_number(a) == to_number(b)
    if kind_a is Kind.OBJECT:
        return loose_equals(to_primitive(a), b)
    return loose_equals(a, to_primitive(b))
