"""JSON serializer for structural comparisons."""

import dataclasses
import json
import math
from typing import Any

from treesuite.domain.equality import to_string
from treesuite.interfaces.serializer import Serializer

# pylint: disable=too-few-public-methods

SEPARATORS = (",", ":")

# integral floats at or above this magnitude keep exponent notation
_EXPONENT_THRESHOLD = 1e21


def _normalize_number(value: float) -> float | int | None:
    """Write floats the way browsers do: ``1.0`` as ``1``, NaN/Infinity as null."""
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return int(value)
    return value


def _normalize(value: Any) -> Any:
    """Recursively apply browser number formatting inside containers."""
    if isinstance(value, float):
        return _normalize_number(value)
    if isinstance(value, dict):
        return {
            to_string(key) if isinstance(key, float) else key: _normalize(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def _fallback(value: Any) -> Any:
    """Map values the json module cannot encode to something it can."""
    if isinstance(value, (set, frozenset)):
        return _normalize(sorted(value, key=repr))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _normalize(dataclasses.asdict(value))
    return repr(value)


class JsonSerializer(Serializer):
    """Compact JSON serializer.

    Produces JSON without whitespace, keeping mapping insertion order, so
    ``[1, 2, 3]`` becomes ``"[1,2,3]"`` and ``{"a": 1}`` becomes ``'{"a":1}'``.
    Numbers follow browser JSON: integral floats lose their fraction
    (``1.0`` is written ``1``) and NaN or infinities become ``null``.
    Sets are sorted, dataclasses are encoded as objects and any other value
    the json module cannot handle is encoded by its ``repr``.
    """

    def dumps(self, value: Any) -> str:
        return json.dumps(
            _normalize(value),
            separators=SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
            default=_fallback,
        )
