"""Typed access to the loosely-typed argument mappings handlers receive.

Invocation arguments arrive as JSON-like values (string, number, boolean,
list, object or absent). Handlers read them through :class:`Arguments`, which
converts each value to the type the handler needs and raises
:class:`ArgumentCoercionError` instead of silently defaulting.
"""

import json
import math
from typing import Any, Dict, List, Mapping, Optional

from cfpulse.errors import ArgumentCoercionError

_TRUE = {"true", "yes", "1"}
_FALSE = {"false", "no", "0"}

_MISSING = object()


class Arguments:
    """Read-only typed view over an invocation's argument mapping.

    ``None`` and absent keys are both treated as "not supplied". Optional
    accessors return ``default`` (``None`` unless given) in that case;
    ``required=True`` raises instead.

    Example:
        args = Arguments({"name": "demo", "instances": "3"})
        args.string("name", required=True)   # "demo"
        args.integer("instances")            # 3
        args.integer("memory")               # None
    """

    def __init__(self, raw: Optional[Mapping[str, Any]] = None):
        self._raw: Dict[str, Any] = dict(raw or {})

    def __contains__(self, key: str) -> bool:
        return self._raw.get(key) is not None

    def __repr__(self) -> str:
        return f"Arguments({self._raw!r})"

    def _value(self, key: str, required: bool) -> Any:
        value = self._raw.get(key)
        if value is None:
            if required:
                raise ArgumentCoercionError(key, "missing required argument")
            return _MISSING
        return value

    def string(self, key: str, required: bool = False, default: Optional[str] = None) -> Optional[str]:
        value = self._value(key, required)
        if value is _MISSING:
            return default
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ArgumentCoercionError(key, f"expected a string, got {type(value).__name__}")
        text = value if isinstance(value, str) else str(value)
        if required and not text.strip():
            raise ArgumentCoercionError(key, "must not be empty")
        return text

    def integer(
        self,
        key: str,
        required: bool = False,
        default: Optional[int] = None,
        minimum: Optional[int] = None,
    ) -> Optional[int]:
        number = self._integer(key, required, default)
        if number is not None and minimum is not None and number < minimum:
            raise ArgumentCoercionError(key, f"must be at least {minimum}, got {number}")
        return number

    def _integer(self, key: str, required: bool, default: Optional[int]) -> Optional[int]:
        value = self._value(key, required)
        if value is _MISSING:
            return default
        if isinstance(value, bool):
            raise ArgumentCoercionError(key, "expected an integer, got a boolean")
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer():
                return int(value)
            raise ArgumentCoercionError(key, f"expected an integer, got {value!r}")
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise ArgumentCoercionError(key, f"expected an integer, got {value!r}")
        raise ArgumentCoercionError(key, f"expected an integer, got {type(value).__name__}")

    def boolean(self, key: str, required: bool = False, default: Optional[bool] = None) -> Optional[bool]:
        value = self._value(key, required)
        if value is _MISSING:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
        raise ArgumentCoercionError(key, f"expected a boolean, got {value!r}")

    def string_list(self, key: str, required: bool = False) -> Optional[List[str]]:
        value = self._value(key, required)
        if value is _MISSING:
            return None
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
            return list(value)
        raise ArgumentCoercionError(key, "expected a list of strings")

    def json_object(self, key: str, required: bool = False) -> Optional[Dict[str, Any]]:
        """Read a JSON object supplied either as a mapping or as JSON text."""
        value = self._value(key, required)
        if value is _MISSING:
            return None
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, str):
            if not value.strip():
                if required:
                    raise ArgumentCoercionError(key, "must not be empty")
                return None
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError as e:
                raise ArgumentCoercionError(key, f"not valid JSON ({e.msg})")
            if not isinstance(parsed, dict):
                raise ArgumentCoercionError(key, "JSON value must be an object")
            return parsed
        raise ArgumentCoercionError(key, f"expected a JSON object, got {type(value).__name__}")
