"""Readers for fields of the engine's native JSON telemetry.

The engine emits loosely typed JSON: numbers sometimes arrive as
strings, optional values may be missing or blank. These helpers
normalise that so the parsers can stay declarative.
"""

from __future__ import annotations

from typing import Any, Mapping

from match_explainer.core.exceptions import MissingTelemetryError, TelemetryError


def get_str(obj: Mapping[str, Any], key: str) -> str | None:
    """Return the value for ``key`` as a string, or None if missing/null.

    Scalars are converted with ``str()``.

    Raises:
        TelemetryError: If the value is a JSON object or array.
    """
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, (Mapping, list)):
        raise TelemetryError(f"Unexpected type for {key}: {type(value).__name__}")
    return value if isinstance(value, str) else str(value)


def get_blank_as_none(obj: Mapping[str, Any], key: str) -> str | None:
    """Like :func:`get_str` but whitespace-only values become None."""
    value = get_str(obj, key)
    if value is None or not value.strip():
        return None
    return value


def get_int(obj: Mapping[str, Any], key: str) -> int | None:
    """Return the value for ``key`` as an int.

    Accepts JSON numbers and numeric strings; blank strings are None.

    Raises:
        TelemetryError: If the value is present but not numeric.
    """
    value = obj.get(key)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return int(value.strip())
        except ValueError as exc:
            raise TelemetryError(f"Non-numeric value for {key}: '{value}'") from exc
    raise TelemetryError(f"Unexpected type for {key}: {type(value).__name__}")


def get_object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    """Return a nested JSON object, or None if it is missing or null."""
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TelemetryError(f"Expected an object for {key}")
    return value


def get_array(obj: Mapping[str, Any], key: str) -> list[Any] | None:
    """Return a nested JSON array, or None if it is missing or null."""
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TelemetryError(f"Expected an array for {key}")
    return value


def require_object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a nested JSON object that the telemetry must carry."""
    value = obj.get(key)
    if not isinstance(value, Mapping):
        raise MissingTelemetryError(key)
    return value


def require_array(obj: Mapping[str, Any], key: str) -> list[Any]:
    """Return a nested JSON array that the telemetry must carry."""
    value = obj.get(key)
    if not isinstance(value, list):
        raise MissingTelemetryError(key)
    return value
