"""Small shared helpers used by auth/token workflows."""
from __future__ import annotations

import base64
import math
from collections.abc import Mapping, MutableMapping
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar
from urllib.parse import quote

# Characters `encodeURIComponent` leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_M = TypeVar("_M", bound=MutableMapping)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class MissingParameterError(ValueError):
    """Raised when a required request parameter is empty."""

    def __init__(self, name: str):
        super().__init__(f"{name} is required.")
        self.name = name


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """
    Build a Basic authorization header value for OAuth token requests.

    Returns
    -------
    str
        Header value like "Basic <base64(client_id:client_secret)>".

    Raises
    ------
    MissingParameterError
        If either credential is empty.
    """
    validate({"client_id": client_id, "client_secret": client_secret})
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


def _to_param_string(value: Any) -> str:
    # Spell scalars the way browsers serialize them into query strings.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _encode_component(value: Any) -> str:
    return quote(_to_param_string(value), safe=_URI_COMPONENT_SAFE)


def _is_empty(value: Any) -> bool:
    return not value or (isinstance(value, float) and math.isnan(value))


def build_url(url: str, params: Mapping[str, Any]) -> str:
    """
    Append URL parameters to a base URL as a query string.

    Parameters
    ----------
    url : str
        The base URL. It is not checked for well-formedness.
    params : Mapping[str, Any]
        Parameter names and values, appended in iteration order.

    Returns
    -------
    str
        The complete URL. Joins with "&" when `url` already has a "?".
    """
    param_string = "&".join(
        f"{_encode_component(key)}={_encode_component(value)}" for key, value in params.items()
    )
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{param_string}"


def validate(params: Mapping[str, Any]) -> None:
    """
    Check that every value in `params` is non-empty.

    Raises
    ------
    MissingParameterError
        For the first key (in iteration order) whose value is falsy.
        NaN counts as empty.
    """
    for name, value in params.items():
        if _is_empty(value):
            raise MissingParameterError(name)


def get_time_in_seconds(date: datetime | int | float) -> int:
    """
    Convert a datetime or an epoch-milliseconds timestamp to whole epoch seconds.

    Naive datetimes are treated as UTC. Sub-second parts are floored.
    """
    if isinstance(date, datetime):
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return (date - _EPOCH) // timedelta(seconds=1)
    if isinstance(date, bool) or not isinstance(date, (int, float)):
        raise TypeError(f"Unsupported time value: {type(date).__name__}")
    if isinstance(date, int):
        return date // 1000
    return math.floor(date / 1000)


def extend(destination: _M, source: Mapping) -> _M:
    """
    Copy every key of `source` onto `destination` and return `destination`.

    This mutates `destination` in place. Values are not copied, so nested
    objects end up shared between both mappings.
    """
    for key in source:
        destination[key] = source[key]
    return destination


def to_lower_case_keys(obj: Any) -> Any:
    """
    Return a shallow copy of a mapping with all keys lower-cased.

    Anything that is not a mapping (including None) is returned unchanged.
    When two keys collapse to the same lower-case key the later one wins.
    """
    if not isinstance(obj, Mapping):
        return obj
    result: dict[str, Any] = {}
    for key, value in obj.items():
        result[str(key).lower()] = value
    return result
