"""JSON serialization and revival for calendar days.

A SymbolicDate serializes to its bare ``YYYY-MM-DD`` string. Reading
JSON back is explicit: the caller supplies a reviver, which is applied to
every key/value pair of the parsed document and may replace the value.

Functions:
    revive_symbolic_date: Reviver turning calendar-date strings into dates.
    revive: Apply a reviver to already-parsed JSON data.
    loads: Parse JSON text and apply a reviver.
    dumps: Serialize data that may contain SymbolicDate values.

Classes:
    SymbolicDateEncoder: JSONEncoder serializing objects with ``to_json()``.

The reviver walk visits children before their parent and calls the
reviver last with key ``""`` for the document root. Object members are
passed their ``str`` key, array items their ``int`` index.

Examples:
    >>> from symbolic_date import SymbolicDate
    >>> from symbolic_date.convert import dumps, loads

    >>> dumps({"date": SymbolicDate("2022-12-01")})
    '{"date": "2022-12-01"}'

    >>> loads('{"date": "2022-12-01", "notDate": "20221201"}')
    {'date': SymbolicDate('2022-12-01'), 'notDate': '20221201'}
"""

from __future__ import annotations

import json
from typing import Any, Callable, Union

from symbolic_date.core.symbolic_date import SymbolicDate

Key = Union[str, int]
Reviver = Callable[[Key, Any], Any]


def revive_symbolic_date(key: Key, value: Any) -> Any:
    """Replace a calendar-date string with a SymbolicDate.

    Strings that construct a valid SymbolicDate are replaced by a new
    instance on every call. Everything else is returned unchanged.

    Args:
        key: The member name or array index (unused).
        value: The parsed value.

    Returns:
        A SymbolicDate or the original value.

    Examples:
        >>> revive_symbolic_date("date", "2022-12-01")
        SymbolicDate('2022-12-01')
        >>> revive_symbolic_date("notDate", "20221201")
        '20221201'
    """
    if isinstance(value, str):
        maybe_valid_date = SymbolicDate(value)
        if maybe_valid_date.is_valid:
            return maybe_valid_date
    return value


def _walk(value: Any, reviver: Reviver) -> Any:
    if isinstance(value, dict):
        return {key: reviver(key, _walk(item, reviver)) for key, item in value.items()}
    if isinstance(value, list):
        return [
            reviver(index, _walk(item, reviver)) for index, item in enumerate(value)
        ]
    return value


def revive(data: Any, reviver: Reviver = revive_symbolic_date) -> Any:
    """Apply a reviver to parsed JSON data, children before parents.

    Args:
        data: A value produced by ``json.loads``.
        reviver: Called as ``reviver(key, value)`` for every member,
            array item and finally the root (key ``""``).

    Returns:
        The revived data. Containers are rebuilt, not mutated.
    """
    return reviver("", _walk(data, reviver))


def loads(
    s: str | bytes,
    reviver: Reviver | None = revive_symbolic_date,
    **kwargs: Any,
) -> Any:
    """Parse JSON text and revive calendar-date strings.

    Args:
        s: The JSON document.
        reviver: The reviver to apply, or None to skip revival.
        **kwargs: Passed through to ``json.loads``.

    Returns:
        The parsed and revived data.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    data = json.loads(s, **kwargs)
    if reviver is None:
        return data
    return revive(data, reviver)


class SymbolicDateEncoder(json.JSONEncoder):
    """JSON encoder that serializes any object exposing ``to_json()``.

    SymbolicDate values nested anywhere in the data become their
    ``YYYY-MM-DD`` string.
    """

    def default(self, o: Any) -> Any:
        to_json = getattr(o, "to_json", None)
        if callable(to_json):
            return to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize data that may contain SymbolicDate values.

    Output spacing is json.dumps' default, so a date in a dict comes out
    as ``{"date": "2022-12-01"}``. Pass ``separators=(",", ":")`` for
    the compact ``{"date":"2022-12-01"}`` form.

    Args:
        obj: The data to serialize.
        **kwargs: Passed through to ``json.dumps``; ``cls`` defaults to
            SymbolicDateEncoder.

    Returns:
        The JSON text.

    Raises:
        InvalidDateError: If the data contains an invalid date.
    """
    kwargs.setdefault("cls", SymbolicDateEncoder)
    return json.dumps(obj, **kwargs)


__all__ = [
    "Reviver",
    "SymbolicDateEncoder",
    "dumps",
    "loads",
    "revive",
    "revive_symbolic_date",
]
