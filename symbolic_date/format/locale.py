"""Locale-aware date formatting.

This module renders calendar fields through Babel's CLDR data. The
configuration surface mirrors the date part of ``Intl.DateTimeFormat``:
locale tags in BCP 47 form (``"en-US"``) and an options mapping with
``weekday``, ``era``, ``year``, ``month``, ``day`` or ``dateStyle``.

The options are translated to a CLDR skeleton. The locale's closest
pattern for the same fields is then resized to the requested widths.

Functions:
    format_locale_date: Render a calendar day for a locale.
    resolve_locale: Pick the first usable locale from a tag or tag list.
    resolve_pattern: Turn a skeleton into a pattern of a locale.

Examples:
    >>> format_locale_date(2022, 12, 1, "en-US")
    '12/1/2022'
    >>> format_locale_date(2022, 12, 1, "en-US", {"dateStyle": "full"})
    'Thursday, December 1, 2022'
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import Any, Mapping, Sequence, Union

from babel import Locale, UnknownLocaleError
from babel.core import default_locale
from babel.dates import (
    format_date,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)

from symbolic_date._internal.constants import FALLBACK_LOCALE

logger = logging.getLogger(__name__)

LocalesArg = Union[str, Sequence[str], None]

# Option value -> CLDR skeleton symbols, per field
_SKELETON_FIELDS: dict[str, dict[str, str]] = {
    "era": {"long": "GGGG", "short": "G", "narrow": "GGGGG"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {
        "numeric": "M",
        "2-digit": "MM",
        "short": "MMM",
        "long": "MMMM",
        "narrow": "MMMMM",
    },
    "weekday": {"long": "EEEE", "short": "EEE", "narrow": "EEEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
}

# Pattern symbol -> skeleton symbol of the same field
_PATTERN_SYMBOLS: dict[str, str] = {
    "G": "G",
    "y": "y",
    "M": "M",
    "L": "M",
    "E": "E",
    "c": "E",
    "e": "E",
    "d": "d",
}

# Canonical skeleton order
_SKELETON_ORDER = ("era", "year", "month", "weekday", "day")

# Fields whose absence triggers the numeric year/month/day default
_DATE_FIELDS = ("weekday", "year", "month", "day")

_DATE_STYLES = ("full", "long", "medium", "short")

_DEFAULT_SKELETON = "yMd"


def resolve_locale(locales: LocalesArg = None) -> Locale:
    """Return the first locale Babel knows from a tag or list of tags.

    Tags may use ``-`` or ``_`` as separator. Unknown or malformed tags
    are skipped. When nothing matches, the process default locale is
    used, then ``en_US``.

    Args:
        locales: A locale tag, a sequence of tags, or None.

    Returns:
        A Babel Locale.

    Examples:
        >>> str(resolve_locale(["xx-XX", "de-AT"]))
        'de_AT'
    """
    if locales is None:
        candidates: list[str] = []
    elif isinstance(locales, str):
        candidates = [locales]
    else:
        candidates = list(locales)

    for tag in candidates:
        if not isinstance(tag, str):
            logger.debug("skipping non-string locale tag %r", tag)
            continue
        try:
            return Locale.parse(tag.replace("-", "_"))
        except (ValueError, UnknownLocaleError):
            logger.debug("skipping unusable locale tag %r", tag)

    fallback = default_locale("LC_TIME") or FALLBACK_LOCALE
    try:
        return Locale.parse(fallback)
    except (ValueError, UnknownLocaleError):
        logger.debug("default locale %r unusable, using %s", fallback, FALLBACK_LOCALE)
        return Locale.parse(FALLBACK_LOCALE)


def build_skeleton(options: Mapping[str, Any] | None = None) -> str:
    """Translate Intl-style date options into a CLDR skeleton.

    Keys that do not describe date fields are ignored.

    Raises:
        ValueError: If a field option has an unsupported value.

    Examples:
        >>> build_skeleton()
        'yMd'
        >>> build_skeleton({"weekday": "short", "month": "long", "day": "numeric"})
        'MMMMEEEd'
    """
    options = options or {}
    parts = []
    for field in _SKELETON_ORDER:
        value = options.get(field)
        if value is None:
            continue
        symbols = _SKELETON_FIELDS[field]
        if value not in symbols:
            raise ValueError(
                f"{field} must be one of {', '.join(symbols)}, got {value!r}"
            )
        parts.append(symbols[value])

    if not any(options.get(field) is not None for field in _DATE_FIELDS):
        return "".join(parts) + _DEFAULT_SKELETON

    return "".join(parts)


def format_locale_date(
    year: int,
    month: int,
    day: int,
    locales: LocalesArg = None,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Render a calendar day for a locale.

    Args:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month.
        locales: A locale tag, a sequence of tags, or None.
        options: Intl-style date options.

    Returns:
        The localized date string.

    Raises:
        ValueError: If the options are inconsistent or unsupported.
    """
    locale = resolve_locale(locales)
    options = options or {}
    date_style = options.get("dateStyle")

    if date_style is not None:
        if date_style not in _DATE_STYLES:
            raise ValueError(
                f"dateStyle must be one of {', '.join(_DATE_STYLES)}, "
                f"got {date_style!r}"
            )
        if any(options.get(field) is not None for field in _SKELETON_ORDER):
            raise ValueError("dateStyle cannot be combined with date field options")
        return format_date(_datetime.date(year, month, day), date_style, locale=locale)

    pattern = resolve_pattern(build_skeleton(options), locale)
    return format_date(_datetime.date(year, month, day), pattern, locale=locale)


def _field_widths(skeleton: str) -> dict[str, int]:
    return {
        value[0]: value[1]
        for kind, value in tokenize_pattern(skeleton)
        if kind == "field"
    }


def resolve_pattern(skeleton: str, locale: Locale) -> str:
    """Return a pattern of the locale that renders exactly the skeleton's fields.

    The locale's closest skeleton with the same field set supplies the
    field order and separators. Its fields are then resized to the
    requested widths, except that a numeric day or month keeps the
    padding the locale asks for. When the locale has no skeleton with
    that field set, the fields are joined with spaces.

    Args:
        skeleton: A CLDR skeleton such as ``"yMMdd"``.
        locale: The Babel locale to take patterns from.

    Returns:
        A CLDR date pattern string.

    Examples:
        >>> resolve_pattern("yMMdd", Locale("en", "US"))
        'MM/dd/y'
        >>> resolve_pattern("GMMMMM", Locale("en", "US"))
        'G MMMMM'
    """
    widths = _field_widths(skeleton)
    match = match_skeleton(skeleton, locale.datetime_skeletons)
    if match is None:
        logger.debug("no %s skeleton with the fields of %r", locale, skeleton)
        return " ".join(char * count for char, count in widths.items())

    tokens = []
    for kind, value in tokenize_pattern(locale.datetime_skeletons[match].pattern):
        if kind == "field":
            char, count = value
            symbol = _PATTERN_SYMBOLS.get(char)
            if symbol in widths:
                requested = widths[symbol]
                if symbol in ("d", "M") and max(count, requested) <= 2:
                    requested = max(count, requested)
                value = (char, requested)
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


__all__ = [
    "LocalesArg",
    "build_skeleton",
    "format_locale_date",
    "resolve_locale",
    "resolve_pattern",
]
