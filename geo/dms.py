"""Parsing of sexagesimal coordinate pairs.

Two input families are understood:

* DMS, one component per axis, latitude first: ``59°12'7.7"N 02°15'39.6"W``,
  ``N59°12.105' W02°15.66'``, ``59°N 02°W`` or a bare ``51.5 -0.126``.
* DMM / DD, two comma separated halves of signed degrees followed by
  optional decimal minutes: ``41 24.2028, -2 10.4418`` or ``41.40338, -2.17403``.

Every parser returns ``(longitude, latitude)``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from geo.errors import (
    CoordinateError,
    CoordinateRangeError,
    DegreesOutOfRange,
    MinutesOutOfRange,
    ParseError,
    SecondsOutOfRange,
)


logger = logging.getLogger(__name__)

SIGN_INDEX: dict[str, int] = {
    "-": -1,
    "N": 1,
    "S": -1,
    "E": 1,
    "W": -1,
}

_COMPONENT_RE = re.compile(
    r"""
    (?P<hem_prefix>[NSEW])?
    (?P<sign>-)?
    (?P<deg>\d+(?:\.\d+)?)
    [°º:d\s]?\s?
    (?:
        (?P<min>\d+(?:\.\d+)?)['’‘′:]\s?
        (?:(?P<sec>\d{1,2}(?:\.\d+)?)(?:"|″|’’|'')?)?
    )?
    \s?
    (?P<hem_suffix>[NSEW])?
    """,
    flags=re.UNICODE | re.IGNORECASE | re.VERBOSE,
)

# Characters that only ever appear in DMS notation.
_DMS_ONLY_RE = re.compile(r"[NSEW°'’‘′:\"″]", flags=re.UNICODE | re.IGNORECASE)


@dataclass(frozen=True)
class ComponentMatch:
    text: str
    hemisphere_prefix: str | None
    sign_prefix: str | None
    degrees: str
    minutes: str | None
    seconds: str | None
    hemisphere_suffix: str | None


def match_component(text: str) -> ComponentMatch | None:
    """Return the first coordinate component found anywhere in ``text``."""
    match = _COMPONENT_RE.search(text)
    if match is None:
        return None
    return ComponentMatch(
        text=match.group(0),
        hemisphere_prefix=match.group("hem_prefix"),
        sign_prefix=match.group("sign"),
        degrees=match.group("deg"),
        minutes=match.group("min"),
        seconds=match.group("sec"),
        hemisphere_suffix=match.group("hem_suffix"),
    )


def _sign_of(match: ComponentMatch) -> int:
    for marker in (match.sign_prefix, match.hemisphere_prefix, match.hemisphere_suffix):
        if marker:
            return SIGN_INDEX[marker.upper()]
    return 1


def decimal_degrees(match: ComponentMatch) -> float:
    """Signed decimal degrees of one matched component.

    Magnitudes are validated before the sign is applied. A leading minus wins
    over any hemisphere letter, and a leading letter wins over a trailing one.
    """
    sign = _sign_of(match)
    degrees = float(match.degrees)
    minutes = float(match.minutes) if match.minutes else 0.0
    seconds = float(match.seconds) if match.seconds else 0.0

    if not 0 <= degrees <= 180:
        raise DegreesOutOfRange()
    if not 0 <= minutes <= 60:
        raise MinutesOutOfRange()
    if not 0 <= seconds <= 60:
        raise SecondsOutOfRange()

    return sign * (degrees + minutes / 60 + seconds / 3600)


def from_dms(value: str) -> tuple[float, float]:
    """Parse a DMS pair, latitude first, into ``(longitude, latitude)``.

    Latitude magnitudes are only checked against the 0..180 degree window.
    """
    text = value.strip()
    lat_match = match_component(text)
    if lat_match is None:
        raise ParseError()

    # A match that starts with a hemisphere letter may also swallow the letter
    # leading the second component, so step back one character.
    cut = len(lat_match.text)
    if lat_match.hemisphere_prefix is not None:
        cut -= 1
    lon_match = match_component(text[cut:].strip())
    if lon_match is None:
        raise ParseError()

    return (decimal_degrees(lon_match), decimal_degrees(lat_match))


def _parse_number(token: str) -> float:
    try:
        number = float(token)
    except ValueError as e:
        raise ParseError() from e
    if math.isnan(number):
        raise ParseError()
    return number


def _dmm_axis(half: str) -> float:
    text = half.strip()
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]

    tokens = text.split()
    if not tokens:
        raise ParseError()
    degrees = _parse_number(tokens[0])
    minutes = _parse_number(tokens[1]) if len(tokens) > 1 else 0.0
    return sign * (degrees + minutes / 60)


def from_dmm(value: str) -> tuple[float, float]:
    """Parse ``"<lat>, <lon>"`` where each half is ``[-]degrees [decimal minutes]``."""
    parts = value.split(",")
    if len(parts) != 2:
        raise ParseError()

    lat = _dmm_axis(parts[0])
    lon = _dmm_axis(parts[1])
    if not (-180 <= lon <= 180 and -90 <= lat <= 90):
        raise CoordinateRangeError()
    return (lon, lat)


from_gmm = from_dmm


def has_dms_characters(value: str) -> bool:
    return _DMS_ONLY_RE.search(value) is not None


def is_dmm(value: str) -> bool:
    """True when ``value`` parses as DMM/DD and has no DMS-only characters."""
    try:
        from_dmm(value)
    except CoordinateError as e:
        logger.debug("not a DMM pair: %r (%s)", value, e)
        return False
    return not has_dms_characters(value)


def is_dms(value: str) -> bool:
    """True when ``value`` parses as DMS and is not also a plain DMM/DD pair."""
    try:
        from_dms(value)
    except CoordinateError as e:
        logger.debug("not a DMS pair: %r (%s)", value, e)
        return False
    return not is_dmm(value)
