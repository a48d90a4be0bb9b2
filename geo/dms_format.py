from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from geo.errors import InvalidCoordinateError


logger = logging.getLogger(__name__)

UNITS: dict[str, str] = {
    "degrees": "°",
    "minutes": "′",
    "seconds": "″",
}

DEFAULT_FORMAT = "DD MM ss X"


class FormatOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    decimal_places: int = Field(
        default=5,
        ge=0,
        validation_alias=AliasChoices("decimal_places", "decimalPlaces"),
    )
    lat_lon_separator: str = Field(
        default=" ",
        validation_alias=AliasChoices("lat_lon_separator", "latLonSeparator"),
    )


@dataclass(frozen=True)
class AxisValues:
    init_value: float
    degrees: float
    degrees_int: int
    degrees_frac: float
    seconds_total: float
    minutes: float
    minutes_int: int
    seconds: float


@dataclass(frozen=True)
class CoordinateConfig:
    north: bool
    east: bool
    lat_values: AxisValues
    lon_values: AxisValues


def _axis_values(init_value: float) -> AxisValues:
    degrees = abs(init_value)
    degrees_int = math.floor(degrees)
    degrees_frac = degrees - degrees_int
    seconds_total = 3600 * degrees_frac
    minutes = seconds_total / 60
    minutes_int = math.floor(minutes)
    return AxisValues(
        init_value=init_value,
        degrees=degrees,
        degrees_int=degrees_int,
        degrees_frac=degrees_frac,
        seconds_total=seconds_total,
        minutes=minutes,
        minutes_int=minutes_int,
        seconds=seconds_total - minutes_int * 60,
    )


def compute_coordinate_config(coordinate: Sequence[float]) -> CoordinateConfig:
    """Split ``(lon, lat)`` into integer and fractional parts per axis.

    Zero counts as south / west.
    """
    lon, lat = coordinate
    return CoordinateConfig(
        north=lat > 0,
        east=lon > 0,
        lat_values=_axis_values(lat),
        lon_values=_axis_values(lon),
    )


def _fixed(value: float, places: int) -> str:
    # Half-up on the exact binary value, like JavaScript's toFixed.
    exact = Decimal(value)
    digits = max(1, exact.adjusted() + 1) + places + 2
    exact = exact.quantize(
        Decimal(1).scaleb(-places),
        rounding=ROUND_HALF_UP,
        context=Context(prec=digits),
    )
    return f"{exact:f}"


def _resolve_options(options: FormatOptions | Mapping | None) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.model_validate(dict(options))


def _check_coordinate(coordinate: object) -> tuple[float, float]:
    if not isinstance(coordinate, Sequence) or isinstance(coordinate, str):
        raise InvalidCoordinateError()
    if len(coordinate) != 2:
        raise InvalidCoordinateError()
    for value in coordinate:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidCoordinateError()
        if not math.isfinite(value):
            raise InvalidCoordinateError()
    return (float(coordinate[0]), float(coordinate[1]))


def _format_axis(fmt: str, options: FormatOptions, values: AxisValues, hemisphere: str) -> str:
    places = options.decimal_places
    degrees = _fixed(values.degrees, places)
    minutes = _fixed(values.minutes, places)
    seconds = _fixed(values.seconds, places)

    # Longer tokens first; a later token must not match inside an earlier result.
    formatted = fmt
    formatted = formatted.replace("DD", f"{values.degrees_int}{UNITS['degrees']}")
    formatted = formatted.replace("dd", f"{degrees}{UNITS['degrees']}")
    formatted = formatted.replace("D", str(values.degrees_int))
    formatted = formatted.replace("d", degrees)
    formatted = formatted.replace("MM", f"{values.minutes_int}{UNITS['minutes']}")
    formatted = formatted.replace("mm", f"{minutes}{UNITS['minutes']}")
    formatted = formatted.replace("M", str(values.minutes_int))
    formatted = formatted.replace("m", minutes)
    formatted = formatted.replace("ss", f"{seconds}{UNITS['seconds']}")
    formatted = formatted.replace("s", seconds)
    formatted = formatted.replace("-", "-" if values.init_value < 0 else "")
    formatted = formatted.replace("X", hemisphere)
    return formatted


def to_dms(
    coordinate: Sequence[float],
    fmt: str | None = None,
    options: FormatOptions | Mapping | None = None,
) -> str:
    """Render ``(lon, lat)`` as text, latitude first.

    ``fmt`` is a template such as ``"DD MM ss X"`` (default), ``"DD mm X"``,
    ``"dd X"`` or ``"-D M s"``. Tokens:

    DD    integer degrees with ``°``
    dd    decimal degrees with ``°``
    D     integer degrees
    d     decimal degrees
    MM    integer minutes with ``′``
    mm    decimal minutes with ``′``
    M     integer minutes
    m     decimal minutes
    ss    decimal seconds with ``″``
    s     decimal seconds
    -     minus sign for a negative axis value, else nothing
    X     hemisphere letter, N/S or E/W

    ``options`` may be a :class:`FormatOptions` or a mapping of overrides
    (``decimal_places`` / ``decimalPlaces``, ``lat_lon_separator`` /
    ``latLonSeparator``).
    """
    lon, lat = _check_coordinate(coordinate)
    fmt = DEFAULT_FORMAT if fmt is None else fmt
    resolved = _resolve_options(options)
    config = compute_coordinate_config((lon, lat))

    lat_text = _format_axis(fmt, resolved, config.lat_values, "N" if config.north else "S")
    lon_text = _format_axis(fmt, resolved, config.lon_values, "E" if config.east else "W")
    logger.debug("formatted %r with %r -> %r / %r", (lon, lat), fmt, lat_text, lon_text)
    return lat_text + resolved.lat_lon_separator + lon_text
