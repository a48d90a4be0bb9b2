from __future__ import annotations

import logging

from geo.dms import from_dmm, from_dms, has_dms_characters
from geo.errors import CoordinateError


logger = logging.getLogger(__name__)


def parse_coords(text: str) -> tuple[float, float]:
    """Parse a coordinate pair in any supported notation into ``(lon, lat)``.

    Text with exactly one comma and no DMS-only characters is a DMM / DD pair
    and goes through :func:`geo.dms.from_dmm`, range errors included.
    Everything else goes through :func:`geo.dms.from_dms`.
    """
    if text.count(",") == 1 and not has_dms_characters(text):
        return from_dmm(text)
    return from_dms(text)


def parse_coords_or_none(text: str) -> tuple[float, float] | None:
    try:
        return parse_coords(text)
    except CoordinateError as e:
        logger.debug("no coordinate pair in %r (%s)", text, e)
        return None
