"""
UTM zone and MGRS latitude band resolution, including the irregular zones
around Norway and Svalbard.
"""

__all__ = [
    'ZoneBand', 'central_meridian', 'latitude_band', 'resolve_zone',
    'wrap_longitude',
]

import math
from typing import NamedTuple

from geogrids._const import LATITUDE_BANDS, UTM_MAX_LATITUDE, UTM_MIN_LATITUDE
from geogrids.errors import InvalidPointError, OutOfRangeError
from geogrids.utils.logging import LOGGER


class ZoneBand(NamedTuple):
    """A resolved UTM zone, its central meridian (radians) and latitude band"""
    zone: int
    central_meridian: float
    band: str


# (zone, band, boundary longitude, (zone shift west of boundary, zone shift east))
_ZONE_EXCEPTIONS = (
    (31, 'V', 3., (0, 1)),
    (32, 'X', 9., (-1, 1)),
    (34, 'X', 21., (-1, 1)),
    (36, 'X', 33., (-1, 1)),
)


def _check_point(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidPointError(f'invalid point ({latitude}, {longitude})')

    if not UTM_MIN_LATITUDE <= latitude <= UTM_MAX_LATITUDE:
        raise OutOfRangeError(f'latitude {latitude} is outside UTM limits')


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude outside [-180, 180] back into range"""
    if not math.isfinite(longitude) or -180 <= longitude <= 180:
        return longitude

    wrapped = (longitude + 180) % 360 - 180
    LOGGER.debug('Longitude %s wrapped to %s', longitude, wrapped)
    return wrapped


def central_meridian(zone: int) -> float:
    """
    The longitude of a UTM zone's central meridian, in degrees.

    Args:
        zone:
            A UTM zone number, 1 through 60

    Returns:
        float
    """
    return (zone - 1) * 6 - 180 + 3


def latitude_band(latitude: float) -> str:
    """
    The MGRS latitude band letter containing a latitude. Bands are 8 degrees
    tall, starting with C at 80S; band X is stretched to 12 degrees to
    reach 84N.

    Args:
        latitude:
            The latitude, in degrees

    Returns:
        str
    """
    _check_point(latitude, 0.)
    return LATITUDE_BANDS[math.floor(latitude / 8 + 10)]


def resolve_zone(latitude: float, longitude: float) -> ZoneBand:
    """
    Resolve the UTM zone, central meridian and latitude band for a point,
    applying the irregular zones over Norway (band V) and Svalbard (band X).

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

    Returns:
        ZoneBand
    """
    _check_point(latitude, longitude)
    longitude = wrap_longitude(longitude)

    band = LATITUDE_BANDS[math.floor(latitude / 8 + 10)]
    zone = math.floor((longitude + 180) / 6) + 1
    if zone == 61:
        # 180E belongs to the last zone
        zone = 60

    for exc_zone, exc_band, boundary, (west, east) in _ZONE_EXCEPTIONS:
        if zone == exc_zone and band == exc_band:
            zone += east if longitude >= boundary else west
            break

    return ZoneBand(zone, math.radians(central_meridian(zone)), band)
