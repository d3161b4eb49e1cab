
from geogrids._version import __version__  # noqa: F401
from geogrids.utils.logging import LOGGER
from geogrids.ellipsoid import Ellipsoid, WGS84
from geogrids.errors import (
    ConvergenceError, GeoGridsError, InvalidCoordinateError, InvalidEllipsoidError,
    InvalidGridRefError, InvalidMgrsStringError, InvalidPointError,
    InvalidUtmStringError, OutOfRangeError
)
from geogrids.coordinates import GeoPoint
from geogrids.utm import UtmCoordinate
from geogrids.mgrs import Accuracy, MgrsReference


__all__ = [
    'Accuracy',
    'ConvergenceError',
    'Ellipsoid',
    'GeoGridsError',
    'GeoPoint',
    'InvalidCoordinateError',
    'InvalidEllipsoidError',
    'InvalidGridRefError',
    'InvalidMgrsStringError',
    'InvalidPointError',
    'InvalidUtmStringError',
    'MgrsReference',
    'OutOfRangeError',
    'UtmCoordinate',
    'WGS84',
    'LOGGER',
]
