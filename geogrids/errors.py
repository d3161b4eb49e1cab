"""Exceptions raised by geogrids conversions"""

__all__ = [
    'ConvergenceError', 'GeoGridsError', 'InvalidCoordinateError',
    'InvalidEllipsoidError', 'InvalidGridRefError', 'InvalidMgrsStringError',
    'InvalidPointError', 'InvalidUtmStringError', 'OutOfRangeError',
]


class GeoGridsError(ValueError):
    """Base class for all geogrids errors"""


class InvalidEllipsoidError(GeoGridsError):
    """Ellipsoid parameters outside a > 0, 0 < f < 1"""


class InvalidPointError(GeoGridsError):
    """Latitude or longitude is not a finite number"""


class OutOfRangeError(GeoGridsError):
    """Latitude falls outside the UTM limits of [-80, 84]"""


class InvalidCoordinateError(GeoGridsError):
    """UTM zone, hemisphere, easting or northing is invalid"""


class ConvergenceError(GeoGridsError):
    """The conformal latitude inversion did not converge"""


class InvalidGridRefError(GeoGridsError):
    """MGRS grid reference components are inconsistent"""


class InvalidUtmStringError(GeoGridsError):
    """Malformed UTM coordinate string"""


class InvalidMgrsStringError(InvalidGridRefError):
    """Malformed MGRS grid reference string"""
