"""Reference ellipsoid parameters"""

__all__ = ['Ellipsoid', 'WGS84']

from functools import cached_property
import math

from pydantic import validate_call

from geogrids._const import WGS84_A, WGS84_F
from geogrids.errors import InvalidEllipsoidError


class Ellipsoid:
    """
    An ellipsoid of revolution, described by its semi-major axis and flattening.

    Args:
        a:
            The semi-major axis, in meters

        f:
            The flattening, (a - b) / a
    """

    @validate_call
    def __init__(self, a: float, f: float):
        if not (math.isfinite(a) and a > 0):
            raise InvalidEllipsoidError(f'semi-major axis must be positive; got {a}')

        if not 0 < f < 1:
            raise InvalidEllipsoidError(f'flattening must be between 0 and 1; got {f}')

        self._a = a
        self._f = f

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, f={self.f})>'

    @property
    def a(self) -> float:
        """Semi-major axis (meters)"""
        return self._a

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @cached_property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return (1 - self.f) * self.a

    @cached_property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.f * (2 - self.f))

    @cached_property
    def n(self) -> float:
        """Third flattening"""
        return self.f / (2 - self.f)


WGS84 = Ellipsoid(WGS84_A, WGS84_F)
