"""
Representation of a geodetic point on an ellipsoid
"""

from __future__ import annotations

__all__ = ['GeoPoint']

from typing import TYPE_CHECKING, Optional, Tuple, Union

from pydantic import validate_call

from geogrids.ellipsoid import Ellipsoid, WGS84
from geogrids.projection import project

if TYPE_CHECKING:  # pragma: no cover
    from geogrids.mgrs import Accuracy, MgrsReference
    from geogrids.utm import UtmCoordinate


class GeoPoint:
    """
    A latitude/longitude pair, in degrees, referenced to an ellipsoid.

    Args:
        latitude:
            The latitude, in degrees

        longitude:
            The longitude, in degrees

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: float,
        longitude: float,
        ellipsoid: Ellipsoid = WGS84,
    ):
        self._latitude = latitude
        self._longitude = longitude
        self._ellipsoid = ellipsoid

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.ellipsoid))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_utm(self) -> UtmCoordinate:
        """
        Convert this point to UTM, applying the Norway/Svalbard zone exceptions.

        Raises:
            InvalidPointError: latitude or longitude is not finite
            OutOfRangeError: latitude is outside [-80, 84]
        """
        from geogrids.utm import UtmCoordinate

        zone, hemisphere, easting, northing, convergence, scale = project(
            self.latitude, self.longitude, self.ellipsoid
        )
        return UtmCoordinate(
            zone, hemisphere, easting, northing,
            ellipsoid=self.ellipsoid,
            convergence=convergence,
            scale=scale,
        )

    def to_mgrs(self, precision: Optional[Union[int, Accuracy]] = None) -> MgrsReference:
        """
        Convert this point to an MGRS grid reference.

        Args:
            precision: (Default 5)
                Digits per axis (1 through 5), or an Accuracy

        Returns:
            MgrsReference
        """
        return self.to_utm().to_mgrs(precision)
