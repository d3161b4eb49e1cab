"""
Universal Transverse Mercator coordinates
"""

from __future__ import annotations

__all__ = ['UtmCoordinate']

from typing import TYPE_CHECKING, Optional, Union

from pydantic import ValidationError, validate_call

from geogrids.coordinates import GeoPoint
from geogrids.ellipsoid import Ellipsoid, WGS84
from geogrids.errors import InvalidCoordinateError, InvalidUtmStringError
from geogrids.projection import unproject
from geogrids.utils.functions import is_finite

if TYPE_CHECKING:  # pragma: no cover
    from geogrids.mgrs import Accuracy, MgrsReference


class UtmCoordinate:
    """
    A UTM coordinate: zone, hemisphere, easting and northing.

    Args:
        zone:
            The 6 degree longitudinal zone, 1 through 60

        hemisphere:
            'N' or 'S' (case insensitive)

        easting:
            Easting in meters from the false easting (500km west of the
            zone's central meridian)

        northing:
            Northing in meters from the equator (N) or from the false northing
            10,000km south of it (S)

        ellipsoid: (Default WGS84)
            The reference ellipsoid

        convergence: (Optional)
            Meridian convergence in degrees (bearing of grid north, clockwise
            from true north), if known

        scale: (Optional)
            Grid scale factor at this coordinate, if known
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        zone: int,
        hemisphere: str,
        easting: float,
        northing: float,
        ellipsoid: Ellipsoid = WGS84,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
    ):
        if not 1 <= zone <= 60:
            raise InvalidCoordinateError(f'invalid UTM zone {zone}')

        hemisphere = hemisphere.upper()
        if hemisphere not in ('N', 'S'):
            raise InvalidCoordinateError(f'invalid UTM hemisphere {hemisphere!r}')

        if not is_finite(easting, northing):
            raise InvalidCoordinateError(f'invalid UTM easting/northing {easting} {northing}')

        self._zone = zone
        self._hemisphere = hemisphere
        self._easting = easting
        self._northing = northing
        self._ellipsoid = ellipsoid
        self._convergence = convergence
        self._scale = scale

    def __eq__(self, other):
        if not isinstance(other, UtmCoordinate):
            return False

        return (
            self.zone == other.zone and
            self.hemisphere == other.hemisphere and
            self.easting == other.easting and
            self.northing == other.northing and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.zone, self.hemisphere, self.easting, self.northing, self.ellipsoid))

    def __repr__(self):
        return f'<UtmCoordinate({self.zone} {self.hemisphere} {self.easting} {self.northing})>'

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def hemisphere(self) -> str:
        return self._hemisphere

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def convergence(self) -> Optional[float]:
        return self._convergence

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    @property
    def epsg(self) -> int:
        """The EPSG code of the WGS84 / UTM zone projection, e.g. 32631 for 31N"""
        return (32600 if self.hemisphere == 'N' else 32700) + self.zone

    @classmethod
    def from_str(cls, utm_str: str, ellipsoid: Ellipsoid = WGS84) -> UtmCoordinate:
        """
        Parses a UTM coordinate from whitespace-separated zone, hemisphere,
        easting and northing, e.g. '31 N 448251 5411932'

        Args:
            utm_str:
                The UTM coordinate string

            ellipsoid: (Default WGS84)
                The reference ellipsoid

        Returns:
            UtmCoordinate
        """
        parts = utm_str.split()
        if len(parts) != 4:
            raise InvalidUtmStringError(f'invalid UTM coordinate {utm_str!r}')

        zone, hemisphere, easting, northing = parts
        try:
            return cls(zone, hemisphere, easting, northing, ellipsoid=ellipsoid)
        except (ValidationError, InvalidCoordinateError) as exc:
            raise InvalidUtmStringError(f'invalid UTM coordinate {utm_str!r}') from exc

    def to_geopoint(self) -> GeoPoint:
        """
        Convert to a geodetic latitude/longitude. The convergence and scale
        computed along the way are available from projection.unproject().

        Raises:
            InvalidCoordinateError: easting/northing is not finite
            ConvergenceError: the coordinate is too far outside its zone to invert
        """
        latitude, longitude, _, _ = unproject(
            self.zone, self.hemisphere, self.easting, self.northing, self.ellipsoid
        )
        return GeoPoint(latitude, longitude, self.ellipsoid)

    def to_mgrs(self, precision: Optional[Union[int, Accuracy]] = None) -> MgrsReference:
        """
        Convert to an MGRS grid reference.

        Args:
            precision: (Default 5)
                Digits per axis (1 through 5), or an Accuracy

        Returns:
            MgrsReference
        """
        from geogrids.mgrs import MgrsReference

        return MgrsReference.from_utm(self, precision)

    def to_str(self, digits: int = 0) -> str:
        """
        Render as '<zone> <hemisphere> <easting> <northing>', e.g. '31 N 448252 5411933'

        Args:
            digits: (Default 0)
                Decimal places for easting and northing
        """
        return f'{self.zone:02d} {self.hemisphere} {self.easting:.{digits}f} {self.northing:.{digits}f}'
