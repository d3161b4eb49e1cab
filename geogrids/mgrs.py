"""
Military Grid Reference System (MGRS) grid references.

An MGRS reference extends a UTM zone with a latitude band letter and a
two-letter identifier for the 100km square the coordinate falls in, e.g.
31U DQ 48251 11932. Column letters cycle through three sets of eight
(keyed by zone mod 3); row letters repeat every 2,000km, with odd zones
offset by five letters.
"""

from __future__ import annotations

__all__ = ['Accuracy', 'MgrsReference']

from enum import IntEnum
import math
import re
from typing import Optional, Tuple, Union

from pydantic import ValidationError, validate_call

from geogrids._const import (
    E100K_LETTERS, LATITUDE_BANDS, MGRS_ROW_CYCLE, MGRS_SQUARE_SIZE, N100K_LETTERS,
)
from geogrids.coordinates import GeoPoint
from geogrids.ellipsoid import Ellipsoid, WGS84
from geogrids.errors import InvalidGridRefError, InvalidMgrsStringError, OutOfRangeError
from geogrids.projection import grid_northing
from geogrids.utils.logging import warn_once
from geogrids.utm import UtmCoordinate


_RE_COMPACT = re.compile(r'^(\d{1,2}[A-Z])([A-Z]{2})(\d+)$')
_RE_GZD = re.compile(r'^(\d{1,2})([A-Z])$')
_RE_SQUARE = re.compile(r'^[A-Z]{2}$')
_RE_DIGITS = re.compile(r'^\d{1,5}$')


class Accuracy(IntEnum):
    """
    MGRS precisions, valued by the number of easting (or northing) digits.
    """
    ONE = 5             # 10 digit
    TEN = 4             # 8 digit
    ONE_HUNDRED = 3     # 6 digit
    ONE_THOUSAND = 2    # 4 digit
    TEN_THOUSAND = 1    # 2 digit

    @property
    def digits(self) -> int:
        """Digits per axis"""
        return int(self.value)

    @property
    def total_digits(self) -> int:
        """Easting and northing digits combined"""
        return 2 * self.digits

    @property
    def meters(self) -> int:
        """Side length of the designated square, in meters"""
        return 10 ** (5 - self.digits)

    @classmethod
    def from_total_digits(cls, total_digits: int) -> Accuracy:
        if total_digits % 2 or not 2 <= total_digits <= 10:
            raise InvalidGridRefError(f'MGRS digit count must be even, 2 through 10; got {total_digits}')

        return cls(total_digits // 2)

    @classmethod
    def from_meters(cls, meters: int) -> Accuracy:
        for accuracy in cls:
            if accuracy.meters == meters:
                return accuracy

        raise InvalidGridRefError(f'no MGRS precision of {meters}m')


def _band_index(latitude: float) -> int:
    idx = math.floor(latitude / 8 + 10)
    if not 0 <= idx < len(LATITUDE_BANDS):
        raise OutOfRangeError(f'latitude {latitude} is outside MGRS limits')

    return idx


def _clamped_band_index(latitude: float) -> int:
    return min(max(math.floor(latitude / 8 + 10), 0), len(LATITUDE_BANDS) - 1)


class MgrsReference:
    """
    An MGRS grid reference.

    Easting and northing are meters within the 100km square. References
    parsed with fewer than 5 digits per axis designate a coarser square;
    the digits are the leading digits of the meter value ('482' is 48200m)
    and the digit count is kept as `precision`.

    Args:
        zone:
            The 6 degree longitudinal zone, 1 through 60

        band:
            The 8 degree latitude band, C through X (excluding I and O)

        e100k:
            Column letter of the 100km square

        n100k:
            Row letter of the 100km square

        easting:
            Easting within the 100km square, in meters

        northing:
            Northing within the 100km square, in meters

        precision: (Default 5)
            Digits per axis, 1 through 5 (or an Accuracy)

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        zone: int,
        band: str,
        e100k: str,
        n100k: str,
        easting: float,
        northing: float,
        precision: int = Accuracy.ONE,
        ellipsoid: Ellipsoid = WGS84,
    ):
        band, e100k, n100k = band.upper(), e100k.upper(), n100k.upper()

        if not 1 <= zone <= 60:
            raise InvalidGridRefError(f'invalid MGRS zone {zone}')

        if len(band) != 1 or band not in LATITUDE_BANDS:
            raise InvalidGridRefError(f'invalid MGRS band {band!r}')

        if len(e100k) != 1 or e100k not in E100K_LETTERS[(zone - 1) % 3]:
            raise InvalidGridRefError(f'invalid MGRS 100km column {e100k!r} for zone {zone}')

        if len(n100k) != 1 or n100k not in N100K_LETTERS[(zone - 1) % 2]:
            raise InvalidGridRefError(f'invalid MGRS 100km row {n100k!r}')

        if not (0 <= easting < MGRS_SQUARE_SIZE and 0 <= northing < MGRS_SQUARE_SIZE):
            raise InvalidGridRefError(
                f'MGRS easting/northing must be within the 100km square; got {easting} {northing}'
            )

        if not 1 <= precision <= 5:
            raise InvalidGridRefError(f'invalid MGRS precision {precision}')

        self._zone = zone
        self._band = band
        self._e100k = e100k
        self._n100k = n100k
        self._easting = easting
        self._northing = northing
        self._precision = Accuracy(precision)
        self._ellipsoid = ellipsoid

    def __eq__(self, other):
        if not isinstance(other, MgrsReference):
            return False

        return (
            self.zone == other.zone and
            self.band == other.band and
            self.e100k == other.e100k and
            self.n100k == other.n100k and
            self.easting == other.easting and
            self.northing == other.northing and
            self.precision == other.precision and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((
            self.zone, self.band, self.e100k, self.n100k,
            self.easting, self.northing, self.precision, self.ellipsoid
        ))

    def __repr__(self):
        return f'<MgrsReference({self.to_str()})>'

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def band(self) -> str:
        return self._band

    @property
    def e100k(self) -> str:
        return self._e100k

    @property
    def n100k(self) -> str:
        return self._n100k

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def precision(self) -> Accuracy:
        return self._precision

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @classmethod
    def from_utm(
        cls,
        utm: UtmCoordinate,
        precision: Optional[Union[int, Accuracy]] = None
    ) -> MgrsReference:
        """
        Encode a UTM coordinate as an MGRS grid reference. The latitude band
        is taken from the coordinate's inverse-projected latitude.

        Args:
            utm:
                The UTM coordinate

            precision: (Default 5)
                Digits per axis (1 through 5), or an Accuracy. Only affects
                rendering; easting/northing keep full resolution.

        Returns:
            MgrsReference
        """
        latitude = utm.to_geopoint().latitude
        band = LATITUDE_BANDS[_band_index(latitude)]

        # Columns in zone 1 are A-H, zone 2 J-R, zone 3 S-Z, then repeating
        col = math.floor(utm.easting / MGRS_SQUARE_SIZE)
        if not 1 <= col <= 8:
            raise InvalidGridRefError(f'easting {utm.easting} has no MGRS 100km column')
        e100k = E100K_LETTERS[(utm.zone - 1) % 3][col - 1]

        # Rows in odd zones are A-V, in even zones F-E
        row = math.floor(utm.northing / MGRS_SQUARE_SIZE) % 20
        n100k = N100K_LETTERS[(utm.zone - 1) % 2][row]

        return cls(
            utm.zone,
            band,
            e100k,
            n100k,
            utm.easting % MGRS_SQUARE_SIZE,
            utm.northing % MGRS_SQUARE_SIZE,
            precision=Accuracy.ONE if precision is None else precision,
            ellipsoid=utm.ellipsoid,
        )

    @classmethod
    def from_geopoint(
        cls,
        point: GeoPoint,
        precision: Optional[Union[int, Accuracy]] = None
    ) -> MgrsReference:
        """Encode a latitude/longitude as an MGRS grid reference"""
        return cls.from_utm(point.to_utm(), precision)

    @classmethod
    def from_str(cls, mgrs_str: str, ellipsoid: Ellipsoid = WGS84) -> MgrsReference:
        """
        Parses an MGRS grid reference, either space-separated
        ('31U DQ 48251 11932') or in compact military form ('31UDQ4825111932').

        Easting and northing must have the same number of digits (1 through
        5). Fewer than 5 digits designate a coarser square; '4825' is read
        as 48250m, not 4825m.

        Args:
            mgrs_str:
                The MGRS grid reference

            ellipsoid: (Default WGS84)
                The reference ellipsoid

        Returns:
            MgrsReference
        """
        text = mgrs_str.strip().upper()

        if not re.search(r'\s', text):
            match = _RE_COMPACT.match(text)
            if match is None:
                raise InvalidMgrsStringError(f'invalid MGRS grid reference {mgrs_str!r}')

            gzd, square, digits = match.groups()
            if len(digits) % 2:
                raise InvalidMgrsStringError(
                    f'MGRS easting/northing must have equal digit counts: {mgrs_str!r}'
                )
            half = len(digits) // 2
            parts = [gzd, square, digits[:half], digits[half:]]
        else:
            parts = text.split()

        if len(parts) != 4:
            raise InvalidMgrsStringError(f'invalid MGRS grid reference {mgrs_str!r}')

        gzd, square, easting, northing = parts
        gzd_match = _RE_GZD.match(gzd)
        if (
            gzd_match is None
            or not _RE_SQUARE.match(square)
            or not _RE_DIGITS.match(easting)
            or not _RE_DIGITS.match(northing)
        ):
            raise InvalidMgrsStringError(f'invalid MGRS grid reference {mgrs_str!r}')

        if len(easting) != len(northing):
            raise InvalidMgrsStringError(
                f'MGRS easting/northing must have equal digit counts: {mgrs_str!r}'
            )

        zone, band = gzd_match.groups()
        try:
            return cls(
                int(zone),
                band,
                square[0],
                square[1],
                # Leading digits of the meter value
                float(easting.ljust(5, '0')),
                float(northing.ljust(5, '0')),
                precision=len(easting),
                ellipsoid=ellipsoid,
            )
        except ValidationError as exc:
            raise InvalidMgrsStringError(f'invalid MGRS grid reference {mgrs_str!r}') from exc

    def to_str(self, precision: Optional[Union[int, Accuracy]] = None, compact: bool = False) -> str:
        """
        Render the grid reference, e.g. '31U DQ 48251 11932'. Easting and
        northing are truncated (not rounded) to the requested precision.

        Args:
            precision: (Default: the reference's own precision)
                Digits per axis (1 through 5), or an Accuracy

            compact: (Default False)
                If True, omit separators, e.g. '31UDQ4825111932'

        Returns:
            str
        """
        digits = int(self.precision if precision is None else precision)
        if not 1 <= digits <= 5:
            raise InvalidGridRefError(f'invalid MGRS precision {precision}')

        divisor = 10 ** (5 - digits)
        easting = f'{math.floor(self.easting / divisor):0{digits}d}'
        northing = f'{math.floor(self.northing / divisor):0{digits}d}'

        parts = (f'{self.zone:02d}{self.band}', f'{self.e100k}{self.n100k}', easting, northing)
        return ''.join(parts) if compact else ' '.join(parts)

    def to_utm(self) -> UtmCoordinate:
        """
        Decode to a UTM coordinate. For a parsed reference this is the
        south-west corner of the designated square.

        The 100km row letters repeat every 2,000km; the repetition is
        resolved with the latitude of the bottom of the band.

        Returns:
            UtmCoordinate
        """
        hemisphere = 'N' if self.band >= 'N' else 'S'

        col = E100K_LETTERS[(self.zone - 1) % 3].index(self.e100k) + 1
        e100k_m = col * MGRS_SQUARE_SIZE

        row = N100K_LETTERS[(self.zone - 1) % 2].index(self.n100k)
        n100k_m = row * MGRS_SQUARE_SIZE

        band_latitude = (LATITUDE_BANDS.index(self.band) - 10) * 8

        # Lowest northing of the band's bottom edge within the zone, extended
        # down to the enclosing 100km boundary. Parallels bow toward the pole
        # away from the central meridian, so in the south the lowest point
        # is at the zone edge.
        edge_offset = 0. if hemisphere == 'N' else 3.
        band_northing = grid_northing(band_latitude, edge_offset, self.ellipsoid)
        n_band = math.floor(band_northing / MGRS_SQUARE_SIZE) * MGRS_SQUARE_SIZE

        n2m = 0.
        while n2m + n100k_m + self.northing < n_band:
            n2m += MGRS_ROW_CYCLE

        return UtmCoordinate(
            self.zone,
            hemisphere,
            e100k_m + self.easting,
            n2m + n100k_m + self.northing,
            ellipsoid=self.ellipsoid,
        )

    def to_geopoint(self) -> GeoPoint:
        """
        Decode to latitude/longitude. For a parsed reference this is the
        south-west corner of the designated square.

        Returns:
            GeoPoint
        """
        point = self.to_utm().to_geopoint()

        band_idx = LATITUDE_BANDS.index(self.band)
        low = _clamped_band_index(point.latitude)
        if LATITUDE_BANDS[low] != self.band:
            # The square may straddle the band edge; accept if its north-east corner is inside
            _, north_east = self.to_bounds()
            if not low <= band_idx <= _clamped_band_index(north_east.latitude):
                warn_once(
                    'MGRS reference %s decodes to latitude %s, outside band %s',
                    self.to_str(), point.latitude, self.band
                )

        return point

    def to_bounds(self) -> Tuple[GeoPoint, GeoPoint]:
        """
        The south-west and north-east corners of the square designated by
        this reference at its precision.

        Returns:
            Tuple of (south-west GeoPoint, north-east GeoPoint)
        """
        utm = self.to_utm()
        size = self.precision.meters
        west = utm.easting - self.easting + math.floor(self.easting / size) * size
        south = utm.northing - self.northing + math.floor(self.northing / size) * size

        corners = (
            UtmCoordinate(utm.zone, utm.hemisphere, west, south, ellipsoid=self.ellipsoid),
            UtmCoordinate(utm.zone, utm.hemisphere, west + size, south + size, ellipsoid=self.ellipsoid),
        )
        return corners[0].to_geopoint(), corners[1].to_geopoint()
