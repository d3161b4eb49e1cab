"""
Forward and inverse UTM projections.

The transverse Mercator projection is evaluated with Karney's (2011) 6th
order Krueger series, which is accurate to a few nanometers within 3900km of
the central meridian. See https://arxiv.org/abs/1002.1417
"""

__all__ = ['ForwardResult', 'InverseResult', 'grid_northing', 'project', 'unproject']

import math
from typing import NamedTuple, Tuple

import numpy as np

from geogrids._const import (
    CONVERGENCE_PRECISION, EN_PRECISION, LATLON_PRECISION, MAX_NEWTON_ITERATIONS,
    NEWTON_TOLERANCE, SCALE_PRECISION, UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_K0,
    UTM_MAX_LATITUDE, UTM_MIN_LATITUDE,
)
from geogrids._series import krueger_alpha, krueger_beta, rectifying_radius, trig_sums
from geogrids.ellipsoid import Ellipsoid, WGS84
from geogrids.errors import ConvergenceError, InvalidCoordinateError, InvalidPointError, OutOfRangeError
from geogrids.utils.functions import is_finite, round_half_up
from geogrids.utils.logging import LOGGER
from geogrids.zones import central_meridian, resolve_zone, wrap_longitude


class ForwardResult(NamedTuple):
    """Output of the forward projection"""
    zone: int
    hemisphere: str
    easting: float
    northing: float
    convergence: float
    scale: float


class InverseResult(NamedTuple):
    """Output of the inverse projection"""
    latitude: float
    longitude: float
    convergence: float
    scale: float


def _conformal_tau(tau: float, e: float) -> float:
    """tau' = tan of the conformal latitude, given tau = tan of the geodetic latitude"""
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
    return tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)


def _invert_conformal(tau_prime: float, e: float) -> Tuple[float, int]:
    """
    Recover tau (tan of geodetic latitude) from tau' by Newton's method,
    seeded with tau'. Karney 2011 Eqs. 19-21.

    Args:
        tau_prime:
            The tangent of the conformal latitude

        e:
            The ellipsoid's eccentricity

    Returns:
        tau, and the number of Newton steps taken

    Raises:
        ConvergenceError: no step fell within the tolerance after
            MAX_NEWTON_ITERATIONS steps. The tolerance is absolute, and above
            tau ~ 1e4 (within about 0.01 degrees of a pole, well outside UTM)
            the spacing of floats near tau exceeds it, so only an exact zero
            step converges there. NaN input, and tau' large enough for tau**2
            to overflow, always raise.
    """
    e2m = 1 - e * e
    tau_i = tau_prime
    for iteration in range(1, MAX_NEWTON_ITERATIONS + 1):
        tau_i_prime = _conformal_tau(tau_i, e)
        delta = (
            (tau_prime - tau_i_prime) / math.sqrt(1 + tau_i_prime * tau_i_prime)
            * (1 + e2m * tau_i * tau_i) / (e2m * math.sqrt(1 + tau_i * tau_i))
        )
        tau_i += delta
        # delta toggles around +/-1e-16 once converged, hence the loose tolerance
        if abs(delta) <= NEWTON_TOLERANCE:
            return tau_i, iteration

    raise ConvergenceError(
        f'latitude failed to converge after {MAX_NEWTON_ITERATIONS} iterations'
    )


def _forward(latitude: float, lam: float, ellipsoid: Ellipsoid) -> Tuple[float, float, float, float]:
    """
    Transverse Mercator of a latitude (degrees) at lam radians from the
    central meridian. Returns unrounded (x, y, convergence, scale), with x and
    y in meters from the central meridian and the equator, convergence in
    radians.
    """
    phi = math.radians(latitude)

    a, e, n = ellipsoid.a, ellipsoid.e, ellipsoid.n
    alpha = krueger_alpha(n)
    big_a = rectifying_radius(a, n)

    cos_lam, sin_lam, tan_lam = math.cos(lam), math.sin(lam), math.tan(lam)

    tau = math.tan(phi)
    tau_prime = _conformal_tau(tau, e)

    xi_prime = math.atan2(tau_prime, cos_lam)
    eta_prime = math.asinh(sin_lam / math.sqrt(tau_prime * tau_prime + cos_lam * cos_lam))

    sums = trig_sums(alpha, xi_prime, eta_prime)
    xi = xi_prime + sums.sin_cosh
    eta = eta_prime + sums.cos_sinh

    x = UTM_K0 * big_a * eta
    y = UTM_K0 * big_a * xi

    # Convergence; Karney 2011 Eqs. 23, 24
    p_prime = 1 + sums.cos_cosh
    q_prime = sums.sin_sinh
    gamma = (
        math.atan(tau_prime / math.sqrt(1 + tau_prime * tau_prime) * tan_lam)
        + math.atan2(q_prime, p_prime)
    )

    # Scale; Karney 2011 Eq. 25
    sin_phi = math.sin(phi)
    k = (
        UTM_K0
        * math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau)
        / math.sqrt(tau_prime * tau_prime + cos_lam * cos_lam)
        * big_a / a * math.sqrt(p_prime * p_prime + q_prime * q_prime)
    )

    return x, y, gamma, k


def project(latitude: float, longitude: float, ellipsoid: Ellipsoid = WGS84) -> ForwardResult:
    """
    Project a geodetic latitude/longitude onto its UTM zone.

    Args:
        latitude:
            The latitude, in degrees. Must be within [-80, 84].

        longitude:
            The longitude, in degrees

        ellipsoid: (Default WGS84)
            The ellipsoid the coordinate is referenced to

    Returns:
        ForwardResult, with easting/northing rounded to 6 decimal places,
        convergence (degrees) to 9 and scale to 12.
    """
    longitude = wrap_longitude(longitude)
    zone, lambda0, _ = resolve_zone(latitude, longitude)

    x, y, gamma, k = _forward(latitude, math.radians(longitude) - lambda0, ellipsoid)

    x += UTM_FALSE_EASTING
    if y < 0:
        y += UTM_FALSE_NORTHING

    return ForwardResult(
        zone,
        'N' if latitude >= 0 else 'S',
        round_half_up(x, EN_PRECISION),
        round_half_up(y, EN_PRECISION),
        round_half_up(math.degrees(gamma), CONVERGENCE_PRECISION),
        round_half_up(k, SCALE_PRECISION),
    )


def grid_northing(latitude: float, offset: float = 0., ellipsoid: Ellipsoid = WGS84) -> float:
    """
    The UTM northing of a latitude at a longitude offset from the central
    meridian, the same in every zone.

    Args:
        latitude:
            The latitude, in degrees. Must be within [-80, 84].

        offset: (Default 0)
            Degrees east of the central meridian

        ellipsoid: (Default WGS84)
            The ellipsoid the coordinate is referenced to

    Returns:
        float, rounded to 6 decimal places
    """
    if not is_finite(latitude, offset):
        raise InvalidPointError(f'invalid point ({latitude}, {offset})')

    if not UTM_MIN_LATITUDE <= latitude <= UTM_MAX_LATITUDE:
        raise OutOfRangeError(f'latitude {latitude} is outside UTM limits')

    _, y, _, _ = _forward(latitude, math.radians(offset), ellipsoid)
    if y < 0:
        y += UTM_FALSE_NORTHING

    return round_half_up(y, EN_PRECISION)


def unproject(
    zone: int,
    hemisphere: str,
    easting: float,
    northing: float,
    ellipsoid: Ellipsoid = WGS84,
) -> InverseResult:
    """
    Convert a UTM coordinate back to geodetic latitude/longitude.

    Args:
        zone:
            The UTM zone, 1 through 60

        hemisphere:
            'N' or 'S'

        easting:
            Easting in meters, including the 500km false easting

        northing:
            Northing in meters, including the 10,000km false northing in the
            southern hemisphere

        ellipsoid: (Default WGS84)
            The ellipsoid the coordinate is referenced to

    Returns:
        InverseResult, with latitude/longitude rounded to 11 decimal places,
        convergence (degrees) to 9 and scale to 12.

    Raises:
        InvalidCoordinateError: zone, easting or northing is not finite
        ConvergenceError: the coordinate is too far outside its zone to
            invert. Within about 0.01 degrees of a pole this may also happen.
    """
    if not is_finite(zone, easting, northing):
        raise InvalidCoordinateError(f'invalid UTM coordinate {zone} {hemisphere} {easting} {northing}')

    x = easting - UTM_FALSE_EASTING
    y = northing - UTM_FALSE_NORTHING if hemisphere == 'S' else northing

    a, e, n = ellipsoid.a, ellipsoid.e, ellipsoid.n
    beta = krueger_beta(n)
    big_a = rectifying_radius(a, n)

    eta = x / (UTM_K0 * big_a)
    xi = y / (UTM_K0 * big_a)

    sums = trig_sums(beta, xi, eta)
    xi_prime = xi - sums.sin_cosh
    eta_prime = eta - sums.cos_sinh

    with np.errstate(over='ignore', invalid='ignore'):
        # Far outside the zone these overflow; the Newton step then fails to converge
        sinh_eta_prime = float(np.sinh(eta_prime))
        sin_xi_prime = float(np.sin(xi_prime))
        cos_xi_prime = float(np.cos(xi_prime))

    tau_prime = sin_xi_prime / math.sqrt(sinh_eta_prime * sinh_eta_prime + cos_xi_prime * cos_xi_prime)

    tau, iterations = _invert_conformal(tau_prime, e)
    LOGGER.debug('Latitude converged after %d iterations', iterations)

    phi = math.atan(tau)
    lam = math.atan2(sinh_eta_prime, cos_xi_prime)

    # Convergence; Karney 2011 Eqs. 26, 27
    p = 1 - sums.cos_cosh
    q = sums.sin_sinh
    gamma = math.atan(math.tan(xi_prime) * math.tanh(eta_prime)) + math.atan2(q, p)

    # Scale; Karney 2011 Eq. 28
    sin_phi = math.sin(phi)
    k = (
        UTM_K0
        * math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau)
        * math.sqrt(sinh_eta_prime * sinh_eta_prime + cos_xi_prime * cos_xi_prime)
        * big_a / a / math.sqrt(p * p + q * q)
    )

    lam += math.radians(central_meridian(zone))

    return InverseResult(
        round_half_up(math.degrees(phi), LATLON_PRECISION),
        round_half_up(math.degrees(lam), LATLON_PRECISION),
        round_half_up(math.degrees(gamma), CONVERGENCE_PRECISION),
        round_half_up(k, SCALE_PRECISION),
    )
