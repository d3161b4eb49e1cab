"""
Krueger series for the transverse Mercator projection, to 6th order in the
third flattening n (Karney 2011, "Transverse Mercator with an accuracy of a
few nanometers", Eqs. 14 & 35).
"""

__all__ = ['TrigSums', 'krueger_alpha', 'krueger_beta', 'rectifying_radius', 'trig_sums']

from functools import lru_cache
from typing import NamedTuple

import numpy as np

# Rows are j = 1..6; columns are the coefficients of n, n^2, ..., n^6
_ALPHA = np.array([
    [1/2, -2/3, 5/16, 41/180, -127/288, 7891/37800],
    [0., 13/48, -3/5, 557/1440, 281/630, -1983433/1935360],
    [0., 0., 61/240, -103/140, 15061/26880, 167603/181440],
    [0., 0., 0., 49561/161280, -179/168, 6601661/7257600],
    [0., 0., 0., 0., 34729/80640, -3418889/1995840],
    [0., 0., 0., 0., 0., 212378941/319334400],
])

_BETA = np.array([
    [1/2, -2/3, 37/96, -1/360, -81/512, 96199/604800],
    [0., 1/48, 1/15, -437/1440, 46/105, -1118711/3870720],
    [0., 0., 17/480, -37/840, -209/4480, 5569/90720],
    [0., 0., 0., 4397/161280, -11/504, -830251/7257600],
    [0., 0., 0., 0., 4583/161280, -108847/3991680],
    [0., 0., 0., 0., 0., 20648693/638668800],
])

_J = np.arange(1, 7)
_TWO_J = 2 * _J


class TrigSums(NamedTuple):
    """
    The four trigonometric sums shared by the forward and inverse series,
    for coefficients c[j] evaluated at (xi, eta):

        sin_cosh:  sum c[j] sin(2j xi) cosh(2j eta)
        cos_sinh:  sum c[j] cos(2j xi) sinh(2j eta)
        cos_cosh:  sum 2j c[j] cos(2j xi) cosh(2j eta)
        sin_sinh:  sum 2j c[j] sin(2j xi) sinh(2j eta)
    """
    sin_cosh: float
    cos_sinh: float
    cos_cosh: float
    sin_sinh: float


def _evaluate(table: np.ndarray, n: float) -> np.ndarray:
    coefficients = table @ np.power(n, _J)
    coefficients.setflags(write=False)
    return coefficients


@lru_cache(maxsize=16)
def krueger_alpha(n: float) -> np.ndarray:
    """
    The forward-series coefficients alpha[1..6] for third flattening n.

    Returns:
        A read-only array of length 6 (alpha[0] holds alpha_1)
    """
    return _evaluate(_ALPHA, n)


@lru_cache(maxsize=16)
def krueger_beta(n: float) -> np.ndarray:
    """
    The inverse-series coefficients beta[1..6] for third flattening n.

    Returns:
        A read-only array of length 6 (beta[0] holds beta_1)
    """
    return _evaluate(_BETA, n)


def rectifying_radius(a: float, n: float) -> float:
    """A, the radius of the circle with the circumference of a meridian"""
    n2 = n * n
    return a / (1 + n) * (1 + n2 / 4 + n2 ** 2 / 64 + n2 ** 3 / 256)


def trig_sums(coefficients: np.ndarray, xi: float, eta: float) -> TrigSums:
    """
    Evaluate the Krueger trigonometric sums at (xi, eta).

    Overflow in the hyperbolic terms is not raised; it surfaces as inf/NaN in
    the returned sums, for the caller to reject.
    """
    with np.errstate(over='ignore', invalid='ignore'):
        sin = np.sin(_TWO_J * xi)
        cos = np.cos(_TWO_J * xi)
        sinh = np.sinh(_TWO_J * eta)
        cosh = np.cosh(_TWO_J * eta)

        return TrigSums(
            float(np.sum(coefficients * sin * cosh)),
            float(np.sum(coefficients * cos * sinh)),
            float(np.sum(_TWO_J * coefficients * cos * cosh)),
            float(np.sum(_TWO_J * coefficients * sin * sinh)),
        )
