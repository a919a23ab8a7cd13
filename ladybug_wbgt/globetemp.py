# coding=utf-8
"""Utility functions for calculating the temperature of a black globe.

The globe temperature is the equilibrium temperature of a matte black sphere
that absorbs shortwave solar radiation and downwelling longwave radiation from
the atmosphere while it emits longwave radiation and exchanges heat with the
surrounding air by forced convection. The steady-state balance is::

    eps * sigma * Tg^4 + h_c * (Tg - Ta) = alpha_sp * SW + eps * eps_a * sigma * Ta^4

The equation is quartic in Tg and it is solved here with Newton-Raphson
iteration starting from the air temperature.
"""

import logging
import math

from .parameter.globe import GlobeParameter

_logger = logging.getLogger(__name__)

# status of a globe temperature solution
MISSING = 0  # at least one input was missing
DEGENERATE = 1  # the derivative of the balance became flat
CONVERGED = 2
BEST_EFFORT = 3  # the iteration limit was hit before convergence
STATUS_NAMES = ('missing', 'degenerate', 'converged', 'best effort')

MAX_ITER = 100
TOLERANCE = 0.01  # K
MIN_DERIVATIVE = 1e-7


class GlobeEnergyBalance:
    """The radiative-convective energy balance of a globe for one set of conditions.

    Args:
        ta_k: Air temperature [K].
        sw: Incoming shortwave radiation [W/m2]. Negative values are used as given.
        ws: Wind speed [m/s]. Negative values are treated as 0.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).

    Properties:
        * ta_k
        * reynolds
        * convection_coefficient
        * absorbed_radiation
    """
    __slots__ = ('_ta_k', '_reynolds', '_h_c', '_left', '_emit')

    def __init__(self, ta_k, sw, ws, globe_par=None):
        globe_par = globe_par or GlobeParameter()
        sigma = globe_par.STEFAN_BOLTZMANN
        ws = ws if ws > 0 else 0
        self._ta_k = ta_k
        self._reynolds = ws * globe_par.diameter / globe_par.viscosity
        self._h_c = 0.0014 * self._reynolds ** 0.6 * \
            (globe_par.conductivity / globe_par.diameter)
        self._left = globe_par.effective_absorptivity * sw + \
            globe_par.emissivity * globe_par.atmospheric_emissivity * sigma * ta_k ** 4
        self._emit = globe_par.emissivity * sigma

    @property
    def ta_k(self):
        """Air temperature in Kelvin."""
        return self._ta_k

    @property
    def reynolds(self):
        """Reynolds number of the air flow around the globe."""
        return self._reynolds

    @property
    def convection_coefficient(self):
        """Convective heat transfer coefficient of the globe [W/m2-K]."""
        return self._h_c

    @property
    def absorbed_radiation(self):
        """Shortwave and longwave radiation absorbed by the globe [W/m2]."""
        return self._left

    def residual(self, tg_k):
        """Get the imbalance of energy [W/m2] at a given globe temperature [K]."""
        return self._emit * tg_k ** 4 + self._h_c * (tg_k - self._ta_k) - self._left

    def derivative(self, tg_k):
        """Get the derivative of the residual with respect to globe temperature."""
        return 4 * self._emit * tg_k ** 3 + self._h_c

    def __repr__(self):
        return 'Globe Energy Balance: [Ta: {} K, Re: {}]'.format(
            self._ta_k, round(self._reynolds, 2))


def globe_temperature_solution(ta, sw, ws, globe_par=None, max_iter=MAX_ITER,
                               tolerance=TOLERANCE, min_derivative=MIN_DERIVATIVE):
    """Solve for the globe temperature and report how the solution was reached.

    Args:
        ta: Air temperature [C]. None or NaN marks a missing value.
        sw: Incoming shortwave radiation [W/m2]. None or NaN marks a missing value.
        ws: Wind speed [m/s]. None or NaN marks a missing value.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Change in globe temperature [K] between two iterations below
            which the solution is considered converged. (Default: 0.01).
        min_derivative: Absolute derivative of the energy balance below which the
            iteration is abandoned and the result is missing. (Default: 1e-7).

    Returns:
        A dictionary with the following keys.

        -   tg: Globe temperature [C]. None if the status is missing or degenerate.

        -   status: An integer for how the solution was reached. One of
            MISSING (0), DEGENERATE (1), CONVERGED (2) or BEST_EFFORT (3).
            BEST_EFFORT means that the last estimate was accepted after
            max_iter iterations without meeting the tolerance.

        -   iterations: The number of iterations that were run.
    """
    assert max_iter >= 1, 'max_iter must be at least 1. Got {}'.format(max_iter)
    if _is_missing(ta) or _is_missing(sw) or _is_missing(ws):
        return {'tg': None, 'status': MISSING, 'iterations': 0}

    balance = GlobeEnergyBalance(ta + 273.15, sw, ws, globe_par)
    tg_prev = balance.ta_k
    for i in range(max_iter):
        f_prime = balance.derivative(tg_prev)
        if abs(f_prime) < min_derivative:
            _logger.debug('Flat energy balance derivative at Tg={} K. Ta={} C, '
                          'SW={} W/m2, WS={} m/s.'.format(tg_prev, ta, sw, ws))
            return {'tg': None, 'status': DEGENERATE, 'iterations': i + 1}
        tg_next = tg_prev - balance.residual(tg_prev) / f_prime
        if abs(tg_next - tg_prev) < tolerance:
            return {'tg': tg_next - 273.15, 'status': CONVERGED, 'iterations': i + 1}
        tg_prev = tg_next
    return {'tg': tg_next - 273.15, 'status': BEST_EFFORT, 'iterations': max_iter}


def globe_temperature(ta, sw, ws, globe_par=None, max_iter=MAX_ITER,
                      tolerance=TOLERANCE, min_derivative=MIN_DERIVATIVE):
    """Calculate the temperature of a black globe from air temperature, sun and wind.

    Note that estimates accepted at the iteration limit are returned like converged
    values. Use globe_temperature_solution to tell them apart.

    Args:
        ta: Air temperature [C].
        sw: Incoming shortwave radiation [W/m2].
        ws: Wind speed [m/s]. Negative speeds are treated as still air.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Convergence tolerance in Kelvin. (Default: 0.01).
        min_derivative: Flat derivative threshold. (Default: 1e-7).

    Returns:
        Globe temperature [C]. None if any input is missing or if the energy
        balance had no usable derivative.
    """
    return globe_temperature_solution(
        ta, sw, ws, globe_par, max_iter, tolerance, min_derivative)['tg']


def _is_missing(value):
    """Check whether a single input value is missing."""
    return value is None or math.isnan(value)
