# coding=utf-8
"""Utility functions for calculating globe temperature over fields of conditions.

This module is devoted to solving the globe energy balance with NumPy. Each cell
goes through exactly the same Newton-Raphson iteration as the base
globe_temperature_solution function but all cells that are still iterating
are advanced together.
"""

import logging

import numpy as np

from ..parameter.globe import GlobeParameter
from ..globetemp import MISSING, DEGENERATE, CONVERGED, BEST_EFFORT, \
    MAX_ITER, TOLERANCE, MIN_DERIVATIVE
from ._helper import as_fields, is_masked_input, fill_missing

_logger = logging.getLogger(__name__)


def globe_temperature_np(ta, sw, ws, globe_par=None, max_iter=MAX_ITER,
                         tolerance=TOLERANCE, min_derivative=MIN_DERIVATIVE,
                         missing_value=None):
    """Calculate the globe temperature [C] of every cell in a field.

    This function is the same as the base globe_temperature function but it
    uses NumPy arrays for the calculation.

    Args:
        ta: Air temperature [C] as a NumPy array.
        sw: Incoming shortwave radiation [W/m2] as a NumPy array.
        ws: Wind speed [m/s] as a NumPy array.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Convergence tolerance in Kelvin. (Default: 0.01).
        min_derivative: Flat derivative threshold. (Default: 1e-7).
        missing_value: An optional number that marks missing input cells. When
            specified, missing output cells are also set to this number instead
            of NaN. (Default: None).

    Returns:
        A NumPy array of globe temperature [C] with the same shape as the inputs.
        A masked array is returned when any of the inputs is a masked array.
    """
    return globe_temperature_solution_np(
        ta, sw, ws, globe_par, max_iter, tolerance, min_derivative,
        missing_value)['tg']


def globe_temperature_solution_np(ta, sw, ws, globe_par=None, max_iter=MAX_ITER,
                                  tolerance=TOLERANCE, min_derivative=MIN_DERIVATIVE,
                                  missing_value=None):
    """Solve for the globe temperature of a field and report how each cell was solved.

    Args:
        ta: Air temperature [C] as a NumPy array.
        sw: Incoming shortwave radiation [W/m2] as a NumPy array.
        ws: Wind speed [m/s] as a NumPy array.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Convergence tolerance in Kelvin. (Default: 0.01).
        min_derivative: Flat derivative threshold. (Default: 1e-7).
        missing_value: An optional number that marks missing cells. (Default: None).

    Returns:
        A dictionary with the following keys.

        -   tg: Array of globe temperature [C]. Cells with a MISSING or
            DEGENERATE status are missing.

        -   status: Integer array with the status of each cell. One of
            MISSING (0), DEGENERATE (1), CONVERGED (2) or BEST_EFFORT (3).

        -   iterations: Integer array with the iterations run for each cell.
    """
    assert max_iter >= 1, 'max_iter must be at least 1. Got {}'.format(max_iter)
    masked = is_masked_input(ta, sw, ws)
    (ta, sw, ws), missing = as_fields(ta, sw, ws, missing_value=missing_value)
    globe_par = globe_par or GlobeParameter()

    status = np.full(ta.shape, MISSING, dtype=np.int8)
    iterations = np.zeros(ta.shape, dtype=np.int32)
    tg = np.full(ta.shape, np.nan)

    valid = ~missing
    result, cell_status, cell_iter = _newton_raphson_np(
        ta[valid] + 273.15, sw[valid], ws[valid], globe_par,
        max_iter, tolerance, min_derivative)
    tg[valid] = result
    status[valid] = cell_status
    iterations[valid] = cell_iter

    degenerate = np.count_nonzero(status == DEGENERATE)
    if degenerate:
        _logger.warning(
            'The globe energy balance had a flat derivative in {} cell(s). '
            'These cells are missing in the result.'.format(degenerate))
    best_effort = np.count_nonzero(status == BEST_EFFORT)
    if best_effort:
        _logger.info(
            'Globe temperature did not converge within {} iterations in {} '
            'cell(s). The last estimate was used.'.format(max_iter, best_effort))

    tg = fill_missing(tg, np.isnan(tg), missing_value, masked)
    return {'tg': tg, 'status': status, 'iterations': iterations}


def energy_balance_np(ta_k, sw, ws, globe_par=None):
    """Get the terms of the globe energy balance for arrays of conditions.

    Args:
        ta_k: Air temperature [K] as a NumPy array.
        sw: Incoming shortwave radiation [W/m2] as a NumPy array.
        ws: Wind speed [m/s] as a NumPy array. Negative values are treated as 0.
        globe_par: Optional GlobeParameter object. (Default: None).

    Returns:
        A tuple with the Reynolds number, the convective heat transfer coefficient
        [W/m2-K] and the absorbed radiation [W/m2] as arrays.
    """
    globe_par = globe_par or GlobeParameter()
    sigma = globe_par.STEFAN_BOLTZMANN
    ws = np.where(ws < 0, 0, ws)
    reynolds = ws * globe_par.diameter / globe_par.viscosity
    h_c = 0.0014 * reynolds ** 0.6 * (globe_par.conductivity / globe_par.diameter)
    left = globe_par.effective_absorptivity * sw + \
        globe_par.emissivity * globe_par.atmospheric_emissivity * sigma * ta_k ** 4
    return reynolds, h_c, left


def _newton_raphson_np(ta_k, sw, ws, globe_par, max_iter, tolerance, min_derivative):
    """Run the Newton-Raphson iteration for 1D arrays of cells with complete inputs."""
    _, h_c, left = energy_balance_np(ta_k, sw, ws, globe_par)
    emit = globe_par.emissivity * globe_par.STEFAN_BOLTZMANN

    result = np.full(ta_k.shape, np.nan)
    status = np.full(ta_k.shape, BEST_EFFORT, dtype=np.int8)
    iterations = np.full(ta_k.shape, max_iter, dtype=np.int32)

    # arrays of the cells that are still iterating
    index = np.arange(ta_k.size)
    tg_prev, t_air = ta_k, ta_k
    for i in range(max_iter):
        if index.size == 0:
            break
        f_prime = 4 * emit * tg_prev ** 3 + h_c
        flat = np.abs(f_prime) < min_derivative
        if flat.any():
            status[index[flat]] = DEGENERATE
            iterations[index[flat]] = i + 1
            keep = ~flat
            index, tg_prev, t_air, h_c, left, f_prime = \
                index[keep], tg_prev[keep], t_air[keep], h_c[keep], left[keep], \
                f_prime[keep]

        f_val = emit * tg_prev ** 4 + h_c * (tg_prev - t_air) - left
        tg_next = tg_prev - f_val / f_prime
        done = np.abs(tg_next - tg_prev) < tolerance
        result[index[done]] = tg_next[done] - 273.15
        status[index[done]] = CONVERGED
        iterations[index[done]] = i + 1
        if i == max_iter - 1:  # accept the last estimate of the rest
            result[index[~done]] = tg_next[~done] - 273.15

        keep = ~done
        index, tg_prev, t_air, h_c, left = \
            index[keep], tg_next[keep], t_air[keep], h_c[keep], left[keep]
    return result, status, iterations
