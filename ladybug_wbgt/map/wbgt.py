# coding=utf-8
"""Utility functions for calculating Wet Bulb Globe Temperature (WBGT) with NumPy.

The functions here run whole fields of conditions through the wet bulb, globe
temperature and WBGT formulas. Missing cells in any input stay missing in
every output.
"""

import logging

import numpy as np
from ladybug.psychrometrics import wet_bulb_from_db_rh

from ..globetemp import MAX_ITER, TOLERANCE
from ..wetbulb import _check_method
from ..wbgt import wbgt_from_components
from .globe import globe_temperature_solution_np
from ._helper import as_fields, is_masked_input, fill_missing

_logger = logging.getLogger(__name__)


def wet_bulb_temperature_np(ta, rh, method='stull', b_press=101325,
                            missing_value=None):
    """Calculate wet bulb temperature [C] for fields of air temperature and humidity.

    Args:
        ta: Air temperature [C] as a NumPy array.
        rh: Relative humidity [%] as a NumPy array.
        method: Text for the method used to compute the wet bulb. Choose from
            "stull" and "psychrometric". (Default: "stull").
        b_press: Barometric pressure [Pa], only used by the psychrometric
            method. (Default: 101325).
        missing_value: An optional number that marks missing cells. (Default: None).

    Returns:
        A NumPy array of wet bulb temperature [C].
    """
    method = _check_method(method)
    masked = is_masked_input(ta, rh)
    (ta, rh), missing = as_fields(ta, rh, missing_value=missing_value)
    tw = np.full(ta.shape, np.nan)
    valid = ~missing
    if method == 'stull':
        tw[valid] = stull_wet_bulb_np(ta[valid], rh[valid])
    else:
        tw[valid] = [wet_bulb_from_db_rh(t, h, b_press)
                     for t, h in zip(ta[valid], rh[valid])]
    return fill_missing(tw, missing, missing_value, masked)


def stull_wet_bulb_np(ta, rh):
    """Calculate wet bulb temperature [C] with Stull (2011) for NumPy arrays."""
    return ta * np.arctan(0.151977 * np.sqrt(rh + 8.313659)) + np.arctan(ta + rh) - \
        np.arctan(rh - 1.676331) + \
        0.00391838 * np.power(rh, 1.5) * np.arctan(0.023101 * rh) - 4.686035


def wet_bulb_globe_temperature_np(
        ta, rh, sw, ws, globe_par=None, indoor=False, wet_bulb_method='stull',
        max_iter=MAX_ITER, tolerance=TOLERANCE, missing_value=None):
    """Calculate Wet Bulb Globe Temperature (WBGT) for one time step of fields.

    Args:
        ta: Air temperature [C] as a NumPy array.
        rh: Relative humidity [%] as a NumPy array.
        sw: Incoming shortwave radiation [W/m2] as a NumPy array.
        ws: Wind speed [m/s] as a NumPy array.
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        indoor: Boolean to note whether the indoor formula should be used.
            (Default: False).
        wet_bulb_method: Text for the wet bulb method. Choose from "stull" and
            "psychrometric". (Default: "stull").
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Convergence tolerance in Kelvin. (Default: 0.01).
        missing_value: An optional number that marks missing cells. (Default: None).

    Returns:
        A dictionary with the following keys. All values are arrays with the
        shape of the inputs.

        -   wbgt: Wet Bulb Globe Temperature [C].

        -   globe: Globe temperature [C].

        -   wet_bulb: Wet bulb temperature [C].

        -   status: Integer status of the globe temperature solution of each cell.
    """
    masked = is_masked_input(ta, rh, sw, ws)
    (ta, rh, sw, ws), missing = \
        as_fields(ta, rh, sw, ws, missing_value=missing_value)
    ta[missing] = np.nan  # a cell missing in any input is missing for all models

    solution = globe_temperature_solution_np(
        ta, sw, ws, globe_par, max_iter, tolerance)
    tg = solution['tg']
    tw = wet_bulb_temperature_np(ta, rh, wet_bulb_method)
    wbgt = wbgt_from_components(tw, tg, ta, indoor)

    all_missing = missing | np.isnan(tg)
    return {
        'wbgt': fill_missing(wbgt, all_missing, missing_value, masked),
        'globe': fill_missing(tg, all_missing, missing_value, masked),
        'wet_bulb': fill_missing(tw, missing, missing_value, masked),
        'status': solution['status']
    }


def wbgt_time_series_np(
        ta, rh, sw, ws, globe_par=None, indoor=False, wet_bulb_method='stull',
        max_iter=MAX_ITER, tolerance=TOLERANCE, missing_value=None):
    """Calculate WBGT for fields that have a leading time axis.

    Each time step is run through wet_bulb_globe_temperature_np and the results
    are stacked back along the time axis.

    Args:
        ta: Air temperature [C] as a NumPy array of shape (time, ...).
        rh: Relative humidity [%] as a NumPy array of shape (time, ...).
        sw: Incoming shortwave radiation [W/m2] as a NumPy array of shape (time, ...).
        ws: Wind speed [m/s] as a NumPy array of shape (time, ...).
        globe_par: Optional GlobeParameter object. (Default: None).
        indoor: Boolean to note whether the indoor formula should be used.
            (Default: False).
        wet_bulb_method: Text for the wet bulb method. (Default: "stull").
        max_iter: Maximum number of Newton-Raphson iterations. (Default: 100).
        tolerance: Convergence tolerance in Kelvin. (Default: 0.01).
        missing_value: An optional number that marks missing cells. (Default: None).

    Returns:
        A dictionary with the same keys as wet_bulb_globe_temperature_np where
        each value has the shape of the inputs.
    """
    (ta, rh, sw, ws), missing = as_fields(ta, rh, sw, ws, missing_value=missing_value)
    assert ta.ndim >= 1, 'Time series inputs must have at least one dimension.'
    ta[missing] = np.nan

    steps = ta.shape[0]
    results = {'wbgt': [], 'globe': [], 'wet_bulb': [], 'status': []}
    for i in range(steps):
        step_result = wet_bulb_globe_temperature_np(
            ta[i], rh[i], sw[i], ws[i], globe_par, indoor, wet_bulb_method,
            max_iter, tolerance)
        for key, value in step_result.items():
            results[key].append(value)
        _logger.info('Computed WBGT for time step {} of {}.'.format(i + 1, steps))

    stacked = {key: np.stack(values) if values else np.empty(ta.shape)
               for key, values in results.items()}
    for key in ('wbgt', 'globe', 'wet_bulb'):
        if missing_value is not None:
            stacked[key][np.isnan(stacked[key])] = missing_value
    return stacked


def wbgt_warning_category_np(wbgt, missing_value=None):
    """Get the NWS warning category of every cell in a field of WBGT.

    Categories are the same as the base wbgt_warning_category function. Missing
    cells get a category of -1.

    Args:
        wbgt: Wet Bulb Globe Temperature [C] as a NumPy array.
        missing_value: An optional number that marks missing cells. (Default: None).
    """
    (wbgt,), missing = as_fields(wbgt, missing_value=missing_value)
    wbgt_f = wbgt * 9. / 5. + 32.
    conditions = [
        missing,
        wbgt_f < 80,
        (wbgt_f >= 80) & (wbgt_f < 85),
        (wbgt_f >= 85) & (wbgt_f < 88),
        (wbgt_f >= 88) & (wbgt_f < 90)
    ]
    choices = [-1, 0, 1, 2, 3]
    result = np.select(conditions, choices, default=4)

    return result
