# coding=utf-8
"""Utility functions for calculating the wet bulb temperature that enters WBGT.

Two methods are available:

* stull -- The empirical formula of R. Stull (2011), which only needs air
    temperature and relative humidity. It is accurate to within about 0.3 C
    for relative humidity between 5% and 99% and air temperature between
    -20 C and 50 C at sea level pressure.
* psychrometric -- The iterative psychrometric wet bulb of ladybug, which
    also accounts for barometric pressure.
"""

import math

from ladybug.psychrometrics import wet_bulb_from_db_rh

WET_BULB_METHODS = ('stull', 'psychrometric')


def wet_bulb_temperature(ta, rh, method='stull', b_press=101325):
    """Calculate wet bulb temperature [C] from air temperature and relative humidity.

    Note:
        [1] Stull, R., 2011. Wet-Bulb Temperature from Relative Humidity and Air
        Temperature. Journal of Applied Meteorology and Climatology, 50(11),
        2267-2269.

    Args:
        ta: Air temperature [C].
        rh: Relative humidity [%].
        method: Text for the method used to compute the wet bulb. Choose from
            "stull" and "psychrometric". (Default: "stull").
        b_press: Barometric pressure [Pa], only used by the psychrometric
            method. (Default: 101325).

    Returns:
        Wet bulb temperature [C].
    """
    method = _check_method(method)
    if method == 'stull':
        return stull_wet_bulb(ta, rh)
    return wet_bulb_from_db_rh(ta, rh, b_press)


def stull_wet_bulb(ta, rh):
    """Calculate wet bulb temperature [C] with the empirical formula of Stull (2011).

    Args:
        ta: Air temperature [C].
        rh: Relative humidity [%].
    """
    return ta * math.atan(0.151977 * (rh + 8.313659) ** 0.5) + math.atan(ta + rh) - \
        math.atan(rh - 1.676331) + \
        0.00391838 * rh ** 1.5 * math.atan(0.023101 * rh) - 4.686035


def _check_method(method):
    """Check that a wet bulb method is recognized and return it in lower case."""
    clean_method = str(method).lower()
    if clean_method not in WET_BULB_METHODS:
        raise ValueError('Wet bulb method "{}" is not recognized. Choose from '
                         '{}.'.format(method, WET_BULB_METHODS))
    return clean_method
