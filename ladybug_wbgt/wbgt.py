# coding=utf-8
"""Utility functions for calculating the Wet Bulb Globe Temperature (WBGT)."""

from .globetemp import globe_temperature
from .wetbulb import wet_bulb_temperature


def wbgt_from_components(tw, tg, ta, indoor=False):
    """Get wet-bulb globe temperature (WBGT) from its three component temperatures.

    WBGT is a type of feels-like temperature that is widely used as a heat stress
    index (ISO 7243). Outdoors, it weights the wet bulb, globe and air temperature
    as 0.7, 0.2 and 0.1. Indoors, or wherever there is no solar load, the air
    temperature is dropped and the globe weight becomes 0.3.

    Args:
        tw: Wet bulb temperature [C].
        tg: Globe temperature [C].
        ta: Air temperature [C]. Not used for indoor WBGT.
        indoor: Boolean to note whether the indoor formula should be used.
            (Default: False).

    Returns:
        WBGT [C]
    """
    if indoor:
        return 0.7 * tw + 0.3 * tg
    return 0.7 * tw + 0.2 * tg + 0.1 * ta


def wet_bulb_globe_temperature(ta, rh, sw, ws, globe_par=None, indoor=False,
                               wet_bulb_method='stull'):
    """Get wet-bulb globe temperature (WBGT) from air temperature, humidity, sun and wind.

    Args:
        ta: Air temperature [C]
        rh: Relative humidity [%]
        sw: Incoming shortwave radiation [W/m2]
        ws: Wind speed [m/s]
        globe_par: Optional GlobeParameter object with the physical constants
            of the globe. (Default: None).
        indoor: Boolean to note whether the indoor formula should be used.
            (Default: False).
        wet_bulb_method: Text for the wet bulb method. Choose from "stull" and
            "psychrometric". (Default: "stull").

    Returns:
        WBGT [C]. None if the globe temperature could not be computed.
    """
    tg = globe_temperature(ta, sw, ws, globe_par)
    if tg is None:
        return None
    tw = wet_bulb_temperature(ta, rh, wet_bulb_method)
    return wbgt_from_components(tw, tg, ta, indoor)


def wbgt_warning_category(wbgt):
    """Get the warning category associated with a given WBGT.

    Categories are based on the US National Weather Service (NWS), which issues the
    following suggested actions and impact prevention:

    * 0 = No Warning.
    * 1 = Working or exercising in direct sunlight will stress your body after
        45 minutes. Take at least 15 minutes of breaks each hour if working or
        exercising in direct sunlight.
    * 2 = Working or exercising in direct sunlight will stress your body after
        30 minutes. Take at least 30 minutes of breaks each hour if working or
        exercising in direct sunlight.
    * 3 = Working or exercising in direct sunlight will stress your body after
        20 minutes. Take at least 40 minutes of breaks each hour if working or
        exercising in direct sunlight.
    * 4 = Working or exercising in direct sunlight will stress your body after
        15 minutes. Take at least 45 minutes of breaks each hour if working or
        exercising in direct sunlight.

    Args:
        wbgt: Wet Bulb Globe Temperature [C].

    Returns:
        category: An integer indicating the level of warning associated with
        the Wet Bulb Globe Temperature (WBGT).
    """
    wbgt_f = wbgt * 9. / 5. + 32.  # convert to fahrenheit

    if wbgt_f < 80:
        category = 0
    elif wbgt_f < 85:
        category = 1
    elif wbgt_f < 88:
        category = 2
    elif wbgt_f < 90:
        category = 3
    else:
        category = 4

    return category
