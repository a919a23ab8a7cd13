# coding=utf-8
"""Ladybug Wet Bulb Globe Temperature (WBGT) library.

The library solves the energy balance of a black globe for fields of
meteorological conditions and combines the globe temperature with the wet bulb
and air temperature into WBGT.
"""
