# coding=utf-8
"""Physical constants of the black globe used by the globe temperature model."""
import re

from ._base import WBGTParameter


class GlobeParameter(WBGTParameter):
    """Physical constants of the black globe and the air around it.

    Args:
        diameter: A positive number for the diameter of the globe [m].
            Default is 0.05 m.
        conductivity: A positive number for the thermal conductivity of
            air [W/m-K]. Default is 0.025.
        viscosity: A positive number for the kinematic viscosity of
            air [m2/s]. Default is 1.5e-5.
        solar_absorptivity: A number between 0 and 1 for the shortwave
            absorptivity of the globe surface. Default is 0.95 for a
            matte black paint.
        projected_area_fraction: A number between 0 and 1 for the fraction of the
            globe surface that intercepts incoming shortwave. For a direct beam on
            a sphere, this is the projected area over the surface area (0.25).
            Set to 1 to apply the absorptivity to the full shortwave flux.
            Default is 0.25.
        emissivity: A number between 0 and 1 for the longwave emissivity of
            the globe surface. Default is 0.95.
        atmospheric_emissivity: A number between 0 and 1 for the emissivity of the
            atmosphere, which sets the downwelling longwave radiation absorbed
            by the globe. Default is 0.8.

    Properties:
        * diameter
        * conductivity
        * viscosity
        * solar_absorptivity
        * projected_area_fraction
        * emissivity
        * atmospheric_emissivity
        * effective_absorptivity
    """
    _model = 'Globe Temperature'
    STEFAN_BOLTZMANN = 5.67e-8  # W/m2-K4
    __slots__ = ('_diameter', '_conductivity', '_viscosity', '_solar_absorptivity',
                 '_projected_area_fraction', '_emissivity', '_atmospheric_emissivity')

    def __init__(self, diameter=None, conductivity=None, viscosity=None,
                 solar_absorptivity=None, projected_area_fraction=None,
                 emissivity=None, atmospheric_emissivity=None):
        """Initialize Globe Parameters.
        """
        self._diameter = self._check_positive(diameter, 0.05, 'diameter')
        self._conductivity = \
            self._check_positive(conductivity, 0.025, 'conductivity')
        self._viscosity = self._check_positive(viscosity, 1.5e-5, 'viscosity')
        self._solar_absorptivity = \
            self._check_fraction(solar_absorptivity, 0.95, 'solar_absorptivity')
        self._projected_area_fraction = self._check_fraction(
            projected_area_fraction, 0.25, 'projected_area_fraction')
        self._emissivity = self._check_fraction(emissivity, 0.95, 'emissivity')
        self._atmospheric_emissivity = self._check_fraction(
            atmospheric_emissivity, 0.8, 'atmospheric_emissivity')

    @classmethod
    def from_dict(cls, data):
        """Create a GlobeParameter object from a dictionary.

        Args:
            data: A GlobeParameter dictionary in following the format below.

        .. code-block:: python

            {
            'type': 'GlobeParameter',
            'diameter': 0.05,
            'conductivity': 0.025,
            'viscosity': 1.5e-5,
            'solar_absorptivity': 0.95,
            'projected_area_fraction': 0.25,
            'emissivity': 0.95,
            'atmospheric_emissivity': 0.8
            }
        """
        assert data['type'] == 'GlobeParameter', \
            'Expected GlobeParameter dictionary. Got {}.'.format(data['type'])
        keys = ('diameter', 'conductivity', 'viscosity', 'solar_absorptivity',
                'projected_area_fraction', 'emissivity', 'atmospheric_emissivity')
        return cls(*(data[key] if key in data else None for key in keys))

    @classmethod
    def from_string(cls, globe_parameter_string):
        """Create a GlobeParameter object from a GlobeParameter string."""
        str_pattern = re.compile(r"\-\-(\S*\s\S*)")
        matches = str_pattern.findall(globe_parameter_string)
        par_dict = {item.split(' ')[0]: float(item.split(' ')[1]) for item in matches}
        diameter = par_dict['diameter'] if 'diameter' in par_dict else None
        conductivity = par_dict['conductivity'] \
            if 'conductivity' in par_dict else None
        viscosity = par_dict['viscosity'] if 'viscosity' in par_dict else None
        absorptivity = par_dict['absorptivity'] \
            if 'absorptivity' in par_dict else None
        area_fraction = par_dict['area-fraction'] \
            if 'area-fraction' in par_dict else None
        emissivity = par_dict['emissivity'] if 'emissivity' in par_dict else None
        atm_emissivity = par_dict['atm-emissivity'] \
            if 'atm-emissivity' in par_dict else None
        return cls(diameter, conductivity, viscosity, absorptivity, area_fraction,
                   emissivity, atm_emissivity)

    @property
    def diameter(self):
        """Number for the diameter of the globe in meters."""
        return self._diameter

    @property
    def conductivity(self):
        """Number for the thermal conductivity of air in W/m-K."""
        return self._conductivity

    @property
    def viscosity(self):
        """Number for the kinematic viscosity of air in m2/s."""
        return self._viscosity

    @property
    def solar_absorptivity(self):
        """Number for the shortwave absorptivity of the globe surface.

        Between 0 and 1."""
        return self._solar_absorptivity

    @property
    def projected_area_fraction(self):
        """Number for the fraction of the globe surface intercepting shortwave.

        Between 0 and 1. Typically 0.25 for a direct beam."""
        return self._projected_area_fraction

    @property
    def emissivity(self):
        """Number for the longwave emissivity of the globe surface.

        Between 0 and 1."""
        return self._emissivity

    @property
    def atmospheric_emissivity(self):
        """Number for the longwave emissivity of the atmosphere.

        Between 0 and 1."""
        return self._atmospheric_emissivity

    @property
    def effective_absorptivity(self):
        """Shortwave absorptivity per unit of globe surface area.

        This is the solar_absorptivity times the projected_area_fraction and it is
        the factor that multiplies the incoming shortwave in the energy balance."""
        return self._solar_absorptivity * self._projected_area_fraction

    def to_dict(self):
        """GlobeParameter dictionary representation."""
        return {
            'type': 'GlobeParameter',
            'diameter': self.diameter,
            'conductivity': self.conductivity,
            'viscosity': self.viscosity,
            'solar_absorptivity': self.solar_absorptivity,
            'projected_area_fraction': self.projected_area_fraction,
            'emissivity': self.emissivity,
            'atmospheric_emissivity': self.atmospheric_emissivity
        }

    @staticmethod
    def _check_positive(value, default, name):
        if value is None:
            return default
        assert value > 0, '{} must be greater than 0. Got {}'.format(name, value)
        return float(value)

    @staticmethod
    def _check_fraction(value, default, name):
        if value is None:
            return default
        assert 0 <= value <= 1, \
            '{} must be between 0 and 1. Got {}'.format(name, value)
        return float(value)

    def __copy__(self):
        return GlobeParameter(
            self.diameter, self.conductivity, self.viscosity, self.solar_absorptivity,
            self.projected_area_fraction, self.emissivity, self.atmospheric_emissivity)

    def __eq__(self, other):
        return isinstance(other, GlobeParameter) and \
            self.to_dict() == other.to_dict()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(tuple(self.to_dict().values()))

    def __repr__(self):
        """Globe parameters representation."""
        return '--diameter {} --conductivity {} --viscosity {} --absorptivity {} ' \
            '--area-fraction {} --emissivity {} --atm-emissivity {}'.format(
                self.diameter, self.conductivity, self.viscosity,
                self.solar_absorptivity, self.projected_area_fraction,
                self.emissivity, self.atmospheric_emissivity)
