# coding utf-8
import pytest

from ladybug_wbgt.parameter.globe import GlobeParameter


def test_globe_parameter_init():
    """Test the initialization of GlobeParameter and basic properties."""
    globe_par = GlobeParameter()
    str(globe_par)  # test that the string representation is ok

    assert globe_par.model == 'Globe Temperature'
    assert globe_par.diameter == 0.05
    assert globe_par.conductivity == 0.025
    assert globe_par.viscosity == 1.5e-5
    assert globe_par.solar_absorptivity == 0.95
    assert globe_par.projected_area_fraction == 0.25
    assert globe_par.emissivity == 0.95
    assert globe_par.atmospheric_emissivity == 0.8
    assert globe_par.effective_absorptivity == pytest.approx(0.2375, rel=1e-9)
    assert GlobeParameter.STEFAN_BOLTZMANN == 5.67e-8


def test_globe_parameter_custom():
    """Test GlobeParameter with custom values."""
    globe_par = GlobeParameter(diameter=0.15, emissivity=0.9,
                               atmospheric_emissivity=1)
    assert globe_par.diameter == 0.15
    assert globe_par.emissivity == 0.9
    assert globe_par.atmospheric_emissivity == 1
    assert globe_par.conductivity == 0.025


def test_globe_parameter_immutable():
    """Test that the properties of GlobeParameter cannot be set."""
    globe_par = GlobeParameter()
    with pytest.raises(AttributeError):
        globe_par.diameter = 0.1
    with pytest.raises(AttributeError):
        globe_par.new_attribute = 1


def test_globe_parameter_invalid():
    """Test that GlobeParameter rejects physically meaningless values."""
    with pytest.raises(AssertionError):
        GlobeParameter(diameter=0)
    with pytest.raises(AssertionError):
        GlobeParameter(viscosity=-1e-5)
    with pytest.raises(AssertionError):
        GlobeParameter(emissivity=1.2)
    with pytest.raises(AssertionError):
        GlobeParameter(solar_absorptivity=-0.1)


def test_globe_parameter_to_from_dict():
    """Test the to_dict and from_dict methods."""
    globe_par = GlobeParameter(diameter=0.15, solar_absorptivity=0.9)
    par_dict = globe_par.to_dict()
    assert par_dict['type'] == 'GlobeParameter'
    new_globe_par = GlobeParameter.from_dict(par_dict)
    assert new_globe_par == globe_par
    assert new_globe_par.to_dict() == par_dict

    partial_par = GlobeParameter.from_dict({'type': 'GlobeParameter', 'diameter': 0.1})
    assert partial_par.diameter == 0.1
    assert partial_par.emissivity == 0.95


def test_globe_parameter_to_from_str():
    """Test the __repr__ and from_string methods."""
    globe_par = GlobeParameter(diameter=0.15, projected_area_fraction=1,
                               atmospheric_emissivity=0.7)
    new_globe_par = GlobeParameter.from_string(str(globe_par))
    assert new_globe_par == globe_par

    short_par = GlobeParameter.from_string('--diameter 0.0635 --emissivity 0.9')
    assert short_par.diameter == 0.0635
    assert short_par.emissivity == 0.9
    assert short_par.viscosity == 1.5e-5


def test_globe_parameter_duplicate():
    """Test the duplicate method."""
    globe_par = GlobeParameter(diameter=0.15)
    new_globe_par = globe_par.duplicate()
    assert new_globe_par is not globe_par
    assert new_globe_par == globe_par
    assert new_globe_par != GlobeParameter()
