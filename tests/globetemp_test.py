# coding utf-8
import pytest

from ladybug_wbgt.globetemp import GlobeEnergyBalance, globe_temperature, \
    globe_temperature_solution, MISSING, DEGENERATE, CONVERGED, BEST_EFFORT
from ladybug_wbgt.parameter.globe import GlobeParameter


def _closed_form_still_air(ta, sw, globe_par):
    """Globe temperature [C] in still air, where convection drops out of the balance."""
    sigma = globe_par.STEFAN_BOLTZMANN
    ta_k = ta + 273.15
    left = globe_par.effective_absorptivity * sw + \
        globe_par.emissivity * globe_par.atmospheric_emissivity * sigma * ta_k ** 4
    return (left / (globe_par.emissivity * sigma)) ** 0.25 - 273.15


def test_energy_balance():
    """Test the terms of the GlobeEnergyBalance object."""
    balance = GlobeEnergyBalance(308.15, 1000, 1)
    reynolds = 1 * 0.05 / 1.5e-5
    h_c = 0.0014 * reynolds ** 0.6 * (0.025 / 0.05)
    left = 0.95 * 0.25 * 1000 + 0.95 * 0.8 * 5.67e-8 * 308.15 ** 4

    assert balance.ta_k == 308.15
    assert balance.reynolds == pytest.approx(3333.333, rel=1e-6)
    assert balance.convection_coefficient == pytest.approx(h_c, rel=1e-9)
    assert balance.absorbed_radiation == pytest.approx(left, rel=1e-9)
    assert balance.residual(320) == pytest.approx(
        0.95 * 5.67e-8 * 320 ** 4 + h_c * (320 - 308.15) - left, rel=1e-9)
    assert balance.derivative(320) == pytest.approx(
        4 * 0.95 * 5.67e-8 * 320 ** 3 + h_c, rel=1e-9)


def test_energy_balance_negative_wind():
    """Test that negative wind speeds are treated as still air."""
    balance = GlobeEnergyBalance(300, 500, -5)
    assert balance.reynolds == 0
    assert balance.convection_coefficient == 0


def test_globe_temperature():
    """Test the globe_temperature function for a hot, sunny and breezy condition."""
    result = globe_temperature_solution(35, 1000, 1)
    assert result['status'] == CONVERGED
    assert result['iterations'] <= 100
    assert 35 < result['tg'] < 70
    assert globe_temperature(35, 1000, 1) == result['tg']


def test_globe_temperature_still_air():
    """Test the globe_temperature function against the closed form for still air."""
    globe_par = GlobeParameter()
    for ta, sw in ((30, 800), (0, 0), (-15, 300), (45, 1200), (20, 50)):
        tg = globe_temperature(ta, sw, 0)
        assert tg == pytest.approx(_closed_form_still_air(ta, sw, globe_par), abs=0.01)
    assert globe_temperature(30, 800, 0) > 35


def test_globe_temperature_negative_wind():
    """Test that a negative wind speed gives the same result as still air."""
    assert globe_temperature(28, 650, -5) == globe_temperature(28, 650, 0)


def test_globe_temperature_increases_with_sun():
    """Test that more shortwave radiation never lowers the globe temperature."""
    for ws in (0, 0.5, 3, 12):
        temps = [globe_temperature(25, sw, ws) for sw in range(0, 1300, 100)]
        for prev_tg, next_tg in zip(temps[:-1], temps[1:]):
            assert next_tg >= prev_tg


def test_globe_temperature_custom_parameter():
    """Test the globe_temperature function with a different globe."""
    globe_par = GlobeParameter(projected_area_fraction=1)
    default_tg = globe_temperature(30, 800, 0)
    full_tg = globe_temperature(30, 800, 0, globe_par)
    assert full_tg > default_tg
    assert full_tg == pytest.approx(_closed_form_still_air(30, 800, globe_par), abs=0.01)


def test_globe_temperature_missing():
    """Test that missing inputs give a missing result."""
    for inputs in ((None, 800, 1), (30, None, 1), (30, 800, float('nan'))):
        result = globe_temperature_solution(*inputs)
        assert result['tg'] is None
        assert result['status'] == MISSING
        assert result['iterations'] == 0


def test_globe_temperature_degenerate():
    """Test that a flat energy balance derivative gives a missing result."""
    globe_par = GlobeParameter(emissivity=0)
    result = globe_temperature_solution(30, 800, 0, globe_par)
    assert result['tg'] is None
    assert result['status'] == DEGENERATE
    assert result['iterations'] == 1
    assert globe_temperature(30, 800, 0, globe_par) is None


def test_globe_temperature_best_effort():
    """Test that the last estimate is kept when the iteration limit is reached."""
    result = globe_temperature_solution(35, 1000, 1, max_iter=1)
    assert result['status'] == BEST_EFFORT
    assert result['iterations'] == 1
    assert result['tg'] > 35

    converged = globe_temperature(35, 1000, 1)
    loose = globe_temperature_solution(35, 1000, 1, max_iter=2)
    assert abs(loose['tg'] - converged) < abs(result['tg'] - converged)

    with pytest.raises(AssertionError):
        globe_temperature_solution(35, 1000, 1, max_iter=0)


def test_globe_temperature_iterations():
    """Test that typical conditions converge within a few iterations."""
    for ta in (-20, 0, 25, 50):
        for sw in (0, 400, 1200):
            for ws in (0, 1, 20):
                result = globe_temperature_solution(ta, sw, ws)
                assert result['status'] == CONVERGED
                assert result['iterations'] <= 20


def test_globe_temperature_type_error():
    """Test that a non-numeric input raises an error."""
    with pytest.raises(TypeError):
        globe_temperature('thirty', 800, 1)
