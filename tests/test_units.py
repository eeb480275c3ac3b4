import math

import pytest

from weather_report.app.units import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    kelvin_to_celsius,
)


def test_known_points():
    assert kelvin_to_celsius(273.15) == 0.0
    assert celsius_to_kelvin(0.0) == 273.15
    assert celsius_to_fahrenheit(100.0) == 212.0
    assert fahrenheit_to_celsius(32.0) == 0.0
    assert celsius_to_fahrenheit(-40.0) == -40.0


@pytest.mark.parametrize("value", [-273.15, -40.0, 0.0, 0.1, 26.85, 1e6, -1e-9])
def test_round_trips(value):
    assert kelvin_to_celsius(celsius_to_kelvin(value)) == pytest.approx(value, rel=1e-9, abs=1e-9)
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(value)) == pytest.approx(value, rel=1e-9, abs=1e-9)


def test_kelvin_input():
    assert math.isclose(kelvin_to_celsius(300.0), 26.85, abs_tol=0.01)
