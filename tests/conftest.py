"""
Shared fixtures for tank calibration tests.
"""

import pytest

from tank_calibration.config import configure
from tank_calibration.core.models import CalibrationPoint, DeliveryReading, FieldMeasurement


@pytest.fixture(autouse=True)
def default_settings():
    """Reset global settings so environment overrides don't leak between tests."""
    settings = configure()
    yield settings
    configure()


@pytest.fixture
def linear_curve():
    """Two-point curve: 0 mm -> 0 L, 100 mm -> 1000 L."""
    return [
        CalibrationPoint(height=0.0, chart_volume=0.0),
        CalibrationPoint(height=100.0, chart_volume=1000.0),
    ]


@pytest.fixture
def tank_curve():
    """Irregularly sampled, monotonic curve of a horizontal cylinder (unsorted)."""
    heights = [0, 250, 50, 100, 500, 1000, 750, 1500, 2000, 1250, 1750]
    volumes = {
        0: 0.0,
        50: 120.0,
        100: 410.0,
        250: 1580.0,
        500: 4300.0,
        750: 7600.0,
        1000: 11200.0,
        1250: 14800.0,
        1500: 18100.0,
        1750: 20800.0,
        2000: 22300.0,
    }
    return [CalibrationPoint(height=float(h), chart_volume=volumes[h]) for h in heights]


@pytest.fixture
def delivery_readings():
    """Baseline dip followed by two deliveries."""
    return [
        DeliveryReading(height=100.0, delivery=0.0),
        DeliveryReading(height=200.0, delivery=5000.0),
        DeliveryReading(height=400.0, delivery=7300.0),
    ]


@pytest.fixture
def field_measurements():
    """Field checks in deliberately unsorted order."""
    return [
        FieldMeasurement(height=50.0, field_volume=520.0),
        FieldMeasurement(height=10.0, field_volume=95.0),
        FieldMeasurement(height=90.0, field_volume=905.0),
    ]


@pytest.fixture
def chart_csv():
    """Headered CSV chart with a field volume column."""
    return (
        "Dip(mm),Chart Volume(L),Field Volume(L)\n"
        "0,0,0\n"
        "50,500,520\n"
        "100,1000,990\n"
        "150,1500,\n"
    )


@pytest.fixture
def tagged_chart():
    """ATG tank table in the whitespace-separated tagged dialect."""
    return (
        "[FUSION_ATG_TANK_TABLE]\n"
        "Level   Volume\n"
        "0       0\n"
        "100     1000\n"
        "200     2100\n"
    )
