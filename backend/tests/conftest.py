"""
Pytest configuration and shared fixtures.
"""

import pytest

from bodycomp.core.config import Settings
from bodycomp.domain.measurement import MeasurementInput


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def male_data():
    """Valid raw male measurement record."""
    return {
        "age": 30,
        "sex": "male",
        "height_cm": 180.0,
        "weight_kg": 80.0,
        "neck_cm": 40.0,
        "waist_cm": 85.0,
    }


@pytest.fixture
def female_data():
    """Valid raw female measurement record."""
    return {
        "age": 28,
        "sex": "female",
        "height_cm": 165.0,
        "weight_kg": 65.0,
        "neck_cm": 32.0,
        "waist_cm": 70.0,
        "hip_cm": 95.0,
    }


@pytest.fixture
def male_measurement(male_data):
    return MeasurementInput(**male_data)


@pytest.fixture
def female_measurement(female_data):
    return MeasurementInput(**female_data)
