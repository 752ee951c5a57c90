"""
Test configuration and fixtures for the color family engine tests.
"""
import pytest

from colorfamily.services.colors.families import reset_hue_boundaries


@pytest.fixture(autouse=True)
def default_hue_boundaries():
    """Run every test against the default hue sectors."""
    reset_hue_boundaries()
    yield
    reset_hue_boundaries()
