import pytest
from pydantic import ValidationError

from agedcache import Settings, settings


def test_default_settings_use_system_clock():
    assert Settings().time_source == "system"
    assert settings.time_source == "system"


def test_settings_accept_monotonic():
    assert Settings(time_source="monotonic").time_source == "monotonic"


def test_settings_reject_unknown_time_source():
    with pytest.raises(ValidationError):
        Settings(time_source="sundial")
