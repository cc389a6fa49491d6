import pytest

from agedcache import AgedCache, ManualClock


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def cache(clock):
    return AgedCache(clock)
