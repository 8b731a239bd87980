import pytest

from alongline.config.settings import get_settings

from samples import DC_COORDS


@pytest.fixture
def dc_line():
    return {
        "type": "Feature",
        "properties": {},
        "geometry": {"type": "LineString", "coordinates": [list(c) for c in DC_COORDS]},
    }


@pytest.fixture
def fresh_settings():
    # Settings are cached process-wide; clear around tests that change the environment.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
