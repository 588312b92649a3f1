import pytest

from chronos import reset_settings


@pytest.fixture(autouse=True)
def _clean_settings():
    # settings are process-wide, so every test starts from the defaults
    reset_settings()
    yield
    reset_settings()
