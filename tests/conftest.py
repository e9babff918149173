import pytest

from js_global import glob


@pytest.fixture(autouse=True)
def restore_glob():
    """Put the global settings back the way each test found them."""
    saved = glob.copy()
    yield glob
    glob.load(saved)
