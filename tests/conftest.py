"""
Shared pytest fixtures.

Every test starts with an empty configuration store, no origin provider and
a fresh settings cache, so tests never leak global state into each other.
"""

import pytest

from pixel_puppy.config import get_settings, reset_config
from pixel_puppy.utils.url_utils import set_origin_provider


@pytest.fixture(autouse=True)
def clean_state():
    reset_config()
    set_origin_provider(None)
    get_settings.cache_clear()
    yield
    reset_config()
    set_origin_provider(None)
    get_settings.cache_clear()


@pytest.fixture
def project():
    return "test-project"


@pytest.fixture
def image_url():
    return "https://example.com/image.jpg"


# ============================================
# Helper Functions
# ============================================

def srcset_widths(src_set):
    """Return the w-descriptor widths of a srcset string, in order."""
    if not src_set:
        return []
    return [int(entry.rsplit(" ", 1)[1][:-1]) for entry in src_set.split(", ")]
