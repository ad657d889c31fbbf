"""Root conftest: shared test configuration and profile fixtures."""

import os

import pytest

from sofia_blend.core.birth_date import BirthDate
from sofia_blend.core.derive_profile import derive_profile

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def birth_date_1990():
    return BirthDate.create(15, 5, 1990)


@pytest.fixture
def profile_1990(birth_date_1990):
    """1990-05-15: I=6 II=5 III=1 IV=12 V=6 A=12 B=11 C=7 D=9."""
    return derive_profile(birth_date_1990)
