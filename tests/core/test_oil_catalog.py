"""Oil Catalog: completeness and lookup tests.

Tests cover:
    - Exactly values 1..12, each entry keyed by its own value
    - Entries are well-formed (positive drops, non-empty oils)
    - Out-of-domain lookup raises OilProfileMissingError
    - Table is read-only
"""

import pytest

from sofia_blend.core.domain_types import MAX_PARAMETER_VALUE, MIN_PARAMETER_VALUE
from sofia_blend.core.errors import ErrorCategory, OilProfileMissingError
from sofia_blend.core.oil_catalog import OIL_PROFILES, lookup_oil


def test_catalog_covers_exactly_one_to_twelve():
    assert sorted(OIL_PROFILES) == list(range(MIN_PARAMETER_VALUE, MAX_PARAMETER_VALUE + 1))


def test_entries_keyed_by_own_value():
    for value, profile in OIL_PROFILES.items():
        assert profile.value == value


def test_entries_are_well_formed():
    for profile in OIL_PROFILES.values():
        assert profile.recommended_drops >= 1
        assert profile.energy
        assert profile.main_oil
        assert profile.additional_oils
        assert profile.main_oil not in profile.additional_oils


def test_some_entries_recommend_more_than_the_blend_cap():
    assert any(p.recommended_drops > 2 for p in OIL_PROFILES.values())


def test_lookup_returns_entry():
    oil = lookup_oil(9)
    assert oil.main_oil == "Лаванда"
    assert oil.energy == "Служение"


@pytest.mark.parametrize("value", [MIN_PARAMETER_VALUE - 1, MAX_PARAMETER_VALUE + 1, -1])
def test_lookup_outside_domain_raises(value):
    with pytest.raises(OilProfileMissingError) as exc_info:
        lookup_oil(value)
    assert exc_info.value.category == ErrorCategory.INTERNAL
    assert exc_info.value.http_status == 500


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        OIL_PROFILES[13] = OIL_PROFILES[1]
