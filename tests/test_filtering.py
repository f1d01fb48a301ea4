import pytest

from bizdir.cache import BusinessCache
from bizdir.filtering import filter_businesses, haystack, matches
from bizdir.models import Business


def make(name, category="Food", location="Main St", description=None, id=None):
    return Business(id=id, name=name, category=category, location=location, description=description)


@pytest.fixture()
def businesses():
    return [
        make("Joe's Cafe", id=1, description="Best espresso in town"),
        make("Hardware Hank", category="Retail", location="5th Ave", id=2),
        make("Green Leaf", category="Florist", location="Oak Rd", id=3, description="Fresh CAFÉ flowers"),
        make("Cafe Noir", category="Food", location="Harbor", id=4),
    ]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_returns_input_unchanged(businesses, query):
    result = filter_businesses(businesses, query)
    assert result is businesses


def test_scenario_single_cafe():
    cache = [make("Joe's Cafe")]
    assert len(filter_businesses(cache, "joe")) == 1
    assert filter_businesses(cache, "zzz") == []


def test_query_is_trimmed_and_case_folded(businesses):
    names = [b.name for b in filter_businesses(businesses, "  CAFE ")]
    assert names == ["Joe's Cafe", "Cafe Noir"]


def test_matches_description_category_and_location(businesses):
    assert [b.id for b in filter_businesses(businesses, "espresso")] == [1]
    assert [b.id for b in filter_businesses(businesses, "retail")] == [2]
    assert [b.id for b in filter_businesses(businesses, "oak rd")] == [3]


def test_absent_description_contributes_nothing():
    business = make("Plain", description=None)
    assert haystack(business) == "plain food main st "
    assert not matches(business, "none")


@pytest.mark.parametrize("query", ["cafe", "st", "a", "food main", "hank", "xyz"])
def test_result_is_exactly_the_matching_subset(businesses, query):
    result = filter_businesses(businesses, query)
    needle = query.strip().casefold()
    assert all(needle in haystack(b) for b in result)
    excluded = [b for b in businesses if b not in result]
    assert all(needle not in haystack(b) for b in excluded)
    # Order preserved
    assert result == [b for b in businesses if b in result]


def test_filter_accepts_cache_items(businesses):
    cache = BusinessCache(businesses)
    assert [b.id for b in filter_businesses(cache.items, "harbor")] == [4]
