"""Tests for roads/cache.py content fingerprints and the layout cache."""
from roads.cache import fingerprint, LayoutCache
from roads.layout import compute_layout
from roads.profile import resolve_profile


def test_fingerprint_stable():
    assert fingerprint({"a": 1, "b": [1, 2]}) == fingerprint({"b": [1, 2], "a": 1})
    assert len(fingerprint("x")) == 40


def test_fingerprint_content_sensitive(lot):
    front = resolve_profile("front")
    wider = front._replace(road_width=30.0)
    assert fingerprint(lot, front) != fingerprint(lot, wider)
    assert fingerprint(lot, front) == fingerprint(lot, resolve_profile("front"))


def test_fingerprint_tuple_equals_list():
    assert fingerprint((1.0, 2.0)) == fingerprint([1.0, 2.0])


class TestLayoutCache:
    def test_hit_and_miss(self):
        cache = LayoutCache()
        calls = []
        compute = lambda: calls.append(1) or len(calls)
        assert cache.get_or_compute("k", compute) == 1
        assert cache.get_or_compute("k", compute) == 1
        assert calls == [1]
        assert (cache.hits, cache.misses) == (1, 1)

    def test_lru_eviction(self):
        cache = LayoutCache(maxsize=2)
        cache.get_or_compute("a", lambda: "A")
        cache.get_or_compute("b", lambda: "B")
        cache.get_or_compute("a", lambda: "A2")      # refreshes a
        cache.get_or_compute("c", lambda: "C")       # evicts b
        assert len(cache) == 2
        assert cache.get_or_compute("a", lambda: "A3") == "A"
        assert cache.get_or_compute("b", lambda: "B2") == "B2"

    def test_clear(self):
        cache = LayoutCache()
        cache.get_or_compute("a", lambda: 1)
        cache.clear()
        assert len(cache) == 0

    def test_layout_memo(self, lot, street_roads):
        cache = LayoutCache()
        key = fingerprint(lot, street_roads, None, 1.0)
        first = cache.get_or_compute(key, lambda: compute_layout(lot, street_roads))
        again = cache.get_or_compute(fingerprint(lot, dict(street_roads), None, 1.0),
                                     lambda: compute_layout(lot, street_roads))
        assert again is first
