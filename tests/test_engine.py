"""Tests for the engine facade and the process-wide default engine."""

import threading

import pytest

import chromalut
from chromalut import engine as engine_module
from chromalut.constants import ALL_HARMONY_TYPES
from chromalut.engine import ColorEngine, get_default_engine, set_default_engine


@pytest.fixture(autouse=True)
def fresh_default_engine():
    set_default_engine(None)
    yield
    set_default_engine(None)


class TestColorEngine:
    def test_convert_is_cached(self):
        engine = ColorEngine(cache_size=10)
        first = engine.convert("#FF0000", ["rgb"])
        second = engine.convert("#ff0000", ["rgb"])
        assert first.rgb == second.rgb == "rgb(255,0,0)"
        stats = engine.cache_stats()
        assert (stats.hit_count, stats.miss_count, stats.size) == (1, 1, 1)

    def test_convert_batch_shares_cache(self):
        engine = ColorEngine()
        engine.convert_batch(["red", "red", "blue"], ["hex"])
        assert engine.cache_stats().hit_count == 1

    def test_clear_cache(self):
        engine = ColorEngine()
        engine.convert("red")
        engine.clear_cache()
        assert engine.cache_stats().size == 0

    def test_mix_and_harmony(self):
        engine = ColorEngine()
        assert engine.mix("#808080", "#808080", 1.0, "multiply").hex == "#404040"
        assert engine.harmony("#ff0000", "complementary").colors == ["#ff0000", "#00ffff"]
        assert set(engine.all_harmonies("red")) == set(ALL_HARMONY_TYPES)

    def test_cache_ttl(self):
        assert ColorEngine(cache_ttl=60.0).cache.ttl == 60.0

    def test_repr(self):
        assert repr(ColorEngine(5)) == "ColorEngine(cache=ConversionCache(max_size=5, size=0))"


class TestDefaultEngine:
    def test_lazy_singleton(self):
        assert engine_module._default_engine is None
        engine = get_default_engine()
        assert get_default_engine() is engine

    def test_set_and_reset(self):
        custom = ColorEngine(cache_size=3)
        set_default_engine(custom)
        assert get_default_engine() is custom
        set_default_engine(None)
        assert get_default_engine() is not custom

    def test_set_rejects_other_types(self):
        with pytest.raises(TypeError):
            set_default_engine("engine")

    def test_concurrent_first_use(self):
        """Racing first calls all see one engine."""
        seen = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            seen.append(get_default_engine())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(e) for e in seen}) == 1

    def test_module_helpers_use_default_cache(self):
        chromalut.convert("navy")
        chromalut.convert("navy")
        assert chromalut.cache_stats().hit_count == 1
        chromalut.clear_cache()
        assert chromalut.cache_stats().size == 0

    def test_module_helpers(self):
        assert chromalut.convert("navy").rgb == "rgb(0,0,128)"
        assert chromalut.mix_colors("#808080", "#808080", 1.0, "multiply").hex == "#404040"
        assert chromalut.generate_harmony("#0000ff", "triadic", "rgb").colors[0] == "rgb(0,0,255)"
        assert "triadic" in chromalut.generate_all_harmonies("#0000ff")
