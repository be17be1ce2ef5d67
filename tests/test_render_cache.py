"""Tests for the per-session render cache."""

import pytest
from rich.segment import Segment
from textual.strip import Strip

from termpress.core.errors import RenderError
from termpress.core.render_cache import RenderCache, normalize


def _strips(*texts):
    return [Strip([Segment(t)]) for t in texts]


class TestNormalize:
    def test_strips_one_leading_and_one_trailing_blank(self):
        out = normalize(_strips("", "", "a", "", ""))
        assert [s.text for s in out] == ["", "a", ""]

    def test_leaves_content_alone(self):
        assert [s.text for s in normalize(_strips("a", "b"))] == ["a", "b"]

    def test_whitespace_only_counts_as_blank(self):
        assert [s.text for s in normalize(_strips("   ", "a", "  "))] == ["a"]

    def test_empty(self):
        assert normalize([]) == ()


class TestRenderCache:
    def test_converter_called_once_per_text_and_width(self, converter):
        cache = RenderCache(converter=converter)
        first = cache.render("hello", 40)
        second = cache.render("hello", 40)
        assert converter.calls == [("hello", 40)]
        assert second is first
        assert (cache.hits, cache.misses) == (1, 1)

    def test_width_is_part_of_the_key(self, converter):
        cache = RenderCache(converter=converter)
        cache.render("hello", 40)
        cache.render("hello", 60)
        assert converter.calls == [("hello", 40), ("hello", 60)]
        assert cache.misses == 2

    def test_equal_text_from_different_objects_hits(self, converter):
        cache = RenderCache(converter=converter)
        cache.render("".join(["ab", "c"]), 10)
        cache.render("abc", 10)
        assert len(converter.calls) == 1

    def test_result_is_normalized_tuple(self, converter):
        cache = RenderCache(converter=converter)
        block = cache.render("\nbody\n", 20)
        assert isinstance(block, tuple)
        assert [s.text for s in block] == ["body"]

    def test_contains(self, converter):
        cache = RenderCache(converter=converter)
        cache.render("x", 5)
        assert ("x", 5) in cache
        assert ("x", 6) not in cache

    def test_converter_failure_is_render_error_and_not_cached(self):
        calls = []

        def broken(text, width):
            calls.append(text)
            raise ValueError("boom")

        cache = RenderCache(converter=broken)
        with pytest.raises(RenderError):
            cache.render("x", 10)
        with pytest.raises(RenderError):
            cache.render("x", 10)
        assert len(calls) == 2
        assert len(cache) == 0

    def test_oldest_entries_evicted_past_max(self, converter):
        cache = RenderCache(converter=converter, max_entries=2)
        cache.render("a", 10)
        cache.render("b", 10)
        cache.render("c", 10)
        assert len(cache) == 2
        assert ("a", 10) not in cache
        assert ("c", 10) in cache

    def test_default_converter_renders_markdown(self):
        cache = RenderCache()
        block = cache.render("# Title\n\nSome *prose* here.", 40)
        text = "\n".join(s.text for s in block)
        assert "Title" in text
        assert "Some prose here." in text
        assert all(s.cell_length <= 40 for s in block)
