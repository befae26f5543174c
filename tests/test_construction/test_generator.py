"""Tests for multi-generation tiling generation."""

import logging

import pytest

import robinson.construction.generator as generator
from robinson._constants import TAU
from robinson.construction.generator import count_types, generate, iter_generations
from robinson.construction.seeds import sun
from robinson.construction.substitution import SubstitutionError, decompose
from robinson.model.triangle_type import TriangleType


class TestGenerate:
    def test_zero_generations_returns_seeds(self, seed_triangle):
        seeds = [seed_triangle]
        result = generate(seeds, 0)
        assert result == seeds
        assert result is not seeds

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_size_doubles_each_generation(self, seed_triangle, n):
        assert len(generate([seed_triangle], n)) == 2**n

    def test_size_scales_with_seed_count(self):
        seeds = sun((0.0, 0.0), 100.0)
        assert len(generate(seeds, 3)) == len(seeds) * 2**3

    def test_one_generation_matches_decompose(self, seed_triangle):
        assert generate([seed_triangle], 1) == list(decompose(seed_triangle))

    def test_children_kept_in_parent_order(self):
        seeds = sun((0.0, 0.0), 100.0)[:3]
        result = generate(seeds, 1)
        expected = [child for t in seeds for child in decompose(t)]
        assert result == expected

    def test_deterministic(self, seed_triangle):
        assert generate([seed_triangle], 6) == generate([seed_triangle], 6)

    def test_thread_pool_matches_serial(self):
        seeds = sun((0.0, 0.0), 100.0)
        assert generate(seeds, 4, max_workers=4) == generate(seeds, 4)

    def test_area_conserved_over_generations(self):
        seeds = sun((10.0, 20.0), 100.0)
        total = sum(t.area() for t in seeds)
        tiles = generate(seeds, 6)
        assert sum(t.area() for t in tiles) == pytest.approx(total, rel=1e-9)

    def test_rotations_stay_normalised(self, seed_triangle):
        for t in generate([seed_triangle], 7):
            assert 0.0 <= t.rotation < TAU

    def test_accepts_any_iterable(self, seed_triangle):
        assert len(generate(iter([seed_triangle, seed_triangle]), 2)) == 8

    @pytest.mark.parametrize("bad", [-1, 1.5, True, "3"])
    def test_invalid_generations_raise(self, seed_triangle, bad):
        with pytest.raises(ValueError, match="generations"):
            generate([seed_triangle], bad)

    def test_failure_aborts_whole_call(self, monkeypatch, seed_triangle):
        calls = []

        def failing(triangle):
            calls.append(triangle)
            if len(calls) == 3:
                raise SubstitutionError(triangle, "boom")
            return decompose(triangle)

        monkeypatch.setattr(generator, "decompose", failing)
        with pytest.raises(SubstitutionError, match="boom"):
            generate([seed_triangle], 3)

    def test_logs_each_generation(self, seed_triangle, caplog):
        with caplog.at_level(logging.DEBUG, logger="robinson.construction.generator"):
            generate([seed_triangle], 2)
        messages = [r.getMessage() for r in caplog.records]
        assert "generation 1: 2 triangles" in messages
        assert "generation 2: 4 triangles" in messages


class TestIterGenerations:
    def test_yields_every_generation(self, seed_triangle):
        sizes = [len(ts) for ts in iter_generations([seed_triangle], 4)]
        assert sizes == [1, 2, 4, 8, 16]

    def test_last_matches_generate(self, seed_triangle):
        *_, last = iter_generations([seed_triangle], 3)
        assert last == generate([seed_triangle], 3)

    def test_invalid_generations_raise_on_iteration(self, seed_triangle):
        with pytest.raises(ValueError, match="non-negative"):
            list(iter_generations([seed_triangle], -2))


class TestCountTypes:
    def test_counts_first_generation(self, seed_triangle):
        counts = count_types(generate([seed_triangle], 1))
        assert counts == {TriangleType.THICK_RIGHT: 1, TriangleType.THIN_LEFT: 1}

    def test_counts_sum_to_total(self):
        tiles = generate(sun((0.0, 0.0), 100.0), 4)
        assert sum(count_types(tiles).values()) == len(tiles)

    def test_thin_left_lineage_keeps_one_thin_left(self, seed_triangle):
        # Every thin-left parent yields one thin-left child.
        for n in range(1, 5):
            counts = count_types(generate([seed_triangle], n))
            assert counts[TriangleType.THIN_LEFT] >= 1
